from typing import Dict, Iterable

import numpy as np

from citation_graph import CitationGraph

QUINTILES = (0, 20, 40, 60, 80, 100)


def summarize(values: Iterable[int]) -> Dict:
    """count/min/max/avg/median and 20%-step percentiles of a degree list."""
    arr = np.fromiter(values, dtype=float)
    if arr.size == 0:
        return {"count": 0, "min": 0, "max": 0, "avg": 0.0, "median": 0.0, "quintiles": [0.0] * len(QUINTILES)}
    return {
        "count": int(arr.size),
        "min": int(arr.min()),
        "max": int(arr.max()),
        "avg": float(arr.mean()),
        "median": float(np.median(arr)),
        "quintiles": np.percentile(arr, QUINTILES).tolist(),
    }


def degree_summary(graph: CitationGraph) -> Dict:
    order = sorted(graph.vertices())
    return {
        "vertices": graph.num_vertices(),
        "edges": graph.num_edges(),
        "in_degree": summarize(graph.in_degree(v) for v in order),
        "out_degree": summarize(graph.out_degree(v) for v in order),
    }
