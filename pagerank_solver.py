import time
from typing import Dict, List, Tuple

from citation_graph import CitationGraph
from ranked_list import RankedList

MEASURE = "PageRank"

DAMPING = 0.85
MAX_ITERATIONS = 100
TOLERANCE = 1e-6


def _check_params(d: float, tol: float, max_iter: int) -> None:
    if not 0.0 <= d <= 1.0:
        raise ValueError(f"damping must be in [0, 1], got {d}")
    if tol < 0:
        raise ValueError(f"tolerance must be >= 0, got {tol}")
    if max_iter < 1:
        raise ValueError(f"max_iterations must be >= 1, got {max_iter}")


def pagerank_iterative(
    graph: CitationGraph,
    d: float = DAMPING,
    tol: float = TOLERANCE,
    max_iter: int = MAX_ITERATIONS,
) -> Tuple[Dict[int, float], int, bool, float]:
    """
    Power-method PageRank with dangling mass spread evenly over all vertices.

    Returns:
      scores: vertex -> PageRank,
      iterations run (the one that met tol, or max_iter),
      whether the L1 change fell below tol,
      seconds spent iterating
    """
    _check_params(d, tol, max_iter)

    order = sorted(graph.vertices())
    n = len(order)
    if n == 0:
        return {}, 0, True, 0.0

    index = {v: i for i, v in enumerate(order)}
    incoming: List[List[int]] = [[index[u] for u in graph.in_neighbors(v)] for v in order]
    outdeg = [graph.out_degree(v) for v in order]
    dangling = [i for i in range(n) if outdeg[i] == 0]

    pr = [1.0 / n] * n
    base = (1.0 - d) / n

    start = time.time()
    for it in range(1, max_iter + 1):
        dangling_share = sum(pr[i] for i in dangling) / n
        new_pr = [0.0] * n

        # each slot reads only the previous vector
        for a in range(n):
            s = dangling_share
            for t in incoming[a]:
                s += pr[t] / outdeg[t]
            new_pr[a] = base + d * s

        delta = sum(abs(new_pr[i] - pr[i]) for i in range(n))
        pr = new_pr
        if delta < tol:
            return dict(zip(order, pr)), it, True, time.time() - start

    return dict(zip(order, pr)), max_iter, False, time.time() - start


def compute(
    graph: CitationGraph,
    damping: float = DAMPING,
    max_iterations: int = MAX_ITERATIONS,
    tolerance: float = TOLERANCE,
) -> RankedList:
    scores, _, _, _ = pagerank_iterative(graph, d=damping, tol=tolerance, max_iter=max_iterations)
    return RankedList(scores, measure=MEASURE)
