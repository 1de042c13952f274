from citation_graph import CitationGraph
from ranked_list import RankedList

MEASURE = "in-degree"


def compute(graph: CitationGraph) -> RankedList:
    """Rank every vertex by its number of incoming citations, repeats included."""
    return RankedList(((v, graph.in_degree(v)) for v in graph.vertices()), measure=MEASURE)
