import re
from pathlib import Path
from typing import Dict, FrozenSet, Iterable, List, Tuple, Union

VERTEX_RE = re.compile(r"[0-9]+")


class ParseError(ValueError):
    def __init__(self, line_number: int, line: str, reason: str):
        self.line_number = line_number
        self.line = line
        self.reason = reason
        super().__init__(f"line {line_number}: {reason}: {line!r}")


class CitationGraph:
    """
    Directed citation graph: an edge u -> v means paper u cites paper v.

    Out- and in-adjacency are kept as two lists per vertex and updated
    together on every insertion. Repeated edges and self-loops are stored
    once per insertion.
    """

    def __init__(self) -> None:
        self._out: Dict[int, List[int]] = {}
        self._in: Dict[int, List[int]] = {}
        self._num_edges = 0

    def add_vertex(self, v: int) -> None:
        self._out.setdefault(v, [])
        self._in.setdefault(v, [])

    def add_edge(self, u: int, v: int) -> None:
        self.add_vertex(u)
        self.add_vertex(v)
        self._out[u].append(v)
        self._in[v].append(u)
        self._num_edges += 1

    def out_neighbors(self, u: int) -> Tuple[int, ...]:
        return tuple(self._out.get(u, ()))

    def in_neighbors(self, v: int) -> Tuple[int, ...]:
        return tuple(self._in.get(v, ()))

    def out_degree(self, u: int) -> int:
        return len(self._out.get(u, ()))

    def in_degree(self, v: int) -> int:
        return len(self._in.get(v, ()))

    def vertices(self) -> FrozenSet[int]:
        return frozenset(self._out)

    def num_vertices(self) -> int:
        return len(self._out)

    def num_edges(self) -> int:
        return self._num_edges

    def __len__(self) -> int:
        return len(self._out)

    def __contains__(self, v: object) -> bool:
        return v in self._out

    def __repr__(self) -> str:
        return f"CitationGraph(nodes={self.num_vertices()}, edges={self.num_edges()})"


def parse_edge(line_number: int, line: str) -> Tuple[int, int]:
    parts = line.split()
    if len(parts) != 2:
        raise ParseError(line_number, line.rstrip("\r\n"), f"expected 2 fields, got {len(parts)}")
    for tok in parts:
        if not VERTEX_RE.fullmatch(tok):
            raise ParseError(line_number, line.rstrip("\r\n"), f"not a vertex id: {tok!r}")
    return int(parts[0]), int(parts[1])


def load_from_source(stream: Iterable[str]) -> CitationGraph:
    """
    Build a graph from an edge list, one "<src> <dst>" pair per line.

    Blank lines and lines starting with '#' are skipped. The graph is
    only returned once every line has parsed; a ParseError leaves nothing
    behind. Undecodable input is an OSError, like any other unreadable
    stream.
    """
    graph = CitationGraph()
    line_number = 0
    try:
        for line_number, line in enumerate(stream, start=1):
            stripped = line.strip()
            if not stripped or stripped.startswith("#"):
                continue
            u, v = parse_edge(line_number, line)
            graph.add_edge(u, v)
    except UnicodeDecodeError as e:
        raise OSError(f"unreadable input after line {line_number}: {e}") from e
    return graph


def load_from_path(path: Union[str, Path]) -> CitationGraph:
    with Path(path).open(mode="r", encoding="utf-8") as f:
        return load_from_source(f)
