from typing import Dict, Iterable, Iterator, List, Mapping, NamedTuple, Tuple, Union

import numpy as np

Score = Union[int, float]


class Centrality(NamedTuple):
    vertex: int
    score: Score


def format_score(score: Score) -> str:
    # shortest round-trip digits, never exponent notation
    if isinstance(score, (int, np.integer)):
        return str(int(score))
    return np.format_float_positional(float(score), unique=True, trim="-")


def _rank_key(entry: Centrality) -> Tuple[Score, int]:
    return (-entry.score, entry.vertex)


class RankedList:
    """
    Centrality scores sorted by score descending, vertex id ascending on ties.

    Immutable once built; top(n) returns a new RankedList over a prefix.
    """

    def __init__(
        self,
        scores: Union[Mapping[int, Score], Iterable[Tuple[int, Score]]] = (),
        measure: str = "score",
    ) -> None:
        items = scores.items() if isinstance(scores, Mapping) else scores
        entries = [Centrality(int(v), s) for v, s in items]
        entries.sort(key=_rank_key)
        self._entries: Tuple[Centrality, ...] = tuple(entries)
        self.measure = measure

    @classmethod
    def _presorted(cls, entries: Tuple[Centrality, ...], measure: str) -> "RankedList":
        ranked = cls.__new__(cls)
        ranked._entries = entries
        ranked.measure = measure
        return ranked

    def top(self, n: int) -> "RankedList":
        if n < 0:
            raise ValueError(f"top(n) needs n >= 0, got {n}")
        return RankedList._presorted(self._entries[:n], self.measure)

    def as_dict(self) -> Dict[int, Score]:
        return {e.vertex: e.score for e in self._entries}

    def vertices(self) -> Tuple[int, ...]:
        return tuple(e.vertex for e in self._entries)

    def render(self) -> List[str]:
        return [f"vertex {e.vertex}: {self.measure} {format_score(e.score)}" for e in self._entries]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Centrality]:
        return iter(self._entries)

    def __getitem__(self, index: int) -> Centrality:
        if not isinstance(index, int):
            raise TypeError("RankedList indices must be integers; use top(n) for a prefix")
        return self._entries[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RankedList):
            return NotImplemented
        return self.measure == other.measure and self._entries == other._entries

    def __hash__(self) -> int:
        return hash((self.measure, self._entries))

    def __str__(self) -> str:
        return "".join(line + "\n" for line in self.render())

    def __repr__(self) -> str:
        return f"RankedList(measure={self.measure!r}, size={len(self._entries)})"
