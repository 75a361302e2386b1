"""Per-invocation mutable context threaded through the searches."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

from route_search.common.constants import UNBOUNDED_LENGTH


@dataclass
class SearchState:
    """Visited prefix plus the best complete route seen so far.

    One search call owns one instance for its whole duration; the searches
    build a fresh state per call, so nothing here is ever shared.
    """

    visited: List[int] = field(default_factory=lambda: [0])
    best_length: float = UNBOUNDED_LENGTH
    best_route: List[int] = field(default_factory=list)

    @property
    def depth(self) -> int:
        return len(self.visited)

    @property
    def last(self) -> int:
        return self.visited[-1]

    def snapshot(self) -> Tuple[int, ...]:
        return tuple(self.visited)

    def unvisited(self, n: int) -> List[int]:
        """Indices 1..n-1 not yet on the prefix, ascending."""
        seen = set(self.visited)
        return [idx for idx in range(1, n) if idx not in seen]

    def record(self, length: float) -> None:
        self.best_length = length
        self.best_route = list(self.visited)

    def result(self) -> Tuple[List[int], float]:
        return list(self.best_route), float(self.best_length)


__all__ = ["SearchState"]
