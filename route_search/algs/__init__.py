"""Synchronous route searches and the name -> solver registry."""

from __future__ import annotations

from typing import Callable, Dict, List, Sequence, Tuple

from route_search.algs.closest import closest_search
from route_search.algs.geometry import Point, distance, route_length
from route_search.algs.naive import naive_search, naive_search_iterative
from route_search.algs.state import SearchState

Solver = Callable[[Sequence[Point]], Tuple[List[int], float]]

ALGORITHMS: Dict[str, Solver] = {
    "naive": naive_search,
    "closest": closest_search,
}

__all__ = [
    "ALGORITHMS",
    "Solver",
    "Point",
    "SearchState",
    "distance",
    "route_length",
    "naive_search",
    "naive_search_iterative",
    "closest_search",
]
