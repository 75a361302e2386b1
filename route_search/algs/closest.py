"""Greedy nearest-neighbour route search ("closest")."""

from __future__ import annotations

from typing import List, Sequence, Tuple

from route_search.algs.geometry import Point, distance, log, route_length
from route_search.algs.state import SearchState

__all__ = ["closest_search", "candidate_distances", "pick_nearest"]

Candidate = Tuple[int, float]


def candidate_distances(points: Sequence[Point], state: SearchState) -> List[Candidate]:
    """``(index, distance from last visited)`` for every unvisited index, ascending index."""
    here = points[state.last]
    return [(idx, distance(here, points[idx])) for idx in state.unvisited(len(points))]


def pick_nearest(candidates: Sequence[Candidate]) -> int:
    """Index of the nearest candidate.

    Same pick as a stable sort on distance: among equal distances the
    candidate listed first (the lowest index) wins.
    """
    if not candidates:
        raise ValueError("no candidates to choose from")
    return min(candidates, key=lambda item: item[1])[0]


def _advance(
    points: Sequence[Point],
    state: SearchState,
    trace: List[Tuple[int, ...]] | None,
) -> None:
    # Greedy never backtracks, so a flat loop over the depths suffices.
    while state.depth < len(points):
        candidates = candidate_distances(points, state)
        if trace is not None:
            for idx, _ in candidates:
                trace.append(state.snapshot() + (idx,))
        state.visited.append(pick_nearest(candidates))
    state.best_route = list(state.visited)


def closest_search(
    points: Sequence[Point],
    *,
    trace: bool = False,
) -> Tuple[List[int], float] | Tuple[List[int], float, List[Tuple[int, ...]]]:
    """Route built by always hopping to the nearest unvisited point.

    No backtracking, Θ(n²). With ``trace=True`` the third element lists every
    tentative extension (prefix + candidate) in the order it was considered.
    """
    trace_steps: List[Tuple[int, ...]] | None = [] if trace else None
    if not points:
        if trace:
            return [], 0.0, []
        return [], 0.0

    state = SearchState()
    _advance(points, state, trace_steps)
    state.best_length = route_length(points, state.best_route)
    route, length = state.result()
    log(f"[closest] done: {len(points)} points, length {length:.6f}")
    if trace:
        return route, length, trace_steps or []
    return route, length
