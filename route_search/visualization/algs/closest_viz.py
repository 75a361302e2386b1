"""Step-paced copy of the greedy nearest-neighbour search."""

from __future__ import annotations

from typing import List, Sequence, Tuple

from route_search.algs.closest import candidate_distances, pick_nearest
from route_search.algs.geometry import Point, log, route_length
from route_search.algs.state import SearchState
from route_search.scheduling.frame import Frame, TickSource
from route_search.visualization.sinks import ProgressSink

__all__ = ["animated_closest_search"]


async def _advance(
    points: Sequence[Point],
    state: SearchState,
    ticker: TickSource,
    sink: ProgressSink,
) -> None:
    while state.depth < len(points):
        candidates = candidate_distances(points, state)
        # Show each candidate as a tentative extension, one tick apiece.
        for idx, _ in candidates:
            state.visited.append(idx)
            sink.publish(state.snapshot())
            state.visited.pop()
            await Frame(ticker)
        state.visited.append(pick_nearest(candidates))
    state.best_route = list(state.visited)


async def animated_closest_search(
    points: Sequence[Point],
    *,
    ticker: TickSource,
    sink: ProgressSink,
) -> Tuple[List[int], float]:
    """Greedy search publishing one snapshot and suspending once per candidate."""
    if not points:
        return [], 0.0

    state = SearchState()
    await _advance(points, state, ticker, sink)
    state.best_length = route_length(points, state.best_route)
    route, length = state.result()
    log(f"[closest/animated] done: {len(points)} points, length {length:.6f}")
    return route, length
