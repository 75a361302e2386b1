"""Step-paced copy of the exhaustive search.

Every recursion node publishes its visited prefix and waits for one tick
before doing anything else, so an observer sees the tree walked node by node.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

from route_search.algs.geometry import Point, log
from route_search.algs.naive import settle_leaf
from route_search.algs.state import SearchState
from route_search.scheduling.frame import Frame, TickSource
from route_search.visualization.sinks import ProgressSink

__all__ = ["animated_naive_search"]


async def _descend(
    points: Sequence[Point],
    state: SearchState,
    ticker: TickSource,
    sink: ProgressSink,
) -> None:
    sink.publish(state.snapshot())
    await Frame(ticker)
    if state.depth >= len(points):
        settle_leaf(points, state)
        return
    for idx in state.unvisited(len(points)):
        state.visited.append(idx)
        await _descend(points, state, ticker, sink)
        state.visited.pop()


async def animated_naive_search(
    points: Sequence[Point],
    *,
    ticker: TickSource,
    sink: ProgressSink,
) -> Tuple[List[int], float]:
    """Exhaustive search with one snapshot and one suspension per node."""
    if not points:
        return [], 0.0

    state = SearchState()
    await _descend(points, state, ticker, sink)
    route, length = state.result()
    log(f"[naive/animated] done: {len(points)} points, length {length:.6f}")
    return route, length
