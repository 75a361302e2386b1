"""Exhaustive ("naive") route search.

Enumerates every ordering of the non-origin points depth-first and keeps the
shortest complete route. Leaf evaluation re-sums the route and stops summing
as soon as the partial length already exceeds the best known total; the
recursion itself is never cut short, every permutation is entered.
"""

from __future__ import annotations

from typing import Iterator, List, Sequence, Tuple

from route_search.algs.geometry import Point, distance, log
from route_search.algs.state import SearchState

__all__ = ["naive_search", "naive_search_iterative", "settle_leaf"]


def settle_leaf(points: Sequence[Point], state: SearchState) -> bool:
    """Evaluate the complete prefix in *state*; adopt it if not longer.

    Returns ``True`` when the prefix became the new best route. Ties replace
    the incumbent, so the most recently enumerated optimum wins.
    """
    length = 0.0
    last = points[state.visited[0]]
    for idx in state.visited[1:]:
        here = points[idx]
        length += distance(last, here)
        if length > state.best_length:
            return False
        last = here

    state.record(length)
    log(f"[naive] best {length:.6f} via {state.best_route}")
    return True


def _descend(
    points: Sequence[Point],
    state: SearchState,
    trace: List[Tuple[int, ...]] | None,
) -> None:
    if trace is not None:
        trace.append(state.snapshot())
    if state.depth >= len(points):
        settle_leaf(points, state)
        return
    for idx in state.unvisited(len(points)):
        state.visited.append(idx)
        _descend(points, state, trace)
        state.visited.pop()


def naive_search(
    points: Sequence[Point],
    *,
    trace: bool = False,
) -> Tuple[List[int], float] | Tuple[List[int], float, List[Tuple[int, ...]]]:
    """Optimal route from index 0 over all *points*.

    Returns ``(route, length)``; with ``trace=True`` also the visited prefix of
    every recursion node in the order it was entered.
    """
    trace_steps: List[Tuple[int, ...]] | None = [] if trace else None
    if not points:
        if trace:
            return [], 0.0, []
        return [], 0.0

    state = SearchState()
    _descend(points, state, trace_steps)
    route, length = state.result()
    log(f"[naive] done: {len(points)} points, length {length:.6f}")
    if trace:
        return route, length, trace_steps or []
    return route, length


def naive_search_iterative(points: Sequence[Point]) -> Tuple[List[int], float]:
    """Same enumeration as :func:`naive_search` without growing the call stack.

    Each stack entry is the iterator over the candidates of one recursion
    node; the visited prefix is one longer than the stack depth below it.
    """
    if not points:
        return [], 0.0

    n = len(points)
    state = SearchState()
    if state.depth >= n:
        settle_leaf(points, state)
        return state.result()

    frames: List[Iterator[int]] = [iter(state.unvisited(n))]
    while frames:
        idx = next(frames[-1], None)
        if idx is None:
            frames.pop()
            if frames:
                state.visited.pop()
            continue
        state.visited.append(idx)
        if state.depth >= n:
            settle_leaf(points, state)
            state.visited.pop()
        else:
            frames.append(iter(state.unvisited(n)))

    return state.result()
