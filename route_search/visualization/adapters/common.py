from __future__ import annotations

import asyncio
from typing import Iterable, List, Sequence

from route_search.algs.geometry import Point
from route_search.scheduling.frame import ManualTicker, pump
from route_search.visualization.algs import ANIMATED_ALGORITHMS
from route_search.visualization.events import (
    AddPointEvent,
    AlgoInfoEvent,
    DoneEvent,
    SetSceneEvent,
    compute_scene_bounds,
    result_event,
)
from route_search.visualization.sinks import EventSink

SCENE_MARGIN = 0.1


def build_scene_events(
    points: Iterable[Point],
    *,
    margin: float = SCENE_MARGIN,
) -> List[dict]:
    pts = list(points)
    x_min, x_max, y_min, y_max = compute_scene_bounds(pts, margin=margin)
    events: List[dict] = [
        SetSceneEvent(
            type="set_scene",
            x_min=float(x_min),
            x_max=float(x_max),
            y_min=float(y_min),
            y_max=float(y_max),
        )
    ]
    for idx, p in enumerate(pts):
        events.append(AddPointEvent(type="add_point", idx=idx, x=int(p.x), y=int(p.y), origin=idx == 0))
    return events


def build_animated_events(name: str, points: Sequence[Point]) -> List[dict]:
    """Run the animated variant of *name* to completion and collect its events.

    A :class:`ManualTicker` stands in for the display, so every suspension
    becomes exactly one ``animation_frame`` event in the returned list.
    """
    solver = ANIMATED_ALGORITHMS[name]
    pts = list(points)
    events: List[dict] = build_scene_events(pts)
    events.append(AlgoInfoEvent(type="algo_info", name=name, mode="animated"))

    sink = EventSink(events)
    ticker = ManualTicker()
    (route, length), _ = asyncio.run(pump(solver(pts, ticker=ticker, sink=sink), ticker))

    events.append(result_event(route, length))
    events.append(DoneEvent(type="done"))
    return events


__all__ = ["build_scene_events", "build_animated_events", "SCENE_MARGIN"]
