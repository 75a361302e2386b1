"""Shared event schema for route-search visualizations."""

from __future__ import annotations

from typing import Dict, Iterable, List, Literal, Optional, Tuple, TypedDict

from route_search.algs.geometry import Point


class SetSceneEvent(TypedDict):
    type: Literal["set_scene"]
    x_min: float
    x_max: float
    y_min: float
    y_max: float


class AddPointEvent(TypedDict):
    type: Literal["add_point"]
    idx: int
    x: int
    y: int
    origin: bool


class AlgoInfoEvent(TypedDict):
    type: Literal["algo_info"]
    name: str
    mode: Literal["sync", "animated"]


class AnimationFrameEvent(TypedDict):
    type: Literal["animation_frame"]
    route: List[int]


class ResultEvent(TypedDict):
    type: Literal["result"]
    route: List[int]
    length: float


class ErrorEvent(TypedDict):
    type: Literal["error"]
    text: str


class DoneEvent(TypedDict):
    type: Literal["done"]


EventDict = Dict[str, object]


def compute_scene_bounds(
    points: Iterable[Point],
    margin: float = 0.1,
) -> Tuple[float, float, float, float]:
    """Return ``(x_min, x_max, y_min, y_max)`` with a fractional margin."""
    pts = list(points)
    if not pts:
        return -1.0, 1.0, -1.0, 1.0

    xs = [p.x for p in pts]
    ys = [p.y for p in pts]
    span = max(max(xs) - min(xs), max(ys) - min(ys), 1)
    pad = max(span * margin, 1.0)
    return min(xs) - pad, max(xs) + pad, min(ys) - pad, max(ys) + pad


def frame_event(route: Iterable[int]) -> AnimationFrameEvent:
    return AnimationFrameEvent(type="animation_frame", route=[int(i) for i in route])


def result_event(route: Iterable[int], length: Optional[float]) -> ResultEvent:
    return ResultEvent(type="result", route=[int(i) for i in route], length=float(length or 0.0))


__all__ = [
    "EventDict",
    "SetSceneEvent",
    "AddPointEvent",
    "AlgoInfoEvent",
    "AnimationFrameEvent",
    "ResultEvent",
    "ErrorEvent",
    "DoneEvent",
    "compute_scene_bounds",
    "frame_event",
    "result_event",
]
