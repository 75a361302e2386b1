from __future__ import annotations

from typing import Iterable, List

from route_search.algs.geometry import Point

from .common import build_animated_events


def build_closest_events(points: Iterable[Point]) -> List[dict]:
    return build_animated_events("closest", list(points))


__all__ = ["build_closest_events"]
