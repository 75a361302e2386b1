from __future__ import annotations

from typing import Iterable, List

from route_search.algs.geometry import Point

from .common import build_animated_events


def build_naive_events(points: Iterable[Point]) -> List[dict]:
    return build_animated_events("naive", list(points))


__all__ = ["build_naive_events"]
