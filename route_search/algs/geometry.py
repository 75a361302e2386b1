# route_search/algs/geometry.py
"""
Planar geometry shared by every search strategy.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

# Global debug switch
VERBOSE: bool = False


def log(*args, **kwargs) -> None:            # pragma: no cover
    if VERBOSE:
        print(*args, **kwargs)


@dataclass(frozen=True, slots=True)
class Point:
    """Integer point in the plane; index 0 of a point set is the origin."""

    x: int
    y: int

    def distance(self, other: "Point") -> float:
        return distance(self, other)


# --------------------------------------------------------------------------- #
#  Distances                                                                  #
# --------------------------------------------------------------------------- #
def distance(a: Point, b: Point) -> float:
    """Euclidean distance, squared terms summed exactly before the sqrt."""
    dx = b.x - a.x
    dy = b.y - a.y
    return math.sqrt(float(dx * dx + dy * dy))


def route_length(points: Sequence[Point], route: Sequence[int]) -> float:
    """Return the summed leg length of *route* (indices into *points*)."""
    total = 0.0
    for prev, nxt in zip(route, route[1:]):
        total += distance(points[prev], points[nxt])
    return total


__all__ = ["Point", "distance", "route_length", "VERBOSE", "log"]
