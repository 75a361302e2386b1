"""Seeded random point-set generation for tests, demos and benchmarks.

``InstanceConfig`` declares the sampling ranges; ``draw_instance`` samples one
point set from a ``numpy.random.Generator`` so that a given seed always yields
the same instance.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from route_search.algs.geometry import Point
from route_search.common.constants import COORD_MAX, COORD_MIN, RNG_SEEDS

IntRange = Tuple[int, int]


@dataclass(frozen=True)
class InstanceConfig:
    """Configuration bundle for random instances."""

    count: int = 6
    x_range: IntRange = (0, 100)
    y_range: IntRange = (0, 100)
    distinct: bool = True

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValueError("count must be non-negative")
        for name, (lo, hi) in (("x_range", self.x_range), ("y_range", self.y_range)):
            if lo > hi:
                raise ValueError(f"{name} must be ascending")
            if lo < COORD_MIN or hi > COORD_MAX:
                raise ValueError(f"{name} must fit in 32-bit coordinates")
        if self.distinct and self.count > self.capacity:
            raise ValueError("count exceeds the number of distinct grid points")

    @property
    def capacity(self) -> int:
        return (self.x_range[1] - self.x_range[0] + 1) * (self.y_range[1] - self.y_range[0] + 1)


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    return np.random.default_rng(RNG_SEEDS["data"] if seed is None else seed)


def draw_instance(config: InstanceConfig, rng: np.random.Generator) -> List[Point]:
    """Sample ``config.count`` points; index 0 is the origin of the route."""
    points: List[Point] = []
    seen = set()
    while len(points) < config.count:
        x = int(rng.integers(config.x_range[0], config.x_range[1], endpoint=True))
        y = int(rng.integers(config.y_range[0], config.y_range[1], endpoint=True))
        if config.distinct:
            if (x, y) in seen:
                continue
            seen.add((x, y))
        points.append(Point(x, y))
    return points


def draw_instances(config: InstanceConfig, total: int, seed: Optional[int] = None) -> List[List[Point]]:
    rng = make_rng(seed)
    return [draw_instance(config, rng) for _ in range(total)]


__all__ = ["InstanceConfig", "make_rng", "draw_instance", "draw_instances"]
