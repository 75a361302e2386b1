"""Animated (step-paced) search variants."""

from __future__ import annotations

from typing import Awaitable, Callable, Dict, List, Tuple

from .closest_viz import animated_closest_search
from .naive_viz import animated_naive_search

AnimatedSolver = Callable[..., Awaitable[Tuple[List[int], float]]]

ANIMATED_ALGORITHMS: Dict[str, AnimatedSolver] = {
    "naive": animated_naive_search,
    "closest": animated_closest_search,
}

__all__ = [
    "ANIMATED_ALGORITHMS",
    "AnimatedSolver",
    "animated_naive_search",
    "animated_closest_search",
]
