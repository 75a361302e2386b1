from __future__ import annotations

import itertools
import math
import random
from typing import Iterable, List, Sequence, Tuple

from hypothesis import strategies as st

from route_search.algs.geometry import Point, route_length
from route_search.data.schemas import is_valid_route


__all__ = [
    "rng",
    "points_from",
    "gen_points",
    "point_sets",
    "oracle_shortest",
    "check_route",
    "naive_node_count",
]


# ---------------------------------------------------------------------------
#  Random generators
# ---------------------------------------------------------------------------
def rng(seed: int) -> random.Random:
    return random.Random(seed)


def points_from(coords: Iterable[Tuple[int, int]]) -> List[Point]:
    return [Point(x, y) for x, y in coords]


def gen_points(rnd: random.Random, n: int, lo: int = -50, hi: int = 50) -> List[Point]:
    if n < 0:
        raise ValueError("n must be non-negative")
    return [Point(rnd.randint(lo, hi), rnd.randint(lo, hi)) for _ in range(n)]


def point_sets(min_size: int = 1, max_size: int = 6, bound: int = 60):
    coord = st.integers(min_value=-bound, max_value=bound)
    return st.lists(st.builds(Point, coord, coord), min_size=min_size, max_size=max_size)


# ---------------------------------------------------------------------------
#  Oracles & checks
# ---------------------------------------------------------------------------
def oracle_shortest(points: Sequence[Point]) -> float:
    """Minimum route length over every ordering of 1..n-1 (brute force)."""
    n = len(points)
    if n <= 1:
        return 0.0
    return min(
        route_length(points, (0,) + perm)
        for perm in itertools.permutations(range(1, n))
    )


def check_route(route: Sequence[int], n: int) -> None:
    if not is_valid_route(route, n):
        raise AssertionError(f"route {list(route)} is not a permutation of 0..{n - 1} starting at 0")


def naive_node_count(n: int) -> int:
    """Nodes in the exhaustive recursion tree over n points (root included)."""
    if n <= 0:
        return 0
    m = n - 1
    return sum(math.perm(m, k) for k in range(m + 1))
