from __future__ import annotations

import math

import pytest
from hypothesis import given

from route_search.algs import closest_search
from route_search.algs.closest import candidate_distances, pick_nearest
from route_search.algs.geometry import Point, route_length
from route_search.algs.state import SearchState
from tests.test_utils import check_route, gen_points, point_sets, points_from, rng


def test_closest_two_points() -> None:
    route, length = closest_search(points_from([(0, 0), (3, 4)]))
    assert route == [0, 1]
    assert length == 5.0


def test_closest_collinear() -> None:
    route, length = closest_search(points_from([(0, 0), (1, 0), (2, 0)]))
    assert route == [0, 1, 2]
    assert length == 2.0


def test_closest_degenerate_inputs() -> None:
    assert closest_search([]) == ([], 0.0)
    assert closest_search([Point(4, 4)]) == ([0], 0.0)


def test_closest_tie_prefers_lowest_index() -> None:
    pts = points_from([(0, 0), (-1, 0), (1, 0), (0, 1)])
    route, _ = closest_search(pts)
    assert route[1] == 1


def test_closest_follows_nearest_neighbour_chain() -> None:
    pts = points_from([(0, 0), (10, 0), (1, 0), (2, 0), (9, 0)])
    route, length = closest_search(pts)
    assert route == [0, 2, 3, 4, 1]
    assert length == 10.0


def test_candidate_distances_ascending_index() -> None:
    pts = points_from([(0, 0), (5, 0), (1, 0), (3, 4)])
    state = SearchState(visited=[0, 2])
    assert candidate_distances(pts, state) == [(1, 4.0), (3, math.hypot(2, 4))]


def test_pick_nearest_stable_on_ties() -> None:
    assert pick_nearest([(4, 2.0), (2, 1.0), (3, 1.0)]) == 2
    with pytest.raises(ValueError):
        pick_nearest([])


def test_closest_trace_lists_every_candidate() -> None:
    pts = points_from([(0, 0), (1, 0), (2, 0)])
    route, _, trace = closest_search(pts, trace=True)
    assert route == [0, 1, 2]
    assert trace == [(0, 1), (0, 2), (0, 1, 2)]


@pytest.mark.parametrize("seed", range(4))
def test_closest_trace_size(seed: int) -> None:
    n = 8
    pts = gen_points(rng(seed), n)
    _, _, trace = closest_search(pts, trace=True)
    assert len(trace) == n * (n - 1) // 2


@given(point_sets(max_size=9))
def test_closest_route_is_valid(points) -> None:
    route, length = closest_search(points)
    check_route(route, len(points))
    assert math.isclose(length, route_length(points, route), abs_tol=1e-9)


@given(point_sets(max_size=9))
def test_closest_is_deterministic(points) -> None:
    assert closest_search(points) == closest_search(list(points))


@pytest.mark.slow
def test_closest_handles_long_inputs(tol: float) -> None:
    n = 1500
    pts = points_from([(i, 0) for i in range(n)])
    route, length = closest_search(pts)
    check_route(route, n)
    assert route == list(range(n))
    assert math.isclose(length, float(n - 1), abs_tol=tol)
