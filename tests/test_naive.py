from __future__ import annotations

import math

import pytest
from hypothesis import given, settings

from route_search.algs import closest_search, naive_search, naive_search_iterative
from route_search.algs.geometry import Point, route_length
from route_search.algs.naive import settle_leaf
from route_search.algs.state import SearchState
from tests.test_utils import (
    check_route,
    gen_points,
    naive_node_count,
    oracle_shortest,
    point_sets,
    points_from,
    rng,
)


# ---------------------------------------------------------------------------
#  Unit tests
# ---------------------------------------------------------------------------
def test_naive_two_points() -> None:
    route, length = naive_search(points_from([(0, 0), (3, 4)]))
    assert route == [0, 1]
    assert length == 5.0


def test_naive_collinear() -> None:
    route, length = naive_search(points_from([(0, 0), (1, 0), (2, 0)]))
    assert route == [0, 1, 2]
    assert length == 2.0


def test_naive_degenerate_inputs() -> None:
    assert naive_search([]) == ([], 0.0)
    assert naive_search([Point(7, -3)]) == ([0], 0.0)
    assert naive_search_iterative([]) == ([], 0.0)
    assert naive_search_iterative([Point(7, -3)]) == ([0], 0.0)


def test_naive_tie_keeps_most_recent_route() -> None:
    # [0, 1, 2] and [0, 2, 1] both measure 1 + sqrt(2) exactly.
    pts = points_from([(0, 0), (1, 0), (0, 1)])
    route, length = naive_search(pts)
    assert route == [0, 2, 1]
    assert math.isclose(length, 1.0 + math.sqrt(2.0))


def test_naive_beats_greedy_trap() -> None:
    pts = points_from([(0, 0), (1, 0), (-2, 0), (4, 0)])
    route, length = naive_search(pts)
    assert route == [0, 2, 1, 3]
    assert length == 8.0
    _, greedy_length = closest_search(pts)
    assert greedy_length == 10.0


def test_naive_trace_visits_every_node_depth_first() -> None:
    pts = points_from([(0, 0), (5, 0), (0, 5), (5, 5)])
    _, _, trace = naive_search(pts, trace=True)
    assert len(trace) == naive_node_count(4) == 16
    assert trace[:5] == [(0,), (0, 1), (0, 1, 2), (0, 1, 2, 3), (0, 1, 3)]
    leaves = [t for t in trace if len(t) == 4]
    assert len(leaves) == 6
    assert len(set(leaves)) == 6


def test_settle_leaf_stops_once_partial_exceeds_best() -> None:
    pts = points_from([(0, 0), (10, 0), (0, 1)])
    state = SearchState(visited=[0, 1, 2], best_length=5.0, best_route=[0, 2, 1])
    assert settle_leaf(pts, state) is False
    assert state.best_route == [0, 2, 1]
    assert state.best_length == 5.0


def test_settle_leaf_accepts_equal_length() -> None:
    pts = points_from([(0, 0), (3, 4)])
    state = SearchState(visited=[0, 1], best_length=5.0, best_route=[9])
    assert settle_leaf(pts, state) is True
    assert state.best_route == [0, 1]


@pytest.mark.parametrize("seed", range(5))
def test_naive_random_small(seed: int, tol: float) -> None:
    rnd = rng(seed)
    pts = gen_points(rnd, 6)
    route, length = naive_search(pts)
    check_route(route, len(pts))
    assert math.isclose(length, route_length(pts, route), abs_tol=tol)
    assert math.isclose(length, oracle_shortest(pts), abs_tol=tol)


@pytest.mark.slow
def test_naive_seven_points_matches_oracle(tol: float) -> None:
    pts = gen_points(rng(77), 7)
    _, length = naive_search(pts)
    assert math.isclose(length, oracle_shortest(pts), abs_tol=tol)


# ---------------------------------------------------------------------------
#  Property tests
# ---------------------------------------------------------------------------
@given(point_sets(max_size=6))
def test_naive_is_optimal(points) -> None:
    route, length = naive_search(points)
    check_route(route, len(points))
    assert math.isclose(length, oracle_shortest(points), abs_tol=1e-9)


@given(point_sets(max_size=6))
def test_naive_never_longer_than_greedy(points) -> None:
    _, optimal = naive_search(points)
    _, greedy = closest_search(points)
    assert optimal <= greedy + 1e-9


@settings(max_examples=40)
@given(point_sets(max_size=7))
def test_iterative_matches_recursive(points) -> None:
    assert naive_search_iterative(points) == naive_search(points)
