from __future__ import annotations

import pytest

from route_search.algs.geometry import Point
from route_search.common.constants import COORD_MAX, COORD_MIN
from route_search.data.schemas import (
    decode_point,
    decode_points,
    encode_points,
    encode_route,
    is_valid_route,
)


def test_decode_points_basic() -> None:
    assert decode_points([{"x": 1, "y": -2}, {"x": 0, "y": 0, "label": "depot"}]) == [
        Point(1, -2),
        Point(0, 0),
    ]


def test_decode_points_json_text_and_bytes() -> None:
    text = '[{"x": 3, "y": 4}]'
    assert decode_points(text) == [Point(3, 4)]
    assert decode_points(text.encode("utf-8")) == [Point(3, 4)]


def test_decode_accepts_integral_floats() -> None:
    assert decode_point({"x": 2.0, "y": -7.0}) == Point(2, -7)


def test_decode_passes_points_through() -> None:
    assert decode_points([Point(1, 1)]) == [Point(1, 1)]


def test_decode_range_limits() -> None:
    assert decode_point({"x": COORD_MIN, "y": COORD_MAX}) == Point(COORD_MIN, COORD_MAX)
    with pytest.raises(ValueError, match="32-bit"):
        decode_point({"x": COORD_MAX + 1, "y": 0})


@pytest.mark.parametrize(
    "payload",
    [
        None,
        42,
        {"x": 0, "y": 0},
        "{not json",
        [{"x": 1}],
        [{"x": 1.5, "y": 0}],
        [{"x": True, "y": 0}],
        [{"x": "1", "y": 0}],
        [{"x": float("nan"), "y": 0}],
        [[1, 2]],
        "[" * 100000,
    ],
)
def test_decode_points_rejects(payload) -> None:
    with pytest.raises(ValueError):
        decode_points(payload)


def test_encode_shapes() -> None:
    assert encode_points([Point(1, 2)]) == [{"x": 1, "y": 2}]
    assert encode_route((0, 2, 1)) == [0, 2, 1]


def test_is_valid_route() -> None:
    assert is_valid_route([], 0)
    assert is_valid_route([0, 2, 1], 3)
    assert not is_valid_route([1, 0, 2], 3)
    assert not is_valid_route([0, 1, 1], 3)
    assert not is_valid_route([0, 1], 3)
