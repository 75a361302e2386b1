from __future__ import annotations

import json
import math
from typing import Any, Dict, Iterable, List, Mapping, Sequence

from route_search.algs.geometry import Point
from route_search.common.constants import COORD_MAX, COORD_MIN

POINT_FIELDS = ("x", "y")


def _coerce_coord(value: Any, *, idx: int, name: str) -> int:
    # bool is an int subclass; a payload of true/false is not a coordinate.
    if isinstance(value, bool):
        raise ValueError(f"point #{idx}: {name} must be a number, got bool")
    if isinstance(value, int):
        coord = value
    elif isinstance(value, float):
        if not math.isfinite(value) or not value.is_integer():
            raise ValueError(f"point #{idx}: {name}={value!r} is not an integer")
        coord = int(value)
    else:
        raise ValueError(f"point #{idx}: {name} must be a number, got {type(value).__name__}")
    if not COORD_MIN <= coord <= COORD_MAX:
        raise ValueError(f"point #{idx}: {name}={coord} outside 32-bit range")
    return coord


def decode_point(entry: Any, idx: int = 0) -> Point:
    if isinstance(entry, Point):
        return entry
    if not isinstance(entry, Mapping):
        raise ValueError(f"point #{idx} must be an object {{x, y}}, got {type(entry).__name__}")
    missing = [name for name in POINT_FIELDS if name not in entry]
    if missing:
        raise ValueError(f"point #{idx} is missing {', '.join(missing)}")
    return Point(
        x=_coerce_coord(entry["x"], idx=idx, name="x"),
        y=_coerce_coord(entry["y"], idx=idx, name="y"),
    )


def decode_points(payload: Any) -> List[Point]:
    """Decode ``[{"x": int, "y": int}, ...]`` (or its JSON text) into points.

    Raises ``ValueError`` for anything that is not such a list.
    """
    if isinstance(payload, (str, bytes, bytearray)):
        try:
            payload = json.loads(payload)
        except json.JSONDecodeError as exc:
            raise ValueError(f"points payload is not valid JSON: {exc.msg}") from exc
        except RecursionError as exc:
            raise ValueError("points payload is nested too deeply") from exc
    if isinstance(payload, Mapping) or not isinstance(payload, Iterable):
        raise ValueError("points payload must be a list of {x, y} objects")
    return [decode_point(entry, idx) for idx, entry in enumerate(payload)]


def encode_points(points: Iterable[Point]) -> List[Dict[str, int]]:
    return [{"x": int(p.x), "y": int(p.y)} for p in points]


def encode_route(route: Sequence[int]) -> List[int]:
    return [int(i) for i in route]


def is_valid_route(route: Sequence[int], n: int) -> bool:
    """True when *route* is a permutation of ``range(n)`` starting at 0."""
    if n == 0:
        return len(route) == 0
    return len(route) == n and route[0] == 0 and sorted(route) == list(range(n))


__all__ = [
    "POINT_FIELDS",
    "decode_point",
    "decode_points",
    "encode_points",
    "encode_route",
    "is_valid_route",
]
