"""Entry points exposed to the host.

Both operations validate the algorithm selector and the point payload, report
bad input through the injected ``alert`` capability and return ``None`` in
that case. Validated requests always run on a fresh search state.
"""

from __future__ import annotations

import warnings
from typing import Any, Callable, List, Optional

from route_search.algs import ALGORITHMS
from route_search.algs.geometry import log
from route_search.data.schemas import decode_points, encode_route
from route_search.scheduling.frame import TickSource
from route_search.visualization.algs import ANIMATED_ALGORITHMS
from route_search.visualization.sinks import ProgressSink

Alert = Callable[[str], None]

MSG_ALGORITHM_TYPE = "Algorithm needs to be a string"
MSG_BAD_POINTS = "Destinations need to be an array of points {x: number, y: number}"
MSG_UNKNOWN = "Unknown algorithm"
MSG_UNKNOWN_ANIMATED = "Unknown animated algorithm"


class RouteInputWarning(UserWarning):
    """Issued by the default alert when a request is rejected."""


def default_alert(message: str) -> None:
    warnings.warn(message, RouteInputWarning, stacklevel=3)


def find_shortest(
    algorithm: Any,
    points: Any,
    *,
    alert: Optional[Alert] = None,
) -> Optional[List[int]]:
    """Run the named search synchronously and return the route."""
    notify = alert or default_alert
    if not isinstance(algorithm, str):
        notify(MSG_ALGORITHM_TYPE)
        return None
    try:
        destinations = decode_points(points)
    except ValueError as exc:
        log(f"[api] rejected payload: {exc}")
        notify(MSG_BAD_POINTS)
        return None

    solver = ALGORITHMS.get(algorithm)
    if solver is None:
        notify(MSG_UNKNOWN)
        return None

    log(f"[api] find_shortest {algorithm!r} over {len(destinations)} points")
    route, _ = solver(destinations)
    return encode_route(route)


async def animate_finding_shortest(
    algorithm: Any,
    points: Any,
    *,
    ticker: TickSource,
    sink: ProgressSink,
    alert: Optional[Alert] = None,
) -> Optional[List[int]]:
    """Run the named search step by step, publishing one snapshot per tick."""
    notify = alert or default_alert
    if not isinstance(algorithm, str):
        notify(MSG_ALGORITHM_TYPE)
        return None
    try:
        destinations = decode_points(points)
    except ValueError as exc:
        log(f"[api] rejected payload: {exc}")
        notify(MSG_BAD_POINTS)
        return None

    solver = ANIMATED_ALGORITHMS.get(algorithm)
    if solver is None:
        notify(MSG_UNKNOWN_ANIMATED)
        return None

    log(f"[api] animate_finding_shortest {algorithm!r} over {len(destinations)} points")
    route, _ = await solver(destinations, ticker=ticker, sink=sink)
    return encode_route(route)


__all__ = [
    "Alert",
    "RouteInputWarning",
    "default_alert",
    "find_shortest",
    "animate_finding_shortest",
    "MSG_ALGORITHM_TYPE",
    "MSG_BAD_POINTS",
    "MSG_UNKNOWN",
    "MSG_UNKNOWN_ANIMATED",
]
