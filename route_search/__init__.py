# Host-facing operations
from .api import (
    RouteInputWarning,
    animate_finding_shortest,
    default_alert,
    find_shortest,
)

# Geometry & constants
from .algs.geometry import Point, distance, route_length, VERBOSE
from .common.constants import (
    ALGORITHM_NAMES,
    DEFAULT_SEED,
    RNG_SEEDS,
    TOL_NUM,
    seed_everywhere,
)

# Searches
from .algs import ALGORITHMS, naive_search, naive_search_iterative, closest_search
from .visualization.algs import (
    ANIMATED_ALGORITHMS,
    animated_closest_search,
    animated_naive_search,
)
from .scheduling import Frame, LoopTicker, ManualTicker, pump

__all__ = [
    # api
    "find_shortest",
    "animate_finding_shortest",
    "default_alert",
    "RouteInputWarning",
    # geometry
    "Point",
    "distance",
    "route_length",
    "VERBOSE",
    "ALGORITHM_NAMES",
    "DEFAULT_SEED",
    "RNG_SEEDS",
    "TOL_NUM",
    "seed_everywhere",
    # searches
    "ALGORITHMS",
    "ANIMATED_ALGORITHMS",
    "naive_search",
    "naive_search_iterative",
    "closest_search",
    "animated_naive_search",
    "animated_closest_search",
    # scheduling
    "Frame",
    "LoopTicker",
    "ManualTicker",
    "pump",
]
