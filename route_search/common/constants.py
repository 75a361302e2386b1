from __future__ import annotations

import math
import os
import random
from typing import Dict, Tuple

import numpy as np

TOL_NUM: float = 1e-6
DEFAULT_SEED: int = 1337

RNG_SEEDS: Dict[str, int] = {
    "tests": DEFAULT_SEED,
    "bench": 4242,
    "data": 5150,
}

# Sentinel for "no complete route found yet".
UNBOUNDED_LENGTH: float = math.inf

ALGORITHM_NAMES: Tuple[str, ...] = ("naive", "closest")

DEFAULT_FPS: int = 60

# Exhaustive search visits (n-1)! leaves; demos and generators stay below this.
MAX_NAIVE_POINTS: int = 9

COORD_MIN: int = -(2**31)
COORD_MAX: int = 2**31 - 1


def seed_everywhere(seed: int) -> None:
    """Seed all supported RNG backends deterministically."""
    random.seed(seed)
    os.environ["PYTHONHASHSEED"] = str(seed)
    np.random.seed(seed)


__all__ = [
    "TOL_NUM",
    "DEFAULT_SEED",
    "RNG_SEEDS",
    "UNBOUNDED_LENGTH",
    "ALGORITHM_NAMES",
    "DEFAULT_FPS",
    "MAX_NAIVE_POINTS",
    "COORD_MIN",
    "COORD_MAX",
    "seed_everywhere",
]
