from __future__ import annotations

import argparse
import math
import statistics
import time
from typing import Callable, Dict, List, Sequence, Tuple

try:
    from route_search.algs import closest_search, naive_search, naive_search_iterative
    from route_search.algs.geometry import Point
    from route_search.common.constants import RNG_SEEDS, seed_everywhere
    from route_search.data.gen_instances import InstanceConfig, draw_instances
except ImportError:  # pragma: no cover - layout fallback
    import sys
    from pathlib import Path

    REPO_ROOT = Path(__file__).resolve().parents[1]
    if str(REPO_ROOT) not in sys.path:
        sys.path.append(str(REPO_ROOT))
    from route_search.algs import closest_search, naive_search, naive_search_iterative
    from route_search.algs.geometry import Point
    from route_search.common.constants import RNG_SEEDS, seed_everywhere
    from route_search.data.gen_instances import InstanceConfig, draw_instances


TOL = 1e-9

SOLVERS: Dict[str, Callable[[Sequence[Point]], Tuple[List[int], float]]] = {
    "naive": naive_search,
    "naive_iter": naive_search_iterative,
    "closest": closest_search,
}


def percentile(sorted_values: Sequence[float], pct: float) -> float:
    if not sorted_values:
        return float("nan")
    if pct <= 0:
        return sorted_values[0]
    if pct >= 1:
        return sorted_values[-1]
    idx = (len(sorted_values) - 1) * pct
    lo = math.floor(idx)
    hi = math.ceil(idx)
    if lo == hi:
        return sorted_values[int(idx)]
    weight = idx - lo
    return sorted_values[lo] * (1.0 - weight) + sorted_values[hi] * weight


def time_solver(
    solver: Callable[[Sequence[Point]], Tuple[List[int], float]],
    instances: Sequence[Sequence[Point]],
) -> Tuple[List[float], List[float]]:
    timings: List[float] = []
    lengths: List[float] = []
    for points in instances:
        start = time.perf_counter()
        _, length = solver(points)
        timings.append(time.perf_counter() - start)
        lengths.append(length)
    return timings, lengths


def run(sizes: Sequence[int], trials: int, seed: int) -> None:
    seed_everywhere(seed)
    for n in sizes:
        instances = draw_instances(InstanceConfig(count=n), trials, seed=seed + n)
        results = {name: time_solver(solver, instances) for name, solver in SOLVERS.items()}

        naive_lengths = results["naive"][1]
        iter_lengths = results["naive_iter"][1]
        for a, b in zip(naive_lengths, iter_lengths):
            if abs(a - b) > TOL:
                raise AssertionError(f"recursive and iterative naive disagree: {a} vs {b}")

        ratios = [
            greedy / optimal if optimal > 0.0 else 1.0
            for greedy, optimal in zip(results["closest"][1], naive_lengths)
        ]

        print(f"n={n:2d} trials={trials}")
        for name, (timings, _) in results.items():
            ordered = sorted(timings)
            print(
                f"  {name:<10s} mean={statistics.mean(ordered) * 1e3:9.3f}ms "
                f"p50={percentile(ordered, 0.5) * 1e3:9.3f}ms "
                f"p95={percentile(ordered, 0.95) * 1e3:9.3f}ms"
            )
        print(
            f"  closest/naive length ratio: mean={statistics.mean(ratios):.4f} "
            f"max={max(ratios):.4f}"
        )


def main() -> None:
    parser = argparse.ArgumentParser(description="Benchmark the route searches")
    parser.add_argument("--sizes", type=str, default="3,4,5,6,7,8")
    parser.add_argument("--trials", type=int, default=20)
    parser.add_argument("--seed", type=int, default=RNG_SEEDS["bench"])
    args = parser.parse_args()

    sizes = [int(s) for s in args.sizes.split(",") if s.strip()]
    run(sizes, args.trials, args.seed)


if __name__ == "__main__":
    main()
