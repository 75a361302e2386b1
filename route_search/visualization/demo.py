from __future__ import annotations

import argparse
import json
from typing import Iterable, List

from route_search.algs.geometry import Point
from route_search.common.constants import ALGORITHM_NAMES, DEFAULT_FPS, MAX_NAIVE_POINTS
from route_search.data.gen_instances import InstanceConfig, draw_instance, make_rng
from route_search.data.schemas import decode_points, encode_points
from route_search.visualization.adapters import EVENT_BUILDERS
from route_search.visualization.render import PygameRenderer

PRESETS = {
    "pair": [(0, 0), (3, 4)],
    "collinear": [(0, 0), (1, 0), (2, 0)],
    "square": [(0, 0), (0, 10), (10, 10), (10, 0), (5, 12)],
    "scatter": [(50, 50), (10, 80), (90, 85), (20, 15), (75, 20), (60, 95), (35, 40)],
}


def parse_points(point_string: str) -> List[Point]:
    return decode_points(json.loads(point_string))


def main(argv: Iterable[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Shortest-route search visualization demo")
    parser.add_argument("--preset", choices=PRESETS.keys(), default="square")
    parser.add_argument("--points", type=str, help='JSON list of {"x": int, "y": int} objects')
    parser.add_argument("--random", type=int, metavar="N", help="Draw N random points instead")
    parser.add_argument("--seed", type=int, help="Seed for --random")
    parser.add_argument("--algorithm", choices=ALGORITHM_NAMES, default="naive")
    parser.add_argument("--live", action="store_true", help="Run the search paced by the display loop")
    parser.add_argument("--manual", action="store_true", help="Start with autoplay disabled")
    parser.add_argument("--fps", type=int, default=DEFAULT_FPS)
    args = parser.parse_args(list(argv) if argv is not None else None)

    if args.points:
        points = parse_points(args.points)
    elif args.random is not None:
        points = draw_instance(InstanceConfig(count=args.random), make_rng(args.seed))
        print(f"points: {json.dumps(encode_points(points))}")
    else:
        points = [Point(x, y) for x, y in PRESETS[args.preset]]

    if args.algorithm == "naive" and len(points) > MAX_NAIVE_POINTS:
        parser.error(f"naive search is limited to {MAX_NAIVE_POINTS} points in the demo")

    renderer = PygameRenderer(fps=args.fps)
    if args.live:
        route = renderer.run_live(args.algorithm, points, autoplay=not args.manual)
        if route is not None:
            print(f"route: {route}")
        return

    events = EVENT_BUILDERS[args.algorithm](points)
    renderer.load_events(events)
    renderer.run(autoplay=not args.manual)


if __name__ == "__main__":
    main()
