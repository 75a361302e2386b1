import os
import time

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame  # type: ignore  # noqa: E402

from route_search.algs import closest_search  # noqa: E402
from route_search.visualization.adapters import build_naive_events  # noqa: E402
from route_search.visualization.render import PygameRenderer  # noqa: E402
from tests.test_utils import points_from  # noqa: E402

POINTS = points_from([(0, 0), (8, 2), (3, 9), (7, 7)])


def test_renderer_process_all_events():
    events = build_naive_events(POINTS)

    renderer = PygameRenderer(width=640, height=480, fps=30)
    renderer.load_events(events)
    renderer.process_all_events()

    assert renderer.cursor == renderer.total_events
    assert renderer.completed
    assert renderer.result_route is not None
    assert renderer.frame_count == 16


def test_renderer_rewind_and_step():
    renderer = PygameRenderer(width=320, height=240, fps=30)
    renderer.load_events(build_naive_events(POINTS))
    start = renderer.cursor
    renderer.step_once()
    renderer.step_once()
    assert renderer.cursor == start + 2
    renderer._rewind_event()
    assert renderer.cursor == start + 1


def test_renderer_live_closest():
    renderer = PygameRenderer(width=320, height=240, fps=1000)
    route = renderer.run_live("closest", POINTS, max_frames=40)

    assert route == closest_search(POINTS)[0]
    assert renderer.result_route == route
    assert renderer.frame_count == len(POINTS) * (len(POINTS) - 1) // 2
    assert renderer.completed


def test_renderer_perf_budget():
    events = [
        {"type": "set_scene", "x_min": -1.0, "x_max": 11.0, "y_min": -1.0, "y_max": 11.0},
        {"type": "add_point", "idx": 0, "x": 0, "y": 0, "origin": True},
        {"type": "add_point", "idx": 1, "x": 10, "y": 0, "origin": False},
        {"type": "add_point", "idx": 2, "x": 10, "y": 10, "origin": False},
        {"type": "algo_info", "name": "perf_test", "mode": "animated"},
    ]
    for step in range(300):
        events.append({"type": "animation_frame", "route": [0, 1, 2][: 1 + step % 3]})
    events.append({"type": "result", "route": [0, 1, 2], "length": 20.0})
    events.append({"type": "done"})

    renderer = PygameRenderer(width=640, height=360, fps=30)
    start = time.perf_counter()
    renderer.load_events(events)
    renderer.process_all_events()
    elapsed = time.perf_counter() - start

    assert elapsed < 0.5
    assert renderer.frame_count == 300

    pygame.quit()
