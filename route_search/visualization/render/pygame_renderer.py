"""Pygame renderer that consumes route-search visualization events."""

from __future__ import annotations

import asyncio
from typing import Dict, List, Optional, Sequence

try:
    import pygame
except ImportError as exc:  # pragma: no cover - ensure pygame is available
    raise ImportError("pygame is required for the visualization renderer") from exc

from route_search.algs.geometry import Point
from route_search.scheduling.frame import ManualTicker
from route_search.visualization.adapters.common import build_scene_events
from route_search.visualization.algs import ANIMATED_ALGORITHMS
from route_search.visualization.events import AlgoInfoEvent, DoneEvent, ErrorEvent, result_event
from route_search.visualization.render.base_scene import (
    PARTIAL_ROUTE_COLOR,
    RESULT_ROUTE_COLOR,
    BaseScene,
)
from route_search.visualization.sinks import EventSink


class PygameRenderer:
    """Render route-search event streams, replayed or live."""

    SPEED_LEVELS = [0.25, 0.5, 1.0, 2.0, 4.0]

    def __init__(self, width: int = 900, height: int = 700, fps: int = 60) -> None:
        self.width = width
        self.height = height
        self.fps = fps
        pygame.font.init()
        self.font = pygame.font.SysFont("consolas", 18)
        self.small_font = pygame.font.SysFont("consolas", 14)
        self.scene = BaseScene(width, height)
        self.events: List[Dict[str, object]] = []
        self.cursor = 0
        self.total_events = 0
        self.autoplay = True
        self.speed_index = 2
        self.autoplay_accumulator = 0.0
        self.clock: Optional["pygame.time.Clock"] = None
        self.screen: Optional["pygame.Surface"] = None
        self.running = False
        self.algorithm_name = "unknown"
        self.mode = "animated"
        self.current_route: List[int] = []
        self.frame_count = 0
        self.result_route: Optional[List[int]] = None
        self.result_length: Optional[float] = None
        self.error_text: Optional[str] = None
        self.live_ticker: Optional[ManualTicker] = None
        self.scene_initialized = False
        self.completed = False
        self.last_event_type: Optional[str] = None

    # ------------------------------------------------------------------ public API
    def load_events(self, events: List[Dict[str, object]]) -> None:
        self.events = list(events)
        self.total_events = len(self.events)
        self.cursor = 0
        self.autoplay_accumulator = 0.0
        self.scene.reset()
        self.scene_initialized = False
        self.algorithm_name = "unknown"
        self.mode = "animated"
        self.current_route = []
        self.frame_count = 0
        self.result_route = None
        self.result_length = None
        self.error_text = None
        self.completed = False
        self.last_event_type = None
        if self.events:
            self._bootstrap_scene()

    def run(self, autoplay: bool = True) -> None:
        if not self.events:
            raise RuntimeError("No events loaded. Call load_events() first.")

        self.autoplay = autoplay
        if not self.scene_initialized:
            self._bootstrap_scene()

        self._open_display()
        while self.running:
            dt = self.clock.tick(self.fps) / 1000.0
            self._handle_input()

            if self.autoplay and not self.completed:
                self._autoplay_advance(dt)

            self._draw_frame()

        pygame.display.quit()

    def run_live(
        self,
        algorithm: str,
        points: Sequence[Point],
        *,
        autoplay: bool = True,
        max_frames: Optional[int] = None,
    ) -> Optional[List[int]]:
        """Drive an animated search with the display loop as its tick source.

        Every redraw resolves at most one pending frame, so the search advances
        one step per rendered frame. Returns the route, or ``None`` when the
        window was closed first.
        """
        solver = ANIMATED_ALGORITHMS.get(algorithm)
        if solver is None:
            raise ValueError(f"unknown algorithm {algorithm!r}")

        pts = list(points)
        self.load_events(build_scene_events(pts))
        self.events.append(AlgoInfoEvent(type="algo_info", name=algorithm, mode="animated"))
        self.live_ticker = ManualTicker()
        self.autoplay = autoplay
        sink = EventSink(self.events)

        self._open_display()
        try:
            return asyncio.run(
                self._live_loop(solver(pts, ticker=self.live_ticker, sink=sink), max_frames)
            )
        finally:
            self.live_ticker = None
            pygame.display.quit()

    def process_all_events(self) -> None:
        """Advance through all events without opening a window (testing helper)."""
        while self.cursor < self.total_events:
            self._advance_event()

    def step_once(self) -> None:
        """Advance a single event."""
        self._advance_event()

    # ------------------------------------------------------------------ internals
    def _open_display(self) -> None:
        pygame.display.init()
        pygame.display.set_caption("Route Search Visualization")
        self.screen = pygame.display.set_mode((self.width, self.height))
        self.clock = pygame.time.Clock()
        self.running = True

    async def _live_loop(self, search, max_frames: Optional[int]) -> Optional[List[int]]:
        task = asyncio.ensure_future(search)
        route: Optional[List[int]] = None
        frames = 0
        try:
            while self.running:
                self.clock.tick(self.fps)
                self._handle_input()
                if not self.running:
                    break
                if self.autoplay and not task.done():
                    self.live_ticker.tick()
                # Let the search run up to its next suspension.
                await asyncio.sleep(0)

                if task.done() and route is None:
                    try:
                        route, length = task.result()
                    except Exception as exc:
                        self.events.append(ErrorEvent(type="error", text=str(exc)))
                        self.events.append(DoneEvent(type="done"))
                        raise
                    self.events.append(result_event(route, length))
                    self.events.append(DoneEvent(type="done"))

                self.total_events = len(self.events)
                self.process_all_events()
                self._draw_frame()

                frames += 1
                if max_frames is not None and frames >= max_frames:
                    break
        finally:
            if not task.done():
                task.cancel()
                await asyncio.gather(task, return_exceptions=True)
        return route

    def _bootstrap_scene(self) -> None:
        """Consume initial scene setup events (scene + points + algo info)."""
        while self.cursor < self.total_events:
            event_type = self.events[self.cursor].get("type")
            if event_type in {"set_scene", "add_point", "algo_info"}:
                self._advance_event()
                self.scene_initialized = True
                continue
            break
        if not self.scene_initialized and self.cursor < self.total_events:
            # ensure at least set_scene processed
            self._advance_event()
            self.scene_initialized = True

    def _handle_input(self) -> None:
        for py_event in pygame.event.get():
            if py_event.type == pygame.QUIT:
                self.running = False
                return
            if py_event.type == pygame.KEYDOWN:
                if py_event.key in (pygame.K_ESCAPE, pygame.K_q):
                    self.running = False
                    return
                if py_event.key == pygame.K_SPACE:
                    self.autoplay = not self.autoplay
                elif py_event.key == pygame.K_RIGHT:
                    self.autoplay = False
                    if self.live_ticker is not None:
                        self.live_ticker.tick()
                    else:
                        self._advance_event()
                elif py_event.key == pygame.K_LEFT and self.live_ticker is None:
                    self.autoplay = False
                    self._rewind_event()
                elif py_event.key == pygame.K_UP:
                    self.speed_index = min(len(self.SPEED_LEVELS) - 1, self.speed_index + 1)
                elif py_event.key == pygame.K_DOWN:
                    self.speed_index = max(0, self.speed_index - 1)
                elif py_event.key == pygame.K_r and self.live_ticker is None:
                    self._reset_playback()

    def _reset_playback(self) -> None:
        current_autoplay = self.autoplay
        self.load_events(self.events)
        self.autoplay = current_autoplay

    def _autoplay_advance(self, dt: float) -> None:
        interval = 1.0 / self.fps
        interval /= max(0.1, self.SPEED_LEVELS[self.speed_index])
        self.autoplay_accumulator += dt
        while self.autoplay_accumulator >= interval and self.cursor < self.total_events:
            self.autoplay_accumulator -= interval
            self._advance_event()

    def _advance_event(self) -> None:
        if self.cursor >= self.total_events:
            self.completed = True
            return
        event = self.events[self.cursor]
        self.cursor += 1
        self.last_event_type = event.get("type")
        self._apply_event(event)
        if self.cursor >= self.total_events and self.live_ticker is None:
            self.completed = True

    def _rewind_event(self) -> None:
        if self.cursor == 0:
            return
        target = self.cursor - 1
        events_copy = list(self.events)
        self.load_events(events_copy)
        while self.cursor < target:
            self._advance_event()

    # ------------------------------------------------------------------ event application
    def _apply_event(self, event: Dict[str, object]) -> None:
        event_type = event.get("type")
        if event_type == "set_scene":
            self.scene.set_scene(
                x_min=float(event.get("x_min", -10.0)),
                x_max=float(event.get("x_max", 10.0)),
                y_min=float(event.get("y_min", -10.0)),
                y_max=float(event.get("y_max", 10.0)),
            )
            self.scene_initialized = True
        elif event_type == "add_point":
            self.scene.add_point(
                int(event.get("idx", 0)),
                int(event.get("x", 0)),
                int(event.get("y", 0)),
                origin=bool(event.get("origin", False)),
            )
        elif event_type == "algo_info":
            self.algorithm_name = str(event.get("name", "unknown"))
            self.mode = str(event.get("mode", "animated"))
        elif event_type == "animation_frame":
            self.current_route = [int(i) for i in event.get("route", [])]
            self.frame_count += 1
        elif event_type == "result":
            self.result_route = [int(i) for i in event.get("route", [])]
            self.result_length = float(event.get("length", 0.0))
            self.current_route = []
        elif event_type == "error":
            self.error_text = str(event.get("text", ""))
        elif event_type == "done":
            self.completed = True
        else:
            print(f"[Renderer] Unhandled event type: {event_type}")

    # ------------------------------------------------------------------ drawing
    def _draw_frame(self) -> None:
        assert self.screen is not None
        self.scene.draw_background(self.screen)

        if self.result_route is not None:
            self.scene.draw_route(self.screen, self.result_route, RESULT_ROUTE_COLOR, 3)
        elif self.algorithm_name == "closest":
            self.scene.draw_tentative(self.screen, self.current_route)
        else:
            self.scene.draw_route(self.screen, self.current_route, PARTIAL_ROUTE_COLOR, 2)

        self.scene.draw_points(self.screen, self.small_font)
        self._draw_hud(self.screen)
        pygame.display.flip()

    def _draw_hud(self, surface: "pygame.Surface") -> None:
        lines = [
            f"Algo: {self.algorithm_name} ({self.mode})",
            f"Event: {self.cursor}/{self.total_events}",
            f"Frames: {self.frame_count}",
            f"Autoplay: {'on' if self.autoplay else 'off'} x{self.SPEED_LEVELS[self.speed_index]:.2f}",
            f"Route: {self.current_route}",
        ]
        if self.result_route is not None and self.result_length is not None:
            lines.append(f"Result: {self.result_route} length={self.result_length:.3f}")
        if self.error_text:
            lines.append(f"Error: {self.error_text}")
        if self.last_event_type:
            lines.append(f"Last: {self.last_event_type}")

        x = 10
        y = 10
        for line in lines:
            text_surface = self.font.render(line, True, (230, 230, 230))
            surface.blit(text_surface, (x, y))
            y += text_surface.get_height() + 2


__all__ = ["PygameRenderer"]
