"""Utility primitives for pygame visualization scenes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

try:
    import pygame
except ImportError as exc:  # pragma: no cover - pygame should be installed by demos
    raise ImportError("pygame is required for the visualization renderer") from exc

BACKGROUND_COLOR = (18, 18, 24)
GRID_COLOR = (40, 40, 52)
POINT_COLOR = (200, 200, 210)
ORIGIN_COLOR = (255, 215, 0)
PARTIAL_ROUTE_COLOR = (200, 120, 40)
TENTATIVE_COLOR = (200, 200, 80)
RESULT_ROUTE_COLOR = (70, 200, 110)
LABEL_COLOR = (150, 150, 170)

MARGIN_RATIO = 0.06
POINT_RADIUS = 5


@dataclass
class PointState:
    idx: int
    x: int
    y: int
    origin: bool = False


class BaseScene:
    """Coordinate transforms and basic draw helpers for the pygame renderer."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.x_min = -10.0
        self.x_max = 10.0
        self.y_min = -10.0
        self.y_max = 10.0
        self.margin = int(min(width, height) * MARGIN_RATIO)
        self.scale = 1.0
        self.offset_x = 0.0
        self.offset_y = 0.0
        self.points: Dict[int, PointState] = {}

    # ------------------------------------------------------------------ transforms
    def set_scene(self, *, x_min: float, x_max: float, y_min: float, y_max: float) -> None:
        if x_min >= x_max:
            x_max = x_min + 1.0
        if y_min >= y_max:
            y_max = y_min + 1.0
        self.x_min, self.x_max = x_min, x_max
        self.y_min, self.y_max = y_min, y_max
        usable_w = self.width - 2 * self.margin
        usable_h = self.height - 2 * self.margin
        # Uniform scale keeps distances visually honest.
        self.scale = min(usable_w / (x_max - x_min), usable_h / (y_max - y_min))
        self.offset_x = self.margin + (usable_w - self.scale * (x_max - x_min)) / 2.0
        self.offset_y = self.margin + (usable_h - self.scale * (y_max - y_min)) / 2.0

    def world_to_screen(self, x: float, y: float) -> Tuple[int, int]:
        px = int(self.offset_x + (x - self.x_min) * self.scale)
        py = int(self.height - (self.offset_y + (y - self.y_min) * self.scale))
        px = max(0, min(self.width - 1, px))
        py = max(0, min(self.height - 1, py))
        return px, py

    # ------------------------------------------------------------------ scene content
    def add_point(self, idx: int, x: int, y: int, origin: bool = False) -> None:
        self.points[idx] = PointState(idx=idx, x=int(x), y=int(y), origin=origin)

    def reset(self) -> None:
        self.points.clear()

    def route_to_screen(self, route: Sequence[int]) -> List[Tuple[int, int]]:
        coords: List[Tuple[int, int]] = []
        for idx in route:
            point = self.points.get(int(idx))
            if point is None:
                continue
            coords.append(self.world_to_screen(point.x, point.y))
        return coords

    # ------------------------------------------------------------------ drawing helpers
    def draw_background(self, surface: "pygame.Surface") -> None:
        surface.fill(BACKGROUND_COLOR)
        left, top = self.world_to_screen(self.x_min, self.y_max)
        right, bottom = self.world_to_screen(self.x_max, self.y_min)
        pygame.draw.rect(surface, GRID_COLOR, pygame.Rect(left, top, right - left, bottom - top), 1)

    def draw_points(self, surface: "pygame.Surface", font: Optional["pygame.font.Font"] = None) -> None:
        for point in self.points.values():
            sx, sy = self.world_to_screen(point.x, point.y)
            color = ORIGIN_COLOR if point.origin else POINT_COLOR
            pygame.draw.circle(surface, color, (sx, sy), POINT_RADIUS + (2 if point.origin else 0))
            if font is not None:
                label = font.render(str(point.idx), True, LABEL_COLOR)
                surface.blit(label, (sx + POINT_RADIUS + 2, sy - POINT_RADIUS - 2))

    def draw_route(
        self,
        surface: "pygame.Surface",
        route: Sequence[int],
        color: Tuple[int, int, int],
        width: int = 2,
    ) -> None:
        coords = self.route_to_screen(route)
        if len(coords) >= 2:
            pygame.draw.lines(surface, color, False, coords, width)

    def draw_tentative(self, surface: "pygame.Surface", route: Sequence[int]) -> None:
        """Committed prefix in the partial colour, last hop highlighted."""
        if len(route) < 2:
            return
        self.draw_route(surface, route[:-1], PARTIAL_ROUTE_COLOR, 2)
        self.draw_route(surface, route[-2:], TENTATIVE_COLOR, 3)


__all__ = [
    "BaseScene",
    "PointState",
    "BACKGROUND_COLOR",
    "GRID_COLOR",
    "POINT_COLOR",
    "ORIGIN_COLOR",
    "PARTIAL_ROUTE_COLOR",
    "TENTATIVE_COLOR",
    "RESULT_ROUTE_COLOR",
    "LABEL_COLOR",
]
