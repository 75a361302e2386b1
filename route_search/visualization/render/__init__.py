"""Pygame rendering for route-search event streams."""

from .base_scene import BaseScene
from .pygame_renderer import PygameRenderer

__all__ = ["BaseScene", "PygameRenderer"]
