"""Adapters converting animated searches into renderer-friendly events."""

from .closest_adapter import build_closest_events
from .common import build_animated_events, build_scene_events
from .naive_adapter import build_naive_events

EVENT_BUILDERS = {
    "naive": build_naive_events,
    "closest": build_closest_events,
}

__all__ = [
    "EVENT_BUILDERS",
    "build_animated_events",
    "build_scene_events",
    "build_naive_events",
    "build_closest_events",
]
