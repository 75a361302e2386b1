"""Progress sinks: where animated searches publish their snapshots."""

from __future__ import annotations

from typing import Callable, List, Protocol, Sequence, Tuple

from route_search.visualization.events import EventDict, frame_event

Snapshot = Tuple[int, ...]


class ProgressSink(Protocol):
    def publish(self, route: Snapshot) -> None:
        ...


class EventSink:
    """Append one ``animation_frame`` event per snapshot to ``events``."""

    def __init__(self, events: List[EventDict] | None = None) -> None:
        self.events: List[EventDict] = events if events is not None else []

    def publish(self, route: Snapshot) -> None:
        self.events.append(frame_event(route))

    @property
    def snapshots(self) -> List[Snapshot]:
        return [tuple(ev["route"]) for ev in self.events if ev.get("type") == "animation_frame"]


class CallbackSink:
    """Forward each snapshot to a plain callable."""

    def __init__(self, callback: Callable[[Snapshot], None]) -> None:
        self._callback = callback

    def publish(self, route: Sequence[int]) -> None:
        self._callback(tuple(route))


__all__ = ["ProgressSink", "Snapshot", "EventSink", "CallbackSink"]
