"""Step pacing for animated searches."""

from .frame import Frame, LoopTicker, ManualTicker, TickCallback, TickSource, pump

__all__ = ["Frame", "LoopTicker", "ManualTicker", "TickCallback", "TickSource", "pump"]
