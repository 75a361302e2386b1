"""Single-shot "wait for the next tick" primitive and the tick sources behind it.

A :class:`Frame` is awaited once per unit of search work. The first await
registers with a :class:`TickSource` and suspends; the tick resolves the frame
exactly once and the awaiting coroutine resumes. Any tick source works: a
display loop, a timer on the asyncio loop, or a test driving ticks by hand.
"""

from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable, Generator, List, Optional, Protocol, Tuple

TickCallback = Callable[[], None]


class TickSource(Protocol):
    """Anything that can call back once before the next redraw."""

    def request_tick(self, callback: TickCallback) -> None:
        ...


class Frame:
    """Awaitable that suspends its caller until the next tick, once."""

    __slots__ = ("_ticker", "_future")

    def __init__(self, ticker: TickSource) -> None:
        self._ticker = ticker
        self._future: Optional[asyncio.Future] = None

    @property
    def fired(self) -> bool:
        return self._future is not None and self._future.done()

    def _wake(self) -> None:
        # A tick after cancellation (or a duplicate tick) is a no-op.
        if self._future is not None and not self._future.done():
            self._future.set_result(None)

    def __await__(self) -> Generator[Any, None, None]:
        if self._future is None:
            self._future = asyncio.get_running_loop().create_future()
            self._ticker.request_tick(self._wake)
        return self._future.__await__()


class ManualTicker:
    """Tick source advanced explicitly via :meth:`tick`."""

    def __init__(self) -> None:
        self._pending: List[TickCallback] = []
        self.ticks = 0

    @property
    def pending(self) -> int:
        return len(self._pending)

    def request_tick(self, callback: TickCallback) -> None:
        self._pending.append(callback)

    def tick(self) -> int:
        """Fire every callback registered before this call; return how many fired."""
        due, self._pending = self._pending, []
        for callback in due:
            callback()
        self.ticks += 1
        return len(due)


class LoopTicker:
    """Timer-paced tick source on the running asyncio loop."""

    def __init__(self, interval: float = 0.0) -> None:
        if interval < 0.0:
            raise ValueError("interval must be non-negative")
        self.interval = float(interval)

    def request_tick(self, callback: TickCallback) -> None:
        loop = asyncio.get_running_loop()
        if self.interval == 0.0:
            loop.call_soon(callback)
        else:
            loop.call_later(self.interval, callback)


async def pump(
    awaitable: Awaitable[Any],
    ticker: ManualTicker,
    *,
    max_ticks: Optional[int] = None,
) -> Tuple[Any, int]:
    """Drive *awaitable* to completion, ticking *ticker* between loop turns.

    Returns ``(result, ticks)`` where ``ticks`` counts the frames resolved.
    """
    task = asyncio.ensure_future(awaitable)
    resolved = 0
    try:
        while not task.done():
            await asyncio.sleep(0)
            if task.done():
                break
            resolved += ticker.tick()
            if max_ticks is not None and resolved > max_ticks:
                raise RuntimeError(f"search still running after {max_ticks} ticks")
    except BaseException:
        task.cancel()
        raise
    return task.result(), resolved


__all__ = ["TickSource", "TickCallback", "Frame", "ManualTicker", "LoopTicker", "pump"]
