"""Coalesce bursts of input into a single delayed call."""

from __future__ import annotations

import asyncio
from typing import Callable


class DebounceScheduler:
    """Fire only the most recently scheduled callback, ``delay`` ms after it was scheduled.

    Timers run on the current asyncio loop. Earlier timers are cancelled
    whenever a new one is scheduled; there is no queue.
    """

    def __init__(self, delay: int) -> None:
        self.delay = delay
        self._handle: asyncio.TimerHandle | None = None

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def schedule(self, callback: Callable[[], object]) -> None:
        self.cancel()
        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(self.delay / 1000, self._fire, callback)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _fire(self, callback: Callable[[], object]) -> None:
        self._handle = None
        callback()
