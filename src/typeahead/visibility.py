"""Open/closed state of the result list."""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable

from typeahead.events import TOGGLE, Emitter, ToggleDetail


class Visibility(Enum):
    CLOSED = "closed"
    OPEN = "open"


class VisibilityState:
    """Two-state machine; ``open`` and ``close`` are idempotent.

    Each real transition flips ``expanded`` and emits one ``toggle``
    notification carrying the input and results references.
    """

    def __init__(self, events: Emitter, refs: Callable[[], tuple[Any, Any]]) -> None:
        self._events = events
        self._refs = refs
        self.state = Visibility.CLOSED

    @property
    def is_open(self) -> bool:
        return self.state is Visibility.OPEN

    @property
    def expanded(self) -> bool:
        return self.is_open

    def open(self) -> bool:
        if self.is_open:
            return False
        self.state = Visibility.OPEN
        self._notify("open")
        return True

    def close(self) -> bool:
        if not self.is_open:
            return False
        self.state = Visibility.CLOSED
        self._notify("close")
        return True

    def _notify(self, action: str) -> None:
        input_ref, results_ref = self._refs()
        self._events.emit(TOGGLE, ToggleDetail(action=action, input=input_ref, results=results_ref))
