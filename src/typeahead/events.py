"""Named notifications and their payloads."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from typeahead.options import Option

Listener = Callable[[Any], None]

LOADSTART = "loadstart"
LOAD = "load"
ERROR = "error"
LOADEND = "loadend"
TOGGLE = "toggle"
CHANGE = "autocomplete.change"
NAVIGATE = "navigate"

# Rendering sync, consumed by the widget layer.
RESULTS = "results"
SELECT = "select"
VALUE = "value"
FOCUS = "focus"


@dataclass(frozen=True)
class ToggleDetail:
    action: str
    input: Any
    results: Any


@dataclass
class ChangeDetail:
    """Payload of ``autocomplete.change``."""

    value: str = ""
    text_value: str | None = None
    selected_option: Option | None = None


@dataclass(frozen=True)
class ErrorDetail:
    error: BaseException


class Emitter:
    """Dispatches named notifications to watchers.

    Watchers are called synchronously in registration order with the
    notification's detail (or None).
    """

    def __init__(self) -> None:
        self._watchers: dict[str, list[Listener]] = {}

    def watch(self, name: str, callback: Listener) -> Callable[[], None]:
        """Watch a notification. Returns an unwatch callable."""
        self._watchers.setdefault(name, []).append(callback)

        def unwatch() -> None:
            callbacks = self._watchers.get(name, [])
            if callback in callbacks:
                callbacks.remove(callback)

        return unwatch

    def emit(self, name: str, detail: Any = None) -> None:
        for cb in list(self._watchers.get(name, ())):
            cb(detail)
