"""Single active option within a result set."""

from __future__ import annotations

from typeahead.events import SELECT, Emitter
from typeahead.options import EMPTY, Option, ResultSet


class SelectionManager:
    """Tracks the selected option and moves it with wraparound.

    ``select`` notifies ``select`` on *events* with the new option so the
    rendering layer can mark it active and scroll it into view.
    """

    def __init__(self, events: Emitter) -> None:
        self._events = events
        self.result_set: ResultSet = EMPTY
        self.selected: Option | None = None

    @property
    def index(self) -> int | None:
        """Position of the selected option in the full result set."""
        if self.selected is None:
            return None
        return self.result_set.index(self.selected)

    def reset(self, result_set: ResultSet) -> None:
        """Track a new result set; any previous selection is dropped."""
        self.result_set = result_set
        self.selected = None

    def advance(self, forward: bool) -> Option | None:
        """Return the next (or previous) navigable option, wrapping at the ends."""
        options = self.result_set.navigable
        if not options:
            return None
        try:
            index = options.index(self.selected)
        except ValueError:
            index = -1
        if forward:
            return options[index + 1] if 0 <= index + 1 < len(options) else options[0]
        return options[index - 1] if index > 0 else options[-1]

    def select(self, option: Option) -> None:
        if option not in self.result_set:
            raise ValueError(f"{option.id} is not in the current result set")
        self.selected = option
        self._events.emit(SELECT, option)
