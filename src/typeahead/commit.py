"""Finalize a chosen option or typed value."""

from __future__ import annotations

from typing import TYPE_CHECKING

from typeahead.events import CHANGE, NAVIGATE, ChangeDetail
from typeahead.options import Option

if TYPE_CHECKING:
    from typeahead.controller import AutocompleteController


class CommitController:
    def __init__(self, controller: AutocompleteController) -> None:
        self._ctl = controller

    def commit(self, option: Option) -> None:
        """Commit *option*.

        Disabled options are ignored. Link options emit ``navigate`` with
        their href and close the list instead of committing a value.
        """
        if option.disabled:
            return

        ctl = self._ctl
        if option.is_link:
            ctl.events.emit(NAVIGATE, option.href)
            ctl.close()
            return

        ctl.write_input(option.label)
        self.commit_value(option.value, ChangeDetail(text_value=option.label, selected_option=option))

    def commit_value(self, value: str, detail: ChangeDetail | None = None) -> None:
        """Write *value* to the output, close and clear results, emit one change."""
        ctl = self._ctl
        if ctl.hidden is not None:
            ctl.hidden.value = value
            ctl.hidden.events.emit("input", value)
            ctl.hidden.events.emit("change", value)
        else:
            ctl.write_input(value)

        ctl.focus_input()
        ctl.hide_and_remove_options()

        detail = detail or ChangeDetail()
        detail.value = value
        ctl.events.emit(CHANGE, detail)

    def clear(self) -> None:
        """Empty the input and hidden output without a change notification."""
        ctl = self._ctl
        ctl.write_input("")
        if ctl.hidden is not None:
            ctl.hidden.value = ""
