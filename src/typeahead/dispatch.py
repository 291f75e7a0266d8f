"""Keyboard and pointer policy.

Maps host events onto the controller. Keys are looked up in an explicit
table; a handler returns a ``KeyResult`` telling the host whether to
suppress the key's default action and stop it propagating.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from typeahead.controller import AutocompleteController


class Key(Enum):
    """Keys with autocomplete behaviour, valued by their Textual key names."""

    ESCAPE = "escape"
    ARROW_DOWN = "down"
    ARROW_UP = "up"
    TAB = "tab"
    ENTER = "enter"


_KEYS = {key.value: key for key in Key}


@dataclass(frozen=True)
class KeyResult:
    prevent_default: bool = False
    stop: bool = False


PASS = KeyResult()
PREVENT = KeyResult(prevent_default=True)


class InteractionDispatcher:
    def __init__(self, controller: AutocompleteController) -> None:
        self._ctl = controller
        self.pointer_down = False
        self._handlers: dict[Key, Callable[[], KeyResult]] = {
            Key.ESCAPE: self._on_escape,
            Key.ARROW_DOWN: self._on_arrow_down,
            Key.ARROW_UP: self._on_arrow_up,
            Key.TAB: self._on_tab,
            Key.ENTER: self._on_enter,
        }

    # -- keyboard ----------------------------------------------------------

    def key(self, name: str | Key) -> KeyResult:
        """Handle a key press; unknown keys pass through untouched."""
        key = name if isinstance(name, Key) else _KEYS.get(name)
        if key is None:
            return PASS
        return self._handlers[key]()

    def _on_escape(self) -> KeyResult:
        if not self._ctl.visibility.is_open:
            return PASS
        self._ctl.hide_and_remove_options()
        return KeyResult(prevent_default=True, stop=True)

    def _on_arrow_down(self) -> KeyResult:
        ctl = self._ctl
        if ctl.visibility.is_open:
            self._move(forward=True)
            return PREVENT
        if ctl.config.reveal_on_keydown:
            ctl.fetch_input()
        return PASS

    def _on_arrow_up(self) -> KeyResult:
        self._move(forward=False)
        return PREVENT

    def _move(self, forward: bool) -> None:
        option = self._ctl.selection.advance(forward)
        if option is not None:
            self._ctl.selection.select(option)

    def _on_tab(self) -> KeyResult:
        selected = self._ctl.selection.selected
        if selected is not None:
            self._ctl.committer.commit(selected)
        return PASS

    def _on_enter(self) -> KeyResult:
        ctl = self._ctl
        selected = ctl.selection.selected
        value = ctl.input.value
        committed = False

        if selected is not None and ctl.visibility.is_open:
            ctl.committer.commit(selected)
            committed = True
        elif selected is None and not ctl.config.require_match and value:
            ctl.committer.commit_value(value)
            committed = True

        if committed and ctl.config.submit_on_enter:
            return PASS
        return PREVENT

    # -- input surface -----------------------------------------------------

    def input_changed(self, value: str | None = None) -> None:
        """The user edited the input; *value* is its new text if known."""
        ctl = self._ctl
        if value is not None:
            ctl.input.value = value
        if ctl.hidden is not None:
            ctl.hidden.value = ""
        ctl.debounce.schedule(self._on_input_settled)

    def _on_input_settled(self) -> None:
        if not self._ctl.fetch_input():
            self._ctl.hide_and_remove_options()

    def _already_committed(self) -> bool:
        hidden = self._ctl.hidden
        return hidden is not None and bool(hidden.value)

    def click(self) -> None:
        if self._already_committed():
            return
        if self._ctl.config.reveal_on_click:
            self._ctl.fetch_input()

    def focus(self) -> None:
        if self._already_committed():
            return
        if self._ctl.config.reveal_on_focus:
            self._ctl.fetch_input()

    def blur(self) -> None:
        if self.pointer_down:
            return
        self._ctl.close()

    # -- results surface ---------------------------------------------------

    def results_pointer_down(self) -> None:
        self.pointer_down = True

    def results_pointer_up(self) -> None:
        self.pointer_down = False

    def option_clicked(self, option_id: str) -> None:
        """Commit the option with *option_id*; disabled or unknown ids are ignored."""
        option = self._ctl.results.get(option_id)
        if option is not None:
            self._ctl.committer.commit(option)
