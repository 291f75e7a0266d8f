"""Textual autocomplete input backed by a remote suggestion endpoint."""

from __future__ import annotations

import logging
from typing import Any

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.events import Click, DescendantBlur, DescendantFocus, Key, MouseDown, MouseUp
from textual.message import Message
from textual.widgets import Input, OptionList
from textual.widgets.option_list import Option as ListOption
from textual.worker import Worker, WorkerState

from typeahead import events as ev
from typeahead.config import AutocompleteConfig
from typeahead.controller import AutocompleteController
from typeahead.events import ChangeDetail, ErrorDetail, ToggleDetail
from typeahead.fetch import ResultFetcher
from typeahead.options import Option, ResultSet

logger = logging.getLogger(__name__)


class QueryInput(Input):
    """The visible text input."""

    class Clicked(Message):
        """Posted when the input is clicked."""

    def on_click(self, event: Click) -> None:
        self.post_message(self.Clicked())


class ResultsList(OptionList):
    """Dropdown of suggestions. Never takes focus from the input."""

    can_focus = False

    class PointerDown(Message):
        pass

    class PointerUp(Message):
        pass

    def on_mouse_down(self, event: MouseDown) -> None:
        self.post_message(self.PointerDown())

    def on_mouse_up(self, event: MouseUp) -> None:
        self.post_message(self.PointerUp())


class Autocomplete(Container):
    """Text input with suggestions fetched from ``config.url`` as you type.

    The widget is a rendering layer over an ``AutocompleteController``:
    key, pointer and focus events are forwarded to the controller's
    dispatcher, and controller notifications are reflected onto the
    ``QueryInput`` and ``ResultsList`` children and re-posted as messages.
    """

    DEFAULT_CSS = """
    Autocomplete {
        height: auto;
    }
    Autocomplete > ResultsList {
        display: none;
        max-height: 10;
    }
    Autocomplete > ResultsList.-visible {
        display: block;
    }
    """

    class Changed(Message):
        """Posted once per commit with the committed value."""

        def __init__(
            self,
            autocomplete: Autocomplete,
            value: str,
            text_value: str | None = None,
            selected_option: Option | None = None,
        ) -> None:
            super().__init__()
            self.autocomplete = autocomplete
            self.value = value
            self.text_value = text_value
            self.selected_option = selected_option

        @property
        def control(self) -> Autocomplete:
            return self.autocomplete

    class Toggled(Message):
        """Posted when the result list opens or closes."""

        def __init__(self, autocomplete: Autocomplete, action: str) -> None:
            super().__init__()
            self.autocomplete = autocomplete
            self.action = action

        @property
        def control(self) -> Autocomplete:
            return self.autocomplete

    class LoadStarted(Message):
        pass

    class Loaded(Message):
        pass

    class LoadFailed(Message):
        def __init__(self, error: BaseException) -> None:
            super().__init__()
            self.error = error

    class LoadEnded(Message):
        pass

    class Navigate(Message):
        """Posted when a link option is chosen."""

        def __init__(self, href: str | None) -> None:
            super().__init__()
            self.href = href

    class Submitted(Message):
        """Posted when Enter reaches the input (see ``submit_on_enter``)."""

        def __init__(self, value: str) -> None:
            super().__init__()
            self.value = value

    def __init__(
        self,
        config: AutocompleteConfig | None = None,
        *,
        placeholder: str = "",
        value: str = "",
        hidden: bool = True,
        fetcher: ResultFetcher | None = None,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__(name=name, id=id, classes=classes)
        config = config or AutocompleteConfig()
        if config.results_id is None and id:
            config = config.merged(results_id=f"{id}-results")
        self.controller = AutocompleteController(config, hidden=hidden, fetcher=fetcher, spawn=self._spawn_fetch)
        self.controller.input.value = value
        self._placeholder = placeholder
        self._unwatch: list[Any] = []

    def compose(self) -> ComposeResult:
        yield QueryInput(value=self.controller.input.value, placeholder=self._placeholder)
        yield ResultsList()

    def on_mount(self) -> None:
        handlers = {
            ev.RESULTS: self._render_results,
            ev.SELECT: self._render_selection,
            ev.TOGGLE: self._on_toggle,
            ev.VALUE: self._render_value,
            ev.FOCUS: lambda _: self.query_one(QueryInput).focus(),
            ev.CHANGE: self._on_change,
            ev.NAVIGATE: lambda href: self.post_message(self.Navigate(href)),
            ev.LOADSTART: lambda _: self.post_message(self.LoadStarted()),
            ev.LOAD: lambda _: self.post_message(self.Loaded()),
            ev.ERROR: self._on_error,
            ev.LOADEND: lambda _: self.post_message(self.LoadEnded()),
        }
        for name, handler in handlers.items():
            self._unwatch.append(self.controller.events.watch(name, handler))

    def on_unmount(self) -> None:
        self.controller.disconnect()
        for unwatch in self._unwatch:
            unwatch()
        self._unwatch.clear()

    # -- public API --------------------------------------------------------

    @property
    def value(self) -> str:
        """The committed value."""
        return self.controller.value

    @property
    def is_open(self) -> bool:
        return self.controller.visibility.is_open

    def clear(self) -> None:
        """Empty the input and committed value without posting Changed."""
        self.controller.committer.clear()

    # -- controller -> view ------------------------------------------------

    def _render_results(self, results: ResultSet) -> None:
        results_list = self.query_one(ResultsList)
        results_list.clear_options()
        results_list.add_options([ListOption(Text(o.label), id=o.id, disabled=o.disabled) for o in results])
        results_list.highlighted = None

    def _render_selection(self, option: Option) -> None:
        self.query_one(ResultsList).highlighted = self.controller.selection.index

    def _render_value(self, text: str) -> None:
        query_input = self.query_one(QueryInput)
        if query_input.value != text:
            query_input.value = text
            query_input.cursor_position = len(text)

    def _on_toggle(self, detail: ToggleDetail) -> None:
        self.query_one(ResultsList).set_class(detail.action == "open", "-visible")
        self.post_message(self.Toggled(self, detail.action))

    def _on_change(self, detail: ChangeDetail) -> None:
        self.post_message(self.Changed(self, detail.value, detail.text_value, detail.selected_option))

    def _on_error(self, detail: ErrorDetail) -> None:
        self.post_message(self.LoadFailed(detail.error))

    def _spawn_fetch(self, coro) -> Worker:
        return self.run_worker(coro, group="autocomplete", exit_on_error=False)

    def on_worker_state_changed(self, event: Worker.StateChanged) -> None:
        if event.worker.group == "autocomplete" and event.state == WorkerState.ERROR:
            logger.warning("suggestion fetch failed: %s", event.worker.error)

    # -- view -> controller ------------------------------------------------

    def _on_key(self, event: Key) -> None:
        """Intercept keys before they reach app bindings."""
        result = self.controller.dispatcher.key(event.key)
        if result.prevent_default:
            event.prevent_default()
            event.stop()
        elif result.stop:
            event.stop()

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.value == self.controller.input.value:
            # Written by the controller, not typed.
            return
        self.controller.dispatcher.input_changed(event.value)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.post_message(self.Submitted(self.value))

    def on_query_input_clicked(self, event: QueryInput.Clicked) -> None:
        self.controller.dispatcher.click()

    def on_descendant_focus(self, event: DescendantFocus) -> None:
        self.controller.dispatcher.focus()

    def on_descendant_blur(self, event: DescendantBlur) -> None:
        self.controller.dispatcher.blur()

    def on_results_list_pointer_down(self, event: ResultsList.PointerDown) -> None:
        self.controller.dispatcher.results_pointer_down()

    def on_results_list_pointer_up(self, event: ResultsList.PointerUp) -> None:
        self.controller.dispatcher.results_pointer_up()

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        event.stop()
        if event.option.id is not None:
            self.controller.dispatcher.option_clicked(event.option.id)
