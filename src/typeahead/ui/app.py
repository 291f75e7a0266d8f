"""Demo application: one autocomplete field wired to an endpoint."""

from __future__ import annotations

from textual.app import App, ComposeResult
from textual.containers import Vertical
from textual.widgets import Footer, Header, Static

from typeahead.config import AutocompleteConfig
from typeahead.fetch import ResultFetcher
from typeahead.ui.widget import Autocomplete, QueryInput


class TypeaheadApp(App):
    """Try an autocomplete endpoint from the terminal."""

    CSS = """
    #main {
        padding: 1 2;
        height: auto;
    }
    #status, #value {
        margin-top: 1;
        color: $text-muted;
    }
    """

    TITLE = "typeahead"
    BINDINGS = [("ctrl+q", "quit", "Quit"), ("ctrl+l", "clear", "Clear")]

    def __init__(self, config: AutocompleteConfig, fetcher: ResultFetcher | None = None):
        super().__init__()
        self.config = config
        self._fetcher = fetcher
        self.autocomplete: Autocomplete | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="main"):
            self.autocomplete = Autocomplete(
                self.config, placeholder="Type to search", fetcher=self._fetcher, id="search"
            )
            yield self.autocomplete
            yield Static("", id="status")
            yield Static("", id="value")
        yield Footer()

    def on_mount(self) -> None:
        self.query_one(QueryInput).focus()
        if not self.config.can_fetch:
            self._status("no url configured, suggestions disabled")

    def _status(self, text: str) -> None:
        self.query_one("#status", Static).update(text)

    def on_autocomplete_load_started(self, event: Autocomplete.LoadStarted) -> None:
        self._status("loading…")

    def on_autocomplete_loaded(self, event: Autocomplete.Loaded) -> None:
        self._status("")

    def on_autocomplete_load_failed(self, event: Autocomplete.LoadFailed) -> None:
        self._status(f"error: {event.error}")

    def on_autocomplete_changed(self, event: Autocomplete.Changed) -> None:
        label = f" ({event.text_value})" if event.text_value and event.text_value != event.value else ""
        self.query_one("#value", Static).update(f"value: {event.value}{label}")

    def on_autocomplete_navigate(self, event: Autocomplete.Navigate) -> None:
        if event.href:
            self.open_url(event.href)

    def action_clear(self) -> None:
        self.query_one(Autocomplete).clear()
        self.query_one("#value", Static).update("")

    async def action_quit(self) -> None:
        """Close the HTTP client and quit."""
        if self.autocomplete is not None:
            await self.autocomplete.controller.aclose()
        self.exit()
