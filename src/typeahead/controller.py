"""Headless autocomplete: owned state plus query orchestration.

The controller holds the one ResultSet, Selection and Visibility of a
widget instance and exposes the accessibility state derived from them.
Rendering layers watch ``events`` and reflect that state outward.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Callable

from typeahead.commit import CommitController
from typeahead.config import AutocompleteConfig
from typeahead.debounce import DebounceScheduler
from typeahead.dispatch import InteractionDispatcher
from typeahead.events import (
    ERROR,
    FOCUS,
    LOAD,
    LOADEND,
    LOADSTART,
    RESULTS,
    VALUE,
    Emitter,
    ErrorDetail,
)
from typeahead.fetch import ResultFetcher
from typeahead.options import EMPTY, Option, OptionIds, ResultSet, build_result_set
from typeahead.selection import SelectionManager
from typeahead.visibility import VisibilityState

logger = logging.getLogger(__name__)

Spawn = Callable[[Awaitable[None]], Any]


class Field:
    """A text field: the visible input or the hidden output.

    ``events`` carries ``input`` and ``change`` notifications raised when
    the controller commits a value into the field.
    """

    def __init__(self, value: str = "") -> None:
        self.value = value
        self.events = Emitter()

    def __repr__(self) -> str:
        return f"Field({self.value!r})"


class AutocompleteController:
    """State machine and fetch orchestration for one autocomplete instance.

    Args:
        config: Settings; a missing ``url`` silently disables fetching.
        hidden: Create a hidden output field that receives committed values.
        fetcher: Override the fetcher built from ``config.url``.
        spawn: Runs fetch coroutines in the background. Defaults to an
            asyncio task whose failure is logged.
    """

    def __init__(
        self,
        config: AutocompleteConfig | None = None,
        *,
        hidden: bool = False,
        fetcher: ResultFetcher | None = None,
        spawn: Spawn | None = None,
    ) -> None:
        self.config = config or AutocompleteConfig()
        self.events = Emitter()
        self.input = Field()
        self.hidden: Field | None = Field() if hidden else None
        self.results: ResultSet = EMPTY

        if fetcher is None and self.config.can_fetch:
            fetcher = ResultFetcher(self.config.url, self.config.query_param)
        self.fetcher = fetcher

        self.ids = OptionIds()
        self.selection = SelectionManager(self.events)
        self.visibility = VisibilityState(self.events, lambda: (self.input, self.results))
        self.debounce = DebounceScheduler(self.config.delay)
        self.committer = CommitController(self)
        self.dispatcher = InteractionDispatcher(self)

        self._spawn = spawn or self._spawn_task
        self._tasks: set[asyncio.Task] = set()
        self._pending_query = 0

    # -- accessibility state -----------------------------------------------

    @property
    def expanded(self) -> bool:
        return self.visibility.expanded

    @property
    def selected_option(self) -> Option | None:
        return self.selection.selected

    @property
    def active_descendant(self) -> str | None:
        """Id of the selected option while the list is open."""
        if not self.visibility.is_open or self.selection.selected is None:
            return None
        return self.selection.selected.id

    @property
    def value(self) -> str:
        """Authoritative committed value: the hidden field if any, else the input."""
        return self.hidden.value if self.hidden is not None else self.input.value

    # -- input surface -----------------------------------------------------

    def write_input(self, text: str) -> None:
        """Set the visible input's text from code (not user typing)."""
        self.input.value = text
        self.events.emit(VALUE, text)

    def focus_input(self) -> None:
        self.events.emit(FOCUS)

    # -- visibility --------------------------------------------------------

    def open(self) -> None:
        self.visibility.open()

    def close(self) -> None:
        self.visibility.close()

    def hide_and_remove_options(self) -> None:
        """Close the list and drop the current result set."""
        self.close()
        self._install(EMPTY)

    # -- results -----------------------------------------------------------

    def replace_results(self, markup: str) -> ResultSet:
        """Install options parsed from *markup* and open or close accordingly."""
        results = build_result_set(markup, self.ids, self.config.results_id)
        self._install(results)
        if results:
            self.open()
            options = results.navigable
            if options:
                self.selection.select(options[0])
        else:
            self.close()
        return results

    def _install(self, results: ResultSet) -> None:
        self.results = results
        self.selection.reset(results)
        self.events.emit(RESULTS, results)

    # -- fetching ----------------------------------------------------------

    def fetch_input(self) -> bool:
        """Start a fetch for the trimmed input if it is long enough.

        Returns False when the query is shorter than ``min_length``.
        """
        query = self.input.value.strip()
        if len(query) < self.config.min_length:
            return False
        self._spawn(self.fetch_results(query))
        return True

    async def fetch_results(self, query: str) -> None:
        """Fetch and install results for *query*.

        Failures emit ``error`` and ``loadend`` and are re-raised. A response
        that is no longer the latest issued request is discarded, and so is
        its failure (only ``loadend`` is emitted).
        """
        if self.fetcher is None:
            return

        self._pending_query += 1
        token = self._pending_query
        self.events.emit(LOADSTART)
        try:
            markup = await self.fetcher.fetch(query)
            if token == self._pending_query:
                self.replace_results(markup)
            else:
                logger.debug("discarding stale results for %r", query)
        except Exception as exc:
            if token != self._pending_query:
                logger.debug("ignoring failure of stale query %r: %s", query, exc)
                self.events.emit(LOADEND)
                return
            self.events.emit(ERROR, ErrorDetail(exc))
            self.events.emit(LOADEND)
            raise
        self.events.emit(LOAD)
        self.events.emit(LOADEND)

    def _spawn_task(self, coro: Awaitable[None]) -> asyncio.Task:
        task = asyncio.ensure_future(coro)
        self._tasks.add(task)
        task.add_done_callback(self._on_task_done)
        return task

    def _on_task_done(self, task: asyncio.Task) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.warning("suggestion fetch failed: %s", exc)

    # -- lifecycle ---------------------------------------------------------

    def disconnect(self) -> None:
        """Cancel the debounce timer and ignore any response still in flight."""
        self.debounce.cancel()
        self._pending_query += 1

    async def aclose(self) -> None:
        self.disconnect()
        if self.fetcher is not None:
            await self.fetcher.aclose()
