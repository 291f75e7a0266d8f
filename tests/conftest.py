"""Shared fixtures: canned suggestion fragments and a mock endpoint."""

import httpx
import pytest

from typeahead.config import AutocompleteConfig
from typeahead.controller import AutocompleteController
from typeahead.fetch import ResultFetcher

URL = "https://example.com/search"

THREE_OPTIONS = """
<ul>
  <li role="option">Alice</li>
  <li role="option">Bob</li>
  <li role="option">Charlie</li>
</ul>
"""


class Endpoint:
    """Records requests and answers them from a query -> (status, body) table."""

    def __init__(self, responses=None, default=(200, "")):
        self.responses = dict(responses or {})
        self.default = default
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        status, body = self.responses.get(request.url.params.get("q"), self.default)
        return httpx.Response(status, text=body)

    @property
    def queries(self) -> list[str]:
        return [r.url.params.get("q") for r in self.requests]

    def fetcher(self, url: str = URL, query_param: str = "q") -> ResultFetcher:
        client = httpx.AsyncClient(transport=httpx.MockTransport(self))
        return ResultFetcher(url, query_param, client=client)


class Recorder:
    """Collects notifications emitted by a controller, in order."""

    def __init__(self, controller, *names):
        self.seen: list[tuple[str, object]] = []
        for name in names:
            controller.events.watch(name, lambda detail, name=name: self.seen.append((name, detail)))

    @property
    def names(self) -> list[str]:
        return [name for name, _ in self.seen]

    def details(self, name: str) -> list:
        return [detail for n, detail in self.seen if n == name]


@pytest.fixture
def endpoint():
    return Endpoint(default=(200, THREE_OPTIONS))


def make_controller(endpoint=None, hidden=True, **settings):
    settings.setdefault("url", URL)
    settings.setdefault("delay", 10)
    config = AutocompleteConfig(**settings)
    fetcher = endpoint.fetcher(config.url) if endpoint is not None else None
    return AutocompleteController(config, hidden=hidden, fetcher=fetcher)
