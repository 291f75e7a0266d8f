"""Retrieve suggestion markup from the configured endpoint."""

from __future__ import annotations

import logging

import httpx

from typeahead.errors import FetchError

logger = logging.getLogger(__name__)

# Lets the server tell an autocomplete request apart from a full page load.
HEADERS = {
    "Accept-Variant": "Autocomplete",
    "X-Requested-With": "XMLHttpRequest",
}


class ResultFetcher:
    """Builds query URLs and GETs suggestion fragments.

    Args:
        url: Endpoint, possibly already carrying query parameters.
        query_param: Name of the parameter holding the typed query.
        client: Optional shared ``httpx.AsyncClient``. When omitted the
            fetcher creates one on first use and closes it in ``aclose``.
    """

    def __init__(
        self,
        url: str,
        query_param: str = "q",
        *,
        client: httpx.AsyncClient | None = None,
        timeout: float = 10.0,
    ) -> None:
        self.url = url
        self.query_param = query_param
        self._client = client
        self._owns_client = client is None
        self._timeout = timeout

    def build_url(self, query: str) -> httpx.URL:
        """Append ``query_param=query`` to the endpoint, keeping existing params."""
        return httpx.URL(self.url).copy_add_param(self.query_param, query)

    async def fetch(self, query: str) -> str:
        """GET the suggestions for *query* and return the body text.

        Raises:
            FetchError: The server answered with a non-2xx status.
            httpx.HTTPError: The request could not be made.
        """
        url = self.build_url(query)
        logger.debug("fetching %s", url)
        response = await self._get_client().get(url, headers=HEADERS)
        if not response.is_success:
            raise FetchError(response.status_code)
        return response.text

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout)
        return self._client

    async def aclose(self) -> None:
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None
