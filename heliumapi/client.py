"""Asynchronous HTTP client for the blockchain API."""

from __future__ import annotations

from collections.abc import AsyncIterator, Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, TypeVar, Union

import httpx

from .errors import RequestError, UnexpectedValueError
from .models import QueryTimeRange

T = TypeVar("T")

DEFAULT_TIMEOUT = 120
"""The default timeout for API requests, in seconds."""

DEFAULT_BASE_URL = "https://api.helium.io/v1"
"""The base URL used when none is given."""

Query = Union[Mapping[str, Any], Sequence[tuple[str, Any]], QueryTimeRange, None]


@dataclass
class Page:
    """One page of a response: its data and the cursor to the next page."""

    data: Any
    cursor: str | None = None


def _params(query: Query) -> Any:
    if query is None:
        return None
    if isinstance(query, QueryTimeRange):
        return query.to_params()
    return query


class Client:
    """A client for the API rooted at ``base_url``; paths are appended to it."""

    def __init__(self, base_url: str = DEFAULT_BASE_URL, timeout: float = DEFAULT_TIMEOUT) -> None:
        self.base_url = base_url
        self.timeout = timeout
        self._http = httpx.AsyncClient(timeout=timeout)

    async def _send(self, method: str, path: str, **kwargs: Any) -> Mapping:
        url = f"{self.base_url}{path}"
        try:
            response = await self._http.request(method, url, **kwargs)
            response.raise_for_status()
            body = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            raise RequestError(exc) from exc
        if not isinstance(body, Mapping) or "data" not in body:
            raise RequestError(UnexpectedValueError(body))
        return body

    async def fetch_data(self, path: str, query: Query = None) -> Page:
        """Fetch a path and return its data together with any cursor."""
        body = await self._send("GET", path, params=_params(query))
        cursor = body.get("cursor")
        if cursor is not None and not isinstance(cursor, str):
            raise RequestError(UnexpectedValueError(cursor))
        return Page(data=body["data"], cursor=cursor)

    async def fetch(self, path: str, query: Query = None) -> Any:
        """Fetch a path and return only its data."""
        page = await self.fetch_data(path, query)
        return page.data

    async def fetch_stream(
        self,
        path: str,
        query: Query = None,
        parse: Callable[[Any], T] | None = None,
    ) -> AsyncIterator[T]:
        """Yield every entry of a paged listing, following cursors until none is left."""
        convert = parse if parse is not None else (lambda item: item)
        page = await self.fetch_data(path, query)
        while True:
            if not isinstance(page.data, list):
                raise RequestError(UnexpectedValueError(page.data))
            for entry in [convert(item) for item in page.data]:
                yield entry
            if page.cursor is None:
                return
            page = await self.fetch_data(path, [("cursor", page.cursor)])

    async def post(self, path: str, json: Any) -> Any:
        """Post a JSON body to a path and return the data of the response."""
        body = await self._send("POST", path, json=json)
        return body["data"]

    async def aclose(self) -> None:
        """Close the underlying HTTP connections."""
        await self._http.aclose()

    async def __aenter__(self) -> Client:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()


async def collect(stream: AsyncIterator[T]) -> list[T]:
    """Gather every entry of a stream into a list."""
    return [item async for item in stream]