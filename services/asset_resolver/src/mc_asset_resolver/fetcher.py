"""HTTP access to upstream JSON documents."""

from __future__ import annotations

import logging
from typing import Any, Protocol

import httpx

from .exceptions import FetchError

logger = logging.getLogger(__name__)


class Fetcher(Protocol):
    """Anything able to GET a URL and decode its JSON body."""

    async def fetch_json(self, url: str) -> Any:
        ...


class RemoteFetcher:
    """Single-shot JSON GET over a shared ``httpx.AsyncClient``.

    No retry and no backoff: a non-2xx answer raises ``FetchError`` right away,
    transport errors from httpx propagate unchanged.
    """

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def fetch_json(self, url: str) -> Any:
        logger.debug("GET %s", url)
        response = await self._client.get(url)
        if not response.is_success:
            raise FetchError(response.status_code, response.reason_phrase, url)
        return response.json()
