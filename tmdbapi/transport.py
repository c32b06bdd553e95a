from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Optional

import httpx

from tmdbapi.errors import StatusError, TransportError

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class RawResponse:
    """A completed 200 response, body not yet decoded."""

    status_code: int
    body: bytes


def _status_message(response: httpx.Response) -> str:
    """Pull TMDb's ``status_message`` out of an error body when there is one."""
    fallback = response.reason_phrase or f"HTTP {response.status_code}"
    try:
        error_data = response.json()
    except ValueError:
        return fallback
    if isinstance(error_data, dict):
        return str(error_data.get("status_message") or fallback)
    return fallback


class Transport:
    """Sends prepared requests and classifies the outcome.

    One attempt per call: no retries. A 200 yields a ``RawResponse``; any
    other status raises ``StatusError`` and a request that never completes
    raises ``TransportError``.
    """

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        *,
        timeout: float = 30.0,
    ) -> None:
        self._client = client or httpx.AsyncClient(timeout=timeout)

    async def send(
        self, request: httpx.Request, *, deadline: Optional[float] = None
    ) -> RawResponse:
        """Issue ``request``; ``deadline`` bounds the whole round trip in seconds."""
        logger.debug("%s %s", request.method, request.url)
        try:
            if deadline is None:
                response = await self._client.send(request)
            else:
                response = await asyncio.wait_for(
                    self._client.send(request), timeout=deadline
                )
        except asyncio.TimeoutError as e:
            logger.warning("TMDb request to %s exceeded %.3fs deadline", request.url.path, deadline)
            raise TransportError(f"deadline of {deadline}s exceeded") from e
        except httpx.RequestError as e:
            logger.warning("TMDb request to %s failed: %s", request.url.path, e)
            raise TransportError(str(e) or e.__class__.__name__) from e

        logger.debug("TMDb responded %s for %s", response.status_code, request.url.path)
        if response.status_code != httpx.codes.OK:
            logger.warning(
                "TMDb returned status %s for %s", response.status_code, request.url.path
            )
            raise StatusError(
                response.status_code, _status_message(response), response.text
            )
        return RawResponse(status_code=response.status_code, body=response.content)

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()
