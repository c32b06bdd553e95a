from __future__ import annotations

from typing import Any, Callable

import httpx
import pytest

from payloads import TOKEN
from tmdbapi import TMDbClient


@pytest.fixture
def requests_seen() -> list[httpx.Request]:
    return []


@pytest.fixture
def make_client(requests_seen: list[httpx.Request]) -> Callable[..., TMDbClient]:
    """Build a client whose HTTP traffic is answered by ``handler``."""

    def factory(handler: Callable[[httpx.Request], Any], credential: str = TOKEN) -> TMDbClient:
        def recording_handler(request: httpx.Request) -> Any:
            requests_seen.append(request)
            return handler(request)

        http_client = httpx.AsyncClient(transport=httpx.MockTransport(recording_handler))
        return TMDbClient(credential, http_client=http_client)

    return factory
