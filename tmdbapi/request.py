"""Assembly of outbound TMDb requests. Nothing here touches the network."""

from __future__ import annotations

from string import Formatter
from typing import Any, Mapping, Optional, Sequence, Union

import httpx

from tmdbapi.endpoints import Endpoint
from tmdbapi.errors import RequestBuildError
from tmdbapi.query import encode_query

PathArg = Union[int, str]


def _slot_count(template: str) -> int:
    return sum(1 for _, field, _, _ in Formatter().parse(template) if field is not None)


def _render_path_arg(arg: PathArg) -> str:
    if isinstance(arg, bool) or not isinstance(arg, (int, str)):
        raise RequestBuildError(f"unsupported path argument: {arg!r}")
    if isinstance(arg, str) and not arg:
        raise RequestBuildError("path argument must not be empty")
    return str(arg)


def render_path(template: str, path_args: Sequence[PathArg] = ()) -> str:
    """Substitute ``path_args`` positionally into ``template``."""
    expected = _slot_count(template)
    if expected != len(path_args):
        raise RequestBuildError(
            f"path {template!r} takes {expected} argument(s), got {len(path_args)}"
        )
    return template.format(*(_render_path_arg(arg) for arg in path_args))


def build_headers(credential: str) -> dict[str, str]:
    return {
        "Authorization": f"Bearer {credential}",
        "accept": "application/json",
    }


def build_request(
    endpoint: Endpoint,
    path_args: Sequence[PathArg] = (),
    params: Optional[Mapping[str, Any]] = None,
    *,
    credential: str,
    base_url: str,
) -> httpx.Request:
    """Build the GET request for ``endpoint``.

    Query entries are emitted sorted by key so that the same inputs always
    yield byte-identical URLs regardless of the endpoint's declared order.
    """
    if not credential:
        raise RequestBuildError("a credential is required to build a request")

    url = f"{base_url.rstrip('/')}/{render_path(endpoint.path, path_args)}"
    entries = encode_query(params or {}, endpoint.params)
    entries.sort(key=lambda entry: entry[0])

    return httpx.Request(
        endpoint.method,
        url,
        params=entries or None,
        headers=build_headers(credential),
    )
