"""Static catalog of the TMDb v3 endpoints exposed by the client."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from tmdbapi.query import DISCOVER_FIELDS


@dataclass(slots=True, frozen=True)
class Endpoint:
    """A single API operation.

    ``path`` is relative to the API base URL and may hold positional ``{}``
    slots for path arguments. ``params`` lists the query fields the operation
    accepts, in the order they are encoded.
    """

    name: str
    path: str
    params: tuple[str, ...]
    method: str = "GET"


_MOVIE_LIST_PARAMS = ("language", "page", "region")

ENDPOINTS: Mapping[str, Endpoint] = MappingProxyType(
    {
        endpoint.name: endpoint
        for endpoint in (
            Endpoint("now_playing", "movie/now_playing", _MOVIE_LIST_PARAMS),
            Endpoint("popular", "movie/popular", _MOVIE_LIST_PARAMS),
            Endpoint("top_rated", "movie/top_rated", _MOVIE_LIST_PARAMS),
            Endpoint("upcoming", "movie/upcoming", _MOVIE_LIST_PARAMS),
            Endpoint(
                "search",
                "search/movie",
                (
                    "query",
                    "include_adult",
                    "language",
                    "primary_release_year",
                    "page",
                    "region",
                    "year",
                ),
            ),
            Endpoint("similar", "movie/{}/similar", ("language", "page")),
            Endpoint("credits", "movie/{}/credits", ("language",)),
            Endpoint("details", "movie/{}", ("language",)),
            Endpoint("reviews", "movie/{}/reviews", ("language", "page")),
            Endpoint("genres", "genre/movie/list", ("language",)),
            Endpoint("discover", "discover/movie", DISCOVER_FIELDS),
        )
    }
)


def get_endpoint(name: str) -> Endpoint:
    return ENDPOINTS[name]
