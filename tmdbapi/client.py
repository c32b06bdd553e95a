from __future__ import annotations

import logging
from typing import Any, Optional, Sequence, TypeVar

import httpx

from tmdbapi.decoder import decode
from tmdbapi.endpoints import get_endpoint
from tmdbapi.errors import ConfigurationError
from tmdbapi.images import IMAGE_BASE_URL, image_url
from tmdbapi.models import (
    DateMovieListResponse,
    GenreListResponse,
    MovieCreditsResponse,
    MovieDetailsResponse,
    MovieListResponse,
    MovieReviewsResponse,
    TMDbModel,
)
from tmdbapi.query import DiscoverFilter
from tmdbapi.request import PathArg, build_request
from tmdbapi.settings import TMDbSettings, get_settings
from tmdbapi.transport import Transport

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=TMDbModel)


class TMDbClient:
    """Client for The Movie Database (TMDb) API v3.

    Every operation is one GET: the request is built from the typed
    arguments, sent once, and the 200 body decoded into a response model.
    Failures raise ``TransportError``, ``StatusError`` or ``DecodeError``;
    nothing is retried.

    Every operation accepts ``deadline``, the number of seconds allowed for
    the round trip. Cancelling the calling task aborts the request as well.

    Documentation: https://developer.themoviedb.org/docs
    API Reference: https://developer.themoviedb.org/reference
    """

    BASE_URL = "https://api.themoviedb.org/3"
    IMAGE_BASE_URL = IMAGE_BASE_URL

    def __init__(
        self,
        credential: str,
        *,
        base_url: str = BASE_URL,
        image_base_url: str = IMAGE_BASE_URL,
        timeout: float = 30.0,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """Initialize TMDb client.

        Args:
            credential: TMDb API Read Access Token (or v3 API key), sent as a Bearer token
            base_url: API root, without trailing slash
            image_base_url: Image CDN root used by ``get_image_url``
            timeout: Default per-request timeout for the owned HTTP client
            http_client: Optional preconfigured ``httpx.AsyncClient``
        """
        if not credential:
            raise ConfigurationError("TMDb API credential is missing or empty")
        self._credential = credential
        self.base_url = base_url
        self.image_base_url = image_base_url
        self._transport = Transport(http_client, timeout=timeout)

    @classmethod
    def from_settings(
        cls, settings: TMDbSettings, *, http_client: Optional[httpx.AsyncClient] = None
    ) -> TMDbClient:
        return cls(
            settings.credential,
            base_url=settings.base_url,
            image_base_url=settings.image_base_url,
            timeout=settings.timeout,
            http_client=http_client,
        )

    def build(
        self,
        endpoint_name: str,
        path_args: Sequence[PathArg] = (),
        params: Optional[dict[str, Any]] = None,
    ) -> httpx.Request:
        """Build the outbound request for an operation without sending it."""
        return build_request(
            get_endpoint(endpoint_name),
            path_args,
            params,
            credential=self._credential,
            base_url=self.base_url,
        )

    async def _request(
        self,
        endpoint_name: str,
        shape: type[ModelT],
        *,
        path_args: Sequence[PathArg] = (),
        params: Optional[dict[str, Any]] = None,
        deadline: Optional[float] = None,
    ) -> ModelT:
        """Make an authenticated request to the TMDb API and decode the body."""
        request = self.build(endpoint_name, path_args, params)
        raw = await self._transport.send(request, deadline=deadline)
        return decode(raw.body, shape)

    async def get_movies_now_playing(
        self,
        language: Optional[str] = None,
        page: Optional[int] = None,
        region: Optional[str] = None,
        *,
        deadline: Optional[float] = None,
    ) -> DateMovieListResponse:
        """Movies currently in theatres."""
        return await self._request(
            "now_playing",
            DateMovieListResponse,
            params={"language": language, "page": page, "region": region},
            deadline=deadline,
        )

    async def get_movies_popular(
        self,
        language: Optional[str] = None,
        page: Optional[int] = None,
        region: Optional[str] = None,
        *,
        deadline: Optional[float] = None,
    ) -> MovieListResponse:
        return await self._request(
            "popular",
            MovieListResponse,
            params={"language": language, "page": page, "region": region},
            deadline=deadline,
        )

    async def get_movies_top_rated(
        self,
        language: Optional[str] = None,
        page: Optional[int] = None,
        region: Optional[str] = None,
        *,
        deadline: Optional[float] = None,
    ) -> MovieListResponse:
        return await self._request(
            "top_rated",
            MovieListResponse,
            params={"language": language, "page": page, "region": region},
            deadline=deadline,
        )

    async def get_movies_upcoming(
        self,
        language: Optional[str] = None,
        page: Optional[int] = None,
        region: Optional[str] = None,
        *,
        deadline: Optional[float] = None,
    ) -> DateMovieListResponse:
        """Movies about to be released, with the covered release window."""
        return await self._request(
            "upcoming",
            DateMovieListResponse,
            params={"language": language, "page": page, "region": region},
            deadline=deadline,
        )

    async def search_movies(
        self,
        query: str,
        *,
        include_adult: bool = False,
        language: Optional[str] = None,
        primary_release_year: Optional[int] = None,
        page: Optional[int] = None,
        region: Optional[str] = None,
        year: Optional[int] = None,
        deadline: Optional[float] = None,
    ) -> MovieListResponse:
        """Search for movies by title.

        Args:
            query: Title to search for; must not be empty
            include_adult: Include adult content in results (always sent)
            language: Language for results (ISO 639-1 code with optional country)
            primary_release_year: Filter by primary release year
            page: Page number (1-based)
            region: ISO 3166-1 region used to pick release dates
            year: Filter by any release year

        Returns:
            One page of matching movies
        """
        return await self._request(
            "search",
            MovieListResponse,
            params={
                "query": query,
                "include_adult": include_adult,
                "language": language,
                "primary_release_year": primary_release_year,
                "page": page,
                "region": region,
                "year": year,
            },
            deadline=deadline,
        )

    async def get_similar_movies(
        self,
        movie_id: int,
        *,
        language: Optional[str] = None,
        page: Optional[int] = None,
        deadline: Optional[float] = None,
    ) -> MovieListResponse:
        return await self._request(
            "similar",
            MovieListResponse,
            path_args=(movie_id,),
            params={"language": language, "page": page},
            deadline=deadline,
        )

    async def get_movie_credits(
        self,
        movie_id: int,
        *,
        language: Optional[str] = None,
        deadline: Optional[float] = None,
    ) -> MovieCreditsResponse:
        """Cast and crew of a movie."""
        return await self._request(
            "credits",
            MovieCreditsResponse,
            path_args=(movie_id,),
            params={"language": language},
            deadline=deadline,
        )

    async def get_movie_details(
        self,
        movie_id: int,
        *,
        language: Optional[str] = None,
        deadline: Optional[float] = None,
    ) -> MovieDetailsResponse:
        """Get detailed information about a specific movie.

        Args:
            movie_id: TMDb movie ID
            language: Language for results

        Returns:
            MovieDetailsResponse as published by TMDb
        """
        return await self._request(
            "details",
            MovieDetailsResponse,
            path_args=(movie_id,),
            params={"language": language},
            deadline=deadline,
        )

    async def get_movie_reviews(
        self,
        movie_id: int,
        *,
        language: Optional[str] = None,
        page: Optional[int] = None,
        deadline: Optional[float] = None,
    ) -> MovieReviewsResponse:
        return await self._request(
            "reviews",
            MovieReviewsResponse,
            path_args=(movie_id,),
            params={"language": language, "page": page},
            deadline=deadline,
        )

    async def get_movie_genres(
        self,
        language: Optional[str] = None,
        *,
        deadline: Optional[float] = None,
    ) -> GenreListResponse:
        """The official list of movie genres."""
        return await self._request(
            "genres",
            GenreListResponse,
            params={"language": language},
            deadline=deadline,
        )

    async def discover_movies(
        self,
        filters: Optional[DiscoverFilter] = None,
        *,
        deadline: Optional[float] = None,
    ) -> MovieListResponse:
        """Find movies matching ``filters``; unset filters are left out of the query."""
        params = filters.to_params() if filters is not None else None
        return await self._request(
            "discover",
            MovieListResponse,
            params=params,
            deadline=deadline,
        )

    def get_image_url(self, path: Optional[str], size: str = "original") -> Optional[str]:
        """Construct full image URL from TMDb image path.

        Args:
            path: Image path from TMDb (e.g., poster_path, backdrop_path)
            size: Image size (w92, w154, w185, w342, w500, w780, original for posters)
                  (w300, w780, w1280, original for backdrops)

        Returns:
            Full image URL or None if path is None
        """
        return image_url(path, size, self.image_base_url)

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._transport.close()

    async def __aenter__(self) -> TMDbClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(base_url={self.base_url!r})"


def get_tmdb_client(
    settings: Optional[TMDbSettings] = None,
    *,
    http_client: Optional[httpx.AsyncClient] = None,
) -> TMDbClient:
    """Factory function to create a TMDb client instance.

    Args:
        settings: Settings to read the credential and URLs from; defaults to
            the cached environment settings
        http_client: Optional preconfigured ``httpx.AsyncClient``

    Returns:
        Configured TMDb client
    """
    settings = settings or get_settings()
    logger.debug("Creating TMDb client for %s", settings.base_url)
    return TMDbClient.from_settings(settings, http_client=http_client)
