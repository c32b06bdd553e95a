"""Typed async client for The Movie Database (TMDb) API v3."""

from tmdbapi.client import TMDbClient, get_tmdb_client
from tmdbapi.enums import SortBy, WatchMonetizationType
from tmdbapi.errors import (
    ConfigurationError,
    DecodeError,
    RequestBuildError,
    StatusError,
    TMDbAPIError,
    TMDbError,
    TransportError,
)
from tmdbapi.images import original_image_url, sized_image_url
from tmdbapi.models import (
    AuthorDetails,
    Cast,
    Collection,
    Crew,
    DateMovieListResponse,
    DateRange,
    Genre,
    GenreListResponse,
    MovieCreditsResponse,
    MovieDetailsResponse,
    MovieListResponse,
    MovieReviewsResponse,
    ProductionCompany,
    ProductionCountry,
    Review,
    SimpleMovie,
    SpokenLanguage,
)
from tmdbapi.query import DiscoverFilter
from tmdbapi.settings import TMDbSettings, get_settings

__all__ = [
    "AuthorDetails",
    "Cast",
    "Collection",
    "ConfigurationError",
    "Crew",
    "DateMovieListResponse",
    "DateRange",
    "DecodeError",
    "DiscoverFilter",
    "Genre",
    "GenreListResponse",
    "MovieCreditsResponse",
    "MovieDetailsResponse",
    "MovieListResponse",
    "MovieReviewsResponse",
    "ProductionCompany",
    "ProductionCountry",
    "RequestBuildError",
    "Review",
    "SimpleMovie",
    "SortBy",
    "SpokenLanguage",
    "StatusError",
    "TMDbAPIError",
    "TMDbClient",
    "TMDbError",
    "TMDbSettings",
    "TransportError",
    "WatchMonetizationType",
    "get_settings",
    "get_tmdb_client",
    "original_image_url",
    "sized_image_url",
]
