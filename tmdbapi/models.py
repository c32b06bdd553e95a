"""Response models for the TMDb movie endpoints.

Models mirror the upstream JSON field for field. They are validated in
strict mode: a required field that is missing or of the wrong JSON type
fails the whole decode. Fields TMDb documents as nullable are ``Optional``
and default to ``None``, which keeps "absent" apart from a real ``0``.
Keys the models do not declare are ignored.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class TMDbModel(BaseModel):
    model_config = ConfigDict(frozen=True, strict=True, extra="ignore")


class DateRange(TMDbModel):
    """Release window covered by a dated movie list."""

    maximum: str
    minimum: str


class Genre(TMDbModel):
    """Represents a movie genre."""

    id: int
    name: str


class ProductionCompany(TMDbModel):
    """Represents a production company."""

    id: int
    name: str
    logo_path: Optional[str] = None
    origin_country: Optional[str] = None


class ProductionCountry(TMDbModel):
    """Represents a production country."""

    iso_3166_1: str
    name: str


class SpokenLanguage(TMDbModel):
    """Represents a spoken language."""

    iso_639_1: str
    name: str
    english_name: str


class Collection(TMDbModel):
    """The collection a movie belongs to (e.g. a franchise)."""

    id: int
    name: str
    poster_path: Optional[str] = None
    backdrop_path: Optional[str] = None


class SimpleMovie(TMDbModel):
    """A movie as it appears in list, search and discover results."""

    id: int
    title: str
    original_title: str
    original_language: str
    overview: str
    adult: bool
    video: bool
    genre_ids: list[int]
    release_date: Optional[str] = None
    poster_path: Optional[str] = None
    backdrop_path: Optional[str] = None
    popularity: Optional[float] = None
    vote_average: Optional[float] = None
    vote_count: Optional[int] = None


class MovieListResponse(TMDbModel):
    """A page of movies."""

    page: int
    results: list[SimpleMovie]
    total_pages: int
    total_results: int


class DateMovieListResponse(MovieListResponse):
    """A page of movies restricted to a release window (now playing, upcoming)."""

    dates: DateRange


class Cast(TMDbModel):
    """Represents a cast member in a movie."""

    id: int
    adult: bool
    name: str
    original_name: str
    known_for_department: str
    credit_id: str
    cast_id: int
    character: str
    gender: Optional[int] = None
    popularity: Optional[float] = None
    profile_path: Optional[str] = None
    order: Optional[int] = None


class Crew(TMDbModel):
    """Represents a crew member in a movie."""

    id: int
    adult: bool
    name: str
    original_name: str
    known_for_department: str
    credit_id: str
    department: str
    gender: Optional[int] = None
    popularity: Optional[float] = None
    profile_path: Optional[str] = None
    job: Optional[str] = None


class MovieCreditsResponse(TMDbModel):
    id: int
    cast: list[Cast]
    crew: list[Crew]


class MovieDetailsResponse(TMDbModel):
    """Represents detailed movie information from TMDb."""

    id: int
    title: str
    original_title: str
    original_language: str
    overview: str
    release_date: str
    status: str
    adult: bool
    genres: list[Genre]
    production_companies: list[ProductionCompany]
    production_countries: list[ProductionCountry]
    spoken_languages: list[SpokenLanguage]
    imdb_id: Optional[str] = None
    tagline: Optional[str] = None
    homepage: Optional[str] = None
    poster_path: Optional[str] = None
    backdrop_path: Optional[str] = None
    belongs_to_collection: Optional[Collection] = None
    runtime: Optional[int] = Field(None, description="Runtime in minutes")
    budget: Optional[int] = None
    revenue: Optional[int] = None
    popularity: Optional[float] = None
    vote_average: Optional[float] = None
    vote_count: Optional[int] = None
    video: Optional[bool] = None


class AuthorDetails(TMDbModel):
    name: str
    username: str
    avatar_path: Optional[str] = None
    rating: Optional[float] = Field(None, description="Author's score out of 10, if given")


class Review(TMDbModel):
    """Represents a movie review."""

    id: str
    author: str
    author_details: AuthorDetails
    content: str
    created_at: str
    updated_at: str
    url: str


class MovieReviewsResponse(TMDbModel):
    """A page of reviews for one movie."""

    id: int
    page: int
    results: list[Review]
    total_pages: int
    total_results: int


class GenreListResponse(TMDbModel):
    genres: list[Genre]
