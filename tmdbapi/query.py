"""Translation of typed filter values into TMDb query parameters.

Every filter the client understands is described once in ``QUERY_FIELDS``:
its wire key, how a value is rendered as text, and which values mean
"leave it out". ``encode`` and ``encode_query`` are the only code paths that
turn values into query entries.

Numeric filters treat zero and negative values as unset, so an explicit
``page=0`` or ``vote_average_gte=0.0`` is silently omitted. Values are not
validated beyond that; unknown sort tokens or monetization types are
forwarded verbatim and left for the API to reject.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Iterable, Mapping, Optional, Sequence, Union

from tmdbapi.enums import SortBy, WatchMonetizationType
from tmdbapi.errors import RequestBuildError

QueryEntries = list[tuple[str, str]]


def _plain(value: Any) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def _is_blank(value: Any) -> bool:
    return value is None or value == ""


def _is_non_positive(value: Any) -> bool:
    return value is None or value <= 0


def _is_empty(value: Any) -> bool:
    return value is None or len(value) == 0


def _format_count(value: int) -> str:
    return str(int(value))


def _format_decimal(value: float) -> str:
    return f"{value:.1f}"


def _format_flag(value: bool) -> str:
    return "true" if value else "false"


def _format_list(value: Union[str, Iterable[Any]]) -> str:
    # Pre-joined strings pass through so "12,16" and ["12", "16"] match.
    if isinstance(value, str):
        return value
    return ",".join(_plain(item) for item in value)


@dataclass(slots=True, frozen=True)
class QueryField:
    """How one filter is written to the query string."""

    key: str
    format: Callable[[Any], str]
    is_unset: Callable[[Any], bool]
    required: bool = False


def _text(key: str, *, required: bool = False) -> QueryField:
    return QueryField(key, _plain, _is_blank, required)


def _count(key: str) -> QueryField:
    return QueryField(key, _format_count, _is_non_positive)


def _decimal(key: str) -> QueryField:
    return QueryField(key, _format_decimal, _is_non_positive)


def _flag(key: str) -> QueryField:
    return QueryField(key, _format_flag, lambda value: value is None)


def _id_list(key: str) -> QueryField:
    return QueryField(key, _format_list, _is_empty)


QUERY_FIELDS: Mapping[str, QueryField] = MappingProxyType(
    {
        "query": _text("query", required=True),
        "certification": _text("certification"),
        "certification_country": _text("certification_country"),
        "certification_gte": _text("certification.gte"),
        "certification_lte": _text("certification.lte"),
        "include_adult": _flag("include_adult"),
        "include_video": _flag("include_video"),
        "language": _text("language"),
        "page": _count("page"),
        "primary_release_year": _count("primary_release_year"),
        "primary_release_year_gte": _count("primary_release_year.gte"),
        "primary_release_year_lte": _count("primary_release_year.lte"),
        "region": _text("region"),
        "release_date_gte": _text("release_date.gte"),
        "release_date_lte": _text("release_date.lte"),
        "sort_by": _text("sort_by"),
        "vote_average_gte": _decimal("vote_average.gte"),
        "vote_average_lte": _decimal("vote_average.lte"),
        "vote_count_gte": _decimal("vote_count.gte"),
        "vote_count_lte": _decimal("vote_count.lte"),
        "with_genres": _id_list("with_genres"),
        "with_companies": _id_list("with_companies"),
        "with_keywords": _id_list("with_keywords"),
        "with_cast": _id_list("with_cast"),
        "with_crew": _id_list("with_crew"),
        "with_people": _id_list("with_people"),
        "with_origin_country": _text("with_origin_country"),
        "with_original_language": _text("with_original_language"),
        "watch_region": _text("watch_region"),
        "with_runtime_gte": _count("with_runtime.gte"),
        "with_runtime_lte": _count("with_runtime.lte"),
        "with_watch_monetization_types": _id_list("with_watch_monetization_types"),
        "with_watch_providers": _id_list("with_watch_providers"),
        "without_companies": _id_list("without_companies"),
        "without_genres": _id_list("without_genres"),
        "without_keywords": _id_list("without_keywords"),
        "without_watch_providers": _id_list("without_watch_providers"),
        "year": _count("year"),
    }
)


IdList = Optional[Union[str, Sequence[Union[int, str]]]]


@dataclass(slots=True, frozen=True)
class DiscoverFilter:
    """Filters for ``discover/movie``. Every field defaults to "omit"."""

    certification: Optional[str] = None
    certification_country: Optional[str] = None
    certification_gte: Optional[str] = None
    certification_lte: Optional[str] = None
    include_adult: Optional[bool] = None
    include_video: Optional[bool] = None
    language: Optional[str] = None
    page: Optional[int] = None
    primary_release_year: Optional[int] = None
    primary_release_year_gte: Optional[int] = None
    primary_release_year_lte: Optional[int] = None
    region: Optional[str] = None
    release_date_gte: Optional[str] = None
    release_date_lte: Optional[str] = None
    sort_by: Optional[Union[SortBy, str]] = None
    vote_average_gte: Optional[float] = None
    vote_average_lte: Optional[float] = None
    vote_count_gte: Optional[float] = None
    vote_count_lte: Optional[float] = None
    with_genres: IdList = None
    with_companies: IdList = None
    with_keywords: IdList = None
    with_cast: IdList = None
    with_crew: IdList = None
    with_people: IdList = None
    with_origin_country: Optional[str] = None
    with_original_language: Optional[str] = None
    watch_region: Optional[str] = None
    with_runtime_gte: Optional[int] = None
    with_runtime_lte: Optional[int] = None
    with_watch_monetization_types: Optional[Sequence[Union[WatchMonetizationType, str]]] = None
    with_watch_providers: IdList = None
    without_companies: IdList = None
    without_genres: IdList = None
    without_keywords: IdList = None
    without_watch_providers: IdList = None
    year: Optional[int] = None

    def to_params(self) -> dict[str, Any]:
        return {field.name: getattr(self, field.name) for field in fields(self)}


DISCOVER_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(DiscoverFilter))


def encode(container: QueryEntries, name: str, value: Any) -> None:
    """Append the query entry for ``name`` to ``container`` unless ``value`` is unset."""
    try:
        query_field = QUERY_FIELDS[name]
    except KeyError:
        raise RequestBuildError(f"unknown query parameter: {name!r}") from None

    if query_field.is_unset(value):
        if query_field.required:
            raise RequestBuildError(f"query parameter {query_field.key!r} is required")
        return
    container.append((query_field.key, query_field.format(value)))


def encode_query(values: Mapping[str, Any], names: Iterable[str]) -> QueryEntries:
    """Encode ``values`` for the given parameter names, in order.

    Names absent from ``values`` are treated as unset.
    """
    entries: QueryEntries = []
    for name in names:
        encode(entries, name, values.get(name))
    return entries
