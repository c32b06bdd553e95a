"""Enumerated values accepted by the discover endpoint."""

from __future__ import annotations

from enum import Enum


class SortBy(str, Enum):
    """Sort orders understood by ``discover/movie``."""

    POPULARITY_ASC = "popularity.asc"
    POPULARITY_DESC = "popularity.desc"
    PRIMARY_RELEASE_DATE_ASC = "primary_release_date.asc"
    PRIMARY_RELEASE_DATE_DESC = "primary_release_date.desc"
    ORIGINAL_TITLE_ASC = "original_title.asc"
    ORIGINAL_TITLE_DESC = "original_title.desc"
    REVENUE_ASC = "revenue.asc"
    REVENUE_DESC = "revenue.desc"
    TITLE_ASC = "title.asc"
    TITLE_DESC = "title.desc"
    VOTE_AVERAGE_ASC = "vote_average.asc"
    VOTE_AVERAGE_DESC = "vote_average.desc"
    VOTE_COUNT_ASC = "vote_count.asc"
    VOTE_COUNT_DESC = "vote_count.desc"


class WatchMonetizationType(str, Enum):
    """How a title is offered by a watch provider."""

    FLATRATE = "flatrate"
    FREE = "free"
    ADS = "ads"
    RENT = "rent"
    BUY = "buy"
