"""Canned TMDb response bodies used across the test suite."""

from __future__ import annotations

from typing import Any, Callable

import httpx

TOKEN = "test-read-access-token"


def movie_item(**overrides: Any) -> dict[str, Any]:
    item = {
        "adult": False,
        "backdrop_path": "/hZkgoQYus5vegHoetLkCJzb17zJ.jpg",
        "genre_ids": [18, 53, 35],
        "id": 550,
        "original_language": "en",
        "original_title": "Fight Club",
        "overview": "A ticking-time-bomb insomniac and a slippery soap salesman...",
        "popularity": 61.416,
        "poster_path": "/pB8BM7pdSp6B6Ih7QZ4DrQ3PmJK.jpg",
        "release_date": "1999-10-15",
        "title": "Fight Club",
        "video": False,
        "vote_average": 8.4,
        "vote_count": 26280,
    }
    item.update(overrides)
    return item


def movie_page(results: list[dict[str, Any]] | None = None, **extra: Any) -> dict[str, Any]:
    page = {
        "page": 1,
        "results": results if results is not None else [movie_item()],
        "total_pages": 1,
        "total_results": 1,
    }
    page.update(extra)
    return page


def movie_details(**overrides: Any) -> dict[str, Any]:
    details = {
        "adult": False,
        "backdrop_path": "/hZkgoQYus5vegHoetLkCJzb17zJ.jpg",
        "belongs_to_collection": None,
        "budget": 63000000,
        "genres": [{"id": 18, "name": "Drama"}],
        "homepage": "http://www.foxmovies.com/movies/fight-club",
        "id": 550,
        "imdb_id": "tt0137523",
        "original_language": "en",
        "original_title": "Fight Club",
        "overview": "A ticking-time-bomb insomniac and a slippery soap salesman...",
        "popularity": 61.416,
        "poster_path": "/pB8BM7pdSp6B6Ih7QZ4DrQ3PmJK.jpg",
        "production_companies": [
            {
                "id": 508,
                "logo_path": "/7cxRWzi4LsVm4Utfpr1hfARNurT.png",
                "name": "Regency Enterprises",
                "origin_country": "US",
            },
            {"id": 711, "logo_path": None, "name": "Fox 2000 Pictures", "origin_country": "US"},
        ],
        "production_countries": [{"iso_3166_1": "US", "name": "United States of America"}],
        "release_date": "1999-10-15",
        "revenue": 100853753,
        "runtime": 139,
        "spoken_languages": [
            {"english_name": "English", "iso_639_1": "en", "name": "English"}
        ],
        "status": "Released",
        "tagline": "Mischief. Mayhem. Soap.",
        "title": "Fight Club",
        "video": False,
        "vote_average": 8.433,
        "vote_count": 26280,
    }
    details.update(overrides)
    return details




def respond_json(payload: Any, status_code: int = 200) -> Callable[[httpx.Request], httpx.Response]:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, json=payload)

    return handler
