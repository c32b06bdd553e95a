from __future__ import annotations

import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from tmdbapi.images import IMAGE_BASE_URL

load_dotenv()


class TMDbSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="TMDBAPI_",
        case_sensitive=False,
    )

    access_token: str = ""
    api_key: str = ""
    base_url: str = "https://api.themoviedb.org/3"
    image_base_url: str = IMAGE_BASE_URL
    timeout: float = Field(default=30.0, gt=0)

    @property
    def credential(self) -> str:
        """Bearer credential, preferring the read access token over the v3 key."""
        return self.access_token or self.api_key


@lru_cache()
def get_settings() -> TMDbSettings:
    settings = TMDbSettings()

    # Fallback to legacy environment variables for TMDb credentials
    if not settings.access_token:
        legacy_access_token = os.getenv("TMDB_ACCESS_TOKEN")
        if legacy_access_token:
            settings.access_token = legacy_access_token
    if not settings.api_key:
        legacy_api_key = os.getenv("TMDB_API_KEY")
        if legacy_api_key:
            settings.api_key = legacy_api_key

    return settings
