"""URL helpers for TMDb image paths (posters, backdrops, profiles, logos)."""

from __future__ import annotations

from typing import Optional

IMAGE_BASE_URL = "https://image.tmdb.org/t/p/"


def image_url(
    path: Optional[str], size: str = "original", base_url: str = IMAGE_BASE_URL
) -> Optional[str]:
    """Construct full image URL from TMDb image path.

    Args:
        path: Image path from TMDb (e.g., poster_path, backdrop_path)
        size: Size bucket (w92, w154, w185, w342, w500, w780, original, ...)
        base_url: Image CDN root

    Returns:
        Full image URL or None if path is empty
    """
    if not path:
        return None
    return f"{base_url.rstrip('/')}/{size}/{path.lstrip('/')}"


def original_image_url(path: Optional[str], base_url: str = IMAGE_BASE_URL) -> Optional[str]:
    return image_url(path, "original", base_url)


def sized_image_url(
    path: Optional[str], width: int, base_url: str = IMAGE_BASE_URL
) -> Optional[str]:
    """URL for the ``w<width>`` rendition; the width is not checked against TMDb's buckets."""
    return image_url(path, f"w{int(width)}", base_url)
