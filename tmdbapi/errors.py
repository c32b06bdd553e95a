"""Exceptions raised by the TMDb client."""

from __future__ import annotations


class TMDbError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(TMDbError):
    """Raised when the client is constructed without a usable credential."""


class RequestBuildError(TMDbError):
    """Raised when an outbound request cannot be assembled from its inputs."""


class TMDbAPIError(TMDbError):
    """Raised when TMDb API request fails."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"TMDb API error {status_code}: {message}")


class TransportError(TMDbAPIError):
    """The request never produced a response (DNS, connection, deadline)."""

    def __init__(self, message: str) -> None:
        super().__init__(0, f"Request failed: {message}")


class StatusError(TMDbAPIError):
    """The API answered with a status other than 200."""

    def __init__(self, status_code: int, message: str, body: str) -> None:
        self.body = body
        super().__init__(status_code, message)


class DecodeError(TMDbAPIError):
    """The response body could not be decoded into the expected shape."""

    def __init__(self, shape: str, detail: str, status_code: int = 200) -> None:
        self.shape = shape
        super().__init__(status_code, f"failed to parse {shape}: {detail}")
