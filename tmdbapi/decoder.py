from __future__ import annotations

from typing import TypeVar, Union

from pydantic import ValidationError

from tmdbapi.errors import DecodeError
from tmdbapi.models import TMDbModel

ModelT = TypeVar("ModelT", bound=TMDbModel)


def decode(body: Union[bytes, str], shape: type[ModelT]) -> ModelT:
    """Decode a JSON response body into ``shape``.

    Raises ``DecodeError`` for invalid JSON or for a body that does not match
    the model's required fields; no partially populated value is returned.
    """
    try:
        return shape.model_validate_json(body)
    except ValidationError as e:
        raise DecodeError(shape.__name__, f"{e.error_count()} validation error(s)") from e
