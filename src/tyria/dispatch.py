"""
Response classification.

``parse_response`` turns a completed HTTP response into an ``Ok`` or ``Err``
depending on which of the endpoint's declared status sets the status code
falls into.
"""

from functools import lru_cache
from typing import AbstractSet, Any
import logging

import httpx
from pydantic import AliasChoices, BaseModel, Field, TypeAdapter, ValidationError

from tyria.exceptions import ApiError, MalformedResponseError, UnknownStatusError
from tyria.result import Err, Ok, Result

logger = logging.getLogger(__name__)


class ErrorBody(BaseModel):
    """Error body sent by the API, e.g. ``{"text": "no such id"}``."""

    text: str = Field(validation_alias=AliasChoices("text", "message"))


@lru_cache(maxsize=None)
def _adapter(model: Any) -> TypeAdapter:
    return TypeAdapter(model)


def _type_name(model: Any) -> str:
    return getattr(model, "__name__", None) or repr(model)


def _error_message(response: httpx.Response) -> str:
    try:
        return ErrorBody.model_validate_json(response.content).text
    except ValidationError:
        return response.text or f"HTTP {response.status_code}"


def parse_response(
    response: httpx.Response,
    model: Any,
    valid: AbstractSet[int],
    invalid: AbstractSet[int],
) -> Result:
    """
    Parse an API response into the appropriate type.

    Args:
        response: Completed response from the API
        model: Type to deserialize successful bodies into (a pydantic model
            or any type ``pydantic.TypeAdapter`` accepts, e.g. ``List[int]``)
        valid: Status codes whose body is deserialized as ``model``
        invalid: Status codes whose body is a structured API error

    Returns:
        ``Ok(value)`` for a status in ``valid``, ``Err(ApiError)`` for a
        status in ``invalid`` and ``Err(UnknownStatusError)`` otherwise

    Raises:
        MalformedResponseError: If a status in ``valid`` comes with a body
            that does not match ``model``
    """
    status_code = response.status_code

    if status_code in valid:
        try:
            value = _adapter(model).validate_json(response.content)
        except ValidationError as e:
            logger.warning(
                f"Malformed {_type_name(model)} body "
                f"(HTTP {status_code}): {e.error_count()} validation errors"
            )
            raise MalformedResponseError(
                f"Response body does not match {_type_name(model)}",
                status_code=status_code,
                details={"errors": e.errors(include_url=False)},
                expected_type=_type_name(model),
            ) from e
        return Ok(value)

    if status_code in invalid:
        message = _error_message(response)
        logger.debug(f"API error (HTTP {status_code}): {message}")
        return Err(ApiError(message, status_code=status_code))

    logger.debug(f"Unknown status code {status_code}")
    return Err(UnknownStatusError(status_code))
