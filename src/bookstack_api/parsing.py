"""Helpers that turn raw response bodies into typed shapes."""

from __future__ import annotations

import json
from typing import Any, TypeVar

from bookstack_api.common.errors import APIError, ResponseDecodeError
from bookstack_api.models import MULTIPLE_SHAPES, SINGLE_SHAPES, Entity, Envelope, ErrorBody

T = TypeVar("T", bound=Entity)


def _decode(raw: bytes | str) -> Any:
    try:
        return json.loads(raw)
    except (ValueError, TypeError) as err:
        raise ResponseDecodeError(f"Invalid JSON in response: {err}") from err


def _error_from(body: ErrorBody, status_code: int | None = None) -> APIError:
    return APIError(body.message or "Unknown API error", code=body.code, status_code=status_code)


def parse_envelope(raw: bytes | str) -> Envelope:
    """Decode a response envelope.

    Args:
        raw: Response body

    Returns:
        Envelope with ``data``, ``total`` and ``error`` populated from the body

    Raises:
        ResponseDecodeError: If the body is not a JSON object
    """
    payload = _decode(raw)
    if not isinstance(payload, dict):
        raise ResponseDecodeError(f"Expected a JSON object envelope, got {type(payload).__name__}")

    error = payload.get("error")
    if isinstance(error, dict):
        error_body = ErrorBody.from_dict(error)
    elif isinstance(error, str):
        error_body = ErrorBody(message=error)
    else:
        error_body = None

    return Envelope(data=payload.get("data"), total=payload.get("total"), error=error_body)


def error_from_response(raw: bytes, status_code: int) -> APIError:
    """Build the exception for a non-success response.

    A body without an ``error`` object still produces an APIError so a
    failed status is never reported as success.

    Raises:
        ResponseDecodeError: If the body is not valid JSON
    """
    envelope = parse_envelope(raw)
    if envelope.error is None:
        return APIError(f"Unexpected response status {status_code}", status_code=status_code)
    return _error_from(envelope.error, status_code)


def parse_single(shape: type[T], raw: bytes | str) -> T:
    """Decode a single entity.

    Args:
        shape: One of User, Book, BookDetailed
        raw: Response body holding the entity object

    Returns:
        Populated ``shape`` instance

    Raises:
        TypeError: If ``shape`` is not a supported single-entity shape
        ResponseDecodeError: If the body is not a JSON object
    """
    if shape not in SINGLE_SHAPES:
        raise TypeError(f"Unsupported single-entity shape: {shape!r}")

    payload = _decode(raw)
    try:
        return shape.from_dict(payload)
    except TypeError as err:
        raise ResponseDecodeError(f"Cannot decode {shape.__name__}: {err}") from err


def parse_multiple(shape: type[T], raw: bytes | str) -> list[T]:
    """Decode a listing envelope into a list of entities.

    Args:
        shape: One of User, Book
        raw: Response body holding ``{"data": [...]}``

    Returns:
        Entities in the order the API returned them

    Raises:
        TypeError: If ``shape`` is not a supported list shape
        APIError: If the envelope carries an API error
        ResponseDecodeError: If the body or its ``data`` field is malformed
    """
    if shape not in MULTIPLE_SHAPES:
        raise TypeError(f"Unsupported list shape: {shape!r}")

    envelope = parse_envelope(raw)
    if envelope.error is not None:
        raise _error_from(envelope.error)

    return entities_from(shape, envelope.data)


def entities_from(shape: type[T], data: Any) -> list[T]:
    """Convert an envelope ``data`` array into entities.

    Raises:
        ResponseDecodeError: If ``data`` is not an array of objects
    """
    if data is None:
        return []
    if not isinstance(data, list):
        raise ResponseDecodeError(f"Expected 'data' to be an array, got {type(data).__name__}")
    try:
        return [shape.from_dict(item) for item in data]
    except TypeError as err:
        raise ResponseDecodeError(f"Cannot decode {shape.__name__} list: {err}") from err


__all__ = ["parse_single", "parse_multiple", "parse_envelope", "error_from_response", "entities_from"]
