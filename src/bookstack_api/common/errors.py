"""Custom exceptions for the BookStack API client."""

from __future__ import annotations


class BookStackError(Exception):
    """Base exception for all bookstack_api errors."""

    pass


class ConfigurationError(BookStackError):
    """Raised when configuration is invalid or missing."""

    pass


class ValidationError(BookStackError):
    """Raised when caller-supplied data fails validation."""

    pass


class APIError(BookStackError):
    """Raised when an API call fails.

    Attributes:
        message: Human readable error message
        code: Error code reported by the API envelope, if any
        status_code: HTTP status of the response, if one was received
    """

    def __init__(self, message: str, code: int | None = None, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code

    def __str__(self) -> str:
        if self.status_code is not None:
            return f"API request failed ({self.status_code}): {self.message}"
        return self.message


class TransportError(APIError):
    """Raised when the request could not be sent or no response was received."""

    pass


class FormEncodingError(APIError):
    """Raised when a form body could not be encoded."""

    pass


class ResponseDecodeError(APIError):
    """Raised when a response body is not the JSON shape that was expected."""

    pass
