"""Shared utilities for bookstack_api."""

from bookstack_api.common.config import AppConfig, BookStackConfig
from bookstack_api.common.errors import (
    APIError,
    BookStackError,
    ConfigurationError,
    FormEncodingError,
    ResponseDecodeError,
    TransportError,
    ValidationError,
)
from bookstack_api.common.logging import discard_logger, setup_logging

__all__ = [
    "AppConfig",
    "BookStackConfig",
    "BookStackError",
    "ConfigurationError",
    "APIError",
    "TransportError",
    "FormEncodingError",
    "ResponseDecodeError",
    "ValidationError",
    "setup_logging",
    "discard_logger",
]
