"""Option functions for configuring a BookStackClient.

Each function returns a callable that mutates a client during construction:

    >>> client = BookStackClient(
    ...     set_url("https://docs.example.com"),
    ...     set_token("token_id", "token_secret"),
    ...     set_rate_limit(60),
    ... )
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from bookstack_api.rate_limiter import RateLimiter

if TYPE_CHECKING:
    from bookstack_api.client import BookStackClient

Option = Callable[["BookStackClient"], None]


def set_url(url: str) -> Option:
    """Set the base URL of the BookStack instance."""

    def apply(client: BookStackClient) -> None:
        client.base_url = url

    return apply


def set_token(token_id: str, token_secret: str) -> Option:
    """Set the API token used in the Authorization header."""

    def apply(client: BookStackClient) -> None:
        client.token_id = token_id
        client.token_secret = token_secret

    return apply


def set_logger(logger: logging.Logger) -> Option:
    def apply(client: BookStackClient) -> None:
        client.logger = logger

    return apply


def set_rate_limit(limit: int, per: float = 1.0) -> Option:
    """Replace the client's limiter with one admitting ``limit`` requests per ``per`` seconds."""

    def apply(client: BookStackClient) -> None:
        client.limiter = RateLimiter(rate=limit, per=per)

    return apply


def set_limiter(limiter: RateLimiter) -> Option:
    """Use an existing limiter, e.g. one shared between several clients."""

    def apply(client: BookStackClient) -> None:
        client.limiter = limiter

    return apply


def set_insecure(insecure: bool = True) -> Option:
    """Skip TLS certificate verification for this client only."""

    def apply(client: BookStackClient) -> None:
        client.insecure = insecure

    return apply


def set_timeout(timeout: float) -> Option:
    """Set the per-request timeout in seconds."""

    def apply(client: BookStackClient) -> None:
        client.timeout = timeout

    return apply


__all__ = [
    "Option",
    "set_url",
    "set_token",
    "set_logger",
    "set_rate_limit",
    "set_limiter",
    "set_insecure",
    "set_timeout",
]
