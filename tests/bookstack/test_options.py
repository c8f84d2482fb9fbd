"""Tests for client option functions."""

import logging

from bookstack_api.client import BookStackClient
from bookstack_api.options import (
    set_insecure,
    set_limiter,
    set_logger,
    set_rate_limit,
    set_timeout,
    set_token,
    set_url,
)
from bookstack_api.rate_limiter import RateLimiter


class TestOptions:
    """Test option functions."""

    def test_set_url(self):
        client = BookStackClient(set_url("https://docs.example.com"))
        assert client.base_url == "https://docs.example.com"

    def test_set_token(self):
        client = BookStackClient(set_token("abc", "xyz"))
        assert client.authorization() == "Token abc:xyz"

    def test_set_logger(self):
        logger = logging.getLogger("custom_bookstack")
        client = BookStackClient(set_logger(logger))
        assert client.logger is logger

    def test_set_rate_limit(self):
        client = BookStackClient(set_rate_limit(10))
        assert isinstance(client.limiter, RateLimiter)
        assert client.limiter.rate == 10
        assert client.limiter.per == 1.0

    def test_set_rate_limit_with_interval(self):
        client = BookStackClient(set_rate_limit(100, per=60.0))
        assert client.limiter.rate == 100
        assert client.limiter.per == 60.0

    def test_set_limiter_shared(self):
        """Test one limiter can be shared by several clients."""
        limiter = RateLimiter(rate=3)
        first = BookStackClient(set_limiter(limiter))
        second = BookStackClient(set_limiter(limiter))
        assert first.limiter is second.limiter

    def test_set_insecure(self):
        assert BookStackClient(set_insecure()).insecure is True
        assert BookStackClient(set_insecure(False)).insecure is False

    def test_set_timeout(self):
        assert BookStackClient(set_timeout(5)).timeout == 5

    def test_no_validation_at_construction(self):
        """Test invalid values are accepted until a request is made."""
        client = BookStackClient(set_url("not a url"), set_token("", ""))
        assert client.base_url == "not a url"
