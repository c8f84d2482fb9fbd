"""BookStack API client with token authentication and rate limiting."""

from __future__ import annotations

import json
from http import HTTPStatus
from typing import TYPE_CHECKING, Any, TypeVar

import requests

from bookstack_api.common.errors import FormEncodingError, TransportError
from bookstack_api.common.logging import discard_logger
from bookstack_api.options import (
    Option,
    set_insecure,
    set_rate_limit,
    set_timeout,
    set_token,
    set_url,
)
from bookstack_api.parsing import entities_from, error_from_response, parse_envelope
from bookstack_api.rate_limiter import RateLimiter

if TYPE_CHECKING:
    from bookstack_api.common.config import BookStackConfig
    from bookstack_api.forms import Form
    from bookstack_api.models import Entity
    from bookstack_api.resources.books import BooksResource
    from bookstack_api.resources.users import UsersResource

T = TypeVar("T", bound="Entity")

JSON_SUCCESS = frozenset({HTTPStatus.OK, HTTPStatus.NO_CONTENT})


def _is_form_success(status_code: int) -> bool:
    return HTTPStatus.OK <= status_code <= HTTPStatus.IM_USED


class BookStackClient:
    """Client for the BookStack REST API.

    Every outbound call takes one token from the client's rate limiter,
    carries the ``Authorization: Token <id>:<secret>`` header and returns the
    raw response body. Use the helpers in :mod:`bookstack_api.parsing` to turn
    bodies into typed shapes, or the resource accessors (``client.books``,
    ``client.users``) which do it for you.

    The client owns its HTTP session. TLS settings apply to that session only.
    """

    DEFAULT_RATE_LIMIT = 180
    DEFAULT_TIMEOUT = 30
    MAX_PAGE_SIZE = 500
    DEFAULT_PAGE_SIZE = 100

    def __init__(self, *options: Option):
        """Initialize the client.

        Nothing is validated here; a bad URL or missing token surfaces on
        the first request.

        Args:
            *options: Option callables from :mod:`bookstack_api.options`
        """
        self.base_url = ""
        self.token_id = ""
        self.token_secret = ""
        self.limiter = RateLimiter(rate=self.DEFAULT_RATE_LIMIT)
        self.logger = discard_logger()
        self.insecure = False
        self.timeout: float = self.DEFAULT_TIMEOUT

        for option in options:
            option(self)

        self._session = requests.Session()
        self._session.verify = not self.insecure
        if self.insecure:
            self.logger.warning("TLS certificate verification disabled for %s", self.base_url or "<unset url>")

    @classmethod
    def from_config(cls, config: BookStackConfig, *options: Option) -> BookStackClient:
        """Build a client from a BookStackConfig.

        Args:
            config: Loaded configuration
            *options: Extra options applied after the configuration ones

        Returns:
            Configured client
        """
        base = [
            set_url(config.url or ""),
            set_token(config.token_id or "", config.token_secret or ""),
            set_rate_limit(config.rate_limit),
            set_insecure(config.insecure),
            set_timeout(config.timeout),
        ]
        return cls(*base, *options)

    def __enter__(self) -> BookStackClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self._session.close()

    def authorization(self) -> str:
        """Value of the Authorization header."""
        return f"Token {self.token_id}:{self.token_secret}"

    def _build_url(self, path: str) -> str:
        """Build full API URL from a relative path.

        Args:
            path: API path (e.g., books/1)

        Returns:
            ``<base_url>/api/<path>`` with exactly one slash at each join
        """
        return f"{self.base_url.rstrip('/')}/api/{path.lstrip('/')}"

    @staticmethod
    def _json_body(data: Any) -> bytes | None:
        if data is None:
            return None
        if isinstance(data, bytes):
            return data
        if isinstance(data, str):
            return data.encode("utf-8")
        return json.dumps(data).encode("utf-8")

    def _send(
        self,
        method: str,
        url: str,
        headers: dict[str, str],
        body: Any,
        params: dict[str, Any] | None,
    ) -> requests.Response:
        try:
            response = self._session.request(
                method=method,
                url=url,
                params=params,
                data=body,
                headers=headers,
                timeout=self.timeout,
            )
        except (requests.exceptions.RequestException, ValueError) as err:
            # urllib3 rejects malformed methods with a bare ValueError
            self.logger.debug("%s %s failed: %s", method, url, err)
            raise TransportError(f"Request failed: {err}") from err

        self.logger.debug("%s %s -> %s", method, url, response.status_code)
        return response

    def _take_token(self) -> None:
        waited = self.limiter.take()
        if waited > 0:
            self.logger.debug("Rate limited, waited %.3fs", waited)

    def request(
        self,
        method: str,
        path: str,
        data: Any = None,
        params: dict[str, Any] | None = None,
    ) -> bytes:
        """Send a JSON request.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            path: API path relative to ``/api/``
            data: Request body; bytes and str are sent as-is, anything else
                is serialized with ``json.dumps``
            params: Query parameters

        Returns:
            Raw response body for HTTP 200 and 204

        Raises:
            TransportError: If the request could not be sent
            APIError: For any other status, with the API-reported message
            ResponseDecodeError: If the error envelope is not valid JSON
        """
        self._take_token()

        url = self._build_url(path)
        body = self._json_body(data)

        headers = {"Authorization": self.authorization()}
        if body:
            headers["Content-Type"] = "application/json"

        response = self._send(method, url, headers, body, params)
        if response.status_code in JSON_SUCCESS:
            return response.content

        raise error_from_response(response.content, response.status_code)

    def form(
        self,
        method: str,
        path: str,
        form: Form,
        params: dict[str, Any] | None = None,
    ) -> bytes:
        """Send a form-encoded request.

        Args:
            method: HTTP method (usually POST or PUT)
            path: API path relative to ``/api/``
            form: Encoder providing ``(content_type, body)``
            params: Query parameters

        Returns:
            Raw response body for any HTTP status from 200 to 226

        Raises:
            FormEncodingError: If the form could not be encoded
            TransportError: If the request could not be sent
            APIError: For any other status, with the API-reported message
            ResponseDecodeError: If the error envelope is not valid JSON
        """
        self._take_token()

        url = self._build_url(path)

        try:
            content_type, body = form.encode()
        except FormEncodingError:
            raise
        except Exception as err:
            raise FormEncodingError(f"Failed to encode form: {err}") from err

        headers = {
            "Authorization": self.authorization(),
            "Content-Type": content_type,
        }

        response = self._send(method, url, headers, body, params)
        if _is_form_success(response.status_code):
            return response.content

        raise error_from_response(response.content, response.status_code)

    def list_all(
        self,
        path: str,
        shape: type[T],
        params: dict[str, Any] | None = None,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> list[T]:
        """Fetch every item of a listing endpoint.

        Args:
            path: Listing endpoint (e.g., books)
            shape: Entity shape of the items
            params: Additional query parameters (filters, sort)
            page_size: Number of items per page (max 500)

        Returns:
            All items in API order
        """
        page_size = min(page_size, self.MAX_PAGE_SIZE)
        results: list[T] = []
        offset = 0

        while True:
            request_params = {**(params or {}), "count": page_size, "offset": offset}
            envelope = parse_envelope(self.request("GET", path, params=request_params))
            items = entities_from(shape, envelope.data)
            results.extend(items)

            total = envelope.total or 0
            if len(results) >= total or not items:
                break

            offset += page_size

        return results

    # Resource accessors for convenience
    @property
    def books(self) -> BooksResource:
        """Access books resource."""
        from bookstack_api.resources.books import BooksResource

        return BooksResource(self)

    @property
    def users(self) -> UsersResource:
        """Access users resource."""
        from bookstack_api.resources.users import UsersResource

        return UsersResource(self)
