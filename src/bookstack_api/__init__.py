"""Client library for the BookStack REST API.

Provides token-authenticated request helpers, a shared token bucket rate
limiter and typed parsing of BookStack responses.
"""

__version__ = "0.1.0"

from bookstack_api.client import BookStackClient
from bookstack_api.common import (
    APIError,
    AppConfig,
    BookStackConfig,
    BookStackError,
    ConfigurationError,
    FormEncodingError,
    ResponseDecodeError,
    TransportError,
    ValidationError,
    setup_logging,
)
from bookstack_api.forms import Form, MultipartForm
from bookstack_api.models import Book, BookDetailed, Envelope, User
from bookstack_api.options import (
    Option,
    set_insecure,
    set_limiter,
    set_logger,
    set_rate_limit,
    set_timeout,
    set_token,
    set_url,
)
from bookstack_api.parsing import parse_envelope, parse_multiple, parse_single
from bookstack_api.rate_limiter import RateLimiter

__all__ = [
    "__version__",
    "BookStackClient",
    "Option",
    "set_url",
    "set_token",
    "set_logger",
    "set_rate_limit",
    "set_limiter",
    "set_insecure",
    "set_timeout",
    "RateLimiter",
    "Form",
    "MultipartForm",
    "User",
    "Book",
    "BookDetailed",
    "Envelope",
    "parse_single",
    "parse_multiple",
    "parse_envelope",
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
]
