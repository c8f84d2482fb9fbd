"""Configuration management for bookstack_api."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from bookstack_api.common.errors import ConfigurationError

DEFAULT_RATE_LIMIT = 180
DEFAULT_TIMEOUT = 30

_TRUTHY = {"1", "true", "yes", "on"}
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if not value:
        return default
    try:
        return int(value)
    except ValueError as err:
        raise ConfigurationError(f"{name} must be an integer, got {value!r}") from err


def _log_level(value: str) -> str:
    level = value.strip().upper()
    if level not in LOG_LEVELS:
        raise ConfigurationError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {value!r}")
    return level


@dataclass
class BookStackConfig:
    """BookStack API configuration."""

    url: str | None
    token_id: str | None
    token_secret: str | None
    insecure: bool = False
    rate_limit: int = DEFAULT_RATE_LIMIT
    timeout: int = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls) -> BookStackConfig:
        """Load configuration from environment variables.

        Expected variables:
            BOOKSTACK_URL: BookStack instance URL
            BOOKSTACK_TOKEN_ID: API token ID
            BOOKSTACK_TOKEN_SECRET: API token secret
            BOOKSTACK_INSECURE: Skip TLS certificate verification (optional)
            BOOKSTACK_RATE_LIMIT: Requests per second (optional, default 180)
            BOOKSTACK_TIMEOUT: Request timeout in seconds (optional, default 30)

        Returns:
            BookStackConfig instance

        Raises:
            ConfigurationError: If a numeric variable is not an integer
        """
        return cls(
            url=os.getenv("BOOKSTACK_URL") or None,
            token_id=os.getenv("BOOKSTACK_TOKEN_ID") or None,
            token_secret=os.getenv("BOOKSTACK_TOKEN_SECRET") or None,
            insecure=os.getenv("BOOKSTACK_INSECURE", "").strip().lower() in _TRUTHY,
            rate_limit=_env_int("BOOKSTACK_RATE_LIMIT", DEFAULT_RATE_LIMIT),
            timeout=_env_int("BOOKSTACK_TIMEOUT", DEFAULT_TIMEOUT),
        )

    def validate(self) -> dict[str, str]:
        """Validate configuration.

        Returns:
            Dict of field names to error messages (empty if valid)
        """
        errors = {}
        if not self.url:
            errors["url"] = "BOOKSTACK_URL not set"
        if not self.token_id:
            errors["token_id"] = "BOOKSTACK_TOKEN_ID not set"
        if not self.token_secret:
            errors["token_secret"] = "BOOKSTACK_TOKEN_SECRET not set"
        if self.rate_limit <= 0:
            errors["rate_limit"] = "BOOKSTACK_RATE_LIMIT must be positive"
        return errors


class AppConfig:
    """Main application configuration loader."""

    def __init__(self, env_file: Path | None = None, load_env: bool = True):
        """Initialize configuration from environment.

        Args:
            env_file: Optional path to .env file. If not provided,
                     looks for .env in current directory or ~/.bookstack_api.env
            load_env: Whether to load from .env files (default True). Set False in tests.

        Raises:
            ConfigurationError: If LOG_LEVEL or a numeric variable is invalid
        """
        if load_env:
            if env_file and env_file.exists():
                load_dotenv(env_file)
            else:
                for default in [
                    Path(".env"),
                    Path.home() / ".bookstack_api.env",
                ]:
                    if default.exists():
                        load_dotenv(default)
                        break

        self.bookstack = BookStackConfig.from_env()
        self.log_level = _log_level(os.getenv("LOG_LEVEL") or "INFO")

    def validate(self, services: list[str] | None = None) -> dict[str, dict[str, str]]:
        """Validate configurations for specified services.

        Args:
            services: List of service names to validate. If None, validates all.
                     Valid names: 'bookstack'

        Returns:
            Dictionary mapping service names to dicts of field errors
        """
        all_services = {
            "bookstack": self.bookstack,
        }

        if services is None:
            services = list(all_services.keys())

        return {service: all_services[service].validate() for service in services if service in all_services}

    def require_valid(self, *services: str) -> None:
        """Require specified services to have valid configuration.

        Args:
            *services: Service names that must be configured

        Raises:
            ConfigurationError: If any specified service has invalid config

        Example:
            >>> config = AppConfig()
            >>> config.require_valid('bookstack')  # Raises if invalid
        """
        errors = self.validate(list(services))

        all_errors = []
        for service, field_errors in errors.items():
            for field, error_msg in field_errors.items():
                all_errors.append(f"{service}.{field}: {error_msg}")

        if all_errors:
            raise ConfigurationError("Configuration validation failed:\n  - " + "\n  - ".join(all_errors))
