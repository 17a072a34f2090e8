"""httpext configuration.

Settings loaded from environment variables with HTTPEXT_ prefix.

Example:
    >>> from httpext.core.config import get_settings
    >>> settings = get_settings(log_level="DEBUG")
    >>> settings.log_level
    'DEBUG'
    >>> settings.follow_redirects
    True
"""

from __future__ import annotations

import json
import logging
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_FORMATS = ("console", "json")


class Settings(BaseSettings):
    """Client and logging settings.

    Loads from environment variables with HTTPEXT_ prefix.

    Example:
        >>> from httpext.core.config import Settings
        >>> s = Settings(user_agent="crawler/2.0")
        >>> s.user_agent
        'crawler/2.0'
        >>> s.request_timeout
        30.0
    """

    model_config = SettingsConfigDict(
        env_prefix="HTTPEXT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # HTTP
    user_agent: str = Field(default="httpext/0.1", description="User-Agent header value")
    request_timeout: float = Field(default=30.0, gt=0.0, description="Request timeout in seconds")
    follow_redirects: bool = Field(default=True, description="Follow HTTP redirects")
    default_headers: dict[str, str] = Field(default_factory=dict, description="Extra headers for every request")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="console", description="Log format: json or console")

    @field_validator("log_level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value}")
        return level

    @field_validator("log_format")
    @classmethod
    def _check_format(cls, value: str) -> str:
        fmt = value.lower()
        if fmt not in _LOG_FORMATS:
            raise ValueError(f"log_format must be one of {', '.join(_LOG_FORMATS)}")
        return fmt

    @property
    def headers(self) -> dict[str, str]:
        """Headers applied to clients built from these settings."""
        return {"User-Agent": self.user_agent, **self.default_headers}


def get_settings(**overrides: Any) -> Settings:
    """Get settings with optional overrides.

    Example:
        >>> from httpext.core.config import get_settings
        >>> s = get_settings(request_timeout=5.0)
        >>> s.request_timeout
        5.0
    """
    return Settings(**overrides)


class JsonFormatter(logging.Formatter):
    """Render log records as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "time": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def configure_logging(settings: Settings | None = None) -> logging.Handler:
    """Install a root log handler according to settings.

    Replaces any handler previously installed by this function.

    Args:
        settings: Settings to read level and format from (default: from env)

    Returns:
        The installed handler
    """
    settings = settings or get_settings()
    root = logging.getLogger()

    for existing in list(root.handlers):
        if getattr(existing, "_httpext", False):
            root.removeHandler(existing)

    handler = logging.StreamHandler()
    if settings.log_format == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)-8s %(name)s: %(message)s")
        )
    handler._httpext = True  # type: ignore[attr-defined]

    root.addHandler(handler)
    root.setLevel(settings.log_level)
    return handler


__all__ = [
    "Settings",
    "get_settings",
    "configure_logging",
    "JsonFormatter",
]
