"""Core configuration and exceptions."""

from httpext.core.config import Settings, configure_logging, get_settings
from httpext.core.exceptions import (
    ExecutorBusyError,
    HttpExtError,
    InvalidURIError,
    RequestBuildError,
    RequestFailedError,
    UnsupportedEncodingError,
)

__all__ = [
    "Settings",
    "configure_logging",
    "get_settings",
    "ExecutorBusyError",
    "HttpExtError",
    "InvalidURIError",
    "RequestBuildError",
    "RequestFailedError",
    "UnsupportedEncodingError",
]
