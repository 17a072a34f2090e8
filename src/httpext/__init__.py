"""
httpext - small async helpers on top of httpx.

Key Features:
- ``load()``: send a GET request and await the body through a body handler
- ``http_request()`` / ``RequestBuilder``: builder-style request construction
- ``to_x_www_form_url()`` / ``to_uri()``: form encoding and strict URI parsing
- ``execute_with_delay()``: run an action over a sequence with a delay
  after each element, cancellable at every wait

Quick Start:
    >>> import asyncio
    >>> from httpext import execute_with_delay
    >>> asyncio.run(execute_with_delay([1, 2, 3], print, lambda i, x: 0.01 if i % 2 == 0 else None))
    1
    2
    3
"""

from httpext.core.config import Settings, configure_logging, get_settings
from httpext.core.exceptions import (
    ExecutorBusyError,
    HttpExtError,
    InvalidURIError,
    RequestBuildError,
    RequestFailedError,
    UnsupportedEncodingError,
)
from httpext.executor import DelayedSequentialExecutor, execute_with_delay
from httpext.http import (
    BodyHandler,
    RequestBuilder,
    body_handlers,
    create_client,
    http_request,
    load,
)
from httpext.urls import from_x_www_form_url, to_uri, to_x_www_form_url

__version__ = "0.1.0"

__all__ = [
    # Config
    "Settings",
    "configure_logging",
    "get_settings",
    # Exceptions
    "ExecutorBusyError",
    "HttpExtError",
    "InvalidURIError",
    "RequestBuildError",
    "RequestFailedError",
    "UnsupportedEncodingError",
    # Executor
    "DelayedSequentialExecutor",
    "execute_with_delay",
    # HTTP
    "BodyHandler",
    "RequestBuilder",
    "body_handlers",
    "create_client",
    "http_request",
    "load",
    # URLs
    "from_x_www_form_url",
    "to_uri",
    "to_x_www_form_url",
]
