"""httpext HTTP helpers.

Provides a request builder, body handlers and a send-and-await helper.

Example:
    >>> from httpext.http import body_handlers, create_client, http_request, load
    >>>
    >>> request = http_request(lambda b: b.uri("https://example.com").header("Accept", "text/html"))
    >>>
    >>> async with create_client() as client:
    ...     html = await load(client, "https://example.com", body_handlers.of_string())
"""

from httpext.http import body_handlers
from httpext.http.body_handlers import BodyHandler
from httpext.http.client import create_client, load
from httpext.http.request import RequestBuilder, http_request

__all__ = [
    "BodyHandler",
    "RequestBuilder",
    "body_handlers",
    "create_client",
    "http_request",
    "load",
]
