"""Send a request and await its body.

Example:
    >>> import httpx
    >>> from httpext.http import body_handlers, load
    >>>
    >>> async with httpx.AsyncClient() as client:
    ...     text = await load(client, "https://example.com", body_handlers.of_string())
    ...
    ...     # A blocking client works too; it is sent on a worker thread
    ...     with httpx.Client() as blocking:
    ...         data = await load(blocking, "https://example.com/api", body_handlers.of_json())
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, TypeVar

import httpx

from httpext.core.config import Settings, get_settings
from httpext.core.exceptions import RequestFailedError
from httpext.http.body_handlers import BodyHandler
from httpext.http.request import http_request

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def load(
    client: httpx.AsyncClient | httpx.Client,
    uri: httpx.URL | str,
    body_handler: BodyHandler[T],
) -> T:
    """Send a GET request to ``uri`` and return the body via ``body_handler``.

    The response is returned whatever its status code; the handler sees
    the whole response and decides what to do with it.

    Args:
        client: Async client, or a blocking client run on a worker thread
        uri: Absolute http(s) URI
        body_handler: Turns the response into the returned value

    Returns:
        Whatever ``body_handler`` returns

    Raises:
        InvalidURIError: If ``uri`` is a string that cannot be parsed
        RequestBuildError: If ``uri`` is not an absolute http(s) URI
        RequestFailedError: If the request could not be sent
    """
    request = http_request(lambda b: b.uri(uri))
    request.extensions.setdefault("timeout", client.timeout.as_dict())

    # send() skips the merging build_request() does, so apply client state here
    headers = client.headers.copy()
    headers.update(request.headers)
    request.headers = headers
    client.cookies.set_cookie_header(request)

    logger.debug(f"{request.method} {request.url}")
    try:
        if isinstance(client, httpx.AsyncClient):
            response = await client.send(request)
        else:
            response = await asyncio.to_thread(client.send, request)
    except httpx.RequestError as e:
        raise RequestFailedError(str(request.url), str(e) or type(e).__name__) from e

    logger.debug(f"{request.method} {request.url} -> {response.status_code}")
    return body_handler(response)


def create_client(settings: Settings | None = None, **overrides: Any) -> httpx.AsyncClient:
    """Build an ``httpx.AsyncClient`` configured from settings.

    Args:
        settings: Settings to use (default: from environment)
        **overrides: Extra keyword arguments for ``httpx.AsyncClient``

    Example:
        >>> from httpext.core.config import Settings
        >>> client = create_client(Settings(user_agent="bot/1.0"))
        >>> client.headers["User-Agent"]
        'bot/1.0'
    """
    settings = settings or get_settings()
    options: dict[str, Any] = {
        "headers": settings.headers,
        "timeout": httpx.Timeout(settings.request_timeout),
        "follow_redirects": settings.follow_redirects,
    }
    options.update(overrides)
    return httpx.AsyncClient(**options)


__all__ = [
    "load",
    "create_client",
]
