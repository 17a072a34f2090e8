"""Builder-style request construction.

Example:
    >>> from httpext.http.request import http_request
    >>>
    >>> request = http_request(lambda b: b.uri("https://example.com/api").header("Accept", "application/json"))
    >>> request.method, str(request.url)
    ('GET', 'https://example.com/api')
    >>>
    >>> # Or chain the builder directly
    >>> from httpext.http.request import RequestBuilder
    >>> RequestBuilder().uri("https://example.com").POST(b"x").build().method
    'POST'
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping

import httpx

from httpext.core.exceptions import RequestBuildError
from httpext.urls import to_uri, to_x_www_form_url

_TOKEN_RE = re.compile(r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+")
_SCHEMES = ("http", "https")

Content = bytes | str | None


class RequestBuilder:
    """Fluent builder for ``httpx.Request``.

    Every setter returns the builder so calls can be chained. A builder
    can be reused: ``build()`` does not reset it and ``copy()`` returns
    an independent builder with the same state.

    Example:
        >>> from httpext.http.request import RequestBuilder
        >>> builder = RequestBuilder().uri("https://example.com/items")
        >>> builder.header("X-Trace", "1").header("X-Trace", "2").build().headers.get_list("X-Trace")
        ['1', '2']
    """

    def __init__(self) -> None:
        self._url: httpx.URL | None = None
        self._method = "GET"
        self._content: Content = None
        self._headers: list[tuple[str, str]] = []
        self._timeout: float | None = None

    def uri(self, url: str | httpx.URL) -> RequestBuilder:
        """Set the request URI.

        Raises:
            InvalidURIError: If a string URI cannot be parsed
            RequestBuildError: If the scheme is not http or https
        """
        if not isinstance(url, httpx.URL):
            url = to_uri(url)
        if url.scheme not in _SCHEMES:
            raise RequestBuildError(f"unsupported URI scheme: {url.scheme or '(none)'}")
        if not url.host:
            raise RequestBuildError(f"URI has no host: {url}")
        self._url = url
        return self

    def header(self, name: str, value: str) -> RequestBuilder:
        """Add a header, keeping any existing values for ``name``."""
        self._headers.append((self._check_header(name, value), value))
        return self

    def set_header(self, name: str, value: str) -> RequestBuilder:
        """Set a header, replacing any existing values for ``name``."""
        name = self._check_header(name, value)
        lowered = name.lower()
        self._headers = [(k, v) for k, v in self._headers if k.lower() != lowered]
        self._headers.append((name, value))
        return self

    def headers(self, headers: Mapping[str, str] | None = None, **pairs: str) -> RequestBuilder:
        """Add several headers at once."""
        for name, value in {**(headers or {}), **pairs}.items():
            self.header(name, value)
        return self

    def timeout(self, seconds: float) -> RequestBuilder:
        """Set a per-request timeout in seconds."""
        if seconds <= 0:
            raise RequestBuildError(f"timeout must be positive, got {seconds}")
        self._timeout = float(seconds)
        return self

    def method(self, name: str, content: Content = None) -> RequestBuilder:
        """Set the request method and optional body."""
        if not name or not _TOKEN_RE.fullmatch(name):
            raise RequestBuildError(f"invalid method name: {name!r}")
        self._method = name.upper()
        self._content = content
        return self

    def GET(self) -> RequestBuilder:  # noqa: N802
        return self.method("GET")

    def DELETE(self) -> RequestBuilder:  # noqa: N802
        return self.method("DELETE")

    def POST(self, content: Content = None) -> RequestBuilder:  # noqa: N802
        return self.method("POST", content)

    def PUT(self, content: Content = None) -> RequestBuilder:  # noqa: N802
        return self.method("PUT", content)

    def form(self, fields: Mapping[str, str], encoding: str = "utf-8") -> RequestBuilder:
        """POST ``fields`` as an application/x-www-form-urlencoded body."""
        body = "&".join(
            f"{to_x_www_form_url(k, encoding)}={to_x_www_form_url(v, encoding)}"
            for k, v in fields.items()
        )
        self.set_header("Content-Type", "application/x-www-form-urlencoded")
        return self.method("POST", body.encode("ascii"))

    def copy(self) -> RequestBuilder:
        """Return an independent builder with the same state."""
        other = RequestBuilder()
        other._url = self._url
        other._method = self._method
        other._content = self._content
        other._headers = list(self._headers)
        other._timeout = self._timeout
        return other

    def build(self) -> httpx.Request:
        """Build the request.

        Raises:
            RequestBuildError: If no URI has been set
        """
        if self._url is None:
            raise RequestBuildError("no URI set")

        extensions = {}
        if self._timeout is not None:
            extensions["timeout"] = httpx.Timeout(self._timeout).as_dict()

        return httpx.Request(
            self._method,
            self._url,
            headers=self._headers,
            content=self._content,
            extensions=extensions,
        )

    @staticmethod
    def _check_header(name: str, value: str) -> str:
        if not name or not _TOKEN_RE.fullmatch(name):
            raise RequestBuildError(f"invalid header name: {name!r}")
        if any((ord(ch) < 0x20 and ch != "\t") or ord(ch) >= 0x7F for ch in value):
            raise RequestBuildError(f"invalid value for header {name!r}")
        return name


def http_request(block: Callable[[RequestBuilder], object] | None = None) -> httpx.Request:
    """Build a request by applying ``block`` to a fresh RequestBuilder.

    Args:
        block: Callable that configures the builder (default: no-op)

    Returns:
        The built request

    Raises:
        RequestBuildError: If the configured request is incomplete

    Example:
        >>> def configure(b):
        ...     b.uri("https://example.com").timeout(5)
        >>> http_request(configure).extensions["timeout"]["read"]
        5.0
    """
    builder = RequestBuilder()
    if block is not None:
        block(builder)
    return builder.build()


__all__ = [
    "RequestBuilder",
    "http_request",
]
