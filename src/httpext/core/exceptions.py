"""Custom exceptions.

httpext uses a small hierarchy of exceptions rooted at HttpExtError.
Exceptions that describe bad input also derive from the matching builtin,
so callers can catch ``ValueError`` or ``LookupError`` as usual:

Example:
    >>> from httpext.core.exceptions import HttpExtError, InvalidURIError
    >>> isinstance(InvalidURIError("bad uri"), ValueError)
    True
    >>> try:
    ...     raise InvalidURIError("bad uri")
    ... except HttpExtError as e:
    ...     print(f"Caught: {type(e).__name__}")
    Caught: InvalidURIError
"""

from __future__ import annotations


class HttpExtError(Exception):
    """Base exception for httpext.

    Example:
        >>> from httpext.core.exceptions import HttpExtError
        >>> e = HttpExtError("something went wrong")
        >>> str(e)
        'something went wrong'
    """


class InvalidURIError(HttpExtError, ValueError):
    """A string could not be parsed as a URI.

    Example:
        >>> from httpext.core.exceptions import InvalidURIError
        >>> e = InvalidURIError("a b", "illegal character ' '", index=1)
        >>> str(e)
        "Invalid URI 'a b': illegal character ' ' at index 1"
    """

    def __init__(self, value: str, reason: str = "malformed URI", index: int | None = None):
        self.value = value
        self.reason = reason
        self.index = index
        message = f"Invalid URI {value!r}: {reason}"
        if index is not None:
            message += f" at index {index}"
        super().__init__(message)


class UnsupportedEncodingError(HttpExtError, LookupError):
    """The named character encoding is not supported.

    Example:
        >>> from httpext.core.exceptions import UnsupportedEncodingError
        >>> str(UnsupportedEncodingError("utf-99"))
        'Unsupported encoding: utf-99'
    """

    def __init__(self, encoding: str):
        self.encoding = encoding
        super().__init__(f"Unsupported encoding: {encoding}")


class RequestBuildError(HttpExtError, ValueError):
    """A request builder was given invalid input or is incomplete."""


class RequestFailedError(HttpExtError):
    """Sending a request failed before a response was received.

    Example:
        >>> from httpext.core.exceptions import RequestFailedError
        >>> str(RequestFailedError("https://example.com", "connection refused"))
        'Request to https://example.com failed: connection refused'
    """

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Request to {url} failed: {reason}")


class ExecutorBusyError(HttpExtError):
    """An executor was asked to run while it is already running."""


__all__ = [
    "HttpExtError",
    "InvalidURIError",
    "UnsupportedEncodingError",
    "RequestBuildError",
    "RequestFailedError",
    "ExecutorBusyError",
]
