"""Response body handlers.

A body handler turns a fully read ``httpx.Response`` into the value
returned by :func:`httpext.http.client.load`. The factories here cover
the common cases; any ``Callable[[httpx.Response], T]`` works too.

Example:
    >>> import httpx
    >>> from httpext.http import body_handlers
    >>> response = httpx.Response(200, text="line one\\nline two")
    >>> body_handlers.of_lines()(response)
    ['line one', 'line two']
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar

import httpx

T = TypeVar("T")

BodyHandler = Callable[[httpx.Response], T]


def of_string(encoding: str | None = None) -> BodyHandler[str]:
    """Decode the body as text.

    Uses the response charset unless ``encoding`` is given.
    """

    def handler(response: httpx.Response) -> str:
        if encoding is None:
            return response.text
        return response.content.decode(encoding)

    return handler


def of_bytes() -> BodyHandler[bytes]:
    """Return the raw body."""
    return lambda response: response.content


def of_json() -> BodyHandler[Any]:
    """Parse the body as JSON."""
    return lambda response: response.json()


def of_lines() -> BodyHandler[list[str]]:
    """Split the decoded body into lines without line endings."""
    return lambda response: response.text.splitlines()


def of_file(path: Path | str) -> BodyHandler[Path]:
    """Write the body to ``path`` and return the path.

    The body is written to a temporary sibling first and renamed into
    place, so a failed write never leaves a partial file at ``path``.
    """
    dest = Path(path)

    def handler(response: httpx.Response) -> Path:
        dest.parent.mkdir(parents=True, exist_ok=True)
        temp_path = dest.with_suffix(dest.suffix + ".tmp")
        try:
            temp_path.write_bytes(response.content)
            temp_path.replace(dest)
        except OSError:
            temp_path.unlink(missing_ok=True)
            raise
        return dest

    return handler


def discarding() -> BodyHandler[None]:
    """Ignore the body."""
    return lambda response: None


def replacing(value: T) -> BodyHandler[T]:
    """Ignore the body and return ``value`` instead."""
    return lambda response: value


__all__ = [
    "BodyHandler",
    "of_string",
    "of_bytes",
    "of_json",
    "of_lines",
    "of_file",
    "discarding",
    "replacing",
]
