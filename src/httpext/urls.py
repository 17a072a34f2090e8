"""URL helpers.

Form-encoding compatible with ``java.net.URLEncoder`` and strict URI
parsing that rejects strings a browser would silently "fix".

Example:
    >>> from httpext.urls import to_uri, to_x_www_form_url
    >>> to_x_www_form_url("a b&c=d~")
    'a+b%26c%3Dd%7E'
    >>> str(to_uri("https://example.com/search?q=1"))
    'https://example.com/search?q=1'
"""

from __future__ import annotations

import codecs
import logging
import re
from urllib.parse import quote_plus, unquote_plus

import httpx

from httpext.core.exceptions import InvalidURIError, UnsupportedEncodingError

logger = logging.getLogger(__name__)

# Characters that may never appear literally in a URI (RFC 2396, 2.4.3)
_EXCLUDED = frozenset('"<>\\^`{|}')
_SCHEME_RE = re.compile(r"[A-Za-z][A-Za-z0-9+.\-]*")
_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def _check_encoding(encoding: str) -> str:
    try:
        name = codecs.lookup(encoding).name
        "".encode(encoding)
    except LookupError as e:
        raise UnsupportedEncodingError(encoding) from e
    return name


def to_x_www_form_url(text: str, encoding: str = "utf-8") -> str:
    """Translate a string into application/x-www-form-urlencoded format.

    Letters, digits and ``.-*_`` stay as they are, a space becomes ``+``
    and every other byte of the encoded text becomes ``%XX``. Characters
    the encoding cannot represent are sent as ``?``.

    Args:
        text: Text to encode
        encoding: Character encoding for the bytes (default: UTF-8)

    Returns:
        The translated string

    Raises:
        UnsupportedEncodingError: If the named encoding is not supported

    Example:
        >>> to_x_www_form_url("tom & jerry")
        'tom+%26+jerry'
        >>> to_x_www_form_url("caf\\u00e9")
        'caf%C3%A9'
    """
    _check_encoding(encoding)
    # quote_plus keeps "~" and drops "*", URLEncoder does the opposite
    return quote_plus(text, safe="*", encoding=encoding, errors="replace").replace("~", "%7E")


def from_x_www_form_url(text: str, encoding: str = "utf-8") -> str:
    """Decode an application/x-www-form-urlencoded string.

    Raises:
        UnsupportedEncodingError: If the named encoding is not supported
        InvalidURIError: If the text contains a malformed ``%`` escape

    Example:
        >>> from_x_www_form_url("tom+%26+jerry")
        'tom & jerry'
    """
    _check_encoding(encoding)
    match = _BAD_ESCAPE_RE.search(text)
    if match:
        raise InvalidURIError(text, "malformed escape", index=match.start())
    return unquote_plus(text, encoding=encoding, errors="replace")


def _check_uri_chars(text: str) -> None:
    for index, ch in enumerate(text):
        code = ord(ch)
        if code <= 0x20 or code == 0x7F or ch in _EXCLUDED:
            raise InvalidURIError(text, f"illegal character {ch!r}", index=index)
        if code > 0x7F and (ch.isspace() or not ch.isprintable()):
            raise InvalidURIError(text, f"illegal character {ch!r}", index=index)

    match = _BAD_ESCAPE_RE.search(text)
    if match:
        raise InvalidURIError(text, "malformed escape pair", index=match.start())

    if text.count("#") > 1:
        raise InvalidURIError(text, "more than one fragment", index=text.index("#", text.index("#") + 1))


def _check_scheme(text: str) -> None:
    end = len(text)
    for delim in "/?#":
        pos = text.find(delim)
        if pos != -1:
            end = min(end, pos)

    colon = text.find(":", 0, end)
    if colon == -1:
        return
    if colon == 0:
        raise InvalidURIError(text, "expected scheme name", index=0)
    if not _SCHEME_RE.fullmatch(text[:colon]):
        raise InvalidURIError(text, "illegal character in scheme name", index=0)
    if colon == len(text) - 1:
        raise InvalidURIError(text, "expected scheme-specific part", index=colon + 1)


def to_uri(text: str) -> httpx.URL:
    """Create a URI by parsing the given string.

    Relative references (no scheme) are accepted. Non-ASCII letters are
    allowed and percent-encoded by httpx, but whitespace, control
    characters and the RFC 2396 "unwise" characters are not.

    Args:
        text: String to parse

    Returns:
        The parsed URI

    Raises:
        InvalidURIError: If the string is not a valid URI

    Example:
        >>> to_uri("/relative/path?x=1").path
        '/relative/path'
        >>> to_uri("http://example.com/a b")
        Traceback (most recent call last):
        ...
        httpext.core.exceptions.InvalidURIError: Invalid URI 'http://example.com/a b': illegal character ' ' at index 20
    """
    _check_uri_chars(text)
    _check_scheme(text)

    try:
        return httpx.URL(text)
    except httpx.InvalidURL as e:
        logger.debug(f"httpx rejected URI {text!r}: {e}")
        raise InvalidURIError(text, str(e)) from e


__all__ = [
    "to_x_www_form_url",
    "from_x_www_form_url",
    "to_uri",
]
