"""Tests for httpext.http.request."""

from __future__ import annotations

import httpx
import pytest

from httpext.core.exceptions import InvalidURIError, RequestBuildError
from httpext.http.request import RequestBuilder, http_request


class TestHttpRequest:
    """http_request applies a configuration block."""

    def test_block_configures_builder(self) -> None:
        """The block receives a fresh builder."""
        request = http_request(lambda b: b.uri("https://example.com/a"))
        assert isinstance(request, httpx.Request)
        assert request.method == "GET"
        assert request.url == httpx.URL("https://example.com/a")

    def test_block_may_use_statements(self) -> None:
        """A regular function works as a block."""

        def configure(b: RequestBuilder) -> None:
            b.uri("https://example.com")
            b.header("Accept", "text/plain")
            b.POST("payload")

        request = http_request(configure)
        assert request.method == "POST"
        assert request.headers["Accept"] == "text/plain"
        assert request.content == b"payload"

    def test_no_block_fails_without_uri(self) -> None:
        """Building without a URI is an error."""
        with pytest.raises(RequestBuildError, match="no URI"):
            http_request()


class TestRequestBuilderUri:
    """URI handling."""

    def test_accepts_url_object(self) -> None:
        """An httpx.URL is used as-is."""
        url = httpx.URL("http://example.com/x")
        assert RequestBuilder().uri(url).build().url == url

    def test_rejects_unsupported_scheme(self) -> None:
        """Only http and https are allowed."""
        with pytest.raises(RequestBuildError, match="scheme"):
            RequestBuilder().uri("ftp://example.com/file")

    def test_rejects_relative(self) -> None:
        """A relative URI has no scheme."""
        with pytest.raises(RequestBuildError):
            RequestBuilder().uri("/relative")

    def test_invalid_string(self) -> None:
        """Unparseable strings raise InvalidURIError."""
        with pytest.raises(InvalidURIError):
            RequestBuilder().uri("http://example.com/a b")


class TestRequestBuilderHeaders:
    """Header handling."""

    def test_header_appends(self) -> None:
        """header() keeps existing values."""
        request = (
            RequestBuilder()
            .uri("https://example.com")
            .header("X-Tag", "a")
            .header("X-Tag", "b")
            .build()
        )
        assert request.headers.get_list("X-Tag") == ["a", "b"]

    def test_set_header_replaces(self) -> None:
        """set_header() replaces values regardless of name case."""
        request = (
            RequestBuilder()
            .uri("https://example.com")
            .header("X-Tag", "a")
            .set_header("x-tag", "c")
            .build()
        )
        assert request.headers.get_list("X-Tag") == ["c"]

    def test_headers_bulk(self) -> None:
        """headers() adds a mapping and keyword pairs."""
        request = (
            RequestBuilder()
            .uri("https://example.com")
            .headers({"Accept": "text/html"}, Authorization="Bearer t")
            .build()
        )
        assert request.headers["Accept"] == "text/html"
        assert request.headers["Authorization"] == "Bearer t"

    @pytest.mark.parametrize("name", ["", "Bad Name", "X:Y", "X\nY"])
    def test_invalid_header_name(self, name: str) -> None:
        """Header names must be tokens."""
        with pytest.raises(RequestBuildError):
            RequestBuilder().header(name, "v")

    @pytest.mark.parametrize(
        "value",
        ["a\r\nInjected: 1", "café", "null\0byte", "bell\x07", "del\x7f"],
    )
    def test_invalid_header_value(self, value: str) -> None:
        """Header values must be printable ASCII."""
        with pytest.raises(RequestBuildError):
            RequestBuilder().header("X-Test", value)
        with pytest.raises(RequestBuildError):
            RequestBuilder().set_header("X-Test", value)

    def test_tab_in_header_value(self) -> None:
        """Horizontal tabs are allowed in values."""
        request = RequestBuilder().uri("https://example.com").header("X-Test", "a\tb").build()
        assert request.headers["X-Test"] == "a\tb"


class TestRequestBuilderMethods:
    """Method and body handling."""

    def test_default_get(self) -> None:
        """GET without a body by default."""
        request = RequestBuilder().uri("https://example.com").build()
        assert request.method == "GET"
        assert request.content == b""

    @pytest.mark.parametrize(
        ("configure", "method"),
        [
            (lambda b: b.GET(), "GET"),
            (lambda b: b.DELETE(), "DELETE"),
            (lambda b: b.POST(b"x"), "POST"),
            (lambda b: b.PUT("x"), "PUT"),
            (lambda b: b.method("patch", b"x"), "PATCH"),
        ],
    )
    def test_methods(self, configure, method: str) -> None:
        """Each shortcut sets its method."""
        builder = RequestBuilder().uri("https://example.com")
        configure(builder)
        assert builder.build().method == method

    def test_invalid_method(self) -> None:
        """Method names must be tokens."""
        with pytest.raises(RequestBuildError):
            RequestBuilder().method("GE T")

    def test_form(self) -> None:
        """form() POSTs an urlencoded body."""
        request = (
            RequestBuilder()
            .uri("https://example.com/login")
            .form({"user": "a b", "pass": "p&w~"})
            .build()
        )
        assert request.method == "POST"
        assert request.headers["Content-Type"] == "application/x-www-form-urlencoded"
        assert request.content == b"user=a+b&pass=p%26w%7E"


class TestRequestBuilderTimeout:
    """Per-request timeout."""

    def test_timeout_extension(self) -> None:
        """timeout() sets the httpx timeout extension."""
        request = RequestBuilder().uri("https://example.com").timeout(2.5).build()
        assert request.extensions["timeout"] == httpx.Timeout(2.5).as_dict()

    def test_no_timeout_by_default(self) -> None:
        """Without timeout() the extension is absent."""
        request = RequestBuilder().uri("https://example.com").build()
        assert "timeout" not in request.extensions

    @pytest.mark.parametrize("seconds", [0, -1])
    def test_rejects_non_positive(self, seconds: float) -> None:
        """Timeouts must be positive."""
        with pytest.raises(RequestBuildError):
            RequestBuilder().timeout(seconds)


class TestRequestBuilderCopy:
    """Builder reuse."""

    def test_copy_is_independent(self) -> None:
        """Changes to a copy do not affect the original."""
        base = RequestBuilder().uri("https://example.com").header("X-A", "1")
        other = base.copy().header("X-B", "2").POST(b"x")

        original = base.build()
        copied = other.build()

        assert "X-B" not in original.headers
        assert original.method == "GET"
        assert copied.headers["X-A"] == "1"
        assert copied.method == "POST"

    def test_build_twice(self) -> None:
        """build() can be called more than once."""
        builder = RequestBuilder().uri("https://example.com")
        assert builder.build().url == builder.build().url
