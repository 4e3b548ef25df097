import urllib.error
import urllib.request

import pytest

from edulinks.infrastructure.web import meta_description
from edulinks.infrastructure.web.meta_description import extract_meta_description, fetch_meta_description


class _FakeHeaders:
    def get_content_charset(self) -> str:
        return "utf-8"


class _FakeResponse:
    headers = _FakeHeaders()

    def __init__(self, body: bytes) -> None:
        self._body = body

    def read(self, size: int = -1) -> bytes:
        return self._body

    def __enter__(self) -> "_FakeResponse":
        return self

    def __exit__(self, *exc: object) -> None:
        return None


def test_extract_meta_description_prefers_named_description() -> None:
    page = """
    <html><head>
      <meta property="og:description" content="Open graph text">
      <meta name="Description" content="  Learn   Go
        interactively &amp; quickly ">
    </head><body></body></html>
    """
    assert extract_meta_description(page) == "Learn Go interactively & quickly"


def test_extract_meta_description_falls_back_to_open_graph() -> None:
    page = '<meta property="og:description" content="Open graph text"><meta name="description" content="">'
    assert extract_meta_description(page) == "Open graph text"
    assert extract_meta_description("<html><title>No meta</title></html>") is None


def test_fetch_meta_description_reads_page(monkeypatch: pytest.MonkeyPatch) -> None:
    seen: list[str] = []

    def fake_urlopen(request: urllib.request.Request, timeout: float) -> _FakeResponse:
        seen.append(request.full_url)
        return _FakeResponse(b'<meta name="description" content="A tour">')

    monkeypatch.setattr(meta_description.urllib.request, "urlopen", fake_urlopen)

    assert fetch_meta_description(" https://go.dev/tour ", timeout=1.0) == "A tour"
    assert seen == ["https://go.dev/tour"]


def test_fetch_meta_description_returns_none_on_failure(monkeypatch: pytest.MonkeyPatch) -> None:
    def failing_urlopen(request: urllib.request.Request, timeout: float) -> _FakeResponse:
        raise urllib.error.URLError("offline")

    monkeypatch.setattr(meta_description.urllib.request, "urlopen", failing_urlopen)
    assert fetch_meta_description("https://example.org") is None


def test_fetch_meta_description_skips_non_http_urls(monkeypatch: pytest.MonkeyPatch) -> None:
    def unexpected_urlopen(request: urllib.request.Request, timeout: float) -> _FakeResponse:
        raise AssertionError("should not fetch")

    monkeypatch.setattr(meta_description.urllib.request, "urlopen", unexpected_urlopen)
    assert fetch_meta_description("file:///etc/passwd") is None
    assert fetch_meta_description("not a url") is None
