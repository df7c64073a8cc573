import pytest
import requests

from seo_preview.base_module import build_request_url, is_valid_url
from seo_preview.errors import (
    FetchFailedError,
    ForbiddenError,
    InvalidURLError,
    NetworkError,
    NotFoundError,
    RateLimitedError,
)
from seo_preview.extraction import MetadataExtractor

PATHS = ["", "https://proxy.test/raw?url="]


def FakeResponse(status_code=200, body=b"", content_type="text/html; charset=utf-8"):
    """A real requests.Response, with the encoding requests would pick from the headers."""
    if isinstance(body, str):
        body = body.encode("utf-8")
    resp = requests.Response()
    resp.status_code = status_code
    resp._content = body
    resp.headers["Content-Type"] = content_type
    resp.encoding = requests.utils.get_encoding_from_headers(resp.headers)
    resp.url = "https://example.com/"
    return resp


def make_extractor(monkeypatch, outcomes):
    """Session.get returns (or raises) each outcome in turn and records the requested URLs."""
    extractor = MetadataExtractor(config={"Global": {"access_paths": PATHS, "request_timeout": 3}})
    calls = []
    remaining = list(outcomes)

    def fake_get(url, timeout=None, **kwargs):
        calls.append((url, timeout))
        outcome = remaining.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    monkeypatch.setattr(extractor.session, "get", fake_get)
    return extractor, calls


def test_build_request_url():
    assert build_request_url("", "https://example.com/a?b=1") == "https://example.com/a?b=1"
    assert build_request_url("https://proxy.test/raw?url=", "https://example.com/a?b=1") == (
        "https://proxy.test/raw?url=https%3A%2F%2Fexample.com%2Fa%3Fb%3D1"
    )


@pytest.mark.parametrize("url,valid", [
    ("https://example.com", True),
    ("http://example.com/page", True),
    ("example.com", False),
    ("ftp://example.com", False),
    ("https://", False),
    ("", False),
])
def test_is_valid_url(url, valid):
    assert is_valid_url(url) is valid


def test_invalid_url_is_rejected_before_any_request(monkeypatch):
    extractor, calls = make_extractor(monkeypatch, [])
    with pytest.raises(InvalidURLError):
        extractor.fetch_html("not-a-url")
    assert calls == []


def test_direct_success_skips_proxies(monkeypatch):
    extractor, calls = make_extractor(monkeypatch, [FakeResponse(200, "<title>ok</title>")])
    assert extractor.fetch_html("https://example.com/") == b"<title>ok</title>"
    assert calls == [("https://example.com/", 3)]


def test_falls_back_to_next_access_path(monkeypatch):
    extractor, calls = make_extractor(monkeypatch, [
        requests.exceptions.ConnectionError("refused"),
        FakeResponse(200, "<title>via proxy</title>"),
    ])
    assert extractor.fetch_html("https://example.com/") == b"<title>via proxy</title>"
    assert calls[1][0].startswith("https://proxy.test/raw?url=https%3A")


@pytest.mark.parametrize("status,error_cls", [
    (429, RateLimitedError),
    (403, ForbiddenError),
    (404, NotFoundError),
    (500, FetchFailedError),
])
def test_last_failure_is_classified(monkeypatch, status, error_cls):
    extractor, _ = make_extractor(monkeypatch, [
        requests.exceptions.ConnectionError("refused"),
        FakeResponse(status),
    ])
    with pytest.raises(error_cls) as excinfo:
        extractor.fetch_html("https://example.com/")
    assert excinfo.value.status_code == status


def test_no_response_is_a_network_error(monkeypatch):
    extractor, _ = make_extractor(monkeypatch, [
        FakeResponse(429),
        requests.exceptions.Timeout("slow"),
    ])
    with pytest.raises(NetworkError) as excinfo:
        extractor.fetch_html("https://example.com/")
    assert excinfo.value.to_dict() == {
        "error": "Network error. Please check your internet connection and try again.",
        "kind": "network",
    }


def test_module_analyze_returns_record(monkeypatch):
    html = '<html lang="en"><title>Fetched</title><link rel="icon" href="/i.png"></html>'
    extractor, _ = make_extractor(monkeypatch, [FakeResponse(200, html)])

    results = extractor.analyze("https://example.com/page")["MetadataExtractor"]

    assert results["extraction_status"] == "completed"
    assert results["record"].title == "Fetched"
    assert results["record"].favicon == "https://example.com/i.png"


def test_utf8_page_without_header_charset_is_decoded_from_meta(monkeypatch):
    title = "Café crème brûlée recipes – the best guide ever!"
    html = f'<html><head><meta charset="utf-8"><title>{title}</title></head></html>'.encode("utf-8")
    response = FakeResponse(200, html, content_type="text/html")
    # requests alone would fall back to ISO-8859-1 here
    assert response.encoding == "ISO-8859-1"
    extractor, _ = make_extractor(monkeypatch, [response])

    record = extractor.analyze("https://example.com/recipes")["MetadataExtractor"]["record"]

    assert record.title == title
    assert len(record.title) == 48
