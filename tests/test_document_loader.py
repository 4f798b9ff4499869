import pytest
import requests

from studyguide.errors import DocumentLoadError
from studyguide.utils import document_loader
from studyguide.utils.document_loader import is_remote, load_document


class FakeResponse:
    def __init__(self, text, status_code=200, content_type="text/markdown"):
        self.text = text
        self.status_code = status_code
        self.headers = {"Content-Type": content_type}
        self.encoding = "ISO-8859-1"

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")


def test_is_remote():
    assert is_remote("https://example.com/guide.md")
    assert is_remote("HTTP://example.com/guide.md")
    assert not is_remote("/tmp/guide.md")
    assert not is_remote("guide.md")


def test_load_local_file(tmp_path):
    path = tmp_path / "guide.md"
    path.write_text("## 1. Heaps\nmin-heap ✓", encoding="utf-8")

    assert load_document(path) == "## 1. Heaps\nmin-heap ✓"
    assert load_document(str(path)) == "## 1. Heaps\nmin-heap ✓"


def test_missing_local_file_raises(tmp_path):
    with pytest.raises(DocumentLoadError):
        load_document(tmp_path / "missing.md")


def test_load_remote_document(monkeypatch):
    calls = []

    def fake_get(url, headers=None, timeout=None):
        calls.append({"url": url, "timeout": timeout})
        return FakeResponse("## 1. Remote\nbody")

    monkeypatch.setattr(document_loader.requests, "get", fake_get)

    assert load_document("https://example.com/guide.md", timeout=5.0) == "## 1. Remote\nbody"
    assert calls == [{"url": "https://example.com/guide.md", "timeout": 5.0}]


def test_remote_without_charset_is_decoded_as_utf8(monkeypatch):
    response = FakeResponse("text", content_type="text/plain")
    monkeypatch.setattr(document_loader.requests, "get", lambda *args, **kwargs: response)

    load_document("https://example.com/guide.md")

    assert response.encoding == "utf-8"


def test_remote_http_error_raises(monkeypatch):
    monkeypatch.setattr(
        document_loader.requests,
        "get",
        lambda *args, **kwargs: FakeResponse("nope", status_code=404),
    )

    with pytest.raises(DocumentLoadError):
        load_document("https://example.com/missing.md")


def test_remote_connection_error_raises(monkeypatch):
    def fake_get(*args, **kwargs):
        raise requests.ConnectionError("connection refused")

    monkeypatch.setattr(document_loader.requests, "get", fake_get)

    with pytest.raises(DocumentLoadError):
        load_document("http://localhost:1/guide.md")
