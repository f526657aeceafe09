"""Tests for base image loading."""

from __future__ import annotations

import pytest
import requests

from profile_cards.utils import image_source
from profile_cards.utils.image_source import ImageSourceError, is_url, load_base_image


class _FakeResponse:
    def __init__(self, content: bytes, status: int = 200) -> None:
        self.content = content
        self.status_code = status

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Client Error")


def test_is_url():
    assert is_url("https://i.postimg.cc/LXMYjwtX/base.png")
    assert is_url("HTTP://example.com/a.png")
    assert not is_url("assets/brain.png")
    assert not is_url("/srv/images/animal.png")


def test_load_local_file(tmp_path):
    path = tmp_path / "animal.png"
    path.write_bytes(b"\x89PNG fake")
    assert load_base_image(str(path)) == b"\x89PNG fake"


def test_load_missing_local_file(tmp_path):
    with pytest.raises(ImageSourceError, match="failed to read"):
        load_base_image(str(tmp_path / "nope.png"))


def test_load_url(monkeypatch):
    seen = {}

    def fake_get(url, timeout):
        seen["url"] = url
        seen["timeout"] = timeout
        return _FakeResponse(b"png-bytes")

    monkeypatch.setattr(image_source.requests, "get", fake_get)
    assert load_base_image("https://example.com/brain.png", timeout=3.5) == b"png-bytes"
    assert seen == {"url": "https://example.com/brain.png", "timeout": 3.5}


def test_load_url_http_error(monkeypatch):
    monkeypatch.setattr(image_source.requests, "get", lambda url, timeout: _FakeResponse(b"", 404))
    with pytest.raises(ImageSourceError, match="404"):
        load_base_image("https://example.com/missing.png")


def test_load_url_connection_error(monkeypatch):
    def fake_get(url, timeout):
        raise requests.ConnectionError("connection refused")

    monkeypatch.setattr(image_source.requests, "get", fake_get)
    with pytest.raises(ImageSourceError, match="connection refused"):
        load_base_image("http://localhost:9/animal.png")
