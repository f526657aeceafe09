"""Tests for the font registry."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from profile_cards.engine.fonts import FontRegistry

_SYSTEM_BOLD_FONTS = [
    "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf",
    "/usr/share/fonts/truetype/liberation/LiberationSans-Bold.ttf",
    "/usr/share/fonts/dejavu/DejaVuSans-Bold.ttf",
]


def test_register_missing_file_is_logged_not_raised(tmp_path, caplog):
    reg = FontRegistry()
    with caplog.at_level(logging.ERROR, logger="profile_cards.engine.fonts"):
        ok = reg.register(tmp_path / "Arial_Bold.ttf", "Arial Bold")
    assert ok is False
    assert reg.count == 0
    assert not reg.is_registered("Arial Bold")
    assert "Failed to register font" in caplog.text


def test_register_garbage_file(tmp_path):
    bogus = tmp_path / "bogus.ttf"
    bogus.write_bytes(b"not a font")
    reg = FontRegistry()
    assert reg.register(bogus, "Bogus") is False


def test_unregistered_family_falls_back_to_default():
    reg = FontRegistry()
    font = reg.get("Arial Bold", 40)
    assert font.getbbox("30%")[2] > 0
    # Larger requested size gives larger text
    assert reg.get("Arial Bold", 40).getbbox("30%")[2] > reg.get("Arial Bold", 20).getbbox("30%")[2]


def test_register_real_font():
    path = next((Path(p) for p in _SYSTEM_BOLD_FONTS if Path(p).exists()), None)
    if path is None:
        pytest.skip("no system TrueType font available")
    reg = FontRegistry()
    assert reg.register(path, "Arial Bold") is True
    assert reg.register(path, "Arial Bold") is True
    assert reg.count == 1
    assert reg.get("Arial Bold", 36).size == 36
