# tests/test_demo.py
"""End-to-end: demo CLI over the default ColorThief backend (ColorThief stubbed)."""

from __future__ import annotations

import json

import pytest
from PIL import Image

import chroma_extractor.extraction.color.backend.colorthief_backend as ctb
from chroma_extractor import demo
from chroma_extractor.extraction.general.utils.settings import get_settings


class DummyThief:
    def __init__(self, file):
        self.file = file

    def get_color(self, quality=10):
        return (255, 0, 0)

    def get_palette(self, color_count=10, quality=10):
        return [(255, 0, 0), (250, 250, 250)]


@pytest.fixture(autouse=True)
def _stub_colorthief(monkeypatch):
    monkeypatch.setattr(ctb, "ColorThief", DummyThief)
    for var in ("CHROMA_DATA_DIR", "CHROMA_PALETTE_SIZE", "CHROMA_QUALITY"):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def red_png(tmp_path):
    path = tmp_path / "red.png"
    Image.new("RGB", (6, 6), (255, 0, 0)).save(path)
    return path


def _json_from(out: str) -> dict:
    return json.loads(out[out.index("{"):])


def test_demo_prints_all_three_kinds_in_hex(red_png, capsys):
    assert demo.main([str(red_png)]) == 0
    result = _json_from(capsys.readouterr().out)
    assert result == {
        "average": "#ff0000",
        "prominent": "#ff0000",
        "palette": ["#ff0000", "#fafafa"],
        "errors": {},
    }


def test_demo_rgb_encoding(red_png, capsys):
    assert demo.main([str(red_png), "--encoding", "rgb"]) == 0
    result = _json_from(capsys.readouterr().out)
    assert result["prominent"] == [255, 0, 0]
    assert result["average"] == [255, 0, 0]
    assert result["palette"] == [[255, 0, 0], [250, 250, 250]]


def test_demo_unsupported_encoding_falls_back_to_hex(red_png, capsys):
    assert demo.main([str(red_png), "--encoding", "cmyk"]) == 0
    assert _json_from(capsys.readouterr().out)["prominent"] == "#ff0000"


def test_demo_reports_failures(tmp_path, capsys):
    missing = tmp_path / "missing.png"
    assert demo.main([str(missing)]) == 1
    captured = capsys.readouterr()
    result = _json_from(captured.out)
    assert result["prominent"] == "" and result["palette"] == []
    assert set(result["errors"]) == {"prominent", "average", "palette"}
    assert "failed" in captured.err
