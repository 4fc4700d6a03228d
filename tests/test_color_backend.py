# tests/test_color_backend.py
"""
ColorThiefBackend tests: real Pillow images for the mean color and input
handling; ColorThief itself is replaced by a dummy so results are exact.
"""

from __future__ import annotations

import io

import pytest
from PIL import Image

import chroma_extractor.extraction.color.backend.colorthief_backend as ctb
from chroma_extractor.extraction.color.backend import (
    AverageExtractor,
    ColorThiefBackend,
    PaletteExtractor,
    ProminentExtractor,
)
from chroma_extractor.extraction.color.constants import ColorEncoding, ExtractionKind
from chroma_extractor.extraction.general.utils.settings import ExtractorSettings
from chroma_extractor.extraction.orchestrator import ChromaExtractor


# ── Dummies ───────────────────────────────────────────────────────────────────
class DummyThief:
    instances: list["DummyThief"] = []

    def __init__(self, file):
        self.image = Image.open(file)
        self.calls: list[tuple] = []
        DummyThief.instances.append(self)

    def get_color(self, quality=10):
        self.calls.append(("get_color", quality))
        return (255, 0, 0)

    def get_palette(self, color_count=10, quality=10):
        self.calls.append(("get_palette", color_count, quality))
        return [(255, 0, 0), (0, 128, 0), (0, 0, 255)]


@pytest.fixture(autouse=True)
def dummy_thief(monkeypatch):
    DummyThief.instances = []
    monkeypatch.setattr(ctb, "ColorThief", DummyThief)
    return DummyThief


@pytest.fixture
def backend():
    return ColorThiefBackend(ExtractorSettings(palette_size=6, quality=3))


def _png_bytes(color, mode="RGB", size=(8, 8)) -> bytes:
    buf = io.BytesIO()
    Image.new(mode, size, color).save(buf, format="PNG")
    return buf.getvalue()


# ── Contracts ─────────────────────────────────────────────────────────────────
def test_backend_methods_satisfy_collaborator_protocols(backend):
    assert isinstance(backend.prominent, ProminentExtractor)
    assert isinstance(backend.average, AverageExtractor)
    assert isinstance(backend.palette, PaletteExtractor)


# ── Prominent ─────────────────────────────────────────────────────────────────
@pytest.mark.asyncio
async def test_prominent_hex_and_rgb(backend):
    image = _png_bytes((255, 0, 0))
    assert await backend.prominent(image, count=1, encoding=ColorEncoding.HEX) == "#ff0000"
    assert await backend.prominent(image, count=1, encoding=ColorEncoding.RGB) == [255, 0, 0]
    assert DummyThief.instances[0].calls == [("get_color", 3)]


@pytest.mark.asyncio
async def test_prominent_is_always_one_color(backend):
    out = await backend.prominent(_png_bytes((1, 2, 3)), count=2, encoding=ColorEncoding.HEX)
    assert out == "#ff0000"
    assert DummyThief.instances[0].calls == [("get_color", 3)]


# ── Average (real Pillow) ─────────────────────────────────────────────────────
@pytest.mark.asyncio
async def test_average_of_solid_image_is_that_color(backend):
    out = await backend.average(_png_bytes((10, 20, 30)), count=1, encoding=ColorEncoding.RGB)
    assert out == [10, 20, 30]


@pytest.mark.asyncio
async def test_average_of_two_halves(backend):
    img = Image.new("RGB", (2, 1))
    img.putpixel((0, 0), (0, 0, 0))
    img.putpixel((1, 0), (200, 100, 50))
    assert await backend.average(img, count=1, encoding=ColorEncoding.HEX) == "#643219"


@pytest.mark.asyncio
async def test_average_flattens_transparency_onto_white(backend):
    transparent = _png_bytes((0, 0, 0, 0), mode="RGBA")
    assert await backend.average(transparent, encoding=ColorEncoding.RGB) == [255, 255, 255]


@pytest.mark.asyncio
async def test_average_accepts_path_and_file_object(backend, tmp_path):
    path = tmp_path / "green.png"
    path.write_bytes(_png_bytes((0, 255, 0)))
    assert await backend.average(path, encoding=ColorEncoding.HEX) == "#00ff00"
    with path.open("rb") as fh:
        assert await backend.average(fh, encoding=ColorEncoding.HEX) == "#00ff00"


@pytest.mark.asyncio
async def test_average_of_grayscale_image(backend):
    assert await backend.average(_png_bytes(128, mode="L"), encoding=ColorEncoding.RGB) == [
        128,
        128,
        128,
    ]


@pytest.mark.asyncio
async def test_undecodable_input_raises(backend):
    with pytest.raises(Exception):
        await backend.average(b"not an image", encoding=ColorEncoding.HEX)


# ── Palette ───────────────────────────────────────────────────────────────────
@pytest.mark.asyncio
async def test_palette_returns_raw_entries_with_settings(backend):
    entries = await backend.palette(_png_bytes((0, 0, 0)))
    assert entries == [
        {"hex": "#ff0000", "red": 255, "green": 0, "blue": 0},
        {"hex": "#008000", "red": 0, "green": 128, "blue": 0},
        {"hex": "#0000ff", "red": 0, "green": 0, "blue": 255},
    ]
    assert DummyThief.instances[0].calls == [("get_palette", 6, 3)]


@pytest.mark.asyncio
async def test_colorthief_receives_rgb_png_even_for_pil_input(backend):
    await backend.palette(Image.new("P", (4, 4)))
    assert DummyThief.instances[0].image.format == "PNG"
    assert DummyThief.instances[0].image.mode == "RGB"


# ── Shared inputs across concurrent kinds ─────────────────────────────────────
def _busy_png_bytes(size=(400, 400)) -> bytes:
    buf = io.BytesIO()
    Image.effect_noise(size, 64).convert("RGB").save(buf, format="PNG")
    return buf.getvalue()


@pytest.mark.asyncio
@pytest.mark.parametrize("as_pil", [False, True])
async def test_all_kinds_concurrently_on_one_image_object(backend, as_pil):
    payload = _busy_png_bytes()
    for _ in range(5):
        shared = Image.open(io.BytesIO(payload)) if as_pil else io.BytesIO(payload)
        ex = ChromaExtractor(backend=backend, settings=ExtractorSettings())
        ex.request_prominent(shared)
        ex.request_average(shared, "rgb")
        ex.request_palette(shared)
        await ex.drain()

        assert {k: s.error for k, s in ex.status.items()} == {
            ExtractionKind.PROMINENT: None,
            ExtractionKind.AVERAGE: None,
            ExtractionKind.PALETTE: None,
        }
        assert ex.state.prominent == "#ff0000"
        assert len(ex.state.average) == 3
        assert ex.state.palette == ("#ff0000", "#008000", "#0000ff")


@pytest.mark.asyncio
async def test_file_object_is_read_on_the_calling_thread(backend, monkeypatch):
    seen = []

    async def fake_to_thread(fn, arg):
        seen.append(arg)
        return fn(arg)

    monkeypatch.setattr(ctb.asyncio, "to_thread", fake_to_thread)
    stream = io.BytesIO(_png_bytes((0, 0, 255)))
    stream.seek(5)
    assert await backend.average(stream, encoding=ColorEncoding.HEX) == "#0000ff"
    assert isinstance(seen[0], bytes)
