"""
colorthief_backend.py.
=====================

Does: Adapt ColorThief (dominant color, palette) and Pillow's ImageStat (mean
      color) to the async collaborator contracts used by ChromaExtractor.
      Blocking library calls run in a worker thread so the event loop stays free.
      Stream and PIL inputs are copied on the loop thread first, so the three
      kinds can run concurrently on the same image object.
Returns: Colors already encoded ('#rrggbb' or [r, g, b]) for prominent/average,
         raw PaletteEntry dicts for palette.
Used by: ChromaExtractor when no custom collaborators are injected, demo CLI.
"""

from __future__ import annotations

# ── Imports & Typing ─────────────────────────────────────────────────────────
import asyncio
import io
import logging
import os
from typing import Any, BinaryIO

from colorthief import ColorThief
from PIL import Image, ImageStat

from chroma_extractor.extraction.color.backend.types import PaletteEntry
from chroma_extractor.extraction.color.constants import (
    DEFAULT_ENCODING,
    SINGLE_COLOR_COUNT,
    ColorEncoding,
)
from chroma_extractor.extraction.color.utils.rgb_convert import (
    coerce_rgb,
    encode_rgb,
    palette_entry,
)
from chroma_extractor.extraction.general.utils.settings import (
    ExtractorSettings,
    get_settings,
)

# ── Logger ───────────────────────────────────────────────────────────────────
logger = logging.getLogger(__name__)

__all__ = [
    "ColorThiefBackend",
    "open_rgb_image",
]

# Background used when flattening transparent images
_FLATTEN_BACKGROUND = (255, 255, 255)


# ── Image helpers ────────────────────────────────────────────────────────────
def _as_source(image: Any) -> str | os.PathLike[str] | BinaryIO:
    """Does: Turn bytes into a file object; paths and file objects pass through."""
    if isinstance(image, (bytes, bytearray, memoryview)):
        return io.BytesIO(bytes(image))
    if hasattr(image, "seek"):
        image.seek(0)
    return image


def _detach(image: Any) -> Any:
    """Does: Give a worker thread an input it does not share with other workers.
    File objects are read into bytes; PIL images are loaded and copied.
    """
    if isinstance(image, Image.Image):
        image.load()
        return image.copy()
    if isinstance(image, (bytes, bytearray, memoryview)):
        return bytes(image)
    if hasattr(image, "read"):
        if hasattr(image, "seek"):
            image.seek(0)
        return image.read()
    return image


def open_rgb_image(image: Any) -> Image.Image:
    """Does: Open a path/bytes/file/PIL image as an RGB PIL image,
    flattening transparency onto white.
    """
    img = image if isinstance(image, Image.Image) else Image.open(_as_source(image))
    if img.mode in ("RGBA", "LA", "P"):
        img = img.convert("RGBA")
        background = Image.new("RGB", img.size, _FLATTEN_BACKGROUND)
        background.paste(img, mask=img.split()[-1])
        return background
    if img.mode != "RGB":
        img = img.convert("RGB")
    return img


def _png_buffer(image: Any) -> io.BytesIO:
    """Does: Re-encode any supported image input as an in-memory PNG for ColorThief."""
    buf = io.BytesIO()
    open_rgb_image(image).save(buf, format="PNG")
    buf.seek(0)
    return buf


# ── Backend ──────────────────────────────────────────────────────────────────
class ColorThiefBackend:
    """Does: Bundle the three default collaborators.
    Args: settings: ExtractorSettings (palette_size, quality); loaded from
          data/extractor_settings.json when omitted.
    Returns: Instance whose prominent/average/palette coroutines satisfy the
             collaborator protocols.
    """

    def __init__(self, settings: ExtractorSettings | None = None):
        self.settings = settings or get_settings()

    # Blocking parts (run in a worker thread)
    def _thief(self, image: Any) -> ColorThief:
        return ColorThief(_png_buffer(image))

    def _dominant_sync(self, image: Any) -> tuple[int, int, int]:
        return coerce_rgb(self._thief(image).get_color(quality=self.settings.quality))

    def _mean_sync(self, image: Any) -> tuple[int, int, int]:
        return coerce_rgb(ImageStat.Stat(open_rgb_image(image)).mean)

    def _palette_sync(self, image: Any) -> list[PaletteEntry]:
        raw = self._thief(image).get_palette(
            color_count=self.settings.palette_size, quality=self.settings.quality
        )
        return [palette_entry(coerce_rgb(c)) for c in raw]  # type: ignore[misc]

    # Async collaborator surface
    async def prominent(
        self,
        image: Any,
        *,
        count: int = SINGLE_COLOR_COUNT,
        encoding: ColorEncoding = DEFAULT_ENCODING,
    ) -> str | list[int]:
        """Does: Dominant color via ColorThief. Always a single color; count is
        accepted for contract parity only.
        """
        rgb = await asyncio.to_thread(self._dominant_sync, _detach(image))
        encoded = encode_rgb(rgb, encoding)
        logger.debug("ColorThief dominant=%s", encoded)
        return encoded

    async def average(
        self,
        image: Any,
        *,
        count: int = SINGLE_COLOR_COUNT,
        encoding: ColorEncoding = DEFAULT_ENCODING,
    ) -> str | list[int]:
        """Does: Mean color via Pillow ImageStat. The mean is a single color,
        so count is accepted for contract parity only.
        """
        rgb = await asyncio.to_thread(self._mean_sync, _detach(image))
        return encode_rgb(rgb, encoding)

    async def palette(self, image: Any) -> list[PaletteEntry]:
        """Does: ColorThief palette as raw {hex, red, green, blue} entries."""
        entries = await asyncio.to_thread(self._palette_sync, _detach(image))
        logger.debug("ColorThief palette size=%d", len(entries))
        return entries
