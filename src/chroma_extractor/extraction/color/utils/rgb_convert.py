"""
rgb_convert.py
==============

Does: Validate and coerce RGB triples coming out of third-party extractors,
      convert them to the requested encoding, and build raw palette entries.
Used By: ColorThief backend adapters and tests.
Returns: Validated (r, g, b) tuples, '#rrggbb' strings, [r, g, b] lists,
         PaletteEntry dicts.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from chroma_extractor.extraction.color.constants import ColorEncoding

# Public surface
__all__ = [
    "RGB",
    "coerce_rgb",
    "rgb_to_hex",
    "encode_rgb",
    "palette_entry",
]
__docformat__ = "google"

# ── Types ─────────────────────────────────────────────────────────────────────
RGB = tuple[int, int, int]


# =============================================================================
# 1) VALIDATION / COERCION
# =============================================================================

def _validate_rgb(rgb: RGB) -> None:
    r, g, b = rgb
    if not (0 <= r <= 255 and 0 <= g <= 255 and 0 <= b <= 255):
        raise ValueError(f"RGB out of bounds: {rgb}")


def coerce_rgb(value: Sequence[Any]) -> RGB:
    """Does: Turn any 3-item numeric sequence (ints, floats, numpy scalars)
    into a rounded, validated (r, g, b) tuple of ints.
    """
    if len(value) < 3:
        raise ValueError(f"Expected at least 3 channels, got {len(value)}: {value!r}")
    rgb = tuple(int(round(float(c))) for c in value[:3])
    _validate_rgb(rgb)  # type: ignore[arg-type]
    return rgb  # type: ignore[return-value]


# =============================================================================
# 2) ENCODING
# =============================================================================

def rgb_to_hex(rgb: RGB) -> str:
    """Does: Format a validated triple as lowercase '#rrggbb'."""
    from webcolors import rgb_to_hex as _wc_rgb_to_hex

    _validate_rgb(rgb)
    return _wc_rgb_to_hex(rgb)


def encode_rgb(rgb: RGB, encoding: ColorEncoding) -> str | list[int]:
    """Does: Render a triple in the requested encoding ('hex' string or [r, g, b])."""
    if encoding == ColorEncoding.RGB:
        _validate_rgb(rgb)
        return list(rgb)
    return rgb_to_hex(rgb)


def palette_entry(rgb: RGB) -> dict[str, Any]:
    """Does: Build a raw palette entry carrying both hex and split channels."""
    r, g, b = rgb
    return {"hex": rgb_to_hex(rgb), "red": r, "green": g, "blue": b}

