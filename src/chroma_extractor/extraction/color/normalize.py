# extraction/color/normalize.py
"""
normalize.

Does: Validate requested output encodings (lenient: anything unknown falls back
      to hex with a warning) and convert raw palette entries into the
      canonical hex or RGB encoding.
Returns: coerce_encoding(), format_palette().
Used by: ChromaExtractor request functions and the demo CLI.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from chroma_extractor.extraction.color.constants import (
    DEFAULT_ENCODING,
    ColorEncoding,
)

__all__ = [
    "ColorValue",
    "coerce_encoding",
    "format_palette",
]

logger = logging.getLogger(__name__)

ColorValue = str | list[int]

_UNSUPPORTED_MSG = (
    "Unsupported format provided: %r. Supported values: 'hex' (default) or 'rgb'"
)


def coerce_encoding(encoding: Any) -> ColorEncoding:
    """
    Does: Map a requested encoding onto ColorEncoding. Exact, case-sensitive
          match on 'hex'/'rgb'; any other value (None, 'RGB', 42, ...) is
          corrected to hex and one warning is logged.
    Returns: ColorEncoding member, never raises.
    """
    if isinstance(encoding, ColorEncoding):
        return encoding
    if isinstance(encoding, str):
        for member in ColorEncoding:
            if encoding == member.value:
                return member
    logger.warning(_UNSUPPORTED_MSG, encoding)
    return DEFAULT_ENCODING


def format_palette(
    raw: Iterable[Mapping[str, Any]],
    encoding: ColorEncoding,
) -> list[ColorValue]:
    """
    Does: Convert raw palette entries ({hex, red, green, blue, ...}) into hex
          strings or [r, g, b] lists, preserving order and length.
    Returns: New list; empty input gives an empty list.
    """
    if encoding == ColorEncoding.RGB:
        return [[entry["red"], entry["green"], entry["blue"]] for entry in raw]
    return [entry["hex"] for entry in raw]
