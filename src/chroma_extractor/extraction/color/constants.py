# constants.py
# ============

"""
constants.
=========

Does: Define the color encodings and extraction kinds shared by the
      normalizer, the backend adapters and the orchestrator.
Used By: normalize.py, backend/, state.py, orchestrator.py.
Returns: Pure enums and defaults only (no side effects).
"""

from __future__ import annotations

from enum import Enum

__all__ = [
    "ColorEncoding",
    "ExtractionKind",
    "DEFAULT_ENCODING",
    "SUPPORTED_ENCODINGS",
    "SINGLE_COLOR_COUNT",
]


# ── 1) Encodings ─────────────────────────────────────────────────────────────
class ColorEncoding(str, Enum):
    """Output representation of a color: '#rrggbb' string or [r, g, b] list."""

    HEX = "hex"
    RGB = "rgb"


DEFAULT_ENCODING = ColorEncoding.HEX
SUPPORTED_ENCODINGS: frozenset[str] = frozenset(e.value for e in ColorEncoding)


# ── 2) Extraction kinds ──────────────────────────────────────────────────────
class ExtractionKind(str, Enum):
    """One kind per collaborator and per field of the result state."""

    PROMINENT = "prominent"
    AVERAGE = "average"
    PALETTE = "palette"


# Prominent/average collaborators are always asked for exactly one color
SINGLE_COLOR_COUNT = 1
