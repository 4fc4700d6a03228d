"""
color.
=====

Does: Aggregate color-domain definitions (encodings, extraction kinds) and the
      palette/encoding normalizers.
Used By: Backend adapters, result state and the orchestrator.
Returns: Pure enums and functions; no side effects.
"""

# ── Constants ────────────────────────────────────────────────────────────────
from .constants import (
    DEFAULT_ENCODING,
    SINGLE_COLOR_COUNT,
    SUPPORTED_ENCODINGS,
    ColorEncoding,
    ExtractionKind,
)

# ── Normalization ────────────────────────────────────────────────────────────
from .normalize import ColorValue, coerce_encoding, format_palette

__all__ = [
    # constants
    "ColorEncoding",
    "ExtractionKind",
    "DEFAULT_ENCODING",
    "SUPPORTED_ENCODINGS",
    "SINGLE_COLOR_COUNT",
    # normalization
    "ColorValue",
    "coerce_encoding",
    "format_palette",
]
