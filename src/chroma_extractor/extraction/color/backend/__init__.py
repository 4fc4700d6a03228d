"""
backend
=======

Does: Expose the collaborator contracts and the default ColorThief/Pillow
      implementation of them.
Example:
    backend = ColorThiefBackend(); hex_value = await backend.prominent("cat.jpg", count=1, encoding="hex")
"""

from __future__ import annotations

from .colorthief_backend import ColorThiefBackend, open_rgb_image
from .types import AverageExtractor, PaletteEntry, PaletteExtractor, ProminentExtractor

__all__ = [
    "ColorThiefBackend",
    "open_rgb_image",
    "PaletteEntry",
    "ProminentExtractor",
    "AverageExtractor",
    "PaletteExtractor",
]

__docformat__ = "google"
