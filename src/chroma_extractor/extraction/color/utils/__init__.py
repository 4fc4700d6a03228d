"""
utils package.
=============

Does: RGB validation and encoding helpers shared by the backend adapters.
"""

from .rgb_convert import RGB, coerce_rgb, encode_rgb, palette_entry, rgb_to_hex

__all__ = [
    "RGB",
    "coerce_rgb",
    "rgb_to_hex",
    "encode_rgb",
    "palette_entry",
]

__docformat__ = "google"
