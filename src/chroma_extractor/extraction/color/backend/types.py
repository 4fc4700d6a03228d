"""
types.py.

Does: Define the structural contracts of the three external color-analysis
      collaborators and the raw palette entry they hand back.
Used by: ChromaExtractor (orchestrator.py) and ColorThiefBackend.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol, TypedDict, runtime_checkable

from chroma_extractor.extraction.color.constants import ColorEncoding

__all__ = [
    "PaletteEntry",
    "ProminentExtractor",
    "AverageExtractor",
    "PaletteExtractor",
]


class PaletteEntry(TypedDict):
    """Raw palette item: precomputed hex plus the individual channels."""

    hex: str
    red: int
    green: int
    blue: int


@runtime_checkable
class ProminentExtractor(Protocol):
    """
    Dominant-color collaborator.

    Called as ``await prominent(image, count=1, encoding=...)`` and expected to
    honor the encoding itself: a '#rrggbb' string for hex, [r, g, b] for rgb.
    """

    async def __call__(
        self, image: Any, *, count: int, encoding: ColorEncoding
    ) -> str | list[int]: ...


@runtime_checkable
class AverageExtractor(Protocol):
    """Mean-color collaborator; same call shape as ProminentExtractor."""

    async def __call__(
        self, image: Any, *, count: int, encoding: ColorEncoding
    ) -> str | list[int]: ...


@runtime_checkable
class PaletteExtractor(Protocol):
    """
    Palette collaborator. Takes no encoding; returns entries in its own order,
    each carrying hex and channel values (see PaletteEntry).
    """

    async def __call__(self, image: Any) -> Sequence[PaletteEntry]: ...
