# chroma_extractor/extraction/__init__.py

"""
extraction.
==========

Does: Group the orchestration layer (façade + result state) with the
      color-domain helpers it depends on.
Returns: Stable names for the public surface.
"""
from __future__ import annotations

from .color import ColorEncoding, ExtractionKind, format_palette
from .color.backend import ColorThiefBackend
from .orchestrator import ChromaExtractor
from .state import ChromaState, ExtractionPhase, KindStatus

__all__: list[str] = [
    "ChromaExtractor",
    "ChromaState",
    "ColorEncoding",
    "ColorThiefBackend",
    "ExtractionKind",
    "ExtractionPhase",
    "KindStatus",
    "format_palette",
]
__docformat__ = "google"
