"""
chroma_extractor
================

Does: Root package for the image color-feature façade.
Returns: Re-exports the façade (ChromaExtractor), its state/encoding types and
         the default ColorThief backend from `chroma_extractor.extraction`.
Used by: All consumers; deeper imports start from `chroma_extractor.extraction.*`.
"""

from chroma_extractor.extraction import (
    ChromaExtractor,
    ChromaState,
    ColorEncoding,
    ColorThiefBackend,
    ExtractionKind,
    ExtractionPhase,
    KindStatus,
    format_palette,
)

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
__version__ = "0.1.0"
__docformat__ = "google"
