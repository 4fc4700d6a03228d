"""
settings.py.

Does: Load extractor tuning (palette size, sampling quality, request timeout)
      from data/extractor_settings.json, apply CHROMA_* env overrides, and
      validate the result into a frozen ExtractorSettings record.
Used by: ColorThiefBackend (palette_size, quality) and ChromaExtractor
         (request_timeout).
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any

from chroma_extractor.extraction.general.utils.load_config import (
    ConfigParseError,
    load_config,
)

__all__ = [
    "ExtractorSettings",
    "SETTINGS_FILE",
    "validate_settings",
    "load_settings",
    "get_settings",
]

logger = logging.getLogger(__name__)

SETTINGS_FILE = "extractor_settings"

# env var -> (settings key, parser)
_ENV_OVERRIDES = {
    "CHROMA_PALETTE_SIZE": ("palette_size", int),
    "CHROMA_QUALITY": ("quality", int),
    "CHROMA_REQUEST_TIMEOUT": ("request_timeout", float),
}


@dataclass(frozen=True)
class ExtractorSettings:
    palette_size: int = 10
    quality: int = 10
    request_timeout: float | None = None


def validate_settings(raw: dict[str, Any]) -> dict[str, Any]:
    """Does: Check keys/types/ranges of a settings dict.
    Returns: Normalized dict ready for ExtractorSettings(**d).
    Raises: ValueError/TypeError (load_config wraps them in ConfigParseError).
    """
    known = set(ExtractorSettings.__dataclass_fields__)
    unknown = set(raw) - known
    if unknown:
        raise ValueError(f"unknown settings keys: {sorted(unknown)}")

    out = dict(raw)
    for key in ("palette_size", "quality"):
        if key in out:
            value = out[key]
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{key} must be an int, got {type(value).__name__}")
    if out.get("palette_size", 2) < 2:
        raise ValueError("palette_size must be >= 2")
    if out.get("quality", 1) < 1:
        raise ValueError("quality must be >= 1")

    timeout = out.get("request_timeout")
    if timeout is not None:
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)):
            raise TypeError("request_timeout must be a number or null")
        if timeout <= 0:
            raise ValueError("request_timeout must be > 0")
        out["request_timeout"] = float(timeout)
    return out


def _env_overrides() -> dict[str, Any]:
    out: dict[str, Any] = {}
    for var, (key, parse) in _ENV_OVERRIDES.items():
        raw = os.getenv(var)
        if raw is None or not raw.strip():
            continue
        try:
            out[key] = parse(raw)
        except ValueError as e:
            raise ConfigParseError(f"{var}={raw!r} is not a valid {parse.__name__}") from e
    return out


def load_settings(base_dir: Path | None = None) -> ExtractorSettings:
    """Does: Read + validate settings file, then layer env overrides on top."""
    data = load_config(SETTINGS_FILE, base_dir=base_dir, validator=validate_settings)
    overrides = _env_overrides()
    if overrides:
        logger.debug("Settings env overrides: %s", overrides)
        try:
            data = validate_settings({**data, **overrides})
        except (TypeError, ValueError) as e:
            raise ConfigParseError(f"invalid env override: {e}") from e
    return ExtractorSettings(**data)


@lru_cache(maxsize=1)
def get_settings() -> ExtractorSettings:
    """Process-wide settings; call get_settings.cache_clear() to reload."""
    return load_settings()
