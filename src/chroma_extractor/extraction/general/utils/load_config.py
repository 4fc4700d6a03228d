# src/chroma_extractor/extraction/general/utils/load_config.py

"""Read one JSON object from the package <data/> directory.

The directory comes from CHROMA_DATA_DIR when set, otherwise from the nearest
'data' folder walking up from this file (the packaged chroma_extractor/data).
The parsed object is passed through an optional validator; every failure
surfaces as one of the typed errors below.

Used by the extractor settings loader.
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Callable
from pathlib import Path
from typing import Any

# ── Public surface ────────────────────────────────────────────────────────────
__all__ = [
    "DATA_DIR_ENV",
    "Validator",
    "find_data_dir",
    "load_config",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]

DATA_DIR_ENV = "CHROMA_DATA_DIR"

Validator = Callable[[dict[str, Any]], dict[str, Any]]

log = logging.getLogger(__name__)


# ── Exceptions ───────────────────────────────────────────────────────────────
class DataDirNotFound(FileNotFoundError):
    """Raise when no 'data' directory is found while walking upwards."""


class ConfigFileNotFound(FileNotFoundError):
    """Raise when the requested config file cannot be read."""


class ConfigParseError(ValueError):
    """Raise when JSON parsing/validation fails for a config file."""


class ConfigTypeError(TypeError):
    """Raise when the parsed JSON is not an object."""


# ── Lookup ───────────────────────────────────────────────────────────────────
def find_data_dir(start: Path | None = None) -> Path:
    """CHROMA_DATA_DIR if set, else the first existing <parent>/data above start."""
    env = os.environ.get(DATA_DIR_ENV)
    if env:
        return Path(env).expanduser().resolve()

    start = (start or Path(__file__)).resolve()
    tried = []
    for parent in (start, *start.parents):
        cand = parent / "data"
        if cand.is_dir():
            return cand
        tried.append(cand)
    raise DataDirNotFound(
        "No 'data' directory found.\nTried:\n  " + "\n  ".join(str(p) for p in tried)
    )


def load_config(
    name: str,
    *,
    base_dir: Path | None = None,
    validator: Validator | None = None,
) -> dict[str, Any]:
    """Load <data>/<name>.json as a dict and run it through `validator`."""
    data_dir = base_dir if base_dir is not None else find_data_dir()
    path = data_dir / (name if name.endswith(".json") else f"{name}.json")

    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ConfigParseError(f"Invalid JSON in {path}: {e}") from e
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot read {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigTypeError(f"{path.name}: expected an object, got {type(data).__name__}")

    if validator is not None:
        try:
            data = validator(data)
        except (TypeError, ValueError) as e:
            raise ConfigParseError(f"{path.name}: {e}") from e

    log.debug("Config loaded: %s", path)
    return data
