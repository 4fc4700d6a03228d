# chroma_extractor/extraction/general/utils/__init__.py
"""

Does: Provide config loading, extractor settings and lightweight debug logging.
Returns: Public API via load_config, get_settings and debug/reload_topics.
Used by: Backend adapters, the orchestrator, the demo CLI and tests.
"""

from __future__ import annotations

from .load_config import (
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    DataDirNotFound,
    find_data_dir,
    load_config,
)
from .log import (
    debug,
    reload_topics,
)
from .settings import (
    ExtractorSettings,
    get_settings,
    load_settings,
)

__all__ = [
    # Config loading
    "load_config",
    "find_data_dir",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
    # Settings
    "ExtractorSettings",
    "get_settings",
    "load_settings",
    # Logging helpers
    "debug",
    "reload_topics",
]
