"""
log.py.

Does: Lightweight topic debug printer controlled by CHROMA_DEBUG_TOPICS
      (comma-separated topics, or 'all'). Unset means every topic prints.
Returns: Timestamped lines on stderr with topic + level. Used by the
         orchestrator to trace request lifecycles, and by tests.
"""

import os
import sys
from datetime import datetime
from typing import TextIO

__all__ = ["debug", "reload_topics", "topic_enabled"]

_ENV_VAR = "CHROMA_DEBUG_TOPICS"


def _load_topics() -> set[str]:
    raw = os.getenv(_ENV_VAR, "")
    return {t.strip().lower() for t in raw.split(",") if t.strip()}


_DEBUG_TOPICS = _load_topics()


def reload_topics() -> None:
    """Does: Reload topics from environment variable CHROMA_DEBUG_TOPICS."""
    global _DEBUG_TOPICS
    _DEBUG_TOPICS = _load_topics()


def topic_enabled(topic: str) -> bool:
    topic_key = topic.lower().strip()
    return not _DEBUG_TOPICS or "all" in _DEBUG_TOPICS or topic_key in _DEBUG_TOPICS


def debug(
    msg: str,
    topic: str = "chroma",
    *,
    level: str = "DEBUG",
    stream: TextIO | None = None,
) -> None:
    """Does: Print a timestamped debug line with topic and level
    if enabled via CHROMA_DEBUG_TOPICS.
    """
    if stream is None:
        stream = sys.stderr
    if topic_enabled(topic):
        ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        print(f"[{ts}] [{topic.lower().strip()}][{level.upper()}] {msg}", file=stream)
