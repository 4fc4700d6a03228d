# chroma_extractor/extraction/state.py
"""
state.py.

Does: Hold the façade's result state as an immutable snapshot and expose the
      only write path: replacing one kind's field at a time. Also tracks a
      per-kind status record (in-flight count, last outcome, last error).
Used by: ChromaExtractor (orchestrator.py).
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from enum import Enum

from chroma_extractor.extraction.color.constants import ExtractionKind
from chroma_extractor.extraction.color.normalize import ColorValue

__all__ = [
    "ChromaState",
    "ExtractionPhase",
    "KindStatus",
    "ResultStore",
]


@dataclass(frozen=True)
class ChromaState:
    """Latest successful result per kind. Fields are replaced whole, never edited."""

    average: ColorValue = ""
    prominent: ColorValue = ""
    palette: tuple[ColorValue, ...] = ()

    def as_dict(self) -> dict[str, object]:
        return {
            "average": self.average,
            "prominent": self.prominent,
            "palette": list(self.palette),
        }


class ExtractionPhase(str, Enum):
    IDLE = "idle"
    IN_FLIGHT = "in_flight"
    UPDATED = "updated"
    FAILED = "failed"


@dataclass(frozen=True)
class KindStatus:
    """
    Per-kind lifecycle. `phase` is IN_FLIGHT while any request of the kind is
    pending, otherwise the outcome of the last one to finish. `error` holds the
    last failure and is cleared by the next success.
    """

    pending: int = 0
    outcome: ExtractionPhase = ExtractionPhase.IDLE
    error: BaseException | None = None

    @property
    def phase(self) -> ExtractionPhase:
        return ExtractionPhase.IN_FLIGHT if self.pending else self.outcome


def _initial_status() -> dict[ExtractionKind, KindStatus]:
    return {kind: KindStatus() for kind in ExtractionKind}


@dataclass
class ResultStore:
    """Owner of the current ChromaState snapshot and per-kind status."""

    state: ChromaState = field(default_factory=ChromaState)
    status: dict[ExtractionKind, KindStatus] = field(default_factory=_initial_status)

    def replace(self, kind: ExtractionKind, value: ColorValue | list[ColorValue]) -> ChromaState:
        """Swap in a new snapshot with only `kind`'s field changed."""
        if kind is ExtractionKind.PALETTE:
            self.state = dataclasses.replace(self.state, palette=tuple(value))
        else:
            self.state = dataclasses.replace(self.state, **{kind.value: value})
        return self.state

    # ── status bookkeeping ──────────────────────────────────────────────────
    def mark_started(self, kind: ExtractionKind) -> None:
        cur = self.status[kind]
        self.status[kind] = dataclasses.replace(cur, pending=cur.pending + 1)

    def mark_finished(
        self, kind: ExtractionKind, error: BaseException | None = None, *, cancelled: bool = False
    ) -> None:
        cur = self.status[kind]
        pending = max(cur.pending - 1, 0)
        if cancelled:
            self.status[kind] = dataclasses.replace(cur, pending=pending)
        elif error is None:
            self.status[kind] = KindStatus(pending, ExtractionPhase.UPDATED, None)
        else:
            self.status[kind] = KindStatus(pending, ExtractionPhase.FAILED, error)
