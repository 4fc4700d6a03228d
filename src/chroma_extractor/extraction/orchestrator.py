# orchestrator.py
from __future__ import annotations

"""
orchestrator.py
===============

Does: Stateful façade over the three color-analysis collaborators. Each
      request validates the encoding, schedules an independent asyncio task
      that awaits the collaborator, normalizes palette output, and replaces
      exactly one field of the shared result state on success.
Returns:
  - ChromaExtractor.state -> ChromaState(average, prominent, palette)
  - ChromaExtractor.request_prominent / request_average / request_palette
      (image, encoding="hex", *, timeout=None) -> asyncio.Task[None]
Used by: UI/presentation layers, scripts, and the demo CLI.

Failures of a collaborator are logged and absorbed: the task finishes
normally, the state keeps its previous value, and status[kind].error records
the cause.
"""

import asyncio
import functools
import logging
from collections.abc import Awaitable, Callable, Mapping
from typing import Any, TypeVar

from chroma_extractor.extraction.color.backend.colorthief_backend import (
    ColorThiefBackend,
)
from chroma_extractor.extraction.color.backend.types import (
    AverageExtractor,
    PaletteExtractor,
    ProminentExtractor,
)
from chroma_extractor.extraction.color.constants import (
    DEFAULT_ENCODING,
    SINGLE_COLOR_COUNT,
    ColorEncoding,
    ExtractionKind,
)
from chroma_extractor.extraction.color.normalize import (
    ColorValue,
    coerce_encoding,
    format_palette,
)
from chroma_extractor.extraction.general.utils.log import debug as debug_log
from chroma_extractor.extraction.general.utils.settings import (
    ExtractorSettings,
    get_settings,
)
from chroma_extractor.extraction.state import ChromaState, KindStatus, ResultStore

logger = logging.getLogger(__name__)

__all__ = [
    "ChromaExtractor",
    "RequestFn",
    "Subscriber",
]

T = TypeVar("T")

RequestFn = Callable[..., "asyncio.Task[None]"]
Subscriber = Callable[[ChromaState], None]


class ChromaExtractor:
    """
    Façade exposing the latest prominent/average/palette colors of an image.

    Collaborators can be injected one by one; missing ones come from a
    ColorThiefBackend. The three request functions are created once per
    instance, so ``ex.request_palette is ex.request_palette`` always holds and
    they are safe to hold on to as stable callbacks.

    Requests must be issued from inside a running event loop.
    """

    def __init__(
        self,
        *,
        prominent: ProminentExtractor | None = None,
        average: AverageExtractor | None = None,
        palette: PaletteExtractor | None = None,
        backend: ColorThiefBackend | None = None,
        settings: ExtractorSettings | None = None,
        debug: bool = False,
    ):
        self._settings = settings or get_settings()
        chosen = {
            ExtractionKind.PROMINENT: prominent,
            ExtractionKind.AVERAGE: average,
            ExtractionKind.PALETTE: palette,
        }
        if backend is None and None in chosen.values():
            backend = ColorThiefBackend(self._settings)
        # backend coroutine names match the kind values
        self._collaborators: dict[ExtractionKind, Callable[..., Awaitable[Any]]] = {
            kind: fn if fn is not None else getattr(backend, kind.value)
            for kind, fn in chosen.items()
        }
        self._store = ResultStore()
        self._tasks: set[asyncio.Task[None]] = set()
        self._unstarted: set[asyncio.Task[None]] = set()
        self._subscribers: list[Subscriber] = []
        self._debug = debug

        self.request_prominent: RequestFn = self._bind(ExtractionKind.PROMINENT)
        self.request_average: RequestFn = self._bind(ExtractionKind.AVERAGE)
        self.request_palette: RequestFn = self._bind(ExtractionKind.PALETTE)

    # ── Read side ───────────────────────────────────────────────────────────
    @property
    def state(self) -> ChromaState:
        """Current immutable snapshot."""
        return self._store.state

    @property
    def status(self) -> Mapping[ExtractionKind, KindStatus]:
        """Copy of the per-kind status records."""
        return dict(self._store.status)

    @property
    def pending(self) -> int:
        return len(self._tasks)

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Does: Register a callback run with the new snapshot after each
        successful update.
        Returns: A function that removes the callback (idempotent).
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    # ── Task control ────────────────────────────────────────────────────────
    async def drain(self) -> None:
        """Wait for every request in flight at call time to finish."""
        pending = list(self._tasks)
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)

    def cancel_pending(self) -> int:
        """Cancel all in-flight requests; returns how many were cancelled."""
        n = 0
        for task in list(self._tasks):
            if task.cancel():
                n += 1
        return n

    # ── Request side ────────────────────────────────────────────────────────
    def _bind(self, kind: ExtractionKind) -> RequestFn:
        def request(
            image: Any,
            encoding: Any = DEFAULT_ENCODING,
            *,
            timeout: float | None = None,
        ) -> asyncio.Task[None]:
            return self._request(kind, image, encoding, timeout=timeout)

        request.__name__ = request.__qualname__ = f"request_{kind.value}"
        request.__doc__ = (
            f"Extract the {kind.value} color(s) of `image` in 'hex' or 'rgb' "
            "(anything else falls back to 'hex'). Returns the scheduled task; "
            "awaiting it never raises for collaborator failures."
        )
        return request

    def _request(
        self,
        kind: ExtractionKind,
        image: Any,
        encoding: Any,
        *,
        timeout: float | None,
    ) -> asyncio.Task[None]:
        fmt = coerce_encoding(encoding)
        loop = asyncio.get_running_loop()
        self._store.mark_started(kind)
        task = loop.create_task(
            self._run(kind, image, fmt, timeout), name=f"chroma-{kind.value}"
        )
        self._tasks.add(task)
        self._unstarted.add(task)
        task.add_done_callback(functools.partial(self._on_done, kind))
        if self._debug:
            debug_log(f"scheduled {kind.value} (encoding={fmt.value})", topic="chroma")
        return task

    async def _run(
        self,
        kind: ExtractionKind,
        image: Any,
        encoding: ColorEncoding,
        timeout: float | None,
    ) -> None:
        self._unstarted.discard(asyncio.current_task())  # type: ignore[arg-type]
        try:
            value = await self._extract(kind, image, encoding, timeout)
        except asyncio.CancelledError:
            self._store.mark_finished(kind, cancelled=True)
            logger.info("%s extraction cancelled", kind.value)
            raise
        except Exception as e:
            self._store.mark_finished(kind, e)
            logger.error("%s extraction failed: %r", kind.value, e, exc_info=e)
            return

        state = self._store.replace(kind, value)
        self._store.mark_finished(kind)
        logger.info("%s extraction result: %s", kind.value, value)
        if self._debug:
            debug_log(f"{kind.value} updated -> {value}", topic="chroma")
        self._notify(state)

    def _on_done(self, kind: ExtractionKind, task: asyncio.Task[None]) -> None:
        self._tasks.discard(task)
        if task in self._unstarted:
            # cancelled before the coroutine ever ran
            self._unstarted.discard(task)
            self._store.mark_finished(kind, cancelled=True)
            logger.info("%s extraction cancelled before start", kind.value)

    async def _extract(
        self,
        kind: ExtractionKind,
        image: Any,
        encoding: ColorEncoding,
        timeout: float | None,
    ) -> ColorValue | list[ColorValue]:
        collaborator = self._collaborators[kind]
        if kind is ExtractionKind.PALETTE:
            raw = await self._bounded(collaborator(image), timeout)
            return format_palette(raw, encoding)
        return await self._bounded(
            collaborator(image, count=SINGLE_COLOR_COUNT, encoding=encoding), timeout
        )

    async def _bounded(self, aw: Awaitable[T], timeout: float | None) -> T:
        limit = timeout if timeout is not None else self._settings.request_timeout
        if limit is None:
            return await aw
        return await asyncio.wait_for(aw, limit)

    def _notify(self, state: ChromaState) -> None:
        for callback in list(self._subscribers):
            try:
                callback(state)
            except Exception:
                logger.exception("subscriber %r failed", callback)
