"""
Requirements ingestion: dropped files and finalized speech transcripts.

Each source is read in chunks on the event loop and reports byte-level
progress. Sources are keyed by name; every update re-checks that the source
object it belongs to is still registered, so callbacks that land after a
cancel are dropped instead of resurrecting the source.
"""

import asyncio
import logging
import os
from typing import Callable, Dict, List, Optional, Protocol, Sequence

from core.config import IngestionConfigs
from core.exceptions import InputValidationError, SourceNotFoundError
from models.ingestion.uploaded_source import SourceOrigin, UploadedSource
from services.ingestion.text_extractor import TextExtractionError, extract_text
from services.notifications.notification_center import NotificationCenter

logger = logging.getLogger(__name__)


class ReadableFile(Protocol):
    """What the collector needs from an upload; starlette's UploadFile fits."""

    filename: Optional[str]
    size: Optional[int]

    async def read(self, size: int = -1) -> bytes: ...


class IngestionCollector:
    def __init__(self, notifications: Optional[NotificationCenter] = None, chunk_size: Optional[int] = None):
        self.notifications = notifications or NotificationCenter()
        self.chunk_size = chunk_size or IngestionConfigs.CHUNK_SIZE
        self._sources: Dict[str, UploadedSource] = {}
        self._tasks: Dict[str, asyncio.Task] = {}
        self._subscribers: List[Callable[[str], None]] = []
        self._combined_text = ""
        self._speech_count = 0

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def sources(self) -> List[UploadedSource]:
        return list(self._sources.values())

    @property
    def combined_text(self) -> str:
        return self._combined_text

    @property
    def has_incomplete_sources(self) -> bool:
        return any(not s.is_complete for s in self._sources.values())

    @property
    def is_ready(self) -> bool:
        return bool(self._sources) and not self.has_incomplete_sources

    def get_source(self, name: str) -> UploadedSource:
        source = self._sources.get(name)
        if source is None:
            raise SourceNotFoundError(name)
        return source

    def subscribe(self, callback: Callable[[str], None]) -> Callable[[], None]:
        """Register callback(combined_text); returns a function that unsubscribes it."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add_sources(self, files: Sequence[ReadableFile], origin: SourceOrigin = "upload") -> List[UploadedSource]:
        """
        Register a batch of files and start reading each one immediately.

        Must be called from a running event loop. Each source starts at
        progress 0 with empty content and progresses independently; a read
        failure stalls only that source.
        """
        if not files:
            raise InputValidationError("Please select at least one file.", field="files")

        loop = asyncio.get_running_loop()
        added: List[UploadedSource] = []
        for f in files:
            name = self._unique_name(f.filename or "untitled.txt")
            source = UploadedSource(name=name, size=int(f.size or 0), origin=origin)
            self._sources[name] = source
            added.append(source)
        logger.info("ingestion_collector: added %d source(s) origin=%s", len(added), origin)
        self._recompute()

        for source, f in zip(added, files):
            self._tasks[source.name] = loop.create_task(self._read_source(source, f))
        return added

    def add_transcript(self, transcript: str, listening: bool) -> Optional[UploadedSource]:
        """
        Turn a finalized speech transcript into a completed `speech` source.
        Interim transcripts (still listening) and blank ones add nothing.
        """
        text = (transcript or "").strip()
        if listening or not text:
            return None

        self._speech_count += 1
        name = self._unique_name(f"speech-{self._speech_count}.txt")
        source = UploadedSource(
            name=name,
            size=len(text.encode("utf-8")),
            origin="speech",
            progress=100,
            content=text,
        )
        self._sources[name] = source
        logger.info("ingestion_collector: speech transcript added name=%s chars=%d", name, len(text))
        self._recompute()
        return source

    def cancel_source(self, name: str) -> None:
        """Remove a source whatever its progress; its pending read is abandoned."""
        source = self._sources.pop(name, None)
        if source is None:
            raise SourceNotFoundError(name)
        task = self._tasks.pop(name, None)
        if task is not None and not task.done():
            task.cancel()
        logger.info("ingestion_collector: cancelled source=%s at progress=%d", name, source.progress)
        self._recompute()

    def reset(self) -> None:
        for task in self._tasks.values():
            if not task.done():
                task.cancel()
        self._tasks.clear()
        self._sources.clear()
        self._speech_count = 0
        self._recompute()

    async def drain(self) -> None:
        """Wait until no read is outstanding (finished, failed or cancelled)."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks.values()), return_exceptions=True)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    async def _read_source(self, source: UploadedSource, file: ReadableFile) -> None:
        chunks: List[bytes] = []
        bytes_read = 0
        try:
            while True:
                chunk = await file.read(self.chunk_size)
                if not chunk:
                    break
                if not self._is_current(source):
                    return
                chunks.append(chunk)
                bytes_read += len(chunk)
                if source.size:
                    self._report_progress(source, bytes_read * 100 // source.size)

            text = extract_text(source.name, b"".join(chunks))
        except TextExtractionError as e:
            self._stall(source, str(e))
            return
        except Exception as e:
            self._stall(source, f"read failed: {e}")
            return
        finally:
            if self._tasks.get(source.name) is asyncio.current_task():
                self._tasks.pop(source.name, None)

        if not self._is_current(source):
            logger.info("ingestion_collector: dropping completion for cancelled source=%s", source.name)
            return

        source.content = text
        source.progress = 100
        source.error = None
        logger.info("ingestion_collector: source=%s complete bytes=%d chars=%d", source.name, bytes_read, len(text))
        self._recompute()

    def _report_progress(self, source: UploadedSource, value: int) -> None:
        # 100 is reserved for "content decoded"
        value = min(99, max(0, value))
        if value > source.progress:
            source.progress = value

    def _stall(self, source: UploadedSource, reason: str) -> None:
        if not self._is_current(source):
            return
        source.error = reason
        logger.warning("ingestion_collector: source=%s stalled at %d%%: %s", source.name, source.progress, reason)
        self.notifications.error("Upload Failed", f'"{source.name}" could not be read: {reason}')

    def _is_current(self, source: UploadedSource) -> bool:
        return self._sources.get(source.name) is source

    def _unique_name(self, name: str) -> str:
        if name not in self._sources:
            return name
        base, ext = os.path.splitext(name)
        i = 1
        while True:
            candidate = f"{base} ({i}){ext}"
            if candidate not in self._sources:
                return candidate
            i += 1

    def _recompute(self) -> None:
        self._combined_text = "\n\n".join(
            s.content for s in self._sources.values() if s.is_complete
        )
        for callback in list(self._subscribers):
            callback(self._combined_text)
