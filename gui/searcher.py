# Path: gui/searcher.py
# Purpose: Run Flickr searches off the GUI thread and deliver completions back onto it.
# Layer: gui.
# Details: Uses QThreadPool runnables; a QObject-owned signal performs the queued hop to the GUI thread.

from __future__ import annotations

from itertools import count
from typing import Callable, Dict, Optional

from loguru import logger
from PySide6.QtCore import QObject, QRunnable, QThreadPool, Signal, Slot

from core.errors import SearchFailed
from core.flickr.client import FlickrClient
from core.models.domain import SearchOutcome

CompletionHandler = Callable[[SearchOutcome], None]


class _SearchSignals(QObject):
    completed = Signal(int, object)


class FlickrSearcher(QObject):
    """Asynchronous search front-end for the GUI.

    ``on_complete`` is always invoked on the thread that owns this object,
    exactly once per ``search`` call. Searches already running are never
    cancelled, so completions arrive in completion order.
    """

    def __init__(
        self,
        client: FlickrClient,
        thread_pool: Optional[QThreadPool] = None,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self._client = client
        self._thread_pool = thread_pool or QThreadPool.globalInstance()
        self._signals = _SearchSignals(self)
        self._signals.completed.connect(self._deliver)
        self._pending: Dict[int, CompletionHandler] = {}
        self._ids = count(1)

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    def search(self, query: str, on_complete: CompletionHandler) -> None:
        request_id = next(self._ids)
        self._pending[request_id] = on_complete
        self._thread_pool.start(_SearchTask(request_id, query, self._client, self._signals))

    def wait_for_done(self, msecs: int = -1) -> bool:
        return self._thread_pool.waitForDone(msecs)

    @Slot(int, object)
    def _deliver(self, request_id: int, outcome: SearchOutcome) -> None:
        handler = self._pending.pop(request_id, None)
        if handler is None:
            logger.warning("Dropping completion for unknown search request {}", request_id)
            return
        handler(outcome)


class _SearchTask(QRunnable):
    """Execute one blocking Flickr search on a pool thread."""

    def __init__(self, request_id: int, query: str, client: FlickrClient, signals: _SearchSignals) -> None:
        super().__init__()
        self.request_id = request_id
        self.query = query
        self.client = client
        self.signals = signals

    def run(self) -> None:
        try:
            outcome = SearchOutcome(self.query, result=self.client.search_photos(self.query))
        except SearchFailed as exc:
            outcome = SearchOutcome(self.query, error=exc)
        except Exception as exc:  # noqa: BLE001 - report every failure back to the GUI
            outcome = SearchOutcome(self.query, error=SearchFailed(f"Unexpected search error: {exc}"))
        self.signals.completed.emit(self.request_id, outcome)
