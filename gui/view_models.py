# Path: gui/view_models.py
# Purpose: Provide the view model mediating between the search bar, the searcher, and the result store.
# Layer: gui.
# Details: Owns the search history and announces changes so the grid can reload on the GUI thread.

from __future__ import annotations

from typing import Callable, Optional, Protocol

from loguru import logger
from PySide6.QtCore import QObject, Signal

from core.models.domain import SearchOutcome
from core.search.store import SearchResultStore


class Searcher(Protocol):
    """Anything able to run a search and report back on the GUI thread."""

    def search(self, query: str, on_complete: Callable[[SearchOutcome], None]) -> None:
        """Start a search for ``query`` and call ``on_complete`` once it finishes."""


class SearchViewModel(QObject):
    """View model encapsulating search orchestration for the GUI."""

    resultsChanged = Signal()
    busyChanged = Signal(bool)
    searchFailed = Signal(str)

    def __init__(
        self,
        searcher: Searcher,
        store: Optional[SearchResultStore] = None,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self.searcher = searcher
        self.store = store if store is not None else SearchResultStore()
        self._in_flight = 0

    @property
    def is_busy(self) -> bool:
        return self._in_flight > 0

    def submit(self, text: Optional[str]) -> bool:
        """Start a search for ``text``; blank input is accepted but ignored.

        Always returns True so the input field treats the submission as handled.
        """

        query = (text or "").strip()
        if not query:
            return True

        logger.info("Searching for {!r}", query)
        self._in_flight += 1
        if self._in_flight == 1:
            self.busyChanged.emit(True)
        # gui/searcher.py::FlickrSearcher.search - runs the request on a pool thread.
        self.searcher.search(query, self._on_search_complete)
        return True

    def _on_search_complete(self, outcome: SearchOutcome) -> None:
        self._in_flight -= 1
        if self._in_flight == 0:
            self.busyChanged.emit(False)

        if not outcome.ok:
            logger.error("Error searching: {}", outcome.error)
            self.searchFailed.emit(str(outcome.error))
            return

        result = outcome.result
        logger.info("Found {} matching {}", len(result.photos), result.query)
        self.store.prepend(result)
        self.resultsChanged.emit()
