# Path: core/search/store.py
# Purpose: Hold the history of completed searches in most-recent-first order.
# Layer: core/search.
# Details: Answers the section/item lookups used by the photo grid; mutated only from the GUI thread.

from __future__ import annotations

from typing import Iterator, List, Optional

from loguru import logger

from core.errors import OutOfRange
from core.models.domain import FlickrPhoto, SearchResult


class SearchResultStore:
    """Ordered search history where each completed search becomes one grid section.

    The store does no locking: every call must come from the thread that owns
    the GUI. ``capacity`` is optional; when set, prepending past it drops the
    oldest section.
    """

    def __init__(self, capacity: Optional[int] = None) -> None:
        if capacity is not None and capacity < 1:
            raise ValueError("capacity must be at least 1 when set.")
        self.capacity = capacity
        self._results: List[SearchResult] = []

    @property
    def results(self) -> List[SearchResult]:
        return list(self._results)

    def prepend(self, result: SearchResult) -> None:
        self._results.insert(0, result)
        if self.capacity is not None and len(self._results) > self.capacity:
            dropped = self._results.pop()
            logger.debug("Dropped oldest search {!r} to stay within {} sections", dropped.query, self.capacity)

    def section_count(self) -> int:
        return len(self._results)

    def result(self, section: int) -> SearchResult:
        if not 0 <= section < len(self._results):
            raise OutOfRange(f"Section {section} out of range (0..{len(self._results) - 1}).")
        return self._results[section]

    def item_count(self, section: int) -> int:
        return len(self.result(section).photos)

    def item(self, section: int, index: int) -> FlickrPhoto:
        photos = self.result(section).photos
        if not 0 <= index < len(photos):
            raise OutOfRange(f"Item {index} out of range in section {section} ({len(photos)} items).")
        return photos[index]

    def item_counts(self) -> List[int]:
        """Return the item count of every section, in section order."""

        return [len(result.photos) for result in self._results]

    def clear(self) -> None:
        self._results.clear()

    def __len__(self) -> int:
        return len(self._results)

    def __iter__(self) -> Iterator[SearchResult]:
        return iter(list(self._results))
