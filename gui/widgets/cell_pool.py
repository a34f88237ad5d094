# Path: gui/widgets/cell_pool.py
# Purpose: Recycle grid cells so only the visible ones ever exist at once.
# Layer: gui/widgets.
# Details: Cells are registered per reuse identifier with a factory, then dequeued and enqueued by the grid.

from __future__ import annotations

from typing import Callable, Dict, Generic, List, TypeVar

from loguru import logger

T = TypeVar("T")


class CellPool(Generic[T]):
    """Pool of reusable cells keyed by a reuse identifier.

    Example:
        pool = CellPool()
        pool.register("FlickrCell", lambda: PhotoCell(parent))
        cell = pool.dequeue("FlickrCell")
        ...
        pool.enqueue("FlickrCell", cell)
    """

    def __init__(self) -> None:
        self._factories: Dict[str, Callable[[], T]] = {}
        self._free: Dict[str, List[T]] = {}
        self._created: Dict[str, int] = {}

    def register(self, reuse_identifier: str, factory: Callable[[], T]) -> None:
        self._factories[reuse_identifier] = factory
        self._free.setdefault(reuse_identifier, [])
        self._created.setdefault(reuse_identifier, 0)

    def dequeue(self, reuse_identifier: str) -> T:
        """Return a free cell for ``reuse_identifier``, creating one when none is free."""

        if reuse_identifier not in self._factories:
            raise KeyError(f"No cell registered for reuse identifier {reuse_identifier!r}")
        free = self._free[reuse_identifier]
        if free:
            return free.pop()
        self._created[reuse_identifier] += 1
        logger.trace("Created cell #{} for {}", self._created[reuse_identifier], reuse_identifier)
        return self._factories[reuse_identifier]()

    def enqueue(self, reuse_identifier: str, cell: T) -> None:
        """Return ``cell`` to the pool, calling its ``reset()`` when it has one."""

        if reuse_identifier not in self._factories:
            raise KeyError(f"No cell registered for reuse identifier {reuse_identifier!r}")
        reset = getattr(cell, "reset", None)
        if callable(reset):
            reset()
        self._free[reuse_identifier].append(cell)

    def free_count(self, reuse_identifier: str) -> int:
        return len(self._free.get(reuse_identifier, []))

    def created_count(self, reuse_identifier: str) -> int:
        return self._created.get(reuse_identifier, 0)
