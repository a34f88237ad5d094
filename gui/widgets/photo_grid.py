# Path: gui/widgets/photo_grid.py
# Purpose: Render the search history as stacked sections of square thumbnail cells.
# Layer: gui/widgets.
# Details: Geometry comes from GridLayoutModel; only cells inside the viewport are bound, via CellPool.

from __future__ import annotations

from typing import Dict, Optional, Tuple

from loguru import logger
from PySide6.QtCore import QRect
from PySide6.QtWidgets import QSizePolicy, QWidget

from core.errors import InvalidLayout
from core.search.layout import GridLayoutModel, Rect
from core.search.store import SearchResultStore
from .cell_pool import CellPool
from .photo_cell import PhotoCell

IndexPath = Tuple[int, int]


class PhotoGrid(QWidget):
    """Sectioned thumbnail grid backed by a SearchResultStore.

    The hosting scroll area reports its viewport through ``set_viewport``;
    ``reload_data`` must be called after the store changes.
    """

    def __init__(
        self,
        store: SearchResultStore,
        layout_model: Optional[GridLayoutModel] = None,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self._store = store
        self._layout_model = layout_model or GridLayoutModel()
        self._pool: CellPool[PhotoCell] = CellPool()
        self._pool.register(PhotoCell.reuse_identifier, lambda: PhotoCell(self))
        self._visible_cells: Dict[IndexPath, PhotoCell] = {}
        self._viewport_top = 0
        self._viewport_width = 0
        self._viewport_height = 0
        self._content_height = 0.0
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)

    @property
    def layout_model(self) -> GridLayoutModel:
        return self._layout_model

    @property
    def content_height(self) -> float:
        return self._content_height

    def visible_cells(self) -> Dict[IndexPath, PhotoCell]:
        return dict(self._visible_cells)

    def cell_for_item(self, section: int, index: int) -> Optional[PhotoCell]:
        return self._visible_cells.get((section, index))

    def set_viewport(self, top: int, width: int, height: int) -> None:
        """Record the visible window of the grid and rebind cells if it moved or resized."""

        width = max(0, width)
        resized = width != self._viewport_width
        self._viewport_top = max(0, top)
        self._viewport_width = width
        self._viewport_height = max(0, height)
        if resized:
            self.reload_data()
        else:
            self._update_visible_cells()

    def reload_data(self) -> None:
        """Drop every bound cell and re-query all sections from the store."""

        for cell in self._visible_cells.values():
            self._recycle(cell)
        self._visible_cells.clear()

        try:
            grid = self._layout_model.layout(self._store.item_counts(), self._viewport_width)
        except InvalidLayout as exc:
            if self._store.section_count():
                logger.warning("Skipping grid layout: {}", exc)
            self._content_height = 0.0
            self.setMinimumHeight(0)
            return

        self._content_height = grid.content_height
        self.setMinimumHeight(int(round(grid.content_height)))
        self._update_visible_cells()

    def _update_visible_cells(self) -> None:
        counts = self._store.item_counts()
        top = self._viewport_top
        bottom = top + self._viewport_height
        try:
            wanted = self._layout_model.visible_items(counts, self._viewport_width, top, bottom)
            grid = self._layout_model.layout(counts, self._viewport_width)
        except InvalidLayout:
            wanted, grid = [], None

        wanted_set = set(wanted)
        for path in [path for path in self._visible_cells if path not in wanted_set]:
            self._recycle(self._visible_cells.pop(path))

        if grid is None:
            return
        for section, index in wanted:
            if (section, index) in self._visible_cells:
                continue
            cell = self._pool.dequeue(PhotoCell.reuse_identifier)
            cell.bind(self._store.item(section, index))
            frame = self._layout_model.cell_frame(grid.section_offsets[section], index, self._viewport_width)
            cell.setGeometry(_to_qrect(frame))
            cell.show()
            self._visible_cells[(section, index)] = cell

    def _recycle(self, cell: PhotoCell) -> None:
        cell.hide()
        self._pool.enqueue(PhotoCell.reuse_identifier, cell)


def _to_qrect(frame: Rect) -> QRect:
    return QRect(round(frame.x), round(frame.y), round(frame.width), round(frame.height))
