# Path: gui/main_window.py
# Purpose: Define the main desktop window: search bar on top, sectioned thumbnail grid below.
# Layer: gui.
# Details: Wires SearchBar -> SearchViewModel -> PhotoGrid and keeps the grid informed of its viewport.

from __future__ import annotations

import sys
from typing import Optional

from loguru import logger
from PySide6.QtCore import QEvent, Qt
from PySide6.QtWidgets import QApplication, QMainWindow, QScrollArea, QVBoxLayout, QWidget

from config import AppSettings, setup_logging
from core.flickr.client import FlickrClient
from core.search.layout import EdgeInsets, GridLayoutModel
from core.search.store import SearchResultStore
from .searcher import FlickrSearcher
from .view_models import SearchViewModel
from .widgets.photo_grid import PhotoGrid
from .widgets.search_bar import SearchBar


class MainWindow(QMainWindow):
    """Main application window hosting the Flickr photo search screen."""

    def __init__(self, view_model: SearchViewModel, layout_model: Optional[GridLayoutModel] = None) -> None:
        super().__init__()
        self.view_model = view_model
        self.setWindowTitle("Flickr Search")
        self.resize(420, 720)

        container = QWidget()
        root_layout = QVBoxLayout(container)
        root_layout.setContentsMargins(0, 0, 0, 0)
        root_layout.setSpacing(0)

        self.search_bar = SearchBar()
        root_layout.addWidget(self.search_bar)

        self.photo_grid = PhotoGrid(view_model.store, layout_model)
        self.scroll_area = QScrollArea()
        self.scroll_area.setWidgetResizable(True)
        self.scroll_area.setWidget(self.photo_grid)
        self.scroll_area.setHorizontalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        self.scroll_area.verticalScrollBar().valueChanged.connect(self._sync_viewport)
        self.scroll_area.viewport().installEventFilter(self)
        root_layout.addWidget(self.scroll_area, 1)

        self.setCentralWidget(container)

        self.search_bar.submitted.connect(self.view_model.submit)
        self.view_model.busyChanged.connect(self.search_bar.set_busy)
        self.view_model.resultsChanged.connect(self.photo_grid.reload_data)
        self.view_model.searchFailed.connect(self._show_error)
        self._sync_viewport()

    def _sync_viewport(self, *_args) -> None:
        viewport = self.scroll_area.viewport()
        self.photo_grid.set_viewport(
            self.scroll_area.verticalScrollBar().value(),
            viewport.width(),
            viewport.height(),
        )

    def _show_error(self, message: str) -> None:
        self.statusBar().showMessage(f"Error searching: {message}", 5000)

    def eventFilter(self, watched, event):  # type: ignore[override]
        if watched is self.scroll_area.viewport() and event.type() == QEvent.Resize:
            self._sync_viewport()
        return super().eventFilter(watched, event)


def build_window(settings: AppSettings) -> MainWindow:
    """Assemble client, searcher, store and view model from settings."""

    grid = settings.grid
    layout_model = GridLayoutModel(
        items_per_row=grid.items_per_row,
        insets=EdgeInsets(grid.inset_top, grid.inset_left, grid.inset_bottom, grid.inset_right),
    )
    client = FlickrClient(settings.flickr)
    searcher = FlickrSearcher(client)
    view_model = SearchViewModel(searcher, SearchResultStore(capacity=grid.max_sections))
    return MainWindow(view_model, layout_model)


def main() -> int:
    settings = AppSettings.from_env()
    setup_logging(settings.log_level, settings.log_dir)

    app = QApplication(sys.argv)
    try:
        window = build_window(settings)
    except ValueError as exc:
        logger.error("Cannot start Flickr Search: {}", exc)
        return 1
    window.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
