# Path: gui/widgets/photo_cell.py
# Purpose: Display a single Flickr thumbnail inside the photo grid.
# Layer: gui/widgets.
# Details: Wraps QLabel with scaling support; reset() clears state before the cell is reused.

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QPixmap
from PySide6.QtWidgets import QLabel, QWidget

from core.models.domain import FlickrPhoto


class PhotoCell(QLabel):
    """Reusable thumbnail cell with a white background."""

    reuse_identifier = "FlickrCell"

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.photo: Optional[FlickrPhoto] = None
        self._pixmap: Optional[QPixmap] = None
        self.setAlignment(Qt.AlignCenter)
        self.setStyleSheet("background-color: white;")

    def bind(self, photo: FlickrPhoto) -> None:
        self.photo = photo
        self.setToolTip(photo.title)
        pixmap = QPixmap()
        if photo.thumbnail and pixmap.loadFromData(photo.thumbnail):
            self._pixmap = pixmap
        else:
            self._pixmap = None
        self._apply_pixmap()

    def reset(self) -> None:
        self.photo = None
        self._pixmap = None
        self.setToolTip("")
        self.setPixmap(QPixmap())

    def resizeEvent(self, event) -> None:  # type: ignore[override]
        super().resizeEvent(event)
        self._apply_pixmap()

    def _apply_pixmap(self) -> None:
        if not self._pixmap or self._pixmap.isNull():
            self.setPixmap(QPixmap())
            return
        scaled = self._pixmap.scaled(self.size(), Qt.KeepAspectRatio, Qt.SmoothTransformation)
        self.setPixmap(scaled)
