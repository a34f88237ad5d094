# Path: gui/widgets/search_bar.py
# Purpose: Provide the query input with an activity indicator shown while searches run.
# Layer: gui/widgets.
# Details: Emits submitted(text) on Return, then clears itself and drops focus for non-blank input.

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Signal
from PySide6.QtWidgets import QHBoxLayout, QLineEdit, QProgressBar, QWidget


class SearchBar(QWidget):
    """Single-line search field paired with an indeterminate busy indicator."""

    submitted = Signal(str)

    def __init__(self, parent: Optional[QWidget] = None, placeholder_text: str = "Search Flickr") -> None:
        super().__init__(parent)
        layout = QHBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)
        layout.setSpacing(8)

        self.line_edit = QLineEdit()
        self.line_edit.setPlaceholderText(placeholder_text)
        self.line_edit.setClearButtonEnabled(True)
        self.line_edit.returnPressed.connect(self._on_return_pressed)
        layout.addWidget(self.line_edit, 1)

        self.activity_indicator = QProgressBar()
        self.activity_indicator.setRange(0, 0)
        self.activity_indicator.setTextVisible(False)
        self.activity_indicator.setFixedWidth(80)
        self.activity_indicator.setVisible(False)
        layout.addWidget(self.activity_indicator)

    def set_busy(self, busy: bool) -> None:
        self.activity_indicator.setVisible(busy)

    def is_busy(self) -> bool:
        return not self.activity_indicator.isHidden()

    def _on_return_pressed(self) -> None:
        text = self.line_edit.text()
        self.submitted.emit(text)
        if not text.strip():
            return
        self.line_edit.clear()
        self.line_edit.clearFocus()
