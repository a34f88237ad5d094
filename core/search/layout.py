# Path: core/search/layout.py
# Purpose: Compute thumbnail grid geometry from the viewport width and section item counts.
# Layer: core/search.
# Details: Stateless model; every call recomputes from its inputs so resizes never see stale sizes.

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from core.errors import InvalidLayout


@dataclass(frozen=True)
class EdgeInsets:
    """Margins between a section's content and the edges of its container."""

    top: float = 0.0
    left: float = 0.0
    bottom: float = 0.0
    right: float = 0.0

    def __post_init__(self) -> None:
        if min(self.top, self.left, self.bottom, self.right) < 0:
            raise ValueError("Insets must be non-negative.")


@dataclass(frozen=True)
class Size:
    width: float
    height: float


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float

    @property
    def bottom(self) -> float:
        return self.y + self.height


@dataclass(frozen=True)
class GridLayout:
    """Result of a full layout pass: where each section starts and how tall the content is."""

    cell_size: Size
    section_offsets: Tuple[float, ...]
    section_heights: Tuple[float, ...]
    content_height: float


class GridLayoutModel:
    """Square-cell grid geometry with one section per search.

    Only the left inset is reused for the gutters between items and for the
    spacing between rows; top, bottom and right insets pad the section only.
    """

    def __init__(self, items_per_row: int = 3, insets: EdgeInsets = EdgeInsets(50.0, 20.0, 50.0, 20.0)) -> None:
        if items_per_row < 1:
            raise ValueError("items_per_row must be at least 1.")
        self.items_per_row = items_per_row
        self.insets = insets

    def cell_size(self, viewport_width: float) -> Size:
        """Return the square cell size for the given viewport width.

        Raises InvalidLayout when the gutters leave no positive width per item.
        """

        padding_space = self.insets.left * (self.items_per_row + 1)
        available_width = viewport_width - padding_space
        width_per_item = available_width / self.items_per_row
        if width_per_item <= 0:
            raise InvalidLayout(
                f"Viewport width {viewport_width} cannot fit {self.items_per_row} items "
                f"with {padding_space} of padding."
            )
        return Size(width_per_item, width_per_item)

    def section_inset(self, section: int = 0) -> EdgeInsets:
        return self.insets

    def minimum_line_spacing(self, section: int = 0) -> float:
        return self.insets.left

    def minimum_interitem_spacing(self, section: int = 0) -> float:
        return self.insets.left

    def row_count(self, item_count: int) -> int:
        return math.ceil(item_count / self.items_per_row) if item_count > 0 else 0

    def section_height(self, item_count: int, viewport_width: float) -> float:
        rows = self.row_count(item_count)
        if rows == 0:
            return 0.0
        side = self.cell_size(viewport_width).width
        line_spacing = self.minimum_line_spacing()
        return self.insets.top + rows * side + (rows - 1) * line_spacing + self.insets.bottom

    def cell_frame(self, section_top: float, index: int, viewport_width: float) -> Rect:
        """Return the frame of item ``index`` in a section starting at ``section_top``."""

        side = self.cell_size(viewport_width).width
        row, column = divmod(index, self.items_per_row)
        gutter = self.minimum_interitem_spacing()
        x = self.insets.left + column * (side + gutter)
        y = section_top + self.insets.top + row * (side + self.minimum_line_spacing())
        return Rect(x, y, side, side)

    def layout(self, item_counts: Sequence[int], viewport_width: float) -> GridLayout:
        cell = self.cell_size(viewport_width)
        offsets: List[float] = []
        heights: List[float] = []
        top = 0.0
        for count in item_counts:
            height = self.section_height(count, viewport_width)
            offsets.append(top)
            heights.append(height)
            top += height
        return GridLayout(cell, tuple(offsets), tuple(heights), top)

    def visible_items(
        self, item_counts: Sequence[int], viewport_width: float, top: float, bottom: float
    ) -> List[Tuple[int, int]]:
        """List ``(section, index)`` pairs whose frames intersect the vertical range [top, bottom)."""

        grid = self.layout(item_counts, viewport_width)
        side = grid.cell_size.width
        stride = side + self.minimum_line_spacing()
        visible: List[Tuple[int, int]] = []
        for section, count in enumerate(item_counts):
            section_top = grid.section_offsets[section]
            section_bottom = section_top + grid.section_heights[section]
            if count == 0 or section_bottom <= top or section_top >= bottom:
                continue
            content_top = section_top + self.insets.top
            first_row = max(0, int((top - content_top) // stride))
            last_row = min(self.row_count(count) - 1, int((bottom - content_top) // stride))
            for row in range(first_row, last_row + 1):
                row_top = content_top + row * stride
                if row_top + side <= top or row_top >= bottom:
                    continue
                start = row * self.items_per_row
                for index in range(start, min(start + self.items_per_row, count)):
                    visible.append((section, index))
        return visible
