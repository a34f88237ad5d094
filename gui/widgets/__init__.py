# Path: gui/widgets/__init__.py
# Purpose: Package initializer for reusable GUI widgets.
# Layer: gui/widgets.
# Details: Exposes the photo grid, its cells and pool, and the search bar.

from .cell_pool import CellPool
from .photo_cell import PhotoCell
from .photo_grid import PhotoGrid
from .search_bar import SearchBar

__all__ = ["CellPool", "PhotoCell", "PhotoGrid", "SearchBar"]
