# Path: core/search/__init__.py
# Purpose: Package initializer for search history and grid geometry.
# Layer: core/search.
# Details: Exposes the result store and the stateless grid layout model.

from .layout import EdgeInsets, GridLayout, GridLayoutModel, Rect, Size
from .store import SearchResultStore

__all__ = [
    "EdgeInsets",
    "GridLayout",
    "GridLayoutModel",
    "Rect",
    "SearchResultStore",
    "Size",
]
