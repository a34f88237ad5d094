# Path: gui/__init__.py
# Purpose: Package initializer for GUI layer.
# Layer: gui.
# Details: Provide lightweight exports without importing MainWindow to avoid side effects.

from .searcher import FlickrSearcher
from .view_models import SearchViewModel
from .widgets.photo_grid import PhotoGrid

__all__ = ["FlickrSearcher", "PhotoGrid", "SearchViewModel"]
