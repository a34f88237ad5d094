# Path: core/models/__init__.py
# Purpose: Package initializer for domain model definitions.
# Layer: core/models.
# Details: Exposes dataclasses used across the client, store, and GUI layers.

from .domain import DEFAULT_IMAGE_HOST, FlickrPhoto, SearchOutcome, SearchResult

__all__ = ["DEFAULT_IMAGE_HOST", "FlickrPhoto", "SearchOutcome", "SearchResult"]
