# Path: core/flickr/__init__.py
# Purpose: Package initializer for the Flickr API client.
# Layer: core/flickr.
# Details: Exposes the blocking client used by the background searcher and scripts.

from .client import FlickrClient, FlickrSearchResponse

__all__ = ["FlickrClient", "FlickrSearchResponse"]
