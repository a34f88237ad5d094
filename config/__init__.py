# Path: config/__init__.py
# Purpose: Package initializer for configuration module.
# Layer: config.
# Details: Exposes settings models and logging setup for application-wide configuration.

from .logging_setup import setup_logging
from .settings import AppSettings, FlickrSettings, GridSettings

__all__ = ["AppSettings", "FlickrSettings", "GridSettings", "setup_logging"]
