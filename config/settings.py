# Path: config/settings.py
# Purpose: Provide typed application configuration models.
# Layer: config.
# Details: Centralizes settings for the Flickr client, grid geometry, and logging.

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field


class FlickrSettings(BaseModel):
    """Settings describing how to reach the Flickr REST API and its image host."""

    api_key: str = Field(default="", description="Flickr API key used for photo searches.")
    endpoint: str = Field(default="https://api.flickr.com/services/rest/", description="Flickr REST endpoint.")
    image_host: str = Field(default="https://live.staticflickr.com", description="Host serving photo files.")
    per_page: int = Field(default=20, ge=1, le=500, description="Number of photos requested per search.")
    timeout: float = Field(default=10.0, gt=0, description="HTTP timeout in seconds.")
    thumbnail_size: str = Field(default="m", description="Flickr size suffix used for grid thumbnails.")


class GridSettings(BaseModel):
    """Settings controlling the thumbnail grid geometry and search history size."""

    items_per_row: int = Field(default=3, ge=1, description="Number of thumbnails in each grid row.")
    inset_top: float = Field(default=50.0, ge=0, description="Top margin of every section.")
    inset_left: float = Field(default=20.0, ge=0, description="Left margin, also used for gutters and row spacing.")
    inset_bottom: float = Field(default=50.0, ge=0, description="Bottom margin of every section.")
    inset_right: float = Field(default=20.0, ge=0, description="Right margin of every section.")
    max_sections: Optional[int] = Field(default=None, ge=1, description="Optional cap on kept searches.")


class AppSettings(BaseModel):
    """Top-level application settings shared across the GUI and scripts."""

    flickr: FlickrSettings = Field(default_factory=FlickrSettings)
    grid: GridSettings = Field(default_factory=GridSettings)
    log_level: str = Field(default="INFO", description="Verbosity level for application logs.")
    log_dir: Optional[Path] = Field(default=None, description="Directory for rotating log files.")

    @classmethod
    def from_env(cls) -> "AppSettings":
        """Instantiate settings, applying environment overrides when present."""

        settings = cls()
        api_key = os.getenv("FLICKR_API_KEY")
        if api_key:
            settings.flickr.api_key = api_key
        log_level = os.getenv("FLICKR_SEARCH_LOG_LEVEL")
        if log_level:
            settings.log_level = log_level.upper()
        log_dir = os.getenv("FLICKR_SEARCH_LOG_DIR")
        if log_dir:
            settings.log_dir = Path(log_dir)
        return settings


__all__ = ["AppSettings", "FlickrSettings", "GridSettings"]
