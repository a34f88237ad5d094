# Path: core/flickr/client.py
# Purpose: Query the Flickr REST API for photos matching a text query.
# Layer: core/flickr.
# Details: Blocking client meant to run off the GUI thread; downloads a thumbnail for every matched photo.

from __future__ import annotations

from dataclasses import replace
from typing import List, Optional

import requests
from loguru import logger
from pydantic import BaseModel, ValidationError

from config.settings import FlickrSettings
from core.errors import SearchFailed
from core.models.domain import FlickrPhoto, SearchResult

SEARCH_METHOD = "flickr.photos.search"


class FlickrPhotoPayload(BaseModel):
    id: str
    secret: str
    server: str
    farm: int = 0
    title: str = ""


class FlickrPhotosPage(BaseModel):
    page: int = 1
    pages: int = 0
    perpage: int = 0
    total: int = 0
    photo: List[FlickrPhotoPayload] = []


class FlickrSearchResponse(BaseModel):
    stat: str
    photos: Optional[FlickrPhotosPage] = None
    code: Optional[int] = None
    message: Optional[str] = None


class FlickrClient:
    """Thin wrapper over ``flickr.photos.search`` plus static image downloads."""

    def __init__(self, settings: FlickrSettings, session: Optional[requests.Session] = None) -> None:
        if not settings.api_key:
            raise ValueError("FLICKR_API_KEY is not set")
        self.settings = settings
        self.session = session or requests.Session()

    def search_params(self, query: str) -> dict:
        return {
            "method": SEARCH_METHOD,
            "api_key": self.settings.api_key,
            "text": query,
            "per_page": self.settings.per_page,
            "format": "json",
            "nojsoncallback": 1,
        }

    def search_photos(self, query: str) -> SearchResult:
        """Run a search and return the matched photos with their thumbnails loaded.

        Photos whose thumbnail cannot be fetched are skipped rather than failing the search.
        """

        logger.debug("Searching Flickr for {!r}", query)
        response = self._fetch_search_response(query)
        page = response.photos or FlickrPhotosPage()

        photos: List[FlickrPhoto] = []
        for payload in page.photo:
            photo = FlickrPhoto(
                photo_id=payload.id,
                server=payload.server,
                secret=payload.secret,
                farm=payload.farm,
                title=payload.title,
            )
            try:
                thumbnail = self.load_image(photo, self.settings.thumbnail_size)
            except requests.RequestException as exc:
                logger.warning("Skipping photo {}: thumbnail download failed: {}", photo.photo_id, exc)
                continue
            photos.append(replace(photo, thumbnail=thumbnail))
        return SearchResult.of(query, photos)

    def load_image(self, photo: FlickrPhoto, size: str = "b") -> bytes:
        """Download the photo file at the given Flickr size suffix."""

        url = photo.image_url(size, host=self.settings.image_host)
        response = self.session.get(url, timeout=self.settings.timeout)
        response.raise_for_status()
        return response.content

    def _fetch_search_response(self, query: str) -> FlickrSearchResponse:
        try:
            response = self.session.get(
                self.settings.endpoint,
                params=self.search_params(query),
                timeout=self.settings.timeout,
            )
            response.raise_for_status()
        except requests.RequestException as exc:
            raise SearchFailed(f"Flickr request failed: {exc}") from exc

        try:
            parsed = FlickrSearchResponse.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            raise SearchFailed("Unknown API response") from exc

        if parsed.stat != "ok":
            raise SearchFailed(parsed.message or "Unknown API response", code=parsed.code)
        return parsed
