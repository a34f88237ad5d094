# Path: core/models/domain.py
# Purpose: Define domain models shared across the Flickr client, result store, and GUI.
# Layer: core/models.
# Details: Frozen dataclasses keep completed searches immutable once handed to the UI thread.

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional, Tuple

from core.errors import SearchFailed

DEFAULT_IMAGE_HOST = "https://live.staticflickr.com"


@dataclass(frozen=True)
class FlickrPhoto:
    """A single Flickr photo together with its downloaded thumbnail."""

    photo_id: str
    server: str
    secret: str
    farm: int = 0
    title: str = ""
    thumbnail: bytes = field(default=b"", repr=False)

    def image_url(self, size: str = "m", host: str = DEFAULT_IMAGE_HOST) -> str:
        """Build the static URL for this photo at the given Flickr size suffix."""

        return f"{host.rstrip('/')}/{self.server}/{self.photo_id}_{self.secret}_{size}.jpg"


@dataclass(frozen=True)
class SearchResult:
    """One completed search: the query text and the photos it matched."""

    query: str
    photos: Tuple[FlickrPhoto, ...] = ()

    def __post_init__(self) -> None:
        if not self.query or not self.query.strip():
            raise ValueError("SearchResult requires a non-empty query.")
        object.__setattr__(self, "photos", tuple(self.photos))

    @classmethod
    def of(cls, query: str, photos: Iterable[FlickrPhoto]) -> "SearchResult":
        return cls(query=query, photos=tuple(photos))


@dataclass(frozen=True)
class SearchOutcome:
    """Completion payload of an asynchronous search: either a result or an error."""

    query: str
    result: Optional[SearchResult] = None
    error: Optional[SearchFailed] = None

    def __post_init__(self) -> None:
        if (self.result is None) == (self.error is None):
            raise ValueError("SearchOutcome needs exactly one of result or error.")

    @property
    def ok(self) -> bool:
        return self.error is None
