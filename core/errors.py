# Path: core/errors.py
# Purpose: Define the exception hierarchy shared by the core and GUI layers.
# Layer: core.
# Details: Separates remote search failures from renderer/store desynchronization and impossible layouts.

from __future__ import annotations

from typing import Optional


class FlickrSearchError(Exception):
    """Base exception for all application-level errors."""


class SearchFailed(FlickrSearchError):
    """The remote search could not produce a result."""

    def __init__(self, message: str, code: Optional[int] = None) -> None:
        super().__init__(message)
        self.code = code

    def __str__(self) -> str:
        message = super().__str__()
        if self.code is None:
            return message
        return f"{message} (code {self.code})"


class OutOfRange(FlickrSearchError, IndexError):
    """A section or item index does not exist in the result store."""


class InvalidLayout(FlickrSearchError, ValueError):
    """The viewport is too narrow to fit any cell."""


__all__ = ["FlickrSearchError", "SearchFailed", "OutOfRange", "InvalidLayout"]
