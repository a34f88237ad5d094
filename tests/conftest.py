import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from typing import Callable, List
from unittest.mock import MagicMock

import pytest
import requests

from config.settings import FlickrSettings
from core.models.domain import FlickrPhoto, SearchOutcome, SearchResult


@pytest.fixture
def make_photo() -> Callable[..., FlickrPhoto]:
    def factory(photo_id: str = "1", title: str = "") -> FlickrPhoto:
        return FlickrPhoto(photo_id=photo_id, server="65535", secret=f"s{photo_id}", title=title)

    return factory


@pytest.fixture
def make_result(make_photo) -> Callable[[str, int], SearchResult]:
    def factory(query: str, count: int = 3) -> SearchResult:
        return SearchResult.of(query, [make_photo(f"{query}-{i}") for i in range(count)])

    return factory


@pytest.fixture
def flickr_settings() -> FlickrSettings:
    return FlickrSettings(api_key="test-key", per_page=5)


@pytest.fixture
def mock_session() -> MagicMock:
    return MagicMock(spec=requests.Session)


def _make_response(json_data=None, content: bytes = b"", status_error: Exception | None = None) -> MagicMock:
    response = MagicMock(spec=requests.Response)
    response.content = content
    if status_error is not None:
        response.raise_for_status.side_effect = status_error
    if isinstance(json_data, Exception):
        response.json.side_effect = json_data
    else:
        response.json.return_value = json_data
    return response


@pytest.fixture
def make_response() -> Callable[..., MagicMock]:
    return _make_response


class FakeSearcher:
    """Records search calls; tests complete them explicitly."""

    def __init__(self) -> None:
        self.calls: List[tuple] = []

    def search(self, query, on_complete) -> None:
        self.calls.append((query, on_complete))

    def succeed(self, call_index: int, result: SearchResult) -> None:
        query, on_complete = self.calls[call_index]
        on_complete(SearchOutcome(query, result=result))

    def fail(self, call_index: int, error) -> None:
        query, on_complete = self.calls[call_index]
        on_complete(SearchOutcome(query, error=error))


@pytest.fixture
def fake_searcher() -> FakeSearcher:
    return FakeSearcher()
