import dataclasses

import pytest

from core.errors import SearchFailed
from core.models.domain import FlickrPhoto, SearchOutcome, SearchResult


def test_image_url_sizes():
    photo = FlickrPhoto(photo_id="42", server="65535", secret="abc")
    assert photo.image_url() == "https://live.staticflickr.com/65535/42_abc_m.jpg"
    assert photo.image_url("b", host="https://example.org/") == "https://example.org/65535/42_abc_b.jpg"


def test_search_result_is_immutable(make_photo):
    photos = [make_photo("1"), make_photo("2")]
    result = SearchResult("cats", photos)
    photos.append(make_photo("3"))

    assert len(result.photos) == 2
    assert isinstance(result.photos, tuple)
    with pytest.raises(dataclasses.FrozenInstanceError):
        result.query = "dogs"  # type: ignore[misc]


@pytest.mark.parametrize("query", ["", "   "])
def test_search_result_rejects_blank_query(query):
    with pytest.raises(ValueError):
        SearchResult(query)


def test_search_outcome_requires_exactly_one_side(make_result):
    with pytest.raises(ValueError):
        SearchOutcome("cats")
    with pytest.raises(ValueError):
        SearchOutcome("cats", result=make_result("cats"), error=SearchFailed("boom"))

    assert SearchOutcome("cats", result=make_result("cats")).ok
    assert not SearchOutcome("cats", error=SearchFailed("boom")).ok


def test_search_failed_message_includes_code():
    assert str(SearchFailed("Invalid API Key", code=100)) == "Invalid API Key (code 100)"
    assert str(SearchFailed("offline")) == "offline"
