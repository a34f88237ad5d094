import threading
from unittest.mock import MagicMock

import pytest

from core.errors import SearchFailed
from core.flickr.client import FlickrClient
from gui.searcher import FlickrSearcher


@pytest.fixture
def client() -> MagicMock:
    return MagicMock(spec=FlickrClient)


def test_completion_is_delivered_on_gui_thread(qtbot, client, make_result):
    worker_threads = []

    def search_photos(query):
        worker_threads.append(threading.get_ident())
        return make_result(query, 2)

    client.search_photos.side_effect = search_photos
    searcher = FlickrSearcher(client)
    outcomes = []
    callback_threads = []

    def on_complete(outcome):
        callback_threads.append(threading.get_ident())
        outcomes.append(outcome)

    searcher.search("cats", on_complete)
    qtbot.waitUntil(lambda: len(outcomes) == 1, timeout=5000)

    assert outcomes[0].ok
    assert outcomes[0].result.query == "cats"
    assert callback_threads == [threading.get_ident()]
    assert worker_threads[0] != threading.get_ident()
    assert searcher.pending_count == 0


def test_search_failure_is_reported(qtbot, client):
    client.search_photos.side_effect = SearchFailed("Invalid API Key", code=100)
    searcher = FlickrSearcher(client)
    outcomes = []

    searcher.search("cats", outcomes.append)
    qtbot.waitUntil(lambda: len(outcomes) == 1, timeout=5000)

    assert not outcomes[0].ok
    assert outcomes[0].error.code == 100


def test_unexpected_errors_become_search_failed(qtbot, client):
    client.search_photos.side_effect = RuntimeError("boom")
    searcher = FlickrSearcher(client)
    outcomes = []

    searcher.search("cats", outcomes.append)
    qtbot.waitUntil(lambda: len(outcomes) == 1, timeout=5000)

    assert isinstance(outcomes[0].error, SearchFailed)
    assert "boom" in str(outcomes[0].error)


def test_each_search_completes_exactly_once(qtbot, client, make_result):
    client.search_photos.side_effect = lambda query: make_result(query, 1)
    searcher = FlickrSearcher(client)
    outcomes = []

    for query in ["a", "b", "c"]:
        searcher.search(query, outcomes.append)
    qtbot.waitUntil(lambda: len(outcomes) == 3, timeout=5000)
    searcher.wait_for_done(1000)
    qtbot.wait(50)

    assert sorted(outcome.query for outcome in outcomes) == ["a", "b", "c"]
    assert searcher.pending_count == 0
