import pytest
from PySide6.QtCore import Qt

from core.errors import SearchFailed
from gui.main_window import MainWindow
from gui.view_models import SearchViewModel


@pytest.fixture
def window(qtbot, fake_searcher) -> MainWindow:
    main_window = MainWindow(SearchViewModel(fake_searcher))
    qtbot.addWidget(main_window)
    main_window.show()
    qtbot.waitExposed(main_window)
    main_window.photo_grid.set_viewport(0, 380, 600)
    return main_window


def submit(qtbot, window, text):
    window.search_bar.line_edit.setText(text)
    qtbot.keyClick(window.search_bar.line_edit, Qt.Key_Return)


def test_return_starts_search_and_clears_field(qtbot, window, fake_searcher):
    submit(qtbot, window, "cats")

    assert [query for query, _ in fake_searcher.calls] == ["cats"]
    assert window.search_bar.line_edit.text() == ""
    assert window.search_bar.is_busy()


def test_blank_return_does_not_search(qtbot, window, fake_searcher):
    submit(qtbot, window, "   ")

    assert fake_searcher.calls == []
    assert not window.search_bar.is_busy()


def test_completed_search_is_rendered(qtbot, window, fake_searcher, make_result):
    submit(qtbot, window, "cats")
    fake_searcher.succeed(0, make_result("cats", 2))

    assert not window.search_bar.is_busy()
    assert sorted(window.photo_grid.visible_cells()) == [(0, 0), (0, 1)]


def test_failed_search_shows_status_message(qtbot, window, fake_searcher):
    submit(qtbot, window, "cats")
    fake_searcher.fail(0, SearchFailed("offline"))

    assert window.statusBar().currentMessage() == "Error searching: offline"
    assert window.view_model.store.section_count() == 0
