import pytest

from gui.widgets.cell_pool import CellPool


class Cell:
    def __init__(self) -> None:
        self.bound = None
        self.resets = 0

    def reset(self) -> None:
        self.bound = None
        self.resets += 1


def test_dequeue_creates_when_empty():
    pool = CellPool()
    pool.register("cell", Cell)

    first = pool.dequeue("cell")
    second = pool.dequeue("cell")

    assert first is not second
    assert pool.created_count("cell") == 2
    assert pool.free_count("cell") == 0


def test_enqueued_cell_is_reset_and_reused():
    pool = CellPool()
    pool.register("cell", Cell)
    cell = pool.dequeue("cell")
    cell.bound = "photo"

    pool.enqueue("cell", cell)

    assert cell.bound is None
    assert cell.resets == 1
    assert pool.free_count("cell") == 1
    assert pool.dequeue("cell") is cell
    assert pool.created_count("cell") == 1


def test_pools_are_separate_per_identifier():
    pool = CellPool()
    pool.register("a", Cell)
    pool.register("b", Cell)
    cell = pool.dequeue("a")
    pool.enqueue("a", cell)

    assert pool.free_count("b") == 0
    assert pool.dequeue("b") is not cell


def test_cells_without_reset_are_accepted():
    pool = CellPool()
    pool.register("plain", object)
    cell = pool.dequeue("plain")
    pool.enqueue("plain", cell)
    assert pool.dequeue("plain") is cell


def test_unknown_identifier_raises():
    pool = CellPool()
    with pytest.raises(KeyError):
        pool.dequeue("missing")
    with pytest.raises(KeyError):
        pool.enqueue("missing", Cell())
