from __future__ import annotations

import numpy as np
import pytest

from tetris_engine.board import HEIGHT, WIDTH, Board, LineClear


def _fill_row(board: Board, row: int, value: int = 1) -> None:
    for col in range(WIDTH):
        board.set_cell(row, col, value)


def test_get_and_set_cell_round_trip_and_bounds() -> None:
    board = Board()
    board.set_cell(3, 4, 6)
    assert board.get_cell(3, 4) == 6
    assert board.is_empty(0, 0)
    assert not board.is_empty(3, 4)
    assert not board.is_empty(-1, 0)
    with pytest.raises(IndexError):
        board.get_cell(HEIGHT, 0)
    with pytest.raises(IndexError):
        board.set_cell(0, WIDTH, 1)


def test_row_predicates() -> None:
    board = Board()
    assert board.row_is_empty(10)
    assert not board.row_is_filled(10)

    _fill_row(board, 10)
    assert board.row_is_filled(10)
    assert not board.row_is_empty(10)

    board.set_cell(10, 9, 0)
    assert not board.row_is_filled(10)
    assert not board.row_is_empty(10)


def test_find_full_rows_marks_only_filled_rows() -> None:
    board = Board()
    _fill_row(board, 5)
    _fill_row(board, HEIGHT - 1)
    board.set_cell(7, 0, 2)

    record = board.find_full_rows()
    assert record.count == 2
    assert len(record.rows) == HEIGHT
    assert record.indices() == [5, HEIGHT - 1]


def test_collapse_removes_full_rows_and_keeps_survivor_order() -> None:
    board = Board()
    # Distinct single-cell markers identify the surviving rows.
    board.set_cell(15, 0, 1)
    _fill_row(board, 16, 2)
    board.set_cell(17, 1, 3)
    _fill_row(board, 18, 4)
    _fill_row(board, 19, 5)
    board.set_cell(20, 2, 6)
    board.set_cell(21, 3, 7)

    survivors_before = [
        board.grid[row].copy() for row in range(HEIGHT) if not board.row_is_filled(row)
    ]

    record = board.find_full_rows()
    assert record.count == 3
    board.collapse_rows(record)

    assert board.find_full_rows().count == 0
    assert all(board.row_is_empty(row) for row in range(3))
    survivors_after = [board.grid[row] for row in range(3, HEIGHT)]
    for before, after in zip(survivors_before, survivors_after):
        assert np.array_equal(before, after)

    assert board.get_cell(21, 3) == 7
    assert board.get_cell(20, 2) == 6
    assert board.get_cell(19, 1) == 3
    assert board.get_cell(18, 0) == 1


def test_collapse_with_empty_record_is_noop() -> None:
    board = Board()
    board.set_cell(21, 0, 1)
    board.set_cell(0, 9, 2)
    before = board.grid.copy()
    board.collapse_rows(LineClear.empty())
    assert np.array_equal(board.grid, before)


def test_collapse_of_completely_full_board_empties_it() -> None:
    board = Board()
    for row in range(HEIGHT):
        _fill_row(board, row)
    board.collapse_rows(board.find_full_rows())
    assert not board.grid.any()


def test_clear_and_cells_snapshot() -> None:
    board = Board()
    board.set_cell(2, 2, 4)
    cells = board.cells()
    assert cells[2][2] == 4
    board.clear()
    assert not board.grid.any()
    # The snapshot is a copy.
    assert cells[2][2] == 4
