"""Collision and placement helpers for the engine."""

from __future__ import annotations

from typing import List, Optional

from .board import Board
from .tetromino import Piece


def is_valid(piece: Piece, board: Board) -> bool:
    """Return ``True`` if ``piece`` fits on ``board`` at its current pose.

    Every occupied cell of the rotated template must land inside the board
    and on an empty cell.  This is the single legality check used for moves,
    rotations, drops and spawns.
    """

    return all(board.is_empty(row, col) for row, col in piece.blocks())


def merge_piece(piece: Piece, board: Board) -> None:
    """Write the cells of ``piece`` into ``board``.

    The pose is not re-checked; callers lock only poses that passed
    :func:`is_valid`.
    """

    value = int(piece.kind)
    for row, col in piece.blocks():
        board.grid[row, col] = value


def ghost_piece(piece: Piece, board: Board) -> Piece:
    """Return the pose ``piece`` would lock at if hard dropped now."""

    landing = piece
    candidate = piece.moved(d_row=1)
    while is_valid(candidate, board):
        landing = candidate
        candidate = candidate.moved(d_row=1)
    return landing


def render_grid(board: Board, piece: Optional[Piece] = None) -> List[List[int]]:
    """Return a copy of the board grid with ``piece`` overlaid.

    Convenience for renderers that want a single 2D array to draw without
    locking the piece.  Cells of the piece outside the board are skipped.
    """

    grid = [[int(value) for value in row] for row in board.grid]
    if piece is not None:
        for row, col in piece.blocks():
            if 0 <= row < board.height and 0 <= col < board.width:
                grid[row][col] = int(piece.kind)
    return grid
