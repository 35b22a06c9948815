"""Tetromino catalog, rotation sampling and the active piece pose.

Every shape is stored exactly once in its spawn orientation as a square
``side x side`` template.  The three other orientations are never stored:
:func:`sample` remaps local coordinates on every read instead, so the
collision check, the merge and the renderers all see the same geometry.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import IntEnum
from typing import Dict, Iterator, Tuple

Template = Tuple[Tuple[int, ...], ...]


class TetrominoKind(IntEnum):
    """Enumeration of the seven standard tetromino shapes.

    The integer value doubles as the cell value stored on the board, so ``0``
    stays free to mean an empty cell.
    """

    I = 1
    O = 2
    T = 3
    S = 4
    Z = 5
    J = 6
    L = 7

    @property
    def index(self) -> int:
        """Zero-based position of the kind in the catalog."""

        return self.value - 1


@dataclass(frozen=True)
class Tetromino:
    """Immutable shape definition in its spawn orientation."""

    kind: TetrominoKind
    side: int
    data: Template

    @property
    def cell_count(self) -> int:
        """Number of occupied cells in the template."""

        return sum(1 for row in self.data for value in row if value)


_TEMPLATES: Dict[TetrominoKind, Template] = {
    TetrominoKind.I: (
        (0, 0, 0, 0),
        (1, 1, 1, 1),
        (0, 0, 0, 0),
        (0, 0, 0, 0),
    ),
    TetrominoKind.O: (
        (2, 2),
        (2, 2),
    ),
    TetrominoKind.T: (
        (0, 0, 0),
        (3, 3, 3),
        (0, 3, 0),
    ),
    TetrominoKind.S: (
        (0, 4, 4),
        (4, 4, 0),
        (0, 0, 0),
    ),
    TetrominoKind.Z: (
        (5, 5, 0),
        (0, 5, 5),
        (0, 0, 0),
    ),
    TetrominoKind.J: (
        (6, 0, 0),
        (6, 6, 6),
        (0, 0, 0),
    ),
    TetrominoKind.L: (
        (0, 0, 7),
        (7, 7, 7),
        (0, 0, 0),
    ),
}

CATALOG: Tuple[Tetromino, ...] = tuple(
    Tetromino(kind=kind, side=len(data), data=data) for kind, data in _TEMPLATES.items()
)

CATALOG_SIZE = len(CATALOG)


def tetromino(kind: int) -> Tetromino:
    """Return the catalog entry for ``kind``.

    ``kind`` may be a :class:`TetrominoKind` or its integer value.

    Raises:
        ValueError: If ``kind`` does not name one of the seven shapes.
    """

    try:
        kind = TetrominoKind(kind)
    except ValueError:
        raise ValueError(f"Unknown tetromino kind: {kind!r}") from None
    return CATALOG[kind.index]


def sample(kind: int, row: int, col: int, rotation: int) -> int:
    """Return the cell value at local ``(row, col)`` of ``kind`` rotated.

    Parameters
    ----------
    kind:
        Shape to read.
    row, col:
        Local coordinates inside the ``side x side`` bounding box.
    rotation:
        Number of clockwise quarter turns.  Values are wrapped so any
        integer is accepted.
    """

    shape = tetromino(kind)
    side = shape.side
    rotation %= 4
    if rotation == 0:
        return shape.data[row][col]
    if rotation == 1:
        return shape.data[side - col - 1][row]
    if rotation == 2:
        return shape.data[side - row - 1][side - col - 1]
    return shape.data[col][side - row - 1]


def occupied_cells(kind: int, rotation: int) -> Iterator[Tuple[int, int]]:
    """Yield local ``(row, col)`` offsets of the occupied cells."""

    side = tetromino(kind).side
    for row in range(side):
        for col in range(side):
            if sample(kind, row, col, rotation):
                yield row, col


@dataclass(frozen=True)
class Piece:
    """Pose of the active falling piece.

    ``row`` and ``col`` locate the top-left corner of the bounding box on the
    board.  Instances are values: every transformation returns a new pose so a
    candidate can be built, validated and only then assigned.
    """

    kind: TetrominoKind
    row: int = 0
    col: int = 0
    rotation: int = 0

    @property
    def side(self) -> int:
        return tetromino(self.kind).side

    def moved(self, d_row: int = 0, d_col: int = 0) -> "Piece":
        """Return the pose translated by ``d_row`` rows and ``d_col`` columns."""

        return replace(self, row=self.row + d_row, col=self.col + d_col)

    def rotated(self, turns: int = 1) -> "Piece":
        """Return the pose rotated clockwise by ``turns`` quarter turns."""

        return replace(self, rotation=(self.rotation + turns) % 4)

    def blocks(self) -> list[Tuple[int, int]]:
        """Return the board coordinates covered by this pose."""

        return [
            (self.row + row, self.col + col)
            for row, col in occupied_cells(self.kind, self.rotation)
        ]
