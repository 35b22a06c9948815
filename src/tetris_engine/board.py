"""Board representation for the playfield."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np
from numpy.typing import NDArray


# Dimensions of the board.  The two rows above the visible area give freshly
# spawned pieces room to appear before they enter the playfield.
WIDTH = 10
HEIGHT = 22
VISIBLE_HEIGHT = 20

Grid = NDArray[np.uint8]
Cells = Tuple[Tuple[int, ...], ...]


def create_empty_grid() -> Grid:
    """Return a new empty board grid filled with zeros."""

    return np.zeros((HEIGHT, WIDTH), dtype=np.uint8)


@dataclass(frozen=True)
class LineClear:
    """Rows found full by a scan of the board.

    ``rows`` holds one flag per board row, top to bottom.
    """

    rows: Tuple[bool, ...] = (False,) * HEIGHT
    count: int = 0

    @classmethod
    def empty(cls) -> "LineClear":
        return cls()

    def indices(self) -> list[int]:
        """Return the indices of the flagged rows."""

        return [row for row, full in enumerate(self.rows) if full]


class Board:
    """Board holding the locked cells.

    Cell values are ``0`` for empty cells and the tetromino kind value
    (``1``-``7``) for occupied ones.
    """

    width: int = WIDTH
    height: int = HEIGHT

    def __init__(self) -> None:
        self.grid: Grid = create_empty_grid()

    def get_cell(self, row: int, col: int) -> int:
        """Return the value at ``(row, col)``.

        Raises:
            IndexError: If the coordinates are outside the board.
        """
        if 0 <= row < self.height and 0 <= col < self.width:
            return int(self.grid[row, col])
        raise IndexError("Cell out of bounds")

    def set_cell(self, row: int, col: int, value: int) -> None:
        """Set the value at ``(row, col)``.

        Raises:
            IndexError: If the coordinates are outside the board.
        """
        if 0 <= row < self.height and 0 <= col < self.width:
            self.grid[row, col] = np.uint8(value)
        else:
            raise IndexError("Cell out of bounds")

    def is_empty(self, row: int, col: int) -> bool:
        """Return ``True`` if the cell at ``(row, col)`` is empty.

        Coordinates outside the board are treated as occupied so off-board
        positions are rejected by collision checks.
        """

        if 0 <= row < self.height and 0 <= col < self.width:
            return bool(self.grid[row, col] == 0)
        return False

    def row_is_filled(self, row: int) -> bool:
        return bool(np.all(self.grid[row] != 0))

    def row_is_empty(self, row: int) -> bool:
        return bool(np.all(self.grid[row] == 0))

    def find_full_rows(self) -> LineClear:
        """Scan every row and return the record of the filled ones."""

        full = np.all(self.grid != 0, axis=1)
        return LineClear(
            rows=tuple(bool(flag) for flag in full),
            count=int(np.count_nonzero(full)),
        )

    def collapse_rows(self, record: LineClear) -> None:
        """Remove the rows flagged in ``record`` and shift the rest down.

        A source cursor walks up from the bottom skipping flagged rows while
        every destination row, bottom to top, receives the next surviving row.
        Once the cursor runs past the top the remaining destinations are
        zero-filled.
        """

        src = self.height - 1
        for dst in range(self.height - 1, -1, -1):
            while src >= 0 and record.rows[src]:
                src -= 1
            if src < 0:
                self.grid[dst] = 0
                continue
            if src != dst:
                self.grid[dst] = self.grid[src]
            src -= 1

    def clear(self) -> None:
        """Empty every cell of the board."""

        self.grid.fill(0)

    def cells(self) -> Cells:
        """Return an immutable copy of the grid."""

        return tuple(tuple(int(value) for value in row) for row in self.grid)
