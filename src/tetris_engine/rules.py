"""Gravity timing, scoring and level progression."""

from __future__ import annotations

from typing import Tuple


# Frames between automatic drops for levels 0-29.  Higher levels reuse the
# last entry.
FRAMES_PER_DROP: Tuple[int, ...] = (
    48, 43, 38, 33, 28, 23, 18, 13, 8, 6,
    5, 5, 5, 4, 4, 4, 3, 3, 3, 2,
    2, 2, 2, 2, 2, 2, 2, 2, 2, 1,
)

SECONDS_PER_FRAME = 1.0 / 60.0

# Points per cleared line count, multiplied by ``level + 1``.
LINE_CLEAR_POINTS: Tuple[int, int, int, int] = (40, 100, 300, 1200)


def drop_interval(level: int, seconds_per_frame: float = SECONDS_PER_FRAME) -> float:
    """Return the number of seconds between automatic drops at ``level``."""

    level = min(level, len(FRAMES_PER_DROP) - 1)
    return FRAMES_PER_DROP[level] * seconds_per_frame


def points(level: int, lines_cleared: int) -> int:
    """Return the award for clearing ``lines_cleared`` rows at once."""

    if 1 <= lines_cleared <= len(LINE_CLEAR_POINTS):
        return LINE_CLEAR_POINTS[lines_cleared - 1] * (level + 1)
    return 0


def lines_for_next_level(start_level: int, level: int) -> int:
    """Return the cumulative line count at which ``level`` is left.

    The first threshold depends on the chosen start level; every level after
    it needs ten more lines.
    """

    first = min(start_level * 10 + 10, max(100, start_level * 10 - 50))
    if level == start_level:
        return first
    return first + (level - start_level) * 10
