"""Game state container and the phase state machine driving it.

The host owns a single :class:`GameState` and calls :func:`advance` once per
frame with the current :class:`~tetris_engine.input_state.InputState` and the
game clock in seconds.  Each call performs exactly one logical step for the
current phase.  Afterwards the host reads :meth:`GameState.snapshot` to draw
the frame and decide which sounds to play; the engine itself never touches
rendering or audio.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional
import logging
import random

from .board import Board, Cells, LineClear, WIDTH
from .config import GameConfig
from .input_state import InputState
from .rules import drop_interval, lines_for_next_level, points
from .tetromino import CATALOG, Piece
from .utils import ghost_piece, is_valid, merge_piece


LOGGER = logging.getLogger(__name__)

# Row whose occupation after a lock ends the game.
GAME_OVER_ROW = 0


class Phase(str, Enum):
    """Phases of a session."""

    START = "start"
    PLAY = "play"
    LINE = "line"
    GAMEOVER = "gameover"


class DropResult(str, Enum):
    """Outcome of a single soft-drop step."""

    MOVED = "moved"
    LOCKED = "locked"


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only view of the game handed to presentation code.

    ``piece`` and ``ghost`` are only set while playing, ``lines`` only while
    full rows are highlighted.
    """

    board: Cells
    phase: Phase
    paused: bool
    start_level: int
    level: int
    line_count: int
    points: int
    piece: Optional[Piece] = None
    ghost: Optional[Piece] = None
    lines: Optional[LineClear] = None


@dataclass
class GameState:
    """Mutable state for a game session."""

    config: GameConfig = field(default_factory=GameConfig)
    board: Board = field(default_factory=Board)
    piece: Optional[Piece] = None
    pending: LineClear = field(default_factory=LineClear.empty)
    phase: Phase = Phase.START
    paused: bool = False
    start_level: int = 0
    level: int = 0
    line_count: int = 0
    points: int = 0
    next_drop_time: float = 0.0
    highlight_end_time: float = 0.0
    time: float = 0.0
    rng: random.Random = field(default_factory=random.Random, repr=False)

    def __post_init__(self) -> None:
        if self.config.random_seed is not None:
            self.rng.seed(self.config.random_seed)

    def drop_interval(self) -> float:
        """Return the gravity interval for the current level."""

        return drop_interval(self.level, self.config.seconds_per_frame)

    def snapshot(self) -> GameSnapshot:
        """Return an immutable view of the current state."""

        playing = self.phase is Phase.PLAY and self.piece is not None
        return GameSnapshot(
            board=self.board.cells(),
            phase=self.phase,
            paused=self.paused,
            start_level=self.start_level,
            level=self.level,
            line_count=self.line_count,
            points=self.points,
            piece=self.piece if playing else None,
            ghost=ghost_piece(self.piece, self.board) if playing else None,
            lines=self.pending if self.phase is Phase.LINE else None,
        )


# ----------------------------------------------------------------------
# Spawn and drop
# ----------------------------------------------------------------------
def spawn(state: GameState) -> Piece:
    """Place a random new piece at the top centre and schedule its drop."""

    shape = CATALOG[state.rng.randrange(len(CATALOG))]
    state.piece = Piece(shape.kind, row=0, col=WIDTH // 2, rotation=0)
    state.next_drop_time = state.time + state.drop_interval()
    return state.piece


def soft_drop(state: GameState) -> DropResult:
    """Move the active piece down one row or lock it.

    When the lower pose is illegal the piece is merged at its current pose
    and the next piece is spawned.
    """

    assert state.piece is not None
    candidate = state.piece.moved(d_row=1)
    if is_valid(candidate, state.board):
        state.piece = candidate
        state.next_drop_time = state.time + state.drop_interval()
        return DropResult.MOVED

    merge_piece(state.piece, state.board)
    spawn(state)
    return DropResult.LOCKED


def hard_drop(state: GameState) -> None:
    """Soft drop repeatedly until the piece locks."""

    while soft_drop(state) is DropResult.MOVED:
        pass


def toggle_pause(state: GameState) -> None:
    state.paused = not state.paused
    LOGGER.debug("Paused" if state.paused else "Resumed")


# ----------------------------------------------------------------------
# Per-phase updates
# ----------------------------------------------------------------------
def _enter(state: GameState, phase: Phase) -> None:
    LOGGER.debug("Phase %s -> %s at t=%.3f", state.phase.value, phase.value, state.time)
    state.phase = phase


def _update_start(state: GameState, inputs: InputState) -> None:
    if inputs.just_pressed("rotate"):
        state.start_level += 1
    if inputs.just_pressed("soft_drop") and state.start_level > 0:
        state.start_level -= 1

    if inputs.just_pressed("hard_drop"):
        state.board.clear()
        state.level = state.start_level
        state.line_count = 0
        state.points = 0
        state.pending = LineClear.empty()
        spawn(state)
        _enter(state, Phase.PLAY)


def _update_play(state: GameState, inputs: InputState) -> None:
    assert state.piece is not None

    # Translation and rotation form one candidate that is accepted or
    # rejected as a whole.
    candidate = state.piece
    if inputs.just_pressed("left"):
        candidate = candidate.moved(d_col=-1)
    if inputs.just_pressed("right"):
        candidate = candidate.moved(d_col=1)
    if inputs.just_pressed("rotate"):
        candidate = candidate.rotated()
    if is_valid(candidate, state.board):
        state.piece = candidate

    if inputs.just_pressed("soft_drop"):
        soft_drop(state)

    if inputs.just_pressed("hard_drop"):
        hard_drop(state)

    while state.time >= state.next_drop_time:
        soft_drop(state)

    found = state.board.find_full_rows()
    if found.count > 0:
        state.pending = found
        state.highlight_end_time = state.time + state.config.line_highlight_seconds
        _enter(state, Phase.LINE)
    elif not state.board.row_is_empty(GAME_OVER_ROW):
        state.piece = None
        _enter(state, Phase.GAMEOVER)
        LOGGER.info("Game over: level=%d lines=%d points=%d", state.level, state.line_count, state.points)


def _update_line(state: GameState) -> None:
    if state.time < state.highlight_end_time:
        return

    cleared = state.pending.count
    state.board.collapse_rows(state.pending)
    state.line_count += cleared
    state.points += points(state.level, cleared)

    if state.line_count >= lines_for_next_level(state.start_level, state.level):
        state.level += 1
        LOGGER.debug("Level up to %d after %d lines", state.level, state.line_count)

    state.pending = LineClear.empty()
    _enter(state, Phase.PLAY)


def _update_gameover(state: GameState, inputs: InputState) -> None:
    if inputs.just_pressed("hard_drop"):
        _enter(state, Phase.START)


def advance(state: GameState, inputs: InputState, time: float) -> GameState:
    """Advance ``state`` by one frame at clock value ``time``.

    Nothing but the clock changes while the game is paused.  Returns ``state``
    for convenience.
    """

    state.time = time
    if state.paused:
        return state

    if state.phase is Phase.START:
        _update_start(state, inputs)
    elif state.phase is Phase.PLAY:
        _update_play(state, inputs)
    elif state.phase is Phase.LINE:
        _update_line(state)
    elif state.phase is Phase.GAMEOVER:
        _update_gameover(state, inputs)
    return state
