from __future__ import annotations

from tetris_engine.board import HEIGHT
from tetris_engine.config import GameConfig
from tetris_engine.game_state import GameState, Phase, advance
from tetris_engine.input_state import InputState
from tetris_engine.tetromino import Piece, TetrominoKind
from tetris_engine.utils import is_valid


def _stacked_state() -> GameState:
    state = GameState(config=GameConfig(random_seed=2))
    state.phase = Phase.PLAY
    state.next_drop_time = 100.0
    state.line_count = 7
    state.points = 280
    for row in range(2, HEIGHT):
        state.board.set_cell(row, 5, 3)
    state.piece = Piece(TetrominoKind.O, row=0, col=5)
    return state


def test_locking_into_top_row_ends_game() -> None:
    state = _stacked_state()
    advance(state, InputState.pressed("hard_drop"), 1.0)

    assert state.phase is Phase.GAMEOVER
    assert state.piece is None
    assert not state.board.row_is_empty(0)
    snap = state.snapshot()
    assert snap.piece is None
    assert snap.ghost is None


def test_game_over_ignores_everything_but_action() -> None:
    state = _stacked_state()
    advance(state, InputState.pressed("hard_drop"), 1.0)
    board_before = state.board.grid.copy()

    advance(state, InputState.pressed("left", "rotate", "soft_drop"), 2.0)
    assert state.phase is Phase.GAMEOVER

    advance(state, InputState.pressed("hard_drop"), 3.0)
    assert state.phase is Phase.START
    # The board is only reset once a new game starts.
    assert (state.board.grid == board_before).all()
    assert state.line_count == 7


def test_restart_after_game_over() -> None:
    state = _stacked_state()
    advance(state, InputState.pressed("hard_drop"), 1.0)
    advance(state, InputState.pressed("hard_drop"), 2.0)
    advance(state, InputState.pressed("hard_drop"), 3.0)

    assert state.phase is Phase.PLAY
    assert not state.board.grid.any()
    assert state.line_count == 0
    assert state.points == 0
    assert state.piece is not None


def test_blocked_spawn_stays_in_play() -> None:
    state = GameState(config=GameConfig(random_seed=2))
    state.phase = Phase.PLAY
    state.next_drop_time = 100.0
    # The flat bar only occupies template row 1, so a block in board row 1
    # overlaps it while row 0 stays empty.
    state.board.set_cell(1, 6, 3)
    piece = Piece(TetrominoKind.I, row=0, col=5)
    state.piece = piece

    advance(state, InputState(), 1.0)

    assert state.phase is Phase.PLAY
    assert state.piece == piece
    assert not is_valid(state.piece, state.board)
    assert state.board.row_is_empty(0)
