"""Deterministic game-logic engine for a falling-block puzzle."""

from .board import Board, LineClear, HEIGHT, VISIBLE_HEIGHT, WIDTH
from .config import GameConfig
from .cues import Cue, transition_cues
from .game_state import (
    DropResult,
    GameSnapshot,
    GameState,
    Phase,
    advance,
    hard_drop,
    soft_drop,
    spawn,
    toggle_pause,
)
from .input_state import InputState
from .rules import drop_interval, lines_for_next_level, points
from .tetromino import CATALOG, Piece, Tetromino, TetrominoKind, sample, tetromino
from .utils import ghost_piece, is_valid, merge_piece, render_grid

__all__ = [
    "Board",
    "LineClear",
    "WIDTH",
    "HEIGHT",
    "VISIBLE_HEIGHT",
    "GameConfig",
    "Cue",
    "transition_cues",
    "DropResult",
    "GameSnapshot",
    "GameState",
    "Phase",
    "advance",
    "hard_drop",
    "soft_drop",
    "spawn",
    "toggle_pause",
    "InputState",
    "drop_interval",
    "lines_for_next_level",
    "points",
    "CATALOG",
    "Piece",
    "Tetromino",
    "TetrominoKind",
    "sample",
    "tetromino",
    "ghost_piece",
    "is_valid",
    "merge_piece",
    "render_grid",
]
