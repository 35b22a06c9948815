"""Headless ASCII demo for the engine.

Run with: `python -m tetris_engine`

Starts a game, hard drops a piece every few frames on a simulated 60 Hz clock
and prints the visible board together with the active piece, useful as a
minimal smoke test that the engine runs without any window.
"""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional, Sequence

from . import GameConfig, GameState, InputState, Phase, advance, render_grid
from .board import HEIGHT, VISIBLE_HEIGHT
from .rules import SECONDS_PER_FRAME


def format_grid(grid: List[List[int]]) -> str:
    """Return the visible rows of ``grid`` as text."""

    visible = grid[HEIGHT - VISIBLE_HEIGHT:]
    return "\n".join("".join("#" if cell else "." for cell in row) for row in visible)


def simulate(frames: int, *, seed: Optional[int] = None, drop_every: int = 15) -> GameState:
    """Play ``frames`` frames, hard dropping every ``drop_every`` frames."""

    state = GameState(config=GameConfig(random_seed=seed))
    previous = InputState()
    for frame in range(frames):
        press = frame % drop_every == 0 and state.phase in (Phase.START, Phase.PLAY)
        inputs = InputState.from_held({"hard_drop": press}, previous)
        advance(state, inputs, frame * SECONDS_PER_FRAME)
        previous = inputs
        if state.phase is Phase.GAMEOVER:
            break
    return state


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--frames", type=int, default=600, help="Number of frames to simulate.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the piece generator.")
    parser.add_argument("--log-level", default="WARNING", help="Logging level name.")
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING), format="%(message)s")

    state = simulate(args.frames, seed=args.seed)
    print(format_grid(render_grid(state.board, state.piece)))
    print(f"phase={state.phase.value} level={state.level} lines={state.line_count} points={state.points}")


if __name__ == "__main__":
    main()
