"""Simple pygame front-end for the engine.

This module is the host around :mod:`tetris_engine.game_state`: it polls the
keyboard into :class:`~tetris_engine.input_state.InputState` snapshots, feeds
the pygame clock into :func:`~tetris_engine.game_state.advance`, draws the
resulting snapshot and plays sounds for the cues derived from consecutive
snapshots.

Run with: ``python -m tetris_engine.run_pygame``
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
from pathlib import Path
from typing import Dict, Optional, Sequence

import pygame

from .board import HEIGHT, VISIBLE_HEIGHT, WIDTH
from .config import GameConfig
from .cues import Cue, transition_cues
from .game_state import GameSnapshot, GameState, Phase, advance, toggle_pause
from .input_state import InputState
from .tetromino import Piece, occupied_cells


LOGGER = logging.getLogger(__name__)

# Size of a single board cell in pixels
CELL_SIZE = 30
# Space above the board for the level/lines/points readout
MARGIN_Y = 60
# Frames per second to run the game loop at
FPS = 60

Color = tuple[int, int, int]

# Indexed by cell value; 0 is the empty background.
BASE_COLORS: Sequence[Color] = (
    (0x28, 0x28, 0x28),
    (0x2D, 0x99, 0x99),
    (0x99, 0x99, 0x2D),
    (0x99, 0x2D, 0x99),
    (0x2D, 0x99, 0x51),
    (0x99, 0x2D, 0x2D),
    (0x2D, 0x63, 0x99),
    (0x99, 0x63, 0x2D),
)
LIGHT_COLORS: Sequence[Color] = (
    (0x28, 0x28, 0x28),
    (0x44, 0xE5, 0xE5),
    (0xE5, 0xE5, 0x44),
    (0xE5, 0x44, 0xE5),
    (0x44, 0xE5, 0x7A),
    (0xE5, 0x44, 0x44),
    (0x44, 0x95, 0xE5),
    (0xE5, 0x95, 0x44),
)
DARK_COLORS: Sequence[Color] = (
    (0x28, 0x28, 0x28),
    (0x1E, 0x66, 0x66),
    (0x66, 0x66, 0x1E),
    (0x66, 0x1E, 0x66),
    (0x1E, 0x66, 0x36),
    (0x66, 0x1E, 0x1E),
    (0x1E, 0x42, 0x66),
    (0x66, 0x42, 0x1E),
)
HIGHLIGHT = (0xFF, 0xFF, 0xFF)

KEY_BINDINGS: Dict[str, int] = {
    "left": pygame.K_LEFT,
    "right": pygame.K_RIGHT,
    "rotate": pygame.K_UP,
    "soft_drop": pygame.K_DOWN,
    "hard_drop": pygame.K_SPACE,
}

SOUND_FILES = {
    Cue.THEME: "theme.mp3",
    Cue.LINE_CLEAR: "clear.wav",
    Cue.GAME_OVER: "gameover.mp3",
}


def read_input(previous: Optional[InputState]) -> InputState:
    """Poll the keyboard and build this frame's input snapshot."""

    pressed = pygame.key.get_pressed()
    held = {name: bool(pressed[key]) for name, key in KEY_BINDINGS.items()}
    return InputState.from_held(held, previous)


def draw_cell(
    screen: pygame.Surface, row: int, col: int, value: int, outline: bool = False
) -> None:
    """Render one bevelled cell, or only its outline for the ghost piece."""

    x = col * CELL_SIZE
    y = row * CELL_SIZE + MARGIN_Y
    if outline:
        pygame.draw.rect(screen, BASE_COLORS[value], pygame.Rect(x, y, CELL_SIZE, CELL_SIZE), 1)
        return

    edge = CELL_SIZE // 8
    pygame.draw.rect(screen, DARK_COLORS[value], pygame.Rect(x, y, CELL_SIZE, CELL_SIZE))
    pygame.draw.rect(
        screen, LIGHT_COLORS[value], pygame.Rect(x + edge, y, CELL_SIZE - edge, CELL_SIZE - edge)
    )
    pygame.draw.rect(
        screen,
        BASE_COLORS[value],
        pygame.Rect(x + edge, y + edge, CELL_SIZE - edge * 2, CELL_SIZE - edge * 2),
    )


def draw_piece(screen: pygame.Surface, piece: Piece, outline: bool = False) -> None:
    value = int(piece.kind)
    for row, col in occupied_cells(piece.kind, piece.rotation):
        draw_cell(screen, piece.row + row, piece.col + col, value, outline)


def draw_text(
    screen: pygame.Surface, font: pygame.font.Font, text: str, x: int, y: int, center: bool = False
) -> None:
    surface = font.render(text, True, HIGHLIGHT)
    if center:
        x -= surface.get_width() // 2
    screen.blit(surface, (x, y))


def draw_snapshot(screen: pygame.Surface, font: pygame.font.Font, snap: GameSnapshot) -> None:
    """Render the board, active piece and overlays for ``snap``."""

    screen.fill((0, 0, 0))
    board_rect = pygame.Rect(0, MARGIN_Y, WIDTH * CELL_SIZE, HEIGHT * CELL_SIZE)
    pygame.draw.rect(screen, BASE_COLORS[0], board_rect)
    for r, row in enumerate(snap.board):
        for c, value in enumerate(row):
            if value:
                draw_cell(screen, r, c, value)

    center_x = WIDTH * CELL_SIZE // 2
    center_y = (HEIGHT * CELL_SIZE + MARGIN_Y) // 2

    if snap.piece is not None:
        draw_piece(screen, snap.piece)
    if snap.ghost is not None:
        draw_piece(screen, snap.ghost, outline=True)

    if snap.lines is not None:
        for row in snap.lines.indices():
            rect = pygame.Rect(0, row * CELL_SIZE + MARGIN_Y, WIDTH * CELL_SIZE, CELL_SIZE)
            pygame.draw.rect(screen, HIGHLIGHT, rect)
    elif snap.phase is Phase.GAMEOVER:
        draw_text(screen, font, "GAME OVER", center_x, center_y, center=True)
    elif snap.phase is Phase.START:
        draw_text(screen, font, "PRESS START", center_x, center_y, center=True)
        draw_text(
            screen, font, f"STARTING LEVEL: {snap.start_level}", center_x, center_y + 30, center=True
        )

    if snap.paused:
        draw_text(screen, font, "PAUSED", center_x, HEIGHT * CELL_SIZE // 2, center=True)

    # Hide the spawn rows above the visible playfield.
    hidden = pygame.Rect(0, MARGIN_Y, WIDTH * CELL_SIZE, (HEIGHT - VISIBLE_HEIGHT) * CELL_SIZE)
    pygame.draw.rect(screen, (0, 0, 0), hidden)

    draw_text(screen, font, f"LEVEL: {snap.level}", 6, 6)
    draw_text(screen, font, f"LINES: {snap.line_count}", 6, 35)
    draw_text(screen, font, f"POINTS: {snap.points}", 6, 65)


class SoundBank:
    """Sound effects keyed by cue, silently empty when audio is unavailable."""

    def __init__(self, sound_dir: Optional[Path]) -> None:
        self._sounds: Dict[Cue, pygame.mixer.Sound] = {}
        if sound_dir is None:
            return
        try:
            pygame.mixer.init(44100, -16, 2, 2048)
        except pygame.error as exc:
            LOGGER.warning("Audio unavailable: %s", exc)
            return
        for cue, filename in SOUND_FILES.items():
            path = sound_dir / filename
            try:
                self._sounds[cue] = pygame.mixer.Sound(str(path))
            except (pygame.error, FileNotFoundError) as exc:
                LOGGER.warning("Failed to load sound %s: %s", path, exc)

    @property
    def enabled(self) -> bool:
        return bool(self._sounds)

    def play(self, cue: Cue) -> None:
        if not self.enabled:
            return
        if cue is Cue.PAUSE:
            pygame.mixer.pause()
        elif cue is Cue.RESUME:
            pygame.mixer.unpause()
        elif cue is Cue.THEME:
            pygame.mixer.stop()
            self._play(cue, loops=-1)
        elif cue is Cue.GAME_OVER:
            pygame.mixer.stop()
            self._play(cue)
        else:
            self._play(cue)

    def _play(self, cue: Cue, loops: int = 0) -> None:
        sound = self._sounds.get(cue)
        if sound is not None:
            sound.play(loops=loops)


class GameRunner:
    """Own the window, the game state and the frame loop."""

    def __init__(self, config: Optional[GameConfig] = None, *, start_level: int = 0,
                 sound_dir: Optional[Path] = None) -> None:
        self.state = GameState(config=config or GameConfig(), start_level=start_level)
        self._sound_dir = sound_dir
        self._running = False
        self._input: Optional[InputState] = None
        self._snapshot: Optional[GameSnapshot] = None

    @property
    def running(self) -> bool:
        return self._running

    def stop(self) -> None:
        self._running = False

    def step(self, time: float) -> list[Cue]:
        """Advance one frame with the current keyboard state."""

        self._input = read_input(self._input)
        advance(self.state, self._input, time)
        snap = self.state.snapshot()
        cues = transition_cues(self._snapshot, snap)
        self._snapshot = snap
        return cues

    def _handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self._running = False
                elif event.key == pygame.K_p:
                    toggle_pause(self.state)
                    LOGGER.info("Paused" if self.state.paused else "Resumed")

    async def run(self) -> None:
        # Ensure SDL binds to the page canvas when running on the web.
        os.environ.setdefault("SDL_HINT_EMSCRIPTEN_CANVAS_ELEMENT_ID", "#canvas")
        os.environ.setdefault("SDL_HINT_EMSCRIPTEN_KEYBOARD_ELEMENT", "#canvas")
        pygame.init()
        screen = pygame.display.set_mode((WIDTH * CELL_SIZE, HEIGHT * CELL_SIZE + MARGIN_Y))
        pygame.display.set_caption("Tetris")
        font = pygame.font.Font(None, 32)
        clock = pygame.time.Clock()
        sounds = SoundBank(self._sound_dir)

        self._running = True
        LOGGER.info("Game started")
        while self._running:
            clock.tick(FPS)
            self._handle_events()
            for cue in self.step(pygame.time.get_ticks() / 1000.0):
                sounds.play(cue)
            draw_snapshot(screen, font, self._snapshot)
            pygame.display.flip()
            # Yield to the host event loop to keep the page responsive.
            await asyncio.sleep(0)

        pygame.quit()
        LOGGER.info("Game stopped")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play the falling-block puzzle with pygame.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the piece generator.")
    parser.add_argument("--start-level", type=int, default=0, help="Initial start level.")
    parser.add_argument(
        "--sound-dir",
        type=Path,
        default=None,
        help="Directory holding theme.mp3, clear.wav and gameover.mp3.",
    )
    parser.add_argument("--log-level", default="INFO", help="Logging level name.")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO), format="%(message)s")
    runner = GameRunner(
        GameConfig(random_seed=args.seed),
        start_level=max(0, args.start_level),
        sound_dir=args.sound_dir,
    )
    asyncio.run(runner.run())


if __name__ == "__main__":  # pragma: no cover - manual execution only
    main()
