from __future__ import annotations

import pygame

from tetris_engine import run_pygame
from tetris_engine.cues import Cue
from tetris_engine.game_state import Phase


class FakeKeys:
    def __init__(self, *down: int) -> None:
        self._down = set(down)

    def __getitem__(self, key: int) -> bool:
        return key in self._down


def test_step_starts_game_and_reports_theme_cue(monkeypatch):
    runner = run_pygame.GameRunner(start_level=2)
    monkeypatch.setattr(pygame.key, "get_pressed", lambda: FakeKeys())
    assert runner.step(0.0) == []

    monkeypatch.setattr(pygame.key, "get_pressed", lambda: FakeKeys(pygame.K_SPACE))
    cues = runner.step(0.016)
    assert cues == [Cue.THEME]
    assert runner.state.phase is Phase.PLAY
    assert runner.state.level == 2

    # Holding the key does not hard drop the new piece.
    piece = runner.state.piece
    runner.step(0.032)
    assert runner.state.piece == piece


def test_read_input_tracks_edges(monkeypatch):
    monkeypatch.setattr(pygame.key, "get_pressed", lambda: FakeKeys(pygame.K_LEFT))
    first = run_pygame.read_input(None)
    second = run_pygame.read_input(first)
    assert first.d_left == 1
    assert second.left and second.d_left == 0


def test_sound_bank_without_directory_is_silent():
    bank = run_pygame.SoundBank(None)
    assert not bank.enabled
    bank.play(Cue.THEME)


def test_parse_args_defaults():
    args = run_pygame.parse_args([])
    assert args.seed is None
    assert args.start_level == 0
    assert args.sound_dir is None
