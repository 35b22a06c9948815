from __future__ import annotations

from dataclasses import replace

from tetris_engine.board import LineClear
from tetris_engine.cues import Cue, transition_cues
from tetris_engine.game_state import GameSnapshot, Phase


def _snap(phase: Phase, paused: bool = False) -> GameSnapshot:
    return GameSnapshot(
        board=(),
        phase=phase,
        paused=paused,
        start_level=0,
        level=0,
        line_count=0,
        points=0,
        lines=LineClear.empty() if phase is Phase.LINE else None,
    )


def test_first_frame_has_no_cues() -> None:
    assert transition_cues(None, _snap(Phase.START)) == []


def test_phase_transitions() -> None:
    assert transition_cues(_snap(Phase.START), _snap(Phase.PLAY)) == [Cue.THEME]
    assert transition_cues(_snap(Phase.PLAY), _snap(Phase.LINE)) == [Cue.LINE_CLEAR]
    assert transition_cues(_snap(Phase.PLAY), _snap(Phase.GAMEOVER)) == [Cue.GAME_OVER]
    assert transition_cues(_snap(Phase.LINE), _snap(Phase.PLAY)) == []
    assert transition_cues(_snap(Phase.GAMEOVER), _snap(Phase.START)) == []
    assert transition_cues(_snap(Phase.PLAY), _snap(Phase.PLAY)) == []


def test_pause_and_resume() -> None:
    playing = _snap(Phase.PLAY)
    paused = replace(playing, paused=True)
    assert transition_cues(playing, paused) == [Cue.PAUSE]
    assert transition_cues(paused, playing) == [Cue.RESUME]
    # Nothing is playing on the title screen, so there is nothing to resume.
    assert transition_cues(_snap(Phase.START, paused=True), _snap(Phase.START)) == []
