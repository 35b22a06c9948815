"""Derive audio cues by comparing consecutive game snapshots.

The engine raises no events.  Hosts keep the previous
:class:`~tetris_engine.game_state.GameSnapshot` around and call
:func:`transition_cues` after every frame to learn which sounds to start,
stop, pause or resume.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from .game_state import GameSnapshot, Phase


class Cue(str, Enum):
    # Stop everything and loop the theme.
    THEME = "theme"
    LINE_CLEAR = "line_clear"
    # Stop everything and play the game-over jingle once.
    GAME_OVER = "game_over"
    PAUSE = "pause"
    RESUME = "resume"


def transition_cues(previous: Optional[GameSnapshot], current: GameSnapshot) -> List[Cue]:
    """Return the cues triggered by going from ``previous`` to ``current``.

    ``previous`` is ``None`` on the very first frame.
    """

    cues: List[Cue] = []
    if previous is None:
        return cues

    if current.paused != previous.paused:
        if current.paused:
            cues.append(Cue.PAUSE)
        elif current.phase in (Phase.PLAY, Phase.LINE):
            cues.append(Cue.RESUME)

    if current.phase is previous.phase:
        return cues

    if previous.phase is Phase.START and current.phase is Phase.PLAY:
        cues.append(Cue.THEME)
    elif current.phase is Phase.LINE:
        cues.append(Cue.LINE_CLEAR)
    elif current.phase is Phase.GAMEOVER:
        cues.append(Cue.GAME_OVER)
    return cues
