"""Tunable engine settings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .rules import SECONDS_PER_FRAME


@dataclass(frozen=True)
class GameConfig:
    seconds_per_frame: float = SECONDS_PER_FRAME
    # How long full rows stay highlighted before they are removed.
    line_highlight_seconds: float = 0.5
    random_seed: Optional[int] = None
