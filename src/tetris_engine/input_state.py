"""Per-frame input snapshot consumed by the engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

BUTTONS = ("left", "right", "rotate", "soft_drop", "hard_drop")


@dataclass(frozen=True)
class InputState:
    """Held state of every button plus its change since the previous frame.

    A ``d_*`` delta is ``1`` on the frame a button goes down, ``-1`` on the
    frame it is released and ``0`` otherwise.
    """

    left: bool = False
    right: bool = False
    rotate: bool = False
    soft_drop: bool = False
    hard_drop: bool = False

    d_left: int = 0
    d_right: int = 0
    d_rotate: int = 0
    d_soft_drop: int = 0
    d_hard_drop: int = 0

    @classmethod
    def from_held(
        cls, held: Mapping[str, bool], previous: Optional["InputState"] = None
    ) -> "InputState":
        """Build a snapshot from held buttons and the previous snapshot.

        Buttons missing from ``held`` count as released.
        """

        previous = previous or cls()
        values: dict[str, object] = {}
        for name in BUTTONS:
            now = bool(held.get(name, False))
            before = getattr(previous, name)
            values[name] = now
            values[f"d_{name}"] = int(now) - int(before)
        return cls(**values)  # type: ignore[arg-type]

    @classmethod
    def pressed(cls, *names: str) -> "InputState":
        """Return a snapshot where ``names`` went down this frame."""

        return cls.from_held({name: True for name in names})

    def just_pressed(self, name: str) -> bool:
        return getattr(self, f"d_{name}") > 0
