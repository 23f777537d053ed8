from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional


class Action(IntEnum):
    LEFT = 0
    RIGHT = 1
    DOWN = 2  # soft drop
    UP = 3  # hard drop
    ROTATE_CW = 4
    ROTATE_CCW = 5
    HOLD = 6
    PAUSE = 7
    QUIT = 8


class Axis(IntEnum):
    HORIZONTAL = 0
    VERTICAL = 1


class EventKind(Enum):
    BUTTON_DOWN = "button_down"
    BUTTON_UP = "button_up"
    AXIS = "axis"


@dataclass(frozen=True)
class InputEvent:
    """Raw input reported by the host, already mapped to a logical action or axis."""

    kind: EventKind
    action: Optional[Action] = None
    axis: Optional[Axis] = None
    value: float = 0.0

    @classmethod
    def down(cls, action: Optional[Action]) -> "InputEvent":
        return cls(EventKind.BUTTON_DOWN, action=action)

    @classmethod
    def up(cls, action: Optional[Action]) -> "InputEvent":
        return cls(EventKind.BUTTON_UP, action=action)

    @classmethod
    def axis_moved(cls, axis: Axis, value: float) -> "InputEvent":
        return cls(EventKind.AXIS, axis=axis, value=float(value))
