from __future__ import annotations

import math
from typing import NamedTuple, Tuple


class GridPosition(NamedTuple):
    x: int  # column
    y: int  # row


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero (builtin round() uses banker's rounding)."""
    if value >= 0:
        return int(math.floor(value + 0.5))
    return -int(math.floor(-value + 0.5))


def to_grid_position(x: float, y: float) -> GridPosition:
    return GridPosition(round_half_away(x), round_half_away(y))


class Position:
    """Continuous board coordinate with its cached grid cell.

    Two positions compare equal when they fall in the same grid cell, whatever
    their continuous coordinates are.
    """

    __slots__ = ("x", "y", "grid")

    def __init__(self, x: float, y: float) -> None:
        self.x = float(x)
        self.y = float(y)
        self.grid = to_grid_position(self.x, self.y)

    @classmethod
    def from_grid_position(cls, gp: GridPosition | Tuple[int, int]) -> "Position":
        return cls(float(gp[0]), float(gp[1]))

    @property
    def xy(self) -> Tuple[float, float]:
        return self.x, self.y

    def move_left(self) -> "Position":
        return Position(self.x - 1.0, self.y)

    def move_right(self) -> "Position":
        return Position(self.x + 1.0, self.y)

    def move_down(self) -> "Position":
        # Floors so that a fractional fall snaps the probe onto the next whole row
        return Position(self.x, math.floor(self.y + 1.0))

    def screen_coords(self, block_size: float, x_offset: float, y_offset: float) -> Tuple[float, float]:
        return (
            block_size * self.grid.x + x_offset,
            block_size * self.grid.y + y_offset,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self.grid == other.grid

    def __hash__(self) -> int:
        return hash(self.grid)

    def __repr__(self) -> str:
        return f"Position(x={self.x:.3f}, y={self.y:.3f}, grid=({self.grid.x}, {self.grid.y}))"
