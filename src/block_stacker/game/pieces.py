from __future__ import annotations

import random
from dataclasses import dataclass, field, replace
from enum import IntEnum
from typing import Dict, List, Optional, Tuple

import numpy as np

from .constants import SPAWN_X, SPAWN_Y
from .position import Position


class PieceType(IntEnum):
    # 0 is reserved for empty grid cells
    I = 1
    L = 2
    L_INVERTED = 3
    R = 4
    R_INVERTED = 5
    O = 6
    T = 7


class Direction(IntEnum):
    EAST = 0
    SOUTH = 1
    WEST = 2
    NORTH = 3


# Offsets in the default (East) facing, (x, y) with y growing downwards
BASE_OFFSETS: Dict[PieceType, np.ndarray] = {
    PieceType.I: np.array([[-1, 0], [0, 0], [1, 0], [2, 0]], dtype=float),
    PieceType.O: np.array([[0, 0], [0, -1], [1, 0], [1, -1]], dtype=float),
    PieceType.L: np.array([[-1, 0], [0, 0], [1, 0], [1, -1]], dtype=float),
    PieceType.L_INVERTED: np.array([[-1, 0], [0, 0], [1, 0], [1, 1]], dtype=float),
    PieceType.R: np.array([[1, 0], [0, 0], [0, -1], [-1, -1]], dtype=float),
    PieceType.R_INVERTED: np.array([[-1, 0], [0, 0], [0, -1], [1, -1]], dtype=float),
    PieceType.T: np.array([[-1, 0], [0, 0], [1, 0], [0, -1]], dtype=float),
}


def _rotation(angle_quarters: int) -> np.ndarray:
    """Exact 2D rotation matrix for a multiple of -90 degrees."""
    cos, sin = [(1, 0), (0, -1), (-1, 0), (0, 1)][angle_quarters % 4]
    return np.array([[cos, -sin], [sin, cos]], dtype=float)


# East 0, South -90, West -180, North -270 degrees
ROTATIONS: Dict[Direction, np.ndarray] = {d: _rotation(int(d)) for d in Direction}

_CW = {
    Direction.EAST: Direction.SOUTH,
    Direction.SOUTH: Direction.WEST,
    Direction.WEST: Direction.NORTH,
    Direction.NORTH: Direction.EAST,
}
_CCW = {after: before for before, after in _CW.items()}


@dataclass(frozen=True)
class Block:
    piece_type: PieceType
    pos: Position


@dataclass
class Piece:
    piece_type: PieceType
    pos: Position
    facing: Direction = Direction.NORTH
    velocity: float = 0.0  # rows per second
    landed: bool = False
    offsets: np.ndarray = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.offsets = BASE_OFFSETS[self.piece_type]

    def rotate_cw(self) -> None:
        if self.piece_type != PieceType.O:
            self.facing = _CW[self.facing]

    def rotate_ccw(self) -> None:
        if self.piece_type != PieceType.O:
            self.facing = _CCW[self.facing]

    def get_blocks(self, pos: Optional[Position] = None) -> List[Block]:
        """World blocks this piece occupies when anchored at `pos` (defaults to its own anchor)."""
        anchor = self.pos if pos is None else pos
        world = np.array(anchor.xy) + self.offsets @ ROTATIONS[self.facing].T
        return [Block(self.piece_type, Position(float(x), float(y))) for x, y in world]

    def cells(self, pos: Optional[Position] = None) -> List[Tuple[int, int]]:
        return [tuple(b.pos.grid) for b in self.get_blocks(pos)]

    def copy(self) -> "Piece":
        return replace(self)


def spawn_position() -> Position:
    return Position(SPAWN_X, SPAWN_Y)


def create_random_piece(velocity: float, rng: Optional[random.Random] = None) -> Piece:
    rng = rng or random.Random()
    index = rng.randrange(len(PieceType))
    # PieceType raises ValueError for anything outside the seven shapes
    piece_type = PieceType(index + 1)
    return Piece(
        piece_type=piece_type,
        pos=spawn_position(),
        facing=Direction.NORTH,
        velocity=float(velocity),
        landed=False,
    )
