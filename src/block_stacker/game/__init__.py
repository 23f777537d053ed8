"""Game module for Block Stacker.

Exports the falling-block simulation and supporting classes:
- Position / GridPosition: continuous and discrete board coordinates
- Piece, PieceType, Direction, Block: tetromino shapes and rotation
- GameGrid: locked blocks, collision testing and row clearing
- ScoringRules: classic line scores, levels and fall speed
- TetrisGame: per-tick simulation (spawning, movement, locking, scoring)
"""

from .position import GridPosition, Position
from .pieces import Block, Direction, Piece, PieceType, create_random_piece
from .grid import GameGrid
from .rules import ScoringRules
from .core import GameConfig, InputState, TetrisGame

__all__ = [
    "GridPosition",
    "Position",
    "Block",
    "Direction",
    "Piece",
    "PieceType",
    "create_random_piece",
    "GameGrid",
    "ScoringRules",
    "GameConfig",
    "InputState",
    "TetrisGame",
]
