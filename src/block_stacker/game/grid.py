from __future__ import annotations

import logging
from typing import Iterator, Optional

import numpy as np

from .constants import COLUMNS, ROWS
from .pieces import Block, Piece, PieceType
from .position import GridPosition, Position

logger = logging.getLogger(__name__)


class GameGrid:
    """Fixed board of locked blocks.

    Cells are stored row-major in an int8 array: 0 is empty, any other value is
    the PieceType of the block that was locked there. Rows above the board
    (negative indices) are legal for falling pieces but never stored.
    """

    def __init__(self, rows: int = ROWS, columns: int = COLUMNS) -> None:
        self.rows = int(rows)
        self.columns = int(columns)
        self.cells = np.zeros((self.rows, self.columns), dtype=np.int8)

    def is_inside(self, gp: GridPosition) -> bool:
        return 0 <= gp.x < self.columns and 0 <= gp.y < self.rows

    def is_occupied(self, column: int, row: int) -> bool:
        return bool(self.cells[row, column] != 0)

    def is_valid_position(self, piece: Piece, pos: Position) -> bool:
        for block in piece.get_blocks(pos):
            gp = block.pos.grid
            # Only the bottom edge is checked vertically; blocks may sit above row 0
            if gp.y >= self.rows:
                return False
            if gp.x < 0 or gp.x >= self.columns:
                return False
            if self.is_inside(gp) and self.cells[gp.y, gp.x] != 0:
                return False
        return True

    def lock(self, piece: Piece) -> int:
        """Copy the piece's blocks into the grid. Returns the number of cells written."""
        written = 0
        for block in piece.get_blocks():
            gp = block.pos.grid
            if self.is_inside(gp):
                self.cells[gp.y, gp.x] = int(block.piece_type)
                written += 1
        logger.debug("Locked %s at %s (%d cells)", piece.piece_type.name, piece.pos, written)
        return written

    def clear_full_rows(self) -> int:
        """Remove every full row, shifting the rows above it down by one."""
        cleared = 0
        for row in range(self.rows):
            if np.all(self.cells[row] != 0):
                self.cells[1 : row + 1] = self.cells[0:row].copy()
                self.cells[0] = 0
                cleared += 1
        return cleared

    def block_at(self, column: int, row: int) -> Optional[Block]:
        value = int(self.cells[row, column])
        if value == 0:
            return None
        return Block(PieceType(value), Position(float(column), float(row)))

    def blocks(self) -> Iterator[Block]:
        for row, column in zip(*np.nonzero(self.cells)):
            yield Block(PieceType(int(self.cells[row, column])), Position(float(column), float(row)))

    def any_in_top_rows(self, count: int = 2) -> bool:
        return bool(np.any(self.cells[:count] != 0))

    def clone_state(self) -> np.ndarray:
        return self.cells.copy()

    def render_text(self) -> str:
        return "\n".join("".join("█" if cell else "·" for cell in row) for row in self.cells)

    def __str__(self) -> str:
        return self.render_text()
