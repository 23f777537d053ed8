from __future__ import annotations

import logging
import random
import time
from collections import deque
from dataclasses import dataclass
from typing import Callable, Deque, Iterator, Optional, Tuple

from .constants import BASE_SPEED, INPUT_DELAY_MS, MOVEMENT_DELAY_MS, SPEED_PER_LEVEL
from .grid import GameGrid
from .pieces import Block, Direction, Piece, create_random_piece, spawn_position
from .position import Position
from .rules import ScoringRules

logger = logging.getLogger(__name__)


@dataclass
class GameConfig:
    random_seed: Optional[int] = None
    base_speed: float = BASE_SPEED
    speed_per_level: float = SPEED_PER_LEVEL
    movement_delay_ms: int = MOVEMENT_DELAY_MS
    input_delay_ms: int = INPUT_DELAY_MS
    lookahead: int = 3

    @property
    def movement_delay(self) -> float:
        return self.movement_delay_ms / 1000.0

    @property
    def input_delay(self) -> float:
        return self.input_delay_ms / 1000.0


@dataclass
class InputState:
    left: bool = False
    right: bool = False
    down: bool = False
    up: bool = False
    rotate_cw: bool = False
    rotate_ccw: bool = False
    hold: bool = False

    def moved(self) -> bool:
        return self.left or self.right or self.down

    def acted(self) -> bool:
        return self.up or self.rotate_cw or self.rotate_ccw


class TetrisGame:
    """Falling-block simulation advanced one fixed step at a time.

    The timers that rate-limit held inputs compare readings of `clock`
    (seconds, monotonic); tests pass a fake clock to control them.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rules: Optional[ScoringRules] = None,
        rng: Optional[random.Random] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.config = config or GameConfig()
        self.rules = rules or ScoringRules(
            base_speed=self.config.base_speed, speed_per_level=self.config.speed_per_level
        )
        self.rng = rng or random.Random(self.config.random_seed)
        self.clock = clock
        self.grid = GameGrid()
        self.input = InputState()
        self.falling: Optional[Piece] = None
        self.projection: Optional[Piece] = None
        self.held: Optional[Piece] = None
        self.next_pieces: Deque[Piece] = deque(
            create_random_piece(self.config.base_speed, self.rng) for _ in range(self.config.lookahead)
        )
        self.last_action = self.clock()
        self.score = 0
        self.level = 1
        self.lines_cleared = 0

    def update(self, dt: float) -> None:
        self.swap_hold()
        self.create_new_piece()
        self.update_piece_position(dt)
        self.clear_full_rows()
        self.update_projection()

    def swap_hold(self) -> None:
        if not self.input.hold:
            return
        self.input.hold = False
        falling, self.falling = self.falling, self.held
        if falling is not None:
            falling.pos = spawn_position()
            falling.facing = Direction.NORTH
            falling.landed = False
        self.held = falling
        self.projection = None
        logger.debug("Hold swap: holding %s", falling.piece_type.name if falling else None)

    def create_new_piece(self) -> None:
        if self.falling is not None:
            return
        self.falling = self.next_pieces.popleft()
        self.next_pieces.append(create_random_piece(self.rules.speed_for_level(self.level), self.rng))
        logger.debug("Spawned %s", self.falling.piece_type.name)

    def is_valid_position(self, piece: Piece, pos: Position) -> bool:
        return self.grid.is_valid_position(piece, pos)

    def update_piece_position(self, dt: float) -> None:
        p = self.falling
        if p is None:
            return

        new_pos = Position(p.pos.x, p.pos.y + p.velocity * dt)

        if self.clock() - self.last_action >= self.config.movement_delay:
            if self.input.left:
                left = new_pos.move_left()
                if self.is_valid_position(p, left):
                    new_pos = left
            if self.input.right:
                right = new_pos.move_right()
                if self.is_valid_position(p, right):
                    new_pos = right
            if self.input.down:
                down = new_pos.move_down()
                if self.is_valid_position(p, down):
                    new_pos = down
            if self.input.moved():
                self.last_action = self.clock()

        if self.clock() - self.last_action >= self.config.input_delay:
            if self.input.rotate_cw:
                p.rotate_cw()
                if not self.is_valid_position(p, new_pos):
                    p.rotate_ccw()
            if self.input.rotate_ccw:
                p.rotate_ccw()
                if not self.is_valid_position(p, new_pos):
                    p.rotate_cw()
            if self.input.up:
                down = new_pos.move_down()
                count = 0
                while self.is_valid_position(p, down):
                    count += 1
                    new_pos = down
                    down = new_pos.move_down()
                p.landed = True
                self.score += count
            if self.input.acted():
                self.last_action = self.clock()

        if p.pos.grid.y != new_pos.grid.y and not self.is_valid_position(p, new_pos):
            # Landed on the floor or on another block
            new_pos = Position(new_pos.x, float(p.pos.grid.y))
            p.landed = True
        p.pos = new_pos

        if p.landed:
            self.grid.lock(p)
            self.falling = None
            self.projection = None

    def clear_full_rows(self) -> int:
        cleared = self.grid.clear_full_rows()
        if cleared > 0:
            previous_level = self.level
            self.lines_cleared += cleared
            self.level = self.rules.level_for_lines(self.lines_cleared)
            self.score += self.rules.score_for_lines(cleared, self.level)
            logger.info("Cleared %d row(s); score=%d lines=%d", cleared, self.score, self.lines_cleared)
            if self.level != previous_level:
                logger.info("Level up: %d", self.level)
        return cleared

    def compute_projection_position(self, piece: Piece) -> Position:
        down = piece.pos
        new_pos = down
        while self.is_valid_position(piece, down):
            new_pos = down
            down = down.move_down()
        return new_pos

    def update_projection(self) -> None:
        if self.falling is None:
            return
        proj = self.falling.copy()
        proj.pos = self.compute_projection_position(proj)
        self.projection = proj

    def should_end(self) -> bool:
        if self.grid.any_in_top_rows(2):
            logger.info("No more space at the top of the board")
            return True
        if self.falling is not None and not self.is_valid_position(self.falling, self.falling.pos):
            logger.info("Spawned %s collides with the stack", self.falling.piece_type.name)
            return True
        return False

    def visible_blocks(self) -> Iterator[Tuple[Block, bool]]:
        """Blocks to draw as (block, is_ghost): drop preview, falling piece, then the locked grid."""
        if self.projection is not None:
            for block in self.projection.get_blocks():
                yield block, True
        if self.falling is not None:
            for block in self.falling.get_blocks():
                yield block, False
        for block in self.grid.blocks():
            yield block, False
