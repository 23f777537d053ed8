from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Tuple

from block_stacker.game.constants import ASPECT_RATIO, COLUMNS, DESIRED_FPS, ROWS


@dataclass(frozen=True)
class ScreenParams:
    block_size: float
    x_offset: float
    y_offset: float
    x_extent: float
    y_extent: float


def compute_screen_params(window_size: Tuple[float, float]) -> ScreenParams:
    """Fit the board into a 4:3 area centred in the window."""
    width, height = window_size
    y_extent = min(width / ASPECT_RATIO, height)
    y_offset = 0.5 * (height - y_extent)
    block_size = float(math.trunc(y_extent / ROWS))
    if block_size > 0:
        y_extent = y_extent - (y_extent % block_size)
    x_extent = block_size * COLUMNS
    x_offset = 0.5 * (width - x_extent)
    return ScreenParams(
        block_size=block_size,
        x_offset=float(math.trunc(x_offset)),
        y_offset=float(math.trunc(y_offset)),
        x_extent=x_extent,
        y_extent=y_extent,
    )


@dataclass
class EngineContext:
    """State shared by every scene: frame timing and screen layout.

    Owned by the scene manager, which writes `dt` and `fps` before each tick and
    hands the context to scenes explicitly; scenes only read it.
    """

    window_size: Tuple[float, float] = (640.0, 480.0)
    dt: float = 1.0 / DESIRED_FPS
    fps: float = 0.0
    screen_params: ScreenParams = field(init=False)

    def __post_init__(self) -> None:
        self.screen_params = compute_screen_params(self.window_size)

    def resize(self, width: float, height: float) -> None:
        self.window_size = (float(width), float(height))
        self.screen_params = compute_screen_params(self.window_size)
