from __future__ import annotations

from typing import Dict, Tuple

import pygame

from block_stacker.game import Block, PieceType
from block_stacker.scenes import ScreenParams


def _color_for_type(piece_type: PieceType) -> Tuple[int, int, int]:
    palette = {
        PieceType.I: (240, 120, 200),  # pink
        PieceType.O: (160, 0, 240),  # purple
        PieceType.L: (0, 200, 80),  # green
        PieceType.L_INVERTED: (240, 160, 0),  # orange
        PieceType.R: (240, 0, 0),  # red
        PieceType.R_INVERTED: (240, 240, 0),  # yellow
        PieceType.T: (0, 80, 240),  # blue
    }
    return palette.get(piece_type, (200, 200, 200))


class Renderer:
    """Draws scenes onto a pygame surface.

    Blocks are plain filled squares; the drop preview is drawn with a low alpha.
    """

    def __init__(self, screen: pygame.Surface, ghost_alpha: float = 0.3) -> None:
        self.screen = screen
        self.ghost_alpha = int(255 * ghost_alpha)
        self._fonts: Dict[int, pygame.font.Font] = {}

    def _font(self, size: int) -> pygame.font.Font:
        if size not in self._fonts:
            self._fonts[size] = pygame.font.SysFont(None, int(size * 1.6))
        return self._fonts[size]

    def clear(self) -> None:
        self.screen.fill((0, 0, 0))

    def present(self) -> None:
        pygame.display.flip()

    def draw_block(self, block: Block, params: ScreenParams, ghost: bool = False) -> None:
        x, y = block.pos.screen_coords(params.block_size, params.x_offset, params.y_offset)
        size = int(params.block_size)
        rect = pygame.Rect(int(x), int(y), size - 1, size - 1)
        color = _color_for_type(block.piece_type)
        if ghost:
            surf = pygame.Surface(rect.size, pygame.SRCALPHA)
            surf.fill((*color, self.ghost_alpha))
            self.screen.blit(surf, rect.topleft)
        else:
            pygame.draw.rect(self.screen, color, rect)

    def draw_border(self, params: ScreenParams) -> None:
        rect = pygame.Rect(int(params.x_offset), int(params.y_offset), int(params.x_extent), int(params.y_extent))
        pygame.draw.rect(self.screen, (255, 255, 255), rect, 2)

    def draw_text(self, text: str, pos: Tuple[float, float], size: int) -> None:
        img = self._font(size).render(text, True, (255, 255, 255))
        self.screen.blit(img, (int(pos[0]), int(pos[1])))

    def draw_centered_text(self, text: str, y_offset: float, size: int) -> None:
        img = self._font(size).render(text, True, (255, 255, 255))
        w, h = self.screen.get_size()
        rect = img.get_rect(center=(w // 2, int(h / 2 + y_offset)))
        self.screen.blit(img, rect)

    def draw_overlay(self, alpha: float) -> None:
        overlay = pygame.Surface(self.screen.get_size(), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, int(255 * alpha)))
        self.screen.blit(overlay, (0, 0))
