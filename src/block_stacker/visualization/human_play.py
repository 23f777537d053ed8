from __future__ import annotations

import argparse
import logging
from typing import Dict, List, Optional

import pygame

from block_stacker.game import GameConfig
from block_stacker.input import Action, Axis, InputEvent
from block_stacker.logging_config import setup_logging
from block_stacker.scenes import EngineContext, SceneManager

from .renderer import Renderer

logger = logging.getLogger(__name__)


KEY_TO_ACTION: Dict[int, Action] = {
    pygame.K_LEFT: Action.LEFT,
    pygame.K_RIGHT: Action.RIGHT,
    pygame.K_DOWN: Action.DOWN,
    pygame.K_UP: Action.UP,
    pygame.K_x: Action.ROTATE_CW,
    pygame.K_z: Action.ROTATE_CCW,
    pygame.K_c: Action.HOLD,
    pygame.K_LSHIFT: Action.HOLD,
    pygame.K_SPACE: Action.PAUSE,
    pygame.K_ESCAPE: Action.QUIT,
}

# SDL game controller layout: A=0 (south), X=2 (west), START=7 on most pads
BUTTON_TO_ACTION: Dict[int, Action] = {
    0: Action.ROTATE_CW,
    2: Action.ROTATE_CCW,
    7: Action.PAUSE,
}


def translate_event(event: pygame.event.Event) -> List[InputEvent]:
    """Map one pygame event to zero or more logical input events.

    Unmapped keys and buttons are still reported (with no action) on press, so
    menus that wait for "any key" see them.
    """
    if event.type == pygame.KEYDOWN:
        return [InputEvent.down(KEY_TO_ACTION.get(event.key))]
    if event.type == pygame.KEYUP:
        action = KEY_TO_ACTION.get(event.key)
        return [InputEvent.up(action)] if action is not None else []
    if event.type == pygame.JOYBUTTONDOWN:
        return [InputEvent.down(BUTTON_TO_ACTION.get(event.button))]
    if event.type == pygame.JOYBUTTONUP:
        action = BUTTON_TO_ACTION.get(event.button)
        return [InputEvent.up(action)] if action is not None else []
    if event.type == pygame.JOYHATMOTION:
        # Hat y is +1 when the d-pad is pressed up
        x, y = event.value
        return [InputEvent.axis_moved(Axis.HORIZONTAL, x), InputEvent.axis_moved(Axis.VERTICAL, y)]
    return []


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Play Block Stacker")
    p.add_argument("--seed", type=int, default=None, help="Seed for the piece generator")
    p.add_argument("--width", type=int, default=640)
    p.add_argument("--height", type=int, default=480)
    p.add_argument("--fps", type=int, default=60, help="Render frame cap")
    p.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"], default="INFO")
    p.add_argument("--log-file", type=str, default=None)
    return p


def run(config: Optional[GameConfig] = None, width: int = 640, height: int = 480, fps: int = 60) -> None:
    pygame.init()
    try:
        screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        pygame.display.set_caption("Block Stacker")
        joysticks = [pygame.joystick.Joystick(i) for i in range(pygame.joystick.get_count())]
        logger.info("Window %dx%d, %d controller(s)", width, height, len(joysticks))

        manager = SceneManager(EngineContext(window_size=(float(width), float(height))), config)
        renderer = Renderer(screen)
        clock = pygame.time.Clock()

        while manager.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    manager.quit()
                elif event.type == pygame.VIDEORESIZE:
                    screen = pygame.display.set_mode(event.size, pygame.RESIZABLE)
                    renderer.screen = screen
                    manager.resize(*event.size)
                else:
                    for input_event in translate_event(event):
                        manager.handle_event(input_event)

            elapsed = clock.tick(fps) / 1000.0
            manager.advance(elapsed)
            if manager.running:
                manager.draw(renderer)
    finally:
        pygame.quit()


def main() -> None:
    args = build_parser().parse_args()
    setup_logging(getattr(logging, args.log_level), args.log_file)
    run(GameConfig(random_seed=args.seed), width=args.width, height=args.height, fps=args.fps)


if __name__ == "__main__":  # pragma: no cover
    main()
