from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from block_stacker.game import InputState, TetrisGame
from block_stacker.input import Action, Axis, EventKind, InputEvent

from .context import EngineContext


class SceneKind(Enum):
    INTRO = "intro"
    GAME = "game"
    PAUSE = "pause"
    GAME_OVER = "game_over"


class TransitionType(Enum):
    SWAP = "swap"  # replace the top scene
    PUSH = "push"  # suspend the top scene under a new one
    POP = "pop"  # drop the top scene, resume the one below
    RESET = "reset"  # clear the stack, start over with a new scene


@dataclass(frozen=True)
class Transition:
    transition_type: TransitionType
    target: Optional[SceneKind] = None


class Scene:
    """Common surface of the four scenes.

    `draw` only receives a renderer collaborator with `draw_block`,
    `draw_border`, `draw_text`, `draw_centered_text` and `draw_overlay`.
    """

    kind: SceneKind

    def update(self, ctx: EngineContext) -> None:
        pass

    def draw(self, renderer, ctx: EngineContext) -> None:
        pass

    def handle_event(self, event: InputEvent) -> None:
        pass

    def get_transition(self) -> Optional[Transition]:
        return None


class IntroScene(Scene):
    kind = SceneKind.INTRO
    title = "Revenge of Cleveland Z"

    def __init__(self) -> None:
        self.start_game = False

    def draw(self, renderer, ctx: EngineContext) -> None:
        renderer.draw_centered_text(self.title, 0.0, 24)
        renderer.draw_centered_text("Press Any Key", 50.0, 18)

    def handle_event(self, event: InputEvent) -> None:
        if event.kind == EventKind.BUTTON_DOWN:
            self.start_game = True

    def get_transition(self) -> Optional[Transition]:
        if self.start_game:
            return Transition(TransitionType.SWAP, SceneKind.GAME)
        return None


class PauseScene(Scene):
    kind = SceneKind.PAUSE

    def __init__(self) -> None:
        self.resume = False

    def draw(self, renderer, ctx: EngineContext) -> None:
        renderer.draw_overlay(0.8)
        renderer.draw_centered_text("PAUSED", 0.0, 24)
        renderer.draw_centered_text("Press start to resume", 50.0, 18)

    def handle_event(self, event: InputEvent) -> None:
        if event.kind == EventKind.BUTTON_DOWN and event.action == Action.PAUSE:
            self.resume = True

    def get_transition(self) -> Optional[Transition]:
        if self.resume:
            return Transition(TransitionType.POP)
        return None


class GameOverScene(Scene):
    kind = SceneKind.GAME_OVER

    def __init__(self) -> None:
        self.restart = False

    def draw(self, renderer, ctx: EngineContext) -> None:
        renderer.draw_overlay(0.8)
        renderer.draw_centered_text("GAME OVER", 0.0, 24)

    def handle_event(self, event: InputEvent) -> None:
        if event.kind == EventKind.BUTTON_DOWN:
            self.restart = True

    def get_transition(self) -> Optional[Transition]:
        if self.restart:
            return Transition(TransitionType.RESET, SceneKind.GAME)
        return None


_BUTTON_FLAGS = {
    Action.LEFT: "left",
    Action.RIGHT: "right",
    Action.DOWN: "down",
    Action.UP: "up",
    Action.ROTATE_CW: "rotate_cw",
    Action.ROTATE_CCW: "rotate_ccw",
}


class GameScene(Scene):
    kind = SceneKind.GAME

    def __init__(self, game: Optional[TetrisGame] = None) -> None:
        self.game = game or TetrisGame()
        self.pause = False

    def update(self, ctx: EngineContext) -> None:
        self.game.update(ctx.dt)

    def draw(self, renderer, ctx: EngineContext) -> None:
        params = ctx.screen_params
        for block, ghost in self.game.visible_blocks():
            renderer.draw_block(block, params, ghost=ghost)
        renderer.draw_border(params)
        renderer.draw_text(f"Score: {self.game.score}", (10.0, 30.0), 14)
        renderer.draw_text(f"Level: {self.game.level}", (10.0, 50.0), 14)

    def handle_event(self, event: InputEvent) -> None:
        state = self.game.input
        if event.kind == EventKind.AXIS:
            self._handle_axis(event.axis, event.value)
            return
        pressed = event.kind == EventKind.BUTTON_DOWN
        if event.action in _BUTTON_FLAGS:
            setattr(state, _BUTTON_FLAGS[event.action], pressed)
        elif event.action == Action.HOLD and pressed:
            # Consumed by the next tick; releasing the button does nothing
            state.hold = True
        elif event.action == Action.PAUSE and pressed:
            self.pause = True

    def _handle_axis(self, axis: Optional[Axis], value: float) -> None:
        state = self.game.input
        if axis == Axis.HORIZONTAL:
            if value < 0.0:
                state.left = True
            elif value > 0.0:
                state.right = True
            else:
                state.left = False
                state.right = False
        elif axis == Axis.VERTICAL:
            if value < 0.0:
                state.down = True
            elif value > 0.0:
                state.up = True
            else:
                state.down = False
                state.up = False

    def get_transition(self) -> Optional[Transition]:
        if self.game.should_end():
            return Transition(TransitionType.PUSH, SceneKind.GAME_OVER)
        if self.pause:
            self.pause = False
            # Releases that arrive while paused never reach this scene
            self.game.input = InputState()
            return Transition(TransitionType.PUSH, SceneKind.PAUSE)
        return None
