from __future__ import annotations

import logging
import random
import time
from collections import deque
from typing import Callable, Deque, List, Optional

from block_stacker.game import GameConfig, TetrisGame
from block_stacker.game.constants import DESIRED_FPS, MAX_CATCH_UP_TICKS
from block_stacker.input import Action, EventKind, InputEvent

from .context import EngineContext
from .scenes import (
    GameOverScene,
    GameScene,
    IntroScene,
    PauseScene,
    Scene,
    SceneKind,
    Transition,
    TransitionType,
)

logger = logging.getLogger(__name__)


class SceneManager:
    """Stack of scenes driven by a fixed-timestep loop.

    Only the top scene is updated and receives input. After each update the
    top scene may return a Transition, which the manager applies to the stack.
    Every scene on the stack is drawn, bottom to top.
    """

    def __init__(
        self,
        ctx: Optional[EngineContext] = None,
        config: Optional[GameConfig] = None,
        clock: Callable[[], float] = time.monotonic,
        initial: SceneKind = SceneKind.INTRO,
    ) -> None:
        self.ctx = ctx or EngineContext()
        self.config = config or GameConfig()
        self.clock = clock
        self.rng = random.Random(self.config.random_seed)
        self.step = 1.0 / DESIRED_FPS
        self.running = True
        self._accumulator = 0.0
        self._frame_times: Deque[float] = deque()
        self.scenes: List[Scene] = [self.make_scene(initial)]

    @property
    def top(self) -> Optional[Scene]:
        return self.scenes[-1] if self.scenes else None

    def make_scene(self, kind: SceneKind) -> Scene:
        if kind == SceneKind.INTRO:
            return IntroScene()
        if kind == SceneKind.GAME:
            return GameScene(TetrisGame(self.config, rng=self.rng, clock=self.clock))
        if kind == SceneKind.PAUSE:
            return PauseScene()
        if kind == SceneKind.GAME_OVER:
            return GameOverScene()
        raise ValueError(f"Unknown scene kind: {kind!r}")

    def quit(self) -> None:
        logger.info("Quit requested")
        self.running = False

    def advance(self, elapsed: float) -> int:
        """Run as many fixed steps as fit in the accumulated wall-clock time.

        A long stall catches up on at most MAX_CATCH_UP_TICKS steps.
        """
        self._accumulator = min(self._accumulator + elapsed, MAX_CATCH_UP_TICKS * self.step)
        ticks = 0
        while self.running and self._accumulator >= self.step:
            self._accumulator -= self.step
            self.tick()
            ticks += 1
        return ticks

    def tick(self) -> None:
        self._record_frame()
        self.ctx.dt = self.step
        scene = self.top
        if scene is None:
            return
        scene.update(self.ctx)
        transition = scene.get_transition()
        if transition is not None:
            self.apply(transition)

    def apply(self, transition: Transition) -> None:
        kind = transition.transition_type
        if kind == TransitionType.POP:
            popped = self.scenes.pop()
            logger.info("Pop %s", popped.kind.value)
            if not self.scenes:
                logger.info("Scene stack is empty")
                self.running = False
            return

        if transition.target is None:
            raise ValueError(f"{kind.value} transition needs a target scene")
        new_scene = self.make_scene(transition.target)
        if kind == TransitionType.SWAP:
            self.scenes.pop()
        elif kind == TransitionType.RESET:
            self.scenes.clear()
        self.scenes.append(new_scene)
        logger.info("%s -> %s (depth %d)", kind.value, new_scene.kind.value, len(self.scenes))

    def handle_event(self, event: InputEvent) -> None:
        if event.kind == EventKind.BUTTON_DOWN and event.action == Action.QUIT:
            self.quit()
            return
        scene = self.top
        if scene is not None:
            scene.handle_event(event)

    def resize(self, width: float, height: float) -> None:
        self.ctx.resize(width, height)

    def draw(self, renderer) -> None:
        renderer.clear()
        for scene in self.scenes:
            scene.draw(renderer, self.ctx)
        renderer.draw_text(f"FPS: {self.ctx.fps:.2f}", (10.0, 10.0), 14)
        renderer.present()

    def _record_frame(self) -> None:
        now = self.clock()
        self._frame_times.append(now)
        # Rolling one-second window
        while self._frame_times and now - self._frame_times[0] > 1.0:
            self._frame_times.popleft()
        if len(self._frame_times) > 1:
            span = self._frame_times[-1] - self._frame_times[0]
            if span > 0:
                self.ctx.fps = (len(self._frame_times) - 1) / span
