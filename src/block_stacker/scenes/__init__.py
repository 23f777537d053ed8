"""Scene stack for Block Stacker.

- EngineContext / ScreenParams: timing and layout shared by all scenes
- IntroScene, GameScene, PauseScene, GameOverScene
- Transition / TransitionType: stack operations requested by the top scene
- SceneManager: fixed-timestep driver owning the stack
"""

from .context import EngineContext, ScreenParams, compute_screen_params
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
from .manager import SceneManager

__all__ = [
    "EngineContext",
    "ScreenParams",
    "compute_screen_params",
    "GameOverScene",
    "GameScene",
    "IntroScene",
    "PauseScene",
    "Scene",
    "SceneKind",
    "Transition",
    "TransitionType",
    "SceneManager",
]
