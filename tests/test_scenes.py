from __future__ import annotations

import pytest

from block_stacker.game import GameConfig
from block_stacker.game.constants import MAX_CATCH_UP_TICKS
from block_stacker.input import Action, Axis, InputEvent
from block_stacker.scenes import (
    GameOverScene,
    GameScene,
    IntroScene,
    PauseScene,
    SceneKind,
    SceneManager,
    Transition,
    TransitionType,
)


@pytest.fixture
def manager(clock):
    return SceneManager(config=GameConfig(random_seed=7), clock=clock)


def _start_game(manager):
    manager.handle_event(InputEvent.down(None))
    manager.tick()
    return manager.top


def test_starts_on_intro(manager):
    assert isinstance(manager.top, IntroScene)
    assert manager.running


def test_any_key_swaps_intro_for_game(manager):
    scene = _start_game(manager)
    assert isinstance(scene, GameScene)
    assert len(manager.scenes) == 1


def test_intro_ignores_axis_motion(manager):
    manager.handle_event(InputEvent.axis_moved(Axis.HORIZONTAL, -1.0))
    manager.tick()
    assert isinstance(manager.top, IntroScene)


def test_pause_pushes_and_resume_pops(manager):
    game_scene = _start_game(manager)
    manager.handle_event(InputEvent.down(Action.PAUSE))
    manager.tick()
    assert isinstance(manager.top, PauseScene)
    assert manager.scenes[0] is game_scene

    frozen = game_scene.game.falling.pos.xy
    for _ in range(10):
        manager.tick()
    assert game_scene.game.falling.pos.xy == frozen

    manager.handle_event(InputEvent.down(Action.PAUSE))
    manager.tick()
    assert manager.top is game_scene
    assert len(manager.scenes) == 1


def test_only_top_scene_receives_input(manager):
    game_scene = _start_game(manager)
    manager.handle_event(InputEvent.down(Action.PAUSE))
    manager.tick()
    manager.handle_event(InputEvent.down(Action.LEFT))
    assert game_scene.game.input.left is False


def test_game_over_pushes_then_restart_resets(manager):
    game_scene = _start_game(manager)
    game_scene.game.grid.cells[0, 0] = 1
    manager.tick()
    assert isinstance(manager.top, GameOverScene)
    assert len(manager.scenes) == 2

    manager.handle_event(InputEvent.down(Action.LEFT))
    manager.tick()
    assert len(manager.scenes) == 1
    assert isinstance(manager.top, GameScene)
    assert manager.top is not game_scene
    assert manager.top.game.score == 0


def test_game_over_takes_priority_over_pause():
    scene = GameScene()
    scene.pause = True
    scene.game.grid.cells[1, 1] = 1
    assert scene.get_transition() == Transition(TransitionType.PUSH, SceneKind.GAME_OVER)


def test_reset_clears_whole_stack(manager):
    manager.apply(Transition(TransitionType.PUSH, SceneKind.GAME))
    manager.apply(Transition(TransitionType.PUSH, SceneKind.PAUSE))
    assert len(manager.scenes) == 3
    manager.apply(Transition(TransitionType.RESET, SceneKind.GAME))
    assert len(manager.scenes) == 1
    assert isinstance(manager.top, GameScene)


def test_pop_on_single_scene_stops_manager(clock):
    manager = SceneManager(clock=clock, initial=SceneKind.PAUSE)
    manager.handle_event(InputEvent.down(Action.PAUSE))
    manager.tick()
    assert manager.scenes == []
    assert manager.running is False
    # ticking an empty stack is harmless
    manager.tick()


def test_transition_without_target_is_rejected(manager):
    with pytest.raises(ValueError):
        manager.apply(Transition(TransitionType.PUSH))


def test_quit_stops_from_any_scene(manager):
    _start_game(manager)
    manager.handle_event(InputEvent.down(Action.QUIT))
    assert manager.running is False


def test_advance_runs_fixed_steps(manager):
    assert manager.advance(0.051) == 3
    assert manager.advance(0.005) == 0
    assert manager.ctx.dt == pytest.approx(1.0 / 60.0)


def test_advance_stops_when_not_running(manager):
    manager.quit()
    assert manager.advance(1.0) == 0


def test_game_scene_maps_buttons_to_input_state():
    scene = GameScene()
    state = scene.game.input
    scene.handle_event(InputEvent.down(Action.ROTATE_CW))
    scene.handle_event(InputEvent.down(Action.DOWN))
    assert state.rotate_cw and state.down
    scene.handle_event(InputEvent.up(Action.ROTATE_CW))
    assert not state.rotate_cw and state.down
    scene.handle_event(InputEvent.down(Action.HOLD))
    scene.handle_event(InputEvent.up(Action.HOLD))
    assert state.hold


def test_game_scene_maps_axes_by_sign():
    scene = GameScene()
    state = scene.game.input
    scene.handle_event(InputEvent.axis_moved(Axis.HORIZONTAL, -1.0))
    assert state.left and not state.right
    scene.handle_event(InputEvent.axis_moved(Axis.HORIZONTAL, 0.0))
    assert not state.left and not state.right
    scene.handle_event(InputEvent.axis_moved(Axis.VERTICAL, -1.0))
    assert state.down
    scene.handle_event(InputEvent.axis_moved(Axis.VERTICAL, 1.0))
    assert state.up
    scene.handle_event(InputEvent.axis_moved(Axis.VERTICAL, 0.0))
    assert not state.up and not state.down


def test_draw_order_is_bottom_to_top(manager, renderer):
    _start_game(manager)
    manager.handle_event(InputEvent.down(Action.PAUSE))
    manager.tick()
    manager.draw(renderer)

    kinds = [call[0] for call in renderer.calls]
    assert kinds[0] == "clear"
    assert kinds[-1] == "present"
    assert renderer.calls[-2] == ("text", "FPS: 0.00")
    assert kinds.index("block") < kinds.index("border") < kinds.index("overlay")
    assert ("centered", "PAUSED") in renderer.calls
    texts = [call[1] for call in renderer.calls if call[0] == "text"]
    assert "Score: 0" in texts and "Level: 1" in texts


def test_game_scene_draws_ghost_blocks(manager, renderer):
    scene = _start_game(manager)
    manager.tick()
    scene.draw(renderer, manager.ctx)
    ghosts = [call for call in renderer.calls if call[0] == "block" and call[2]]
    assert len(ghosts) == 4


def test_keys_released_while_paused_are_not_held_after_resume(manager, clock):
    game_scene = _start_game(manager)
    manager.tick()
    manager.handle_event(InputEvent.down(Action.LEFT))
    manager.handle_event(InputEvent.down(Action.PAUSE))
    manager.tick()
    assert isinstance(manager.top, PauseScene)

    manager.handle_event(InputEvent.up(Action.LEFT))
    manager.handle_event(InputEvent.down(Action.PAUSE))
    manager.tick()
    assert manager.top is game_scene

    x_after_resume = game_scene.game.falling.pos.x
    for _ in range(5):
        clock.advance(0.1)
        manager.tick()
    assert game_scene.game.input.left is False
    assert game_scene.game.falling.pos.x == x_after_resume


def test_long_stall_catches_up_a_bounded_number_of_steps(manager):
    ticks = manager.advance(10.0)
    assert 0 < ticks <= MAX_CATCH_UP_TICKS
    assert manager.advance(0.0) == 0
