from __future__ import annotations

from block_stacker.game.position import GridPosition, Position, round_half_away


def test_grid_position_is_rounded():
    assert Position(1.4, 2.6).grid == GridPosition(1, 3)


def test_rounding_ties_go_away_from_zero():
    assert round_half_away(2.5) == 3
    assert round_half_away(-2.5) == -3
    assert Position(0.5, 1.5).grid == GridPosition(1, 2)


def test_equality_is_by_grid_cell():
    assert Position(1.1, 1.2) == Position(0.9, 0.8)
    assert Position(1.1, 1.2) != Position(2.0, 1.0)
    assert len({Position(3.0, 3.0), Position(3.2, 2.9)}) == 1


def test_horizontal_moves_shift_one_unit():
    pos = Position(4.0, 1.25)
    assert pos.move_left().xy == (3.0, 1.25)
    assert pos.move_right().xy == (5.0, 1.25)


def test_move_down_floors_to_next_row():
    assert Position(4.0, 1.0 + 1.0 / 60.0).move_down().y == 2.0
    assert Position(4.0, 1.0).move_down().y == 2.0
    assert Position(4.0, -0.5).move_down().y == 0.0


def test_screen_coords_use_grid_cell():
    assert Position(2.2, 3.0).screen_coords(20.0, 220.0, 0.0) == (260.0, 60.0)


def test_from_grid_position_round_trips():
    pos = Position.from_grid_position(GridPosition(3, -2))
    assert pos.xy == (3.0, -2.0)
    assert pos.grid == GridPosition(3, -2)
    assert Position.from_grid_position(Position(6.4, 7.6).grid).xy == (6.0, 8.0)
