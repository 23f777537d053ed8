from __future__ import annotations

import pytest

from block_stacker.game import ScoringRules


@pytest.mark.parametrize("lines, expected", [(0, 0), (1, 40), (2, 100), (3, 300), (4, 1200)])
def test_classic_line_scores(lines, expected):
    assert ScoringRules().score_for_lines(lines, level=1) == expected


def test_scores_scale_with_level():
    assert ScoringRules().score_for_lines(4, level=3) == 3600


def test_more_than_four_lines_is_fatal():
    with pytest.raises(RuntimeError):
        ScoringRules().score_for_lines(5, level=1)


@pytest.mark.parametrize("total, level", [(0, 1), (9, 1), (10, 2), (25, 3)])
def test_level_for_lines(total, level):
    assert ScoringRules().level_for_lines(total) == level


def test_speed_for_level():
    rules = ScoringRules()
    assert rules.speed_for_level(1) == 1.5
    assert rules.speed_for_level(4) == 3.0
