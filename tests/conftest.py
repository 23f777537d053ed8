from __future__ import annotations

import random

import pytest

from block_stacker.game import GameConfig, TetrisGame

DT = 1.0 / 60.0


class FakeClock:
    def __init__(self, start: float = 100.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def game(clock: FakeClock) -> TetrisGame:
    return TetrisGame(GameConfig(random_seed=1234), rng=random.Random(1234), clock=clock)


class RecordingRenderer:
    def __init__(self) -> None:
        self.calls = []

    def clear(self) -> None:
        self.calls.append(("clear",))

    def present(self) -> None:
        self.calls.append(("present",))

    def draw_block(self, block, params, ghost=False) -> None:
        self.calls.append(("block", block, ghost))

    def draw_border(self, params) -> None:
        self.calls.append(("border",))

    def draw_text(self, text, pos, size) -> None:
        self.calls.append(("text", text))

    def draw_centered_text(self, text, y_offset, size) -> None:
        self.calls.append(("centered", text))

    def draw_overlay(self, alpha) -> None:
        self.calls.append(("overlay", alpha))


@pytest.fixture
def renderer() -> RecordingRenderer:
    return RecordingRenderer()
