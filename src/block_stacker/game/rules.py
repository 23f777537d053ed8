from __future__ import annotations

from dataclasses import dataclass

from .constants import BASE_SPEED, SPEED_PER_LEVEL


@dataclass
class ScoringRules:
    line_clear_scores: tuple[int, int, int, int] = (40, 100, 300, 1200)
    lines_per_level: int = 10
    base_speed: float = BASE_SPEED
    speed_per_level: float = SPEED_PER_LEVEL

    def score_for_lines(self, lines: int, level: int) -> int:
        if lines <= 0:
            return 0
        if lines > len(self.line_clear_scores):
            # A single piece spans at most four rows
            raise RuntimeError(f"Cleared {lines} rows in one tick")
        return level * self.line_clear_scores[lines - 1]

    def level_for_lines(self, total_lines: int) -> int:
        return total_lines // self.lines_per_level + 1

    def speed_for_level(self, level: int) -> float:
        return self.base_speed + level * self.speed_per_level
