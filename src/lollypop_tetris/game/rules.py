from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class ScoringRules:
    points_per_line: int = 100
    base_fall_interval_ms: int = 1000
    speed_factor: float = 0.9
    speed_step_score: int = 1000
    # None keeps the unclamped curve
    min_fall_interval_ms: Optional[int] = None

    def __post_init__(self) -> None:
        if self.points_per_line < 0:
            raise ValueError(f"points_per_line must be >= 0, got {self.points_per_line}")
        if self.base_fall_interval_ms <= 0:
            raise ValueError(f"base_fall_interval_ms must be > 0, got {self.base_fall_interval_ms}")
        if not 0.0 < self.speed_factor <= 1.0:
            raise ValueError(f"speed_factor must be in (0, 1], got {self.speed_factor}")
        if self.speed_step_score <= 0:
            raise ValueError(f"speed_step_score must be > 0, got {self.speed_step_score}")
        if self.min_fall_interval_ms is not None and self.min_fall_interval_ms < 0:
            raise ValueError(f"min_fall_interval_ms must be >= 0, got {self.min_fall_interval_ms}")

    def score_delta(self, lines: int) -> int:
        if lines <= 0:
            return 0
        return lines * self.points_per_line

    def fall_interval_ms(self, score: int) -> int:
        """Gravity interval for ``score``: 10% faster every 1000 points by default."""
        steps = max(0, score) // self.speed_step_score
        interval = int(self.base_fall_interval_ms * self.speed_factor ** steps)
        if self.min_fall_interval_ms is not None:
            interval = max(interval, self.min_fall_interval_ms)
        return interval
