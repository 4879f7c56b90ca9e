from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class TickMetrics:
    tick: int
    prey: int
    predators: int
    neutral: int
    kills: int
    neighbor_checks: int
    average_speed: float
    wrapped: int = 0
    tick_duration_ms: float = 0.0

    @property
    def population(self) -> int:
        return self.prey + self.predators + self.neutral
