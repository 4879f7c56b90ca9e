from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AgentCounts:
    prey: int = 0
    predator: int = 0
    neutral: int = 0

    @property
    def total(self) -> int:
        return self.prey + self.predator + self.neutral


@dataclass(frozen=True, slots=True)
class Rect:
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    def contains(self, x: float, y: float) -> bool:
        return self.min_x <= x <= self.max_x and self.min_y <= y <= self.max_y

    @classmethod
    def centered(cls, half_width: float, half_height: float) -> "Rect":
        return cls(-half_width, -half_height, half_width, half_height)
