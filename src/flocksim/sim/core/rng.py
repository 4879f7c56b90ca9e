from __future__ import annotations

import random

from pygame.math import Vector2


class DeterministicRng:
    def __init__(self, seed: int):
        self._seed = seed
        self._random = random.Random(seed)

    def next_range(self, low: float, high: float) -> float:
        return self._random.uniform(low, high)

    def next_point(self, min_x: float, min_y: float, max_x: float, max_y: float) -> Vector2:
        return Vector2(self.next_range(min_x, max_x), self.next_range(min_y, max_y))

    def next_velocity(self) -> Vector2:
        # Each component uniform in [-1, 1]; initial speeds stay at or below sqrt(2).
        return Vector2(self.next_range(-1.0, 1.0), self.next_range(-1.0, 1.0))
