from __future__ import annotations

import math
from typing import Dict, List, Tuple


class SpatialGrid:
    """Uniform bucket grid over integer entry indices."""

    def __init__(self, cell_size: float) -> None:
        if cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {cell_size}")
        self._cell_size = cell_size
        self._cells: Dict[Tuple[int, int], List[int]] = {}
        self._count = 0

    @property
    def cell_size(self) -> float:
        return self._cell_size

    def __len__(self) -> int:
        return self._count

    def insert(self, index: int, x: float, y: float) -> None:
        key = self._cell_key(x, y)
        bucket = self._cells.get(key)
        if bucket is None:
            bucket = []
            self._cells[key] = bucket
        bucket.append(index)
        self._count += 1

    def query(self, x: float, y: float, radius: float) -> List[int]:
        """Return sorted indices of every entry that may lie within ``radius``.

        The result is a superset of the exact answer; callers still apply
        their own distance test.
        """

        radius = abs(radius)
        if math.isfinite(radius):
            cell_range = int(math.ceil(radius / self._cell_size))
            span = 2 * cell_range + 1
        else:
            cell_range = span = len(self._cells)
        if span * span >= len(self._cells):
            # Scanning every occupied bucket is cheaper than walking empty cells.
            found = [index for bucket in self._cells.values() for index in bucket]
        else:
            base_x, base_y = self._cell_key(x, y)
            cells = self._cells
            found = []
            for dx in range(-cell_range, cell_range + 1):
                for dy in range(-cell_range, cell_range + 1):
                    bucket = cells.get((base_x + dx, base_y + dy))
                    if bucket:
                        found.extend(bucket)
        found.sort()
        return found

    def _cell_key(self, x: float, y: float) -> Tuple[int, int]:
        return (int(x // self._cell_size), int(y // self._cell_size))
