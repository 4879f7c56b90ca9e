from __future__ import annotations

import math


def _safe_normalize_xy_f(x: float, y: float) -> tuple[float, float]:
    # Only an exactly zero vector has no direction.
    length = math.hypot(x, y)
    if length == 0.0:
        return 0.0, 0.0
    return x / length, y / length


def _limit_to_strength(x: float, y: float, strength: float) -> tuple[float, float]:
    """Rescale (x, y) to ``strength`` when it is longer than ``strength``.

    Unlike ``_clamp_length_xy_f`` the sign of ``strength`` is kept, so a
    negative coefficient yields a reversed vector of magnitude ``|strength|``.
    """

    limit_sq = strength * strength
    magnitude_sq = x * x + y * y
    if magnitude_sq <= limit_sq:
        return x, y
    scale = strength / math.sqrt(magnitude_sq)
    return x * scale, y * scale


def _clamp_length_xy_f(x: float, y: float, max_length: float) -> tuple[float, float]:
    if max_length <= 0.0:
        return 0.0, 0.0
    return _limit_to_strength(x, y, max_length)
