from __future__ import annotations

import math

from pytest import approx

from flocksim.sim.utils.math2d import _clamp_length_xy_f, _limit_to_strength, _safe_normalize_xy_f


def test_safe_normalize_of_zero_is_zero():
    x, y = _safe_normalize_xy_f(0.0, 0.0)
    assert (x, y) == (0.0, 0.0)
    assert not math.isnan(x) and not math.isnan(y)


def test_safe_normalize_unit_length():
    x, y = _safe_normalize_xy_f(3.0, 4.0)
    assert (x, y) == (approx(0.6), approx(0.8))


def test_clamp_length_only_shrinks():
    assert _clamp_length_xy_f(3.0, 4.0, 10.0) == (3.0, 4.0)
    x, y = _clamp_length_xy_f(30.0, 40.0, 5.0)
    assert math.hypot(x, y) == approx(5.0)
    assert _clamp_length_xy_f(1.0, 1.0, 0.0) == (0.0, 0.0)


def test_limit_to_strength_keeps_sign_of_strength():
    assert _limit_to_strength(0.5, 0.0, 1.0) == (0.5, 0.0)
    x, y = _limit_to_strength(10.0, 0.0, 2.0)
    assert (x, y) == (approx(2.0), approx(0.0))
    x, y = _limit_to_strength(10.0, 0.0, -2.0)
    assert (x, y) == (approx(-2.0), approx(0.0))
    assert _limit_to_strength(0.0, 0.0, 0.0) == (0.0, 0.0)


def test_safe_normalize_keeps_direction_of_tiny_offsets():
    x, y = _safe_normalize_xy_f(1e-7, 0.0)
    assert (x, y) == (approx(1.0), approx(0.0))
    x, y = _safe_normalize_xy_f(0.0, -1e-300)
    assert (x, y) == (approx(0.0), approx(-1.0))
