"""Scalar helpers shared by the vector types.

All constants are single precision values widened to Python floats.
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Iterable
from typing import Union

import numpy as np

Number = Union[int, float]

PI: float = float(np.float32(3.1415927))
RAD_TO_DEG: float = float(np.float32(180.0) / np.float32(PI))
DEG_TO_RAD: float = float(np.float32(PI) / np.float32(180.0))
# Smallest positive (subnormal) single precision value.
EPSILON: float = float(np.finfo(np.float32).smallest_subnormal)


def to_float32(value: Number) -> float:
    """Round ``value`` to the nearest single precision float.

    Values outside the single precision range become +/-inf. Anything that
    is not a real number raises ``TypeError``.
    """
    if not isinstance(value, numbers.Real):
        raise TypeError(f"expected a real number, got {type(value).__name__}")
    with np.errstate(over="ignore"):
        return float(np.float32(value))


def approximately(a: float, b: float) -> bool:
    """Relative comparison that tolerates rounding error proportional to the operands."""
    return abs(a - b) <= max(0.000001 * max(abs(a), abs(b)), EPSILON * 8)


def ceil_to_int(f: float) -> int:
    """Smallest integer greater than or equal to ``f``.

    Python integers never wrap: infinities raise ``OverflowError`` and NaN
    raises ``ValueError``.
    """
    return int(math.ceil(f))


def floor_to_int(f: float) -> int:
    """Largest integer less than or equal to ``f``. Same error behaviour as :func:`ceil_to_int`."""
    return int(math.floor(f))


def clamp(value: float, low: float, high: float) -> float:
    if value < low:
        return low
    if value > high:
        return high
    return value


def clamp01(value: float) -> float:
    return clamp(value, 0.0, 1.0)


def lerp(a: float, b: float, t: float) -> float:
    return lerp_unclamped(a, b, clamp01(t))


def lerp_unclamped(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def _values(values: tuple) -> list:
    # minimum([1, 2]) and minimum(1, 2) are both accepted.
    if len(values) == 1 and isinstance(values[0], Iterable):
        values = tuple(values[0])
    if not values:
        raise ValueError("at least one value is required")
    return list(values)


def minimum(*values: Number) -> Number:
    """Smallest of one or more values. Ties keep the first occurrence."""
    items = _values(values)
    result = items[0]
    for value in items[1:]:
        if value < result:
            result = value
    return result


def maximum(*values: Number) -> Number:
    """Largest of one or more values. Ties keep the first occurrence."""
    items = _values(values)
    result = items[0]
    for value in items[1:]:
        if value > result:
            result = value
    return result
