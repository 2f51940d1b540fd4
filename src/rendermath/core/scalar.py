"""
Scalar helpers shared by every rendermath value type.

Provides the library epsilon, gamma constants, clamping, epsilon comparison,
hex formatting and the hash combination used by ``get_hash_code``.
"""

import math
from typing import Iterable

EPSILON = 0.001
TO_GAMMA_SPACE = 1 / 2.2
TO_LINEAR_SPACE = 2.2


def within_epsilon(a: float, b: float, epsilon: float = EPSILON) -> bool:
    """
    Check whether two floats differ by at most ``epsilon``.

    Args:
        a: First value.
        b: Second value.
        epsilon: Allowed absolute difference.

    Returns:
        True if ``|a - b| <= epsilon``.
    """
    return abs(a - b) <= epsilon


def clamp(value: float, min_value: float = 0.0, max_value: float = 1.0) -> float:
    """Clamp ``value`` into ``[min_value, max_value]``."""
    return min(max_value, max(min_value, value))


def to_hex(i: int) -> str:
    """
    Format an integer in [0, 255] as two uppercase hex digits.

    Args:
        i: Channel value.

    Returns:
        Two-character hex string, zero padded.
    """
    return format(int(i), "02X")


def lerp(start: float, end: float, amount: float) -> float:
    """Linear interpolation between two scalars."""
    return start + (end - start) * amount


def divide(numerator: float, denominator: float) -> float:
    """
    Divide with IEEE 754 results for a zero denominator.

    ``x / 0`` gives an infinity signed by both operands, including the sign
    of a negative zero denominator; ``0 / 0`` and ``nan / 0`` give nan.
    """
    if denominator != 0.0:
        return numerator / denominator
    if numerator == 0.0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def to_int32(value: int) -> int:
    """Wrap an integer to a signed 32-bit value."""
    value &= 0xFFFFFFFF
    if value >= 0x80000000:
        value -= 0x100000000
    return value


def hash_combine(values: Iterable[float]) -> int:
    """
    Combine components into a hash code using the ``hash * 397 ^ value`` scheme.

    Components are truncated to integers before combining; non-finite
    components count as zero. Every step wraps to a signed 32-bit value, so
    codes stay in int32 range.

    Args:
        values: Components in declaration order.

    Returns:
        Integer hash code.
    """
    result = 0
    first = True
    for value in values:
        component = to_int32(int(value)) if math.isfinite(value) else 0
        if first:
            result = component
            first = False
        else:
            result = to_int32(to_int32(result * 397) ^ component)
    return result
