"""
Score Kernel — Fixed-Width Level Arithmetic v1.0

Every score level is a signed 32-bit integer.

Rules:
  - add / subtract / negate wrap around (two's complement).
  - Real-valued results (multiply, divide, power) are floored toward
    negative infinity, then narrowed: NaN -> 0, out of range -> saturate.
  - Real division and exponentiation never raise; they yield inf / nan.
"""

from __future__ import annotations

import math

from .score import LevelRangeError


# ── Int32 Bounds ──────────────────────────────────────────────
INT32_MIN: int = -(2**31)
INT32_MAX: int = 2**31 - 1
_INT32_SPAN: int = 2**32


def validate_int32(value: int, name: str) -> int:
    """Return value if it is an int inside the int32 range. Hard fail."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise LevelRangeError(
            f"{name} must be int, got {type(value).__name__}"
        )
    if value < INT32_MIN or value > INT32_MAX:
        raise LevelRangeError(
            f"{name} out of int32 range: {value}"
        )
    return value


def wrap_int32(value: int) -> int:
    """Two's-complement wraparound into [INT32_MIN, INT32_MAX]."""
    return ((value - INT32_MIN) % _INT32_SPAN) + INT32_MIN


def floor_to_int32(value: float) -> int:
    """
    Floor toward negative infinity, then narrow to int32.

    floor(-1.5) == -2, not -1.
    """
    if math.isnan(value):
        return 0
    if value >= INT32_MAX:
        return INT32_MAX
    if value <= INT32_MIN:
        return INT32_MIN
    return math.floor(value)


def real_divide(level: int, divisor: float) -> float:
    """IEEE division: x / 0.0 is +-inf, 0 / 0.0 is nan."""
    divisor = float(divisor)
    if divisor == 0.0:
        if level == 0:
            return math.nan
        return math.copysign(math.inf, level) * math.copysign(1.0, divisor)
    return level / divisor


def real_power(level: int, exponent: float) -> float:
    """
    Real exponentiation without exceptions.

    Negative base with a fractional exponent -> nan.
    Zero base with a negative exponent -> +inf.
    Overflow -> +-inf (negative only for a negative base and odd exponent).
    """
    base = float(level)
    exponent = float(exponent)
    try:
        return math.pow(base, exponent)
    except ValueError:
        if base == 0.0 and exponent < 0.0:
            return math.inf
        return math.nan
    except OverflowError:
        if base < 0.0 and exponent.is_integer() and int(exponent) % 2 == 1:
            return -math.inf
        return math.inf
