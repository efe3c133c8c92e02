"""Range checks shared by every validated field."""

from __future__ import annotations

import math
import numbers

from shapegen.errors import InvalidParameterError


def require_int(value: int, lo: int, hi: int, what: str) -> int:
    """Return *value* as an int, or raise if it is not an integer in [lo, hi]."""
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidParameterError(
            f"The {what} must be an integer, got {type(value).__name__}."
        )
    if value < lo or value > hi:
        raise InvalidParameterError(f"The {what} must be between {lo} and {hi}.")
    return int(value)


def require_float(value: float, lo: float, hi: float, what: str) -> float:
    """Return *value* as a float, or raise if it is not a number in [lo, hi]."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidParameterError(
            f"The {what} must be a number, got {type(value).__name__}."
        )
    value = float(value)
    if math.isnan(value) or value < lo or value > hi:
        raise InvalidParameterError(f"The {what} must be between {lo} and {hi}.")
    return value


def require_positive(value: int, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidParameterError(
            f"The {what} must be an integer, got {type(value).__name__}."
        )
    if value <= 0:
        raise InvalidParameterError(f"The {what} must be greater than 0.")
    return int(value)
