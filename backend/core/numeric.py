# core/numeric.py
from __future__ import annotations
import math
from typing import Any

from core.exceptions import InvalidInputError

# Bias applied to the scaled value so that decimals like 2.005 (stored as
# 2.00499999...) still round up.
ROUND_EPSILON = 1e-9


def round_to(value: float, decimals: int = 2) -> float:
    """
    Round half away from zero: floor(value * 10^n + 0.5 + eps) / 10^n.
    Negative values are rounded symmetrically. Non-finite values (including
    products that overflowed) raise InvalidInputError.
    """
    if math.isnan(value) or math.isinf(value):
        raise InvalidInputError(f"value is not a finite number (got {value!r})")
    if value < 0:
        return -round_to(-value, decimals)
    f = 10**decimals
    scaled = value * f + 0.5 + ROUND_EPSILON
    if math.isinf(scaled):
        raise InvalidInputError(f"value is too large to round (got {value!r})")
    return math.floor(scaled) / f


def is_number(value: Any) -> bool:
    # bool is an int subclass; reject it explicitly
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def require_non_negative(value: Any, name: str) -> float:
    if not is_number(value) or math.isnan(value) or math.isinf(value) or value < 0:
        raise InvalidInputError(f"{name} must be a number >= 0 (got {value!r})")
    return float(value)


def require_number(value: Any, name: str) -> float:
    if not is_number(value) or math.isnan(value) or math.isinf(value):
        raise InvalidInputError(f"{name} must be a finite number (got {value!r})")
    return float(value)
