"""Run-time value helpers for Nova.

Nova values map directly onto Python objects:

    nil      -> None
    boolean  -> bool
    number   -> float (double precision)
    string   -> str
    callable -> NovaCallable

Because `bool` is a subclass of `int` in Python, and `True == 1.0`, the
helpers here compare and classify values by exact type rather than by
Python's numeric tower.
"""

from __future__ import annotations

import math
from typing import Any


def is_number(value: Any) -> bool:
    return type(value) is float


def is_truthy(value: Any) -> bool:
    """nil and false are falsy; every other value, including 0 and "", is truthy."""
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    return True


def is_equal(a: Any, b: Any) -> bool:
    # values of different kinds are never equal, and nil equals only nil
    if type(a) is not type(b):
        return False
    return a == b


def divide(left: float, right: float) -> float:
    """IEEE-754 division: a zero divisor yields an infinity or NaN."""
    if right == 0.0:
        if left == 0.0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)
    return left / right


def stringify(value: Any) -> str:
    """Convert a Nova value to its display form."""
    if value is None:
        return 'nil'
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float):
        # whole numbers print without a fraction or exponent up to 1e21
        if math.isfinite(value) and value.is_integer() and abs(value) < 1e21:
            return format(value, '.0f')
        return repr(value)
    return str(value)


def type_name(value: Any) -> str:
    if value is None:
        return 'nil'
    if isinstance(value, bool):
        return 'boolean'
    if isinstance(value, float):
        return 'number'
    if isinstance(value, str):
        return 'string'
    return 'callable'
