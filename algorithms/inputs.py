"""
inputs.py — Numeric input checks shared by the array engines.
"""

import math
from numbers import Real
from typing import Any, List, Union

from errors import InvalidInput

Number = Union[int, float]


def _is_finite(value: Real) -> bool:
    """math.isfinite that answers False instead of overflowing on huge ints."""
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


def as_number(value: Any, name: str = "target") -> Number:
    """Return `value` if it is a finite real number (bools rejected)."""
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidInput(f"'{name}' must be a number, got {type(value).__name__}")
    if not _is_finite(value):
        raise InvalidInput(f"'{name}' is out of range")
    return value


def as_number_array(value: Any, name: str = "array") -> List[Number]:
    """Validate and copy a sequence of finite numbers."""
    if isinstance(value, (str, bytes, dict)) or not hasattr(value, "__iter__"):
        raise InvalidInput(f"'{name}' must be a list of numbers")
    out = []
    for i, item in enumerate(value):
        out.append(as_number(item, name=f"{name}[{i}]"))
    return out
