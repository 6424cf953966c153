"""Strict addition of two numbers."""

import math
from typing import Any, Optional, Union

Number = Union[int, float]


def is_number(value: Any) -> bool:
    """
    Check whether a value is a real number.

    Booleans and numeric-looking strings such as "2" are not numbers.

    Args:
        value: Any value

    Returns:
        True if value is an int or float (but not a bool)
    """
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def add(a: Any, b: Any) -> Optional[Number]:
    """
    Add two numbers.

    An int too large for a float added to a float gives an infinity with
    the sign of the int (or the float itself if it is infinite or NaN).

    Args:
        a: First operand
        b: Second operand

    Returns:
        a + b, or None if either operand is not a number

    Examples:
        >>> add(2, 2)
        4

        >>> add("2", "2") is None
        True
    """
    if not is_number(a) or not is_number(b):
        return None

    try:
        return a + b
    except OverflowError:
        # only int + float overflows; the int is out of float range
        big, other = (a, b) if isinstance(b, float) else (b, a)
        if math.isinf(other) or math.isnan(other):
            return other
        return math.inf if big > 0 else -math.inf
