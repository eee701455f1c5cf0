"""
Stable scalar helpers.

Real-number primitives used wherever a sum or difference of two
similar-magnitude doubles would otherwise lose significant digits.
"""

import math

from .precision_config import EPSILON


def is_approximately_equal(a: float, b: float, epsilon: float = EPSILON) -> bool:
    """
    Compare two doubles with a mixed absolute/relative tolerance.

    Near zero (both magnitudes below 1) the absolute error |a - b| < ε is
    used, elsewhere the relative error |a - b| < ε·max(|a|, |b|).

    Args:
        a: First number
        b: Second number
        epsilon: Maximum allowed error (default: machine epsilon)

    Returns:
        True if the numbers are approximately equal. NaN never compares
        equal, and infinities only equal themselves.

    Examples:
        >>> is_approximately_equal(0.1 + 0.2, 0.3)
        True
        >>> is_approximately_equal(1.0, 1.0001, 0.001)
        True
    """
    if math.isnan(a) or math.isnan(b):
        return False
    if math.isinf(a) or math.isinf(b):
        return a == b
    if a == b:
        return True

    max_abs = max(abs(a), abs(b))
    if max_abs < 1:
        return abs(a - b) < epsilon

    return abs(a - b) < epsilon * max_abs


def stable_add(x: float, y: float) -> float:
    """
    Add two doubles, folding the smaller magnitude into the larger.

    Examples:
        >>> stable_add(1e15, 1)
        1000000000000001.0
    """
    x_abs = abs(x)
    y_abs = abs(y)

    x_is_zero = is_approximately_equal(x_abs, 0.0)
    y_is_zero = is_approximately_equal(y_abs, 0.0)

    if x_is_zero:
        return 0.0 if y_is_zero else y
    if y_is_zero:
        return x

    if min(x_abs, y_abs) < 0.1 * max(x_abs, y_abs):
        return y + x if x_abs < y_abs else x + y

    return x + y


def stable_subtract(x: float, y: float) -> float:
    """
    Subtract two doubles, shifting both by a common reference first when
    their magnitudes are within a factor of two.

    Examples:
        >>> stable_subtract(1e15, 1)
        999999999999999.0
    """
    x_abs = abs(x)
    y_abs = abs(y)

    x_is_zero = is_approximately_equal(x_abs, 0.0)
    y_is_zero = is_approximately_equal(y_abs, 0.0)

    if x_is_zero:
        return 0.0 if y_is_zero else -y
    if y_is_zero:
        return x

    if min(x_abs, y_abs) > 0.5 * max(x_abs, y_abs):
        # Reference value: the operand of smaller magnitude.
        m = x if x_abs < y_abs else y
        return (x - m) - (y - m)

    return x - y
