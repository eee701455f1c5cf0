"""
Exponential, logarithm, powers and roots.

All functions return the principal value and are total: divergent or
indeterminate results come back as the Infinity or NaN sentinel.
"""

import math
from numbers import Real

from . import ieee_math
from .complex_ops import Operand, as_complex, conjugate, divide, equals, multiply, not_equals
from .complex_value import (
    INFINITY,
    NAN,
    ONE,
    ZERO,
    Complex,
    Polar,
    argument,
    is_infinite,
    is_nan,
    is_zero,
    modulus,
    pythagoras,
)
from .precision_config import PrecisionConfig


def exp(z: Complex) -> Complex:
    """e^z. NaN on the Infinity sentinel, whose limit depends on direction."""
    if is_nan(z) or is_infinite(z):
        return NAN
    if is_zero(z):
        return ONE

    return Complex.from_polar(Polar(ieee_math.exp(z.re), z.im))


def log(z: Complex) -> Complex:
    """Principal natural logarithm ln|z| + i·arg z."""
    if is_nan(z) or is_zero(z):
        return NAN
    if is_infinite(z):
        return INFINITY
    if equals(z, ONE):
        return ZERO

    return Complex(ieee_math.log(modulus(z)), argument(z))


def sqrt(z: Complex) -> Complex:
    """Principal square root."""
    if is_nan(z):
        return NAN
    if is_infinite(z):
        return INFINITY
    if is_zero(z):
        return ZERO

    r = modulus(z)
    p = argument(z)
    # r/√r is √r without a fractional power call.
    root = r / ieee_math.sqrt(r)

    return Complex(root * ieee_math.cos(p / 2), root * ieee_math.sin(p / 2))


def pow(z: Operand, w: Operand) -> Complex:
    """
    Principal value of z^w.

    Special cases are checked in order, since they overlap:

    ====================  ========
    0^w, w != 0           Zero
    z^0, z finite != 0    One
    z^∞, z != 0, z != 1   Infinity
    1^∞, 0^0, ∞^0         NaN
    ====================  ========
    """
    z = as_complex(z)
    w = as_complex(w)

    if is_zero(z) and not is_zero(w):
        return ZERO
    if not is_zero(z) and not is_infinite(z) and is_zero(w):
        return ONE
    if not is_zero(z) and not_equals(z, ONE) and is_infinite(w):
        return INFINITY
    if (
        (equals(z, ONE) and is_infinite(w))
        or (is_zero(z) and is_zero(w))
        or (is_infinite(z) and is_zero(w))
    ):
        return NAN

    c, d = w.re, w.im

    pyt = pythagoras(z)
    arg = argument(z)
    phase = c * arg + (d / 2) * ieee_math.log(pyt)
    magnitude = ieee_math.power(pyt, c / 2) * ieee_math.exp(-d * arg)

    return multiply(magnitude, Complex(ieee_math.cos(phase), ieee_math.sin(phase)))


def principal(z: Operand, n: Real) -> Complex:
    """
    Principal n-th root of z.

    Negative n gives the reciprocal of the |n|-th root. n must be a
    nonzero finite real, otherwise the result is NaN.
    """
    z = as_complex(z)
    if isinstance(n, bool) or not isinstance(n, Real):
        raise TypeError(f"Root index must be a real number, got {type(n).__name__}")
    n = PrecisionConfig.enforce_precision(n)

    if is_nan(z):
        return NAN
    if math.isnan(n) or math.isinf(n) or n == 0:
        return NAN
    if is_infinite(z):
        return INFINITY if n > 0 else ZERO
    if is_zero(z):
        return ZERO if n > 0 else INFINITY
    if n == 1:
        return z

    abs_n = abs(n)
    r = modulus(z)
    p = argument(z)
    root_r = ieee_math.power(r, 1.0 / abs_n)
    root = Complex(root_r * ieee_math.cos(p / abs_n), root_r * ieee_math.sin(p / abs_n))

    if n > 0:
        return root

    if is_nan(root) or is_zero(root):
        return NAN
    if is_infinite(root):
        return ZERO

    return divide(conjugate(root), pythagoras(root))
