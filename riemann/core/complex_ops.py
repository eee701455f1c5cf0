"""
Arithmetic on the extended complex plane.

Every binary operation accepts a :class:`Complex` or a plain real for
either operand and is total over the 4x4 cross product of categories
{zero, finite, infinite, NaN}: NaN dominates, indeterminate forms
(∞ ± ∞, 0·∞, 0/0, ∞/∞) give NaN, one-sided infinities and zeros give
the Infinity / Zero sentinels, and only finite-by-finite cases do real
arithmetic.
"""

from numbers import Real
from typing import Union

from . import ieee_math
from .complex_value import (
    INFINITY,
    NAN,
    ZERO,
    Complex,
    is_infinite,
    is_nan,
    is_real,
    is_zero,
    modulus,
)
from .precision_config import EPSILON
from .stable import is_approximately_equal

Operand = Union[Complex, Real]


def as_complex(x: Operand) -> Complex:
    """
    Coerce an operand to a Complex value.

    Raises:
        TypeError: If x is neither a Complex nor a real number
    """
    if isinstance(x, Complex):
        return x
    if isinstance(x, Real) and not isinstance(x, bool):
        return Complex(x, 0.0)
    raise TypeError(f"Operand must be Complex or a real number, got {type(x).__name__}")


def add(z: Operand, w: Operand) -> Complex:
    """z + w, componentwise."""
    z = as_complex(z)
    w = as_complex(w)

    if is_nan(z) or is_nan(w) or (is_infinite(z) and is_infinite(w)):
        return NAN
    if is_infinite(z) or is_infinite(w):
        return INFINITY

    return Complex(z.re + w.re, z.im + w.im)


def subtract(z: Operand, w: Operand) -> Complex:
    """z - w, componentwise."""
    z = as_complex(z)
    w = as_complex(w)

    if is_nan(z) or is_nan(w) or (is_infinite(z) and is_infinite(w)):
        return NAN
    if is_infinite(z) or is_infinite(w):
        return INFINITY

    return Complex(z.re - w.re, z.im - w.im)


def multiply(z: Operand, w: Operand) -> Complex:
    """z · w."""
    z = as_complex(z)
    w = as_complex(w)

    if is_nan(z) or is_nan(w) or (is_zero(z) and is_infinite(w)) or (is_infinite(z) and is_zero(w)):
        return NAN
    if is_infinite(z) or is_infinite(w):
        return INFINITY
    if is_zero(z) or is_zero(w):
        return ZERO
    if is_real(z) and is_real(w):
        # Keep real products free of ±0 imaginary noise.
        return Complex(z.re * w.re, 0.0)

    a, b = z.re, z.im
    c, d = w.re, w.im

    return Complex(a * c - b * d, a * d + b * c)


def divide(z: Operand, w: Operand) -> Complex:
    """
    z / w by a branch-selected variant of Smith's method.

    The denominator is divided through by its larger-magnitude component
    first. When the ratio underflows to exactly zero the algebraically
    simplified form is used, which avoids forming 0/0.
    """
    z = as_complex(z)
    w = as_complex(w)

    if (is_zero(z) and is_zero(w)) or (is_infinite(z) and is_infinite(w)) or is_nan(z) or is_nan(w):
        return NAN
    if is_infinite(z) or is_zero(w):
        return INFINITY
    if is_zero(z) or is_infinite(w):
        return ZERO

    a, b = z.re, z.im
    c, d = w.re, w.im

    if abs(d) < abs(c):
        r = d / c
        t = 1.0 / (c + d * r)
        if r == 0:
            return Complex((a + d * (b / c)) * t, (b - d * (a / c)) * t)
        return Complex((a + b * r) * t, (b - a * r) * t)

    r = c / d
    t = 1.0 / (c * r + d)
    if r == 0:
        return Complex((c * (a / d) + b) * t, (c * (b / d) - a) * t)
    return Complex((a * r + b) * t, (b * r - a) * t)


def negate(z: Complex) -> Complex:
    """-z."""
    if is_nan(z):
        return NAN
    if is_infinite(z):
        return INFINITY
    if is_zero(z):
        return ZERO

    return Complex(-z.re, -z.im)


def conjugate(z: Complex) -> Complex:
    """Complex conjugate."""
    if is_nan(z):
        return NAN
    if is_infinite(z):
        return INFINITY
    if is_zero(z):
        return ZERO

    return Complex(z.re, -z.im)


def flip(z: Complex) -> Complex:
    """Swap the real and imaginary parts: a + ib becomes b + ia."""
    if is_nan(z):
        return NAN
    if is_infinite(z):
        return INFINITY

    return Complex(z.im, z.re)


def inverse(z: Complex) -> Complex:
    """
    1 / z.

    Written as 1/(a·(1 + (b/a)²)) and -1/(b·(1 + (a/b)²)) so that a² + b²
    is never formed; it overflows long before the components do.
    """
    if is_nan(z):
        return NAN
    if is_infinite(z):
        return ZERO
    if is_zero(z):
        return INFINITY

    a, b = z.re, z.im

    if b == 0:
        return Complex(1.0 / a, 0.0)
    if a == 0:
        return Complex(0.0, -1.0 / b)

    q = b / a
    s = a / b
    return Complex(1.0 / (a * (1.0 + q * q)), -1.0 / (b * (1.0 + s * s)))


def unit(z: Complex) -> Complex:
    """z / |z|, the point on the unit circle with the same phase."""
    if is_nan(z) or is_zero(z):
        return NAN
    if is_infinite(z):
        return INFINITY

    m = modulus(z)

    return Complex(ieee_math.divide(z.re, m), ieee_math.divide(z.im, m))


def equals(z: Operand, w: Operand) -> bool:
    """
    Tolerance-based equality.

    Infinity equals itself; NaN equals nothing. Finite values compare each
    component with the baseline tolerance.
    """
    z = as_complex(z)
    w = as_complex(w)

    if is_infinite(z) and is_infinite(w):
        return True
    if is_nan(z) or is_nan(w):
        return False

    return is_approximately_equal(z.re, w.re, EPSILON) and is_approximately_equal(z.im, w.im, EPSILON)


def not_equals(z: Operand, w: Operand) -> bool:
    return not equals(z, w)


def csum(*values: Operand) -> Complex:
    """
    Sum any number of values.

    No arguments gives Zero, a single argument is returned as is. NaN
    takes precedence over Infinity.
    """
    if not values:
        return ZERO
    if len(values) == 1:
        return as_complex(values[0])

    values = tuple(as_complex(v) for v in values)
    if any(is_nan(v) for v in values):
        return NAN
    if any(is_infinite(v) for v in values):
        return INFINITY

    total = ZERO
    for v in values:
        total = add(total, v)
    return total
