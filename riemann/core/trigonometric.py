"""
Circular and hyperbolic functions.

Every function is NaN on the NaN and Infinity sentinels and returns an
exact constant at the origin. The quotient functions (tan, cot, sec, csc
and their hyperbolic counterparts) are rewritten over doubled arguments
so that the denominator is a sum or difference of a cos and a cosh term,
formed with the stable scalar helpers. For example::

    tan(a + ib) = (sin 2a + i·sinh 2b) / (cos 2a + cosh 2b)
"""

from .complex_value import INFINITY, NAN, ONE, ZERO, Complex, is_infinite, is_nan, is_zero
from .ieee_math import cos as _cos
from .ieee_math import cosh as _cosh
from .ieee_math import divide as _div
from .ieee_math import sin as _sin
from .ieee_math import sinh as _sinh
from .stable import stable_add, stable_subtract


def _special(z: Complex, at_zero: Complex):
    if is_nan(z) or is_infinite(z):
        return NAN
    if is_zero(z):
        return at_zero
    return None


# ============================================================================
# Circular
# ============================================================================

def sin(z: Complex) -> Complex:
    """sin(a + ib) = sin a·cosh b + i·cos a·sinh b."""
    special = _special(z, ZERO)
    if special is not None:
        return special

    a, b = z.re, z.im
    return Complex(_sin(a) * _cosh(b), _cos(a) * _sinh(b))


def cos(z: Complex) -> Complex:
    """cos(a + ib) = cos a·cosh b - i·sin a·sinh b."""
    special = _special(z, ONE)
    if special is not None:
        return special

    a, b = z.re, z.im
    return Complex(_cos(a) * _cosh(b), -_sin(a) * _sinh(b))


def tan(z: Complex) -> Complex:
    special = _special(z, ZERO)
    if special is not None:
        return special

    a2, b2 = 2 * z.re, 2 * z.im
    d = stable_add(_cos(a2), _cosh(b2))
    return Complex(_div(_sin(a2), d), _div(_sinh(b2), d))


def cot(z: Complex) -> Complex:
    special = _special(z, INFINITY)
    if special is not None:
        return special

    a2, b2 = 2 * z.re, 2 * z.im
    d = stable_subtract(_cosh(b2), _cos(a2))
    return Complex(_div(_sin(a2), d), _div(-_sinh(b2), d))


def sec(z: Complex) -> Complex:
    special = _special(z, ONE)
    if special is not None:
        return special

    a, b = z.re, z.im
    d = stable_add(_cos(2 * a), _cosh(2 * b))
    return Complex(_div(2 * _cos(a) * _cosh(b), d), _div(2 * _sin(a) * _sinh(b), d))


def csc(z: Complex) -> Complex:
    special = _special(z, INFINITY)
    if special is not None:
        return special

    a, b = z.re, z.im
    d = stable_subtract(_cosh(2 * b), _cos(2 * a))
    return Complex(_div(2 * _sin(a) * _cosh(b), d), _div(-2 * _cos(a) * _sinh(b), d))


# ============================================================================
# Hyperbolic
# ============================================================================

def sinh(z: Complex) -> Complex:
    """sinh(a + ib) = sinh a·cos b + i·cosh a·sin b."""
    special = _special(z, ZERO)
    if special is not None:
        return special

    a, b = z.re, z.im
    return Complex(_sinh(a) * _cos(b), _cosh(a) * _sin(b))


def cosh(z: Complex) -> Complex:
    """cosh(a + ib) = cosh a·cos b + i·sinh a·sin b."""
    special = _special(z, ONE)
    if special is not None:
        return special

    a, b = z.re, z.im
    return Complex(_cosh(a) * _cos(b), _sinh(a) * _sin(b))


def tanh(z: Complex) -> Complex:
    special = _special(z, ZERO)
    if special is not None:
        return special

    a2, b2 = 2 * z.re, 2 * z.im
    d = stable_add(_cosh(a2), _cos(b2))
    return Complex(_div(_sinh(a2), d), _div(_sin(b2), d))


def coth(z: Complex) -> Complex:
    special = _special(z, INFINITY)
    if special is not None:
        return special

    a2, b2 = 2 * z.re, 2 * z.im
    d = stable_subtract(_cos(b2), _cosh(a2))
    return Complex(_div(-_sinh(a2), d), _div(_sin(b2), d))


def sech(z: Complex) -> Complex:
    special = _special(z, ONE)
    if special is not None:
        return special

    a, b = z.re, z.im
    d = stable_add(_cosh(2 * a), _cos(2 * b))
    return Complex(_div(2 * _cosh(a) * _cos(b), d), _div(-2 * _sinh(a) * _sin(b), d))


def csch(z: Complex) -> Complex:
    special = _special(z, INFINITY)
    if special is not None:
        return special

    a, b = z.re, z.im
    d = stable_subtract(_cos(2 * b), _cosh(2 * a))
    return Complex(_div(-2 * _sinh(a) * _cos(b), d), _div(2 * _cosh(a) * _sin(b), d))
