"""
Inverse circular and hyperbolic functions.

Each is a closed-form composition of log, sqrt and inverse. The
reciprocal variants (asec, acsc, acot, acoth, asech, acsch) and acos are
derived from the primary ones, so they inherit their special cases.
"""

import math

from .complex_ops import inverse, subtract
from .complex_value import HALF_PI, NAN, ZERO, Complex, is_infinite, is_nan, is_zero
from .ieee_math import divide as _div
from .transcendental import log, sqrt


def asin(z: Complex) -> Complex:
    """asin z = -i·ln(iz + √(1 - z²))."""
    if is_nan(z) or is_infinite(z):
        return NAN
    if is_zero(z):
        return ZERO

    a, b = z.re, z.im
    s = sqrt(Complex(1 - a * a + b * b, -2 * a * b))
    l = log(Complex(s.re - b, s.im + a))

    return Complex(l.im, -l.re)


def acos(z: Complex) -> Complex:
    """acos z = π/2 - asin z."""
    return subtract(HALF_PI, asin(z))


def atan(z: Complex) -> Complex:
    """
    atan z = (i/2)·ln((1 - iz)/(1 + iz)).

    The quotient is expanded over the real denominator a² + (1 - b)², so
    no complex division is needed.
    """
    if is_nan(z) or is_infinite(z):
        return NAN
    if is_zero(z):
        return ZERO

    a, b = z.re, z.im
    d = a * a + (1 - b) * (1 - b)
    l = log(Complex(_div(1 - a * a - b * b, d), _div(-2 * a, d)))

    return Complex(-l.im / 2, l.re / 2)


def acot(z: Complex) -> Complex:
    return subtract(HALF_PI, atan(z))


def asec(z: Complex) -> Complex:
    return acos(inverse(z))


def acsc(z: Complex) -> Complex:
    return asin(inverse(z))


def asinh(z: Complex) -> Complex:
    """asinh z = ln(z + √(z² + 1))."""
    if is_nan(z) or is_infinite(z):
        return NAN
    if is_zero(z):
        return ZERO

    a, b = z.re, z.im
    s = sqrt(Complex(a * a - b * b + 1, 2 * a * b))

    return log(Complex(s.re + a, s.im + b))


def acosh(z: Complex) -> Complex:
    """acosh z = ln(z + √(z² - 1)); acosh 0 = iπ/2."""
    if is_nan(z) or is_infinite(z):
        return NAN
    if is_zero(z):
        return Complex(0.0, math.pi / 2)

    a, b = z.re, z.im
    s = sqrt(Complex(a * a - b * b - 1, 2 * a * b))

    return log(Complex(s.re + a, s.im + b))


def atanh(z: Complex) -> Complex:
    """atanh z = ½·ln((1 + z)/(1 - z)), expanded over (1 - a)² + b²."""
    if is_nan(z) or is_infinite(z):
        return NAN
    if is_zero(z):
        return ZERO

    a, b = z.re, z.im
    d = (1 - a) * (1 - a) + b * b
    l = log(Complex(_div(1 - a * a - b * b, d), _div(2 * b, d)))

    return Complex(l.re / 2, l.im / 2)


def acoth(z: Complex) -> Complex:
    return atanh(inverse(z))


def asech(z: Complex) -> Complex:
    return acosh(inverse(z))


def acsch(z: Complex) -> Complex:
    return asinh(inverse(z))
