"""
IEEE-754 scalar math.

Python's ``math`` module raises on overflow and domain errors
(``math.cosh(1000)``, ``math.cos(inf)``, ``1.0 / 0.0``). The kernel is
total, so every real-valued primitive it needs goes through NumPy with
floating-point errors silenced and returns the IEEE result instead:
``inf`` on overflow, ``nan`` on an invalid operation.
"""

import numpy as np


def _f(x) -> float:
    return float(x)


@np.errstate(all="ignore")
def divide(numerator: float, denominator: float) -> float:
    """IEEE division: x/0 gives a signed infinity, 0/0 gives NaN."""
    return _f(np.divide(np.float64(numerator), np.float64(denominator)))


@np.errstate(all="ignore")
def power(base: float, exponent: float) -> float:
    return _f(np.power(np.float64(base), np.float64(exponent)))


@np.errstate(all="ignore")
def exp(x: float) -> float:
    return _f(np.exp(np.float64(x)))


@np.errstate(all="ignore")
def log(x: float) -> float:
    """Natural logarithm; log(0) is -inf and negative input is NaN."""
    return _f(np.log(np.float64(x)))


@np.errstate(all="ignore")
def sqrt(x: float) -> float:
    return _f(np.sqrt(np.float64(x)))


@np.errstate(all="ignore")
def sin(x: float) -> float:
    return _f(np.sin(np.float64(x)))


@np.errstate(all="ignore")
def cos(x: float) -> float:
    return _f(np.cos(np.float64(x)))


@np.errstate(all="ignore")
def sinh(x: float) -> float:
    return _f(np.sinh(np.float64(x)))


@np.errstate(all="ignore")
def cosh(x: float) -> float:
    return _f(np.cosh(np.float64(x)))


@np.errstate(all="ignore")
def hypot(x: float, y: float) -> float:
    """Euclidean norm without intermediate overflow."""
    return _f(np.hypot(np.float64(x), np.float64(y)))


@np.errstate(all="ignore")
def atan2(y: float, x: float) -> float:
    return _f(np.arctan2(np.float64(y), np.float64(x)))
