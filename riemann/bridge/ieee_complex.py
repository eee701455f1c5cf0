"""Scalar bridge between Python's builtin ``complex`` and riemann values."""

import cmath
import logging
import math
from numbers import Real
from typing import Union

from ..core import INFINITY, NAN, Complex, PrecisionConfig, is_infinite, is_nan

logger = logging.getLogger(__name__)


def from_builtin(x: Union[complex, Real]) -> Complex:
    """
    Convert a builtin complex (or real) number to a Complex value.

    Any NaN part gives the NaN sentinel; any infinite part gives the
    undirected Infinity sentinel, so the direction of ``complex(-inf, 0)``
    is not preserved.

    Raises:
        TypeError: If x is not a number
    """
    if isinstance(x, bool) or not isinstance(x, (complex, Real)):
        raise TypeError(f"Expected a complex or real number, got {type(x).__name__}")
    if isinstance(x, Real):
        x = complex(PrecisionConfig.enforce_precision(x), 0.0)
    else:
        x = complex(x)
    if cmath.isnan(x):
        return NAN
    if cmath.isinf(x):
        if not (math.isinf(x.real) and x.real > 0 and math.isinf(x.imag) and x.imag > 0):
            logger.debug("Collapsing directed infinity %r to the point at infinity", x)
        return INFINITY
    return Complex(x.real, x.imag)


def to_builtin(z: Complex) -> complex:
    """
    Convert a Complex value to a builtin complex.

    The sentinels map to ``complex(nan, nan)`` and ``complex(inf, inf)``.
    """
    if is_nan(z):
        return complex(math.nan, math.nan)
    if is_infinite(z):
        return complex(math.inf, math.inf)
    return complex(z.re, z.im)
