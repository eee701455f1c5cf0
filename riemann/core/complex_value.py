"""
Complex value type over the extended complex plane.

A value is an immutable pair of doubles. Construction canonicalizes the
two special values: any NaN component yields the single NaN sentinel and
any infinite component yields the single undirected Infinity sentinel
(the point at infinity of the Riemann sphere). Every value therefore
falls in exactly one category of :class:`ComplexTag`.
"""

import math
from collections.abc import Mapping
from decimal import Decimal
from enum import Enum
from numbers import Real
from typing import Any, NamedTuple, Tuple, Union

from . import ieee_math
from .precision_config import EPSILON, PrecisionConfig
from .stable import is_approximately_equal


class ComplexTag(Enum):
    """Category of a complex value."""
    NAN = "NAN"            # Indeterminate
    INFINITE = "INFINITE"  # Point at infinity
    ZERO = "ZERO"          # Origin (within tolerance)
    FINITE = "FINITE"      # Finite and nonzero

    def __str__(self) -> str:
        return self.value


class Cartesian(NamedTuple):
    """Cartesian record: ``x`` is the real part, ``y`` the imaginary part."""
    x: float
    y: float


class Polar(NamedTuple):
    """Polar record: modulus ``r`` and argument ``p`` in radians."""
    r: float
    p: float


def _coerce_component(value: Any, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise TypeError(f"{name} must be a real number, got {type(value).__name__}")
    return PrecisionConfig.enforce_precision(value)


def _record_fields(record: Any, fields: Tuple[str, str], kind: str) -> Tuple[float, float]:
    """Pull an exact numeric field pair out of a named tuple or mapping."""
    if isinstance(record, Mapping):
        if set(record.keys()) != set(fields):
            raise TypeError(f"{kind} record must have exactly the fields {fields}, got {tuple(record.keys())}")
        values = tuple(record[f] for f in fields)
    elif getattr(record, "_fields", None) == fields:
        values = tuple(getattr(record, f) for f in fields)
    else:
        raise TypeError(f"Expected a {kind} record with fields {fields}, got {type(record).__name__}")
    return (
        _coerce_component(values[0], f"{kind}.{fields[0]}"),
        _coerce_component(values[1], f"{kind}.{fields[1]}"),
    )


def _format_real(x: float) -> str:
    """
    Shortest round-trip digits, positional for 1e-6 <= |x| < 1e21.

    Outside that range the exponent is written unpadded: ``1e+21``,
    ``1.5e-7``.
    """
    if x == 0:
        return "0"
    sign, digits, exponent = Decimal(repr(x)).normalize().as_tuple()
    digits = "".join(map(str, digits))
    k = len(digits)
    # Position of the decimal point relative to the first digit
    n = exponent + k
    prefix = "-" if sign else ""

    if k <= n <= 21:
        return prefix + digits + "0" * (n - k)
    if 0 < n <= 21:
        return prefix + digits[:n] + "." + digits[n:]
    if -6 < n <= 0:
        return prefix + "0." + "0" * -n + digits

    e = n - 1
    mantissa = digits[0] + ("." + digits[1:] if k > 1 else "")
    return f"{prefix}{mantissa}e{'+' if e > 0 else '-'}{abs(e)}"


class Complex:
    """
    Immutable complex number on the extended plane.

    Construct from components (missing parts default to 0)::

        Complex(1, -1)
        Complex.from_cartesian(Cartesian(1, -3))
        Complex.from_polar(Polar(1, math.pi / 2))
        Complex.from_complex(z)

    Arithmetic operators accept other values and plain reals.
    Equality is tolerance based (see :func:`riemann.core.complex_ops.equals`),
    so values are not hashable.
    """

    __slots__ = ("_re", "_im")

    def __init__(self, re: Real = 0.0, im: Real = 0.0):
        re = _coerce_component(re, "re")
        im = _coerce_component(im, "im")

        if math.isnan(re) or math.isnan(im):
            re = im = math.nan
        elif math.isinf(re) or math.isinf(im):
            re = im = math.inf

        object.__setattr__(self, "_re", re)
        object.__setattr__(self, "_im", im)

    def __setattr__(self, name, value):
        raise AttributeError("Complex values are immutable")

    def __delattr__(self, name):
        raise AttributeError("Complex values are immutable")

    def __reduce__(self):
        return (Complex, (self._re, self._im))

    # ------------------------------------------------------------------
    # Tagged construction
    # ------------------------------------------------------------------

    @classmethod
    def from_components(cls, re: Real = 0.0, im: Real = 0.0) -> "Complex":
        """Create a value from real and imaginary parts."""
        return cls(re, im)

    @classmethod
    def from_complex(cls, z: "Complex") -> "Complex":
        """Create a copy of another value."""
        if not isinstance(z, Complex):
            raise TypeError(f"Expected Complex, got {type(z).__name__}")
        return cls(z._re, z._im)

    @classmethod
    def from_cartesian(cls, c: Union[Cartesian, Mapping[str, Real]]) -> "Complex":
        """Create a value from a Cartesian record ``{x, y}``."""
        x, y = _record_fields(c, Cartesian._fields, "Cartesian")
        return cls(x, y)

    @classmethod
    def from_polar(cls, p: Union[Polar, Mapping[str, Real]]) -> "Complex":
        """Create a value from a Polar record ``{r, p}``."""
        r, phase = _record_fields(p, Polar._fields, "Polar")
        return cls(r * ieee_math.cos(phase), r * ieee_math.sin(phase))

    # ------------------------------------------------------------------
    # Accessors and conversions
    # ------------------------------------------------------------------

    @property
    def re(self) -> float:
        """Real part."""
        return self._re

    @property
    def im(self) -> float:
        """Imaginary part."""
        return self._im

    @property
    def tag(self) -> ComplexTag:
        return classify(self)

    def components(self) -> Tuple[float, float]:
        return self._re, self._im

    def to_cartesian(self) -> Cartesian:
        return Cartesian(self._re, self._im)

    def to_polar(self) -> Polar:
        return Polar(modulus(self), argument(self))

    def __str__(self) -> str:
        if is_nan(self):
            return "NaN"
        if is_infinite(self):
            return "Infinite"
        if is_zero(self):
            return "0"

        if is_real(self):
            return _format_real(self._re)

        negative = math.copysign(1.0, self._im) < 0
        im = f"{_format_real(abs(self._im))} i"
        if self._re == 0:
            return f"-{im}" if negative else im

        sign = " - " if negative else " + "
        return f"{_format_real(self._re)}{sign}{im}"

    def __repr__(self) -> str:
        return f"Complex({self._re!r}, {self._im!r})"

    # ------------------------------------------------------------------
    # Operators
    # ------------------------------------------------------------------

    def __add__(self, other):
        from .complex_ops import add
        if not _is_operand(other):
            return NotImplemented
        return add(self, other)

    def __radd__(self, other):
        from .complex_ops import add
        if not _is_operand(other):
            return NotImplemented
        return add(other, self)

    def __sub__(self, other):
        from .complex_ops import subtract
        if not _is_operand(other):
            return NotImplemented
        return subtract(self, other)

    def __rsub__(self, other):
        from .complex_ops import subtract
        if not _is_operand(other):
            return NotImplemented
        return subtract(other, self)

    def __mul__(self, other):
        from .complex_ops import multiply
        if not _is_operand(other):
            return NotImplemented
        return multiply(self, other)

    def __rmul__(self, other):
        from .complex_ops import multiply
        if not _is_operand(other):
            return NotImplemented
        return multiply(other, self)

    def __truediv__(self, other):
        from .complex_ops import divide
        if not _is_operand(other):
            return NotImplemented
        return divide(self, other)

    def __rtruediv__(self, other):
        from .complex_ops import divide
        if not _is_operand(other):
            return NotImplemented
        return divide(other, self)

    def __pow__(self, other):
        from .transcendental import pow as c_pow
        if not _is_operand(other):
            return NotImplemented
        return c_pow(self, other)

    def __rpow__(self, other):
        from .transcendental import pow as c_pow
        if not _is_operand(other):
            return NotImplemented
        return c_pow(other, self)

    def __neg__(self):
        from .complex_ops import negate
        return negate(self)

    def __pos__(self):
        return self

    def __abs__(self) -> float:
        return modulus(self)

    def __eq__(self, other):
        from .complex_ops import equals
        if not _is_operand(other):
            return NotImplemented
        return equals(self, other)

    def __ne__(self, other):
        from .complex_ops import not_equals
        if not _is_operand(other):
            return NotImplemented
        return not_equals(self, other)

    __hash__ = None


def _is_operand(value: Any) -> bool:
    return isinstance(value, Complex) or (isinstance(value, Real) and not isinstance(value, bool))


# ============================================================================
# Classification
# ============================================================================

def is_nan(z: Complex) -> bool:
    """True when z is the NaN sentinel."""
    return math.isnan(z.re) or math.isnan(z.im)


def is_infinite(z: Complex) -> bool:
    """True when z is the point at infinity. NaN takes precedence."""
    return not is_nan(z) and (math.isinf(z.re) or math.isinf(z.im))


def is_zero(z: Complex) -> bool:
    """True when both parts are zero within the baseline tolerance."""
    return is_approximately_equal(z.re, 0.0, EPSILON) and is_approximately_equal(z.im, 0.0, EPSILON)


def is_real(z: Complex) -> bool:
    """True when the imaginary part is zero within tolerance."""
    return is_approximately_equal(z.im, 0.0, EPSILON)


def is_pure_imaginary(z: Complex) -> bool:
    """True when the real part is zero and the imaginary part is not."""
    return is_approximately_equal(z.re, 0.0, EPSILON) and not is_approximately_equal(z.im, 0.0, EPSILON)


def classify(z: Complex) -> ComplexTag:
    """Place z in exactly one category."""
    if is_nan(z):
        return ComplexTag.NAN
    if is_infinite(z):
        return ComplexTag.INFINITE
    if is_zero(z):
        return ComplexTag.ZERO
    return ComplexTag.FINITE


def is_finite(z: Complex) -> bool:
    """True when z is neither NaN nor the point at infinity."""
    return not is_nan(z) and not is_infinite(z)


# ============================================================================
# Magnitude and phase
# ============================================================================

def pythagoras(z: Complex) -> float:
    """Squared modulus re² + im²."""
    return z.re * z.re + z.im * z.im


def modulus(z: Complex) -> float:
    """Euclidean norm, computed without intermediate overflow."""
    return ieee_math.hypot(z.re, z.im)


def argument(z: Complex) -> float:
    """
    Phase atan2(im, re).

    NaN for the NaN sentinel and +inf for the Infinity sentinel; the
    latter is a convention, not an angle.
    """
    if is_nan(z):
        return math.nan
    if is_infinite(z):
        return math.inf
    return ieee_math.atan2(z.im, z.re)


# ============================================================================
# Named constants
# ============================================================================

ZERO = Complex(0.0, 0.0)
ONE = Complex(1.0, 0.0)
I = Complex(0.0, 1.0)
PI = Complex(math.pi, 0.0)
E = Complex(math.e, 0.0)
HALF_PI = Complex(math.pi / 2, 0.0)
INFINITY = Complex(math.inf, math.inf)
NAN = Complex(math.nan, math.nan)
