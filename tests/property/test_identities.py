"""Property-based tests for algebraic identities and totality."""

import math

from hypothesis import assume, given, settings, strategies as st
from hypothesis.strategies import composite

from riemann.core import (
    FUNCTIONS,
    ONE,
    Complex,
    ComplexTag,
    Function,
    add,
    arity,
    classify,
    cos,
    divide,
    equals,
    exp,
    inverse,
    is_zero,
    log,
    modulus,
    multiply,
    sin,
    subtract,
    tan,
)


@composite
def moderate_complex(draw, bound=10.0):
    """Generate finite values with components in [-bound, bound]."""
    re = draw(st.floats(min_value=-bound, max_value=bound, allow_nan=False, allow_infinity=False))
    im = draw(st.floats(min_value=-bound, max_value=bound, allow_nan=False, allow_infinity=False))
    return Complex(re, im)


@composite
def any_complex(draw):
    """Generate any value, sentinels included."""
    return Complex(draw(st.floats()), draw(st.floats()))


def _close(z, w, tol):
    scale = max(1.0, modulus(w))
    return abs(z.re - w.re) <= tol * scale and abs(z.im - w.im) <= tol * scale


class TestArithmeticIdentities:
    """Field identities hold up to rounding."""

    @given(any_complex(), any_complex())
    def test_addition_commutes(self, z, w):
        assert classify(add(z, w)) == classify(add(w, z))
        if classify(add(z, w)) not in (ComplexTag.NAN, ComplexTag.INFINITE):
            assert add(z, w).components() == add(w, z).components()

    @given(moderate_complex(), moderate_complex())
    def test_multiplication_commutes(self, z, w):
        assert _close(multiply(z, w), multiply(w, z), 1e-15)

    @given(moderate_complex(), moderate_complex())
    def test_subtract_then_add(self, z, w):
        assert _close(add(subtract(z, w), w), z, 1e-14)

    @given(moderate_complex(), moderate_complex())
    def test_divide_then_multiply(self, z, w):
        assume(modulus(w) > 1e-3)
        assert _close(multiply(divide(z, w), w), z, 1e-13)

    @given(moderate_complex())
    def test_reciprocal(self, z):
        assume(modulus(z) > 1e-3)
        assert _close(multiply(z, inverse(z)), ONE, 1e-14)
        assert _close(inverse(z), divide(ONE, z), 1e-14)


class TestRepresentations:
    """Polar and exponential forms agree with the Cartesian one."""

    @given(moderate_complex(bound=1e6))
    def test_polar_round_trip(self, z):
        assume(not is_zero(z))
        assert _close(Complex.from_polar(z.to_polar()), z, 1e-14)

    @given(moderate_complex(bound=5.0))
    def test_log_of_exp(self, z):
        assume(abs(z.im) < 3.0)
        assert _close(log(exp(z)), z, 1e-12)


class TestTrigIdentities:
    """Pythagorean and quotient identities away from poles."""

    @given(moderate_complex(bound=3.0))
    def test_pythagorean(self, z):
        s, c = sin(z), cos(z)
        assert _close(add(multiply(s, s), multiply(c, c)), ONE, 1e-12)

    @given(moderate_complex(bound=3.0))
    def test_tan_is_sin_over_cos(self, z):
        c = cos(z)
        assume(modulus(c) > 0.1)
        assert _close(tan(z), divide(sin(z), c), 1e-12)


class TestTotality:
    """No operation raises on a value input."""

    @settings(max_examples=50)
    @given(any_complex(), any_complex())
    def test_every_registered_function(self, z, w):
        for fn, impl in FUNCTIONS.items():
            if fn is Function.PRINCIPAL:
                result = impl(z, 3)
            elif arity(fn) == 2:
                result = impl(z, w)
            elif arity(fn) is None:
                result = impl(z, w, z)
            else:
                result = impl(z)
            assert isinstance(result, (Complex, bool, float))

    @given(any_complex())
    def test_equality_is_reflexive_except_nan(self, z):
        if classify(z) == ComplexTag.NAN:
            assert not equals(z, z)
        else:
            assert equals(z, z)
        assert not math.isnan(modulus(z)) or classify(z) == ComplexTag.NAN
