"""Unit tests for the Complex value type and its classifier."""

import copy
import math
import pickle

import pytest
from hypothesis import given, strategies as st

from riemann.core import (
    E,
    HALF_PI,
    I,
    INFINITY,
    NAN,
    ONE,
    PI,
    ZERO,
    Cartesian,
    Complex,
    ComplexTag,
    Polar,
    argument,
    classify,
    is_infinite,
    is_nan,
    is_pure_imaginary,
    is_real,
    is_zero,
    modulus,
    pythagoras,
)


class TestComplexCreation:
    """Test construction and canonicalization."""

    def test_defaults(self):
        z = Complex()
        assert z.re == 0.0 and z.im == 0.0
        assert Complex(3).components() == (3.0, 0.0)
        assert Complex(3, -4).components() == (3.0, -4.0)

    def test_components_are_floats(self):
        z = Complex(1, 2)
        assert isinstance(z.re, float)
        assert isinstance(z.im, float)

    @pytest.mark.parametrize("re,im", [
        (math.nan, 0.0), (0.0, math.nan), (math.nan, 3.0), (math.nan, math.inf), (math.inf, math.nan),
    ])
    def test_nan_canonicalized(self, re, im):
        z = Complex(re, im)
        assert math.isnan(z.re) and math.isnan(z.im)
        assert z.tag == ComplexTag.NAN

    @pytest.mark.parametrize("re,im", [
        (math.inf, 0.0), (0.0, math.inf), (-math.inf, 0.0), (-math.inf, -math.inf), (5.0, -math.inf),
    ])
    def test_infinity_canonicalized(self, re, im):
        """Direction of divergence is discarded."""
        z = Complex(re, im)
        assert z.re == math.inf and z.im == math.inf
        assert z.tag == ComplexTag.INFINITE

    @pytest.mark.parametrize("re,im", [(10**400, 0), (0, -10**400), (-10**400, 5)])
    def test_huge_integers_become_infinity(self, re, im):
        z = Complex(re, im)
        assert z.tag == ComplexTag.INFINITE
        assert z.components() == (math.inf, math.inf)

    def test_rejects_non_real(self):
        with pytest.raises(TypeError):
            Complex("1")
        with pytest.raises(TypeError):
            Complex(1, None)
        with pytest.raises(TypeError):
            Complex(True)
        with pytest.raises(TypeError):
            Complex(1 + 2j)

    def test_copy_constructor(self):
        z = Complex(1.5, -2.5)
        w = Complex.from_complex(z)
        assert w is not z
        assert w.components() == z.components()
        assert Complex.from_complex(NAN).tag == ComplexTag.NAN
        assert Complex.from_complex(INFINITY).tag == ComplexTag.INFINITE
        with pytest.raises(TypeError):
            Complex.from_complex((1, 2))

    def test_from_components(self):
        assert Complex.from_components(2, 3).components() == (2.0, 3.0)
        assert Complex.from_components().components() == (0.0, 0.0)

    def test_from_cartesian(self):
        assert Complex.from_cartesian(Cartesian(1, -3)).components() == (1.0, -3.0)
        assert Complex.from_cartesian({"x": -5, "y": 2}).components() == (-5.0, 2.0)

    def test_from_cartesian_rejects_wrong_shape(self):
        with pytest.raises(TypeError):
            Complex.from_cartesian({"x": 1})
        with pytest.raises(TypeError):
            Complex.from_cartesian({"x": 1, "y": 2, "z": 3})
        with pytest.raises(TypeError):
            Complex.from_cartesian(Polar(1, 2))
        with pytest.raises(TypeError):
            Complex.from_cartesian({"x": "1", "y": 2})

    def test_from_polar(self):
        z = Complex.from_polar(Polar(2, math.pi / 2))
        assert z.re == pytest.approx(0.0, abs=1e-15)
        assert z.im == pytest.approx(2.0)

        w = Complex.from_polar({"r": 1, "p": math.pi})
        assert w.re == pytest.approx(-1.0)
        assert w.im == pytest.approx(0.0, abs=1e-15)

    def test_from_polar_zero_radius(self):
        assert Complex.from_polar(Polar(0, 1.234)).tag == ComplexTag.ZERO

    def test_from_polar_infinite_phase_is_nan(self):
        assert Complex.from_polar(Polar(1, math.inf)).tag == ComplexTag.NAN

    def test_from_polar_rejects_cartesian(self):
        with pytest.raises(TypeError):
            Complex.from_polar(Cartesian(1, 2))

    def test_immutable(self):
        z = Complex(1, 2)
        with pytest.raises(AttributeError):
            z.re = 5
        with pytest.raises(AttributeError):
            z._im = 5
        with pytest.raises(AttributeError):
            del z._re

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(Complex(1, 2))

    def test_pickle_and_copy(self):
        z = Complex(1.25, -0.5)
        assert pickle.loads(pickle.dumps(z)).components() == z.components()
        assert copy.deepcopy(z).components() == z.components()


class TestConstants:
    """Test the named constants."""

    def test_values(self):
        assert ZERO.components() == (0.0, 0.0)
        assert ONE.components() == (1.0, 0.0)
        assert I.components() == (0.0, 1.0)
        assert PI.components() == (math.pi, 0.0)
        assert E.components() == (math.e, 0.0)
        assert HALF_PI.components() == (math.pi / 2, 0.0)
        assert INFINITY.tag == ComplexTag.INFINITE
        assert NAN.tag == ComplexTag.NAN

    def test_value_equality_not_identity(self):
        assert Complex(1, 0) == ONE
        assert Complex(1, 0) is not ONE
        assert Complex(math.inf, 0) == INFINITY


class TestClassification:
    """Test predicates and the category partition."""

    def test_is_zero_tolerance(self):
        assert is_zero(ZERO)
        assert is_zero(Complex(1e-17, -1e-17))
        assert not is_zero(Complex(1e-10, 0))
        assert not is_zero(NAN)
        assert not is_zero(INFINITY)

    def test_is_real(self):
        assert is_real(Complex(3, 0))
        assert is_real(Complex(3, 1e-17))
        assert not is_real(Complex(3, 1e-10))
        assert not is_real(NAN)
        assert not is_real(INFINITY)

    def test_is_pure_imaginary(self):
        assert is_pure_imaginary(I)
        assert is_pure_imaginary(Complex(1e-17, -2))
        assert not is_pure_imaginary(ZERO)
        assert not is_pure_imaginary(Complex(1, 1))
        assert not is_pure_imaginary(NAN)

    def test_nan_precedes_infinite(self):
        assert is_nan(NAN)
        assert not is_infinite(NAN)
        assert is_infinite(INFINITY)
        assert not is_nan(INFINITY)

    @given(
        st.one_of(st.floats(), st.integers(min_value=-10**6, max_value=10**6)),
        st.one_of(st.floats(), st.integers(min_value=-10**6, max_value=10**6)),
    )
    def test_partition(self, re, im):
        """Property: every value lies in exactly one category."""
        z = Complex(re, im)
        memberships = [is_nan(z), is_infinite(z), is_zero(z), classify(z) == ComplexTag.FINITE]
        assert sum(memberships) == 1


class TestMagnitudeAndPhase:
    """Test modulus, pythagoras and argument."""

    def test_pythagoras(self):
        assert pythagoras(Complex(3, 4)) == 25.0

    def test_modulus(self):
        assert modulus(Complex(3, 4)) == 5.0
        assert modulus(Complex(1e200, 1e200)) == pytest.approx(math.sqrt(2) * 1e200)
        assert abs(Complex(-3, 4)) == 5.0

    def test_argument(self):
        assert argument(Complex(1, 1)) == pytest.approx(math.pi / 4)
        assert argument(Complex(-1, 0)) == pytest.approx(math.pi)
        assert argument(Complex(0, -1)) == pytest.approx(-math.pi / 2)
        assert argument(ZERO) == 0.0

    def test_argument_sentinels(self):
        assert math.isnan(argument(NAN))
        assert argument(INFINITY) == math.inf


class TestConversions:
    """Test Cartesian and Polar conversions."""

    def test_to_cartesian(self):
        assert Complex(3, 4).to_cartesian() == Cartesian(3.0, 4.0)
        assert Complex(3, 4).to_cartesian() == (3.0, 4.0)
        inf = INFINITY.to_cartesian()
        assert inf.x == math.inf and inf.y == math.inf

    def test_to_polar(self):
        p = Complex(1, 1).to_polar()
        assert p.r == pytest.approx(math.sqrt(2))
        assert p.p == pytest.approx(math.pi / 4)
        assert ZERO.to_polar() == Polar(0.0, 0.0)
        assert ONE.to_polar() == Polar(1.0, 0.0)

    @given(
        st.floats(min_value=-1e6, max_value=1e6, allow_nan=False, allow_infinity=False),
        st.floats(min_value=-1e6, max_value=1e6, allow_nan=False, allow_infinity=False),
    )
    def test_cartesian_round_trip_exact(self, re, im):
        z = Complex(re, im)
        assert Complex.from_cartesian(z.to_cartesian()).components() == z.components()


class TestStringRendering:
    """Test str() and repr()."""

    def test_sentinels(self):
        assert str(ZERO) == "0"
        assert str(NAN) == "NaN"
        assert str(INFINITY) == "Infinite"

    def test_real(self):
        assert str(ONE) == "1"
        assert str(Complex(5, 0)) == "5"
        assert str(Complex(-3, 0)) == "-3"
        assert str(Complex(2.5, 0)) == "2.5"

    def test_pure_imaginary(self):
        assert str(I) == "1 i"
        assert str(Complex(0, 5)) == "5 i"
        assert str(Complex(0, -3)) == "-3 i"

    def test_both_parts(self):
        assert str(Complex(3, 4)) == "3 + 4 i"
        assert str(Complex(-2, 5)) == "-2 + 5 i"
        assert str(Complex(3, -4)) == "3 - 4 i"
        assert str(Complex(-2, -5)) == "-2 - 5 i"

    def test_fractional_and_small(self):
        assert str(Complex(0.1, 0.2)) == "0.1 + 0.2 i"
        assert str(Complex(1000, 2000)) == "1000 + 2000 i"
        assert str(Complex(1e-10, 2e-10)) == "1e-10 + 2e-10 i"

    def test_large_and_tiny_magnitudes(self):
        assert str(Complex(1e16, 0)) == "10000000000000000"
        assert str(Complex(2**60, 0)) == "1152921504606847000"
        assert str(Complex(1e21, 0)) == "1e+21"
        assert str(Complex(1.5e22, -3)) == "1.5e+22 - 3 i"
        assert str(Complex(1e-6, 1)) == "0.000001 + 1 i"
        assert str(Complex(1.5e-7, 1)) == "1.5e-7 + 1 i"
        assert str(Complex(-123.456, 0)) == "-123.456"

    def test_repr(self):
        assert repr(Complex(1, -2)) == "Complex(1.0, -2.0)"
