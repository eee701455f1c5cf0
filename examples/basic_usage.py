"""Basic usage example of the riemann library.

Shows arithmetic on the extended complex plane: a single point at
infinity, a single NaN, and operations that never raise on a value.
"""

import sys
import os
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import math

import riemann as rm


def demonstrate_extended_arithmetic():
    """Show how division by zero and indeterminate forms resolve."""
    print("=== Extended Complex Arithmetic ===\n")

    z = rm.Complex(3, -4)
    w = rm.Complex(1, 2)

    print(f"z = {z}, w = {w}")
    print(f"z + w = {z + w}")
    print(f"z * w = {z * w}")
    print(f"z / w = {z / w}")

    # Division by zero gives the point at infinity
    print(f"\nz / 0 = {z / 0}")
    # Indeterminate forms give NaN
    print(f"0 / 0 = {rm.divide(rm.ZERO, rm.ZERO)}")
    print(f"∞ - ∞ = {rm.INFINITY - rm.INFINITY}")
    print(f"0 × ∞ = {rm.ZERO * rm.INFINITY}")
    # Direction of divergence is not kept
    print(f"Complex(-inf, 0) = {rm.Complex(-math.inf, 0)}")


def demonstrate_transcendental():
    """Show principal values of the transcendental functions."""
    print("\n=== Transcendental Functions ===\n")

    print(f"exp(iπ) = {rm.exp(rm.Complex(0, math.pi))!r}")
    print(f"log(-1) = {rm.log(rm.Complex(-1, 0))!r}")
    print(f"√(-4) = {rm.sqrt(rm.Complex(-4, 0))}")
    print(f"i^i = {rm.pow(rm.I, rm.I)!r}")
    print(f"cube root of 8 = {rm.principal(8, 3)!r}")

    print(f"\n0^0 = {rm.pow(rm.ZERO, rm.ZERO)}")
    print(f"1^∞ = {rm.pow(rm.ONE, rm.INFINITY)}")
    print(f"2^∞ = {rm.pow(2, rm.INFINITY)}")


def demonstrate_trigonometry():
    """Show circular and hyperbolic functions and their inverses."""
    print("\n=== Trigonometry ===\n")

    z = rm.Complex(0.5, 0.3)
    print(f"sin(z) = {rm.sin(z)!r}")
    print(f"asin(sin(z)) = {rm.asin(rm.sin(z))!r}")
    print(f"tanh(z) = {rm.tanh(z)!r}")
    print(f"cot(0) = {rm.cot(rm.ZERO)}")
    print(f"acosh(0) = {rm.acosh(rm.ZERO)!r}")


def demonstrate_registry():
    """Look functions and constants up by name."""
    print("\n=== Named Functions ===\n")

    fn = rm.resolve_function("isPureImaginary")
    print(f"isPureImaginary(i) = {rm.call(fn, rm.I)}")
    print(f"halfPi = {rm.resolve_constant('halfPi')!r}")
    print(f"sum(1, 2, i) = {rm.call(rm.Function.SUM, 1, 2, rm.I)}")


def demonstrate_numpy_bridge():
    """Convert NumPy arrays to tagged arrays."""
    print("\n=== NumPy Bridge ===\n")

    import numpy as np

    arr = np.array([1 + 2j, 0j, complex(np.nan, 0), complex(np.inf, np.inf)])
    values = rm.bridge.from_numpy(arr)
    print(f"values = {values}")
    print(f"tags = {values.tags}")
    print(f"counts = {values.count_tags()}")


def main():
    demonstrate_extended_arithmetic()
    demonstrate_transcendental()
    demonstrate_trigonometry()
    demonstrate_registry()
    demonstrate_numpy_bridge()


if __name__ == "__main__":
    main()
