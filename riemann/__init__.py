# MIT License
# See LICENSE file in the project root for full license text.
"""
riemann: complex arithmetic on the extended complex plane.

Values are immutable pairs of doubles with a single point at infinity
and a single NaN; every operation is total (never raises on a value
input) and signals divergent or indeterminate results through those two
sentinels.
"""

__version__ = "0.1.0"

# Keep top-level import lightweight: the kernel only. The NumPy array
# bridge is exposed lazily as `riemann.bridge`.
from .core import (
    EPSILON,
    PrecisionConfig,
    Complex,
    ComplexTag,
    Cartesian,
    Polar,
    ZERO,
    ONE,
    I,
    PI,
    E,
    HALF_PI,
    INFINITY,
    NAN,
    classify,
    is_nan,
    is_infinite,
    is_zero,
    is_real,
    is_pure_imaginary,
    pythagoras,
    modulus,
    argument,
    is_approximately_equal,
    stable_add,
    stable_subtract,
    add,
    subtract,
    multiply,
    divide,
    negate,
    conjugate,
    flip,
    inverse,
    unit,
    equals,
    not_equals,
    csum,
    exp,
    log,
    sqrt,
    pow,
    principal,
    sin, cos, tan, cot, sec, csc,
    sinh, cosh, tanh, coth, sech, csch,
    asin, acos, atan, acot, asec, acsc,
    asinh, acosh, atanh, acoth, asech, acsch,
    Constant,
    Function,
    resolve_constant,
    resolve_function,
    call,
)

__all__ = [
    "__version__",
    # Types and precision
    "EPSILON",
    "PrecisionConfig",
    "Complex",
    "ComplexTag",
    "Cartesian",
    "Polar",
    # Constants
    "ZERO",
    "ONE",
    "I",
    "PI",
    "E",
    "HALF_PI",
    "INFINITY",
    "NAN",
    # Classification
    "classify",
    "is_nan",
    "is_infinite",
    "is_zero",
    "is_real",
    "is_pure_imaginary",
    "pythagoras",
    "modulus",
    "argument",
    # Stable scalars
    "is_approximately_equal",
    "stable_add",
    "stable_subtract",
    # Arithmetic
    "add",
    "subtract",
    "multiply",
    "divide",
    "negate",
    "conjugate",
    "flip",
    "inverse",
    "unit",
    "equals",
    "not_equals",
    "csum",
    # Transcendental
    "exp",
    "log",
    "sqrt",
    "pow",
    "principal",
    "sin", "cos", "tan", "cot", "sec", "csc",
    "sinh", "cosh", "tanh", "coth", "sech", "csch",
    "asin", "acos", "atan", "acot", "asec", "acsc",
    "asinh", "acosh", "atanh", "acoth", "asech", "acsch",
    # Registry
    "Constant",
    "Function",
    "resolve_constant",
    "resolve_function",
    "call",
    # Submodules (exposed lazily via __getattr__)
    "bridge",
]


def __getattr__(name):  # Lazy import of the bridge subpackage
    if name == "bridge":
        import importlib

        return importlib.import_module(f"{__name__}.{name}")
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
