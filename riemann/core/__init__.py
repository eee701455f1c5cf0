"""Core complex value type and the arithmetic and transcendental kernel."""

from .precision_config import EPSILON, PrecisionConfig, PrecisionMode

from .stable import (
    is_approximately_equal,
    stable_add,
    stable_subtract,
)

from .complex_value import (
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
    is_finite,
    pythagoras,
    modulus,
    argument,
)

from .complex_ops import (
    as_complex,
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
)

from .transcendental import exp, log, sqrt, pow, principal

from .trigonometric import (
    sin,
    cos,
    tan,
    cot,
    sec,
    csc,
    sinh,
    cosh,
    tanh,
    coth,
    sech,
    csch,
)

from .inverse_trig import (
    asin,
    acos,
    atan,
    acot,
    asec,
    acsc,
    asinh,
    acosh,
    atanh,
    acoth,
    asech,
    acsch,
)

from .registry import (
    Constant,
    Function,
    CONSTANTS,
    FUNCTIONS,
    UnknownConstantError,
    UnknownFunctionError,
    arity,
    call,
    resolve_constant,
    resolve_function,
)

__all__ = [
    # Precision
    "EPSILON",
    "PrecisionConfig",
    "PrecisionMode",

    # Stable scalars
    "is_approximately_equal",
    "stable_add",
    "stable_subtract",

    # Types
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
    "is_finite",
    "pythagoras",
    "modulus",
    "argument",

    # Arithmetic
    "as_complex",
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

    # Circular and hyperbolic
    "sin", "cos", "tan", "cot", "sec", "csc",
    "sinh", "cosh", "tanh", "coth", "sech", "csch",
    "asin", "acos", "atan", "acot", "asec", "acsc",
    "asinh", "acosh", "atanh", "acoth", "asech", "acsch",

    # Registry
    "Constant",
    "Function",
    "CONSTANTS",
    "FUNCTIONS",
    "UnknownConstantError",
    "UnknownFunctionError",
    "arity",
    "call",
    "resolve_constant",
    "resolve_function",
]
