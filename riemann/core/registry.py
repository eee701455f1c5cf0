"""
Enum-keyed dispatch tables for the named functions and constants.

Expression evaluators bind against these tables instead of looking
attributes up dynamically. Names resolve case-insensitively and in both
camelCase (``isPureImaginary``) and snake_case (``is_pure_imaginary``).
"""

import logging
import re
from enum import Enum
from typing import Callable, Dict, Optional

from . import complex_ops, complex_value, inverse_trig, transcendental, trigonometric
from .complex_value import Complex

logger = logging.getLogger(__name__)


class UnknownFunctionError(KeyError):
    """Raised when a function name does not resolve."""


class UnknownConstantError(KeyError):
    """Raised when a constant name does not resolve."""


class Function(Enum):
    """Named operations and functions."""
    # Arithmetic
    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"
    SUM = "sum"
    NEGATE = "negate"
    CONJUGATE = "conjugate"
    INVERSE = "inverse"
    UNIT = "unit"
    FLIP = "flip"
    EQUALS = "equals"
    NOT_EQUALS = "not_equals"
    # Magnitude and phase
    MODULUS = "modulus"
    PYTHAGORAS = "pythagoras"
    ARGUMENT = "argument"
    # Predicates
    IS_ZERO = "is_zero"
    IS_REAL = "is_real"
    IS_PURE_IMAGINARY = "is_pure_imaginary"
    IS_INFINITE = "is_infinite"
    IS_NAN = "is_nan"
    # Transcendental
    EXP = "exp"
    LOG = "log"
    SQRT = "sqrt"
    POW = "pow"
    PRINCIPAL = "principal"
    # Circular
    SIN = "sin"
    COS = "cos"
    TAN = "tan"
    COT = "cot"
    SEC = "sec"
    CSC = "csc"
    ASIN = "asin"
    ACOS = "acos"
    ATAN = "atan"
    ACOT = "acot"
    ASEC = "asec"
    ACSC = "acsc"
    # Hyperbolic
    SINH = "sinh"
    COSH = "cosh"
    TANH = "tanh"
    COTH = "coth"
    SECH = "sech"
    CSCH = "csch"
    ASINH = "asinh"
    ACOSH = "acosh"
    ATANH = "atanh"
    ACOTH = "acoth"
    ASECH = "asech"
    ACSCH = "acsch"


class Constant(Enum):
    """Named constants."""
    ZERO = "zero"
    ONE = "one"
    I = "i"
    PI = "pi"
    E = "e"
    HALF_PI = "half_pi"
    INFINITY = "infinity"
    NAN = "nan"


FUNCTIONS: Dict[Function, Callable] = {
    Function.ADD: complex_ops.add,
    Function.SUBTRACT: complex_ops.subtract,
    Function.MULTIPLY: complex_ops.multiply,
    Function.DIVIDE: complex_ops.divide,
    Function.SUM: complex_ops.csum,
    Function.NEGATE: complex_ops.negate,
    Function.CONJUGATE: complex_ops.conjugate,
    Function.INVERSE: complex_ops.inverse,
    Function.UNIT: complex_ops.unit,
    Function.FLIP: complex_ops.flip,
    Function.EQUALS: complex_ops.equals,
    Function.NOT_EQUALS: complex_ops.not_equals,
    Function.MODULUS: complex_value.modulus,
    Function.PYTHAGORAS: complex_value.pythagoras,
    Function.ARGUMENT: complex_value.argument,
    Function.IS_ZERO: complex_value.is_zero,
    Function.IS_REAL: complex_value.is_real,
    Function.IS_PURE_IMAGINARY: complex_value.is_pure_imaginary,
    Function.IS_INFINITE: complex_value.is_infinite,
    Function.IS_NAN: complex_value.is_nan,
    Function.EXP: transcendental.exp,
    Function.LOG: transcendental.log,
    Function.SQRT: transcendental.sqrt,
    Function.POW: transcendental.pow,
    Function.PRINCIPAL: transcendental.principal,
    Function.SIN: trigonometric.sin,
    Function.COS: trigonometric.cos,
    Function.TAN: trigonometric.tan,
    Function.COT: trigonometric.cot,
    Function.SEC: trigonometric.sec,
    Function.CSC: trigonometric.csc,
    Function.ASIN: inverse_trig.asin,
    Function.ACOS: inverse_trig.acos,
    Function.ATAN: inverse_trig.atan,
    Function.ACOT: inverse_trig.acot,
    Function.ASEC: inverse_trig.asec,
    Function.ACSC: inverse_trig.acsc,
    Function.SINH: trigonometric.sinh,
    Function.COSH: trigonometric.cosh,
    Function.TANH: trigonometric.tanh,
    Function.COTH: trigonometric.coth,
    Function.SECH: trigonometric.sech,
    Function.CSCH: trigonometric.csch,
    Function.ASINH: inverse_trig.asinh,
    Function.ACOSH: inverse_trig.acosh,
    Function.ATANH: inverse_trig.atanh,
    Function.ACOTH: inverse_trig.acoth,
    Function.ASECH: inverse_trig.asech,
    Function.ACSCH: inverse_trig.acsch,
}

CONSTANTS: Dict[Constant, Complex] = {
    Constant.ZERO: complex_value.ZERO,
    Constant.ONE: complex_value.ONE,
    Constant.I: complex_value.I,
    Constant.PI: complex_value.PI,
    Constant.E: complex_value.E,
    Constant.HALF_PI: complex_value.HALF_PI,
    Constant.INFINITY: complex_value.INFINITY,
    Constant.NAN: complex_value.NAN,
}

_BINARY = frozenset({
    Function.ADD,
    Function.SUBTRACT,
    Function.MULTIPLY,
    Function.DIVIDE,
    Function.EQUALS,
    Function.NOT_EQUALS,
    Function.POW,
    Function.PRINCIPAL,
})

# Accepted spellings beyond the canonical snake_case value.
_ALIASES = {
    "is_na_n": Function.IS_NAN,
    "is_na_nc": Function.IS_NAN,
    "halfpi": Constant.HALF_PI,
    "na_n": Constant.NAN,
}


def arity(fn: Function) -> Optional[int]:
    """Number of arguments fn takes, or None when variadic."""
    if fn is Function.SUM:
        return None
    return 2 if fn in _BINARY else 1


def _normalize(name: str) -> str:
    snake = re.sub(r"(?<=[a-z0-9])([A-Z])", r"_\1", name.strip())
    return snake.lower()


def resolve_function(name: str) -> Function:
    """
    Look up a function by name.

    Raises:
        UnknownFunctionError: If the name matches no function
    """
    key = _normalize(name)
    try:
        fn = Function(key)
    except ValueError:
        alias = _ALIASES.get(key)
        if not isinstance(alias, Function):
            logger.debug("Unresolved function name %r", name)
            raise UnknownFunctionError(f"Unknown function: {name}") from None
        fn = alias
    logger.debug("Resolved function %r -> %s", name, fn.name)
    return fn


def resolve_constant(name: str) -> Complex:
    """
    Look up a constant value by name.

    Raises:
        UnknownConstantError: If the name matches no constant
    """
    key = _normalize(name)
    try:
        const = Constant(key)
    except ValueError:
        alias = _ALIASES.get(key)
        if not isinstance(alias, Constant):
            logger.debug("Unresolved constant name %r", name)
            raise UnknownConstantError(f"Unknown constant: {name}") from None
        const = alias
    return CONSTANTS[const]


def call(fn: Function, *args):
    """
    Apply a registered function.

    Raises:
        TypeError: If the number of arguments does not match the arity
    """
    expected = arity(fn)
    if expected is not None and len(args) != expected:
        raise TypeError(f"{fn.value} takes {expected} argument(s), got {len(args)}")
    return FUNCTIONS[fn](*args)
