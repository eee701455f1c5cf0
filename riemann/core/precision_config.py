"""
Precision configuration for riemann.

All values are IEEE-754 double-precision pairs. This module reads the
limits of that type from NumPy once and exposes them through a small
classmethod-only configuration object. The baseline tolerance is fixed:
callers wanting a looser comparison pass their own epsilon explicitly.
"""

import logging
import math
from enum import Enum
from numbers import Real
from typing import Type, Union

import numpy as np

logger = logging.getLogger(__name__)


class PrecisionMode(Enum):
    """Supported precision modes."""
    FLOAT64 = np.float64

    @property
    def numpy_dtype(self):
        """Get the numpy dtype for this precision."""
        return self.value

    @property
    def bits(self) -> int:
        """Get the number of bits for this precision."""
        return np.dtype(self.value).itemsize * 8


class PrecisionConfig:
    """
    Read-only precision configuration.

    riemann always computes in float64; the mode is exposed so callers
    (and the NumPy bridge) can ask for the dtype instead of hardcoding it.
    """

    _mode: PrecisionMode = PrecisionMode.FLOAT64

    @classmethod
    def get_precision(cls) -> PrecisionMode:
        """Get the precision mode."""
        return cls._mode

    @classmethod
    def get_dtype(cls) -> Type[np.floating]:
        """Get the numpy dtype for the precision mode."""
        return cls._mode.numpy_dtype

    @classmethod
    def enforce_precision(cls, value: Union[Real, np.floating]) -> float:
        """
        Convert a real value to the working precision.

        Args:
            value: Python or NumPy real number

        Returns:
            Value as a Python float, signed infinity beyond the double range
        """
        if cls.check_overflow(value):
            # Ints and fractions past the double range convert with OverflowError.
            return math.inf if value > 0 else -math.inf
        return float(cls.get_dtype()(value))

    @classmethod
    def check_overflow(cls, value: Real) -> bool:
        """
        Check if a value overflows the working precision.

        Args:
            value: Value to check

        Returns:
            True if value is beyond the largest finite double
        """
        return abs(value) > cls.get_max()

    @classmethod
    def get_epsilon(cls) -> float:
        """Get machine epsilon for the working precision."""
        return float(np.finfo(cls.get_dtype()).eps)

    @classmethod
    def get_max(cls) -> float:
        """Get maximum representable value."""
        return float(np.finfo(cls.get_dtype()).max)


# Baseline tolerance shared by every approximate comparison in the kernel.
EPSILON: float = PrecisionConfig.get_epsilon()

logger.debug("riemann precision %s, epsilon=%r", PrecisionConfig.get_precision().name, EPSILON)
