"""
NumPy bridge for extended complex values.

Converts NumPy arrays to a tagged representation that stores canonical
``complex128`` values next to a ``uint8`` array of category codes, and
back. Canonicalization matches the scalar constructor: NaN anywhere gives
the NaN sentinel, an infinite part gives the undirected Infinity sentinel.
"""

import logging
import warnings
from typing import Dict, Iterable, Tuple, Union

import numpy as np

from ..core import EPSILON, Complex, ComplexTag, classify, is_infinite, is_nan

logger = logging.getLogger(__name__)

_TAG_CODES = {
    ComplexTag.FINITE: 0,
    ComplexTag.ZERO: 1,
    ComplexTag.INFINITE: 2,
    ComplexTag.NAN: 3,
}
_CODE_TAGS = [ComplexTag.FINITE, ComplexTag.ZERO, ComplexTag.INFINITE, ComplexTag.NAN]


def tag_to_code(tag: ComplexTag) -> int:
    """Convert a category to its uint8 code."""
    return _TAG_CODES[tag]


def code_to_tag(code: int) -> ComplexTag:
    """Convert a uint8 code to its category."""
    return _CODE_TAGS[int(code)]


class ComplexArray:
    """
    Array of extended complex values.

    Stores canonical values and category codes in separate arrays of the
    same shape, similar to a masked array.
    """

    def __init__(self, values: np.ndarray, tags: np.ndarray):
        """
        Initialize from parallel arrays.

        Args:
            values: complex128 array, already canonical
            tags: uint8 category codes
        """
        if values.shape != tags.shape:
            raise ValueError("Values and tags must have same shape")

        self.values = values
        self.tags = tags

    @property
    def shape(self) -> Tuple[int, ...]:
        return self.values.shape

    @property
    def ndim(self) -> int:
        return self.values.ndim

    @property
    def size(self) -> int:
        return self.values.size

    def is_nan(self) -> np.ndarray:
        """Boolean mask of NaN elements."""
        return self.tags == tag_to_code(ComplexTag.NAN)

    def is_infinite(self) -> np.ndarray:
        """Boolean mask of elements at infinity."""
        return self.tags == tag_to_code(ComplexTag.INFINITE)

    def is_zero(self) -> np.ndarray:
        """Boolean mask of zero elements."""
        return self.tags == tag_to_code(ComplexTag.ZERO)

    def is_finite(self) -> np.ndarray:
        """Boolean mask of elements that are neither NaN nor infinite."""
        return ~(self.is_nan() | self.is_infinite())

    def count_tags(self) -> Dict[ComplexTag, int]:
        return {tag: int((self.tags == code).sum()) for tag, code in _TAG_CODES.items()}

    def to_numpy(self) -> np.ndarray:
        return self.values.copy()

    def to_list(self) -> list:
        """Flat list of Complex values in C order."""
        return [Complex(float(v.real), float(v.imag)) for v in self.values.ravel()]

    def __len__(self) -> int:
        return len(self.values)

    def __getitem__(self, key):
        values = self.values[key]
        tags = self.tags[key]

        if np.ndim(values) == 0:
            return Complex(float(np.real(values)), float(np.imag(values)))
        return ComplexArray(values, tags)

    def __repr__(self) -> str:
        return f"ComplexArray(shape={self.shape})"

    def __str__(self) -> str:
        if self.size == 0:
            return "ComplexArray([])"
        if self.ndim == 1 and self.size <= 10:
            return f"ComplexArray([{', '.join(str(z) for z in self.to_list())}])"
        return repr(self)


def validate_array(arr: np.ndarray, name: str = "array") -> None:
    """
    Check that an array holds real or complex numbers.

    Raises:
        TypeError: If the dtype is not numeric (bool and object arrays
            are rejected)
    """
    if not np.issubdtype(arr.dtype, np.number):
        raise TypeError(f"{name} must be numeric, got {arr.dtype}")


def from_numpy(arr: Union[np.ndarray, Iterable], *, warn: bool = True) -> ComplexArray:
    """
    Convert a NumPy array (real or complex) to a ComplexArray.

    Args:
        arr: Array-like of numbers
        warn: Emit a RuntimeWarning when directed infinities are
            collapsed into the point at infinity

    Returns:
        ComplexArray of the same shape
    """
    arr = np.asarray(arr)
    validate_array(arr)

    values = arr.astype(np.complex128, copy=True)
    re = values.real
    im = values.imag

    nan_mask = np.isnan(re) | np.isnan(im)
    inf_mask = ~nan_mask & (np.isinf(re) | np.isinf(im))
    zero_mask = ~nan_mask & ~inf_mask & (np.abs(re) < EPSILON) & (np.abs(im) < EPSILON)

    collapsed = int(np.count_nonzero(inf_mask & ~(np.isposinf(re) & np.isposinf(im))))

    values[nan_mask] = complex(np.nan, np.nan)
    values[inf_mask] = complex(np.inf, np.inf)

    tags = np.full(values.shape, tag_to_code(ComplexTag.FINITE), dtype=np.uint8)
    tags[zero_mask] = tag_to_code(ComplexTag.ZERO)
    tags[inf_mask] = tag_to_code(ComplexTag.INFINITE)
    tags[nan_mask] = tag_to_code(ComplexTag.NAN)

    logger.debug(
        "from_numpy: shape=%s nan=%d infinite=%d collapsed=%d",
        values.shape, int(nan_mask.sum()), int(inf_mask.sum()), collapsed,
    )
    if collapsed and warn:
        warnings.warn(
            f"{collapsed} directed infinities collapsed to the point at infinity",
            RuntimeWarning,
            stacklevel=2,
        )

    return ComplexArray(values, tags)


def from_values(values: Iterable[Complex]) -> ComplexArray:
    """Build a one-dimensional ComplexArray from Complex values."""
    values = list(values)
    out = np.empty(len(values), dtype=np.complex128)
    tags = np.empty(len(values), dtype=np.uint8)
    for k, z in enumerate(values):
        if not isinstance(z, Complex):
            raise TypeError(f"Expected Complex, got {type(z).__name__}")
        out[k] = complex(z.re, z.im)
        tags[k] = tag_to_code(classify(z))
    return ComplexArray(out, tags)


def to_numpy(obj: Union[Complex, ComplexArray, Iterable[Complex]]) -> Union[np.complex128, np.ndarray]:
    """
    Convert Complex values to NumPy.

    Returns:
        np.complex128 for a single value, a complex128 array otherwise
    """
    if isinstance(obj, Complex):
        if is_nan(obj):
            return np.complex128(complex(np.nan, np.nan))
        if is_infinite(obj):
            return np.complex128(complex(np.inf, np.inf))
        return np.complex128(complex(obj.re, obj.im))
    if isinstance(obj, ComplexArray):
        return obj.to_numpy()
    return from_values(obj).to_numpy()


def tag_array(obj: Union[ComplexArray, Iterable[Complex]]) -> np.ndarray:
    """uint8 category codes for each element."""
    if isinstance(obj, ComplexArray):
        return obj.tags.copy()
    return from_values(obj).tags


def count_tags(obj: Union[ComplexArray, Iterable[Complex]]) -> Dict[ComplexTag, int]:
    """
    Count elements by category.

    Returns:
        Dictionary mapping each ComplexTag to its count
    """
    if not isinstance(obj, ComplexArray):
        obj = from_values(obj)
    return obj.count_tags()
