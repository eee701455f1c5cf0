"""Bridges between riemann values and Python / NumPy numbers."""

from .ieee_complex import from_builtin, to_builtin
from .numpy_bridge import (
    ComplexArray,
    code_to_tag,
    count_tags,
    from_numpy,
    from_values,
    tag_array,
    tag_to_code,
    to_numpy,
    validate_array,
)

__all__ = [
    # Scalars
    "from_builtin",
    "to_builtin",
    # Arrays
    "ComplexArray",
    "from_numpy",
    "from_values",
    "to_numpy",
    "tag_array",
    "count_tags",
    "tag_to_code",
    "code_to_tag",
    "validate_array",
]
