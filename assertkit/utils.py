"""Rendering helpers shared by the comparators."""

from typing import Optional

import numpy as np

from .types import UNKNOWN_LOCATION, LocationTag


def resolve_location(loc: Optional[LocationTag]) -> LocationTag:
    """Return ``loc`` or the ``unknown:-1`` placeholder."""
    return UNKNOWN_LOCATION if loc is None else loc


def type_name(value) -> str:
    """
    Name of the value's type as shown in failure messages

    numpy arrays report their dtype, everything else its class name.

    Examples:
        >>> type_name(1.5)
        'float'
        >>> type_name(np.float32(1.5))
        'float32'
        >>> type_name(np.zeros(3, dtype=np.int16))
        'int16'
    """
    if isinstance(value, np.ndarray):
        return str(value.dtype)
    return type(value).__name__


def format_float(value) -> str:
    """
    Render a value as a double-precision float

    Examples:
        >>> format_float(np.float32(0.5))
        '0.5'
        >>> format_float(3)
        '3.0'
    """
    return repr(float(value))
