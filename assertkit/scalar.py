"""
Scalar comparators

Each comparator raises :class:`~assertkit.types.Mismatch` when its predicate
fails and returns None otherwise. Messages follow one layout:

    [file:line] <what went wrong> [type='<type of a>']
"""

from typing import Optional

from .tolerance import almost_equal
from .types import ComparisonTolerance, LocationTag, Mismatch
from .utils import format_float, resolve_location, type_name


def _fail(detail: str, a, loc: Optional[LocationTag]) -> Mismatch:
    loc = resolve_location(loc)
    return Mismatch(f"{loc} {detail} [type='{type_name(a)}']", loc)


def assert_equal(a, b, loc: Optional[LocationTag] = None) -> None:
    """
    Assert ``a == b``

    Args:
        a: observed value
        b: expected value
        loc: location tag for the message
    """
    if not a == b:
        raise _fail(f"values are not equal: {a} {b}", a, loc)


def assert_equal_quiet(a, b, loc: Optional[LocationTag] = None) -> None:
    """Assert ``a == b`` without rendering the values."""
    if not a == b:
        raise _fail("values are not equal.", a, loc)


def assert_lequal(a, b, loc: Optional[LocationTag] = None) -> None:
    """Assert ``a <= b``."""
    if not a <= b:
        raise _fail(f"{a} is greater than {b}", a, loc)


def assert_gequal(a, b, loc: Optional[LocationTag] = None) -> None:
    """Assert ``a >= b``."""
    if not a >= b:
        raise _fail(f"{a} is less than {b}", a, loc)


def assert_almost_equal(
    a,
    b,
    loc: Optional[LocationTag] = None,
    tol: Optional[ComparisonTolerance] = None,
) -> None:
    """
    Assert ``a`` and ``b`` are equal within a tolerance

    Both values are rendered as doubles in the failure message.

    Args:
        a: observed value
        b: expected value
        loc: location tag for the message
        tol: tolerance (default: active configuration)
    """
    if not almost_equal(a, b, tol):
        raise _fail(
            f"values are not approximately equal: {format_float(a)} {format_float(b)}",
            a,
            loc,
        )
