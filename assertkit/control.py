"""Control-flow assertions: expected exceptions and known failures."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Callable, Iterator, Optional, Tuple, Type, Union

from assertkit.types import KnownFailure, LocationTag, Mismatch
from assertkit.utils import resolve_location

ExceptionKinds = Union[Type[BaseException], Tuple[Type[BaseException], ...]]


def _kind_name(expected: ExceptionKinds) -> str:
    if isinstance(expected, tuple):
        return " or ".join(kind.__name__ for kind in expected)
    return expected.__name__


@contextmanager
def assert_throws(expected: ExceptionKinds, loc: Optional[LocationTag] = None) -> Iterator[None]:
    """Assert the ``with`` block raises *expected*.

    Exceptions of any other kind propagate unchanged.

    Example::

        with assert_throws(ZeroDivisionError, LocationTag("test_math.py", 12)):
            1 / 0

    Raises:
        Mismatch: If the block completes without raising *expected*.
    """
    try:
        yield
    except expected:
        return
    loc = resolve_location(loc)
    raise Mismatch(f"{loc} did not throw {_kind_name(expected)}", loc)


def assert_call_throws(
    expected: ExceptionKinds,
    func: Callable,
    *args,
    loc: Optional[LocationTag] = None,
    **kwargs,
) -> None:
    """Call ``func(*args, **kwargs)`` and assert it raises *expected*."""
    with assert_throws(expected, loc):
        func(*args, **kwargs)


def known_failure(loc: Optional[LocationTag] = None) -> None:
    """Mark the current test as an expected failure.

    Raises:
        KnownFailure: Always.
    """
    loc = resolve_location(loc)
    raise KnownFailure(str(loc), loc)
