"""Container adapter.

Bridges opaque ordered containers (device arrays, tensors, host arrays, plain
Python sequences) to the host-side sequences :mod:`assertkit.sequence`
compares.  Sizes are checked before anything is copied, so containers of
different length always produce a :class:`~assertkit.types.PreconditionError`
and never a mismatch report.
"""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from assertkit.sequence import (
    SIZE_MISMATCH_MESSAGE,
    assert_sequence_almost_equal,
    assert_sequence_equal,
)
from assertkit.types import ComparisonTolerance, LocationTag, PreconditionError

logger = logging.getLogger(__name__)


def container_size(container) -> int:
    """Return the number of elements held by *container*.

    Tensors report ``numel()``, arrays their integer ``size`` attribute,
    device containers an integer ``size()`` and everything else ``len()``.
    """
    numel = getattr(container, "numel", None)
    if callable(numel):
        return int(numel())
    size = getattr(container, "size", None)
    if callable(size):
        size = size()
    if isinstance(size, (int, np.integer)) and not isinstance(size, bool):
        return int(size)
    return len(container)


def materialize(container) -> np.ndarray | list:
    """Copy *container* into a flat, host-addressable sequence.

    Lookup order:

    1. ``to_host()``: explicit hook for custom device containers;
    2. torch-style tensors (``detach().cpu().numpy()``);
    3. cupy-style device arrays (``get()``);
    4. numpy arrays and objects implementing ``__array__``;
    5. any other iterable, copied into a list.

    Order and length are preserved; the result never aliases *container*.
    """
    to_host = getattr(container, "to_host", None)
    if callable(to_host):
        return materialize(to_host())

    if all(callable(getattr(container, attr, None)) for attr in ("detach", "cpu", "numpy")):
        return np.array(container.detach().cpu().numpy()).ravel()

    if hasattr(container, "__cuda_array_interface__") and callable(getattr(container, "get", None)):
        return np.asarray(container.get()).ravel().copy()

    if isinstance(container, np.ndarray) or hasattr(container, "__array__"):
        return np.array(container).ravel()

    return list(container)


def _check_sizes(a, b) -> None:
    size_a = container_size(a)
    size_b = container_size(b)
    if size_a != size_b:
        logger.debug("Size precondition failed: %d vs %d", size_a, size_b)
        raise PreconditionError(SIZE_MISMATCH_MESSAGE)


def assert_containers_equal(
    a,
    b,
    loc: Optional[LocationTag] = None,
    max_output_lines: Optional[int] = None,
) -> None:
    """Assert two containers hold equal elements in the same order.

    Args:
        a: Observed container.
        b: Expected container.
        loc: Location tag for the message.
        max_output_lines: Maximum number of sampled mismatches.

    Raises:
        PreconditionError: If the containers differ in size.
        SequenceMismatch: If any position differs.
    """
    _check_sizes(a, b)
    assert_sequence_equal(materialize(a), materialize(b), loc=loc, max_output_lines=max_output_lines)


def assert_containers_almost_equal(
    a,
    b,
    loc: Optional[LocationTag] = None,
    tol: Optional[ComparisonTolerance] = None,
    max_output_lines: Optional[int] = None,
) -> None:
    """Tolerance-based counterpart of :func:`assert_containers_equal`."""
    _check_sizes(a, b)
    assert_sequence_almost_equal(
        materialize(a), materialize(b), loc=loc, tol=tol, max_output_lines=max_output_lines
    )
