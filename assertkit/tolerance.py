"""
Tolerance-based equality

Combined relative + absolute test:

    |a - b| <= relative * (|a| + |b|) + absolute

Near zero the absolute term dominates, for large magnitudes the relative term
does, so no division by a possibly-zero reference value is needed.
"""

from typing import Optional

import numpy as np

from assertkit.types import ComparisonTolerance

_REAL_SCALARS = (int, float, np.bool_, np.integer, np.floating)


def abs_value(x):
    """
    Absolute value through ``>`` and unary negation

    Reference semantics for custom numeric-like types: a type only needs
    ``x > 0`` and ``-x`` to take part in tolerance comparisons.
    """
    return x if x > 0 else -x


def _as_operand(x):
    # built-in and numpy reals compare in double precision
    if isinstance(x, _REAL_SCALARS):
        return float(x)
    return x


def almost_equal(a, b, tol: Optional[ComparisonTolerance] = None) -> bool:
    """
    Whether ``a`` and ``b`` are equal within ``tol``

    Args:
        a: first value
        b: second value
        tol: tolerance (default: active configuration)

    Returns:
        True if ``|a - b| <= tol.relative * (|a| + |b|) + tol.absolute``.
        Values equal under ``==`` always pass, NaN never does.
    """
    if tol is None:
        tol = ComparisonTolerance.default()

    a = _as_operand(a)
    b = _as_operand(b)
    if a == b:
        return True

    diff = abs_value(a - b)
    bound = tol.relative * (abs_value(a) + abs_value(b)) + tol.absolute
    return diff <= bound


class ExactPredicate:
    """Binary predicate ``a == b``."""

    def __call__(self, a, b) -> bool:
        return bool(a == b)

    def mask(self, a: np.ndarray, b: np.ndarray) -> Optional[np.ndarray]:
        """Element-wise equality, or None if numpy cannot compare the arrays."""
        try:
            result = np.asarray(a == b)
        except TypeError:
            return None
        if result.shape != a.shape or result.dtype != np.bool_:
            return None
        return result

    def __repr__(self) -> str:
        return "ExactPredicate()"


class TolerancePredicate:
    """
    Reusable binary predicate wrapping :func:`almost_equal`

    Example:
        pred = TolerancePredicate(ComparisonTolerance(absolute=1e-6))
        pred(1.0, 1.0000001)  # True
    """

    def __init__(self, tol: Optional[ComparisonTolerance] = None):
        self.tol = tol if tol is not None else ComparisonTolerance.default()

    def __call__(self, a, b) -> bool:
        return almost_equal(a, b, self.tol)

    def mask(self, a: np.ndarray, b: np.ndarray) -> Optional[np.ndarray]:
        """
        Vectorized form of :meth:`__call__` over two equal-length arrays

        Returns None for dtypes that do not convert to float64 (object,
        string, complex), leaving the element-wise path to decide.
        """
        if a.dtype.kind not in "biuf" or b.dtype.kind not in "biuf":
            return None

        g = a.astype(np.float64)
        r = b.astype(np.float64)
        with np.errstate(invalid="ignore", over="ignore"):
            diff = np.abs(g - r)
            bound = self.tol.relative * (np.abs(g) + np.abs(r)) + self.tol.absolute
            return (g == r) | (diff <= bound)

    def __eq__(self, other) -> bool:
        return isinstance(other, TolerancePredicate) and self.tol == other.tol

    def __hash__(self) -> int:
        return hash(self.tol)

    def __repr__(self) -> str:
        return f"TolerancePredicate(absolute={self.tol.absolute}, relative={self.tol.relative})"
