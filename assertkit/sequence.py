"""
Sequence comparison

Walks two ordered sequences in lockstep with a binary predicate, counts every
mismatch and lists at most ``max_output_lines`` of them in the failure
message. The scan never stops early: the report states the total number of
differing positions, not just the first one.

Report layout:

    [file:line] Sequences are not equal [type='int64']
    --------------------------------
      [1] 2  9
      [3] 4  9
    --------------------------------
    Sequences differ at 2 of 4 positions.
"""

import logging
from typing import Callable, Iterable, Optional

import numpy as np

from .core.config import get_config
from .core.constants import SEPARATOR
from .tolerance import ExactPredicate, TolerancePredicate
from .types import (
    ComparisonTolerance,
    LocationTag,
    MismatchReport,
    PreconditionError,
    SequenceMismatch,
)
from .utils import resolve_location, type_name

logger = logging.getLogger(__name__)

SIZE_MISMATCH_MESSAGE = "Sequences have different sizes"

BinaryPredicate = Callable[[object, object], bool]


def _scan(seq1: Iterable, seq2: Iterable, predicate: BinaryPredicate, cap: int) -> MismatchReport:
    """Element-wise scan; ``seq2`` may be longer than ``seq1``."""
    report = MismatchReport(sample_cap=cap)
    it2 = iter(seq2)
    index = 0
    for value1 in seq1:
        try:
            value2 = next(it2)
        except StopIteration:
            raise PreconditionError(SIZE_MISMATCH_MESSAGE) from None
        if index == 0:
            report.element_type = type_name(value1)
        if not predicate(value1, value2):
            report.record(index, value1, value2)
        index += 1
    report.total_compared = index
    return report


def _scan_arrays(a: np.ndarray, b: np.ndarray, predicate: BinaryPredicate, cap: int) -> MismatchReport:
    """Vectorized scan over two numpy arrays, falling back to :func:`_scan`."""
    g = a.ravel()
    r = b.ravel()
    total = g.size
    if r.size < total:
        raise PreconditionError(SIZE_MISMATCH_MESSAGE)
    r = r[:total]

    mask = predicate.mask(g, r)
    if mask is None:
        return _scan(g, r, predicate, cap)

    report = MismatchReport(sample_cap=cap, element_type=str(a.dtype), total_compared=total)
    bad = np.flatnonzero(~mask)
    report.mismatch_count = int(bad.size)
    for index in bad[:cap]:
        report.sample_lines.append(f"[{index}] {g[index]}  {r[index]}")
    return report


def render_report(report: MismatchReport, loc: LocationTag) -> str:
    """Render a sequence failure message."""
    lines = [f"{loc} Sequences are not equal [type='{report.element_type}']", SEPARATOR]
    lines.extend(f"  {line}" for line in report.sample_lines)
    if report.truncated:
        lines.append("  (output limit reached)")
    lines.append(SEPARATOR)
    lines.append(
        f"Sequences differ at {report.mismatch_count} of {report.total_compared} positions."
    )
    return "\n".join(lines)


def assert_sequence_equal(
    seq1: Iterable,
    seq2: Iterable,
    predicate: Optional[BinaryPredicate] = None,
    loc: Optional[LocationTag] = None,
    max_output_lines: Optional[int] = None,
) -> None:
    """
    Assert two sequences match position by position

    ``seq2`` must hold at least as many elements as ``seq1``; its extra
    elements are ignored. Lengths are not otherwise checked here, see
    :func:`assertkit.containers.assert_containers_equal` for the checked form.

    Args:
        seq1: observed values
        seq2: expected values
        predicate: binary predicate (default: exact equality)
        loc: location tag for the message
        max_output_lines: maximum number of sampled mismatches
            (default: active configuration)

    Raises:
        SequenceMismatch: if any position fails the predicate
        PreconditionError: if ``seq2`` runs out before ``seq1``
    """
    if predicate is None:
        predicate = ExactPredicate()
    cap = get_config().max_output_lines if max_output_lines is None else max_output_lines
    if cap < 0:
        raise ValueError(f"max_output_lines must be >= 0, got {cap}")

    if (
        isinstance(seq1, np.ndarray)
        and isinstance(seq2, np.ndarray)
        and hasattr(predicate, "mask")
    ):
        report = _scan_arrays(seq1, seq2, predicate, cap)
    else:
        # multi-dimensional arrays are compared in flattened order
        if isinstance(seq1, np.ndarray):
            seq1 = seq1.ravel()
        if isinstance(seq2, np.ndarray):
            seq2 = seq2.ravel()
        report = _scan(seq1, seq2, predicate, cap)

    if report.mismatch_count == 0:
        return

    loc = resolve_location(loc)
    logger.debug(
        "%s sequences differ at %d of %d positions",
        loc, report.mismatch_count, report.total_compared,
    )
    raise SequenceMismatch(render_report(report, loc), report, loc)


def assert_sequence_almost_equal(
    seq1: Iterable,
    seq2: Iterable,
    loc: Optional[LocationTag] = None,
    tol: Optional[ComparisonTolerance] = None,
    max_output_lines: Optional[int] = None,
) -> None:
    """
    Assert two sequences match position by position within a tolerance

    Args:
        seq1: observed values
        seq2: expected values
        loc: location tag for the message
        tol: tolerance (default: active configuration)
        max_output_lines: maximum number of sampled mismatches
    """
    assert_sequence_equal(seq1, seq2, TolerancePredicate(tol), loc, max_output_lines)
