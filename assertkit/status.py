"""
Outcome classification for test runners

Maps raised outcomes onto per-test statuses:

    Outcome            | Status
    -------------------|---------------
    (none)             | PASS
    Mismatch           | FAIL
    PreconditionError  | ERROR
    KnownFailure       | KNOWN_FAILURE

Discovery, aggregation and printing stay with the runner.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from .types import FailureOutcome, OutcomeKind


class CaseStatus(Enum):
    """Status of one test case"""

    PASS = "PASS"
    FAIL = "FAIL"
    ERROR = "ERROR"
    KNOWN_FAILURE = "KNOWN_FAILURE"


_STATUS_BY_KIND = {
    OutcomeKind.MISMATCH: CaseStatus.FAIL,
    OutcomeKind.PRECONDITION_ERROR: CaseStatus.ERROR,
    OutcomeKind.KNOWN_FAILURE: CaseStatus.KNOWN_FAILURE,
}


@dataclass
class CaseResult:
    """Result of running one test case"""

    name: str = ""
    status: CaseStatus = CaseStatus.PASS
    message: str = ""

    @property
    def passed(self) -> bool:
        return self.status is CaseStatus.PASS


def classify(outcome: FailureOutcome) -> CaseStatus:
    """Status a runner should record for ``outcome``"""
    return _STATUS_BY_KIND[outcome.kind]


def run_case(func: Callable, *args, name: str = "", **kwargs) -> CaseResult:
    """
    Run a test body and capture its outcome

    Exceptions other than :class:`FailureOutcome` propagate to the caller.

    Args:
        func: test body
        *args: positional arguments for ``func``
        name: test case name (default: ``func.__name__``)
        **kwargs: keyword arguments for ``func``

    Returns:
        CaseResult
    """
    name = name or getattr(func, "__name__", "")
    try:
        func(*args, **kwargs)
    except FailureOutcome as outcome:
        return CaseResult(name=name, status=classify(outcome), message=outcome.message)
    return CaseResult(name=name)
