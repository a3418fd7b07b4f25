"""Data classes and exceptions for assertion outcomes.

Outcome matrix:
    Kind               | Raised when                                  | Runner status
    -------------------|----------------------------------------------|---------------
    MISMATCH           | a predicate rejected well-formed inputs      | FAIL
    PRECONDITION_ERROR | inputs were structurally incomparable        | ERROR
    KNOWN_FAILURE      | a test declared itself as expected to fail   | KNOWN_FAILURE
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from assertkit.core.constants import DEFAULT_ABSOLUTE_TOL, DEFAULT_RELATIVE_TOL


class OutcomeKind(str, Enum):
    """Kind of a failed assertion."""

    MISMATCH = "mismatch"
    PRECONDITION_ERROR = "precondition_error"
    KNOWN_FAILURE = "known_failure"


# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ComparisonTolerance:
    """Absolute and relative bounds for approximate equality."""

    absolute: float = DEFAULT_ABSOLUTE_TOL
    relative: float = DEFAULT_RELATIVE_TOL

    def __post_init__(self) -> None:
        for name in ("absolute", "relative"):
            value = getattr(self, name)
            if math.isnan(value) or value < 0:
                raise ValueError(f"tolerance {name} must be >= 0, got {value}")

    @classmethod
    def default(cls) -> "ComparisonTolerance":
        """Tolerance of the active configuration snapshot."""
        from assertkit.core.config import get_config

        return get_config().tolerance


@dataclass(frozen=True)
class LocationTag:
    """Caller-supplied source position, used only in messages."""

    file: str = "unknown"
    line: int = -1

    def __str__(self) -> str:
        return f"[{self.file}:{self.line}]"


UNKNOWN_LOCATION = LocationTag()


@dataclass
class MismatchReport:
    """Running summary of a sequence comparison.

    ``sample_lines`` never grows past ``sample_cap``; mismatches beyond the cap
    are only counted.
    """

    sample_cap: int
    element_type: str = "object"
    total_compared: int = 0
    mismatch_count: int = 0
    sample_lines: List[str] = field(default_factory=list)

    @property
    def truncated(self) -> bool:
        return self.mismatch_count > self.sample_cap

    def record(self, index: int, value1, value2) -> None:
        """Count a mismatch at ``index`` and sample it while under the cap."""
        self.mismatch_count += 1
        if self.mismatch_count <= self.sample_cap:
            self.sample_lines.append(f"[{index}] {value1}  {value2}")


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------

class FailureOutcome(Exception):
    """Base exception for every assertion outcome.

    Attributes:
        message: Fully rendered, human-readable message.
        location: Location tag of the failing assertion, if known.
    """

    kind: OutcomeKind

    def __init__(self, message: str, location: Optional[LocationTag] = None) -> None:
        super().__init__(message)
        self.message = message
        self.location = location


class Mismatch(FailureOutcome, AssertionError):
    """Raised when a comparison predicate rejects comparable inputs."""

    kind = OutcomeKind.MISMATCH


class SequenceMismatch(Mismatch):
    """Raised when two sequences differ at one or more positions."""

    def __init__(
        self,
        message: str,
        report: MismatchReport,
        location: Optional[LocationTag] = None,
    ) -> None:
        super().__init__(message, location)
        self.report = report

    @property
    def mismatch_count(self) -> int:
        return self.report.mismatch_count

    @property
    def total_compared(self) -> int:
        return self.report.total_compared


class PreconditionError(FailureOutcome):
    """Raised when inputs cannot be compared element by element."""

    kind = OutcomeKind.PRECONDITION_ERROR


class KnownFailure(FailureOutcome):
    """Raised by tests that are expected to fail."""

    kind = OutcomeKind.KNOWN_FAILURE


class ConfigError(ValueError):
    """Raised when the comparator configuration is invalid or missing."""
