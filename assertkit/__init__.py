"""
assertkit - assertion and diagnostics engine for test harnesses

Compares observed values and sequences against expected ones (exact, ordered
or tolerance-based) and raises bounded-size, structured failure reports.

Outcome kinds:
    Mismatch           a predicate rejected comparable inputs
    PreconditionError  inputs could not be compared (e.g. different sizes)
    KnownFailure       a test declared as expected to fail

Basic usage:
    from assertkit import LocationTag, assert_almost_equal, assert_containers_equal

    assert_almost_equal(1.00005, 1.0)
    assert_containers_equal(dut_output, golden, LocationTag("test_conv.py", 42))
"""

__version__ = "0.1.0"

from .types import (
    ComparisonTolerance,
    ConfigError,
    FailureOutcome,
    KnownFailure,
    LocationTag,
    Mismatch,
    MismatchReport,
    OutcomeKind,
    PreconditionError,
    SequenceMismatch,
)
from .core.config import (
    AssertConfig,
    get_config,
    load_config,
    reset_config,
    set_config,
)
from .tolerance import ExactPredicate, TolerancePredicate, abs_value, almost_equal
from .scalar import (
    assert_almost_equal,
    assert_equal,
    assert_equal_quiet,
    assert_gequal,
    assert_lequal,
)
from .sequence import assert_sequence_almost_equal, assert_sequence_equal
from .containers import (
    assert_containers_almost_equal,
    assert_containers_equal,
    container_size,
    materialize,
)
from .control import assert_call_throws, assert_throws, known_failure
from .status import CaseResult, CaseStatus, classify, run_case

__all__ = [
    "__version__",
    # types
    "ComparisonTolerance",
    "LocationTag",
    "MismatchReport",
    "OutcomeKind",
    "FailureOutcome",
    "Mismatch",
    "SequenceMismatch",
    "PreconditionError",
    "KnownFailure",
    "ConfigError",
    # config
    "AssertConfig",
    "get_config",
    "set_config",
    "reset_config",
    "load_config",
    # predicates
    "abs_value",
    "almost_equal",
    "ExactPredicate",
    "TolerancePredicate",
    # scalar
    "assert_equal",
    "assert_equal_quiet",
    "assert_lequal",
    "assert_gequal",
    "assert_almost_equal",
    # sequence
    "assert_sequence_equal",
    "assert_sequence_almost_equal",
    # containers
    "container_size",
    "materialize",
    "assert_containers_equal",
    "assert_containers_almost_equal",
    # control flow
    "assert_throws",
    "assert_call_throws",
    "known_failure",
    # status
    "CaseStatus",
    "CaseResult",
    "classify",
    "run_case",
]
