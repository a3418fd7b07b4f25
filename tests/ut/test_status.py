"""Outcome classification tests"""
import pytest

from assertkit import (
    CaseResult,
    CaseStatus,
    KnownFailure,
    Mismatch,
    PreconditionError,
    assert_containers_equal,
    assert_equal,
    classify,
    known_failure,
    run_case,
)


class TestClassify:
    """classify"""

    def test_mapping(self):
        assert classify(Mismatch("m")) is CaseStatus.FAIL
        assert classify(PreconditionError("p")) is CaseStatus.ERROR
        assert classify(KnownFailure("k")) is CaseStatus.KNOWN_FAILURE


class TestRunCase:
    """run_case"""

    def test_pass(self):
        def test_ok():
            assert_equal(1, 1)

        result = run_case(test_ok)
        assert result == CaseResult(name="test_ok", status=CaseStatus.PASS, message="")
        assert result.passed is True

    def test_fail(self, loc):
        result = run_case(assert_equal, 1, 2, loc, name="ones")
        assert result.name == "ones"
        assert result.status is CaseStatus.FAIL
        assert result.message == "[test_file.py:42] values are not equal: 1 2 [type='int']"
        assert result.passed is False

    def test_error(self):
        result = run_case(assert_containers_equal, [1], [1, 2])
        assert result.status is CaseStatus.ERROR
        assert result.message == "Sequences have different sizes"

    def test_known_failure(self):
        result = run_case(known_failure)
        assert result.status is CaseStatus.KNOWN_FAILURE

    def test_other_exceptions_propagate(self):
        def broken():
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            run_case(broken)
