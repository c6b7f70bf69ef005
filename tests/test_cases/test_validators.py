"""
Tests for numeric tolerance checks.
"""

import numpy as np
import pytest

from specdoc.core.spec import FAIL, SUCCESS, describe, it
from specdoc.core.validators import ToleranceValidator, assert_close, close_enough


class TestCloseEnough:
    def test_numbers_almost_the_same(self):
        assert close_enough(1.001, 1.002, atol=1e-2)

    def test_numbers_not_almost_the_same(self):
        assert not close_enough(1.001, 1.003, atol=1e-3, rtol=0.0)

    def test_usable_as_verifier(self):
        specs = describe("close_enough", [
            it("is true if two numbers are almost the same", close_enough(1.001, 1.002, atol=1e-2)),
            it("is false if two numbers are not almost the same", not close_enough(1.0, 2.0)),
        ])
        assert [s.result for s in specs] == [SUCCESS, SUCCESS]


class TestToleranceValidator:
    def test_matching_arrays(self):
        comparison = ToleranceValidator().compare(np.ones((4, 4)), np.ones((4, 4)))

        assert comparison.passed
        assert comparison.error is None
        assert comparison.max_abs_error == 0.0
        assert comparison.mismatch_count == 0

    def test_shape_mismatch(self):
        comparison = ToleranceValidator().compare(np.ones(3), np.ones(4))

        assert not comparison.passed
        assert "Shape mismatch" in comparison.error

    def test_unexpected_nan(self):
        comparison = ToleranceValidator().compare([1.0, 2.0], [1.0, np.nan])

        assert not comparison.passed
        assert "NaN" in comparison.error

    def test_unexpected_inf(self):
        comparison = ToleranceValidator().compare([1.0, 2.0], [np.inf, 2.0])

        assert not comparison.passed
        assert "Inf" in comparison.error

    def test_mismatch_samples_are_limited(self):
        validator = ToleranceValidator(max_mismatch_samples=3)

        comparison = validator.compare(np.zeros(10), np.ones(10))

        assert comparison.mismatch_count == 10
        assert comparison.mismatch_indices == [(0,), (1,), (2,)]
        assert comparison.max_abs_error == pytest.approx(1.0)

    def test_empty_arrays_match(self):
        assert ToleranceValidator().compare([], []).passed

    def test_check_returns_result(self):
        validator = ToleranceValidator()
        assert validator.check(1.0, 1.0) == SUCCESS
        assert validator.check(1.0, 1.5) == FAIL


class TestAssertClose:
    def test_passes_silently(self):
        assert_close([1.0, 2.0], [1.0, 2.0])

    def test_raises_with_details(self):
        with pytest.raises(AssertionError, match="Values not close: 1 element\\(s\\) mismatch"):
            assert_close([1.0, 2.0], [1.0, 3.0])

    def test_message_lists_difference_and_indices(self):
        with pytest.raises(AssertionError, match=r"largest absolute difference 1\.0+e\+00; first mismatching indices \[\(1,\)\]"):
            assert_close([1.0, 2.0], [1.0, 3.0])
