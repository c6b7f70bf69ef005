"""
Numeric tolerance checks.

Helpers for writing verifiers over floating-point values, where exact
equality is rarely what a requirement means.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from specdoc.core.spec import FAIL, SUCCESS, Result

_NON_FINITE_CHECKS = (("NaN", np.isnan), ("Inf", np.isinf))


@dataclass
class Comparison:
    """Details of comparing actual values against expected ones."""

    passed: bool
    error: Optional[str] = None
    max_abs_error: Optional[float] = None
    mismatch_count: int = 0
    mismatch_indices: Optional[List[Tuple]] = None


class ToleranceValidator:
    """Element-wise closeness check for numbers and arrays.

    Values match when ``|expected - actual| <= atol + rtol * |actual|``.
    At most ``max_mismatch_samples`` mismatching indices are kept.
    """

    def __init__(self, atol: float = 1e-5, rtol: float = 1e-5, max_mismatch_samples: int = 10):
        self.atol = atol
        self.rtol = rtol
        self.max_mismatch_samples = max_mismatch_samples

    def compare(self, expected, actual) -> Comparison:
        """Compare actual values against expected.

        Args:
            expected: Expected number or array-like.
            actual: Actual number or array-like.

        Returns:
            Comparison with mismatch details.
        """
        exp = np.asarray(expected, dtype=float)
        act = np.asarray(actual, dtype=float)

        if exp.shape != act.shape:
            return Comparison(passed=False, error=f"Shape mismatch: expected {exp.shape}, got {act.shape}")
        if exp.size == 0:
            return Comparison(passed=True)

        for label, predicate in _NON_FINITE_CHECKS:
            unexpected = int(np.count_nonzero(predicate(act) & ~predicate(exp)))
            if unexpected:
                return Comparison(passed=False, error=f"{unexpected} unexpected {label} value(s)")

        close = np.isclose(exp, act, atol=self.atol, rtol=self.rtol, equal_nan=True)
        mismatches = np.argwhere(~close)
        passed = len(mismatches) == 0

        with np.errstate(invalid="ignore"):
            abs_diff = np.abs(exp - act)
        finite_diff = abs_diff[np.isfinite(abs_diff)]

        return Comparison(
            passed=passed,
            error=None if passed else f"{len(mismatches)} element(s) mismatch",
            max_abs_error=float(finite_diff.max()) if finite_diff.size else 0.0,
            mismatch_count=len(mismatches),
            mismatch_indices=None if passed else [tuple(int(i) for i in idx) for idx in mismatches[: self.max_mismatch_samples]],
        )

    def check(self, expected, actual) -> Result:
        return SUCCESS if self.compare(expected, actual).passed else FAIL


def close_enough(a, b, atol: float = 1e-5, rtol: float = 1e-5) -> bool:
    """Return True if two numbers or arrays are almost the same."""
    return ToleranceValidator(atol=atol, rtol=rtol).compare(a, b).passed


def assert_close(expected, actual, atol: float = 1e-5, rtol: float = 1e-5) -> None:
    """Raise AssertionError describing the mismatch unless values are close."""
    comparison = ToleranceValidator(atol=atol, rtol=rtol).compare(expected, actual)
    if comparison.passed:
        return

    details = [f"Values not close: {comparison.error}"]
    if comparison.max_abs_error is not None:
        details.append(f"largest absolute difference {comparison.max_abs_error:.6e}")
    if comparison.mismatch_indices:
        details.append(f"first mismatching indices {comparison.mismatch_indices[:5]}")
    raise AssertionError("; ".join(details))
