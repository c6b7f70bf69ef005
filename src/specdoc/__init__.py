"""
specdoc

Minimal behavior-specification library: describe requirements, verify them
and write a readable report with a pass/fail tally.
"""

from specdoc.core.config import Grouping, ReportConfig, default_clock
from specdoc.core.report import (
    document_specs,
    pure_hspec,
    quantify,
    success_summary,
    timing_summary,
)
from specdoc.core.runner import SpecRunner, h_hspec, hspec, write_report
from specdoc.core.spec import FAIL, SUCCESS, Result, Spec, Status, describe, it, pending
from specdoc.core.validators import ToleranceValidator, assert_close, close_enough

__version__ = "0.1.0"
__all__ = [
    # Specs
    "Result",
    "Status",
    "Spec",
    "SUCCESS",
    "FAIL",
    "describe",
    "it",
    "pending",
    # Reporting
    "document_specs",
    "quantify",
    "success_summary",
    "timing_summary",
    "pure_hspec",
    "SpecRunner",
    "h_hspec",
    "hspec",
    "write_report",
    "Grouping",
    "ReportConfig",
    "default_clock",
    # Numeric checks
    "ToleranceValidator",
    "close_enough",
    "assert_close",
]
