"""Core module for spec definitions, rendering and reporting."""

from specdoc.core.config import Grouping, ReportConfig
from specdoc.core.report import pure_hspec
from specdoc.core.runner import SpecRunner, h_hspec, hspec
from specdoc.core.spec import FAIL, SUCCESS, Result, Spec, describe, it, pending

__all__ = [
    "Grouping",
    "ReportConfig",
    "Result",
    "Spec",
    "SUCCESS",
    "FAIL",
    "describe",
    "it",
    "pending",
    "pure_hspec",
    "SpecRunner",
    "h_hspec",
    "hspec",
]
