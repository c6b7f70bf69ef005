"""
pytest configuration and fixtures for specdoc.
"""

import io
import sys
from pathlib import Path

import pytest

# Add src to path
_SRC_PATH = Path(__file__).parent.parent / "src"
if str(_SRC_PATH) not in sys.path:
    sys.path.insert(0, str(_SRC_PATH))

from specdoc.core.config import Grouping, ReportConfig, parse_grouping


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--grouping",
        action="store",
        default=Grouping.ADJACENT.value,
        choices=[g.value for g in Grouping],
        help="Grouping mode for report fixtures (default: adjacent)",
    )


class FakeClock:
    """Clock returning preset picosecond readings in order."""

    def __init__(self, *readings: int):
        self.readings = list(readings)
        self.calls = 0

    def __call__(self) -> int:
        value = self.readings[self.calls]
        self.calls += 1
        return value


@pytest.fixture
def fake_clock():
    """Factory fixture for clocks with preset readings."""
    return FakeClock


@pytest.fixture
def report_config(request) -> ReportConfig:
    """Fixture providing report configuration from command line options."""
    return ReportConfig(
        grouping=parse_grouping(request.config.getoption("--grouping")),
        clock=FakeClock(0, 0),
    )


@pytest.fixture
def handle() -> io.StringIO:
    """Fixture providing an in-memory output handle."""
    return io.StringIO()
