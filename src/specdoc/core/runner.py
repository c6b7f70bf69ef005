"""
Spec runner for writing timed reports.

Orchestrates a timed report:
1. Read the start time from the configured clock
2. Resolve the specs (verifiers run here when given a callable)
3. Write the document lines
4. Read the end time
5. Write the timing and success summaries
"""

import logging
import sys
from pathlib import Path
from typing import Callable, List, Optional, Sequence, TextIO, Union

from specdoc.core.config import ReportConfig
from specdoc.core.report import document_specs, success_summary, timing_summary
from specdoc.core.spec import Spec

logger = logging.getLogger(__name__)

SpecSource = Union[Sequence[Spec], Callable[[], Sequence[Spec]]]


class SpecRunner:
    """Writes timed spec reports to a text handle."""

    def __init__(self, config: Optional[ReportConfig] = None):
        """Initialize spec runner.

        Args:
            config: Report configuration. If None, uses default config.
        """
        self.config = config or ReportConfig()

    def run(self, handle: TextIO, specs: SpecSource) -> List[Spec]:
        """Write a report of the given specs to a handle.

        The reported duration covers resolving the specs and writing the
        document lines, not the summaries.

        Args:
            handle: Stream to write to, usually a file or stdout.
            specs: Specs, or a zero-argument callable producing them.

        Returns:
            The resolved specs.
        """
        clock = self.config.clock
        start_time = clock()

        resolved = list(specs() if callable(specs) else specs)
        self._write_lines(handle, document_specs(resolved, self.config.grouping))

        elapsed = clock() - start_time
        logger.debug("Verified %d spec(s) in %d ps", len(resolved), elapsed)

        self._write_lines(handle, ["", timing_summary(elapsed), "", success_summary(resolved)])
        return resolved

    @staticmethod
    def _write_lines(handle: TextIO, lines: Sequence[str]) -> None:
        for line in lines:
            handle.write(line + "\n")


def h_hspec(handle: TextIO, specs: SpecSource, config: Optional[ReportConfig] = None) -> List[Spec]:
    """Create a report of the given specs and write it to a handle.

    Tracks how long it took to check the specs.
    """
    return SpecRunner(config).run(handle, specs)


def hspec(specs: SpecSource, config: Optional[ReportConfig] = None) -> List[Spec]:
    """Create a report of the given specs and write it to stdout."""
    return h_hspec(sys.stdout, specs, config)


def write_report(path: Union[str, Path], specs: SpecSource, config: Optional[ReportConfig] = None) -> List[Spec]:
    """Write a report of the given specs to a file, replacing its contents.

    Args:
        path: Destination file path.
        specs: Specs, or a zero-argument callable producing them.
        config: Report configuration. If None, uses default config.

    Returns:
        The resolved specs.
    """
    with open(path, "w", encoding="utf-8") as f:
        return h_hspec(f, specs, config)
