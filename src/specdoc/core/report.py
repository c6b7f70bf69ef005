"""
Report rendering.

Turns a list of specs into document lines and builds the timing and
success summaries shown at the end of a report.
"""

import logging
from typing import Dict, List, Sequence

from specdoc.core.config import Grouping
from specdoc.core.spec import Spec, Status

logger = logging.getLogger(__name__)

PICOSECONDS_PER_SECOND = 10**12

# Pure reports never read a clock, so they always claim zero elapsed time.
PURE_TIMING_LINE = "Finished in 0 seconds"


def quantify(count, noun: str) -> str:
    """Create a more readable display of a quantity of something.

    Args:
        count: Any number. Compared to 1 by value, so ``1.0`` is singular too.
        noun: Singular form of the noun.

    Returns:
        ``"1 <noun>"`` for one, otherwise ``"<count> <noun>s"``.
    """
    if count == 1:
        return f"1 {noun}"
    return f"{count} {noun}s"


def document_spec(spec: Spec) -> str:
    """Create a document line for a single spec."""
    result = spec.result
    if result.status is Status.FAIL:
        return f" x {spec.requirement}"
    if result.status is Status.PENDING:
        return f" - {spec.requirement}\n     # {result.reason}"
    return f" - {spec.requirement}"


def document_group(specs: Sequence[Spec]) -> List[str]:
    """Create a document of a group of specs sharing a name."""
    if not specs:
        return []
    return ["", specs[0].name] + [document_spec(spec) for spec in specs]


def group_specs(specs: Sequence[Spec], grouping: Grouping = Grouping.ADJACENT) -> List[List[Spec]]:
    """Split specs into groups by name.

    Args:
        specs: Specs in report order.
        grouping: ADJACENT starts a new group whenever the name differs from
            the previous spec. BY_NAME merges all specs of a name into one group.

    Returns:
        List of non-empty groups, each keeping input order.
    """
    if grouping is Grouping.BY_NAME:
        by_name: Dict[str, List[Spec]] = {}
        for spec in specs:
            by_name.setdefault(spec.name, []).append(spec)
        return list(by_name.values())

    groups: List[List[Spec]] = []
    for spec in specs:
        if groups and groups[-1][-1].name == spec.name:
            groups[-1].append(spec)
        else:
            groups.append([spec])
    return groups


def document_specs(specs: Sequence[Spec], grouping: Grouping = Grouping.ADJACENT) -> List[str]:
    """Create a document of the given specs."""
    logger.debug("Documenting %d spec(s) with %s grouping", len(specs), grouping.value)
    lines = []
    for group in group_specs(specs, grouping):
        lines.extend(document_group(group))
    return lines


def timing_summary(duration) -> str:
    """Create a summary of how long it took to verify the specs.

    Args:
        duration: Elapsed time in picoseconds.
    """
    if duration == 0:
        return PURE_TIMING_LINE
    return "Finished in " + quantify(duration / PICOSECONDS_PER_SECOND, "second")


def count_failures(specs: Sequence[Spec]) -> int:
    """Count the specs whose result is a failure."""
    return sum(1 for spec in specs if spec.result.status is Status.FAIL)


def success_summary(specs: Sequence[Spec]) -> str:
    """Create a summary of how many specs exist and how many failed."""
    return quantify(len(specs), "example") + ", " + quantify(count_failures(specs), "failure")


def pure_hspec(specs: Sequence[Spec], grouping: Grouping = Grouping.ADJACENT) -> List[str]:
    """Create a report of the given specs without timing them.

    Use this when a description of each requirement is needed but not how
    long they took to check.

    Returns:
        Document lines followed by the timing and success summaries.
    """
    return document_specs(specs, grouping) + ["", PURE_TIMING_LINE, "", success_summary(specs)]
