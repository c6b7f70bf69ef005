"""Report configuration."""

import enum
import os
import time
from dataclasses import dataclass, field
from typing import Callable, Mapping, Optional

GROUPING_ENV_VAR = "SPECDOC_GROUPING"


class Grouping(enum.Enum):
    """How specs are split into groups when rendering a document.

    ADJACENT only merges specs whose name matches the spec right before them,
    so a name that reappears later starts a new group. BY_NAME collects every
    spec with the same name into the group of its first appearance.
    """

    ADJACENT = "adjacent"
    BY_NAME = "by_name"


def default_clock() -> int:
    """Processor time of the current process in picoseconds."""
    return time.process_time_ns() * 1000


@dataclass
class ReportConfig:
    """Configuration for rendering and timing spec reports."""

    grouping: Grouping = Grouping.ADJACENT
    clock: Callable[[], int] = field(default=default_clock)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ReportConfig":
        """Build a config from environment variables.

        Args:
            environ: Mapping to read from. Defaults to ``os.environ``.

        Returns:
            ReportConfig with ``grouping`` taken from SPECDOC_GROUPING if set.
        """
        if environ is None:
            environ = os.environ

        value = environ.get(GROUPING_ENV_VAR)
        if value is None:
            return cls()
        return cls(grouping=parse_grouping(value))


def parse_grouping(value: str) -> Grouping:
    """Convert a grouping name such as ``"by_name"`` to a Grouping."""
    try:
        return Grouping(value.strip().lower())
    except ValueError:
        accepted = ", ".join(g.value for g in Grouping)
        raise ValueError(f"Unknown grouping {value!r}, expected one of: {accepted}") from None
