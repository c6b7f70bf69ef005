"""
Spec definitions and verifiers.

Provides the Result and Spec data structures plus the ``it``/``describe``
helpers that turn requirements and their verifiers into specs.
"""

import enum
import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable, List, Optional, Tuple

import numpy as np

logger = logging.getLogger(__name__)


class Status(enum.Enum):
    """Possible outcomes of verifying a requirement."""

    SUCCESS = "success"
    FAIL = "fail"
    PENDING = "pending"


@dataclass(frozen=True)
class Result:
    """The result of verifying a requirement.

    Use the ``SUCCESS`` and ``FAIL`` constants or ``pending()`` rather than
    building instances directly.
    """

    status: Status
    reason: Optional[str] = None

    def __post_init__(self):
        if (self.status is Status.PENDING) != (self.reason is not None):
            raise ValueError(
                f"Only pending results carry a reason, got {self.status.value} "
                f"with reason {self.reason!r}"
            )

    @property
    def is_pending(self) -> bool:
        return self.status is Status.PENDING

    def __str__(self) -> str:
        if self.is_pending:
            return f"pending: {self.reason}"
        return self.status.value


SUCCESS = Result(Status.SUCCESS)
FAIL = Result(Status.FAIL)


@dataclass(frozen=True)
class Spec:
    """Everything needed to specify and test a specific behavior.

    Attributes:
        name: What is being tested, usually the name of a function or type.
        requirement: The specific requirement.
        result: The status of this requirement.
    """

    name: str
    requirement: str
    result: Result


Verification = Callable[[], Tuple[str, Result]]


def pending(reason: str) -> Result:
    """Declare a requirement as pending some other work.

    Use this to track a requirement that is not expected to succeed or fail yet:

        describe("fancy_formatter", [
            it("formats text in a way that everyone likes",
               pending("waiting for clarification from the designers")),
        ])
    """
    return Result(Status.PENDING, reason)


def _to_result(verifier: Any) -> Result:
    if callable(verifier):
        verifier = verifier()

    if isinstance(verifier, Result):
        return verifier
    if isinstance(verifier, (bool, np.bool_)):
        return SUCCESS if verifier else FAIL

    raise TypeError(
        f"Unsupported verifier type: {type(verifier).__name__} "
        "(expected bool, Result or a callable returning one)"
    )


def it(requirement: str, verifier: Any) -> Verification:
    """Describe a requirement and its verification.

    A list of these is passed to ``describe``:

        describe("close_enough", [
            it("is true if two numbers are almost the same",
               close_enough(1.001, 1.002, atol=1e-2)),
            it("can also detect infinite loops",
               pending("still figuring this one out")),
        ])

    Args:
        requirement: A requirement for what is being described.
        verifier: A bool, a Result, or a zero-argument callable returning
            either. Callables are only invoked when the verification resolves.

    Returns:
        A zero-argument callable yielding ``(requirement, result)``.
    """

    def verification() -> Tuple[str, Result]:
        return requirement, _to_result(verifier)

    return verification


def describe(name: str, verifications: Iterable[Verification]) -> List[Spec]:
    """Create a set of specs for something being described.

        describe("abs", [
            it("returns a positive number given a negative number",
               abs(-1) == 1),
        ])

    Verifications resolve one at a time in order. Exceptions raised by a
    verifier propagate to the caller unchanged.

    Args:
        name: The name of what is being described, usually a function or type.
        verifications: Requirements and verifiers, created by ``it``.

    Returns:
        One Spec per verification, in the same order.
    """
    specs = []
    for verification in verifications:
        requirement, result = verification()
        specs.append(Spec(name, requirement, result))

    logger.debug("Described %r with %d spec(s)", name, len(specs))
    return specs
