"""Domain layer: immutable value objects for test run events.

Reporters receive these in order:
start_suite → (start_context → (start_test → add_fault* → end_test)* → end_context)* → end_suite
with update() snapshots in between.
All objects frozen, invariants validated in __post_init__.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class FaultKind(Enum):
    """Kind of test fault."""

    FAILURE = "failure"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class SuiteInfo:
    """Suite about to run.

    Attributes:
        full_name: Suite name
        size: Number of tests (>= 0)
    """

    full_name: str
    size: int

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.size < 0:
            raise ValueError(f"size must be >= 0, got {self.size}")


@dataclass(frozen=True, slots=True)
class ContextInfo:
    """Test context (group of tests) boundary."""

    full_name: str
    context: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class TestInfo:
    """Single test start or end.

    Attributes:
        full_name: Context path plus test name
        short_name: Test name alone
        context: Enclosing context names, outermost first
        timestamp: Event time in milliseconds
    """

    __test__ = False  # not a pytest class

    full_name: str
    short_name: str
    context: tuple[str, ...] = ()
    timestamp: float = 0.0

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.full_name:
            raise ValueError("full_name must not be empty")
        if self.timestamp < 0:
            raise ValueError(f"timestamp must be >= 0, got {self.timestamp}")


@dataclass(frozen=True, slots=True)
class ErrorInfo:
    """Assertion failure or unexpected exception."""

    kind: FaultKind
    message: str
    backtrace: str | None = None


@dataclass(frozen=True, slots=True)
class FaultEvent:
    """Fault raised while a test ran."""

    test: TestInfo
    error: ErrorInfo


@dataclass(frozen=True, slots=True)
class SuiteSummary:
    """Counters of a (possibly unfinished) run.

    Attributes:
        passed: True if no failures or errors
        tests: Tests run
        assertions: Assertions made
        failures: Failed tests
        errors: Errored tests
        runtime: Elapsed seconds
    """

    passed: bool
    tests: int
    assertions: int
    failures: int
    errors: int
    runtime: float = 0.0

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        for name in ("tests", "assertions", "failures", "errors"):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be >= 0, got {value}")
        if self.runtime < 0:
            raise ValueError(f"runtime must be >= 0, got {self.runtime}")
        if self.passed and (self.failures or self.errors):
            raise ValueError("passed summary must have no failures or errors")
