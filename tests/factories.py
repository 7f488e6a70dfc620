"""Test factories for creating domain objects.

Centralized factory functions to avoid duplication across test modules.
All factories follow the same pattern: accept simplified parameters,
return fully constructed domain objects.
"""

from mixkit.domain.events import (
    ErrorInfo,
    FaultEvent,
    FaultKind,
    SuiteInfo,
    SuiteSummary,
    TestInfo,
)
from mixkit.domain.model import Module


def make_chain(*names: str) -> tuple[Module, ...]:
    """Create modules where each includes the previous one.

    Args:
        names: Module names, most distant first

    Returns:
        Modules in the same order; the last one includes all others
    """
    modules: list[Module] = []
    for name in names:
        module = Module(name)
        if modules:
            module.include(modules[-1])
        modules.append(module)
    return tuple(modules)


def make_method(label: str):
    """Create implementation returning label."""

    def method(self):
        return label

    method.__name__ = f"method_{label}"
    return method


def make_suite_info(full_name: str = "Suite", size: int = 1) -> SuiteInfo:
    """Create SuiteInfo for tests."""
    return SuiteInfo(full_name=full_name, size=size)


def make_test_info(
    short_name: str = "works",
    context: tuple[str, ...] = ("Suite",),
    timestamp: float = 0.0,
) -> TestInfo:
    """Create TestInfo whose full_name joins context and short_name."""
    return TestInfo(
        full_name=" ".join((*context, short_name)),
        short_name=short_name,
        context=context,
        timestamp=timestamp,
    )


def make_fault(
    kind: FaultKind = FaultKind.FAILURE,
    message: str = "expected 1, got 2",
    backtrace: str | None = None,
    test: TestInfo | None = None,
) -> FaultEvent:
    """Create FaultEvent for tests."""
    return FaultEvent(
        test=test or make_test_info(),
        error=ErrorInfo(kind=kind, message=message, backtrace=backtrace),
    )


def make_summary(
    tests: int = 1,
    assertions: int = 1,
    failures: int = 0,
    errors: int = 0,
    runtime: float = 0.5,
) -> SuiteSummary:
    """Create SuiteSummary; passed is derived from failures and errors."""
    return SuiteSummary(
        passed=failures == 0 and errors == 0,
        tests=tests,
        assertions=assertions,
        failures=failures,
        errors=errors,
        runtime=runtime,
    )
