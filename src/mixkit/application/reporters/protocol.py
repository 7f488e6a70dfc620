"""Reporter protocol: contract for all test run reporters."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from mixkit.domain.events import ContextInfo, FaultEvent, SuiteInfo, SuiteSummary, TestInfo


class ReporterProtocol(Protocol):
    """Protocol for test run reporters.

    Reporters built with define_class() satisfy it structurally, the same
    way hand-written classes do.
    """

    def start_suite(self, event: SuiteInfo) -> None: ...

    def start_context(self, event: ContextInfo) -> None: ...

    def start_test(self, event: TestInfo) -> None: ...

    def add_fault(self, event: FaultEvent) -> None: ...

    def end_test(self, event: TestInfo) -> None: ...

    def end_context(self, event: ContextInfo) -> None: ...

    def update(self, event: SuiteSummary) -> None: ...

    def end_suite(self, event: SuiteSummary) -> None: ...


class RunnerClient(Protocol):
    """External test runner receiving results (see RunnerReporter)."""

    def info(self, payload: dict[str, object]) -> None: ...

    def result(self, payload: dict[str, object]) -> None: ...

    def complete(self) -> None: ...
