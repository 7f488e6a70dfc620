"""Runner reporter: forwards results to an external test runner client.

Every payload is a JSON-serialisable dict. The class-level create()
returns None when no client is available, so the registry can skip it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from mixkit.domain.classes import define_class
from mixkit.domain.model import MethodBag

if TYPE_CHECKING:
    from typing import Any

    from mixkit.application.reporters.protocol import RunnerClient
    from mixkit.domain.events import ContextInfo, FaultEvent, SuiteInfo, SuiteSummary, TestInfo


def _create(cls: type, client: RunnerClient | None = None) -> object | None:
    if client is None:
        return None
    return cls(client)


def _init(self: Any, client: RunnerClient) -> None:
    self._client = client
    self._test_id = 0
    self._faults: list[str] = []
    self._start = 0.0


def _start_suite(self: Any, event: SuiteInfo) -> None:
    self._client.info({"total": event.size})


def _ignore(self: Any, event: ContextInfo | SuiteSummary) -> None:
    pass


def _start_test(self: Any, event: TestInfo) -> None:
    self._faults = []
    self._start = event.timestamp


def _add_fault(self: Any, event: FaultEvent) -> None:
    message = event.error.message
    if event.error.backtrace:
        message += "\n" + event.error.backtrace
    self._faults.append(message)


def _end_test(self: Any, event: TestInfo) -> None:
    self._test_id += 1
    self._client.result(
        {
            "id": self._test_id,
            "description": event.short_name,
            "suite": list(event.context),
            "success": not self._faults,
            "skipped": 0,
            "time": event.timestamp - self._start,
            "log": list(self._faults),
        }
    )


def _end_suite(self: Any, event: SuiteSummary) -> None:
    self._client.complete()


RunnerReporter = define_class(
    "RunnerReporter",
    MethodBag(
        methods={
            "__init__": _init,
            "start_suite": _start_suite,
            "start_context": _ignore,
            "start_test": _start_test,
            "add_fault": _add_fault,
            "end_test": _end_test,
            "end_context": _ignore,
            "update": _ignore,
            "end_suite": _end_suite,
        },
        extend=(MethodBag(methods={"create": _create}),),
    ),
)
