"""Dot reporter: one character per test, fault details at the end.

Built from the CONSOLE module, so all output goes through echo().

    Loaded suite: Calculator
    Started
    ..F.E

    1) Failure: Calculator adds
    ...
    Finished in 0.12 seconds
    5 tests, 9 assertions, 1 failure, 1 error
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from mixkit.application.console import CONSOLE
from mixkit.domain.classes import define_class
from mixkit.domain.events import FaultKind
from mixkit.domain.model import MethodBag

if TYPE_CHECKING:
    from typing import Any

    from mixkit.application.console import ConsoleConfig
    from mixkit.domain.events import ContextInfo, FaultEvent, SuiteInfo, SuiteSummary, TestInfo


def _init(self: Any, config: ConsoleConfig | None = None) -> None:
    if config is not None:
        self.console_config = config
    self._faults: list[FaultEvent] = []
    self._output_fault = False


def _start_suite(self: Any, event: SuiteInfo) -> None:
    self._faults = []

    self.console_format("bold")
    self.puts(f"Loaded suite: {event.full_name}")
    self.puts("")
    self.reset()
    self.puts("Started")


def _ignore(self: Any, event: ContextInfo | SuiteSummary) -> None:
    pass


def _start_test(self: Any, event: TestInfo) -> None:
    self._output_fault = False


def _add_fault(self: Any, event: FaultEvent) -> None:
    self._faults.append(event)
    # One symbol per test, however many faults it has
    if self._output_fault:
        return
    self._output_fault = True
    self.console_format("bold", "red")
    self.print(self.SYMBOLS[event.error.kind])
    self.reset()


def _end_test(self: Any, event: TestInfo) -> None:
    if self._output_fault:
        return
    self.console_format("green")
    self.print(".")
    self.reset()


def _end_suite(self: Any, event: SuiteSummary) -> None:
    for index, fault in enumerate(self._faults, start=1):
        self._print_fault(index, fault)
    self._print_summary(event)


def _print_fault(self: Any, index: int, fault: FaultEvent) -> None:
    self.puts("")
    self.console_format("bold", "red")
    self.puts(f"\n{index}) {self.NAMES[fault.error.kind]}: {fault.test.full_name}")
    self.reset()
    self.puts(fault.error.message)
    if fault.error.backtrace:
        self.puts(fault.error.backtrace)
    self.reset()


def _print_summary(self: Any, event: SuiteSummary) -> None:
    self.reset()
    self.puts("")
    self.puts(f"Finished in {event.runtime} seconds")

    self.console_format("green" if event.passed else "red")
    self.puts(
        ", ".join(
            (
                _plural(event.tests, "test"),
                _plural(event.assertions, "assertion"),
                _plural(event.failures, "failure"),
                _plural(event.errors, "error"),
            )
        )
    )
    self.reset()
    self.puts("")


def _plural(number: int, noun: str) -> str:
    return f"{number} {noun}{'' if number == 1 else 's'}"


DotReporter = define_class(
    "DotReporter",
    CONSOLE,
    MethodBag(
        methods={
            "SYMBOLS": {FaultKind.FAILURE: "F", FaultKind.ERROR: "E"},
            "NAMES": {FaultKind.FAILURE: "Failure", FaultKind.ERROR: "Error"},
            "__init__": _init,
            "start_suite": _start_suite,
            "start_context": _ignore,
            "start_test": _start_test,
            "add_fault": _add_fault,
            "end_test": _end_test,
            "end_context": _ignore,
            "update": _ignore,
            "end_suite": _end_suite,
            "_print_fault": _print_fault,
            "_print_summary": _print_summary,
        }
    ),
)
