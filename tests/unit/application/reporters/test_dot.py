"""Tests for DotReporter.

Tests:
- Suite header, progress characters, fault details, summary line
- One symbol per faulty test
- Pluralisation
"""

from io import StringIO

from mixkit.application.console import ConsoleConfig
from mixkit.application.reporters.dot import DotReporter
from mixkit.application.reporters.protocol import ReporterProtocol
from mixkit.domain.events import ContextInfo, FaultKind
from tests.factories import (
    make_fault,
    make_suite_info,
    make_summary,
    make_test_info,
)


def make_reporter() -> tuple[object, StringIO]:
    """Create reporter writing uncoloured text to a buffer."""
    output = StringIO()
    reporter = DotReporter(ConsoleConfig(output=output, width=120, color=False))
    return reporter, output


def run_test(reporter: object, *faults: object) -> None:
    """Feed one test with the given faults to reporter."""
    test = make_test_info()
    reporter.start_test(test)
    for fault in faults:
        reporter.add_fault(fault)
    reporter.end_test(test)


class TestDotReporterHeader:
    """Tests for start_suite output."""

    def test_header(self) -> None:
        reporter, output = make_reporter()
        reporter.start_suite(make_suite_info("Calculator"))
        assert output.getvalue() == "Loaded suite: Calculator\n\nStarted\n"

    def test_satisfies_protocol(self) -> None:
        reporter, _ = make_reporter()
        typed: ReporterProtocol = reporter  # type: ignore[assignment]
        typed.start_context(ContextInfo(full_name="Calc"))
        typed.end_context(ContextInfo(full_name="Calc"))
        typed.update(make_summary())


class TestDotReporterProgress:
    """Tests for per-test characters."""

    def test_dot_for_passing_test(self) -> None:
        reporter, output = make_reporter()
        run_test(reporter)
        assert output.getvalue() == "."

    def test_symbol_per_fault_kind(self) -> None:
        reporter, output = make_reporter()
        run_test(reporter, make_fault(FaultKind.FAILURE))
        run_test(reporter, make_fault(FaultKind.ERROR))
        assert output.getvalue() == "FE"

    def test_one_symbol_per_test(self) -> None:
        reporter, output = make_reporter()
        run_test(reporter, make_fault(), make_fault(FaultKind.ERROR))
        run_test(reporter)
        assert output.getvalue() == "F."


class TestDotReporterSummary:
    """Tests for end_suite output."""

    def test_full_run(self) -> None:
        reporter, output = make_reporter()
        reporter.start_suite(make_suite_info("Calc", size=2))
        run_test(reporter)
        run_test(reporter, make_fault(message="expected 1, got 2", backtrace="calc.py:3"))
        reporter.end_suite(make_summary(tests=2, assertions=3, failures=1, runtime=0.25))

        text = output.getvalue()
        assert text.startswith("Loaded suite: Calc\n\nStarted\n.F")
        assert "\n1) Failure: Suite works\n" in text
        assert "expected 1, got 2\ncalc.py:3\n" in text
        assert "Finished in 0.25 seconds\n" in text
        assert text.endswith("2 tests, 3 assertions, 1 failure, 0 errors\n\n")

    def test_faults_numbered(self) -> None:
        reporter, output = make_reporter()
        reporter.start_suite(make_suite_info())
        run_test(reporter, make_fault(FaultKind.ERROR, message="boom"))
        run_test(reporter, make_fault(message="nope"))
        reporter.end_suite(make_summary(tests=2, failures=1, errors=1))

        text = output.getvalue()
        assert "1) Error: Suite works" in text
        assert "2) Failure: Suite works" in text

    def test_singular_counts(self) -> None:
        reporter, output = make_reporter()
        reporter.start_suite(make_suite_info())
        reporter.end_suite(make_summary(tests=1, assertions=1, failures=0, errors=1))
        assert "1 test, 1 assertion, 0 failures, 1 error" in output.getvalue()

    def test_start_suite_clears_faults(self) -> None:
        reporter, output = make_reporter()
        reporter.start_suite(make_suite_info())
        run_test(reporter, make_fault())
        reporter.start_suite(make_suite_info())
        reporter.end_suite(make_summary())
        assert "1) Failure" not in output.getvalue()
