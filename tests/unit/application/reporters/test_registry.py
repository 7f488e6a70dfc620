"""Tests for application/reporters/_registry.py."""

from io import StringIO

import pytest

from mixkit.application.console import ConsoleConfig
from mixkit.application.reporters import _registry
from mixkit.application.reporters.dot import DotReporter
from mixkit.application.reporters.runner import RunnerReporter
from mixkit.domain.classes import define_class
from mixkit.domain.exceptions import UnknownReporterError


@pytest.fixture(autouse=True)
def isolated_registry(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep registrations made by a test out of other tests."""
    monkeypatch.setattr(_registry, "_REPORTERS", dict(_registry._REPORTERS))


class TestRegistry:
    """Tests for register/get/names."""

    def test_builtins_registered(self) -> None:
        assert _registry.names() == ("dot", "runner")
        assert _registry.get("dot") is DotReporter
        assert _registry.get("runner") is RunnerReporter

    def test_unknown_name_raises(self) -> None:
        with pytest.raises(UnknownReporterError, match="available: dot, runner"):
            _registry.get("tap")

    def test_register_custom(self) -> None:
        custom = define_class("Custom")
        _registry.register("custom", custom)
        assert _registry.get("custom") is custom
        assert "custom" in _registry.names()

    def test_register_empty_name_raises(self) -> None:
        with pytest.raises(ValueError, match="name"):
            _registry.register("", define_class("Custom"))


class TestCreate:
    """Tests for create()."""

    def test_plain_class_called_with_options(self) -> None:
        output = StringIO()
        reporter = _registry.create("dot", config=ConsoleConfig(output=output, color=False))
        assert isinstance(reporter, DotReporter)
        reporter.puts("hi")
        assert output.getvalue() == "hi\n"

    def test_create_hook_can_decline(self) -> None:
        assert _registry.create("runner") is None

    def test_create_hook_builds(self) -> None:
        class Client:
            def info(self, payload): ...

            def result(self, payload): ...

            def complete(self): ...

        assert isinstance(_registry.create("runner", client=Client()), RunnerReporter)
