"""Test run reporters built from mixin modules."""

from mixkit.application.reporters._registry import create, get, names, register
from mixkit.application.reporters.dot import DotReporter
from mixkit.application.reporters.protocol import ReporterProtocol, RunnerClient
from mixkit.application.reporters.runner import RunnerReporter

__all__ = [
    "DotReporter",
    "ReporterProtocol",
    "RunnerClient",
    "RunnerReporter",
    "create",
    "get",
    "names",
    "register",
]
