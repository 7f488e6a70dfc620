"""Reporter registry: name → reporter class.

Central registry of reporters with a factory honouring each class's
optional create() hook.
"""

from __future__ import annotations

import logging

from mixkit.application.reporters.dot import DotReporter
from mixkit.application.reporters.runner import RunnerReporter
from mixkit.domain.exceptions import UnknownReporterError

logger = logging.getLogger(__name__)

_REPORTERS: dict[str, type] = {}


def register(name: str, cls: type) -> None:
    """Register cls under name, replacing any previous registration.

    Raises:
        ValueError: name is empty
    """
    if not name:
        raise ValueError("reporter name must not be empty")
    _REPORTERS[name] = cls
    logger.debug("Registered reporter %s as %r", cls.__name__, name)


def get(name: str) -> type:
    """Get reporter class registered under name.

    Raises:
        UnknownReporterError: Nothing registered under name
    """
    try:
        return _REPORTERS[name]
    except KeyError:
        raise UnknownReporterError(name=name, available=names()) from None


def names() -> tuple[str, ...]:
    """Registered reporter names, sorted."""
    return tuple(sorted(_REPORTERS))


def create(name: str, **options: object) -> object | None:
    """Instantiate the reporter registered under name.

    Classes with a create() classmethod decide themselves whether they
    are available (None = unavailable); others are called with options.
    """
    cls = get(name)
    factory = getattr(cls, "create", None)
    if callable(factory):
        return factory(**options)
    return cls(**options)


register("dot", DotReporter)
register("runner", RunnerReporter)
