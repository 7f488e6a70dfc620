"""mixkit domain layer.

Module graph, linearization, dispatch and resolution.
Only imports: typing, dataclasses, enum, contextvars, collections.abc
"""

from mixkit.domain.exceptions import (
    CyclicInclusionError,
    InvalidSuperCallError,
    MalformedMixinError,
    MethodNotFoundError,
    MixkitError,
    UnknownReporterError,
)
from mixkit.domain.model import Binding, ClassTable, MethodBag, MethodTable, Module

__all__ = [
    "Binding",
    "ClassTable",
    "CyclicInclusionError",
    "InvalidSuperCallError",
    "MalformedMixinError",
    "MethodBag",
    "MethodNotFoundError",
    "MethodTable",
    "MixkitError",
    "Module",
    "UnknownReporterError",
]
