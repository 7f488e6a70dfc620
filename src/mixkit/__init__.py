"""mixkit - Ruby-style mixin modules with late-bound super calls."""

__version__ = "0.1.0"

from mixkit.domain.classes import define_class, module_of
from mixkit.domain.dispatch import SuperCall, calls_super, current_frame
from mixkit.domain.exceptions import (
    CyclicInclusionError,
    InvalidSuperCallError,
    MalformedMixinError,
    MethodNotFoundError,
    MixkitError,
)
from mixkit.domain.model import Binding, ClassTable, MethodBag, Module

__all__ = [
    "Binding",
    "ClassTable",
    "CyclicInclusionError",
    "InvalidSuperCallError",
    "MalformedMixinError",
    "MethodBag",
    "MethodNotFoundError",
    "MixkitError",
    "Module",
    "SuperCall",
    "__version__",
    "calls_super",
    "current_frame",
    "define_class",
    "module_of",
]
