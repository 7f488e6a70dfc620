"""Domain model entities."""

from mixkit.domain.model.method_bag import MethodBag
from mixkit.domain.model.module import Module
from mixkit.domain.model.target import Binding, ClassTable, MethodTable

__all__ = [
    "Binding",
    "ClassTable",
    "MethodBag",
    "MethodTable",
    "Module",
]
