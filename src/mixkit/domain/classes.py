"""Module-based class construction.

define_class() builds a plain Python class whose attributes are kept in
sync with a backing Module: the module's effective methods are resolved
onto the class, and class-level extensions onto it as classmethods.

    Greeter = define_class("Greeter", {"hello": lambda self: "hi"})
    Greeter().hello()  # "hi"
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from mixkit.domain.exceptions import MixkitError
from mixkit.domain.model.module import Module
from mixkit.domain.model.target import Binding, ClassTable

if TYPE_CHECKING:
    from collections.abc import Mapping

    from mixkit.domain.model.method_bag import MethodBag

# Attribute holding the backing module on generated classes
MODULE_ATTR = "__mixkit_module__"


def define_class(
    name: str,
    *sources: Module | MethodBag | Mapping[str, object],
) -> type:
    """Create a class backed by a new module that includes sources in order.

    Args:
        name: Class name (also the module name)
        sources: Modules, method bags or mappings to include

    Returns:
        New class. Later changes to any included module show up on it.
    """
    cls = type(name, (), {})
    module = Module(
        name,
        target=ClassTable(cls),
        meta_target=ClassTable(cls, Binding.CLASS),
    )
    setattr(cls, MODULE_ATTR, module)
    for source in sources:
        module.include(source)
    return cls


def module_of(cls: type) -> Module:
    """Get the module backing a class built by define_class().

    Raises:
        MixkitError: cls was not built by define_class()
    """
    module = cls.__dict__.get(MODULE_ATTR)
    if not isinstance(module, Module):
        raise MixkitError(f"{cls.__name__} is not backed by a module")
    return module
