"""Domain exceptions: all public errors of mixkit.

All exceptions visible to users are defined here.
Each concrete error also inherits the builtin it semantically is,
so callers may catch either the mixkit type or the builtin.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence


class MixkitError(Exception):
    """Base for all mixkit error exceptions.

    Allows: except MixkitError to catch all library errors.
    """


class InvalidSuperCallError(MixkitError, LookupError):
    """super_() called from the most distant implementation of a method.

    Attributes:
        name: Method name being dispatched.
        receiver_type: Type name of the receiver.
    """

    def __init__(self, *, name: str, receiver: object) -> None:
        """Initialize with method name and receiver."""
        self.name = name
        self.receiver_type = type(receiver).__name__
        super().__init__(
            f"No ancestral implementation of '{name}' to call super on "
            f"(receiver: {self.receiver_type})"
        )


class MethodNotFoundError(MixkitError, AttributeError):
    """Dispatch found no callable implementation of the method.

    Attributes:
        module: Name of the module searched.
        name: Method name.
    """

    def __init__(self, *, module: str, name: str) -> None:
        """Initialize with module and method name."""
        self.module = module
        self.name = name
        super().__init__(f"Module '{module}' has no method '{name}'")


class MalformedMixinError(MixkitError, TypeError):
    """Mixin declaration is not structured as expected.

    Inherits TypeError for semantic correctness (expected type X, got Y).

    Attributes:
        field: Declaration that is malformed ("include", "extend", "source").
        got: Actual type received.
    """

    def __init__(self, *, field: str, got: type) -> None:
        """Initialize with declaration name and actual type."""
        self.field = field
        self.got = got
        super().__init__(
            f"'{field}' must be a Module, a method bag or a sequence of them, got {got.__name__}"
        )


class CyclicInclusionError(MixkitError, ValueError):
    """Inclusion would make a module its own ancestor.

    FAIL-FIRST: raised before the inclusion edge is created.

    Attributes:
        module: Name of the including module.
        source: Name of the module being included.
        path: Module names from source back to module.
    """

    def __init__(self, *, module: str, source: str, path: Sequence[str]) -> None:
        """Initialize with both module names and the closing path."""
        self.module = module
        self.source = source
        self.path = tuple(path)
        super().__init__(
            f"Including '{source}' into '{module}' creates a cycle: {' → '.join(self.path)}"
        )


class UnknownReporterError(MixkitError, KeyError):
    """No reporter registered under the requested name.

    Attributes:
        name: Requested reporter name.
        available: Registered reporter names.
    """

    def __init__(self, *, name: str, available: Sequence[str]) -> None:
        """Initialize with requested name and known names."""
        self.name = name
        self.available = tuple(available)
        super().__init__(f"Unknown reporter '{name}' (available: {', '.join(self.available)})")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])
