"""Plain method bag: the non-module variant of a mixin source.

A bag carries named values plus optional nested inclusion and extension
requests. It is decided at construction time whether something is a bag
or a Module; no structural probing happens during inclusion.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from mixkit.domain.exceptions import MalformedMixinError

if TYPE_CHECKING:
    from mixkit.domain.model.module import Module

# Keys with special meaning in MethodBag.from_mapping
RESERVED_KEYS: frozenset[str] = frozenset({"include", "extend"})


@dataclass(frozen=True, slots=True, eq=False)
class MethodBag:
    """Immutable bag of named methods with nested include/extend requests.

    Invariants (FAIL-FIRST):
    - include and extend contain only Module or MethodBag entries

    Attributes:
        methods: Name → implementation (any value; only callables dispatch)
        include: Sources to include into the includer before methods are added
        extend: Sources to extend the includer with (class-level methods)
    """

    methods: Mapping[str, object] = field(default_factory=dict)
    include: tuple[Module | MethodBag, ...] = ()
    extend: tuple[Module | MethodBag, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        from mixkit.domain.model.module import Module

        if not isinstance(self.methods, Mapping):
            raise MalformedMixinError(field="methods", got=type(self.methods))

        for name, entries in (("include", self.include), ("extend", self.extend)):
            if not isinstance(entries, tuple):
                raise MalformedMixinError(field=name, got=type(entries))
            for entry in entries:
                if not isinstance(entry, (Module, MethodBag)):
                    raise MalformedMixinError(field=name, got=type(entry))

        # Read-only view; the caller's dict must not leak mutations in
        object.__setattr__(self, "methods", MappingProxyType(dict(self.methods)))

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, object]) -> MethodBag:
        """Build bag from a mapping using the "include"/"extend" keys.

        Each reserved key may hold a Module, a MethodBag, a Mapping (converted
        recursively) or a list/tuple of those.

        Args:
            mapping: Name → value, optionally with "include" and "extend"

        Returns:
            MethodBag with reserved keys split out

        Raises:
            MalformedMixinError: Reserved key holds anything else
        """
        if not isinstance(mapping, Mapping):
            raise MalformedMixinError(field="source", got=type(mapping))

        methods = {k: v for k, v in mapping.items() if k not in RESERVED_KEYS}
        return cls(
            methods=methods,
            include=_sources("include", mapping.get("include")),
            extend=_sources("extend", mapping.get("extend")),
        )


def _sources(name: str, value: object) -> tuple[Module | MethodBag, ...]:
    """Normalize one reserved declaration to a tuple of sources."""
    from mixkit.domain.model.module import Module

    if value is None:
        return ()

    entries = value if isinstance(value, (list, tuple)) else (value,)
    result: list[Module | MethodBag] = []
    for entry in entries:
        match entry:
            case Module() | MethodBag():
                result.append(entry)
            case Mapping():
                result.append(MethodBag.from_mapping(entry))
            case _:
                raise MalformedMixinError(field=name, got=type(entry))
    return tuple(result)
