"""Module: composable container of methods plus inclusion edges.

A module stores its own methods, the modules it includes and the modules
that include it. Its ancestor chain (MRO) is a depth-first linearization of
the inclusion graph with the module itself last:

    C ← B ← A        (A includes B, B includes C)
    A.ancestors() == (C, B, A)

Shared ancestors reached through several branches (diamonds) appear once,
at the position of their first occurrence.

Mutations propagate synchronously: adding a method or an inclusion
re-resolves every (transitive) dependent, so resolution targets always
expose the current effective methods.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

from mixkit.domain import dispatch as _dispatch
from mixkit.domain.exceptions import CyclicInclusionError, MalformedMixinError
from mixkit.domain.model.method_bag import MethodBag

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from mixkit.domain.model.target import MethodTable

    type DefinitionObserver = Callable[[str, Module], None]

logger = logging.getLogger(__name__)

_MISSING = object()


class Module:
    """Mutable module: method table, inclusions, dependents, cached MRO.

    Invariants:
    - B in A.included_modules ⟺ A in B.dependents
    - self is the last element of self.ancestors()
    - the inclusion graph is acyclic (checked on include)

    Subclasses may override included() and extended() to react when the
    module is mixed into another one.
    """

    __slots__ = (
        "_ancestors",
        "_dependents",
        "_included",
        "_meta",
        "_meta_target",
        "_methods",
        "_target",
        "_wrappers",
        "name",
    )

    def __init__(
        self,
        name: str = "",
        methods: Module | MethodBag | Mapping[str, object] | None = None,
        *,
        target: MethodTable | None = None,
        meta_target: MethodTable | None = None,
        observer: DefinitionObserver | None = None,
    ) -> None:
        """Create module, optionally seeded with methods.

        Args:
            name: Display name (used in errors and logs)
            methods: Initial source to include
            target: Method table effective methods are copied onto.
                None for pure mixins.
            meta_target: Method table for class-level extensions
            observer: Called for each callable method the seed defines
        """
        self.name = name
        self._methods: dict[str, object] = {}
        self._included: list[Module] = []
        self._dependents: list[Module] = []
        self._target = target
        self._ancestors: tuple[Module, ...] | None = None
        self._meta: Module | None = None
        self._meta_target = meta_target
        self._wrappers: dict[str, object] = {}

        if methods is not None:
            self.include(methods, observer=observer)

    def __repr__(self) -> str:
        return f"<Module {self.name or hex(id(self))}>"

    # -------------------------------------------------------------------------
    # Store
    # -------------------------------------------------------------------------

    @property
    def own_methods(self) -> Mapping[str, object]:
        """Methods defined directly on this module (read-only view)."""
        return MappingProxyType(self._methods)

    @property
    def included_modules(self) -> tuple[Module, ...]:
        """Directly included modules, in inclusion order."""
        return tuple(self._included)

    @property
    def dependents(self) -> tuple[Module, ...]:
        """Modules that directly include this one."""
        return tuple(self._dependents)

    @property
    def resolution_target(self) -> MethodTable | None:
        """Method table effective methods are copied onto, if any."""
        return self._target

    @property
    def meta(self) -> Module:
        """Module holding class-level extensions. Created on first access."""
        if self._meta is None:
            self._meta = Module(f"{self.name}.meta", target=self._meta_target)
        return self._meta

    def add_method(
        self,
        name: str,
        implementation: object,
        *,
        observer: DefinitionObserver | None = None,
        notify: Module | None = None,
    ) -> None:
        """Store implementation under name, replacing any previous one.

        Args:
            name: Method name
            implementation: Any value. Non-callables are stored and resolved
                but never dispatched.
            observer: Called as observer(name, notify) for callables
            notify: Module reported to the observer (default: self)
        """
        self._methods[name] = implementation
        if observer is not None and callable(implementation):
            observer(name, notify or self)
        self.resolve()

    def include(
        self,
        source: Module | MethodBag | Mapping[str, object] | None,
        *,
        resolve: bool = True,
        observer: DefinitionObserver | None = None,
    ) -> None:
        """Mix source into this module.

        Module: creates an inclusion edge; its methods become visible
        through ancestors(). MethodBag/Mapping: nested include and extend
        requests are processed first, then each method is added with
        add_method().

        Args:
            source: What to include. None is a no-op.
            resolve: Re-resolve this module afterwards
            observer: Forwarded to add_method() for bag methods

        Raises:
            CyclicInclusionError: source already includes this module
            MalformedMixinError: source is neither a module nor a bag
        """
        if isinstance(source, Mapping):
            source = MethodBag.from_mapping(source)
        self._check_acyclic(source, set())
        self._include(source, observer=observer, notify=self, processing=set())
        if resolve:
            self.resolve()

    def extend(
        self,
        source: Module | MethodBag | Mapping[str, object] | None,
        *,
        observer: DefinitionObserver | None = None,
    ) -> None:
        """Add class-level methods by including source into self.meta."""
        if source is None:
            return
        if isinstance(source, Mapping):
            source = MethodBag.from_mapping(source)
        self.meta._check_acyclic(source, set())
        self.meta._include(
            source, observer=observer, notify=self, processing=set(), extending=True
        )
        self.meta.resolve()

    def included(self, base: Module) -> None:
        """Hook: called after this module was included into base."""

    def extended(self, base: Module) -> None:
        """Hook: called after base was extended with this module."""

    def _include(
        self,
        source: Module | MethodBag | Mapping[str, object] | None,
        *,
        observer: DefinitionObserver | None,
        notify: Module,
        processing: set[MethodBag],
        extending: bool = False,
    ) -> None:
        match source:
            case None:
                return
            case Module():
                if self._add_edge(source):
                    if extending:
                        source.extended(notify)
                    else:
                        source.included(notify)
            case MethodBag():
                self._include_bag(source, observer=observer, notify=notify, processing=processing)
            case Mapping():
                bag = MethodBag.from_mapping(source)
                self._include_bag(bag, observer=observer, notify=notify, processing=processing)
            case _:
                raise MalformedMixinError(field="source", got=type(source))

    def _add_edge(self, source: Module) -> bool:
        """Link self → source. False if the edge already exists."""
        if any(m is source for m in self._included):
            return False

        self._reject_cycle(source)
        self._included.append(source)
        source._dependents.append(self)
        logger.debug("Included %r into %r", source, self)
        self._invalidate()
        return True

    def _check_acyclic(self, source: object, seen: set[MethodBag]) -> None:
        """Reject source before any edge is added if it would close a cycle.

        Walks nested include requests of bags so a bag is mixed in
        completely or not at all.
        """
        match source:
            case Module():
                self._reject_cycle(source)
            case MethodBag() if source not in seen:
                seen.add(source)
                for nested in source.include:
                    self._check_acyclic(nested, seen)

    def _reject_cycle(self, source: Module) -> None:
        path = source._path_to(self)
        if path is not None:
            logger.debug("Rejected cyclic inclusion of %r into %r", source, self)
            raise CyclicInclusionError(
                module=self.name or repr(self),
                source=source.name or repr(source),
                path=[m.name or repr(m) for m in path],
            )

    def _include_bag(
        self,
        bag: MethodBag,
        *,
        observer: DefinitionObserver | None,
        notify: Module,
        processing: set[MethodBag],
    ) -> None:
        if bag in processing:
            return
        processing.add(bag)

        # Pass 1: nested requests, so they sit below the bag's own methods
        for nested in bag.include:
            self._include(nested, observer=observer, notify=notify, processing=processing)
        for nested in bag.extend:
            notify.extend(nested, observer=observer)

        # Pass 2: the bag's own methods
        for name, implementation in bag.methods.items():
            self.add_method(name, implementation, observer=observer, notify=notify)

    def includes(self, other: Module) -> bool:
        """Check if other is self or a (transitive) inclusion of self."""
        return self._path_to(other) is not None

    def _path_to(self, other: Module) -> Sequence[Module] | None:
        """Inclusion path from self down to other, or None."""
        if self is other:
            return (self,)
        for included in self._included:
            path = included._path_to(other)
            if path is not None:
                return (self, *path)
        return None

    # -------------------------------------------------------------------------
    # Linearization
    # -------------------------------------------------------------------------

    def ancestors(self) -> tuple[Module, ...]:
        """Ancestor chain: most distant first, self last.

        Depth-first over included modules in inclusion order; duplicates
        keep their first position. Memoized until the graph changes.
        """
        if self._ancestors is None:
            results: list[Module] = []
            seen: set[int] = set()
            for included in self._included:
                for ancestor in included.ancestors():
                    if id(ancestor) not in seen:
                        seen.add(id(ancestor))
                        results.append(ancestor)
            if id(self) not in seen:
                results.append(self)
            self._ancestors = tuple(results)
        return self._ancestors

    def _invalidate(self) -> None:
        """Drop cached ancestors here and in every transitive dependent."""
        self._ancestors = None
        for dependent in self._dependents:
            dependent._invalidate()

    # -------------------------------------------------------------------------
    # Lookup and dispatch
    # -------------------------------------------------------------------------

    def lookup(self, name: str) -> tuple[object, ...]:
        """Every ancestor's own value for name, in ancestors() order.

        The last entry is the most specific implementation.
        """
        return tuple(
            ancestor._methods[name] for ancestor in self.ancestors() if name in ancestor._methods
        )

    def instance_method(self, name: str) -> object | None:
        """Most specific callable implementation of name, or None."""
        callees = self.lookup(name)
        if callees and callable(callees[-1]):
            return callees[-1]
        return None

    def dispatch(
        self,
        receiver: object,
        name: str,
        args: Sequence[object] = (),
        kwargs: Mapping[str, object] | None = None,
    ) -> object:
        """Invoke name on receiver through this module's ancestor chain."""
        return _dispatch.dispatch(self, receiver, name, args, kwargs)

    # -------------------------------------------------------------------------
    # Resolution
    # -------------------------------------------------------------------------

    def resolve(self, target: Module | MethodTable | None = None) -> None:
        """Copy effective methods onto resolution targets.

        Without target: invalidate, cascade to dependents, then copy onto
        this module's own target. With a Module target: copy this
        module's chain onto that module's table. With a method table: copy
        the effective methods onto it, dispatching through this module.
        """
        if target is None:
            self._ancestors = None
            for dependent in reversed(self._dependents):
                dependent.resolve()
            if self._target is not None:
                logger.debug("Resolving %r onto its target", self)
                self._copy_onto(self, self._target)
        elif isinstance(target, Module):
            if target._target is not None:
                self._copy_onto(target, target._target)
        else:
            self._copy_onto(self, target)

    def _copy_onto(self, owner: Module, table: MethodTable) -> None:
        """Write the effective methods of this chain onto table, wrapped by owner.

        Walks ancestors() once, so a shared ancestor never shadows a more
        specific implementation and every name is written at most once.
        """
        effective: dict[str, object] = {}
        for ancestor in self.ancestors():
            effective.update(ancestor._methods)
        for name, value in effective.items():
            made = owner.make(name, value)
            if table.get(name, _MISSING) is not made:
                table[name] = made

    def make(self, name: str, value: object) -> object:
        """Prepare value for a method table.

        Implementations marked with calls_super are wrapped so calls go
        through dispatch() on this module; everything else is returned
        unchanged. One wrapper is built per name: it looks the
        implementation up at call time, so it serves every implementation
        of that name.
        """
        if not _dispatch.uses_super(value):
            return value
        wrapper = self._wrappers.get(name)
        if wrapper is None:
            wrapper = _dispatch.wrap(self, name, value)
            self._wrappers[name] = wrapper
        return wrapper
