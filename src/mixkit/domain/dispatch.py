"""Dispatcher: late-bound super calls along a module's ancestor chain.

Implementations opt into the protocol with @calls_super and receive the
current SuperCall frame as the ``super_`` keyword:

    @calls_super
    def hello(self, *, super_):
        return super_().upper() + "!"

Ancestors are looked up at call time, so methods added to an ancestor
after resolution are still found. Every dispatch gets its own frame;
frames live on a per-context stack, never on the receiver, so nested and
re-entrant dispatches cannot corrupt each other's cursor or arguments.
"""

from __future__ import annotations

import functools
from contextvars import ContextVar
from typing import TYPE_CHECKING

from mixkit.domain.exceptions import InvalidSuperCallError, MethodNotFoundError

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping, Sequence

    from mixkit.domain.model.module import Module

_FRAMES: ContextVar[tuple[SuperCall, ...]] = ContextVar("mixkit_frames", default=())


def calls_super[F: Callable[..., object]](fn: F) -> F:
    """Mark fn as using super_(). Marked methods are dispatched with a frame."""
    fn.__calls_super__ = True  # type: ignore[attr-defined]
    return fn


def uses_super(value: object) -> bool:
    """Check if value is a callable marked with calls_super."""
    return callable(value) and getattr(value, "__calls_super__", False) is True


class SuperCall:
    """Call-super frame of one dispatch.

    Calling the frame runs the next more distant implementation. Positional
    overrides replace stored arguments by index; omitted positions keep
    their current values. Overrides persist for later super calls of the
    same dispatch.

    Attributes:
        receiver: Object the method was invoked on
        name: Method name
        callees: Callable implementations, most distant first
        cursor: Index of the implementation currently running
        args: Argument snapshot passed up the chain
        kwargs: Keyword snapshot passed up the chain
    """

    __slots__ = ("args", "callees", "cursor", "kwargs", "name", "receiver")

    def __init__(
        self,
        receiver: object,
        name: str,
        callees: Sequence[Callable[..., object]],
        args: Sequence[object],
        kwargs: Mapping[str, object],
    ) -> None:
        self.receiver = receiver
        self.name = name
        self.callees = tuple(callees)
        self.cursor = len(self.callees) - 1
        self.args = list(args)
        self.kwargs = dict(kwargs)

    def __repr__(self) -> str:
        return f"<SuperCall {self.name} {self.cursor + 1}/{len(self.callees)}>"

    def __call__(self, *args: object, **kwargs: object) -> object:
        """Invoke the next more distant implementation.

        Raises:
            InvalidSuperCallError: Current implementation is the most distant
        """
        if self.cursor <= 0:
            raise InvalidSuperCallError(name=self.name, receiver=self.receiver)

        for index, value in enumerate(args):
            if index < len(self.args):
                self.args[index] = value
            else:
                self.args.append(value)
        self.kwargs.update(kwargs)

        self.cursor -= 1
        try:
            return self._invoke(self.callees[self.cursor])
        finally:
            self.cursor += 1

    @property
    def has_next(self) -> bool:
        """Check if a more distant implementation exists."""
        return self.cursor > 0

    def _invoke(self, implementation: Callable[..., object]) -> object:
        if uses_super(implementation):
            return implementation(self.receiver, *self.args, super_=self, **self.kwargs)
        return implementation(self.receiver, *self.args, **self.kwargs)


def dispatch(
    module: Module,
    receiver: object,
    name: str,
    args: Sequence[object] = (),
    kwargs: Mapping[str, object] | None = None,
) -> object:
    """Invoke name on receiver, starting at the most specific implementation.

    Args:
        module: Module whose ancestor chain is searched
        receiver: Object passed as self
        name: Method name
        args: Positional arguments
        kwargs: Keyword arguments

    Returns:
        Result of the most specific implementation

    Raises:
        MethodNotFoundError: No ancestor defines a callable name
    """
    callees = [value for value in module.lookup(name) if callable(value)]
    if not callees:
        raise MethodNotFoundError(module=module.name or repr(module), name=name)

    frame = SuperCall(receiver, name, callees, args, kwargs or {})
    token = _FRAMES.set((*_FRAMES.get(), frame))
    try:
        return frame._invoke(frame.callees[-1])
    finally:
        _FRAMES.reset(token)


def wrap(module: Module, name: str, implementation: Callable[..., object]) -> Callable[..., object]:
    """Build the method-table entry that dispatches name through module."""

    @functools.wraps(implementation, updated=())
    def dispatcher(self: object, *args: object, **kwargs: object) -> object:
        return dispatch(module, self, name, args, kwargs)

    return dispatcher


def current_frame() -> SuperCall | None:
    """Innermost active dispatch frame, or None outside dispatch."""
    frames = _FRAMES.get()
    return frames[-1] if frames else None


def active_frames() -> tuple[SuperCall, ...]:
    """All active dispatch frames, outermost first."""
    return _FRAMES.get()
