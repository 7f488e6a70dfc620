"""Resolution targets: method tables effective methods are copied onto.

Any MutableMapping[str, object] works as a target. ClassTable mirrors a
table onto a Python class so instances call resolved methods natively.
"""

from __future__ import annotations

from collections.abc import MutableMapping
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

type MethodTable = MutableMapping[str, object]


class Binding(Enum):
    """How callables are exposed on the class."""

    INSTANCE = "instance"
    CLASS = "class"


class ClassTable(MutableMapping[str, object]):
    """Method table backed by a Python class.

    Keeps the raw resolved values (so identity checks compare what was
    resolved) and mirrors every write onto the class with setattr().
    With Binding.CLASS callables are installed as classmethods.

    Attributes:
        cls: Class receiving the methods
        binding: Instance or class-level binding
    """

    __slots__ = ("_values", "binding", "cls")

    def __init__(self, cls: type, binding: Binding = Binding.INSTANCE) -> None:
        self.cls = cls
        self.binding = binding
        self._values: dict[str, object] = {}

    def __repr__(self) -> str:
        return f"ClassTable({self.cls.__name__}, {self.binding.value})"

    def __getitem__(self, name: str) -> object:
        return self._values[name]

    def __setitem__(self, name: str, value: object) -> None:
        self._values[name] = value
        if self.binding is Binding.CLASS and callable(value):
            setattr(self.cls, name, classmethod(value))
        else:
            setattr(self.cls, name, value)

    def __delitem__(self, name: str) -> None:
        del self._values[name]
        delattr(self.cls, name)

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)
