"""Tests for domain/classes.py."""

import pytest

from mixkit.domain.classes import define_class, module_of
from mixkit.domain.dispatch import calls_super
from mixkit.domain.exceptions import MixkitError
from mixkit.domain.model.method_bag import MethodBag
from mixkit.domain.model.module import Module
from mixkit.domain.model.target import ClassTable


class TestDefineClass:
    """Tests for define_class."""

    def test_creates_named_class(self) -> None:
        cls = define_class("Widget")
        assert isinstance(cls, type)
        assert cls.__name__ == "Widget"

    def test_methods_callable_on_instances(self) -> None:
        cls = define_class("Widget", {"size": lambda self: 3})
        assert cls().size() == 3

    def test_backing_module(self) -> None:
        shared = Module("Shared")
        cls = define_class("Widget", shared)
        module = module_of(cls)
        assert module.name == "Widget"
        assert module.included_modules == (shared,)
        assert isinstance(module.resolution_target, ClassTable)

    def test_sources_included_in_order(self) -> None:
        first = Module("First", {"who": lambda self: "first"})
        second = Module("Second", {"who": lambda self: "second"})
        cls = define_class("Widget", first, second)
        assert cls().who() == "second"

    def test_init_from_bag(self) -> None:
        def init(self, size):
            self.size = size

        cls = define_class("Widget", {"__init__": init})
        assert cls(4).size == 4

    def test_live_update(self) -> None:
        shared = Module("Shared")
        cls = define_class("Widget", shared)
        instance = cls()
        shared.add_method("late", lambda self: "late")
        assert instance.late() == "late"

    def test_super_through_class(self) -> None:
        base = Module("Base", {"describe": lambda self, noun: f"a {noun}"})

        @calls_super
        def describe(self, noun, *, super_):
            return super_().upper()

        cls = define_class("Widget", base, {"describe": describe})
        assert cls().describe("box") == "A BOX"

    def test_extend_becomes_classmethod(self) -> None:
        def create(cls, size):
            return cls(size)

        def init(self, size):
            self.size = size

        cls = define_class(
            "Widget",
            MethodBag(methods={"__init__": init}, extend=(MethodBag(methods={"create": create}),)),
        )
        assert cls.create(2).size == 2

    def test_extend_via_module_later(self) -> None:
        cls = define_class("Widget")
        module_of(cls).extend({"kind": lambda klass: klass.__name__})
        assert cls.kind() == "Widget"


class TestModuleOf:
    """Tests for module_of."""

    def test_plain_class_raises(self) -> None:
        with pytest.raises(MixkitError, match="int"):
            module_of(int)

    def test_subclass_is_not_backed(self) -> None:
        cls = define_class("Widget")
        sub = type("Sub", (cls,), {})
        with pytest.raises(MixkitError):
            module_of(sub)
