"""Tests for resolution through ``Container.get``."""

from dataclasses import dataclass

import pytest

from servicebox.container import Container
from servicebox.exceptions import ServiceNotFoundError
from servicebox.scopes import Scope


def test_get_missing_service_on_empty_container_raises(container: Container) -> None:
    with pytest.raises(ServiceNotFoundError) as exc_info:
        container.get("missing")

    assert exc_info.value.name == "missing"
    assert "is not registered" in str(exc_info.value)


def test_greeter_receives_literal_config(container: Container) -> None:
    container.register("config", {"env": "test"})
    container.register("greeter", lambda config: "hello-" + config["env"], ["config"])

    assert container.get("greeter") == "hello-test"


def test_dependencies_are_passed_in_declared_order(container: Container) -> None:
    container.register("b", "B")
    container.register("c", "C")
    container.register("a", lambda first, second: (first, second), ["b", "c"])

    assert container.get("a") == ("B", "C")


def test_dependencies_may_be_registered_after_dependent(container: Container) -> None:
    container.register("a", lambda b: f"a({b})", ["b"])
    container.register("b", lambda c: f"b({c})", ["c"])
    container.register("c", "c")

    assert container.get("a") == "a(b(c))"


def test_missing_dependency_raises_service_not_found(container: Container) -> None:
    container.register("a", lambda b: b, ["b"])

    with pytest.raises(ServiceNotFoundError) as exc_info:
        container.get("a")

    assert exc_info.value.name == "b"


def test_failed_resolution_can_be_retried(container: Container) -> None:
    container.register("a", lambda b, c: b + c, ["b", "c"])
    container.register("b", 1)

    with pytest.raises(ServiceNotFoundError):
        container.get("a")

    container.register("c", 2)

    assert container.get("a") == 3
    assert container._providers["a"].resolved_dependencies == [1, 2]


class TestInvocationStrategies:
    def test_value_is_returned_as_is(self, container: Container) -> None:
        value = object()
        container.register("value", value)

        assert container.get("value") is value

    def test_callable_result_is_the_instance(self, container: Container) -> None:
        container.register("answer", lambda: 42)

        assert container.get("answer") == 42

    def test_factory_object_create_instance_is_invoked(self, container: Container) -> None:
        class AnswerFactory:
            @classmethod
            def create_instance(cls, base: int) -> int:
                return base * 2

        container.register("base", 21)
        container.register("answer", AnswerFactory, ["base"])

        assert container.get("answer") == 42

    def test_factory_object_instance_is_supported(self, container: Container) -> None:
        class PrefixFactory:
            def __init__(self, prefix: str) -> None:
                self.prefix = prefix

            def create_instance(self, name: str) -> str:
                return self.prefix + name

        container.register("name", "world")
        container.register("greeting", PrefixFactory("hello-"), ["name"])

        assert container.get("greeting") == "hello-world"

    def test_constructor_builds_from_ordered_arguments(self, container: Container) -> None:
        @dataclass
        class Point:
            x: int
            y: int

        container.register("x", 1)
        container.register("y", 2)
        container.register_invokable("point", Point, ["x", "y"])

        assert container.get("point") == Point(1, 2)

    def test_callable_returning_none_is_not_cached(self, container: Container) -> None:
        calls: list[int] = []

        def record() -> None:
            calls.append(1)

        container.register("side_effect", record)

        assert container.get("side_effect") is None
        assert container.get("side_effect") is None
        assert len(calls) == 2


class TestInvokableWidget:
    class Widget:
        def __init__(self, size: int) -> None:
            self.size = size

    def test_widget_is_built_with_size(self, container: Container) -> None:
        container.register("size", 10)
        container.register_invokable("widget", self.Widget, ["size"])

        widget = container.get("widget")

        assert isinstance(widget, self.Widget)
        assert widget.size == 10

    def test_prototype_widget_is_rebuilt(self, container: Container) -> None:
        container.register("size", 10)
        container.register_invokable("widget", self.Widget, ["size"], scope=Scope.PROTOTYPE)

        first = container.get("widget")
        second = container.get("widget")

        assert first is not second
        assert first.size == second.size == 10

    def test_invokable_factory_object_builds_through_create_instance(
        self,
        container: Container,
    ) -> None:
        widget_class = self.Widget

        class WidgetFactory:
            @staticmethod
            def create_instance(size: int) -> "TestInvokableWidget.Widget":
                return widget_class(size)

        container.register("size", 10)
        container.register_invokable("widget", WidgetFactory, ["size"])

        widget = container.get("widget")

        assert isinstance(widget, self.Widget)
        assert widget.size == 10


class TestRemoveAndReset:
    def test_remove_missing_name_is_a_noop(self, container: Container) -> None:
        container.register("config", {})

        container.remove("missing")

        assert container.names() == ["config"]

    def test_remove_clears_provider_state(self, container: Container) -> None:
        container.register("b", "B")
        container.register("a", lambda b: [b], ["b"])
        container.get("a")
        provider = container._providers["a"]

        container.remove("a")

        assert provider.dependencies_resolved is False
        assert provider.resolved_dependencies == []
        assert provider.has_cached_instance is False
        with pytest.raises(ServiceNotFoundError):
            container.get("a")

    def test_reset_removes_every_service(self, container: Container) -> None:
        container.register("a", 1)
        container.register("b", 2)

        container.reset()

        assert len(container) == 0
        for name in ("a", "b"):
            with pytest.raises(ServiceNotFoundError):
                container.get(name)

    def test_reset_keeps_declared_factory_metadata(self, container: Container) -> None:
        class TokenFactory:
            @staticmethod
            def create_instance(prefix: str) -> list[str]:
                return [prefix]

        container.register_factory(TokenFactory, ["prefix"], Scope.PROTOTYPE)
        container.register("prefix", "p")
        container.register("token", TokenFactory)
        container.get("token")

        container.reset()
        container.register("prefix", "q")
        container.register("token", TokenFactory)

        first = container.get("token")
        assert first == ["q"]
        assert container.get("token") is not first
