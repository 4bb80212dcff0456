"""Factory objects, decorators, and the two scopes.

``inject`` and ``scope`` record metadata on a factory exposing
``create_instance``. Singletons are built once; prototypes are rebuilt on
every ``get`` while reusing their resolved dependencies.
"""

from __future__ import annotations

from servicebox import Container, Scope, inject, scope

container = Container()


class Widget:
    def __init__(self, size: int) -> None:
        self.size = size


@scope(Scope.PROTOTYPE, container=container)
@inject("size", container=container)
class WidgetFactory:
    @staticmethod
    def create_instance(size: int) -> Widget:
        return Widget(size)


class Counter:
    def __init__(self) -> None:
        self.count = 0


def main() -> None:
    container.register("size", 10)
    container.register("widget", WidgetFactory)
    container.register_invokable("counter", Counter)

    first = container.get("widget")
    second = container.get("widget")
    print(f"widget_size={first.size}")  # => widget_size=10
    print(f"widgets_distinct={first is not second}")  # => widgets_distinct=True

    container.get("counter").count += 1
    print(f"counter_shared={container.get('counter').count}")  # => counter_shared=1


if __name__ == "__main__":
    main()
