from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from servicebox.container import Container
from servicebox.container_context import container_context
from servicebox.exceptions import NonStandardFactoryInterfaceError
from servicebox.factories import is_factory_object
from servicebox.scopes import Scope

FactoryT = TypeVar("FactoryT")


def inject(
    *dependencies: str,
    container: Container | None = None,
) -> Callable[[FactoryT], FactoryT]:
    """Declare the dependencies of a factory next to its definition.

    Args:
        *dependencies: Service names passed positionally to ``create_instance``.
        container: Target container. Defaults to ``container_context``'s
            current container, looked up when the decorator is applied.

    Returns:
        A class decorator returning the factory unchanged.

    Raises:
        NonStandardFactoryInterfaceError: If the factory has no callable
            ``create_instance``.

    Examples:
        .. code-block:: python

            @inject("config")
            class GreeterFactory:
                @staticmethod
                def create_instance(config: dict[str, str]) -> str:
                    return "hello-" + config["env"]


            container.register("greeter", GreeterFactory)

    """

    def decorator(factory: FactoryT) -> FactoryT:
        _ensure_factory_interface(factory)
        target = container if container is not None else container_context.get_current()
        target.set_factory_dependencies(factory, dependencies)
        return factory

    return decorator


def scope(
    service_scope: Scope = Scope.SINGLETON,
    *,
    container: Container | None = None,
) -> Callable[[FactoryT], FactoryT]:
    """Declare the scope of a factory next to its definition.

    Args:
        service_scope: ``Scope.SINGLETON`` or ``Scope.PROTOTYPE``.
        container: Target container, as for ``inject``.

    Raises:
        NonStandardFactoryInterfaceError: If the factory has no callable
            ``create_instance``.

    Examples:
        .. code-block:: python

            @scope(Scope.PROTOTYPE)
            @inject("size")
            class WidgetFactory:
                @staticmethod
                def create_instance(size: int) -> Widget:
                    return Widget(size)

    """

    def decorator(factory: FactoryT) -> FactoryT:
        _ensure_factory_interface(factory)
        target = container if container is not None else container_context.get_current()
        target.set_factory_scope(factory, service_scope)
        return factory

    return decorator


def _ensure_factory_interface(factory: object) -> None:
    if not is_factory_object(factory):
        raise NonStandardFactoryInterfaceError(factory)
