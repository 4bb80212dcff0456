from __future__ import annotations

from collections.abc import Sequence
from typing import Any


class ServiceBoxError(Exception):
    """Represent a base class for all servicebox-specific failures.

    Catch this type when you want to handle any container error path without
    matching each concrete exception class individually.
    """


class InvalidRegistrationError(ServiceBoxError):
    """Signal a registration call that cannot produce a provider.

    Raised by ``Container.register`` and ``Container.register_invokable`` when
    the factory is ``None`` or when constructor-style invocation is requested
    for something that cannot be called.
    """

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"The arguments for '{name}' are not valid: {reason}")


class DuplicateRegistrationError(ServiceBoxError):
    """Signal that a service name or a factory routine is already registered.

    Typical fixes are calling ``Container.remove`` before registering the name
    again, or using ``set_factory_scope``/``set_factory_dependencies`` to update
    metadata of an already declared factory.
    """

    def __init__(self, key: Any) -> None:
        self.key = key
        super().__init__(f"{key!r} is already registered")


class ServiceNotFoundError(ServiceBoxError):
    """Signal that ``get`` was asked for a name that has no provider."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Service '{name}' is not registered")


class SelfDependencyError(ServiceBoxError):
    """Signal a provider that lists its own name among its dependencies."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Service '{name}' cannot depend on itself")


class CyclicDependencyError(ServiceBoxError):
    """Signal an indirect dependency cycle such as ``a -> b -> a``.

    The ``chain`` attribute holds the names in resolution order, ending with
    the name that was requested a second time.
    """

    def __init__(self, name: str, chain: Sequence[str]) -> None:
        self.name = name
        self.chain = tuple(chain)
        super().__init__(
            f"Circular dependency detected while resolving '{name}': {' -> '.join(self.chain)}",
        )


class ArityMismatchError(ServiceBoxError):
    """Signal that the resolved dependencies do not fit the routine signature.

    ``expected`` is a human readable description of the accepted argument
    count, ``actual`` is the number of resolved dependencies.
    """

    def __init__(self, name: str, expected: str, actual: int) -> None:
        self.name = name
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"The factory for '{name}' expects {expected} argument(s) "
            f"but {actual} dependencies were resolved",
        )


class NonStandardFactoryInterfaceError(ServiceBoxError):
    """Signal that a decorated factory does not expose ``create_instance``.

    Raised by ``inject`` and ``scope``. Typical fix is adding a static or class
    method named ``create_instance`` to the factory.
    """

    def __init__(self, factory: Any) -> None:
        self.factory = factory
        factory_name = getattr(factory, "__qualname__", None) or repr(factory)
        super().__init__(
            f"The factory {factory_name} has a non-standard interface. "
            'Please create one with a static method "create_instance"',
        )
