from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any, Protocol, TypeAlias, runtime_checkable

from servicebox.scopes import Scope

CreationRoutine: TypeAlias = Any
"""A value, callable, or factory object supplied by the user at registration."""


@runtime_checkable
class FactoryInterface(Protocol):
    """Capability of a factory object: a single ``create_instance`` method.

    Any object presenting the method qualifies, there is nothing to inherit.

    Examples:
        .. code-block:: python

            class GreeterFactory:
                @staticmethod
                def create_instance(config: dict[str, str]) -> Greeter:
                    return Greeter(config)

    """

    def create_instance(self, *args: Any) -> Any: ...  # noqa: D102


def is_factory_object(candidate: object) -> bool:
    """Return whether ``candidate`` satisfies ``FactoryInterface``.

    The runtime protocol check only sees that the attribute exists, so the
    attribute must also be callable.
    """
    return isinstance(candidate, FactoryInterface) and callable(candidate.create_instance)


@dataclass(slots=True)
class FactoryDescriptor:
    """Metadata wrapping a creation routine."""

    creation_routine: CreationRoutine
    """The callable, factory object, or value used to produce instances."""
    dependencies: list[str] = field(default_factory=list)
    """Service names positionally matched to the routine's parameters."""
    scope: Scope = Scope.SINGLETON
    """Caching policy of the instances built from this descriptor."""

    def __post_init__(self) -> None:
        self.scope = Scope(self.scope)

    def set_scope(self, scope: Scope) -> None:
        self.scope = Scope(scope)

    def set_dependencies(self, names: Iterable[str]) -> None:
        self.dependencies = list(names)


class FactoryDescriptors:
    """Descriptors keyed by the identity of their creation routine."""

    def __init__(self) -> None:
        self._descriptors_by_id: dict[int, FactoryDescriptor] = {}

    def add(self, descriptor: FactoryDescriptor) -> None:
        self._descriptors_by_id[id(descriptor.creation_routine)] = descriptor

    def find(self, creation_routine: CreationRoutine) -> FactoryDescriptor | None:
        # the descriptor keeps the routine alive, so its id cannot be reused
        return self._descriptors_by_id.get(id(creation_routine))

    def __contains__(self, creation_routine: CreationRoutine) -> bool:
        return id(creation_routine) in self._descriptors_by_id

    def __len__(self) -> int:
        return len(self._descriptors_by_id)
