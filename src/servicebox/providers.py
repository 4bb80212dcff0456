from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from servicebox.factories import FactoryDescriptor
from servicebox.scopes import Scope
from servicebox.sources import ServiceSource

_MISSING: Any = object()


@dataclass(kw_only=True, slots=True)
class Provider:
    """Runtime record of one registered service."""

    name: str
    """The key clients pass to ``Container.get``."""
    factory: FactoryDescriptor
    """Dependencies and scope of the service."""
    source: ServiceSource
    """Invocation strategy chosen at registration."""
    is_invokable: bool = False
    """Whether the routine is invoked as a constructor."""

    resolved_dependencies: list[Any] = field(default_factory=list)
    """Resolved dependency instances, in the order of ``factory.dependencies``."""
    dependencies_resolved: bool = False
    """Flips to ``True`` once every dependency has been resolved."""
    cached_instance: Any = _MISSING
    """The singleton instance, once built."""

    @property
    def has_cached_instance(self) -> bool:
        return self.cached_instance is not _MISSING

    def mark_resolved(self, dependencies: list[Any]) -> None:
        self.resolved_dependencies = dependencies
        self.dependencies_resolved = True

    def store(self, instance: Any) -> None:
        """Cache ``instance`` when the provider is a singleton."""
        if instance is not None and self.factory.scope is Scope.SINGLETON:
            self.cached_instance = instance

    def clear(self) -> None:
        self.cached_instance = _MISSING
        self.resolved_dependencies = []
        self.dependencies_resolved = False
