from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

from typing_extensions import Self

from servicebox.factories import CreationRoutine, is_factory_object


class SourceKind(Enum):
    """How a provider turns resolved dependencies into an instance."""

    VALUE = auto()
    """The registered object itself is the instance."""

    CALLABLE = auto()
    """A plain callable invoked with the dependencies as positional arguments."""

    CONSTRUCTOR = auto()
    """A constructor building a new object from the ordered dependencies."""

    FACTORY_OBJECT = auto()
    """An object whose ``create_instance`` method builds the instance."""


@dataclass(frozen=True, slots=True)
class ServiceSource:
    """A registered creation routine tagged with its invocation strategy."""

    kind: SourceKind
    target: CreationRoutine

    @classmethod
    def from_registration(
        cls,
        target: CreationRoutine,
        *,
        is_invokable: bool,
    ) -> Self:
        """Classify ``target`` once, at registration time.

        A factory object always builds through ``create_instance``, even when
        registered as invokable.
        """
        if is_factory_object(target):
            return cls(kind=SourceKind.FACTORY_OBJECT, target=target)
        if is_invokable:
            return cls(kind=SourceKind.CONSTRUCTOR, target=target)
        if callable(target):
            return cls(kind=SourceKind.CALLABLE, target=target)
        return cls(kind=SourceKind.VALUE, target=target)

    @property
    def routine(self) -> Callable[..., Any] | None:
        """The callable that will be invoked, or ``None`` for values."""
        if self.kind is SourceKind.VALUE:
            return None
        if self.kind is SourceKind.FACTORY_OBJECT:
            return self.target.create_instance
        return self.target

    def build(self, arguments: Sequence[Any]) -> Any:
        """Produce an instance from the ordered, already resolved arguments."""
        if self.kind is SourceKind.VALUE:
            return self.target
        if self.kind is SourceKind.FACTORY_OBJECT:
            return self.target.create_instance(*arguments)
        return self.target(*arguments)
