from __future__ import annotations

import warnings
from collections.abc import Iterable, Sequence
from contextlib import nullcontext, suppress
from dataclasses import replace
from typing import Any

from servicebox.exceptions import (
    DuplicateRegistrationError,
    InvalidRegistrationError,
    SelfDependencyError,
    ServiceNotFoundError,
)
from servicebox.factories import (
    CreationRoutine,
    FactoryDescriptor,
    FactoryDescriptors,
    is_factory_object,
)
from servicebox.log import LoggerProtocol, get_logger, set_logger
from servicebox.providers import Provider
from servicebox.resolution_stack import resolving
from servicebox.scopes import Scope
from servicebox.settings import ServiceBoxSettings
from servicebox.sources import ServiceSource, SourceKind
from servicebox.validators import ArityValidator


class Container:
    """Registry of named services and the engine that assembles them.

    Services are registered under unique string names together with a value,
    a callable, or a factory object exposing ``create_instance``, plus the
    ordered names of the services they depend on. ``get`` resolves those
    dependencies on first access, invokes the creation routine, and caches the
    result for singleton-scoped factories.

    Factory metadata (dependencies and scope) can be declared ahead of
    registration through ``register_factory``, ``set_factory_scope`` and
    ``set_factory_dependencies``. That metadata is keyed by the identity of the
    creation routine and survives ``reset``.
    """

    __slots__ = (
        "_arity_validator",
        "_factories",
        "_providers",
        "_settings",
    )

    def __init__(self, settings: ServiceBoxSettings | None = None) -> None:
        """Initialize an empty container.

        Args:
            settings: Container defaults. When omitted they are read from
                ``SERVICEBOX_*`` environment variables.

        Examples:
            .. code-block:: python

                container = Container()

                strict_container = Container(
                    ServiceBoxSettings(default_scope=Scope.PROTOTYPE),
                )

        """
        self._settings = settings if settings is not None else ServiceBoxSettings()
        self._providers: dict[str, Provider] = {}
        self._factories = FactoryDescriptors()
        self._arity_validator = ArityValidator()

    @property
    def settings(self) -> ServiceBoxSettings:
        return self._settings

    @staticmethod
    def set_logger(logger: LoggerProtocol | None) -> None:
        """Replace the process-wide logger used by every container."""
        set_logger(logger)

    # region Registration Methods
    def register(
        self,
        name: str,
        factory: Any,
        dependencies: Sequence[str] | None = None,
        *,
        is_invokable: bool = False,
        scope: Scope | None = None,
    ) -> None:
        """Register a service under ``name``.

        Args:
            name: Unique service name used by ``get``.
            factory: A plain value, a callable, or a factory object exposing
                ``create_instance``.
            dependencies: Ordered service names passed positionally to the
                creation routine. When omitted, dependencies declared for the
                routine through ``inject`` or ``set_factory_dependencies`` are
                used, defaulting to none.
            is_invokable: Invoke the routine as a constructor building a new
                object from the resolved dependencies.
            scope: Scope for this registration, overriding any declared one.

        Raises:
            InvalidRegistrationError: If ``factory`` is ``None`` or an invokable
                registration gets something that cannot be called.
            DuplicateRegistrationError: If ``name`` is already registered.

        Notes:
            The legacy ``register(name, dependencies, factory)`` argument order
            is still accepted and emits a ``DeprecationWarning``.

        Examples:
            .. code-block:: python

                container.register("config", {"env": "test"})
                container.register(
                    "greeter",
                    lambda config: "hello-" + config["env"],
                    ["config"],
                )

        """
        if (
            isinstance(factory, list | tuple)
            and dependencies is not None
            and not isinstance(dependencies, list | tuple)
        ):
            warnings.warn(
                "register(name, dependencies, factory) is deprecated; "
                "pass the factory before its dependencies",
                DeprecationWarning,
                stacklevel=2,
            )
            factory, dependencies = dependencies, factory

        if factory is None:
            self._log_error("Registration of service '%s' failed: factory is None", name)
            raise InvalidRegistrationError(name, "factory is None")

        if is_invokable and not callable(factory):
            self._log_error(
                "Registration of service '%s' failed: %r cannot be invoked",
                name,
                factory,
            )
            raise InvalidRegistrationError(name, f"{factory!r} cannot be invoked as a constructor")

        if name in self._providers:
            self._log_error("Registration of service '%s' failed: name is taken", name)
            raise DuplicateRegistrationError(name)

        descriptor = self._descriptor_for_registration(factory, dependencies, scope)
        self._providers[name] = Provider(
            name=name,
            factory=descriptor,
            source=ServiceSource.from_registration(factory, is_invokable=is_invokable),
            is_invokable=is_invokable,
        )
        get_logger().debug(
            "Registered service '%s' with dependencies %s",
            name,
            descriptor.dependencies,
        )

    def register_invokable(
        self,
        name: str,
        factory: Any,
        dependencies: Sequence[str] | None = None,
        *,
        scope: Scope | None = None,
    ) -> None:
        """Register a constructor-style service.

        Same as ``register`` with ``is_invokable=True``: every build calls
        ``factory`` with the resolved dependencies to produce a new object.
        Factory objects still build through their ``create_instance``.

        Examples:
            .. code-block:: python

                container.register("size", 10)
                container.register_invokable("widget", Widget, ["size"])

        """
        self.register(name, factory, dependencies, is_invokable=True, scope=scope)

    def register_factory(
        self,
        creation_routine: CreationRoutine,
        dependencies: Sequence[str] | None = None,
        scope: Scope | None = None,
    ) -> FactoryDescriptor:
        """Declare metadata for a creation routine ahead of its registration.

        Args:
            creation_routine: Factory object or callable the metadata belongs to.
            dependencies: Ordered dependency names.
            scope: Scope of the instances built by the routine.

        Returns:
            The stored descriptor.

        Raises:
            DuplicateRegistrationError: If the routine already has a descriptor.

        """
        if creation_routine in self._factories:
            self._log_error("Factory %r is already registered", creation_routine)
            raise DuplicateRegistrationError(creation_routine)

        descriptor = FactoryDescriptor(
            creation_routine=creation_routine,
            dependencies=list(dependencies or []),
            scope=scope if scope is not None else self._settings.default_scope,
        )
        self._factories.add(descriptor)
        return descriptor

    def get_factory(self, creation_routine: CreationRoutine) -> FactoryDescriptor | None:
        """Return the descriptor declared for ``creation_routine``, if any."""
        return self._factories.find(creation_routine)

    def set_factory_scope(self, creation_routine: CreationRoutine, scope: Scope) -> None:
        """Set the scope declared for ``creation_routine``.

        A bare descriptor is registered first when the routine has none yet, so
        the declaration may happen before the service is registered.
        """
        self._ensure_factory(creation_routine).set_scope(scope)

    def set_factory_dependencies(
        self,
        creation_routine: CreationRoutine,
        names: Iterable[str],
    ) -> None:
        """Set the dependency names declared for ``creation_routine``."""
        self._ensure_factory(creation_routine).set_dependencies(names)

    # endregion Registration Methods

    # region Lookup Methods
    def get(self, name: str) -> Any:
        """Return the service registered under ``name``, building it if needed.

        Dependencies are resolved once per provider, in declared order. Singleton
        results are cached; prototype services are rebuilt on every call from the
        already resolved dependencies.

        Raises:
            ServiceNotFoundError: If ``name`` is not registered.
            SelfDependencyError: If the service lists itself as a dependency.
            CyclicDependencyError: If resolution re-enters a service being built.
            ArityMismatchError: If the routine cannot take the resolved arguments.

        """
        provider = self._providers.get(name)
        if provider is None:
            self._log_error("Service '%s' is not registered", name)
            raise ServiceNotFoundError(name)

        if provider.has_cached_instance:
            get_logger().debug("Returning cached service '%s'", name)
            return provider.cached_instance

        guard = resolving(self, name) if self._settings.detect_cycles else nullcontext()
        with guard:
            if not provider.dependencies_resolved:
                provider.mark_resolved(self._resolve_dependencies(provider))
            instance = self._invoke(provider)

        provider.store(instance)
        get_logger().debug("Built service '%s' (%s)", name, provider.factory.scope.value)
        return instance

    def names(self) -> list[str]:
        """Return registered service names in registration order."""
        return list(self._providers)

    def __contains__(self, name: object) -> bool:
        return name in self._providers

    def __len__(self) -> int:
        return len(self._providers)

    # endregion Lookup Methods

    # region Removal Methods
    def remove(self, name: str) -> None:
        """Drop the provider registered under ``name``.

        Removing an unknown name logs a warning and does nothing else.
        """
        provider = self._providers.pop(name, None)
        if provider is None:
            get_logger().warning("Cannot remove service '%s': it is not registered", name)
            return
        provider.clear()

    def reset(self) -> None:
        """Remove every provider, keeping declared factory metadata."""
        for name in list(self._providers):
            self.remove(name)

    # endregion Removal Methods

    def _descriptor_for_registration(
        self,
        factory: Any,
        dependencies: Sequence[str] | None,
        scope: Scope | None,
    ) -> FactoryDescriptor:
        declared = None
        if is_factory_object(factory) or callable(factory):
            declared = self._factories.find(factory)

        if declared is None:
            return FactoryDescriptor(
                creation_routine=factory,
                dependencies=list(dependencies or []),
                scope=scope if scope is not None else self._settings.default_scope,
            )

        if dependencies is None and scope is None:
            return declared

        overrides: dict[str, Any] = {}
        if dependencies is not None:
            overrides["dependencies"] = list(dependencies)
        if scope is not None:
            overrides["scope"] = Scope(scope)
        return replace(declared, **overrides)

    def _ensure_factory(self, creation_routine: CreationRoutine) -> FactoryDescriptor:
        descriptor = self._factories.find(creation_routine)
        if descriptor is None:
            descriptor = self.register_factory(creation_routine)
        return descriptor

    def _resolve_dependencies(self, provider: Provider) -> list[Any]:
        resolved: list[Any] = []
        for dependency_name in provider.factory.dependencies:
            if dependency_name == provider.name:
                raise SelfDependencyError(provider.name)
            resolved.append(self.get(dependency_name))
        return resolved

    def _invoke(self, provider: Provider) -> Any:
        source = provider.source
        arguments = provider.resolved_dependencies
        if source.kind is not SourceKind.VALUE and self._settings.validate_arity:
            self._arity_validator.validate(provider.name, source.routine, len(arguments))
        return source.build(arguments)

    def _log_error(self, msg: str, *args: Any) -> None:
        # the error that follows must be raised even when logging fails
        with suppress(Exception):
            get_logger().error(msg, *args)

    def __repr__(self) -> str:
        return f"Container(services={self.names()!r})"
