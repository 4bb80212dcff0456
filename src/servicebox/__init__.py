from servicebox.container import Container
from servicebox.container_context import ContainerContext, container_context
from servicebox.decorators import inject, scope
from servicebox.exceptions import (
    ArityMismatchError,
    CyclicDependencyError,
    DuplicateRegistrationError,
    InvalidRegistrationError,
    NonStandardFactoryInterfaceError,
    SelfDependencyError,
    ServiceBoxError,
    ServiceNotFoundError,
)
from servicebox.factories import FactoryDescriptor, FactoryInterface
from servicebox.log import LoggerProtocol, get_logger, set_logger
from servicebox.scopes import Scope
from servicebox.settings import ServiceBoxSettings

__all__ = [
    "ArityMismatchError",
    "Container",
    "ContainerContext",
    "CyclicDependencyError",
    "DuplicateRegistrationError",
    "FactoryDescriptor",
    "FactoryInterface",
    "InvalidRegistrationError",
    "LoggerProtocol",
    "NonStandardFactoryInterfaceError",
    "Scope",
    "SelfDependencyError",
    "ServiceBoxError",
    "ServiceBoxSettings",
    "ServiceNotFoundError",
    "container_context",
    "get_logger",
    "inject",
    "scope",
    "set_logger",
]
