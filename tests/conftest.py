"""Shared pytest fixtures for servicebox tests."""

from collections.abc import Iterator

import pytest

from servicebox.container import Container
from servicebox.container_context import container_context
from servicebox.log import get_logger, set_logger
from servicebox.scopes import Scope
from servicebox.settings import ServiceBoxSettings
from tests.logging_helpers import RecordingLogger


@pytest.fixture()
def container() -> Container:
    """Container with default settings."""
    return Container(ServiceBoxSettings())


@pytest.fixture()
def prototype_container() -> Container:
    """Container whose undeclared factories default to prototype scope."""
    return Container(ServiceBoxSettings(default_scope=Scope.PROTOTYPE))


@pytest.fixture(autouse=True)
def _restore_process_state() -> Iterator[None]:
    previous_logger = get_logger()
    previous_container = container_context.set_current(None)
    try:
        yield
    finally:
        set_logger(previous_logger)
        container_context.set_current(previous_container)


@pytest.fixture()
def recording_logger() -> RecordingLogger:
    logger = RecordingLogger()
    set_logger(logger)
    return logger
