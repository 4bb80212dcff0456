"""Pytest fixtures for isolated containers.

Enable with ``pytest_plugins = ["servicebox.integrations.pytest_plugin"]``.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from servicebox.container import Container
from servicebox.container_context import container_context
from servicebox.log import get_logger, set_logger


@pytest.fixture()
def servicebox_container() -> Iterator[Container]:
    """Provide a fresh container bound as ``container_context``'s current one.

    The previous binding and the process-wide logger are restored after the
    test, so decorators applied inside a test never leak registrations.

    Yields:
        A new ``Container`` instance.

    """
    previous_logger = get_logger()
    container = Container()
    previous_container = container_context.set_current(container)
    try:
        yield container
    finally:
        container.reset()
        container_context.set_current(previous_container)
        set_logger(previous_logger)
