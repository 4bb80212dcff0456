"""Process-wide logger used by every container."""

from __future__ import annotations

import logging
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class LoggerProtocol(Protocol):
    """Leveled logging methods the container calls.

    ``logging.Logger`` satisfies this protocol, as does any object exposing the
    same methods.
    """

    def log(self, level: int, msg: str, *args: Any) -> None: ...  # noqa: D102

    def debug(self, msg: str, *args: Any) -> None: ...  # noqa: D102

    def info(self, msg: str, *args: Any) -> None: ...  # noqa: D102

    def warning(self, msg: str, *args: Any) -> None: ...  # noqa: D102

    def error(self, msg: str, *args: Any) -> None: ...  # noqa: D102


_default_logger = logging.getLogger("servicebox")
_default_logger.addHandler(logging.NullHandler())

DEFAULT_LOGGER: LoggerProtocol = _default_logger

_logger: LoggerProtocol = DEFAULT_LOGGER


def get_logger() -> LoggerProtocol:
    """Return the logger currently used by containers."""
    return _logger


def set_logger(logger: LoggerProtocol | None) -> None:
    """Replace the process-wide logger.

    Args:
        logger: Object exposing ``log``/``debug``/``info``/``warning``/``error``.
            Pass ``None`` to restore the default ``servicebox`` logger.

    """
    global _logger  # noqa: PLW0603
    _logger = DEFAULT_LOGGER if logger is None else logger
