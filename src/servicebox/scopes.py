from __future__ import annotations

from enum import Enum


class Scope(str, Enum):
    """Instance caching policy of a factory."""

    SINGLETON = "singleton"
    """The first built instance is cached and returned by every later ``get``."""

    PROTOTYPE = "prototype"
    """The creation routine runs again on every ``get``."""
