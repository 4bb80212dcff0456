from __future__ import annotations

from servicebox.container import Container


class ContainerContext:
    """Process-wide default container with an explicit lifecycle.

    The binding is shared by the whole process; it is not task-local or
    thread-local. Code that needs isolation should construct its own
    ``Container`` or bind one with ``set_current``.
    """

    def __init__(self) -> None:
        self._container: Container | None = None

    def get_current(self) -> Container:
        """Return the bound container, creating a default one on first use."""
        if self._container is None:
            self._container = Container()
        return self._container

    def set_current(self, container: Container | None) -> Container | None:
        """Bind ``container`` as the shared default.

        Passing ``None`` unbinds, like ``reset``.

        Returns:
            The previously bound container, or ``None``. Handing it back to
            ``set_current`` restores the earlier binding.

        """
        previous = self._container
        self._container = container
        return previous

    def reset(self) -> None:
        """Drop the binding; the next ``get_current`` builds a fresh container."""
        self._container = None

    @property
    def is_bound(self) -> bool:
        return self._container is not None


container_context = ContainerContext()
"""Shared default container used by the decorators."""
