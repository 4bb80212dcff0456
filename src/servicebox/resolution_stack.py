from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

from servicebox.exceptions import CyclicDependencyError

# Context variable for resolution tracking; entries are (container id, service name)
_resolution_stack: ContextVar[tuple[tuple[int, str], ...]] = ContextVar(
    "servicebox_resolution_stack",
    default=(),
)


def current_chain(owner: object) -> list[str]:
    """Return the names ``owner`` is currently building, outermost first."""
    owner_id = id(owner)
    return [name for entry_owner, name in _resolution_stack.get() if entry_owner == owner_id]


@contextmanager
def resolving(owner: object, name: str) -> Iterator[None]:
    """Push ``name`` on the resolution stack for the duration of the block.

    Raises:
        CyclicDependencyError: If ``owner`` is already building ``name``.

    """
    entry = (id(owner), name)
    stack = _resolution_stack.get()
    if entry in stack:
        raise CyclicDependencyError(name, [*current_chain(owner), name])

    token = _resolution_stack.set((*stack, entry))
    try:
        yield
    finally:
        _resolution_stack.reset(token)
