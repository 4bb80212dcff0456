"""Errors raised by registration and resolution.

Every failure derives from ``ServiceBoxError``. Indirect cycles are reported
with the full chain of service names.
"""

from __future__ import annotations

from servicebox import (
    Container,
    CyclicDependencyError,
    DuplicateRegistrationError,
    SelfDependencyError,
    ServiceNotFoundError,
)


def main() -> None:
    container = Container()

    try:
        container.get("missing")
    except ServiceNotFoundError as error:
        print(f"not_found={error.name}")  # => not_found=missing

    container.register("config", {"env": "test"})
    try:
        container.register("config", {"env": "prod"})
    except DuplicateRegistrationError as error:
        print(f"duplicate={error.key}")  # => duplicate=config

    container.register("narcissus", lambda narcissus: narcissus, ["narcissus"])
    try:
        container.get("narcissus")
    except SelfDependencyError as error:
        print(f"self_dependency={error.name}")  # => self_dependency=narcissus

    container.register("chicken", lambda egg: egg, ["egg"])
    container.register("egg", lambda chicken: chicken, ["chicken"])
    try:
        container.get("chicken")
    except CyclicDependencyError as error:
        print(f"cycle={' -> '.join(error.chain)}")  # => cycle=chicken -> egg -> chicken


if __name__ == "__main__":
    main()
