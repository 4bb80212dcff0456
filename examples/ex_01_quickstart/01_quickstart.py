"""Quickstart: register services by name and let the container wire them.

Register a literal configuration value and a greeter that depends on it,
then ask only for the greeter.
"""

from __future__ import annotations

from servicebox import Container


def make_greeter(config: dict[str, str]) -> str:
    return "hello-" + config["env"]


def main() -> None:
    container = Container()
    container.register("config", {"env": "test"})
    container.register("greeter", make_greeter, ["config"])

    print(f"greeter={container.get('greeter')}")  # => greeter=hello-test
    print(f"services={container.names()}")  # => services=['config', 'greeter']


if __name__ == "__main__":
    main()
