"""Tests for the exception hierarchy."""

import pytest

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


@pytest.mark.parametrize(
    "error",
    [
        InvalidRegistrationError("name", "reason"),
        DuplicateRegistrationError("name"),
        ServiceNotFoundError("name"),
        SelfDependencyError("name"),
        CyclicDependencyError("name", ["name", "other", "name"]),
        ArityMismatchError("name", "2", 1),
        NonStandardFactoryInterfaceError(object()),
    ],
    ids=lambda error: type(error).__name__,
)
def test_every_error_is_a_servicebox_error(error: Exception) -> None:
    assert isinstance(error, ServiceBoxError)
    assert isinstance(error, Exception)


def test_arity_mismatch_message_mentions_counts() -> None:
    error = ArityMismatchError("pair", "at least 2", 1)

    assert str(error) == (
        "The factory for 'pair' expects at least 2 argument(s) but 1 dependencies were resolved"
    )


def test_non_standard_factory_message_names_the_factory() -> None:
    class PlainFactory:
        pass

    error = NonStandardFactoryInterfaceError(PlainFactory)

    assert error.factory is PlainFactory
    assert "PlainFactory" in str(error)
    assert "create_instance" in str(error)


def test_invalid_registration_keeps_reason() -> None:
    error = InvalidRegistrationError("widget", "factory is None")

    assert error.reason == "factory is None"
    assert str(error) == "The arguments for 'widget' are not valid: factory is None"
