from servicebox.sources import ServiceSource, SourceKind


class Factory:
    @staticmethod
    def create_instance(value: int) -> int:
        return value + 1


class CallableFactory:
    """Callable objects exposing ``create_instance`` are factory objects first."""

    def __call__(self) -> str:
        return "called"

    def create_instance(self) -> str:
        return "created"


def test_invokable_factory_object_still_builds_through_create_instance() -> None:
    source = ServiceSource.from_registration(Factory, is_invokable=True)

    assert source.kind is SourceKind.FACTORY_OBJECT
    assert source.routine is Factory.create_instance
    assert source.build([1]) == 2


def test_invokable_plain_class_is_a_constructor() -> None:
    class Widget:
        def __init__(self, size: int) -> None:
            self.size = size

    source = ServiceSource.from_registration(Widget, is_invokable=True)

    assert source.kind is SourceKind.CONSTRUCTOR
    assert source.routine is Widget
    assert source.build([3]).size == 3


def test_factory_object_builds_through_create_instance() -> None:
    source = ServiceSource.from_registration(Factory, is_invokable=False)

    assert source.kind is SourceKind.FACTORY_OBJECT
    assert source.routine is Factory.create_instance
    assert source.build([1]) == 2


def test_callable_factory_object_uses_create_instance() -> None:
    source = ServiceSource.from_registration(CallableFactory(), is_invokable=False)

    assert source.kind is SourceKind.FACTORY_OBJECT
    assert source.build([]) == "created"


def test_plain_callable() -> None:
    source = ServiceSource.from_registration(lambda a, b: a * b, is_invokable=False)

    assert source.kind is SourceKind.CALLABLE
    assert source.build([3, 4]) == 12


def test_value_ignores_arguments() -> None:
    source = ServiceSource.from_registration("literal", is_invokable=False)

    assert source.kind is SourceKind.VALUE
    assert source.routine is None
    assert source.build(["ignored"]) == "literal"
