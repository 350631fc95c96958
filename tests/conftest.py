import pytest

from monlox.interpreter import Interpreter
from monlox.types.objects import Error, Number


@pytest.fixture
def interp():
    """Fresh interpreter with an empty root environment."""
    return Interpreter()


def run(source: str):
    return Interpreter().eval(source)


def assert_number(obj, expected):
    assert isinstance(obj, Number), f"expected Number, got {obj!r}"
    assert obj.value == pytest.approx(expected)


def assert_error(obj, message):
    assert isinstance(obj, Error), f"expected Error, got {obj!r}"
    assert obj.message == message
