import pytest

from conftest import assert_error, assert_number, run
from monlox.types.objects import FALSE, NULL, TRUE, Array, Hash, Number, String


# -----------------------------------------------------
# Arrays
# -----------------------------------------------------

def test_array_literal():
    result = run("[1, 2 * 2, 3 + 3]")
    assert isinstance(result, Array)
    assert [e.value for e in result.elements] == [1, 4, 6]


@pytest.mark.parametrize(
    "source,expected",
    [
        ("[1, 2, 3][0]", 1),
        ("[1, 2, 3][1]", 2),
        ("[1, 2, 3][2]", 3),
        ("let i = 0; [1][i];", 1),
        ("[1, 2, 3][1 + 1];", 3),
        ("let myArray = [1, 2, 3]; myArray[2];", 3),
        ("let myArray = [1, 2, 3]; myArray[0] + myArray[1] + myArray[2];", 6),
        ("let myArray = [1, 2, 3]; let i = myArray[0]; myArray[i]", 2),
        ("[1, 2, 3][3]", None),
        ("[1, 2, 3][-1]", None),
        ("[1, 2, 3][0.5]", None),
        ("[][0]", None),
    ]
)
def test_array_index_expressions(source, expected):
    result = run(source)
    if expected is None:
        assert result is NULL
    else:
        assert_number(result, expected)


def test_array_inspect():
    assert run('[1, "two", true, [3.5]]').inspect() == "[1, two, true, [3.5]]"


# -----------------------------------------------------
# Hashes
# -----------------------------------------------------

def test_hash_literals():
    source = """let two = "two";
{
    "one": 10 - 9,
    two: 1 + 1,
    "thr" + "ee": 6 / 2,
    4: 4,
    true: 5,
    false: 6
}"""
    result = run(source)
    assert isinstance(result, Hash)

    expected = {
        String("one").hash_key(): 1,
        String("two").hash_key(): 2,
        String("three").hash_key(): 3,
        Number(4).hash_key(): 4,
        TRUE.hash_key(): 5,
        FALSE.hash_key(): 6,
    }
    assert len(result.pairs) == len(expected)
    for key, value in expected.items():
        assert_number(result.pairs[key].value, value)


@pytest.mark.parametrize(
    "source,expected",
    [
        ('{"foo": 5}["foo"]', 5),
        ('{"foo": 5}["bar"]', None),
        ('let key = "foo"; {"foo": 5}[key]', 5),
        ('{}["foo"]', None),
        ("{5: 5}[5]", 5),
        ("{5: 5}[2 + 3]", 5),
        ("{true: 5}[true]", 5),
        ("{false: 5}[false]", 5),
        ("{1: 5}[true]", None),
        ('{"1": 5}[1]', None),
        ('{"a": 1, "a": 2}["a"]', 2),
    ]
)
def test_hash_index_expressions(source, expected):
    result = run(source)
    if expected is None:
        assert result is NULL
    else:
        assert_number(result, expected)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("{[1]: 2}", "on line 1: unusable as hash key: ARRAY"),
        ("{fn() { 1 }: 2}", "on line 1: unusable as hash key: FUNCTION"),
        ('{"a": 1}[{}]', "on line 1: unusable as hash key: HASH"),
        ('{"a": missing}', "on line 1: identifier not found: missing"),
    ]
)
def test_hash_errors(source, expected):
    assert_error(run(source), expected)


def test_hash_key_error_reports_key_line():
    assert_error(run('{\n  "a": 1,\n  [2]: 3\n}'), "on line 3: unusable as hash key: ARRAY")


def test_hash_inspect_preserves_insertion_order():
    assert run('{"b": 1, "a": [2], 3: true}').inspect() == "{b: 1, a: [2], 3: true}"
