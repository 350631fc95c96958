import math

import pytest
from hypothesis import given, strategies as st

from monlox.types.objects import (
    FALSE, NULL, TRUE, Array, Boolean, Builtin, Error, Hash, HashKey, HashPair,
    Number, ObjectType, ReturnValue, String, format_number, native_bool, new_error,
)


@pytest.mark.parametrize(
    "value,expected",
    [
        (21.0, "21"),
        (-5.0, "-5"),
        (0.0, "0"),
        (4.5, "4.5"),
        (10.45, "10.45"),
        (math.inf, "inf"),
        (1e20, "100000000000000000000"),
    ]
)
def test_format_number(value, expected):
    assert format_number(value) == expected


@pytest.mark.parametrize(
    "obj,type_,rendered",
    [
        (Number(3), ObjectType.NUMBER, "3"),
        (TRUE, ObjectType.BOOLEAN, "true"),
        (FALSE, ObjectType.BOOLEAN, "false"),
        (NULL, ObjectType.NULL, "null"),
        (String("verbatim text"), ObjectType.STRING, "verbatim text"),
        (Array([Number(1), String("a"), NULL]), ObjectType.ARRAY, "[1, a, null]"),
        (Array(), ObjectType.ARRAY, "[]"),
        (ReturnValue(Number(7)), ObjectType.RETURN, "7"),
        (new_error(3, "boom"), ObjectType.ERROR, "ERROR on line 3: boom"),
        (Builtin("noop", lambda line, args: NULL), ObjectType.BUILTIN, "builtin function"),
    ]
)
def test_type_and_inspect(obj, type_, rendered):
    assert obj.type is type_
    assert obj.inspect() == rendered


def test_object_type_renders_bare_name():
    assert f"{ObjectType.FUNCTION}" == "FUNCTION"
    assert str(ObjectType.HASH) == "HASH"


def test_native_bool_returns_singletons():
    assert native_bool(True) is TRUE
    assert native_bool(False) is FALSE


def test_new_error_tags_line():
    err = new_error(4, "unknown operator: BOOLEAN + BOOLEAN")
    assert isinstance(err, Error)
    assert err.line == 4
    assert err.message == "on line 4: unknown operator: BOOLEAN + BOOLEAN"


def test_hash_inspect():
    key = String("name")
    h = Hash({key.hash_key(): HashPair(key, String("Monkey"))})
    assert h.inspect() == "{name: Monkey}"


# -----------------------------------------------------
# Hash keys
# -----------------------------------------------------

def test_equal_values_share_hash_keys():
    assert String("Hello World").hash_key() == String("Hello World").hash_key()
    assert Number(4).hash_key() == Number(4.0).hash_key()
    assert Boolean(True).hash_key() == TRUE.hash_key()


def test_different_values_have_different_hash_keys():
    assert String("My name is johnny").hash_key() != String("Hello World").hash_key()
    assert Number(1).hash_key() != Number(2).hash_key()
    assert TRUE.hash_key() != FALSE.hash_key()


def test_hash_keys_distinguish_types():
    # True == 1 in Python; the type tag keeps them apart
    assert TRUE.hash_key() != Number(1).hash_key()
    assert FALSE.hash_key() != Number(0).hash_key()
    assert String("1").hash_key() != Number(1).hash_key()


def test_hash_key_embeds_value():
    assert Number(2.5).hash_key() == HashKey(ObjectType.NUMBER, 2.5)
    assert String("k").hash_key() == HashKey(ObjectType.STRING, "k")


@given(st.text(), st.text())
def test_string_hash_keys_match_value_equality(a, b):
    assert (String(a).hash_key() == String(b).hash_key()) == (a == b)


@given(st.floats(allow_nan=False), st.floats(allow_nan=False))
def test_number_hash_keys_match_value_equality(a, b):
    assert (Number(a).hash_key() == Number(b).hash_key()) == (a == b)


@given(st.floats(allow_nan=False))
def test_fresh_number_finds_existing_hash_entry(x):
    key = Number(x)
    h = Hash({key.hash_key(): HashPair(key, TRUE)})
    assert h.pairs[Number(x).hash_key()].value is TRUE
