"""Built-in functions for the Monlox runtime.

Each builtin receives the source line of the call (for error attribution)
and the already-evaluated argument list, and returns a runtime object.
Argument problems are reported as `Error` objects, never raised.
"""
from __future__ import annotations

import sys

from monlox.types.objects import (
    NULL, Array, Builtin, MonloxObject, Number, ObjectType, String, new_error,
)


def _arity_error(line: int, expected: int, args: list[MonloxObject]) -> MonloxObject:
    return new_error(line, f"wrong number of arguments. expected={expected}, got={len(args)}")


# -------------------------------
# Sequences
# -------------------------------
def builtin_len(line: int, args: list[MonloxObject]) -> MonloxObject:
    """Character count of a String or element count of an Array."""
    if len(args) != 1:
        return _arity_error(line, 1, args)
    arg = args[0]
    if isinstance(arg, String):
        return Number(len(arg.value))
    if isinstance(arg, Array):
        return Number(len(arg.elements))
    return new_error(line, f"argument to `len` not supported. got={arg.type}")


def builtin_first(line: int, args: list[MonloxObject]) -> MonloxObject:
    if len(args) != 1:
        return _arity_error(line, 1, args)
    arg = args[0]
    if arg.type is not ObjectType.ARRAY:
        return new_error(line, f"argument to `first` must be ARRAY, got={arg.type}")
    return arg.elements[0] if arg.elements else NULL


def builtin_last(line: int, args: list[MonloxObject]) -> MonloxObject:
    if len(args) != 1:
        return _arity_error(line, 1, args)
    arg = args[0]
    if arg.type is not ObjectType.ARRAY:
        return new_error(line, f"argument to `last` must be ARRAY, got={arg.type}")
    return arg.elements[-1] if arg.elements else NULL


def builtin_rest(line: int, args: list[MonloxObject]) -> MonloxObject:
    """A new Array without the first element; Null for an empty Array."""
    if len(args) != 1:
        return _arity_error(line, 1, args)
    arg = args[0]
    if arg.type is not ObjectType.ARRAY:
        return new_error(line, f"argument to `rest` must be ARRAY, got={arg.type}")
    if not arg.elements:
        return NULL
    return Array(list(arg.elements[1:]))


def builtin_push(line: int, args: list[MonloxObject]) -> MonloxObject:
    """A new Array with the second argument appended; the original is untouched."""
    if len(args) != 2:
        return _arity_error(line, 2, args)
    arr, item = args
    if arr.type is not ObjectType.ARRAY:
        return new_error(line, f"first argument to `push` must be ARRAY, got={arr.type}")
    return Array(arr.elements + [item])


# -------------------------------
# Output
# -------------------------------
def builtin_puts(line: int, args: list[MonloxObject]) -> MonloxObject:
    """Print each argument's rendering on its own line."""
    for arg in args:
        print(arg.inspect(), file=sys.stdout)
    return NULL


# -------------------------------
# Registry
# -------------------------------
BUILTINS: dict[str, Builtin] = {
    name: Builtin(name, fn)
    for name, fn in (
        ("len", builtin_len),
        ("first", builtin_first),
        ("last", builtin_last),
        ("rest", builtin_rest),
        ("push", builtin_push),
        ("puts", builtin_puts),
    )
}


def lookup(name: str) -> Builtin | None:
    return BUILTINS.get(name)
