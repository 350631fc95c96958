"""Runtime object model for Monlox.

Every runtime value is an instance of exactly one MonloxObject subclass and
reports its tag via `type`. `inspect()` gives the human-readable rendering
used by the REPL and by `puts`.

`true`, `false` and `null` are process-wide singletons (TRUE, FALSE, NULL);
the evaluator compares them by identity.

Only Number, Boolean and String are hashable. Their HashKey embeds the tag
and the Python value itself, so key equality is exactly value equality
within a type and no two distinct values can collide.
"""

from __future__ import annotations

import math
from enum import Enum
from io import StringIO
from typing import TYPE_CHECKING, Callable, NamedTuple, Union

if TYPE_CHECKING:
    from monlox.reader.ast import BlockStatement, Identifier
    from monlox.types.environment import Environment


class ObjectType(str, Enum):
    NULL = "NULL"
    NUMBER = "NUMBER"
    BOOLEAN = "BOOLEAN"
    STRING = "STRING"
    ARRAY = "ARRAY"
    HASH = "HASH"
    RETURN = "RETURN"
    FUNCTION = "FUNCTION"
    BUILTIN = "BUILTIN"
    ERROR = "ERROR"

    def __str__(self) -> str:
        return self.value


class HashKey(NamedTuple):
    type: ObjectType
    value: Union[float, bool, str]


class MonloxObject:
    """Base for all runtime values."""

    __slots__ = ()
    type: ObjectType

    def inspect(self) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.inspect()


class Hashable(MonloxObject):
    """Values usable as Hash keys."""

    __slots__ = ("value",)

    def hash_key(self) -> HashKey:
        return HashKey(self.type, self.value)


def format_number(value: float) -> str:
    """Integral floats render without a fractional part: 21.0 -> '21'."""
    if math.isfinite(value) and value.is_integer():
        return str(int(value))
    return repr(value)


class Number(Hashable):
    __slots__ = ()
    type = ObjectType.NUMBER

    def __init__(self, value: float):
        self.value: float = float(value)

    def inspect(self) -> str:
        return format_number(self.value)

    def __repr__(self) -> str:
        return f"Number({self.value!r})"


class Boolean(Hashable):
    __slots__ = ()
    type = ObjectType.BOOLEAN

    def __init__(self, value: bool):
        self.value: bool = value

    def inspect(self) -> str:
        return "true" if self.value else "false"

    def __repr__(self) -> str:
        return f"Boolean({self.value!r})"


class String(Hashable):
    __slots__ = ()
    type = ObjectType.STRING

    def __init__(self, value: str):
        self.value: str = value

    def inspect(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"String({self.value!r})"


class Null(MonloxObject):
    __slots__ = ()
    type = ObjectType.NULL

    def inspect(self) -> str:
        return "null"

    def __repr__(self) -> str:
        return "NULL"


TRUE = Boolean(True)
FALSE = Boolean(False)
NULL = Null()


def native_bool(value: bool) -> Boolean:
    """Map a Python bool onto the TRUE/FALSE singletons."""
    return TRUE if value else FALSE


class Array(MonloxObject):
    __slots__ = ("elements",)
    type = ObjectType.ARRAY

    def __init__(self, elements: list[MonloxObject] | None = None):
        self.elements: list[MonloxObject] = elements if elements is not None else []

    def inspect(self) -> str:
        return "[" + ", ".join(e.inspect() for e in self.elements) + "]"

    def __repr__(self) -> str:
        return f"Array({self.elements!r})"


class HashPair(NamedTuple):
    key: MonloxObject
    value: MonloxObject


class Hash(MonloxObject):
    __slots__ = ("pairs",)
    type = ObjectType.HASH

    def __init__(self, pairs: dict[HashKey, HashPair] | None = None):
        self.pairs: dict[HashKey, HashPair] = pairs if pairs is not None else {}

    def inspect(self) -> str:
        with StringIO() as buffer:
            buffer.write("{")
            buffer.write(", ".join(f"{p.key.inspect()}: {p.value.inspect()}" for p in self.pairs.values()))
            buffer.write("}")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"Hash({self.inspect()})"


class Function(MonloxObject):
    """A user function: parameters, body and the environment it closes over.

    `env` is a reference to the defining scope, not a copy, so later
    bindings in that scope are visible to the function.
    """

    __slots__ = ("parameters", "body", "env")
    type = ObjectType.FUNCTION

    def __init__(self, parameters: list[Identifier], body: BlockStatement, env: Environment):
        self.parameters = parameters
        self.body = body
        self.env = env

    def inspect(self) -> str:
        with StringIO() as buffer:
            buffer.write("fn(")
            buffer.write(", ".join(str(p) for p in self.parameters))
            buffer.write(") {\n")
            buffer.write(str(self.body))
            buffer.write("\n}")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Function fn({', '.join(str(p) for p in self.parameters)})>"


BuiltinFunction = Callable[[int, list[MonloxObject]], MonloxObject]


class Builtin(MonloxObject):
    __slots__ = ("name", "fn")
    type = ObjectType.BUILTIN

    def __init__(self, name: str, fn: BuiltinFunction):
        self.name = name
        self.fn = fn

    def inspect(self) -> str:
        return "builtin function"

    def __repr__(self) -> str:
        return f"<Builtin {self.name}>"


class ReturnValue(MonloxObject):
    """Unwind signal for `return`; unwrapped at the function-call boundary."""

    __slots__ = ("value",)
    type = ObjectType.RETURN

    def __init__(self, value: MonloxObject):
        self.value = value

    def inspect(self) -> str:
        return self.value.inspect()

    def __repr__(self) -> str:
        return f"ReturnValue({self.value!r})"


class Error(MonloxObject):
    """A language-level error. `message` already carries the line tag."""

    __slots__ = ("message", "line")
    type = ObjectType.ERROR

    def __init__(self, message: str, line: int):
        self.message = message
        self.line = line

    def inspect(self) -> str:
        return f"ERROR {self.message}"

    def __repr__(self) -> str:
        return f"Error({self.message!r})"


def new_error(line: int, message: str) -> Error:
    return Error(f"on line {line}: {message}", line)


def is_error(obj: MonloxObject | None) -> bool:
    return obj is not None and obj.type is ObjectType.ERROR
