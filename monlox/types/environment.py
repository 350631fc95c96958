"""Lexical environments for Monlox.

An Environment holds the bindings of one scope and a link to its enclosing
scope (`outer`). Scopes form a tree: the root is created once per program
run, and every function call creates a child whose `outer` is the scope the
function was defined in. Several children, and any number of closures, may
share one parent; Python's reference counting keeps a parent alive for as
long as anything still reaches it.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator, Optional

from monlox.types.objects import MonloxObject


class Environment:
    """Mapping from names to runtime objects with outward lookup."""

    __slots__ = ("store", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.store: dict[str, MonloxObject] = {}
        self.outer: Environment | None = outer

    @classmethod
    def enclosed(cls, outer: Environment) -> Environment:
        """Create a child scope of `outer` (one per function invocation)."""
        return cls(outer=outer)

    def get(self, name: str) -> tuple[Optional[MonloxObject], bool]:
        """Look up `name` here, then in each enclosing scope in turn.

        Returns (value, True) for the nearest binding, or (None, False) when
        no scope in the chain binds the name.
        """
        env: Optional[Environment] = self
        while env is not None:
            if name in env.store:
                return env.store[name], True
            env = env.outer
        return None, False

    def set(self, name: str, value: MonloxObject) -> MonloxObject:
        """Bind `name` in this scope only.

        An existing local binding is overwritten; a binding of the same name
        in an enclosing scope is shadowed, never modified.
        """
        self.store[name] = value
        return value

    def __contains__(self, name: str) -> bool:
        return self.get(name)[1]

    def __iter__(self) -> Iterator[str]:
        return iter(self.store)

    def _write_vars(self, buffer: StringIO) -> None:
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v.inspect()}" for k, v in self.store.items()))
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")  # indicate parent exists
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            env: Optional[Environment] = self
            first = True
            while env is not None:
                if not first:
                    buffer.write(" -> ")
                env._write_vars(buffer)
                first = False
                env = env.outer
            buffer.write(">")
            return buffer.getvalue()
