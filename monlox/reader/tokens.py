from __future__ import annotations
from typing import NamedTuple


KEYWORDS = frozenset({"let", "fn", "true", "false", "if", "else", "return", "and", "or"})


class Token(NamedTuple):
    kind: str  # number | string | ident | keyword | operator | eof
    text: str
    line: int

    def is_(self, kind: str, text: str | None = None) -> bool:
        return self.kind == kind and (text is None or self.text == text)

    def __str__(self) -> str:
        return "end of input" if self.kind == "eof" else repr(self.text)
