"""
  Monlox Lexer

- Streaming: `lex` is a generator of Token(kind, text, line).
- Line numbers are 1-based and advance on every newline, including newlines
  inside string literals.
- String tokens carry their decoded value (quotes stripped, escapes applied).
- Always terminates with exactly one `eof` token.
"""

from __future__ import annotations

import re
from typing import Iterator

from monlox.errors import MonloxSyntaxError
from monlox.reader.tokens import KEYWORDS, Token


TOKEN_RE = re.compile(
    r"(?P<newline>\n)"
    r"|(?P<space>[ \t\r\f]+)"
    r"|(?P<comment>//[^\n]*)"  # single-line comment
    r"|(?P<number>\d+(?:\.\d+)?)"
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted, may span lines
    r'|(?P<unterminated>")'
    r"|(?P<ident>[A-Za-z_][A-Za-z0-9_]*)"
    r"|(?P<operator>==|!=|<=|>=|[-+*/!<>=,;:(){}\[\]])",
    re.DOTALL,
)

ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    '"': '"',
    "\\": "\\",
}

_ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)


def _decode_string(raw: str, line: int) -> str:
    def replace(m: re.Match) -> str:
        ch = m.group(1)
        if ch not in ESCAPES:
            raise MonloxSyntaxError(f"unknown escape sequence \\{ch}", line)
        return ESCAPES[ch]

    return _ESCAPE_RE.sub(replace, raw[1:-1])


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields Token tuples, ending with an `eof` token."""
    pos = 0
    line = 1
    n = len(source)

    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if not m:
            raise MonloxSyntaxError(f"unexpected character {source[pos]!r}", line)
        kind = m.lastgroup
        text = m.group(kind)
        pos = m.end()

        if kind == "newline":
            line += 1
        elif kind in ("space", "comment"):
            pass
        elif kind == "unterminated":
            raise MonloxSyntaxError("unterminated string", line)
        elif kind == "string":
            yield Token("string", _decode_string(text, line), line)
            line += text.count("\n")
        elif kind == "ident":
            yield Token("keyword" if text in KEYWORDS else "ident", text, line)
        else:
            yield Token(kind, text, line)

    yield Token("eof", "", line)
