"""Reader: source text -> tokens -> AST."""

from monlox.reader.lexer import lex
from monlox.reader.parser import Parser, parse

__all__ = ["lex", "Parser", "parse"]
