"""
  Monlox Parser

Top-down operator precedence (Pratt) parser over the token stream produced
by `monlox.reader.lexer.lex`. Statements are parsed until `eof`; the first
syntax error raises MonloxSyntaxError with the offending token's line.

Precedence, lowest to highest:

    or  <  and  <  == !=  <  < > <= >=  <  + -  <  * /  <  prefix  <  call  <  index
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional

from monlox.errors import MonloxSyntaxError
from monlox.reader import ast
from monlox.reader.lexer import lex
from monlox.reader.tokens import Token

logger = logging.getLogger(__name__)


LOWEST = 0
OR = 1
AND = 2
EQUALS = 3
LESSGREATER = 4
SUM = 5
PRODUCT = 6
PREFIX = 7
CALL = 8
INDEX = 9

PRECEDENCES: dict[str, int] = {
    "or": OR,
    "and": AND,
    "==": EQUALS,
    "!=": EQUALS,
    "<": LESSGREATER,
    ">": LESSGREATER,
    "<=": LESSGREATER,
    ">=": LESSGREATER,
    "+": SUM,
    "-": SUM,
    "*": PRODUCT,
    "/": PRODUCT,
    "(": CALL,
    "[": INDEX,
}


class Parser:
    def __init__(self, tokens: Iterable[Token]):
        self.tokens = iter(tokens)
        self.buffer: list[Token] = []
        self._last: Optional[Token] = None

        self._prefix: dict[str, Callable[[], ast.Node]] = {
            "number": self._parse_number,
            "string": self._parse_string,
            "ident": self._parse_identifier,
            "true": self._parse_boolean,
            "false": self._parse_boolean,
            "!": self._parse_prefix,
            "-": self._parse_prefix,
            "(": self._parse_grouped,
            "if": self._parse_if,
            "fn": self._parse_function,
            "[": self._parse_array,
            "{": self._parse_hash,
        }

    # -------------------------------
    # Token stream helpers
    # -------------------------------
    def peek(self) -> Token:
        if not self.buffer:
            # The lexer always ends with eof; keep handing it back once reached.
            self.buffer.append(next(self.tokens, None) or Token("eof", "", self._last_line()))
        return self.buffer[0]

    def advance(self) -> Token:
        tok = self.peek()
        if tok.kind != "eof":
            self.buffer.pop(0)
        self._last = tok
        return tok

    def _last_line(self) -> int:
        return self._last.line if self._last is not None else 1

    def _at(self, text: str) -> bool:
        tok = self.peek()
        return tok.is_("operator", text) or tok.is_("keyword", text)

    def _expect(self, text: str) -> Token:
        tok = self.peek()
        if not self._at(text):
            raise MonloxSyntaxError(f"expected {text!r}, got {tok}", tok.line)
        return self.advance()

    def _skip_semicolons(self) -> None:
        while self._at(";"):
            self.advance()

    # -------------------------------
    # Statements
    # -------------------------------
    def parse_program(self) -> ast.Program:
        program = ast.Program(line=self.peek().line)
        self._skip_semicolons()
        while self.peek().kind != "eof":
            program.statements.append(self.parse_statement())
            self._skip_semicolons()
        logger.debug("parsed program with %d statements", len(program.statements))
        return program

    def parse_statement(self) -> ast.Node:
        if self._at("let"):
            return self._parse_let()
        if self._at("return"):
            return self._parse_return()
        tok = self.peek()
        expr = self.parse_expression(LOWEST)
        return ast.ExpressionStatement(line=tok.line, expression=expr)

    def _parse_let(self) -> ast.LetStatement:
        let_tok = self.advance()
        name_tok = self.peek()
        if name_tok.kind != "ident":
            raise MonloxSyntaxError(f"expected identifier after 'let', got {name_tok}", name_tok.line)
        self.advance()
        self._expect("=")
        value = self.parse_expression(LOWEST)
        return ast.LetStatement(
            line=let_tok.line,
            name=ast.Identifier(line=name_tok.line, value=name_tok.text),
            value=value,
        )

    def _parse_return(self) -> ast.ReturnStatement:
        ret_tok = self.advance()
        if self._at(";") or self._at("}") or self.peek().kind == "eof":
            return ast.ReturnStatement(line=ret_tok.line)
        return ast.ReturnStatement(line=ret_tok.line, value=self.parse_expression(LOWEST))

    def _parse_block(self) -> ast.BlockStatement:
        open_tok = self._expect("{")
        block = ast.BlockStatement(line=open_tok.line)
        self._skip_semicolons()
        while not self._at("}"):
            if self.peek().kind == "eof":
                raise MonloxSyntaxError("unterminated block, expected '}'", open_tok.line)
            block.statements.append(self.parse_statement())
            self._skip_semicolons()
        self.advance()
        return block

    # -------------------------------
    # Expressions
    # -------------------------------
    def parse_expression(self, precedence: int) -> ast.Node:
        tok = self.peek()
        key = tok.kind if tok.kind in ("number", "string", "ident") else tok.text
        prefix = self._prefix.get(key) if tok.kind != "eof" else None
        if prefix is None:
            raise MonloxSyntaxError(f"unexpected {tok}", tok.line)
        left = prefix()

        while not self._at(";") and precedence < self._peek_precedence():
            left = self._parse_infix(left)
        return left

    def _peek_precedence(self) -> int:
        tok = self.peek()
        if tok.kind not in ("operator", "keyword"):
            return LOWEST
        return PRECEDENCES.get(tok.text, LOWEST)

    def _parse_infix(self, left: ast.Node) -> ast.Node:
        op_tok = self.advance()
        op = op_tok.text
        if op == "(":
            args = self._parse_expression_list(")")
            return ast.CallExpression(line=op_tok.line, function=left, arguments=args)
        if op == "[":
            index = self.parse_expression(LOWEST)
            self._expect("]")
            return ast.IndexExpression(line=op_tok.line, left=left, index=index)
        right = self.parse_expression(PRECEDENCES[op])
        if op in ("and", "or"):
            return ast.LogicalExpression(line=op_tok.line, left=left, operator=op, right=right)
        return ast.InfixExpression(line=op_tok.line, left=left, operator=op, right=right)

    def _parse_number(self) -> ast.NumberLiteral:
        tok = self.advance()
        return ast.NumberLiteral(line=tok.line, value=float(tok.text), literal=tok.text)

    def _parse_string(self) -> ast.StringLiteral:
        tok = self.advance()
        return ast.StringLiteral(line=tok.line, value=tok.text)

    def _parse_identifier(self) -> ast.Identifier:
        tok = self.advance()
        return ast.Identifier(line=tok.line, value=tok.text)

    def _parse_boolean(self) -> ast.BooleanLiteral:
        tok = self.advance()
        return ast.BooleanLiteral(line=tok.line, value=tok.text == "true")

    def _parse_prefix(self) -> ast.PrefixExpression:
        tok = self.advance()
        right = self.parse_expression(PREFIX)
        return ast.PrefixExpression(line=tok.line, operator=tok.text, right=right)

    def _parse_grouped(self) -> ast.Node:
        self.advance()
        expr = self.parse_expression(LOWEST)
        self._expect(")")
        return expr

    def _parse_if(self) -> ast.IfExpression:
        if_tok = self.advance()
        condition = self.parse_expression(LOWEST)
        consequence = self._parse_block()
        alternative = None
        if self._at("else"):
            else_tok = self.advance()
            if self._at("if"):
                # else-if chains nest as a single-statement alternative block
                nested_line = self.peek().line
                nested = self._parse_if()
                alternative = ast.BlockStatement(
                    line=else_tok.line,
                    statements=[ast.ExpressionStatement(line=nested_line, expression=nested)],
                )
            else:
                alternative = self._parse_block()
        return ast.IfExpression(
            line=if_tok.line,
            condition=condition,
            consequence=consequence,
            alternative=alternative,
        )

    def _parse_function(self) -> ast.FunctionLiteral:
        fn_tok = self.advance()
        self._expect("(")
        params: list[ast.Identifier] = []
        while not self._at(")"):
            tok = self.peek()
            if tok.kind != "ident":
                raise MonloxSyntaxError(f"expected parameter name, got {tok}", tok.line)
            self.advance()
            params.append(ast.Identifier(line=tok.line, value=tok.text))
            if not self._at(")"):
                self._expect(",")
        self.advance()
        body = self._parse_block()
        return ast.FunctionLiteral(line=fn_tok.line, parameters=params, body=body)

    def _parse_array(self) -> ast.ArrayLiteral:
        tok = self.advance()
        return ast.ArrayLiteral(line=tok.line, elements=self._parse_expression_list("]"))

    def _parse_hash(self) -> ast.HashLiteral:
        open_tok = self.advance()
        node = ast.HashLiteral(line=open_tok.line)
        while not self._at("}"):
            key = self.parse_expression(LOWEST)
            self._expect(":")
            value = self.parse_expression(LOWEST)
            node.pairs.append((key, value))
            if not self._at("}"):
                self._expect(",")
        self.advance()
        return node

    def _parse_expression_list(self, end: str) -> list[ast.Node]:
        """Comma-separated expressions up to and including `end`; trailing comma allowed."""
        items: list[ast.Node] = []
        while not self._at(end):
            items.append(self.parse_expression(LOWEST))
            if not self._at(end):
                self._expect(",")
        self.advance()
        return items


def parse(source: str) -> ast.Program:
    """Lex and parse a complete source text."""
    return Parser(lex(source)).parse_program()
