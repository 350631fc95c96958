"""Syntax tree produced by the parser and consumed by the evaluator.

Every node carries the 1-based source `line` of the token that identifies
it, and renders back to (normalised) source text via `str()`. Infix and
prefix expressions render fully parenthesised so operator grouping is
visible, e.g. the body of `fn(x) { x + 2; }` renders as `(x + 2)`.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Node:
    line: int


# --- Expressions ---

@dataclass
class Identifier(Node):
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass
class NumberLiteral(Node):
    value: float
    literal: str

    def __str__(self) -> str:
        return self.literal


@dataclass
class StringLiteral(Node):
    value: str

    def __str__(self) -> str:
        escaped = self.value.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'


@dataclass
class BooleanLiteral(Node):
    value: bool

    def __str__(self) -> str:
        return "true" if self.value else "false"


@dataclass
class PrefixExpression(Node):
    operator: str
    right: Node

    def __str__(self) -> str:
        return f"({self.operator}{self.right})"


@dataclass
class InfixExpression(Node):
    left: Node
    operator: str
    right: Node

    def __str__(self) -> str:
        return f"({self.left} {self.operator} {self.right})"


@dataclass
class LogicalExpression(Node):
    """Short-circuiting `and` / `or`."""
    left: Node
    operator: str
    right: Node

    def __str__(self) -> str:
        return f"({self.left} {self.operator} {self.right})"


@dataclass
class IfExpression(Node):
    condition: Node
    consequence: BlockStatement
    alternative: BlockStatement | None = None

    def __str__(self) -> str:
        out = f"if {self.condition} {{ {self.consequence} }}"
        if self.alternative is not None:
            out += f" else {{ {self.alternative} }}"
        return out


@dataclass
class FunctionLiteral(Node):
    parameters: list[Identifier]
    body: BlockStatement

    def __str__(self) -> str:
        params = ", ".join(str(p) for p in self.parameters)
        return f"fn({params}) {{ {self.body} }}"


@dataclass
class CallExpression(Node):
    function: Node
    arguments: list[Node] = field(default_factory=list)

    def __str__(self) -> str:
        args = ", ".join(str(a) for a in self.arguments)
        return f"{self.function}({args})"


@dataclass
class ArrayLiteral(Node):
    elements: list[Node] = field(default_factory=list)

    def __str__(self) -> str:
        return "[" + ", ".join(str(e) for e in self.elements) + "]"


@dataclass
class IndexExpression(Node):
    left: Node
    index: Node

    def __str__(self) -> str:
        return f"({self.left}[{self.index}])"


@dataclass
class HashLiteral(Node):
    # Ordered (key, value) expression pairs, as written.
    pairs: list[tuple[Node, Node]] = field(default_factory=list)

    def __str__(self) -> str:
        return "{" + ", ".join(f"{k}: {v}" for k, v in self.pairs) + "}"


# --- Statements ---

@dataclass
class LetStatement(Node):
    name: Identifier
    value: Node

    def __str__(self) -> str:
        return f"let {self.name} = {self.value};"


@dataclass
class ReturnStatement(Node):
    value: Node | None = None

    def __str__(self) -> str:
        if self.value is None:
            return "return;"
        return f"return {self.value};"


@dataclass
class ExpressionStatement(Node):
    expression: Node

    def __str__(self) -> str:
        return str(self.expression)


@dataclass
class BlockStatement(Node):
    statements: list[Node] = field(default_factory=list)

    def __str__(self) -> str:
        return "".join(str(s) for s in self.statements)


@dataclass
class Program(Node):
    statements: list[Node] = field(default_factory=list)

    def __str__(self) -> str:
        return "".join(str(s) for s in self.statements)
