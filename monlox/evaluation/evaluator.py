"""Core tree-walking evaluator for Monlox.

`evaluate(node, env)` dispatches on the AST node class and always returns a
runtime object. Three kinds of result flow back up the tree:

- an ordinary value;
- a ReturnValue, which stops the enclosing blocks and is unwrapped at the
  nearest function-call boundary (or at the program level);
- an Error, which stops every enclosing evaluation and surfaces as the
  program's result.

Every composite node checks each sub-result before going on, leftmost first,
so an Error or Return is passed up without evaluating any remaining siblings.
"""

from __future__ import annotations

import math

from monlox import builtins
from monlox.evaluation.operators import eval_infix, eval_prefix, is_truthy
from monlox.reader import ast
from monlox.types.environment import Environment
from monlox.types.objects import (
    NULL, Array, Builtin, Function, Hash, Hashable, HashKey, HashPair, MonloxObject,
    Number, ObjectType, ReturnValue, String, native_bool, new_error,
)


def _is_abrupt(obj: MonloxObject) -> bool:
    """True for results that must stop evaluation: Return or Error.

    Every sub-result check uses this, so a `return` nested inside an
    expression unwinds to the call boundary instead of becoming a value.
    """
    return obj.type is ObjectType.RETURN or obj.type is ObjectType.ERROR


def evaluate(node: ast.Node, env: Environment) -> MonloxObject:
    """Evaluate `node` in `env` and return the resulting runtime object."""
    match node:
        # --- Statements ---
        case ast.Program():
            return _eval_program(node, env)
        case ast.BlockStatement():
            return _eval_block(node, env)
        case ast.ExpressionStatement():
            return evaluate(node.expression, env)
        case ast.LetStatement():
            value = evaluate(node.value, env)
            if _is_abrupt(value):
                return value
            env.set(node.name.value, value)
            return NULL
        case ast.ReturnStatement():
            if node.value is None:
                return ReturnValue(NULL)
            value = evaluate(node.value, env)
            if _is_abrupt(value):
                return value
            return ReturnValue(value)

        # --- Literals ---
        case ast.NumberLiteral():
            return Number(node.value)
        case ast.StringLiteral():
            return String(node.value)
        case ast.BooleanLiteral():
            return native_bool(node.value)
        case ast.ArrayLiteral():
            elements = _eval_expressions(node.elements, env)
            if isinstance(elements, MonloxObject):
                return elements
            return Array(elements)
        case ast.HashLiteral():
            return _eval_hash_literal(node, env)
        case ast.FunctionLiteral():
            return Function(node.parameters, node.body, env)

        # --- Expressions ---
        case ast.Identifier():
            return _eval_identifier(node, env)
        case ast.PrefixExpression():
            right = evaluate(node.right, env)
            if _is_abrupt(right):
                return right
            return eval_prefix(node.operator, right, node.line)
        case ast.InfixExpression():
            left = evaluate(node.left, env)
            if _is_abrupt(left):
                return left
            right = evaluate(node.right, env)
            if _is_abrupt(right):
                return right
            return eval_infix(node.operator, left, right, node.line)
        case ast.LogicalExpression():
            return _eval_logical(node, env)
        case ast.IfExpression():
            return _eval_if(node, env)
        case ast.CallExpression():
            return _eval_call(node, env)
        case ast.IndexExpression():
            left = evaluate(node.left, env)
            if _is_abrupt(left):
                return left
            index = evaluate(node.index, env)
            if _is_abrupt(index):
                return index
            return _eval_index(left, index, node.line)

    line = getattr(node, "line", 0)
    return new_error(line, f"cannot evaluate node: {type(node).__name__}")


# -------------------------------
# Statement sequences
# -------------------------------
def _eval_program(program: ast.Program, env: Environment) -> MonloxObject:
    result: MonloxObject = NULL
    for statement in program.statements:
        result = evaluate(statement, env)
        if result.type is ObjectType.RETURN:
            return result.value
        if result.type is ObjectType.ERROR:
            return result
    return result


def _eval_block(block: ast.BlockStatement, env: Environment) -> MonloxObject:
    # ReturnValue is passed up still wrapped so outer blocks stop too.
    result: MonloxObject = NULL
    for statement in block.statements:
        result = evaluate(statement, env)
        if _is_abrupt(result):
            return result
    return result


def _eval_expressions(exprs: list[ast.Node], env: Environment) -> list[MonloxObject] | MonloxObject:
    """Evaluate left to right; returns the first Error or Return instead of a list."""
    values: list[MonloxObject] = []
    for expr in exprs:
        value = evaluate(expr, env)
        if _is_abrupt(value):
            return value
        values.append(value)
    return values


# -------------------------------
# Names, conditionals, logic
# -------------------------------
def _eval_identifier(node: ast.Identifier, env: Environment) -> MonloxObject:
    value, found = env.get(node.value)
    if found:
        return value
    builtin = builtins.lookup(node.value)
    if builtin is not None:
        return builtin
    return new_error(node.line, f"identifier not found: {node.value}")


def _eval_if(node: ast.IfExpression, env: Environment) -> MonloxObject:
    condition = evaluate(node.condition, env)
    if _is_abrupt(condition):
        return condition
    if is_truthy(condition):
        return evaluate(node.consequence, env)
    if node.alternative is not None:
        return evaluate(node.alternative, env)
    return NULL


def _eval_logical(node: ast.LogicalExpression, env: Environment) -> MonloxObject:
    """Short-circuiting `and`/`or`; the result is always a Boolean."""
    left = evaluate(node.left, env)
    if _is_abrupt(left):
        return left
    left_truthy = is_truthy(left)
    if node.operator == "and" and not left_truthy:
        return native_bool(False)
    if node.operator == "or" and left_truthy:
        return native_bool(True)
    right = evaluate(node.right, env)
    if _is_abrupt(right):
        return right
    return native_bool(is_truthy(right))


# -------------------------------
# Function application
# -------------------------------
def _eval_call(node: ast.CallExpression, env: Environment) -> MonloxObject:
    fn = evaluate(node.function, env)
    if _is_abrupt(fn):
        return fn
    args = _eval_expressions(node.arguments, env)
    if isinstance(args, MonloxObject):
        return args
    return apply_function(fn, args, node.line)


def apply_function(fn: MonloxObject, args: list[MonloxObject], line: int) -> MonloxObject:
    """Call a user Function or a Builtin with evaluated arguments.

    A user function runs in a fresh scope enclosed by the environment it
    was defined in (not the caller's), with parameters bound positionally.
    """
    if isinstance(fn, Function):
        if len(args) != len(fn.parameters):
            return new_error(
                line, f"wrong number of arguments. expected={len(fn.parameters)}, got={len(args)}"
            )
        call_env = Environment.enclosed(fn.env)
        for param, arg in zip(fn.parameters, args):
            call_env.set(param.value, arg)
        result = evaluate(fn.body, call_env)
        if result.type is ObjectType.RETURN:
            return result.value
        return result
    if isinstance(fn, Builtin):
        return fn.fn(line, args)
    return new_error(line, f"not a function: {fn.type}")


# -------------------------------
# Collections
# -------------------------------
def _eval_hash_literal(node: ast.HashLiteral, env: Environment) -> MonloxObject:
    pairs: dict[HashKey, HashPair] = {}
    for key_node, value_node in node.pairs:
        key = evaluate(key_node, env)
        if _is_abrupt(key):
            return key
        if not isinstance(key, Hashable):
            return new_error(key_node.line, f"unusable as hash key: {key.type}")
        value = evaluate(value_node, env)
        if _is_abrupt(value):
            return value
        # later duplicates overwrite earlier ones
        pairs[key.hash_key()] = HashPair(key, value)
    return Hash(pairs)


def _eval_index(left: MonloxObject, index: MonloxObject, line: int) -> MonloxObject:
    if isinstance(left, Array):
        if not isinstance(index, Number):
            return new_error(line, f"array index must be NUMBER, got={index.type}")
        return _eval_array_index(left, index.value)
    if isinstance(left, Hash):
        if not isinstance(index, Hashable):
            return new_error(line, f"unusable as hash key: {index.type}")
        pair = left.pairs.get(index.hash_key())
        return pair.value if pair is not None else NULL
    return new_error(line, f"index operator not supported: {left.type}")


def _eval_array_index(array: Array, idx: float) -> MonloxObject:
    # Out of range, negative and non-integral indices all read as null.
    if not math.isfinite(idx) or not idx.is_integer():
        return NULL
    i = int(idx)
    if i < 0 or i >= len(array.elements):
        return NULL
    return array.elements[i]
