"""Operator semantics for the evaluator.

Prefix and infix operators work on already-evaluated operands and return a
runtime object; unsupported combinations produce an `Error` tagged with the
line of the operator node. Short-circuiting `and`/`or` lives in the
evaluator because it controls whether the right operand is evaluated at all.
"""

from __future__ import annotations

import math
import operator
from typing import Callable

from monlox.types.objects import (
    FALSE, NULL, MonloxObject, Number, ObjectType, String, native_bool, new_error,
)


def is_truthy(obj: MonloxObject) -> bool:
    """Only `false` and `null` are falsy; 0, "" and [] are truthy."""
    return not (obj is FALSE or obj is NULL)


def _divide(left: float, right: float) -> float:
    # IEEE-754 semantics instead of ZeroDivisionError
    if right == 0:
        if left == 0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)
    return left / right


NUMBER_ARITHMETIC: dict[str, Callable[[float, float], float]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _divide,
}

NUMBER_COMPARISON: dict[str, Callable[[float, float], bool]] = {
    "<": operator.lt,
    ">": operator.gt,
    "<=": operator.le,
    ">=": operator.ge,
    "==": operator.eq,
    "!=": operator.ne,
}


# -------------------------------
# Prefix
# -------------------------------
def eval_prefix(op: str, right: MonloxObject, line: int) -> MonloxObject:
    if op == "!":
        return native_bool(not is_truthy(right))
    if op == "-":
        if right.type is not ObjectType.NUMBER:
            return new_error(line, f"unknown operator: -{right.type}")
        return Number(-right.value)
    return new_error(line, f"unknown operator: {op}{right.type}")


# -------------------------------
# Infix
# -------------------------------
def _eval_number_infix(op: str, left: Number, right: Number, line: int) -> MonloxObject:
    if op in NUMBER_ARITHMETIC:
        return Number(NUMBER_ARITHMETIC[op](left.value, right.value))
    if op in NUMBER_COMPARISON:
        return native_bool(NUMBER_COMPARISON[op](left.value, right.value))
    return new_error(line, f"unknown operator: {left.type} {op} {right.type}")


def _eval_string_infix(op: str, left: String, right: String, line: int) -> MonloxObject:
    if op == "+":
        return String(left.value + right.value)
    if op == "==":
        return native_bool(left.value == right.value)
    if op == "!=":
        return native_bool(left.value != right.value)
    return new_error(line, f"unknown operator: {left.type} {op} {right.type}")


def eval_infix(op: str, left: MonloxObject, right: MonloxObject, line: int) -> MonloxObject:
    """Dispatch a binary operator on two evaluated operands.

    Order matters: numbers and strings first, then cross-type mismatch, then
    identity equality for the remaining same-type values (booleans and null
    are singletons, so identity is value equality for them).
    """
    if left.type is ObjectType.NUMBER and right.type is ObjectType.NUMBER:
        return _eval_number_infix(op, left, right, line)
    if left.type is ObjectType.STRING and right.type is ObjectType.STRING:
        return _eval_string_infix(op, left, right, line)
    if left.type is not right.type:
        return new_error(line, f"type mismatch: {left.type} {op} {right.type}")
    if op == "==":
        return native_bool(left is right)
    if op == "!=":
        return native_bool(left is not right)
    return new_error(line, f"unknown operator: {left.type} {op} {right.type}")
