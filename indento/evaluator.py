"""Expression evaluation for Indento.

`evaluate` walks an expression node against a `ProgramState` and
returns a value. Evaluation only reads the state; it never binds or
changes variables, so evaluating the same expression twice against the
same state gives the same value.
"""

from __future__ import annotations

from typing import Any
import math

from .ast import BinaryOp, Ident, Literal, Node, UnaryOp
from .errors import ExpressionError
from .state import ProgramState
from .types import equal_values, is_number, is_truthy, type_name


def evaluate(node: Node, state: ProgramState) -> Any:
    if isinstance(node, Literal):
        return node.value
    if isinstance(node, Ident):
        return state.get(node.name)
    if isinstance(node, UnaryOp):
        operand = evaluate(node.operand, state)
        return apply_unary_op(node.op, operand)
    if isinstance(node, BinaryOp):
        left = evaluate(node.left, state)
        # Short-circuit for and/or
        if node.op == 'and':
            if not is_truthy(left):
                return False
            return is_truthy(evaluate(node.right, state))
        if node.op == 'or':
            if is_truthy(left):
                return True
            return is_truthy(evaluate(node.right, state))
        right = evaluate(node.right, state)
        return apply_binary_op(node.op, left, right)
    raise NotImplementedError(f"evaluate: unexpected node type {type(node)}")


def apply_unary_op(op: str, operand: Any) -> Any:
    if op == 'not':
        return not is_truthy(operand)
    if op == '-':
        if is_number(operand):
            return -operand
        raise ExpressionError(f'unary - expects a number, got {type_name(operand)}')
    raise ExpressionError(f'unsupported unary operator {op}')


def apply_binary_op(op: str, a: Any, b: Any) -> Any:
    if op in ('==', '!='):
        eq = equal_values(a, b)
        return eq if op == '==' else not eq
    if op == '+' and isinstance(a, str) and isinstance(b, str):
        return a + b
    if op in ('<', '>', '<=', '>='):
        if (is_number(a) and is_number(b)) or (isinstance(a, str) and isinstance(b, str)):
            if op == '<': return a < b
            if op == '>': return a > b
            if op == '<=': return a <= b
            return a >= b
        raise ExpressionError(f'comparison {op} not supported for {type_name(a)} and {type_name(b)}')
    if op in ('+', '-', '*', '/', '%'):
        if not (is_number(a) and is_number(b)):
            raise ExpressionError(f'unsupported {op} for {type_name(a)} and {type_name(b)}')
        if op == '+':
            return a + b
        if op == '-':
            return a - b
        if op == '*':
            return a * b
        if b == 0:
            raise ExpressionError('division by zero' if op == '/' else 'modulo by zero')
        if isinstance(a, int) and isinstance(b, int):
            quotient = truncated_quotient(a, b)
            if op == '/':
                return quotient
            # remainder takes the sign of the dividend, matching '/'
            return a - b * quotient
        if op == '/':
            return a / b
        return math.fmod(a, b)
    raise ExpressionError(f'unknown operator {op}')


def truncated_quotient(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient
