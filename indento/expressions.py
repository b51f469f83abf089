"""Expression parser for the Indento language.

Statements are recognised line by line, but the expressions embedded in
them (assignment right-hand sides, `print` arguments and `if`
conditions) have a small grammar of their own. They are parsed with a
Lark LALR parser and the parse tree is transformed into the expression
nodes defined in `indento.ast`.

Precedence, lowest first: `or`, `and`, `not`, equality (`==`, `!=` and
a lone `=`), comparison (`<`, `>`, `<=`, `>=`), `+ -`, `* / %`, unary
minus. A lone `=` inside an expression always means equality; binding a
variable only happens at statement level.
"""

from __future__ import annotations

from typing import List, Optional
import ast as py_ast

from lark import Lark, Transformer
from lark.exceptions import LarkError, UnexpectedInput, VisitError

from .ast import BinaryOp, Ident, Literal, Node, UnaryOp
from .errors import ExpressionError
from .lines import SourceLine


EXPRESSION_GRAMMAR = r"""
    ?start: expression

    ?expression: logic_or
    ?logic_or: logic_and (OR logic_and)*
    ?logic_and: logic_not (AND logic_not)*
    ?logic_not: NOT logic_not -> logical_not
              | equality
    ?equality: compare ((EQ | NE | SINGLE_EQ) compare)*
    ?compare: term ((LT | GT | LE | GE) term)*
    ?term: factor ((PLUS | MINUS) factor)*
    ?factor: unary ((STAR | SLASH | PERCENT) unary)*
    ?unary: MINUS unary -> negative
          | atom
    ?atom: NUMBER -> number
         | STRING -> string
         | TRUE -> true
         | FALSE -> false
         | NAME -> variable
         | "(" expression ")"

    // Keywords
    OR: "or"
    AND: "and"
    NOT: "not"
    TRUE: "true"
    FALSE: "false"

    // Operators
    EQ: "=="
    NE: "!="
    SINGLE_EQ: "="
    LE: "<="
    GE: ">="
    LT: "<"
    GT: ">"
    PLUS: "+"
    MINUS: "-"
    STAR: "*"
    SLASH: "/"
    PERCENT: "%"

    NUMBER: /\d+(?:\.\d+)?/
    STRING: /"(?:[^"\\]|\\.)*"|'(?:[^'\\]|\\.)*'/

    %import common.CNAME -> NAME
    %import common.WS_INLINE
    %ignore WS_INLINE
"""


EXPRESSION_PARSER = Lark(
    EXPRESSION_GRAMMAR,
    parser='lalr',
    maybe_placeholders=False,
)


class ExpressionTransformer(Transformer):
    """Transforms the raw parse tree of an expression into tree nodes."""

    def _fold(self, items: List) -> Node:
        # items pattern: operand (OP operand)*, folded left-associatively
        left = items[0]
        i = 1
        while i < len(items):
            op = str(items[i])
            if op == '=':
                op = '=='
            left = BinaryOp(op=op, left=left, right=items[i + 1])
            i += 2
        return left

    def logic_or(self, items):
        return self._fold(items)

    def logic_and(self, items):
        return self._fold(items)

    def equality(self, items):
        return self._fold(items)

    def compare(self, items):
        return self._fold(items)

    def term(self, items):
        return self._fold(items)

    def factor(self, items):
        return self._fold(items)

    def logical_not(self, items):
        return UnaryOp(op='not', operand=items[1])

    def negative(self, items):
        return UnaryOp(op='-', operand=items[1])

    def number(self, items):
        text = str(items[0])
        if '.' in text:
            return Literal(float(text), 'Double')
        return Literal(int(text), 'Integer')

    def string(self, items):
        # Use Python's literal_eval to strip the quotes and unescape
        return Literal(py_ast.literal_eval(str(items[0])), 'Str')

    def true(self, items):
        return Literal(True, 'Boolean')

    def false(self, items):
        return Literal(False, 'Boolean')

    def variable(self, items):
        return Ident(str(items[0]))


def parse_expression(text: str, line: Optional[SourceLine] = None) -> Node:
    """Parse an expression substring into an expression node.

    Raises `ExpressionError` when the text is not a valid expression.
    """
    try:
        tree = EXPRESSION_PARSER.parse(text)
        return ExpressionTransformer().transform(tree)
    except UnexpectedInput as e:
        raise ExpressionError(f"invalid expression {text!r} at column {e.column}", line) from e
    except VisitError as e:
        if isinstance(e.orig_exc, RecursionError):
            raise ExpressionError("expression nested too deeply", line) from e
        raise ExpressionError(f"invalid expression {text!r}: {e.orig_exc}", line) from e
    except LarkError as e:
        raise ExpressionError(f"invalid expression {text!r}: {e}", line) from e
    except RecursionError as e:
        raise ExpressionError("expression nested too deeply", line) from e
