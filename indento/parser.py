"""Parser for the Indento language.

Indento programs are parsed a line at a time. Each code line is
classified by fixed textual patterns into one of three statement forms:

* ``if <condition>:`` opens a block whose body is the following run of
  lines indented further than the header;
* ``print(<expression>)`` outputs a value;
* ``<name> = <expression>`` binds a variable.

Blocks are found by recursive descent over a single FIFO queue of
`SourceLine` objects shared by every level of the recursion. A block
body ends at the first line indented no further than its header, which
is left in the queue for the enclosing level. Expressions are parsed
into nodes as their statement is built, so the resulting tree needs no
further parsing to run.

`parse_program` is the public entry point and returns a `Program`.
"""

from __future__ import annotations

from collections import deque
import re
from typing import Deque, Iterable, List, NamedTuple, Optional, Union

from .ast import Assign, If, Print, Program, Statement
from .errors import EmptyBodyError, IndentationMismatchError, StatementSyntaxError
from .expressions import parse_expression
from .lines import SourceLine, code_lines


IF_PATTERN = re.compile(r'^if (.+):$')
PRINT_PATTERN = re.compile(r'^print\((.+)\)$')
IDENT_PATTERN = re.compile(r'^[A-Za-z_][A-Za-z0-9_]*$')
ASSIGN_TOKEN = ' = '


class LineMatch(NamedTuple):
    kind: str  # 'if', 'print' or 'assign'
    expression: str
    name: Optional[str] = None


def classify_line(code: str, line: Optional[SourceLine] = None) -> LineMatch:
    """Work out which statement form a trimmed line of code is.

    Forms are tried in priority order: conditional header, output,
    assignment. Nothing is evaluated here.
    """
    if_match = IF_PATTERN.match(code)
    if if_match:
        return LineMatch('if', if_match.group(1).strip())

    print_match = PRINT_PATTERN.match(code)
    if print_match:
        return LineMatch('print', print_match.group(1).strip())

    if ASSIGN_TOKEN in code:
        name, expression = code.split(ASSIGN_TOKEN, 1)
        name = name.strip()
        expression = expression.strip()
        if IDENT_PATTERN.match(name) and expression:
            return LineMatch('assign', expression, name)

    if line is None:
        raise StatementSyntaxError(f"Unrecognized statement: {code}")
    raise StatementSyntaxError("Unrecognized statement", line)


def parse_statement(lines: Deque[SourceLine], indentation_level: int) -> Statement:
    """Parse one statement from the front of `lines`.

    A conditional consumes its header and its whole body; any other
    statement consumes exactly one line.
    """
    line = lines.popleft()
    if line.depth != indentation_level:
        raise IndentationMismatchError("Line with unexpected indentation", line)

    match = classify_line(line.code, line)
    if match.kind == 'if':
        condition = parse_expression(match.expression, line)
        body = parse_body(lines, indentation_level, header=line)
        return If(condition, body, line=line)
    if match.kind == 'print':
        return Print(parse_expression(match.expression, line), line=line)
    return Assign(match.name, parse_expression(match.expression, line), line=line)


def parse_body(
    lines: Deque[SourceLine],
    indentation_level: int,
    header: Optional[SourceLine] = None,
) -> List[Statement]:
    """Parse the body of a block whose header sits at `indentation_level`.

    The first body line fixes the body's depth, which must be greater than
    the header's. Every later statement in the body must sit at that same
    depth. The body ends at the first line indented no further than the
    header, or at the end of the program.
    """
    if not lines:
        raise EmptyBodyError("Block statement found with an empty body.", header)

    block_indentation_level = lines[0].depth
    if block_indentation_level <= indentation_level:
        raise IndentationMismatchError(
            "Expected body of block statement to be further indented, but was not",
            lines[0],
        )

    statements: List[Statement] = []
    while lines:
        # Peek before parsing in case the next line closes this block.
        next_line = lines[0]
        next_level = next_line.depth
        if next_level <= indentation_level:
            return statements
        if next_level != block_indentation_level:
            raise IndentationMismatchError("Line with unexpected indentation", next_line)
        statements.append(parse_statement(lines, block_indentation_level))

    # Ran out of lines: the block finishes at the end of the program.
    return statements


def parse_lines(lines: Iterable[SourceLine]) -> Program:
    """Parse already filtered code lines into a `Program`."""
    queue: Deque[SourceLine] = deque(lines)
    statements: List[Statement] = []
    while queue:
        first = queue[0]
        try:
            statements.append(parse_statement(queue, 0))
        except RecursionError as e:
            raise IndentationMismatchError('blocks nested too deeply', first) from e
    return Program(body=statements)


def parse_program(source: Union[str, Iterable[str]]) -> Program:
    """Parse Indento source code into a `Program`.

    `source` is either the whole program text or an iterable of raw
    lines. Blank lines and comment lines are dropped before parsing. Any
    malformed line raises an `IndentoError` and no tree is returned.
    """
    return parse_lines(code_lines(source))
