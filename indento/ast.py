"""Statement tree definitions for the Indento language.

A parsed program is a `Program` holding an ordered list of statements.
There are exactly three statement kinds: `Assign`, `Print` and `If`.
Every statement is fully resolved when it is built; expressions are
stored as expression nodes, never as source text to be parsed later.

Statements remember the `SourceLine` they were parsed from so runtime
errors can point back at the program. The line is not part of node
equality.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional

from .lines import SourceLine


@dataclass
class Node:
    """Base class for all tree nodes."""
    pass


# Expressions

@dataclass
class Literal(Node):
    value: Any
    literal_type: str  # 'Integer', 'Double', 'Str', 'Boolean'


@dataclass
class Ident(Node):
    name: str


@dataclass
class BinaryOp(Node):
    op: str
    left: Node
    right: Node


@dataclass
class UnaryOp(Node):
    op: str  # '-' or 'not'
    operand: Node


# Statements

@dataclass
class Statement(Node):
    pass


@dataclass
class Assign(Statement):
    name: str
    expr: Node
    line: Optional[SourceLine] = field(default=None, compare=False, repr=False)


@dataclass
class Print(Statement):
    expr: Node
    line: Optional[SourceLine] = field(default=None, compare=False, repr=False)


@dataclass
class If(Statement):
    condition: Node
    body: List[Statement]
    line: Optional[SourceLine] = field(default=None, compare=False, repr=False)


@dataclass
class Program(Node):
    body: List[Statement]
