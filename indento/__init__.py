# Indento language package
# This package provides a parser and interpreter for the Indento language.
from .errors import (
    IndentoError,
    StatementSyntaxError,
    IndentationMismatchError,
    EmptyBodyError,
    UndefinedVariableError,
    ExpressionError,
)
from .interpreter import run_program, run_file, Interpreter
from .parser import parse_program
from .state import ProgramState

__all__ = [
    'run_program',
    'run_file',
    'parse_program',
    'Interpreter',
    'ProgramState',
    'IndentoError',
    'StatementSyntaxError',
    'IndentationMismatchError',
    'EmptyBodyError',
    'UndefinedVariableError',
    'ExpressionError',
]
