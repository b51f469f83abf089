"""Interpreter for the Indento language.

The interpreter walks a parsed `Program` against a `ProgramState`. Each
run gets its own fresh state unless the caller passes one in, so a
program parsed once can be run any number of times without the runs
interfering. Output produced by `print` statements goes, one line per
statement, to a caller-supplied sink which defaults to standard output.

Execution stops at the first error. Lines already printed by that point
stay printed.
"""

from __future__ import annotations

import pathlib
from typing import Any, Callable, List, Optional, Union

from .ast import Assign, If, Node, Print, Program, Statement
from .errors import ExpressionError, IndentationMismatchError, IndentoError
from .evaluator import evaluate
from .parser import parse_program
from .state import ProgramState
from .types import is_truthy, to_string, type_name


class Interpreter:
    """Core interpreter that executes an Indento statement tree."""
    def __init__(
        self,
        debug_level: int = 0,
        debug_file: str = 'debug.txt',
        output: Optional[Callable[[str], None]] = None,
    ):
        self.debug_level = debug_level
        self.debug_fp = open(debug_file, 'w') if debug_level > 0 else None
        self.output = output if output is not None else print

    def debug(self, msg: str):
        if self.debug_level > 0:
            if self.debug_fp:
                self.debug_fp.write(msg + '\n')
                self.debug_fp.flush()
            else:
                print(msg)

    def close(self):
        if self.debug_fp:
            self.debug_fp.close()
            self.debug_fp = None

    def __enter__(self) -> 'Interpreter':
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    # Public API
    def run(self, program: Program, state: Optional[ProgramState] = None) -> ProgramState:
        if state is None:
            state = ProgramState()
        try:
            self.execute_block(program.body, state)
        except RecursionError as e:
            raise IndentationMismatchError('blocks nested too deeply to run') from e
        return state

    def execute_block(self, statements: List[Statement], state: ProgramState):
        for stmt in statements:
            self.execute(stmt, state)

    def evaluate(self, node: Statement, expr: Node, state: ProgramState) -> Any:
        try:
            return evaluate(expr, state)
        except RecursionError as e:
            raise ExpressionError('expression nested too deeply', node.line) from e

    def execute(self, node: Statement, state: ProgramState):
        try:
            if isinstance(node, Assign):
                value = self.evaluate(node, node.expr, state)
                state.set(node.name, value)
                if self.debug_level >= 2:
                    self.debug(f"assign {node.name}: {type_name(value)} = {to_string(value)}")
                return
            if isinstance(node, Print):
                text = to_string(self.evaluate(node, node.expr, state))
                if self.debug_level >= 3:
                    self.debug(f"print {text}")
                self.output(text)
                return
            if isinstance(node, If):
                cond = self.evaluate(node, node.condition, state)
                truthy = is_truthy(cond)
                if self.debug_level >= 3:
                    self.debug(f"if condition {to_string(cond)} -> {truthy}")
                if truthy:
                    # The body shares the enclosing state, so its bindings persist.
                    self.execute_block(node.body, state)
                return
        except IndentoError as e:
            if e.line is None:
                e.line = node.line
            raise
        raise NotImplementedError(f"execute: unexpected node type {type(node)}")


def run_program(
    source: str,
    debug_level: int = 0,
    output: Optional[Callable[[str], None]] = None,
) -> ProgramState:
    """Convenience function to parse and run an Indento program from source."""
    program = parse_program(source)
    with Interpreter(debug_level=debug_level, output=output) as interpreter:
        return interpreter.run(program)


def run_file(file_path: Union[str, pathlib.Path], debug_level: int = 0) -> ProgramState:
    """Parse and run an Indento file, returning the final program state."""
    with open(file_path, 'r', encoding='utf-8') as f:
        source = f.read()
    return run_program(source, debug_level=debug_level)
