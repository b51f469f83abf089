from typing import Optional
from indento.lines import SourceLine


class IndentoError(Exception):
    """Base exception for every Indento parse or runtime failure."""
    kind = 'Error'

    def __init__(self, message: str, line: Optional[SourceLine] = None):
        super().__init__(message)
        self.message = message
        self.line = line

    def __str__(self) -> str:
        if self.line is None:
            return f"{self.kind}: {self.message}"
        return f"{self.kind}: {self.message} (line {self.line.number}: {self.line.code})"


class StatementSyntaxError(IndentoError):
    """A line matches none of the recognised statement forms."""
    kind = 'SyntaxError'


class IndentationMismatchError(IndentoError):
    """A line is not indented the way its position in the program requires."""
    kind = 'IndentationError'


class EmptyBodyError(IndentoError):
    kind = 'EmptyBodyError'


class UndefinedVariableError(IndentoError):
    kind = 'UndefinedVariableError'

    def __init__(self, name: str, line: Optional[SourceLine] = None):
        super().__init__(f'undefined variable {name}', line)
        self.name = name


class ExpressionError(IndentoError):
    """Invalid expression syntax, or an operator applied to the wrong kinds."""
    kind = 'ExpressionError'
