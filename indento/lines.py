"""Source line handling for Indento.

Programs arrive as raw text lines. Before parsing, blank lines and
comment lines are dropped and every remaining line is wrapped in a
`SourceLine` that remembers where it came from and how far it is
indented. The parser consumes these from a FIFO queue.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Union


def indentation_level(text: str) -> int:
    """Return the index of the first character in `text` that isn't a space.

    Only the space character counts as indentation. A line made only of
    spaces has no indentation level; callers must filter those out first.
    """
    for i, c in enumerate(text):
        if c != ' ':
            return i
    raise ValueError(f"blank line has no indentation level: {text!r}")


@dataclass(frozen=True)
class SourceLine:
    """A line of code together with its 1-based line number."""
    text: str
    number: int = 0

    @property
    def depth(self) -> int:
        return indentation_level(self.text)

    @property
    def code(self) -> str:
        return self.text.strip()


def is_code_line(text: str) -> bool:
    # Comments are only recognised when '#' is the very first character.
    return bool(text.strip()) and not text.startswith('#')


def code_lines(program: Union[str, Iterable[str]]) -> List[SourceLine]:
    """Split a program into the code lines the parser works on.

    `program` may be the whole source as one string or any iterable of
    raw lines (trailing newlines are removed).
    """
    # Only "\n" ends a line, with an optional "\r" before it, whichever
    # form the program arrives in.
    raw_lines: Iterable[str] = program.split('\n') if isinstance(program, str) else program
    codes = []
    for number, raw in enumerate(raw_lines, start=1):
        text = raw.rstrip('\n').rstrip('\r')
        if is_code_line(text):
            codes.append(SourceLine(text, number))
    return codes
