"""Runtime value helpers for Indento.

Indento values are plain Python objects: `int`, `float`, `str` and
`bool`. This module names their kinds for error messages and defines the
language rules for truthiness, equality and printing.
"""

from __future__ import annotations

from typing import Any


def is_number(value: Any) -> bool:
    # bool is a subclass of int but is not a number in Indento
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def type_name(value: Any) -> str:
    """Return the Indento kind name of a runtime value."""
    if isinstance(value, bool):
        return 'Boolean'
    if isinstance(value, int):
        return 'Integer'
    if isinstance(value, float):
        return 'Double'
    if isinstance(value, str):
        return 'Str'
    return type(value).__name__


def is_truthy(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        return len(value) > 0
    return bool(value)


def equal_values(a: Any, b: Any) -> bool:
    """Equality used by `==`, `!=` and `=` in expressions.

    Numbers compare numerically across int and float, booleans only equal
    booleans, and values of different kinds are never equal.
    """
    if is_number(a) and is_number(b):
        return a == b
    if isinstance(a, bool) and isinstance(b, bool):
        return a == b
    if isinstance(a, str) and isinstance(b, str):
        return a == b
    return False


def to_string(value: Any) -> str:
    """Convert a value to the text a `print` statement emits."""
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        # Use repr for a concise round-trip representation
        return repr(value)
    if isinstance(value, str):
        return value
    return str(value)
