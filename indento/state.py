from typing import Any, Dict, Iterator
from indento.errors import UndefinedVariableError


class ProgramState:
    """The variable environment of one program run.

    A single flat mapping from variable names to values. Conditional
    bodies share the state of the code around them, so there is no
    scope chain.
    """
    def __init__(self):
        self.values: Dict[str, Any] = {}

    def get(self, name: str) -> Any:
        if name in self.values:
            return self.values[name]
        raise UndefinedVariableError(name)

    def set(self, name: str, value: Any):
        self.values[name] = value

    def __contains__(self, name: str) -> bool:
        return name in self.values

    def __iter__(self) -> Iterator[str]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)

    def snapshot(self) -> Dict[str, Any]:
        return dict(self.values)

    def __repr__(self) -> str:
        return f"ProgramState({self.values!r})"
