from typing import Dict, Iterator, Optional

from calculator.util import CONSTANTS


class Environment:
    """
    The variables known to one session of the calculator.

    A fresh Environment holds the constants `pi` and `e`. Bindings are only ever
    added or overwritten, by evaluating an assignment, and never removed.

    >>> env = Environment()
    >>> env.assign("x", 5.0)
    5.0
    >>> env.get("x")
    5.0
    >>> env.get("y") is None
    True
    """

    def __init__(self, variables: Optional[Dict[str, float]] = None) -> None:
        self.variables = dict(CONSTANTS)
        if variables:
            self.variables.update(variables)

    def get(self, name: str) -> Optional[float]:
        return self.variables.get(name)

    def assign(self, name: str, value: float) -> float:
        self.variables[name] = value
        return value

    def __getitem__(self, name: str) -> float:
        return self.variables[name]

    def __contains__(self, name: str) -> bool:
        return name in self.variables

    def __iter__(self) -> Iterator[str]:
        return iter(self.variables)

    def __len__(self) -> int:
        return len(self.variables)

    def __repr__(self) -> str:
        return f"Environment({self.variables!r})"
