from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from calculator.type import Type
from calculator.util import Span


@dataclass
class Token:
    text: str
    type: Type = field(repr=False)
    span: Span = field(repr=False, default_factory=Span.default)

    def __post_init__(self) -> None:
        if not isinstance(self.type, Type):
            self.type = Type.to_type(self.type)

    @property
    def value(self) -> Optional[float]:
        # The scanner only emits NUMBER tokens whose text parses as a float
        if self.type == Type.NUMBER:
            return float(self.text)
        return None

    def __eq__(self, __o: object) -> bool:
        if not isinstance(__o, Token):
            return False
        return self.text == __o.text and self.type == __o.type

    def __hash__(self) -> int:
        return hash(self.text)

    def __str__(self) -> str:
        if self.type == Type.EOF:
            return str(self.type)
        return self.text
