from enum import Enum


class Type(Enum):
    LRB = "("
    RRB = ")"
    PLUS = "+"
    MINUS = "-"
    STAR = "*"
    SLASH = "/"
    POWER = "^"
    EQ = "="
    # Tokens with varying text are described by name
    NUMBER = "number"
    ID = "symbol"
    EOF = "end of input"

    def to_type(type_str: str):
        return Type[type_str]

    def __str__(self) -> str:
        if self in (Type.NUMBER, Type.ID, Type.EOF):
            return self.value
        return repr(self.value)

    def article_str(self) -> str:
        match self:
            case Type.EOF:
                return f"the {self}"
            case _:
                return f"a {self}"
