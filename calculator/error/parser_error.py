from dataclasses import dataclass

from calculator.error.error import CalculatorError, CalculatorException
from calculator.token import Token
from calculator.type import Type


class ParserException(CalculatorException):
    pass


class ParserError(CalculatorError):
    @property
    def stage(self):
        return ParserException

    def create_error(self, before: str, after=""):
        return super().create_error(before, class_name="SyntaxError", after=after)


@dataclass
class UnexpectedTokenError(ParserError):
    token: Token

    def __str__(self) -> str:
        if self.token.type == Type.EOF:
            return self.create_error(
                f"Unexpected end of input on {self.location_str}.",
                "Expected a number, a symbol or '('.",
            )
        return self.create_error(
            f"Unexpected token {self.token.text!r} on {self.location_str}.",
            "Expected a number, a symbol or '('.",
        )


@dataclass
class ExpectedTokenError(ParserError):
    expected: Type
    got: Token

    def __str__(self) -> str:
        got = str(self.got.type) if self.got.type == Type.EOF else repr(self.got.text)
        return self.create_error(
            f"Expected {self.expected.article_str()} on {self.location_str}, but got {got} instead."
        )


@dataclass
class TrailingInputError(ParserError):
    token: Token

    def __str__(self) -> str:
        return self.create_error(
            f"Unexpected trailing input {self.token.text!r} on {self.location_str}.",
            "Only one expression can be evaluated at a time.",
        )


@dataclass
class UnknownFunctionError(ParserError):
    name: str

    def __str__(self) -> str:
        return self.create_error(
            f"Unknown function {self.name!r} on {self.location_str}.",
            "Available functions are 'sin', 'cos', 'sqrt' and 'print'.",
        )


@dataclass
class NestingTooDeepError(ParserError):
    def __str__(self) -> str:
        return self.create_error(
            "The expression is nested too deeply to be parsed.",
            "Split it up using variables, e.g. 'x = (1 + 2)' and then 'x * 3'.",
        )
