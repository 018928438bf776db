from dataclasses import dataclass
from typing import List

from calculator.error.communicator import Communicator, ErrorRaiser
from calculator.util import Span, split_lines


# Python exceptions to differentiate the stage in which errors are thrown
class CalculatorException(Exception):
    def __init__(self, message: str, errors: List = None) -> None:
        super().__init__(message)
        self.errors = errors or []

    @property
    def error(self):
        """The first error that was communicated, if any."""
        return self.errors[0] if self.errors else None


@dataclass
class CalculatorError:
    program: str
    span: Span

    # Every error is fatal for the expression it occurs in, so
    # register the error and immediately raise it as a stage exception
    def __post_init__(self) -> None:
        ErrorRaiser.ERRORS.append(self)
        Communicator.communicate(self.stage)

    @property
    def stage(self):
        return CalculatorException

    def create_error(
        self, before: str = "", after: str = "", class_name="CalculatorError"
    ):
        return Communicator.create_message(
            self.program, self.span, class_name, before, after
        )

    # Give the characters that caused the error to be thrown
    @property
    def error_chars(self) -> str:
        lines = split_lines(self.program)
        if self.span.start_ln > len(lines):
            return ""
        error_line = lines[self.span.start_ln - 1]
        return error_line[self.span.start_col : self.span.end_col]

    @property
    def location_str(self) -> str:
        return f"{self.span.lines_str} {self.span.columns_str}"
