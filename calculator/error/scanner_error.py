from dataclasses import dataclass

from calculator.error.error import CalculatorError, CalculatorException


class ScannerException(CalculatorException):
    pass


class ScannerError(CalculatorError):
    @property
    def stage(self):
        return ScannerException

    def create_error(self, before: str, after=""):
        return super().create_error(before, class_name="ScannerError", after=after)


class UnexpectedCharacterError(ScannerError):
    @property
    def char(self) -> str:
        return self.error_chars

    def __str__(self) -> str:
        return self.create_error(
            f"Unexpected character {self.char!r} on {self.location_str}."
        )


@dataclass
class MalformedNumberError(ScannerError):
    text: str

    def __str__(self) -> str:
        return self.create_error(
            f"Invalid number format {self.text!r} on {self.location_str}.",
            "A number is a sequence of digits with at most one decimal point.",
        )
