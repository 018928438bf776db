from dataclasses import dataclass

from calculator.error.error import CalculatorError, CalculatorException


class EvaluatorException(CalculatorException):
    pass


@dataclass
class UnboundVariableError(CalculatorError):
    name: str

    @property
    def stage(self):
        return EvaluatorException

    def __str__(self) -> str:
        return self.create_error(
            f"Variable {self.name!r} on {self.location_str} is not defined.",
            f"Assign it first, e.g. '{self.name} = 1'.",
            class_name="EvaluationError",
        )


@dataclass
class EvaluationTooDeepError(CalculatorError):
    @property
    def stage(self):
        return EvaluatorException

    def __str__(self) -> str:
        return self.create_error(
            "The expression is nested too deeply to be evaluated.",
            "Split it up using variables, e.g. 'x = 2 ^ 2' and then 'x ^ 2'.",
            class_name="EvaluationError",
        )
