import math

import pytest

from calculator import Environment, Evaluator, Parser, evaluate
from calculator.error.evaluator_error import EvaluationTooDeepError, EvaluatorException
from tests.test_util import open_file

programs = [
    ("2 + 3 * 4", 14.0),
    ("(2 + 3) * 4", 20.0),
    ("2 ^ 3 ^ 2", 512.0),
    ("8 / 4 / 2", 1.0),
    ("10 - 4 - 3", 3.0),
    ("2 * 3 ^ 2", 18.0),
    ("7 / 2", 3.5),
    ("sqrt(16) + 1", 5.0),
    ("sqrt(2) ^ 2", pytest.approx(2.0)),
    ("sin(pi / 2)", pytest.approx(1.0)),
    ("cos(0)", 1.0),
    ("cos(pi)", pytest.approx(-1.0)),
    ("2 * pi", pytest.approx(2 * math.pi)),
    ("e ^ 1", pytest.approx(math.e)),
    ("0.1 + 0.2", 0.1 + 0.2),
    ("x = 4", 4.0),
    ("x = y = 5", 5.0),
    ("1 + x = 2 + 3", 6.0),
    ("print(3) * 2", 6.0),
]


@pytest.mark.parametrize("program, expected", programs)
def test_program(program: str, expected: float, environment: Environment):
    assert evaluate(program, environment, output=lambda text: None) == expected


def test_evaluate_file(valid_file: str, environment: Environment):
    program: str = open_file(valid_file)
    assert isinstance(evaluate(program, environment, output=lambda text: None), float)


def test_evaluator_visits_parsed_tree(environment: Environment):
    program = "radius = 2.5 * (height = 4)"
    tree = Parser(program).parse()

    evaluator = Evaluator(program, environment)
    assert evaluator.evaluate(tree) == 10.0
    assert environment["radius"] == 10.0
    assert environment["height"] == 4.0


def test_variable_persistence(environment: Environment):
    assert evaluate("x = 5", environment) == 5.0
    assert evaluate("x + 1", environment) == 6.0


def test_reassignment(environment: Environment):
    evaluate("x = 5", environment)
    evaluate("x = x * 2", environment)
    assert environment["x"] == 10.0


def test_chained_assignment(environment: Environment):
    evaluate("x = y = 5", environment)
    assert environment["x"] == 5.0
    assert environment["y"] == 5.0


def test_sessions_are_independent():
    first = Environment()
    second = Environment()
    evaluate("x = 1", first)
    assert "x" not in second


def test_variable_lookup_does_not_modify(environment: Environment):
    before = dict(environment.variables)
    evaluate("pi * e", environment)
    assert environment.variables == before


def test_constants(environment: Environment):
    assert environment.get("pi") == pytest.approx(3.14159265358979)
    assert environment.get("e") == pytest.approx(2.71828182845904)
    evaluate("x = 2 * pi", environment)
    evaluate("y = x + e", environment)
    assert environment.get("pi") == math.pi
    assert environment.get("e") == math.e


def test_constants_can_be_reassigned(environment: Environment):
    evaluate("pi = 3", environment)
    assert environment["pi"] == 3.0
    assert Environment()["pi"] == math.pi


def test_environment():
    environment = Environment({"x": 1.0})
    assert len(environment) == 3
    assert set(environment) == {"pi", "e", "x"}
    assert environment.get("y") is None
    assert environment.assign("y", 2.0) == 2.0
    assert "y" in environment


def test_UnboundVariableError(environment: Environment):
    with pytest.raises(EvaluatorException) as excinfo:
        evaluate("y + 1", environment)
    assert excinfo.value.error.name == "y"
    assert "EvaluationError" in str(excinfo.value)


def test_failed_assignment_does_not_commit(environment: Environment):
    with pytest.raises(EvaluatorException):
        evaluate("z = y + 1", environment)
    assert "z" not in environment


def test_earlier_sibling_assignment_stays_committed(environment: Environment):
    with pytest.raises(EvaluatorException):
        evaluate("(a = 1) + (b = y)", environment)
    assert environment["a"] == 1.0
    assert "b" not in environment


def test_first_failure_is_reported(environment: Environment):
    with pytest.raises(EvaluatorException) as excinfo:
        evaluate("p * q", environment)
    assert excinfo.value.error.name == "p"
    assert len(excinfo.value.errors) == 1


def test_print_output(environment: Environment):
    output = []
    assert evaluate("print(2) + print(0.5)", environment, output.append) == 2.5
    assert output == ["=> 2", "=> 0.5"]


def test_print_after_argument_is_evaluated(environment: Environment):
    output = []
    with pytest.raises(EvaluatorException):
        evaluate("print(y)", environment, output.append)
    assert output == []


def test_print_defaults_to_stdout(environment: Environment, capsys):
    evaluate("print(x = 3)", environment)
    assert capsys.readouterr().out == "=> 3\n"
    assert environment["x"] == 3.0


@pytest.mark.parametrize(
    "program, expected",
    [
        ("1 / 0", math.inf),
        ("(0 - 1) / 0", -math.inf),
        ("10 ^ 400", math.inf),
        ("(0 - 10) ^ 401", -math.inf),
        ("0 ^ (0 - 1)", math.inf),
        ("1 / (1 / 0)", 0.0),
    ],
)
def test_infinities(program: str, expected: float, environment: Environment):
    assert evaluate(program, environment) == expected


@pytest.mark.parametrize(
    "program",
    ["0 / 0", "sqrt(0 - 1)", "(0 - 8) ^ (1 / 3)", "sin(1 / 0)", "cos(1 / 0)"],
)
def test_not_a_number(program: str, environment: Environment):
    assert math.isnan(evaluate(program, environment))


def test_print_special_values(environment: Environment):
    output = []
    evaluate("print(1 / 0) + print(0 / 0)", environment, output.append)
    assert output == ["=> inf", "=> NaN"]


def test_long_flat_chain(environment: Environment):
    assert evaluate(" + ".join(["1"] * 10000), environment) == 10000.0
    assert evaluate("100000" + " - 1 * 2 / 2" * 10000, environment) == 90000.0


def test_EvaluationTooDeepError(environment: Environment):
    # Every `^` nests its right operand, which the parser can still handle
    with pytest.raises(EvaluatorException) as excinfo:
        evaluate("x = " + "1 ^ " * 3000 + "1", environment)
    assert isinstance(excinfo.value.error, EvaluationTooDeepError)
    assert "EvaluationError" in str(excinfo.value)
    assert "x" not in environment

    assert evaluate("1 + 1", environment) == 2.0
