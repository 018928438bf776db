import sys

from calculator import Environment, evaluate
from calculator.error.error import CalculatorException
from calculator.util import format_number

BANNER = """\
====================================
           CALCULATOR
====================================
Supported operations: + - * / ^
Functions: sin(x), cos(x), sqrt(x), print(x)
Variables: x = 5, then use x in expressions
Type 'quit' to exit
====================================
"""

EXIT_COMMANDS = ("quit", "exit")


def main() -> None:
    print(BANNER)

    # One environment for the whole session, so assignments persist between lines
    environment = Environment()

    while True:
        try:
            line = input(">> ")
        except EOFError:
            break

        line = line.strip()
        if line.lower() in EXIT_COMMANDS:
            print("Goodbye!")
            break
        if not line:
            continue

        printed = []

        def output(text: str) -> None:
            printed.append(text)
            print(text)

        try:
            result = evaluate(line, environment, output)
        except CalculatorException as exc:
            print(exc, file=sys.stderr)
            continue

        # The result was already shown if the line used `print(...)`
        if not printed:
            print(f"=> {format_number(result)}")


if __name__ == "__main__":
    main()
