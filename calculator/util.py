from __future__ import annotations

import math
import re
from dataclasses import dataclass
from decimal import Decimal
from typing import List, Tuple

from calculator.type import Type


@dataclass
class Span:
    ln: Tuple[int, int]
    col: Tuple[int, int]

    @property
    def start_ln(self) -> int:
        return self.ln[0]

    @property
    def end_ln(self) -> int:
        return self.ln[1]

    @property
    def start_col(self) -> int:
        return self.col[0]

    @property
    def end_col(self) -> int:
        return self.col[1]

    @property
    def multiline(self) -> bool:
        return self.start_ln != self.end_ln

    @property
    def lines_str(self) -> str:
        if self.multiline:
            return f"lines [{self.start_ln}-{self.end_ln}]"
        return f"line [{self.start_ln}]"

    @property
    def columns_str(self) -> str:
        if self.end_col - self.start_col > 1:
            return f"columns [{self.start_col + 1}-{self.end_col}]"
        return f"column [{self.start_col + 1}]"

    @classmethod
    def default(cls):
        return cls(-1, (0, -1))

    @classmethod
    def covering(cls, program: str) -> Span:
        """The Span from the first character of `program` up to its last."""
        lines = split_lines(program) or [""]
        return cls((1, len(lines)), (0, len(lines[-1])))

    def __init__(self, line_no: int | Tuple[int, int], span: Tuple[int, int]) -> None:
        if isinstance(line_no, int):
            self.ln = (line_no, line_no)
        else:
            self.ln = line_no
        self.col = span


# Binary operators only, a higher number binds tighter.
# Function application and brackets bind tighter than any of these.
operator_precedence = {
    Type.PLUS: 1,
    Type.MINUS: 1,
    Type.STAR: 2,
    Type.SLASH: 2,
    Type.POWER: 3,
}

right_associative = (Type.POWER,)

# Bindings every fresh Environment starts out with
CONSTANTS = {
    "pi": math.pi,
    "e": math.e,
}

# Name of the built-in function that writes its argument to the output
PRINT_FUNCTION = "print"

# Line breaks among the whitespace the Scanner skips. Unlike `str.splitlines`,
# the separators \x1c-\x1e are not line breaks, as they are not whitespace.
LINE_BREAK = re.compile(r"\r\n|[\n\x0b\x0c\r\x85\u2028\u2029]")


def split_lines(program: str) -> List[str]:
    """Split `program` into lines on the same line breaks the Scanner counts."""
    lines = LINE_BREAK.split(program)
    if lines[-1] == "":
        lines.pop()
    return lines


def format_number(value: float) -> str:
    """Render a float positionally, i.e. without an exponent.

    Integral values lose their trailing ".0", so 5.0 becomes "5" while 0.5 stays "0.5".
    Infinities and NaN are rendered as "inf", "-inf" and "NaN".

    Args:
        value (float): The number to render.

    Returns:
        str: The rendered number.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"

    # repr gives the shortest string that round-trips, Decimal expands its exponent
    text = format(Decimal(repr(value)), "f")
    if text.endswith(".0"):
        text = text[:-2]
    return text


class Colors:
    RED = "\033[31m"
    ENDC = "\033[m"
