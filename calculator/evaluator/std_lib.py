import math
from typing import Callable, Dict

# The arithmetic here follows IEEE-754 like the rest of the float world does:
# where Python's `math` raises on a domain error or an overflow, we produce
# the NaN or the infinity that a C `pow`/`sqrt`/`sin` would have produced.


def _is_odd_integer(value: float) -> bool:
    return value.is_integer() and value % 2 == 1


def divide(left: float, right: float) -> float:
    try:
        return left / right
    except ZeroDivisionError:
        if left == 0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)


def power(base: float, exponent: float) -> float:
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and _is_odd_integer(exponent):
            return -math.inf
        return math.inf
    except ValueError:
        # Zero to a negative power
        if base == 0:
            if _is_odd_integer(exponent):
                return math.copysign(math.inf, base)
            return math.inf
        # Negative base to a fractional power
        return math.nan


def _nan_on_domain_error(function: Callable[[float], float]) -> Callable[[float], float]:
    def wrapper(argument: float) -> float:
        try:
            return function(argument)
        except ValueError:
            return math.nan

    wrapper.__name__ = function.__name__
    return wrapper


sine = _nan_on_domain_error(math.sin)
cosine = _nan_on_domain_error(math.cos)
square_root = _nan_on_domain_error(math.sqrt)

# Built-in single argument functions, by the name they are called with
FUNCTIONS: Dict[str, Callable[[float], float]] = {
    "sin": sine,
    "cos": cosine,
    "sqrt": square_root,
}
