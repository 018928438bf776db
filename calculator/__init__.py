import sys

from calculator.evaluator.environment import Environment
from calculator.evaluator.evaluator import Evaluator, evaluate
from calculator.parser.parser import Parser
from calculator.scanner.scanner import Scanner
from calculator.token import Token
from calculator.type import Type

# Default is 1000, and every bracket or operator nests another call
sys.setrecursionlimit(5000)
