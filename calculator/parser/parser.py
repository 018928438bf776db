from calculator.evaluator.std_lib import FUNCTIONS
from calculator.scanner.scanner import Scanner
from calculator.token import Token
from calculator.type import Type
from calculator.util import (
    PRINT_FUNCTION,
    Span,
    operator_precedence,
    right_associative,
)

from calculator.tree.tree import (  # isort:skip
    AssignNode,
    FunCallNode,
    Node,
    NumberNode,
    Op2Node,
    PrintNode,
    VariableNode,
)
from calculator.error.parser_error import (  # isort:skip
    ExpectedTokenError,
    NestingTooDeepError,
    TrailingInputError,
    UnexpectedTokenError,
    UnknownFunctionError,
)


class Parser:
    def __init__(self, program: str) -> None:
        self.og_program = program
        self.scanner = Scanner(program)
        # The next token that has not been consumed yet
        self.current = None

    def parse(self) -> Node:
        """Parse the program passed to `Parser(program)` as exactly one expression.

        Tokens are pulled from the Scanner one at a time, so scanner errors surface
        at the point where the parser reaches them.

        Raises:
            ScannerException: If the program contains an illegal character or number.
            ParserException: If the tokens do not form exactly one expression, or
                if they nest too deeply to parse.

        Returns:
            Node: The root of the expression tree.
        """
        self.current = self.scanner.next_token()
        try:
            tree = self.parse_expression(0)
        except RecursionError:
            tree = None
        # Raised outside of the except block, to not chain onto the RecursionError
        if tree is None:
            NestingTooDeepError(self.og_program, Span.covering(self.og_program))
        if self.current.type != Type.EOF:
            TrailingInputError(self.og_program, self.current.span, self.current)
        return tree

    def parse_expression(self, min_precedence: int) -> Node:
        """Precedence climbing: parse an atom, then keep folding in binary operators
        that bind at least as tightly as `min_precedence`.

        The right operand of a left-associative operator may only contain operators
        that bind strictly tighter, which groups `8 / 4 / 2` as `(8 / 4) / 2`.
        A right-associative operator lets its right operand contain operators of the
        same precedence, which groups `2 ^ 3 ^ 2` as `2 ^ (3 ^ 2)`.
        """
        left = self.parse_atom()

        while (
            self.current.type in operator_precedence
            and operator_precedence[self.current.type] >= min_precedence
        ):
            operator = self.advance()
            precedence = operator_precedence[operator.type]
            if operator.type in right_associative:
                next_min_precedence = precedence
            else:
                next_min_precedence = precedence + 1

            right = self.parse_expression(next_min_precedence)
            left = Op2Node(left, operator, right)

        return left

    def parse_atom(self) -> Node:
        match self.current.type:
            case Type.NUMBER:
                token = self.advance()
                return NumberNode(token.value)

            case Type.ID:
                symbol = self.advance()
                match self.current.type:
                    case Type.LRB:
                        return self.parse_function_call(symbol)
                    case Type.EQ:
                        return self.parse_assignment(symbol)
                return VariableNode(symbol)

            case Type.LRB:
                self.advance()
                exp = self.parse_expression(0)
                self.expect(Type.RRB)
                return exp

        UnexpectedTokenError(self.og_program, self.current.span, self.current)

    def parse_function_call(self, func: Token) -> Node:
        self.expect(Type.LRB)
        arg = self.parse_expression(0)
        self.expect(Type.RRB)

        if func.text == PRINT_FUNCTION:
            return PrintNode(arg)
        if func.text not in FUNCTIONS:
            UnknownFunctionError(self.og_program, func.span, func.text)
        return FunCallNode(func, arg)

    def parse_assignment(self, var: Token) -> AssignNode:
        self.expect(Type.EQ)
        # `x = y = 5` nests, assigning 5 to `y` first and then to `x`
        exp = self.parse_expression(0)
        return AssignNode(var, exp)

    def advance(self) -> Token:
        """Consume the current token, and read the next one from the Scanner."""
        token = self.current
        self.current = self.scanner.next_token()
        return token

    def expect(self, expected: Type) -> Token:
        if self.current.type != expected:
            ExpectedTokenError(
                self.og_program, self.current.span, expected, self.current
            )
        return self.advance()
