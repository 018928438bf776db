from typing import Callable

from calculator.error.evaluator_error import EvaluationTooDeepError, UnboundVariableError
from calculator.evaluator.environment import Environment
from calculator.evaluator.std_lib import FUNCTIONS, divide, power
from calculator.parser.parser import Parser
from calculator.token import Token
from calculator.tree.visitor import NodeVisitor
from calculator.type import Type
from calculator.util import Span, format_number

from calculator.tree.tree import (  # isort:skip
    AssignNode,
    FunCallNode,
    Node,
    NumberNode,
    Op2Node,
    PrintNode,
    VariableNode,
)


class Evaluator(NodeVisitor):
    """
    Compute the value of an expression tree, post-order and left to right.

    Evaluation stops at the first variable that is not bound, and that failure
    propagates up through every enclosing node. An assignment only updates the
    Environment after its value was computed, so a failing assignment leaves the
    Environment as it was. Assignments in operands that were evaluated before the
    failure do remain.
    """

    def __init__(
        self,
        program: str,
        environment: Environment,
        output: Callable[[str], None] = print,
    ) -> None:
        self.og_program = program
        self.environment = environment
        self.output = output

    def evaluate(self, tree: Node) -> float:
        try:
            return self.visit(tree)
        except RecursionError:
            pass
        EvaluationTooDeepError(self.og_program, Span.covering(self.og_program))

    def visit_NumberNode(self, node: NumberNode, **kwargs) -> float:
        return node.value

    def visit_Op2Node(self, node: Op2Node, **kwargs) -> float:
        # Walk down the left operands first, so that a long chain such as
        # `1 + 1 + ... + 1` does not nest a call per operator
        chain = []
        while isinstance(node, Op2Node):
            chain.append(node)
            node = node.left

        left = self.visit(node)
        for op2 in reversed(chain):
            right = self.visit(op2.right)
            left = self.apply(op2.operator, left, right)
        return left

    def apply(self, operator: Token, left: float, right: float) -> float:
        match operator.type:
            case Type.PLUS:
                return left + right
            case Type.MINUS:
                return left - right
            case Type.STAR:
                return left * right
            case Type.SLASH:
                return divide(left, right)
            case Type.POWER:
                return power(left, right)
        raise Exception(f"Unsupported binary operator {operator.text!r}")

    def visit_FunCallNode(self, node: FunCallNode, **kwargs) -> float:
        arg = self.visit(node.arg)
        return FUNCTIONS[node.func.text](arg)

    def visit_PrintNode(self, node: PrintNode, **kwargs) -> float:
        arg = self.visit(node.arg)
        self.output(f"=> {format_number(arg)}")
        return arg

    def visit_VariableNode(self, node: VariableNode, **kwargs) -> float:
        value = self.environment.get(node.id.text)
        if value is None:
            UnboundVariableError(self.og_program, node.id.span, node.id.text)
        return value

    def visit_AssignNode(self, node: AssignNode, **kwargs) -> float:
        value = self.visit(node.exp)
        return self.environment.assign(node.id.text, value)


def evaluate(
    program: str,
    environment: Environment,
    output: Callable[[str], None] = print,
) -> float:
    """Scan, parse and evaluate one expression against `environment`.

    Args:
        program (str): The expression, e.g. "x = 2 ^ 3 ^ 2".
        environment (Environment): The variables to read from and assign to.
        output (Callable[[str], None], optional): Receives the lines written by
            `print(...)`. Defaults to `print`.

    Raises:
        ScannerException: If the expression contains an illegal character or number.
        ParserException: If the expression is not syntactically valid, or nests
            too deeply to parse.
        EvaluatorException: If the expression uses a variable that is not bound,
            or nests too deeply to evaluate.

    Returns:
        float: The value of the expression.
    """
    parser = Parser(program)
    tree = parser.parse()

    evaluator = Evaluator(program, environment, output)
    return evaluator.evaluate(tree)
