import math
from typing import Iterator

from calculator.token import Token
from calculator.tree.visitor import YieldVisitor
from calculator.type import Type
from calculator.util import PRINT_FUNCTION, format_number, operator_precedence, right_associative

from calculator.tree.tree import (  # isort:skip
    AssignNode,
    FunCallNode,
    Node,
    NumberNode,
    Op2Node,
    PrintNode,
)

LEFT_ATTACHED_TOKENS = {
    Type.LRB,  # (
}

RIGHT_ATTACHED_TOKENS = {
    Type.RRB,  # )
}

# A power of ten too large for a float, which scans back to infinity
INF_LITERAL = "1" + "0" * 309


class Printer(YieldVisitor):
    def print(self, tree: Node) -> str:
        # Traverse the tree, collecting Tokens, and join them with spaces
        # wherever they are not tightly bound to their neighbour
        program = ""
        last_token = None
        for token in self.visit(tree):
            # Remove the last space if this is a tightly bound character, e.g. ')'
            # OR if `token` is the `(` after an `id` (i.e. a function call)
            if (
                program
                and program[-1] == " "
                and (
                    token.type in RIGHT_ATTACHED_TOKENS
                    or (
                        last_token
                        and last_token.type == Type.ID
                        and token.type == Type.LRB
                    )
                )
            ):
                program = program[:-1]

            program += token.text
            if token.type not in LEFT_ATTACHED_TOKENS:
                program += " "

            last_token = token

        return program.strip()

    def visit_NumberNode(self, node: NumberNode, **kwargs) -> Iterator[Token]:
        if math.isinf(node.value):
            # A literal too large for a float, "inf" would scan as a symbol
            yield Token(INF_LITERAL, Type.NUMBER)
            return
        yield Token(format_number(node.value), Type.NUMBER)

    def visit_Op2Node(
        self, node: Op2Node, parent: Token = None, side: str = None, **kwargs
    ) -> Iterator[Token]:
        precedence = operator_precedence[node.operator.type]
        bracketed = False
        if parent:
            parent_precedence = operator_precedence[parent.type]
            # On equal precedence, only the side that the parent associates
            # towards may go without brackets
            if parent.type in right_associative:
                bracketed = precedence < parent_precedence or (
                    precedence == parent_precedence and side == "left"
                )
            else:
                bracketed = precedence < parent_precedence or (
                    precedence == parent_precedence and side == "right"
                )

        if bracketed:
            yield Token("(", Type.LRB)
        yield from self.visit(node.left, parent=node.operator, side="left")
        yield node.operator
        yield from self.visit(node.right, parent=node.operator, side="right")
        if bracketed:
            yield Token(")", Type.RRB)

    def visit_FunCallNode(self, node: FunCallNode, **kwargs) -> Iterator[Token]:
        yield node.func
        yield Token("(", Type.LRB)
        yield from self.visit(node.arg)
        yield Token(")", Type.RRB)

    def visit_PrintNode(self, node: PrintNode, **kwargs) -> Iterator[Token]:
        yield Token(PRINT_FUNCTION, Type.ID)
        yield Token("(", Type.LRB)
        yield from self.visit(node.arg)
        yield Token(")", Type.RRB)

    def visit_AssignNode(
        self, node: AssignNode, parent: Token = None, **kwargs
    ) -> Iterator[Token]:
        # An assignment swallows everything to its right, so
        # it needs brackets when it is the operand of an operator
        if parent:
            yield Token("(", Type.LRB)
        yield node.id
        yield Token("=", Type.EQ)
        yield from self.visit(node.exp)
        if parent:
            yield Token(")", Type.RRB)

    def visit_Token(self, node: Token, **kwargs) -> Iterator[Token]:
        yield node
