from calculator.token import Token
from calculator.tree.tree import Node


class NodeVisitor:
    """
    For visiting nodes in our expression tree
    """

    def visit(self, node: Node | Token, *args, **kwargs):
        """Visit a node."""
        method = "visit_" + node.__class__.__name__
        visitor = getattr(self, method, self.visit_children)
        return visitor(node, *args, **kwargs)

    def visit_children(self, node: Node | Token, *args, **kwargs):
        """Called if no explicit visitor function exists for a node."""
        if isinstance(node, Token):
            return
        for field, value in node.iter_fields():
            if isinstance(value, (Node, Token)):
                self.visit(value, *args, **kwargs)


class YieldVisitor(NodeVisitor):
    """
    For yielding values from nodes in our expression tree
    """

    def visit(self, node: Node | Token, *args, **kwargs):
        """Visit a node."""
        method = "visit_" + node.__class__.__name__
        visitor = getattr(self, method, self.visit_children)
        yield from visitor(node, *args, **kwargs)

    def visit_children(self, node: Node | Token, *args, **kwargs):
        """Called if no explicit visitor function exists for a node."""
        if isinstance(node, Token):
            return
        for field, value in node.iter_fields():
            if isinstance(value, (Node, Token)):
                yield from self.visit(value, *args, **kwargs)
