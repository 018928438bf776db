from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Iterator, Tuple

from calculator.token import Token


@dataclass
class Node:
    def __str__(self) -> str:
        from calculator.tree.printer import Printer

        printer = Printer()
        return printer.print(self)

    def __contains__(self, element: Node) -> bool:
        if self == element:
            return True
        return any(
            isinstance(child, Node) and element in child
            for field_name, child in self.iter_fields()
        )

    def iter_fields(self) -> Iterator[Tuple[str, Node | Token | float]]:
        for _field in fields(self):
            yield _field.name, getattr(self, _field.name)


@dataclass
class NumberNode(Node):
    value: float


@dataclass
class Op2Node(Node):
    left: Node
    operator: Token
    right: Node


@dataclass
class FunCallNode(Node):
    func: Token
    arg: Node


@dataclass
class PrintNode(Node):
    arg: Node


@dataclass
class VariableNode(Node):
    id: Token


@dataclass
class AssignNode(Node):
    id: Token
    exp: Node
