"""
Abstract Syntax Tree node definitions for exprparse.

A tree is built from two node shapes: Variable leaves and BinaryOp interior
nodes. Children are owned by exactly one parent; the rewriting parsers move
them around by plain attribute assignment before handing the tree out.

Author: xwest
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Any
from enum import Enum, auto

from ..lexer.tokens import SourceLocation


class NodeKind(Enum):
    """Enumeration of all AST node kinds."""

    VARIABLE = auto()

    # Binary operations
    ADD = auto()
    SUB = auto()
    MUL = auto()
    DIV = auto()
    COMPARE_LESS_THAN = auto()
    COMPARE_GREATER_THAN = auto()

    # Returned by to_operator_kind() for non-operator tokens, never in a tree
    INVALID = auto()


OPERATOR_SYMBOLS = {
    NodeKind.ADD: "+",
    NodeKind.SUB: "-",
    NodeKind.MUL: "*",
    NodeKind.DIV: "/",
    NodeKind.COMPARE_LESS_THAN: "<",
    NodeKind.COMPARE_GREATER_THAN: ">",
    NodeKind.INVALID: "?",
}

ADDITIVE_KINDS = frozenset({NodeKind.ADD, NodeKind.SUB})
MULTIPLICATIVE_KINDS = frozenset({NodeKind.MUL, NodeKind.DIV})


class ASTVisitor(ABC):
    """Abstract visitor interface for traversing AST nodes."""

    @abstractmethod
    def visit_variable(self, node: 'Variable') -> Any:
        pass

    @abstractmethod
    def visit_binary_op(self, node: 'BinaryOp') -> Any:
        pass


class Node(ABC):
    """Base class for all AST nodes."""

    def __init__(self, kind: NodeKind, location: Optional[SourceLocation] = None):
        self.kind = kind
        self.location = location

    @abstractmethod
    def accept(self, visitor: ASTVisitor) -> Any:
        """Accept a visitor (visitor pattern)."""
        pass

    @abstractmethod
    def children(self) -> List[Optional['Node']]:
        """Get all child slots, absent ones included."""
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.kind.name})"


class Variable(Node):
    """Leaf node: a single-letter variable."""
    name: str

    def __init__(self, name: str, location: Optional[SourceLocation] = None):
        super().__init__(NodeKind.VARIABLE, location)
        self.name = name

    def accept(self, visitor: ASTVisitor) -> Any:
        return visitor.visit_variable(self)

    def children(self) -> List[Optional[Node]]:
        return []

    def __repr__(self) -> str:
        return f"Variable({self.name!r})"


class BinaryOp(Node):
    """
    Interior node: a binary operation.

    `left` and `right` are None only when the input was malformed.
    """
    left: Optional[Node]
    right: Optional[Node]

    def __init__(self, kind: NodeKind, left: Optional[Node], right: Optional[Node],
                 location: Optional[SourceLocation] = None):
        super().__init__(kind, location)
        self.left = left
        self.right = right

    @property
    def operator(self) -> str:
        return OPERATOR_SYMBOLS.get(self.kind, "?")

    def accept(self, visitor: ASTVisitor) -> Any:
        return visitor.visit_binary_op(self)

    def children(self) -> List[Optional[Node]]:
        return [self.left, self.right]

    def __repr__(self) -> str:
        return f"BinaryOp({self.kind.name}, {self.left!r}, {self.right!r})"


def is_operator_node(node: Optional[Node]) -> bool:
    """True for a present, non-leaf node."""
    return isinstance(node, BinaryOp)
