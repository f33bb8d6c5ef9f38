"""
Structural checks for parsed trees.

Parsing never fails, it just leaves holes. This walks a finished tree and
reports each hole (and any INVALID operator, which would mean a parser bug)
as a ParseWarning.

Author: xwest
"""

from typing import List, Optional

from .ast_nodes import ASTVisitor, Node, Variable, BinaryOp, NodeKind
from .errors import (
    ParseWarning, create_missing_operand_warning, create_invalid_operator_warning,
    create_empty_tree_warning
)


class TreeValidator(ASTVisitor):
    """Collects warnings for absent operands and invalid operator kinds."""

    def __init__(self):
        self.warnings: List[ParseWarning] = []

    def validate(self, node: Optional[Node]) -> List[ParseWarning]:
        self.warnings = []
        if node is None:
            self.warnings.append(create_empty_tree_warning())
        else:
            node.accept(self)
        return self.warnings

    def visit_variable(self, node: Variable) -> None:
        pass

    def visit_binary_op(self, node: BinaryOp) -> None:
        if node.kind == NodeKind.INVALID:
            self.warnings.append(create_invalid_operator_warning(node.location))

        for side, child in (("left", node.left), ("right", node.right)):
            if child is None:
                self.warnings.append(
                    create_missing_operand_warning(node.operator, side, node.location)
                )
            else:
                child.accept(self)


def validate_tree(node: Optional[Node]) -> List[ParseWarning]:
    """Return the defects found in `node`; an empty list means a well-formed tree."""
    return TreeValidator().validate(node)
