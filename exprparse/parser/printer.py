"""
Tree printer.

Renders a tree in fully parenthesized prefix form, `( OP left right )`, so
the shape of the tree is visible regardless of how the source was written:

    a * b + c   ->   ( + ( * a b ) c )

Absent subtrees print as nothing, which makes broken trees easy to spot.
"""

from typing import Optional

from .ast_nodes import ASTVisitor, Node, Variable, BinaryOp


class TreePrinter(ASTVisitor):
    """Visitor producing the S-expression text of a tree."""

    def print(self, node: Optional[Node]) -> str:
        if node is None:
            return ""
        return node.accept(self)

    def visit_variable(self, node: Variable) -> str:
        return node.name

    def visit_binary_op(self, node: BinaryOp) -> str:
        return f"( {node.operator} {self.print(node.left)} {self.print(node.right)} )"


def print_tree(node: Optional[Node]) -> str:
    """Render `node` as `( OP left right )` text; None renders as ''."""
    return TreePrinter().print(node)
