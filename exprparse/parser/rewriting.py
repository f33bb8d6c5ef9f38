"""
Parsing with tree rewriting.

Both parsers here build the same right-nested tree as the naive parser and
then fix precedence with left rotations as each node is created:

    op(x, op2(y, z))   ==>   op2(op(x, y), z)

The single-step parser rotates at most once per node, which repairs one
level of inversion only. The complete parser keeps rotating down the left
spine of the right operand until nothing binds looser than the new node.

The single-step rotation table covers the arithmetic operators only, so
comparisons are never rotated there. The complete parser compares
precedence levels instead, which rotates `<` and `>` as well: `a + b < c`
becomes ( < ( + a b ) c ), the same tree precedence climbing builds.

Author: xwest
"""

from typing import Optional

from .ast_nodes import (
    Node, BinaryOp, NodeKind, ADDITIVE_KINDS, MULTIPLICATIVE_KINDS, is_operator_node
)
from .cursor import is_binary_operator
from .parser import Parser
from .precedence import Precedence, node_precedence


# Node kind -> right child kinds that trigger the single rotation
SINGLE_STEP_ROTATIONS = {
    NodeKind.MUL: MULTIPLICATIVE_KINDS | ADDITIVE_KINDS,
    NodeKind.DIV: MULTIPLICATIVE_KINDS | ADDITIVE_KINDS,
    NodeKind.ADD: ADDITIVE_KINDS,
    NodeKind.SUB: ADDITIVE_KINDS,
}


def rotate_left(node: BinaryOp) -> BinaryOp:
    """
    Pull `node.right` up above `node` and return it as the new subtree root.

    The leaves keep their left-to-right order. `node` takes over the old
    right child's left subtree.
    """
    pivot = node.right
    node.right = pivot.left
    pivot.left = node
    return pivot


class TreeRewritingParser(Parser):
    """Naive parse plus at most one rotation per node. Incomplete on purpose."""

    name = "tree-rewriting"
    description = "naive parse, one rotation per node"

    def _parse_expression(self) -> Optional[Node]:
        left = self.cursor.parse_leaf()

        operator = self.cursor.next()
        if not is_binary_operator(operator):
            return left

        right = self._parse_expression()
        result = self._make_binary(operator, left, right)

        if self._should_rotate(result):
            result = rotate_left(result)
        return result

    @staticmethod
    def _should_rotate(node: BinaryOp) -> bool:
        right = node.right
        return (is_operator_node(right) and
                right.kind in SINGLE_STEP_ROTATIONS.get(node.kind, ()))


class CompleteTreeRewritingParser(Parser):
    """Naive parse plus repeated rotation until precedence is respected."""

    name = "tree-rewriting-complete"
    description = "naive parse, rotate until precedence holds"

    def _parse_expression(self) -> Optional[Node]:
        left = self.cursor.parse_leaf()

        operator = self.cursor.next()
        if not is_binary_operator(operator):
            return left

        right = self._parse_expression()
        return self._push_down(self._make_binary(operator, left, right))

    def _push_down(self, node: BinaryOp) -> BinaryOp:
        """
        Rotate `node` down the left spine of its right operand.

        `root` is the subtree root handed back to the caller, `parent` is the
        node whose left slot currently holds `node`.
        """
        root = node
        parent: Optional[BinaryOp] = None

        while self._right_binds_looser(node):
            pivot = rotate_left(node)
            if parent is None:
                root = pivot
            else:
                parent.left = pivot
            parent = pivot

        return root

    @staticmethod
    def _right_binds_looser(node: BinaryOp) -> bool:
        """True when the right child's operator binds no tighter than `node`'s."""
        right = node.right
        if not is_operator_node(right):
            return False

        # Equal precedence rotates too: every operator is left-associative
        return Precedence.NONE < node_precedence(right.kind) <= node_precedence(node.kind)
