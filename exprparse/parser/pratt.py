"""
Operator precedence (Pratt) parsing.

Precedence climbing threads a minimum precedence through the recursion:
an operator only extends the current expression if it binds tighter than
the operator that started it. The tree comes out right in one pass, no
rewriting needed, which makes this the reference the other methods are
checked against.

Author: xwest
"""

from typing import Optional

from .ast_nodes import Node
from .cursor import is_binary_operator
from .parser import Parser
from .precedence import LOWEST, token_precedence


class PrattParser(Parser):
    """Precedence-climbing parser."""

    name = "pratt"
    description = "precedence climbing, correct in one pass"

    def _parse_expression(self, min_precedence: int = LOWEST) -> Optional[Node]:
        """Parse expression with given minimum precedence."""
        left = self.cursor.parse_leaf()

        while True:
            node = self._parse_increasing_precedence(left, min_precedence)
            if node is left:
                break
            left = node

        return left

    def _parse_increasing_precedence(self, left: Optional[Node],
                                     min_precedence: int) -> Optional[Node]:
        """
        Try to extend `left` with the next operator.

        Returns `left` itself when the next token does not bind tighter than
        `min_precedence`; the token is pushed back for an outer level.
        """
        operator = self.cursor.next()
        precedence = token_precedence(operator.type)
        if precedence <= min_precedence:
            self.cursor.push_back()
            return left

        if not is_binary_operator(operator):
            return left

        right = self._parse_expression(precedence)
        return self._make_binary(operator, left, right)
