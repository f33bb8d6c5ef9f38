"""
Naive parsing: ignore precedence entirely.

Everything after an operator becomes its right operand, so every chain comes
out right-nested. `a + b * c` happens to be right, `a * b + c` is not.
"""

from typing import Optional

from .ast_nodes import Node
from .cursor import is_binary_operator
from .parser import Parser


class NaiveParser(Parser):
    """Right-nested, precedence-blind parser. The wrong baseline."""

    name = "naive"
    description = "right-nested, ignores precedence"

    def _parse_expression(self) -> Optional[Node]:
        left = self.cursor.parse_leaf()

        operator = self.cursor.next()
        if is_binary_operator(operator):
            right = self._parse_expression()
            return self._make_binary(operator, left, right)

        return left
