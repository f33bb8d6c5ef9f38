"""
Common base for the exprparse parsers.

Every parsing method is a Parser subclass that implements
`_parse_expression()` on top of a Cursor. Each call to `parse()` starts a
fresh cursor over the same tokens and builds a brand new tree.

Author: xwest
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..lexer.tokens import Token
from .ast_nodes import Node, BinaryOp
from .cursor import Cursor, to_operator_kind


class Parser(ABC):
    """
    Base class for the four parsing methods.

    Subclasses set `name` (the method name used on the command line) and
    implement `_parse_expression()`.
    """

    name: str = ""
    description: str = ""

    def __init__(self, tokens: List[Token]):
        """
        Initialize parser with a list of tokens.

        Args:
            tokens: List of tokens from the lexer (no END_OF_INPUT needed)
        """
        self.tokens = tokens
        self.cursor = Cursor(tokens)

    def parse(self) -> Optional[Node]:
        """
        Parse the token list into a tree.

        Returns:
            Root node, or None when the input does not start with a variable.
            Subtrees may be None on malformed input; nothing is raised.
        """
        self.cursor = Cursor(self.tokens)
        return self._parse_expression()

    @abstractmethod
    def _parse_expression(self) -> Optional[Node]:
        pass

    def _make_binary(self, operator: Token, left: Optional[Node],
                     right: Optional[Node]) -> BinaryOp:
        """Build an interior node for an operator token."""
        return BinaryOp(to_operator_kind(operator), left, right, operator.location)
