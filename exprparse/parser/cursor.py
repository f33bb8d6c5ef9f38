"""
Parser cursor shared by every parsing method.

A cursor is a token list plus a read offset. It supports reading the next
token and undoing that read, with one token of push back at most.

Author: xwest
"""

from typing import List, Optional

from ..lexer.tokens import Token, TokenType, end_of_input
from .ast_nodes import NodeKind, Variable
from .errors import CursorError


TOKEN_TO_NODE_KIND = {
    TokenType.PLUS: NodeKind.ADD,
    TokenType.MINUS: NodeKind.SUB,
    TokenType.ASTERISK: NodeKind.MUL,
    TokenType.SLASH: NodeKind.DIV,
    TokenType.LESS_THAN: NodeKind.COMPARE_LESS_THAN,
    TokenType.GREATER_THAN: NodeKind.COMPARE_GREATER_THAN,
}


def is_binary_operator(token: Token) -> bool:
    """Check if a token is one of the six binary operators."""
    return token.type in TOKEN_TO_NODE_KIND


def to_operator_kind(token: Token) -> NodeKind:
    """Map an operator token to its node kind, anything else to INVALID."""
    return TOKEN_TO_NODE_KIND.get(token.type, NodeKind.INVALID)


class Cursor:
    """
    Read position over a token list.

    Invariant: 0 <= offset <= len(tokens). Reading past the end yields
    END_OF_INPUT without moving.
    """

    def __init__(self, tokens: List[Token]):
        self.tokens = tokens
        self.offset = 0
        # How far the last next() moved (0 or 1), None once undone
        self._last_step: Optional[int] = None

    def next(self) -> Token:
        """Consume and return the current token."""
        if self.offset == len(self.tokens):
            self._last_step = 0
            return end_of_input()

        token = self.tokens[self.offset]
        self.offset += 1
        self._last_step = 1
        return token

    def push_back(self):
        """Undo the most recent next(). Only one token can be pushed back."""
        if self._last_step is None:
            raise CursorError("push_back() without a preceding next()")

        self.offset -= self._last_step
        self._last_step = None

    def parse_leaf(self) -> Optional[Variable]:
        """
        Consume one token and turn it into a Variable leaf.

        A non-variable token is consumed anyway and None is returned.
        """
        token = self.next()
        if token.type != TokenType.VARIABLE:
            return None

        return Variable(token.value, token.location)
