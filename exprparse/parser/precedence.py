"""
Operator precedence for exprparse.

Comparisons bind looser than + and -, which bind looser than * and /.
All operators are left-associative.

Author: xwest
"""

from enum import IntEnum
from typing import Dict

from ..lexer.tokens import TokenType
from .ast_nodes import NodeKind


class Precedence(IntEnum):
    """Operator precedence levels."""
    NONE = 0            # variables, end of input
    COMPARISON = 1      # <, >
    TERM = 2            # +, -
    FACTOR = 3          # *, /


# Below every entry in the table, so the first operator always gets consumed
LOWEST = -1

TOKEN_PRECEDENCES: Dict[TokenType, Precedence] = {
    TokenType.VARIABLE: Precedence.NONE,
    TokenType.END_OF_INPUT: Precedence.NONE,

    TokenType.LESS_THAN: Precedence.COMPARISON,
    TokenType.GREATER_THAN: Precedence.COMPARISON,

    TokenType.PLUS: Precedence.TERM,
    TokenType.MINUS: Precedence.TERM,

    TokenType.ASTERISK: Precedence.FACTOR,
    TokenType.SLASH: Precedence.FACTOR,
}

NODE_PRECEDENCES: Dict[NodeKind, Precedence] = {
    NodeKind.COMPARE_LESS_THAN: Precedence.COMPARISON,
    NodeKind.COMPARE_GREATER_THAN: Precedence.COMPARISON,
    NodeKind.ADD: Precedence.TERM,
    NodeKind.SUB: Precedence.TERM,
    NodeKind.MUL: Precedence.FACTOR,
    NodeKind.DIV: Precedence.FACTOR,
}


def token_precedence(token_type: TokenType) -> Precedence:
    """Get precedence for a token type."""
    return TOKEN_PRECEDENCES.get(token_type, Precedence.NONE)


def node_precedence(kind: NodeKind) -> Precedence:
    """Get precedence for an operator node kind; leaves and INVALID have none."""
    return NODE_PRECEDENCES.get(kind, Precedence.NONE)
