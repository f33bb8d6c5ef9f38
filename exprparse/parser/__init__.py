"""
exprparse Parser Package

Four ways to turn a token stream into an expression tree, from wrong to
right, plus the printer used to compare their output.

Key Features:
- Naive right-nested parsing (ignores precedence)
- Tree rewriting with a single rotation per node
- Complete tree rewriting (rotate until precedence holds)
- Precedence climbing (Pratt parsing)
- Fully parenthesized prefix printer
- Tree validation diagnostics

Author: xwest
"""

from .ast_nodes import (
    ASTVisitor, Node, Variable, BinaryOp, NodeKind, OPERATOR_SYMBOLS
)
from .cursor import Cursor, is_binary_operator, to_operator_kind
from .precedence import Precedence, token_precedence, node_precedence
from .parser import Parser
from .naive import NaiveParser
from .rewriting import TreeRewritingParser, CompleteTreeRewritingParser, rotate_left
from .pratt import PrattParser
from .methods import PARSE_METHODS, REFERENCE_METHOD, get_parser_class, method_names, parse
from .printer import TreePrinter, print_tree
from .validator import TreeValidator, validate_tree
from .errors import ParseError, ParseWarning, UnknownMethodError, CursorError

__all__ = [
    # Entry points
    "parse", "print_tree", "validate_tree",
    "PARSE_METHODS", "REFERENCE_METHOD", "get_parser_class", "method_names",

    # Parsers
    "Parser", "NaiveParser", "TreeRewritingParser",
    "CompleteTreeRewritingParser", "PrattParser",

    # Building blocks
    "Cursor", "is_binary_operator", "to_operator_kind", "rotate_left",
    "Precedence", "token_precedence", "node_precedence",

    # AST nodes
    "ASTVisitor", "Node", "Variable", "BinaryOp", "NodeKind", "OPERATOR_SYMBOLS",
    "TreePrinter", "TreeValidator",

    # Error handling
    "ParseError", "ParseWarning", "UnknownMethodError", "CursorError",
]
