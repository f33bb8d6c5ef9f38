"""
exprparse

Four ways to parse `a + b * c < d`-style expressions into trees, side by
side: a naive right-nested parser, single-step and complete tree rewriting,
and precedence climbing (Pratt parsing).

Architecture:
    exprparse/
    ├── lexer/           # Tokenization
    ├── parser/          # Cursor, AST, the four parsers, printer
    └── cli.py           # Demo harness

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__license__ = "MIT"

from .lexer import Lexer, tokenize_string
from .parser import (
    PARSE_METHODS, Node, Variable, BinaryOp, NodeKind,
    parse, print_tree, validate_tree
)

__all__ = [
    "Lexer",
    "tokenize_string",
    "parse",
    "print_tree",
    "validate_tree",
    "PARSE_METHODS",
    "Node",
    "Variable",
    "BinaryOp",
    "NodeKind",

    # Version info
    "__version__",
    "__author__",
    "__license__",
]
