"""
exprparse Lexer Package

Tokenizer for the expression grammar: single lowercase letter variables and
the binary operators + - * / < >.

Key Features:
- Single pass, one character at a time, no backtracking
- Unknown characters are skipped, never an error
- Optional NUL terminator ends the scan early
- Source location tracking for diagnostics

Author: xwest
"""

from .tokens import Token, TokenType, SourceLocation, end_of_input
from .lexer import Lexer, tokenize_string
from .errors import Diagnostic, LexerWarning

__all__ = [
    "Lexer",
    "tokenize_string",
    "Token",
    "TokenType",
    "SourceLocation",
    "end_of_input",
    "Diagnostic",
    "LexerWarning",
]
