"""
Token definitions for the exprparse lexer.

The grammar is tiny: single lowercase letters are variables and six
characters are binary operators. Everything else is skipped by the lexer.

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Any, Optional


class TokenType(Enum):
    """Enumeration of all token types in the expression grammar."""

    VARIABLE = auto()               # a .. z

    # Binary operators
    PLUS = auto()                   # +
    MINUS = auto()                  # -
    SLASH = auto()                  # /
    ASTERISK = auto()               # *
    LESS_THAN = auto()              # <
    GREATER_THAN = auto()           # >

    # Never produced by the lexer, synthesized by the cursor
    END_OF_INPUT = auto()


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source text.

    Only used for diagnostics; parsing never looks at it.
    """
    filename: str
    line: int
    column: int
    offset: int  # Character offset from start of source

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token.

    For VARIABLE tokens `value` holds the variable name, for every other
    token type it is None.
    """
    type: TokenType
    lexeme: str                     # Raw text from source
    value: Any                      # Variable name, or None
    location: SourceLocation        # Source location

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.type.name}({self.value!r})"
        return self.type.name

    def __repr__(self) -> str:
        return (f"Token({self.type.name}, {self.lexeme!r}, "
                f"{self.value!r}, {self.location!r})")

    @property
    def is_variable(self) -> bool:
        return self.type == TokenType.VARIABLE

    @property
    def is_operator(self) -> bool:
        """Check if this token is one of the binary operators."""
        return self.type in OPERATOR_TYPES


# Single-character operator lookup used by the lexer
OPERATORS = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "/": TokenType.SLASH,
    "*": TokenType.ASTERISK,
    "<": TokenType.LESS_THAN,
    ">": TokenType.GREATER_THAN,
}

OPERATOR_TYPES = frozenset(OPERATORS.values())

# Source strings may carry an explicit terminator; scanning stops there
TERMINATOR = "\0"

_EOF_LOCATION = SourceLocation("<eof>", 0, 0, 0)


def end_of_input(location: Optional[SourceLocation] = None) -> Token:
    """Build the END_OF_INPUT token handed out when a token stream runs dry."""
    return Token(TokenType.END_OF_INPUT, "", None, location or _EOF_LOCATION)
