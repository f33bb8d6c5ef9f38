"""
exprparse Lexer - turns expression text into tokens

One character at a time, left to right, no lookahead. Lowercase letters are
variables, + - * / < > are operators, everything else is dropped on the
floor (whitespace quietly, anything else with a warning).

xwest
"""

from typing import List

from .tokens import Token, TokenType, SourceLocation, OPERATORS, TERMINATOR
from .errors import LexerWarning, create_skipped_character_warning


class Lexer:
    """
    Expression lexical analyzer.

    Converts source text into a list of tokens. The list never contains an
    END_OF_INPUT token; the parser cursor synthesizes one when it runs out.
    """

    def __init__(self, source: str, filename: str = "<unknown>"):
        """
        Initialize the lexer with source text.

        Args:
            source: Expression source string
            filename: Name used in diagnostics
        """
        self.source = source
        self.filename = filename
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens: List[Token] = []
        self.warnings: List[LexerWarning] = []

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source.

        Returns:
            List of tokens, without a trailing END_OF_INPUT
        """
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens = []
        self.warnings.clear()

        while self.pos < len(self.source):
            current_char = self.source[self.pos]
            if current_char == TERMINATOR:
                break

            location = SourceLocation(self.filename, self.line, self.column, self.pos)
            token = self._scan_char(current_char, location)
            if token is not None:
                self.tokens.append(token)
            elif not current_char.isspace():
                self.warnings.append(create_skipped_character_warning(current_char, location))

            self._advance()

        return self.tokens

    def _scan_char(self, char: str, location: SourceLocation):
        """Map a single character to a token, or None if it is skipped."""
        if char in OPERATORS:
            return Token(OPERATORS[char], char, None, location)

        if "a" <= char <= "z":
            return Token(TokenType.VARIABLE, char, char, location)

        return None

    def _advance(self):
        """Advance position by one character, updating line/column."""
        if self.pos < len(self.source):
            if self.source[self.pos] == '\n':
                self.line += 1
                self.column = 1
            else:
                self.column += 1
            self.pos += 1

    def has_warnings(self) -> bool:
        """Check if lexer skipped anything worth mentioning."""
        return len(self.warnings) > 0


def tokenize_string(source: str, filename: str = "<string>") -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Never raises: characters outside the grammar are skipped.
    """
    lexer = Lexer(source, filename)
    return lexer.tokenize()
