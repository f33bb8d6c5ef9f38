"""
Error handling for the exprparse parsers.

Parsing itself never raises: malformed input becomes an absent subtree.
Exceptions here are for misuse of the API (an unknown parse method, a push
back with nothing to undo). Warnings describe defects found in a finished
tree.

Author: xwest
"""

from typing import Optional, List, Iterable

from ..lexer.tokens import SourceLocation
from ..lexer.errors import Diagnostic, ErrorRecovery


class ParseError(Exception):
    """
    Exception raised when the parsing API is used incorrectly.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    def __str__(self) -> str:
        return str(self.diagnostic)


class UnknownMethodError(ParseError):
    """Raised when a parse method name is not registered."""

    def __init__(self, method: str, known_methods: Iterable[str]):
        known = list(known_methods)
        super().__init__(
            message=f"Unknown parse method: {method!r}",
            code="P010",
            help_text=f"Valid methods are: {', '.join(known)}",
            suggestions=ErrorRecovery.suggest_closest(method, known),
        )
        self.method = method


class CursorError(ParseError):
    """Raised when the cursor's single push back discipline is broken."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            code="P011",
            help_text="push_back() may only undo the most recent next() call, once.",
        )


class ParseWarning:
    """
    Represents a defect in a parsed tree that doesn't stop parsing.
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="warning",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    @property
    def location(self) -> Optional[SourceLocation]:
        return self.diagnostic.location

    def __str__(self) -> str:
        return str(self.diagnostic)


WARNING_CODES = {
    "P001": "Missing operand",
    "P002": "Invalid operator in tree",
    "P003": "Empty tree",
}


def create_missing_operand_warning(operator: str, side: str,
                                   location: Optional[SourceLocation]) -> ParseWarning:
    """Create a warning for an operator with an absent child."""
    return ParseWarning(
        message=f"Missing {side} operand for '{operator}'",
        location=location,
        code="P001",
        help_text="Every operator needs a variable on both sides.",
    )


def create_invalid_operator_warning(location: Optional[SourceLocation]) -> ParseWarning:
    """Create a warning for an INVALID node inside a tree."""
    return ParseWarning(
        message="Invalid operator kind inside a parsed tree",
        location=location,
        code="P002",
        help_text="This indicates a parser bug, not bad input.",
    )


def create_empty_tree_warning() -> ParseWarning:
    """Create a warning for input that produced no tree at all."""
    return ParseWarning(
        message="Expression produced no tree",
        code="P003",
        help_text="The expression must start with a variable.",
    )
