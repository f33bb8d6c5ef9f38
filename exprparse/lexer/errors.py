"""
Diagnostics for the exprparse lexer.

The lexer never fails: characters outside the grammar are skipped. Skipped
characters that are not plain whitespace are reported as warnings so the
command-line harness can point at them.

Author: xwest
"""

from typing import Optional, List, Iterable
from dataclasses import dataclass
from .tokens import SourceLocation


@dataclass
class Diagnostic:
    """Base class for diagnostics (errors, warnings, info)."""
    message: str
    location: Optional[SourceLocation]
    severity: str  # "error", "warning", "info", "hint"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        if self.code:
            severity_prefix += f"[{self.code}]"
        result = f"{severity_prefix}: {self.message}\n"
        if self.location is not None:
            result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class LexerWarning:
    """
    Represents a lexer warning that doesn't stop tokenization.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
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


class ErrorRecovery:
    """Helpers for turning a bad input into useful suggestions."""

    @staticmethod
    def suggest_closest(word: str, candidates: Iterable[str], max_distance: int = 3) -> List[str]:
        """Return the candidates within `max_distance` edits of `word`, closest first."""
        scored = []
        for candidate in candidates:
            distance = ErrorRecovery._edit_distance(word.lower(), candidate)
            if distance <= max_distance:
                scored.append((distance, candidate))

        return [candidate for _, candidate in sorted(scored)]

    @staticmethod
    def suggest_letter(char: str) -> List[str]:
        """Variables are lowercase only; offer the lowercase spelling if there is one."""
        lowered = char.lower()
        if lowered != char and "a" <= lowered <= "z":
            return [lowered]
        return []

    @staticmethod
    def _edit_distance(s1: str, s2: str) -> int:
        """Calculate Levenshtein distance between two strings."""
        if len(s1) < len(s2):
            return ErrorRecovery._edit_distance(s2, s1)

        if len(s2) == 0:
            return len(s1)

        previous_row = list(range(len(s2) + 1))
        for i, c1 in enumerate(s1):
            current_row = [i + 1]
            for j, c2 in enumerate(s2):
                insertions = previous_row[j + 1] + 1
                deletions = current_row[j] + 1
                substitutions = previous_row[j] + (c1 != c2)
                current_row.append(min(insertions, deletions, substitutions))
            previous_row = current_row

        return previous_row[-1]


WARNING_CODES = {
    "L001": "Skipped character",
}


def create_skipped_character_warning(char: str, location: SourceLocation) -> LexerWarning:
    """Create a warning for a character that is not part of the grammar."""
    suggestions = ErrorRecovery.suggest_letter(char)

    if suggestions:
        help_text = "Variables are single lowercase letters."
    elif char.isprintable():
        help_text = "Only a-z and the operators + - * / < > are recognized."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is ignored."

    return LexerWarning(
        message=f"Skipped character: {char!r}",
        location=location,
        code="L001",
        help_text=help_text,
        suggestions=suggestions
    )
