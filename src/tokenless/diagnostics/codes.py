"""Diagnostic codes and data structures.

Defines error codes and the structured diagnostic carried by hard errors.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        3100-3199: Scan errors (probe failures raised by expect, grammar errors)
        3200-3299: Calculator errors (demonstration grammar)
    """

    # Scan errors (3100-3199)
    EXPECTED_LITERAL = 3101
    EXPECTED_CHAR = 3102
    EXPECTED_TERMINAL = 3103
    GRAMMAR_ERROR = 3104  # Raised directly by grammar code via raise_error()
    NESTING_DEPTH_EXCEEDED = 3105

    # Calculator errors (3200-3299)
    INTEGER_OVERFLOW = 3201
    SYNTAX_ERROR = 3202
    UNKNOWN_FUNCTION = 3203
    UNCLOSED_CALL = 3204
    TOO_MANY_ARGS = 3205
    SYMBOL_NOT_FOUND = 3206
    SYMBOL_NOT_INTEGER = 3207
    DIVISION_BY_ZERO = 3208
    FUNCTION_FAILED = 3209


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description (what the recovery point prints)
        position: 1-based character position in the scanned line, if known
        hint: Suggestion for fixing the error
    """

    code: DiagnosticCode
    message: str
    position: int | None = None
    hint: str | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic with its code and hint.

        Example output:
            error[EXPECTED_CHAR]: expected ')' at position 7
              = help: Close the parenthesis

        Returns:
            Formatted error message
        """
        lines = [f"error[{self.code.name}]: {self.message}"]
        if self.hint:
            lines.append(f"  = help: {self.hint}")
        return "\n".join(lines)
