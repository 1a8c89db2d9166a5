"""Scan exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = ["DepthLimitExceededError", "HardParseError", "ScanError"]


class ScanError(Exception):
    """Base exception for all tokenless errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize ScanError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class HardParseError(ScanError):
    """Mandatory probe failure or explicit grammar error.

    Raised only through the error channel (expect() or raise_error()).
    Aborts the whole in-flight parse of the current line; caught only by
    the session recovery point.
    """

    def __init__(self, diagnostic: Diagnostic) -> None:
        super().__init__(diagnostic)
        self.diagnostic: Diagnostic = diagnostic

    @property
    def message(self) -> str:
        """Formatted message, as stored in ScanState.message."""
        return self.diagnostic.message

    @property
    def position(self) -> int | None:
        """1-based position in the scanned line."""
        return self.diagnostic.position


class DepthLimitExceededError(HardParseError):
    """Raised when grammar recursion exceeds the configured depth.

    Indicates either adversarial input (deeply nested parentheses) or a
    grammar that recurses without consuming input.
    """
