"""Diagnostic system for scan errors.

Provides structured error diagnostics with codes, positions, and hints.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import DepthLimitExceededError, HardParseError, ScanError
from .templates import ErrorTemplate

__all__ = [
    "DepthLimitExceededError",
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "HardParseError",
    "ScanError",
]
