"""Shared constants for tokenless.

Centralized configuration defaults used by the scanning core and the
demonstration calculator. Placing them here avoids circular imports and
provides a single source of truth.

Constants are grouped by domain:
- Scanning: end-of-line sentinel and input limits
- Depth limits: recursion protection for grammar functions
- Calculator: limits of the bundled arithmetic grammar

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Scanning
    "EOL",
    "MAX_LINE_SIZE",
    # Depth limits
    "MAX_DEPTH",
    # Calculator
    "CALC_INT_MAX",
    "CALC_MAX_ARGS",
    "CALC_MAX_IDENT_LEN",
]

# ============================================================================
# SCANNING
# ============================================================================

# End-of-text sentinel. ScanState.char_at() returns it at and beyond the end
# of the line, so grammars can probe for "nothing left" like any character.
EOL: str = "\0"

# Default maximum line size in characters (1 MiB).
# A session scans one materialized line; anything larger is a caller error.
MAX_LINE_SIZE: int = 1024 * 1024

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Maximum nesting depth for grammar recursion guarded by ScanState.nested().
# Clamped against sys.getrecursionlimit() at guard construction.
MAX_DEPTH: int = 100

# ============================================================================
# CALCULATOR
# ============================================================================

# Largest integer literal the calculator accepts (32-bit signed int).
CALC_INT_MAX: int = 2**31 - 1

# Maximum number of arguments in a builtin function call.
CALC_MAX_ARGS: int = 10

# Identifiers longer than this are truncated before lookup.
CALC_MAX_IDENT_LEN: int = 20
