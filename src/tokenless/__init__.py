"""tokenless - tokenless scanning for hand-written recursive-descent parsers.

Grammar functions probe the input line for the next lexical element
directly, without a tokenizer pass. A probe either advances the shared
cursor and returns True, or leaves the cursor untouched and returns False.
A mandatory probe that fails raises a hard error that unwinds every grammar
frame to the single recovery point of the session.

Public API:
    TerminalRegistry - Build the table of application-defined terminals
    ScanSession - Recovery point; runs one session per line
    ScanState - Per-session cursor and error context
    accept / expect / accept_all - Probes
    Literal / Char - Literal probe variants
    Slot - Result slot filled by successful probes
    raise_error / set_cleanup - Hard-error channel
    fail / success - Primitives for terminal scanning functions

Exceptions:
    ScanError - Base exception class
    HardParseError - Hard error that reached (or is heading to) the recovery point

Submodules:
    tokenless.calculator - Demonstration integer calculator and REPL
    tokenless.diagnostics - Diagnostic codes and error templates
"""

from .diagnostics import DepthLimitExceededError, HardParseError, ScanError
from .scanning import (
    Char,
    Literal,
    ScanSession,
    ScanState,
    SessionResult,
    Slot,
    TerminalDescriptor,
    TerminalRegistry,
    accept,
    accept_all,
    expect,
    fail,
    raise_error,
    set_cleanup,
    success,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("tokenless")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "Char",
    "DepthLimitExceededError",
    "HardParseError",
    "Literal",
    "ScanError",
    "ScanSession",
    "ScanState",
    "SessionResult",
    "Slot",
    "TerminalDescriptor",
    "TerminalRegistry",
    "__version__",
    "accept",
    "accept_all",
    "expect",
    "fail",
    "raise_error",
    "set_cleanup",
    "success",
]
