"""Hard-error channel.

A hard error abandons the whole in-flight parse of the current line. It
formats ScanState.message, runs the cleanup hook once, and raises
HardParseError, which unwinds every grammar frame up to the session
recovery point (ScanSession.run).

Grammar code raises through this module for semantic problems the probes
cannot see (overflow, unknown symbols):

    raise_error(state, "unknown function %s", name)
    raise_error(state, ErrorTemplate.integer_overflow())
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import replace
from typing import TYPE_CHECKING, NoReturn

from tokenless.diagnostics import Diagnostic, DiagnosticCode, HardParseError

if TYPE_CHECKING:
    from .state import ScanState

__all__ = ["raise_error", "set_cleanup"]

logger = logging.getLogger(__name__)


def set_cleanup(state: ScanState, hook: Callable[[], object] | None) -> None:
    """Install (or clear with None) the one-shot cleanup hook."""
    state.cleanup_hook = hook


def raise_error(
    state: ScanState,
    message: str | Diagnostic,
    *args: object,
    code: DiagnosticCode = DiagnosticCode.GRAMMAR_ERROR,
    error_type: type[HardParseError] = HardParseError,
) -> NoReturn:
    """Raise a hard error for the current session.

    Args:
        state: Session state; its message is set before raising
        message: printf-style format string, or a prepared Diagnostic
        *args: Values for the % format; a string without args is used as is
        code: Diagnostic code when message is a string
        error_type: HardParseError subclass to raise

    Raises:
        HardParseError: Always
    """
    if isinstance(message, Diagnostic):
        diagnostic = message
        if diagnostic.position is None:
            diagnostic = replace(diagnostic, position=state.error_position)
    else:
        text = message % args if args else message
        diagnostic = Diagnostic(code=code, message=text, position=state.error_position)

    state.message = diagnostic.message

    hook = state.cleanup_hook
    if hook is not None:
        state.cleanup_hook = None
        hook()

    logger.debug("Hard error [%s]: %s", diagnostic.code.name, diagnostic.message)
    raise error_type(diagnostic)
