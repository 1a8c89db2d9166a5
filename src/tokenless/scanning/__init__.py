"""Scanning engine: terminals, scan state, matchers, probes and sessions.

Module Organization:
- terminals.py: TerminalRegistry and TerminalDescriptor
- state.py: ScanState (per-session cursor and error context) and Slot
- matchers.py: literal-text, literal-character and terminal matchers
- probe.py: accept(), expect(), accept_all() and the probe variants
- channel.py: hard-error channel (raise_error, set_cleanup)
- session.py: ScanSession recovery point
"""

from .channel import raise_error, set_cleanup
from .matchers import fail, success
from .probe import Char, Literal, Probe, accept, accept_all, expect
from .session import ScanSession, SessionResult
from .state import ScanState, Slot
from .terminals import ScanFn, TerminalDescriptor, TerminalRegistry

__all__ = [
    "Char",
    "Literal",
    "Probe",
    "ScanFn",
    "ScanSession",
    "ScanState",
    "SessionResult",
    "Slot",
    "TerminalDescriptor",
    "TerminalRegistry",
    "accept",
    "accept_all",
    "expect",
    "fail",
    "raise_error",
    "set_cleanup",
    "success",
]
