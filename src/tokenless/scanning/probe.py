"""Probe API: the operations grammar functions call.

A probe asks whether a terminal is next in the input:

    accept(state, probe)   optional; returns a bool, never raises
    expect(state, probe)   mandatory; returns True or raises a hard error
    accept_all(state, *probes)   all-or-nothing sequence

Probe variants form a closed set:

    Literal("if")      literal text (a bare str means the same)
    Char("(")          exactly one literal character
    TerminalDescriptor from a TerminalRegistry

Example:
    >>> if accept(state, Char("(")):  # doctest: +SKIP
    ...     value = term(state)
    ...     expect(state, Char(")"))
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from tokenless.diagnostics import Diagnostic, ErrorTemplate

from .channel import raise_error
from .matchers import fail, match_char, match_literal, match_terminal, success
from .terminals import TerminalDescriptor

if TYPE_CHECKING:
    from .state import ScanState, Slot

__all__ = [
    "Char",
    "Literal",
    "Probe",
    "accept",
    "accept_all",
    "expect",
    "fail",
    "success",
]


@dataclass(frozen=True, slots=True)
class Literal:
    """Literal text probe."""

    text: str


@dataclass(frozen=True, slots=True)
class Char:
    """Single literal character probe.

    Raises:
        ValueError: If char is not exactly one character
    """

    char: str

    def __post_init__(self) -> None:
        if len(self.char) != 1:
            msg = f"Char probe needs exactly one character, got {self.char!r}"
            raise ValueError(msg)


type Probe = str | Literal | Char | TerminalDescriptor


def accept(state: ScanState, probe: Probe, slot: Slot | None = None) -> bool:
    """Optional probe: try to match probe at the cursor.

    Args:
        state: Session state
        probe: What to look for
        slot: Receives the converted value on success

    Returns:
        True and the cursor advanced, or False and the cursor unchanged

    Raises:
        TypeError: If probe is not one of the probe variants
    """
    state.reset_attempt()
    match probe:
        case str():
            return match_literal(state, probe, slot)
        case Literal(text=text):
            return match_literal(state, text, slot)
        case Char(char=char):
            return match_char(state, char, slot)
        case TerminalDescriptor():
            return match_terminal(state, probe, slot)
        case _:
            msg = f"Unsupported probe type: {type(probe).__name__}"
            raise TypeError(msg)


def accept_all(state: ScanState, *probes: Probe) -> bool:
    """Match every probe in order, or none of them.

    On the first failure the cursor is restored to where it was before the
    whole sequence. No slots are filled.
    """
    start = state.cursor
    for probe in probes:
        if not accept(state, probe):
            state.cursor = start
            return False
    return True


def expect(
    state: ScanState,
    probe: Probe,
    slot: Slot | None = None,
    message: str | None = None,
) -> bool:
    """Mandatory probe: like accept(), but failure is a hard error.

    Args:
        state: Session state
        probe: What must come next
        slot: Receives the converted value on success
        message: Replaces the "expected ..." part of the diagnostic; any
            detail the matcher left is appended in parentheses

    Returns:
        True (failure never returns)

    Raises:
        HardParseError: If the probe does not match
    """
    if accept(state, probe, slot):
        return True
    raise_error(state, _expected(state, probe, message))


def _expected(state: ScanState, probe: Probe, message: str | None) -> Diagnostic:
    return _expected_diagnostic(probe, state.error_position, message, state.fail_detail)


def _expected_diagnostic(
    probe: Probe, position: int, message: str | None, detail: str | None
) -> Diagnostic:
    match probe:
        case str():
            return ErrorTemplate.expected_literal(probe, position, message, detail)
        case Literal(text=text):
            return ErrorTemplate.expected_literal(text, position, message, detail)
        case Char(char=char):
            return ErrorTemplate.expected_char(char, position, message, detail)
        case TerminalDescriptor(label=label):
            return ErrorTemplate.expected_terminal(label, position, message, detail)
        case _:
            msg = f"Unsupported probe type: {type(probe).__name__}"
            raise TypeError(msg)
