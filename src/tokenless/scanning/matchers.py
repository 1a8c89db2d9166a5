"""Matchers for the three terminal categories.

All matchers share one contract. Input is the current cursor. On success
the cursor advances past the matched text and the optional slot is filled.
On failure the cursor is unchanged, fail_position records where matching
stopped and fail_detail may carry a note.

fail() and success() are the primitives matchers (including registered
terminal functions) use to report their outcome.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from .state import ScanState, Slot
    from .terminals import TerminalDescriptor

__all__ = ["fail", "match_char", "match_literal", "match_terminal", "success"]

logger = logging.getLogger(__name__)

# Word boundaries compare ASCII digits only; "²" is not a digit here.
_ASCII_DIGITS: str = "0123456789"


def fail(state: ScanState, pos: int, detail: str | None = None) -> Literal[False]:
    """Record a failed match at pos. Never commits the cursor."""
    state.fail_position = pos
    if detail is not None:
        state.fail_detail = detail
    return False


def success(state: ScanState, pos: int) -> Literal[True]:
    """Commit the cursor to pos."""
    state.cursor = pos
    return True


def _joins_word(last: str, following: str) -> bool:
    """True if following would continue the word or number ending in last."""
    if last.isalpha() and following.isalpha():
        return True
    return last in _ASCII_DIGITS and following in _ASCII_DIGITS


def match_char(state: ScanState, wanted: str, slot: Slot[str] | None = None) -> bool:
    """Match a single literal character.

    A whitespace character matches exactly one whitespace character with no
    skipping, so a grammar can require "a space here" as distinct from
    "any amount of space". Anything else skips leading whitespace first.
    EOL matches at the end of the line without stepping past it.
    """
    pos = state.cursor
    logger.debug("match_char %r at %d", wanted, pos)

    if wanted.isspace() and state.char_at(pos).isspace():
        if slot is not None:
            slot.set(state.char_at(pos))
        return success(state, pos + 1)

    pos = state.skip_space(pos)
    found = state.char_at(pos)
    if found != wanted:
        return fail(state, pos)

    if slot is not None:
        slot.set(found)
    return success(state, pos if state.at_end(pos) else pos + 1)


def match_literal(state: ScanState, wanted: str, slot: Slot[int] | None = None) -> bool:
    """Match literal text with the word-boundary rule.

    The empty string always matches without consuming input, which lets a
    grammar write an optional literal. Leading whitespace is skipped unless
    the wanted text itself starts with whitespace. A match is rejected when
    the last wanted character and the next input character are both letters
    or both digits ("if" does not match "iffy", "12" does not match "123").
    The slot receives the start position of the match.
    """
    pos = state.cursor
    logger.debug("match_literal %r at %d", wanted, pos)

    if not wanted:
        state.match_start = pos
        state.match_length = 0
        if slot is not None:
            slot.set(pos)
        return success(state, pos)

    if state.at_end(pos):
        return fail(state, pos)

    if not wanted[0].isspace():
        pos = state.skip_space(pos)

    if not state.line.startswith(wanted, pos):
        return fail(state, pos)

    end = pos + len(wanted)
    if _joins_word(wanted[-1], state.char_at(end)):
        return fail(state, pos)

    state.match_start = pos
    state.match_length = len(wanted)
    if slot is not None:
        slot.set(pos)
    return success(state, end)


def match_terminal(
    state: ScanState, terminal: TerminalDescriptor, slot: Slot | None = None
) -> bool:
    """Match an application-defined terminal.

    Skips leading whitespace, resets the per-attempt bookkeeping and hands
    the first non-blank position to the registered scanning function. A
    function that returns True without committing is a zero-width match at
    that position. A failing function never leaves a partial commit.

    Raises:
        ValueError: If the terminal is not from the session's registry
    """
    descriptor = state.registry.get(terminal.id)
    if descriptor is not terminal:
        msg = f"Terminal {terminal.name!r} is not registered with this session's registry"
        raise ValueError(msg)

    start = state.cursor
    pos = state.skip_space(start)
    logger.debug("match_terminal %s at %d", descriptor.name, pos)

    state.match_start = pos
    state.match_length = 0
    state.fail_position = pos
    state.fail_detail = None

    if not descriptor.scan_fn(state, pos, slot):
        state.cursor = start
        return False

    if state.cursor < pos:
        state.cursor = pos
    if state.match_length == 0:
        state.match_length = state.cursor - pos
    return True
