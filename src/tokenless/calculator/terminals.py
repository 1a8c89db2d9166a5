"""Terminals of the calculator grammar: identifiers, integers, end of line."""

from __future__ import annotations

from tokenless.constants import CALC_INT_MAX
from tokenless.diagnostics import ErrorTemplate
from tokenless.scanning import ScanState, Slot, TerminalRegistry, fail, raise_error, success

__all__ = ["EOL_TERM", "IDENT", "INT", "TERMINALS"]

# ASCII digits only; int() would accept Unicode digits that isdigit() reports.
_ASCII_DIGITS: str = "0123456789"


def scan_ident(state: ScanState, pos: int, slot: Slot[str] | None) -> bool:
    """identifier: a letter or "_", then letters, digits or "_".

    Letters and digits are Unicode (str.isalpha, str.isalnum), so "été"
    is an identifier.
    """
    line = state.line
    first = state.char_at(pos)
    if not (first.isalpha() or first == "_"):
        return fail(state, pos)

    end = pos + 1
    while end < len(line) and (line[end].isalnum() or line[end] == "_"):
        end += 1

    if slot is not None:
        slot.set(line[pos:end])
    return success(state, end)


def scan_int(state: ScanState, pos: int, slot: Slot[int] | None) -> bool:
    """Unsigned decimal integer; signs are scanned by the grammar.

    Values above CALC_INT_MAX are a hard error rather than a soft failure:
    the input is clearly a number, just not one the calculator can hold.
    """
    line = state.line
    end = pos
    value = 0
    while end < len(line) and line[end] in _ASCII_DIGITS:
        value = value * 10 + int(line[end])
        if value > CALC_INT_MAX:
            raise_error(state, ErrorTemplate.integer_overflow())
        end += 1

    if end == pos:
        return fail(state, pos)

    if slot is not None:
        slot.set(value)
    return success(state, end)


def scan_eol(state: ScanState, pos: int, slot: Slot[None] | None) -> bool:
    """Zero-width test for the end of the line."""
    return state.at_end(pos)


TERMINALS = TerminalRegistry()
IDENT = TERMINALS.register("ident", scan_ident, label="identifier")
INT = TERMINALS.register("int", scan_int, label="integer")
EOL_TERM = TERMINALS.register("eol", scan_eol, label="end of line")
TERMINALS.freeze()
