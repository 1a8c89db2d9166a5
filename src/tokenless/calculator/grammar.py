"""Arithmetic expression grammar built on the probe API.

Grammar:
    expr:      term eol
    term:      factor { ("+" | "-") factor }
    factor:    primary { ("*" | "/" | "÷") primary }
    primary:   identifier "(" [ term { "," term } ] ")"
             | identifier
             | "(" term ")"
             | "-" primary | "+" primary
             | integer

Operators of equal precedence evaluate left to right; "*" and "/" bind
tighter than "+" and "-". Division truncates toward zero.
"""

from __future__ import annotations

import os
import random
from collections.abc import Callable, Mapping

from tokenless.constants import CALC_MAX_ARGS, CALC_MAX_IDENT_LEN
from tokenless.diagnostics import ErrorTemplate, HardParseError
from tokenless.scanning import (
    Char,
    Literal,
    ScanSession,
    ScanState,
    SessionResult,
    Slot,
    accept,
    expect,
    raise_error,
)

from .builtins import Builtin, default_builtins
from .terminals import EOL_TERM, IDENT, INT, TERMINALS

__all__ = ["Calculator"]

LPAREN = Char("(")
RPAREN = Char(")")
MINUS = Char("-")
PLUS = Char("+")
COMMA = Char(",")
MUL = Char("*")
DIV = Char("/")
DIV_SIGN = Literal("÷")
END = Char("\0")


class Calculator:
    """Integer calculator over one line of input per session.

    Attributes:
        symbols: Identifier values (default: the process environment)
        builtins: Callable functions by name

    Example:
        >>> calc = Calculator()
        >>> calc.evaluate("3 + 4 * 2").value
        11
        >>> calc.evaluate("min(").message
        'unclosed paren on function call min'
    """

    def __init__(
        self,
        *,
        symbols: Mapping[str, str] | None = None,
        builtins: Mapping[str, Builtin] | None = None,
        rng: random.Random | None = None,
        on_error: Callable[[HardParseError], object] | None = None,
        max_depth: int | None = None,
    ) -> None:
        self.symbols: Mapping[str, str] = symbols if symbols is not None else os.environ
        self.builtins: Mapping[str, Builtin] = (
            builtins if builtins is not None else default_builtins(rng)
        )
        self.session = ScanSession(TERMINALS, on_error, max_depth=max_depth)

    def evaluate(self, line: str) -> SessionResult[int]:
        """Evaluate one line in a fresh session."""
        return self.session.run(line, self.expr)

    # ------------------------------------------------------------------
    # Grammar
    # ------------------------------------------------------------------

    def expr(self, state: ScanState) -> int:
        n = self.term(state)
        expect(state, EOL_TERM)
        return n

    def term(self, state: ScanState) -> int:
        n = self.factor(state)
        while True:
            if accept(state, PLUS):
                n += self.factor(state)
            elif accept(state, MINUS):
                n -= self.factor(state)
            else:
                return n

    def factor(self, state: ScanState) -> int:
        n = self.primary(state)
        while True:
            if accept(state, MUL):
                n *= self.primary(state)
            elif accept(state, DIV) or accept(state, DIV_SIGN):
                n = _divide(state, n, self.primary(state))
            else:
                return n

    def primary(self, state: ScanState) -> int:  # noqa: PLR0911
        name: Slot[str] = Slot()
        if accept(state, IDENT, name):
            ident = (name.value or "")[:CALC_MAX_IDENT_LEN]
            if accept(state, LPAREN):
                return self._call(state, ident)
            return self._lookup(state, ident)

        if accept(state, LPAREN):
            with state.nested():
                n = self.term(state)
            expect(state, RPAREN)
            return n

        if accept(state, MINUS):
            with state.nested():
                return -self.primary(state)

        if accept(state, PLUS):
            with state.nested():
                return self.primary(state)

        number: Slot[int] = Slot()
        if accept(state, INT, number):
            return number.value or 0

        raise_error(state, ErrorTemplate.syntax_error(state.error_position))

    # ------------------------------------------------------------------
    # Calls and symbols
    # ------------------------------------------------------------------

    def _call(self, state: ScanState, name: str) -> int:
        """Parse the argument list after "name(" and call the builtin."""
        args: list[int] = []
        while not accept(state, RPAREN):
            if accept(state, END):
                raise_error(state, ErrorTemplate.unclosed_call(name))
            if len(args) >= CALC_MAX_ARGS:
                raise_error(state, ErrorTemplate.too_many_args(name))
            with state.nested():
                args.append(self.term(state))
            if accept(state, COMMA):
                continue
            if accept(state, END):
                raise_error(state, ErrorTemplate.unclosed_call(name))
            expect(state, RPAREN, message=f"expected ',' or ')' in call to {name}")
            break

        fn = self.builtins.get(name)
        if fn is None:
            raise_error(state, ErrorTemplate.unknown_function(name))
        try:
            return fn(args)
        except ValueError as e:
            raise_error(state, ErrorTemplate.function_failed(name, str(e)))

    def _lookup(self, state: ScanState, name: str) -> int:
        """Resolve a plain identifier through the symbol table."""
        value = self.symbols.get(name)
        if value is None:
            raise_error(state, ErrorTemplate.symbol_not_found(name))
        try:
            return int(value.strip())
        except ValueError:
            raise_error(state, ErrorTemplate.symbol_not_integer(name))


def _divide(state: ScanState, dividend: int, divisor: int) -> int:
    """Integer division truncating toward zero."""
    if divisor == 0:
        raise_error(state, ErrorTemplate.division_by_zero())
    quotient = abs(dividend) // abs(divisor)
    return quotient if (dividend < 0) == (divisor < 0) else -quotient
