"""Demonstration integer calculator built on the tokenless probe API.

Exports:
    Calculator: Grammar and evaluator (one session per line)
    TERMINALS: Frozen registry with the ident, int and eol terminals
    main: Console entry point (tokenless-calc)
"""

from .grammar import Calculator
from .repl import main
from .terminals import EOL_TERM, IDENT, INT, TERMINALS

__all__ = ["EOL_TERM", "IDENT", "INT", "TERMINALS", "Calculator", "main"]
