"""Line-oriented calculator driver.

Reads one expression per line, prints " = <value>" or the error message,
and keeps reading after errors. Each line is its own session; the session
error callback is the recovery point that reports the message.

Usage:
    echo "min(3, 4) * 2" | tokenless-calc
    tokenless-calc --locale de_DE < expressions.txt
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import TextIO

from tokenless.core.babel_compat import get_babel_numbers, get_unknown_locale_error
from tokenless.diagnostics import HardParseError

from .grammar import Calculator

__all__ = ["main", "make_formatter", "run"]

logger = logging.getLogger(__name__)


def make_formatter(locale: str | None) -> Callable[[int], str]:
    """Return the result formatter for a locale (plain str() without one).

    Raises:
        BabelImportError: If a locale is given and Babel is not installed
        ValueError: If Babel does not know the locale
    """
    if locale is None:
        return str

    numbers = get_babel_numbers()
    unknown_locale_error = get_unknown_locale_error()
    try:
        numbers.format_decimal(0, locale=locale)
    except (unknown_locale_error, ValueError) as e:
        msg = f"Unknown locale '{locale}': {e}"
        raise ValueError(msg) from e

    def format_value(value: int) -> str:
        return numbers.format_decimal(value, locale=locale)

    return format_value


def run(
    lines: Iterable[str],
    out: TextIO,
    *,
    formatter: Callable[[int], str] = str,
    symbols: Mapping[str, str] | None = None,
    verbose: bool = False,
) -> int:
    """Evaluate each line, writing results and errors to out.

    Lines rejected before scanning (NUL characters, oversized input) are
    reported like hard errors and the loop carries on.

    Args:
        lines: Input lines; trailing line terminators are stripped
        out: Destination for results and error messages
        formatter: Renders each value
        symbols: Identifier values (default: the process environment)
        verbose: Print errors with their code and hint

    Returns:
        Number of lines that failed
    """

    def report(error: HardParseError) -> None:
        print(error.diagnostic.format_error() if verbose else error.message, file=out)

    calc = Calculator(symbols=symbols, on_error=report)

    failures = 0
    for line in lines:
        try:
            result = calc.evaluate(line.rstrip("\r\n"))
        except ValueError as e:
            logger.info("Line rejected: %s", e)
            print(e, file=out)
            failures += 1
            continue
        if result.ok:
            print(f" = {formatter(result.value or 0)}", file=out)
        else:
            failures += 1
    logger.debug("Evaluated input with %d failed line(s)", failures)
    return failures


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tokenless-calc",
        description="Evaluate integer expressions read from standard input, one per line.",
    )
    parser.add_argument(
        "--locale",
        help="format results for this locale (requires tokenless[babel]), e.g. de_DE",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="exit with status 1 if any line fails",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="log scanning activity to stderr and show error codes and hints",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Console entry point.

    Returns:
        0: All lines evaluated (or failures without --strict)
        1: At least one line failed and --strict was given
        2: Invalid arguments
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        formatter = make_formatter(args.locale)
    except (ImportError, ValueError) as e:
        parser.error(str(e))

    failures = run(sys.stdin, sys.stdout, formatter=formatter, verbose=args.verbose)
    return 1 if failures and args.strict else 0
