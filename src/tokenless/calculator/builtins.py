"""Built-in functions callable from calculator expressions.

Builtins take the evaluated argument list and return an int. They reject
bad arguments with ValueError; the grammar turns that into a hard error
naming the function.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Callable, Sequence

from tokenless.constants import CALC_INT_MAX

__all__ = ["Builtin", "default_builtins"]

logger = logging.getLogger(__name__)

type Builtin = Callable[[Sequence[int]], int]


def fn_min(args: Sequence[int]) -> int:
    if not args:
        msg = "needs at least one argument"
        raise ValueError(msg)
    return min(args)


def fn_max(args: Sequence[int]) -> int:
    if not args:
        msg = "needs at least one argument"
        raise ValueError(msg)
    return max(args)


def make_rand(rng: random.Random) -> Builtin:
    """Build rand() around a random source (seedable for tests)."""

    def fn_rand(args: Sequence[int]) -> int:
        if args:
            logger.warning("arguments in rand() ignored")
        return rng.randint(0, CALC_INT_MAX)

    return fn_rand


def default_builtins(rng: random.Random | None = None) -> dict[str, Builtin]:
    """Return the standard builtin table: min, max, rand."""
    return {
        "min": fn_min,
        "max": fn_max,
        "rand": make_rand(rng if rng is not None else random.Random()),
    }
