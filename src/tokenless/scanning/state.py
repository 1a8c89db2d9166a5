"""Per-session scan state.

ScanState is the context every probe reads and mutates: the line being
scanned, the committed cursor, the bookkeeping of the last successful and
last failed match, and the error-channel fields (message, cleanup hook).

One ScanState exists per session. There is no module-level state, so
independent sessions never interfere.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from tokenless.constants import EOL, MAX_DEPTH, MAX_LINE_SIZE
from tokenless.core.depth_guard import DepthGuard
from tokenless.diagnostics import DepthLimitExceededError, ErrorTemplate

from .channel import raise_error
from .terminals import TerminalRegistry

__all__ = ["ScanState", "Slot"]


@dataclass(slots=True)
class Slot[T]:
    """Result slot filled by a successful probe.

    Literal text writes its start position, a literal character writes
    the character, terminals write whatever value they convert.

    Example:
        >>> slot: Slot[int] = Slot()
        >>> accept(state, INT, slot)  # doctest: +SKIP
        True
        >>> slot.value  # doctest: +SKIP
        42
    """

    value: T | None = None
    filled: bool = False

    def set(self, value: T) -> None:
        """Store a value and mark the slot filled."""
        self.value = value
        self.filled = True


class ScanState:
    """Cursor, match bookkeeping and error context of one parse session.

    Attributes:
        cursor: Current scan offset; advances only on a committed match
        match_start: Start of the most recent successful match
        match_length: Length of the most recent successful literal match
            (terminals set it themselves if they want matched_text)
        fail_position: Where the most recent failed match stopped
        fail_detail: Optional soft diagnostic left by a failing matcher
        message: Formatted diagnostic, set just before a hard error
        cleanup_hook: Nullary callable run once before a hard error
        depth: Recursion guard used by nested()
    """

    __slots__ = (
        "_line",
        "_registry",
        "cleanup_hook",
        "cursor",
        "depth",
        "fail_detail",
        "fail_position",
        "match_length",
        "match_start",
        "message",
    )

    def __init__(
        self,
        line: str,
        registry: TerminalRegistry,
        *,
        max_line_size: int = MAX_LINE_SIZE,
        max_depth: int = MAX_DEPTH,
    ) -> None:
        """Create the state for one line.

        Args:
            line: Text to scan (already materialized, without terminator)
            registry: Frozen terminal registry
            max_line_size: Maximum line length in characters (0 disables)
            max_depth: Maximum nesting depth for nested()

        Raises:
            ValueError: If the line contains the EOL sentinel or is too long
        """
        if EOL in line:
            msg = "Line contains the end-of-line sentinel character (NUL)"
            raise ValueError(msg)
        if max_line_size > 0 and len(line) > max_line_size:
            msg = (
                f"Line size ({len(line):,} characters) exceeds maximum "
                f"({max_line_size:,} characters)"
            )
            raise ValueError(msg)

        self._line = line
        self._registry = registry
        self.cursor = 0
        self.match_start = 0
        self.match_length = 0
        self.fail_position: int | None = None
        self.fail_detail: str | None = None
        self.message = ""
        self.cleanup_hook: Callable[[], object] | None = None
        self.depth = DepthGuard(max_depth=max_depth)

    @property
    def line(self) -> str:
        """The text being scanned (read-only for the session)."""
        return self._line

    @property
    def registry(self) -> TerminalRegistry:
        """Terminal registry used to resolve terminal probes."""
        return self._registry

    @property
    def remaining(self) -> str:
        """Unconsumed text from the cursor on."""
        return self._line[self.cursor :]

    @property
    def matched_text(self) -> str:
        """Text of the most recent successful match."""
        return self._line[self.match_start : self.match_start + self.match_length]

    @property
    def error_position(self) -> int:
        """1-based position of the last failure (cursor if none recorded)."""
        pos = self.fail_position if self.fail_position is not None else self.cursor
        return pos + 1

    def char_at(self, pos: int) -> str:
        """Character at pos, or the EOL sentinel at and past the end."""
        if pos < len(self._line):
            return self._line[pos]
        return EOL

    def at_end(self, pos: int) -> bool:
        """True if pos is at or past the end of the line."""
        return pos >= len(self._line)

    def skip_space(self, pos: int) -> int:
        """Return the first non-whitespace position at or after pos."""
        line = self._line
        end = len(line)
        while pos < end and line[pos].isspace():
            pos += 1
        return pos

    def reset_attempt(self) -> None:
        """Clear per-attempt failure bookkeeping before a new probe."""
        self.fail_position = None
        self.fail_detail = None
        self.message = ""

    @contextmanager
    def nested(self) -> Iterator[ScanState]:
        """Guard one level of grammar recursion.

        Exceeding the depth limit is a hard error raised through the error
        channel, so the cleanup hook runs like for any other hard error.

        Example:
            >>> with state.nested():  # doctest: +SKIP
            ...     value = term(state)
        """
        if self.depth.is_exceeded():
            raise_error(
                self,
                ErrorTemplate.nesting_depth_exceeded(self.depth.max_depth),
                error_type=DepthLimitExceededError,
            )
        with self.depth:
            yield self

    def __repr__(self) -> str:
        return f"ScanState(line={self._line!r}, cursor={self.cursor})"
