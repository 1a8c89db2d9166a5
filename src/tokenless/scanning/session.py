"""Parse sessions and the recovery point.

A session is one complete parse of one line: a fresh ScanState, one call
of the grammar entry point, and either a value or a hard error. The
session is the single recovery point for hard errors. HardParseError is
caught here and nowhere else, the on_error callback runs exactly once,
and the session state is discarded with whatever it held. A RecursionError
from grammar code is reported as a DepthLimitExceededError through the
error channel, so it reaches the same recovery point.

Retrying after a bad line is the driver's job; run_lines() is that loop.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass

from tokenless.constants import MAX_DEPTH, MAX_LINE_SIZE
from tokenless.diagnostics import DepthLimitExceededError, ErrorTemplate, HardParseError

from .channel import raise_error
from .state import ScanState
from .terminals import TerminalRegistry

__all__ = ["ScanSession", "SessionResult"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SessionResult[T]:
    """Outcome of one session.

    Attributes:
        value: Entry point return value (None after a hard error)
        error: The hard error that reached the recovery point, if any
        state: Final scan state, for reading cursor or slot bookkeeping
    """

    value: T | None
    error: HardParseError | None
    state: ScanState

    @property
    def ok(self) -> bool:
        """True if the entry point completed without a hard error."""
        return self.error is None

    @property
    def message(self) -> str:
        """Hard error message ("" on success)."""
        return self.state.message


class ScanSession:
    """Recovery point and session factory for one grammar.

    Security:
    - max_line_size rejects oversized input before scanning
    - max_depth bounds grammar recursion guarded by ScanState.nested()

    Example:
        >>> session = ScanSession(terminals, on_error=lambda e: print(e.message))
        >>> result = session.run("3 + 4 * 2", expr)  # doctest: +SKIP
        >>> result.value  # doctest: +SKIP
        11
    """

    __slots__ = ("_max_depth", "_max_line_size", "_on_error", "_registry")

    def __init__(
        self,
        registry: TerminalRegistry,
        on_error: Callable[[HardParseError], object] | None = None,
        *,
        max_line_size: int | None = None,
        max_depth: int | None = None,
    ) -> None:
        """Install the recovery point.

        Args:
            registry: Frozen terminal registry
            on_error: Called once per hard error that reaches the session
            max_line_size: Maximum line length (default: 1 MiB, 0 disables)
            max_depth: Maximum nesting depth (default: 100)

        Raises:
            RuntimeError: If the registry has not been frozen
        """
        if not registry.frozen:
            msg = "TerminalRegistry must be frozen before starting sessions"
            raise RuntimeError(msg)
        self._registry = registry
        self._on_error = on_error
        self._max_line_size = max_line_size if max_line_size is not None else MAX_LINE_SIZE
        self._max_depth = max_depth if max_depth is not None else MAX_DEPTH

    @property
    def registry(self) -> TerminalRegistry:
        """Terminal registry shared by every session."""
        return self._registry

    @property
    def max_line_size(self) -> int:
        """Maximum allowed line length in characters."""
        return self._max_line_size

    @property
    def max_depth(self) -> int:
        """Maximum nesting depth for grammar recursion."""
        return self._max_depth

    def new_state(self, line: str) -> ScanState:
        """Create a fresh scan state for line with this session's limits."""
        return ScanState(
            line,
            self._registry,
            max_line_size=self._max_line_size,
            max_depth=self._max_depth,
        )

    def run[T](self, line: str, entry: Callable[[ScanState], T]) -> SessionResult[T]:
        """Parse one line with entry as the top-level grammar function.

        Args:
            line: Text to scan
            entry: Grammar entry point; consumes input only through probes

        Returns:
            SessionResult with the value, or with the hard error that
            reached the recovery point

        Raises:
            ValueError: If the line is rejected before scanning starts
        """
        state = self.new_state(line)
        logger.debug("Session started: %r", line)
        try:
            value = _enter(state, entry)
        except HardParseError as error:
            logger.info("Parse aborted at position %s: %s", error.position, error.message)
            if self._on_error is not None:
                self._on_error(error)
            return SessionResult(value=None, error=error, state=state)
        logger.debug("Session finished at cursor %d", state.cursor)
        return SessionResult(value=value, error=None, state=state)

    def run_lines[T](
        self, lines: Iterable[str], entry: Callable[[ScanState], T]
    ) -> Iterator[SessionResult[T]]:
        """Run one session per line, continuing after hard errors.

        Trailing line terminators are stripped, so file objects and
        sys.stdin can be passed directly. A line rejected before scanning
        raises ValueError out of the iteration; drivers that must keep going
        call run() per line and catch it.
        """
        for line in lines:
            yield self.run(line.rstrip("\r\n"), entry)

    def __repr__(self) -> str:
        return f"ScanSession(registry={self._registry!r}, max_depth={self._max_depth})"


def _enter[T](state: ScanState, entry: Callable[[ScanState], T]) -> T:
    """Call the entry point, reporting stack exhaustion as a depth error.

    Grammar functions use several interpreter frames per nesting level, so
    a generous max_depth can still run out of stack before the guard trips.
    The stack is unwound by the time the error is re-raised here.
    """
    try:
        return entry(state)
    except RecursionError:
        raise_error(
            state,
            ErrorTemplate.recursion_limit_exceeded(),
            error_type=DepthLimitExceededError,
        )
