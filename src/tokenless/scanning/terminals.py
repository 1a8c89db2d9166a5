"""Terminal registry for application-defined lexical categories.

A terminal is anything a grammar wants recognized at the current position
that is not plain literal text or a single literal character: identifiers,
numbers, end of line, or a more complex form. Each terminal pairs a name
with a scanning function that implements the matcher contract:

    def scan_fn(state: ScanState, pos: int, slot: Slot | None) -> bool

On entry ``pos`` is the first non-blank position, ``state.match_start ==
pos``, ``state.match_length == 0`` and ``state.fail_position == pos``.
The function returns ``success(state, end)`` after writing any converted
value into ``slot``, or ``fail(state, where)`` leaving the cursor alone.

Registries are built once with register() / the terminal() decorator and
then frozen; sessions refuse unfrozen registries.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .state import ScanState, Slot

__all__ = ["ScanFn", "TerminalDescriptor", "TerminalRegistry"]

logger = logging.getLogger(__name__)

type ScanFn = Callable[[ScanState, int, Slot | None], bool]


@dataclass(frozen=True, slots=True)
class TerminalDescriptor:
    """Registered terminal: the handle grammar code passes to probes.

    Attributes:
        id: Dense integer assigned at registration, never reused
        name: Registration name
        scan_fn: Scanning function implementing the matcher contract
        label: Text used in default "expected ..." messages
    """

    id: int
    name: str
    scan_fn: ScanFn
    label: str

    def __repr__(self) -> str:
        return f"TerminalDescriptor(id={self.id}, name={self.name!r})"


class TerminalRegistry:
    """Builder and lookup table for application-defined terminals.

    Example:
        >>> terminals = TerminalRegistry()
        >>> @terminals.terminal(label="end of line")
        ... def eol(state, pos, slot):
        ...     return state.at_end(pos)
        >>> terminals.freeze()
        TerminalRegistry(terminals=1, frozen=True)
        >>> terminals["eol"].id
        0
    """

    __slots__ = ("_by_name", "_frozen", "_terminals")

    def __init__(self) -> None:
        """Initialize empty, unfrozen registry."""
        self._terminals: list[TerminalDescriptor] = []
        self._by_name: dict[str, TerminalDescriptor] = {}
        self._frozen = False

    @property
    def frozen(self) -> bool:
        """True once freeze() has been called."""
        return self._frozen

    def register(
        self, name: str, scan_fn: ScanFn, *, label: str | None = None
    ) -> TerminalDescriptor:
        """Register a terminal and assign it the next id.

        Args:
            name: Terminal name
            scan_fn: Scanning function
            label: Display text for error messages (default: name)

        Returns:
            The new TerminalDescriptor

        Raises:
            RuntimeError: If the registry is frozen
        """
        if self._frozen:
            msg = f"Cannot register terminal '{name}': registry is frozen"
            raise RuntimeError(msg)
        descriptor = TerminalDescriptor(
            id=len(self._terminals),
            name=name,
            scan_fn=scan_fn,
            label=label if label is not None else name,
        )
        self._terminals.append(descriptor)
        self._by_name.setdefault(name, descriptor)
        logger.debug("Registered terminal %d: %s", descriptor.id, name)
        return descriptor

    def terminal(
        self, name: str | None = None, *, label: str | None = None
    ) -> Callable[[ScanFn], TerminalDescriptor]:
        """Decorator form of register().

        The terminal name defaults to the function name with any leading
        ``scan_`` removed. The decorated name is bound to the descriptor,
        ready to pass to accept()/expect().
        """

        def decorator(scan_fn: ScanFn) -> TerminalDescriptor:
            terminal_name = name
            if terminal_name is None:
                terminal_name = getattr(scan_fn, "__name__", "terminal").removeprefix("scan_")
            return self.register(terminal_name, scan_fn, label=label)

        return decorator

    def freeze(self) -> TerminalRegistry:
        """Make the registry immutable. Returns self for chaining."""
        self._frozen = True
        return self

    def get(self, terminal_id: int) -> TerminalDescriptor:
        """Get descriptor by id.

        Raises:
            KeyError: If no terminal has this id
        """
        if 0 <= terminal_id < len(self._terminals):
            return self._terminals[terminal_id]
        msg = f"Unknown terminal id {terminal_id}"
        raise KeyError(msg)

    def __getitem__(self, name: str) -> TerminalDescriptor:
        return self._by_name[name]

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __iter__(self) -> Iterator[TerminalDescriptor]:
        return iter(self._terminals)

    def __len__(self) -> int:
        return len(self._terminals)

    def __repr__(self) -> str:
        return f"TerminalRegistry(terminals={len(self._terminals)}, frozen={self._frozen})"
