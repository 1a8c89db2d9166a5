"""Babel compatibility layer for optional dependency handling.

Provides centralized, lazy import infrastructure for Babel so the scanning
core never imports it.

Design Rationale:
    tokenless supports two installation modes:
    - Core only: `pip install tokenless` (no external dependencies)
    - Locale output: `pip install tokenless[babel]` (calculator --locale)

Usage Pattern:
    from tokenless.core.babel_compat import get_babel_numbers

    def render(value: int, locale: str) -> str:
        numbers = get_babel_numbers()  # Raises BabelImportError if missing
        return numbers.format_decimal(value, locale=locale)

Python 3.13+.
"""

from __future__ import annotations

from decimal import Decimal
from functools import lru_cache
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from babel import Locale
    from babel.core import UnknownLocaleError as UnknownLocaleErrorType


# pylint: disable=redefined-builtin,unnecessary-ellipsis
class BabelNumbersProtocol(Protocol):
    """Protocol for the subset of babel.numbers used by tokenless."""

    def format_decimal(
        self,
        number: int | float | Decimal,
        format: str | None = None,
        locale: Locale | str | None = None,
    ) -> str:
        """Format decimal number with locale-specific formatting."""
        ...
# pylint: enable=redefined-builtin,unnecessary-ellipsis


__all__ = [
    "BabelImportError",
    "BabelNumbersProtocol",
    "get_babel_numbers",
    "get_unknown_locale_error",
    "is_babel_available",
    "require_babel",
]


@lru_cache(maxsize=1)
def _check_babel_available() -> bool:
    """Check if Babel is installed (computed once, cached via lru_cache)."""
    try:
        import babel  # noqa: F401, PLC0415  # pylint: disable=unused-import

        return True
    except ImportError:
        return False


class BabelImportError(ImportError):
    """Raised when Babel is required but not installed."""

    def __init__(self, feature: str) -> None:
        """Create error with feature-specific message.

        Args:
            feature: Name of the feature/function requiring Babel
        """
        message = (
            f"{feature} requires Babel for CLDR locale data. "
            "Install with: pip install tokenless[babel]"
        )
        super().__init__(message)
        self.feature = feature


def is_babel_available() -> bool:
    """Check if Babel is installed and importable."""
    return _check_babel_available()


def require_babel(feature: str) -> None:
    """Assert that Babel is available, raising BabelImportError if not.

    Args:
        feature: Name of the feature requiring Babel (for error message)

    Raises:
        BabelImportError: If Babel is not installed
    """
    if not _check_babel_available():
        raise BabelImportError(feature)


def get_unknown_locale_error() -> type[UnknownLocaleErrorType]:
    """Get the Babel UnknownLocaleError exception class.

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("get_unknown_locale_error")
    from babel.core import UnknownLocaleError  # noqa: PLC0415

    return UnknownLocaleError


def get_babel_numbers() -> BabelNumbersProtocol:
    """Get the Babel numbers module.

    Returns:
        The babel.numbers module (typed via BabelNumbersProtocol)

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("get_babel_numbers")
    from babel import numbers  # noqa: PLC0415

    return numbers
