"""Tests for diagnostic codes, error types and message templates."""

from __future__ import annotations

import pytest

from tokenless.diagnostics import (
    DepthLimitExceededError,
    Diagnostic,
    DiagnosticCode,
    ErrorTemplate,
    HardParseError,
    ScanError,
)

# ============================================================================
# CODES
# ============================================================================


class TestDiagnosticCode:
    """Test the code ranges."""

    def test_codes_are_unique(self) -> None:
        """No two codes share a value."""
        values = [code.value for code in DiagnosticCode]

        assert len(values) == len(set(values))

    @pytest.mark.parametrize(
        ("code", "low", "high"),
        [
            (DiagnosticCode.EXPECTED_LITERAL, 3100, 3199),
            (DiagnosticCode.NESTING_DEPTH_EXCEEDED, 3100, 3199),
            (DiagnosticCode.INTEGER_OVERFLOW, 3200, 3299),
            (DiagnosticCode.FUNCTION_FAILED, 3200, 3299),
        ],
    )
    def test_code_ranges(self, code: DiagnosticCode, low: int, high: int) -> None:
        """Scan and calculator codes live in separate ranges."""
        assert low <= code.value <= high


# ============================================================================
# DIAGNOSTIC
# ============================================================================


class TestDiagnostic:
    """Test the diagnostic record."""

    def test_str_is_message(self) -> None:
        """str() gives the plain message."""
        diagnostic = Diagnostic(code=DiagnosticCode.GRAMMAR_ERROR, message="bad input")

        assert str(diagnostic) == "bad input"

    def test_format_error_with_hint(self) -> None:
        """format_error() shows the code name and the hint."""
        diagnostic = ErrorTemplate.nesting_depth_exceeded(5)

        formatted = diagnostic.format_error()

        assert formatted.splitlines() == [
            "error[NESTING_DEPTH_EXCEEDED]: maximum nesting depth (5) exceeded",
            "  = help: Reduce nesting or raise max_depth on the ScanSession",
        ]

    def test_format_error_without_hint(self) -> None:
        """Without a hint only the first line is produced."""
        diagnostic = ErrorTemplate.division_by_zero()

        assert diagnostic.format_error() == "error[DIVISION_BY_ZERO]: division by zero"

    def test_frozen(self) -> None:
        """Diagnostics are immutable."""
        diagnostic = ErrorTemplate.integer_overflow()

        with pytest.raises(AttributeError):
            diagnostic.message = "changed"  # type: ignore[misc]


# ============================================================================
# ERRORS
# ============================================================================


class TestErrors:
    """Test the exception hierarchy."""

    def test_scan_error_from_string(self) -> None:
        """A plain message carries no diagnostic."""
        error = ScanError("plain")

        assert str(error) == "plain"
        assert error.diagnostic is None

    def test_hard_parse_error_properties(self) -> None:
        """message and position come from the diagnostic."""
        diagnostic = ErrorTemplate.syntax_error(4)
        error = HardParseError(diagnostic)

        assert str(error) == "syntax error at position 4"
        assert error.message == "syntax error at position 4"
        assert error.position == 4
        assert error.diagnostic is diagnostic

    def test_hierarchy(self) -> None:
        """Depth errors are hard errors, hard errors are scan errors."""
        assert issubclass(DepthLimitExceededError, HardParseError)
        assert issubclass(HardParseError, ScanError)


# ============================================================================
# TEMPLATES
# ============================================================================


class TestErrorTemplate:
    """Test message wording."""

    def test_expected_literal(self) -> None:
        """Literal text is double-quoted."""
        diagnostic = ErrorTemplate.expected_literal("then", 4)

        assert diagnostic.message == 'expected "then" at position 4'
        assert diagnostic.position == 4

    @pytest.mark.parametrize(
        ("char", "shown"),
        [("(", "'('"), ("\0", "0x0"), ("\t", "0x9")],
    )
    def test_expected_char(self, char: str, shown: str) -> None:
        """Printable characters are quoted, others shown in hex."""
        diagnostic = ErrorTemplate.expected_char(char, 2)

        assert diagnostic.message == f"expected {shown} at position 2"

    def test_override_with_detail(self) -> None:
        """An override replaces the expected part and appends the detail."""
        diagnostic = ErrorTemplate.expected_terminal(
            "identifier", 3, message="need a name", detail="letters required"
        )

        assert diagnostic.message == "need a name at position 3 (letters required)"
        assert diagnostic.code == DiagnosticCode.EXPECTED_TERMINAL

    def test_detail_ignored_without_override(self) -> None:
        """The default wording does not include the detail."""
        diagnostic = ErrorTemplate.expected_terminal("identifier", 3, detail="letters required")

        assert diagnostic.message == "expected identifier at position 3"

    @pytest.mark.parametrize(
        ("diagnostic", "message"),
        [
            (ErrorTemplate.unknown_function("foo"), "unknown function foo"),
            (ErrorTemplate.unclosed_call("max"), "unclosed paren on function call max"),
            (ErrorTemplate.too_many_args("min"), "function min: too many args"),
            (ErrorTemplate.function_failed("min", "oops"), "function min: oops"),
            (ErrorTemplate.symbol_not_found("HOME"), "HOME not found in environment"),
            (ErrorTemplate.symbol_not_integer("HOME"), "HOME is not an integer"),
            (ErrorTemplate.integer_overflow(), "integer overflow"),
            (ErrorTemplate.recursion_limit_exceeded(), "maximum recursion depth exceeded"),
        ],
    )
    def test_calculator_messages(self, diagnostic: Diagnostic, message: str) -> None:
        """Calculator diagnostics use fixed wording."""
        assert diagnostic.message == message
