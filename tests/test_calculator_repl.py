"""Tests for the line-oriented calculator driver."""

from __future__ import annotations

import io

import pytest

from tokenless.calculator import main
from tokenless.calculator.repl import make_formatter, run
from tokenless.core import babel_compat
from tokenless.core.babel_compat import BabelImportError


class TestRun:
    """Test the evaluation loop."""

    def test_results_and_errors(self) -> None:
        """Results and error messages are written in input order."""
        out = io.StringIO()

        failures = run(["3 + 4 * 2\n", "12x\n", "min(3, 4)\n"], out, symbols={})

        assert failures == 1
        assert out.getvalue().splitlines() == [
            " = 11",
            "expected end of line at position 3",
            " = 3",
        ]

    def test_custom_formatter(self) -> None:
        """The formatter renders each value."""
        out = io.StringIO()

        run(["1 + 1"], out, formatter=lambda value: f"<{value}>", symbols={})

        assert out.getvalue() == " = <2>\n"

    def test_rejected_line_does_not_stop_loop(self) -> None:
        """A line with a NUL character is reported and the next line still runs."""
        out = io.StringIO()

        failures = run(["1\n", "2\x003\n", "4\n"], out, symbols={})

        assert failures == 1
        assert out.getvalue().splitlines() == [
            " = 1",
            "Line contains the end-of-line sentinel character (NUL)",
            " = 4",
        ]

    def test_verbose_shows_code_and_hint(self) -> None:
        """verbose=True prints the full diagnostic."""
        out = io.StringIO()

        run(["foo(1)"], out, symbols={}, verbose=True)

        assert out.getvalue().splitlines() == [
            "error[UNKNOWN_FUNCTION]: unknown function foo",
            "  = help: Available functions: min, max, rand",
        ]

    def test_empty_input(self) -> None:
        """No lines, no output."""
        out = io.StringIO()

        assert run([], out, symbols={}) == 0
        assert out.getvalue() == ""


class TestMain:
    """Test the console entry point."""

    def test_reads_stdin(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Lines from stdin are evaluated and printed."""
        monkeypatch.setattr("sys.stdin", io.StringIO("2 * 21\n(1\n"))

        assert main([]) == 0

        assert capsys.readouterr().out.splitlines() == [" = 42", "expected ')' at position 3"]

    def test_strict_exit_status(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """--strict turns any failed line into exit status 1."""
        monkeypatch.setattr("sys.stdin", io.StringIO("1 / 0\n"))

        assert main(["--strict"]) == 1
        assert capsys.readouterr().out == "division by zero\n"

    def test_strict_success(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """--strict exits 0 when every line evaluates."""
        monkeypatch.setattr("sys.stdin", io.StringIO("1\n2\n"))

        assert main(["--strict"]) == 0
        capsys.readouterr()

    def test_verbose_flag(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """--verbose prints errors with their code."""
        monkeypatch.setattr("sys.stdin", io.StringIO("1 / 0\n"))

        assert main(["--verbose"]) == 0

        assert capsys.readouterr().out == "error[DIVISION_BY_ZERO]: division by zero\n"

    def test_locale_output(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """--locale formats results with Babel."""
        pytest.importorskip("babel")
        monkeypatch.setattr("sys.stdin", io.StringIO("1234567\n"))

        assert main(["--locale", "de_DE"]) == 0

        assert capsys.readouterr().out == " = 1.234.567\n"

    def test_unknown_locale_is_usage_error(self, capsys: pytest.CaptureFixture[str]) -> None:
        """An unknown locale exits with status 2."""
        pytest.importorskip("babel")

        with pytest.raises(SystemExit) as exc_info:
            main(["--locale", "xx_XX"])

        assert exc_info.value.code == 2
        assert "Unknown locale 'xx_XX'" in capsys.readouterr().err


class TestMakeFormatter:
    """Test locale formatter selection."""

    def test_no_locale_is_str(self) -> None:
        """Without a locale values print as plain integers."""
        assert make_formatter(None) is str

    def test_missing_babel(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """A locale without Babel installed raises BabelImportError."""
        monkeypatch.setattr(babel_compat, "_check_babel_available", lambda: False)

        with pytest.raises(BabelImportError, match=r"pip install tokenless\[babel\]"):
            make_formatter("de_DE")

    def test_missing_babel_is_usage_error(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """main() reports a missing Babel as a usage error."""
        monkeypatch.setattr(babel_compat, "_check_babel_available", lambda: False)

        with pytest.raises(SystemExit) as exc_info:
            main(["--locale", "de_DE"])

        assert exc_info.value.code == 2
        assert "requires Babel" in capsys.readouterr().err
