"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


def _expected(
    code: DiagnosticCode,
    what: str,
    position: int,
    message: str | None,
    detail: str | None,
) -> Diagnostic:
    if message is None:
        text = f"expected {what} at position {position}"
    else:
        text = f"{message} at position {position}"
        if detail:
            text += f" ({detail})"
    return Diagnostic(code=code, message=text, position=position)


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Keeps messages testable and documents every error case in one place.
    """

    # ------------------------------------------------------------------
    # Probe failures (expect)
    # ------------------------------------------------------------------

    @staticmethod
    def expected_literal(
        text: str, position: int, message: str | None = None, detail: str | None = None
    ) -> Diagnostic:
        """Mandatory literal text probe failed.

        Args:
            text: The literal text that was wanted
            position: 1-based failure position
            message: Caller-supplied override for the "expected ..." part
            detail: Soft diagnostic left by the matcher

        Returns:
            Diagnostic for EXPECTED_LITERAL
        """
        return _expected(DiagnosticCode.EXPECTED_LITERAL, f'"{text}"', position, message, detail)

    @staticmethod
    def expected_char(
        char: str, position: int, message: str | None = None, detail: str | None = None
    ) -> Diagnostic:
        """Mandatory single character probe failed.

        Printable characters are shown quoted, others as hex (0x0 for EOL).

        Returns:
            Diagnostic for EXPECTED_CHAR
        """
        what = f"'{char}'" if char.isprintable() else hex(ord(char))
        return _expected(DiagnosticCode.EXPECTED_CHAR, what, position, message, detail)

    @staticmethod
    def expected_terminal(
        label: str, position: int, message: str | None = None, detail: str | None = None
    ) -> Diagnostic:
        """Mandatory terminal probe failed.

        Returns:
            Diagnostic for EXPECTED_TERMINAL
        """
        return _expected(DiagnosticCode.EXPECTED_TERMINAL, label, position, message, detail)

    @staticmethod
    def nesting_depth_exceeded(max_depth: int) -> Diagnostic:
        """Grammar recursion exceeded the depth guard.

        Args:
            max_depth: The configured limit

        Returns:
            Diagnostic for NESTING_DEPTH_EXCEEDED
        """
        return Diagnostic(
            code=DiagnosticCode.NESTING_DEPTH_EXCEEDED,
            message=f"maximum nesting depth ({max_depth}) exceeded",
            hint="Reduce nesting or raise max_depth on the ScanSession",
        )

    @staticmethod
    def recursion_limit_exceeded() -> Diagnostic:
        """Grammar recursion hit the interpreter stack before the depth guard.

        Returns:
            Diagnostic for NESTING_DEPTH_EXCEEDED
        """
        return Diagnostic(
            code=DiagnosticCode.NESTING_DEPTH_EXCEEDED,
            message="maximum recursion depth exceeded",
            hint="Lower max_depth on the ScanSession or reduce nesting",
        )

    # ------------------------------------------------------------------
    # Calculator
    # ------------------------------------------------------------------

    @staticmethod
    def integer_overflow() -> Diagnostic:
        """Integer literal exceeds the representable range."""
        return Diagnostic(code=DiagnosticCode.INTEGER_OVERFLOW, message="integer overflow")

    @staticmethod
    def syntax_error(position: int) -> Diagnostic:
        """No primary expression could be scanned."""
        return Diagnostic(
            code=DiagnosticCode.SYNTAX_ERROR,
            message=f"syntax error at position {position}",
            position=position,
        )

    @staticmethod
    def unknown_function(name: str) -> Diagnostic:
        """Call of a function that is not a builtin."""
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_FUNCTION,
            message=f"unknown function {name}",
            hint="Available functions: min, max, rand",
        )

    @staticmethod
    def unclosed_call(name: str) -> Diagnostic:
        """End of line reached inside a function call."""
        return Diagnostic(
            code=DiagnosticCode.UNCLOSED_CALL,
            message=f"unclosed paren on function call {name}",
        )

    @staticmethod
    def too_many_args(name: str) -> Diagnostic:
        """Function call exceeds CALC_MAX_ARGS."""
        return Diagnostic(
            code=DiagnosticCode.TOO_MANY_ARGS, message=f"function {name}: too many args"
        )

    @staticmethod
    def function_failed(name: str, reason: str) -> Diagnostic:
        """Builtin function rejected its arguments."""
        return Diagnostic(code=DiagnosticCode.FUNCTION_FAILED, message=f"function {name}: {reason}")

    @staticmethod
    def symbol_not_found(name: str) -> Diagnostic:
        """Identifier not present in the symbol table."""
        return Diagnostic(
            code=DiagnosticCode.SYMBOL_NOT_FOUND, message=f"{name} not found in environment"
        )

    @staticmethod
    def symbol_not_integer(name: str) -> Diagnostic:
        """Symbol value cannot be read as an integer."""
        return Diagnostic(
            code=DiagnosticCode.SYMBOL_NOT_INTEGER, message=f"{name} is not an integer"
        )

    @staticmethod
    def division_by_zero() -> Diagnostic:
        """Right operand of a division evaluated to zero."""
        return Diagnostic(code=DiagnosticCode.DIVISION_BY_ZERO, message="division by zero")
