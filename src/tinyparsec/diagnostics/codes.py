"""Diagnostic codes and data structures.

Defines failure codes and the diagnostic carried by every failed parse.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Failure codes with unique identifiers.

    Organized by category:
        1000-1999: Character-level failures (primitives)
        2000-2999: Repetition failures (combinators)
        3000-3999: Numeric literal failures
        4000-4999: Runner failures (whole-input parsing)
        9000-9999: Uncategorized failures
    """

    # Character-level failures (1000-1999)
    UNEXPECTED_END_OF_INPUT = 1001
    CHARACTER_MISMATCH = 1002
    LITERAL_MISMATCH = 1003

    # Repetition failures (2000-2999)
    REPETITION_SHORTFALL = 2001

    # Numeric literal failures (3000-3999)
    EXPECTED_DIGITS = 3001
    NUMBER_TOO_LONG = 3002

    # Runner failures (4000-4999)
    INCOMPLETE_PARSE = 4001

    # Uncategorized (9000-9999)
    GENERIC_FAILURE = 9000


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured description of a parse failure.

    The message is the user-facing part and is diagnostic only; it is not
    meant to be parsed by machines. Tools should branch on ``code``.

    Attributes:
        code: Failure cause
        message: Human-readable failure description
        input: The input the failing parser was given (None if not recorded)
        expected: What the parser expected to find (optional)
    """

    code: DiagnosticCode
    message: str
    input: str | None = None
    expected: tuple[str, ...] = ()

    def __str__(self) -> str:
        """Return human-readable failure description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic with its code name and expectations.

        Example:
            >>> code = DiagnosticCode.LITERAL_MISMATCH
            >>> Diagnostic(code, "no match", expected=("la",)).format_error()
            "[LITERAL_MISMATCH] no match (expected: 'la')"

        Returns:
            Formatted failure description
        """
        text = f"[{self.code.name}] {self.message}"
        if self.expected:
            expected_str = ", ".join(f"'{e}'" for e in self.expected)
            text += f" (expected: {expected_str})"
        return text
