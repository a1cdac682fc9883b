"""TinyParsec exception hierarchy with structured diagnostics.

Parsers never raise: failures are returned as values. These exceptions
are raised only by the whole-input runner in ``tinyparsec.parser.core``,
which turns a failed ParseResult into an error for callers that want one.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class TinyParsecError(Exception):
    """Base exception for all TinyParsec errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize TinyParsecError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class ParseFailedError(TinyParsecError):
    """Parser returned a Failure outcome.

    Attributes:
        source: The input that was being parsed
    """

    def __init__(self, message: str | Diagnostic, *, source: str = "") -> None:
        """Initialize ParseFailedError.

        Args:
            message: Error message string OR Diagnostic object
            source: The input that was being parsed
        """
        super().__init__(message)
        self.source = source


class IncompleteParseError(ParseFailedError):
    """Parser succeeded but did not consume the whole input.

    Attributes:
        remainder: The unconsumed suffix of source
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        source: str = "",
        remainder: str = "",
    ) -> None:
        """Initialize IncompleteParseError.

        Args:
            message: Error message string OR Diagnostic object
            source: The input that was being parsed
            remainder: The unconsumed suffix of source
        """
        super().__init__(message, source=source)
        self.remainder = remainder
