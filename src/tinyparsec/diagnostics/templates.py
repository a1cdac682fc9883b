"""Failure message templates.

Centralized failure message templates for testable, consistent messages.
Python 3.13+. Zero external dependencies.
"""

import sys

from tinyparsec.constants import DEFAULT_FAILURE_MESSAGE, MINUS_SIGN

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]

# Longest input excerpt quoted in a message. Alternation builds a
# diagnostic per failed branch, so quoting whole inputs would make
# failures cost O(len(input)) each.
_PREVIEW_LENGTH: int = 32


def _preview(source: str) -> str:
    """Quote the head of the input for a message."""
    if len(source) <= _PREVIEW_LENGTH:
        return f'"{source}"'
    return f'"{source[:_PREVIEW_LENGTH]}..."'


class ErrorTemplate:
    """Centralized failure message templates.

    All failure messages are created here. Parsers never format messages
    inline, which keeps the wording consistent and testable.
    """

    @staticmethod
    def unexpected_end_of_input(what: str = "a character") -> Diagnostic:
        """Parser tried to consume from an empty remainder.

        Args:
            what: Description of the expected token

        Returns:
            Diagnostic for UNEXPECTED_END_OF_INPUT
        """
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_END_OF_INPUT,
            message=f"failed to parse {what} on an empty input",
            input="",
        )

    @staticmethod
    def character_mismatch(source: str) -> Diagnostic:
        """Predicate rejected the head character.

        Args:
            source: Input whose first character was rejected

        Returns:
            Diagnostic for CHARACTER_MISMATCH
        """
        return Diagnostic(
            code=DiagnosticCode.CHARACTER_MISMATCH,
            message=f'failed to parse "{source[0]}" on input {_preview(source)}',
            input=source,
        )

    @staticmethod
    def char_mismatch(expected: str, source: str) -> Diagnostic:
        """Head character differs from the expected one.

        Args:
            expected: The character the parser was built for
            source: Input that did not start with it

        Returns:
            Diagnostic for UNEXPECTED_END_OF_INPUT (empty input) or
            CHARACTER_MISMATCH
        """
        if not source:
            diagnostic = ErrorTemplate.unexpected_end_of_input(f'the char "{expected}"')
            return Diagnostic(
                code=diagnostic.code,
                message=diagnostic.message,
                input=source,
                expected=(expected,),
            )
        return Diagnostic(
            code=DiagnosticCode.CHARACTER_MISMATCH,
            message=f'failed to parse the char "{expected}" on input {_preview(source)}',
            input=source,
            expected=(expected,),
        )

    @staticmethod
    def literal_mismatch(expected: str, source: str) -> Diagnostic:
        """Input does not start with the literal.

        Args:
            expected: The literal the parser was built for
            source: Input that did not start with it

        Returns:
            Diagnostic for LITERAL_MISMATCH
        """
        return Diagnostic(
            code=DiagnosticCode.LITERAL_MISMATCH,
            message=f'failed to parse literal "{expected}" on input {_preview(source)}',
            input=source,
            expected=(expected,),
        )

    @staticmethod
    def repetition_shortfall(required: int, matched: int, source: str) -> Diagnostic:
        """exactly() stopped before reaching the required count.

        Args:
            required: Number of repetitions requested
            matched: Number of repetitions that succeeded
            source: Input given to the repetition

        Returns:
            Diagnostic for REPETITION_SHORTFALL
        """
        return Diagnostic(
            code=DiagnosticCode.REPETITION_SHORTFALL,
            message=(
                f"expected {required} repetitions but matched {matched} "
                f"on input {_preview(source)}"
            ),
            input=source,
        )

    @staticmethod
    def expected_digits(source: str) -> Diagnostic:
        """Numeric parser found no decimal digit.

        Args:
            source: Input where a digit was required

        Returns:
            Diagnostic for EXPECTED_DIGITS
        """
        return Diagnostic(
            code=DiagnosticCode.EXPECTED_DIGITS,
            message=f"expected at least one digit on input {_preview(source)}",
            input=source,
            expected=("0-9",),
        )

    @staticmethod
    def number_too_long(text: str, source: str) -> Diagnostic:
        """Digit run exceeds the integer string conversion limit.

        Args:
            text: Matched integer text, sign included
            source: Input given to the numeric parser

        Returns:
            Diagnostic for NUMBER_TOO_LONG
        """
        digit_count = len(text.lstrip(MINUS_SIGN))
        return Diagnostic(
            code=DiagnosticCode.NUMBER_TOO_LONG,
            message=(
                f"integer with {digit_count} digits exceeds the conversion limit of "
                f"{sys.get_int_max_str_digits()} digits on input {_preview(source)}"
            ),
            input=source,
        )

    @staticmethod
    def incomplete_parse(remainder: str) -> Diagnostic:
        """Parser succeeded but left input unconsumed.

        Args:
            remainder: The unconsumed suffix

        Returns:
            Diagnostic for INCOMPLETE_PARSE
        """
        return Diagnostic(
            code=DiagnosticCode.INCOMPLETE_PARSE,
            message=f"unconsumed input remains: {_preview(remainder)}",
            input=remainder,
        )

    @staticmethod
    def generic_failure(message: str = DEFAULT_FAILURE_MESSAGE) -> Diagnostic:
        """Failure built from a bare message string.

        Args:
            message: Caller-supplied description

        Returns:
            Diagnostic for GENERIC_FAILURE
        """
        return Diagnostic(code=DiagnosticCode.GENERIC_FAILURE, message=message)
