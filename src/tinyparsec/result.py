"""Parse outcomes and results.

Every parser is a plain function from an input string to a ParseResult:
the outcome of the attempt (Success or Failure) paired with the
unconsumed remainder of the input.

Design Philosophy:
    - Results are immutable (frozen dataclasses)
    - Failures are values, never exceptions
    - Exactly one outcome variant is populated
    - The input string is never mutated; remainders are suffix slices

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Never

from tinyparsec.constants import DEFAULT_FAILURE_MESSAGE
from tinyparsec.diagnostics import Diagnostic, ErrorTemplate

__all__ = [
    "Failure",
    "Outcome",
    "ParseResult",
    "Parser",
    "Success",
    "fail",
    "succeed",
]


@dataclass(frozen=True, slots=True)
class Success[T]:
    """Successful parse outcome carrying the parsed value."""

    value: T


@dataclass(frozen=True, slots=True)
class Failure:
    """Failed parse outcome carrying a diagnostic.

    The diagnostic message is for humans; branch on ``error.code``.
    """

    error: Diagnostic


type Outcome[T] = Success[T] | Failure


@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """Parser result pairing an outcome with the unconsumed input.

    Type Parameters:
        T: The type of the parsed value

    Contract:
        - Success: remainder is a suffix of the parser's input
        - Failure: remainder is the parser's original input (full backtrack)

    The result unpacks like the pair it models:

    Example:
        >>> outcome, remainder = succeed("a", "bc")
        >>> outcome
        Success(value='a')
        >>> remainder
        'bc'
    """

    outcome: Outcome[T]
    remainder: str

    def __iter__(self) -> Iterator[Outcome[T] | str]:
        """Unpack as ``(outcome, remainder)``."""
        yield self.outcome
        yield self.remainder

    @property
    def ok(self) -> bool:
        """True if the outcome is a Success."""
        return isinstance(self.outcome, Success)

    @property
    def value(self) -> T:
        """Parsed value of a successful result.

        Raises:
            ValueError: If the result is a failure
        """
        match self.outcome:
            case Success(value=value):
                return value
            case Failure(error=error):
                msg = f"Failed parse result has no value: {error}"
                raise ValueError(msg)

    @property
    def error(self) -> Diagnostic:
        """Diagnostic of a failed result.

        Raises:
            ValueError: If the result is a success
        """
        match self.outcome:
            case Failure(error=error):
                return error
            case Success():
                msg = "Successful parse result has no error"
                raise ValueError(msg)


type Parser[T] = Callable[[str], ParseResult[T]]


def succeed[T](value: T, remainder: str) -> ParseResult[T]:
    """Build a successful result.

    Args:
        value: The parsed value
        remainder: Unconsumed input after the parse

    Returns:
        ParseResult with a Success outcome
    """
    return ParseResult(Success(value), remainder)


def fail(
    remainder: str, error: str | Diagnostic = DEFAULT_FAILURE_MESSAGE
) -> ParseResult[Never]:
    """Build a failed result.

    Args:
        remainder: Input to report back, normally the parser's original input
        error: Diagnostic, or a bare message wrapped as GENERIC_FAILURE

    Returns:
        ParseResult with a Failure outcome
    """
    if isinstance(error, str):
        error = ErrorTemplate.generic_failure(error)
    return ParseResult(Failure(error), remainder)
