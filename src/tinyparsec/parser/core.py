"""Whole-input parsing entry point.

Parsers return ParseResult values and never raise. Applications usually
want the opposite at their boundary: a parsed value, or an exception when
the input is malformed. ParseRunner provides that boundary.

Security:
    Includes a configurable input size limit, checked before any parser
    runs, so oversized input is rejected without being scanned.
"""

import logging

from tinyparsec.constants import MAX_SOURCE_SIZE
from tinyparsec.diagnostics import (
    ErrorTemplate,
    IncompleteParseError,
    ParseFailedError,
)
from tinyparsec.result import Parser

__all__ = ["ParseRunner", "parse"]

logger = logging.getLogger(__name__)


class ParseRunner:
    """Run a parser over a complete input and unwrap its value.

    Attributes:
        max_source_size: Maximum allowed source size in characters (default: 10 MiB)
        require_complete: Whether leftover input is an error (default: True)
    """

    __slots__ = ("_max_source_size", "_require_complete")

    def __init__(
        self,
        *,
        max_source_size: int | None = None,
        require_complete: bool = True,
    ) -> None:
        """Initialize runner with optional size limit.

        Args:
            max_source_size: Maximum source size in characters (default: 10 MiB).
                            Set to 0 to disable the size limit.
            require_complete: Raise IncompleteParseError when the parser
                              succeeds without consuming the whole input.
        """
        self._max_source_size = (
            max_source_size if max_source_size is not None else MAX_SOURCE_SIZE
        )
        self._require_complete = require_complete

    @property
    def max_source_size(self) -> int:
        """Maximum allowed source size in characters."""
        return self._max_source_size

    @property
    def require_complete(self) -> bool:
        """Whether leftover input is an error."""
        return self._require_complete

    def run[T](self, parser: Parser[T], source: str) -> T:
        """Parse source and return the parsed value.

        Args:
            parser: Parser to apply
            source: Complete input

        Returns:
            The value of the successful parse

        Raises:
            ValueError: If source exceeds max_source_size
            ParseFailedError: If the parser fails
            IncompleteParseError: If require_complete is set and input remains

        Example:
            >>> from tinyparsec.parser.numbers import number
            >>> ParseRunner().run(number, "-120.034")
            -120.034
        """
        if self._max_source_size > 0 and len(source) > self._max_source_size:
            logger.debug(
                "Rejected source of %d characters (limit %d)",
                len(source),
                self._max_source_size,
            )
            msg = (
                f"Source size ({len(source):,} characters) exceeds maximum "
                f"({self._max_source_size:,} characters). "
                "Configure max_source_size in ParseRunner constructor to increase limit."
            )
            raise ValueError(msg)

        result = parser(source)
        if not result.ok:
            logger.debug("Parse failed: %s", result.error.message)
            raise ParseFailedError(result.error, source=source)

        if self._require_complete and result.remainder:
            logger.debug("Parse left %d characters unconsumed", len(result.remainder))
            raise IncompleteParseError(
                ErrorTemplate.incomplete_parse(result.remainder),
                source=source,
                remainder=result.remainder,
            )

        return result.value


_default_runner = ParseRunner()
_partial_runner = ParseRunner(require_complete=False)


def parse[T](parser: Parser[T], source: str, *, require_complete: bool = True) -> T:
    """Parse source with a default-configured ParseRunner.

    Args:
        parser: Parser to apply
        source: Complete input
        require_complete: Raise IncompleteParseError on leftover input

    Returns:
        The value of the successful parse

    Raises:
        ValueError: If source exceeds MAX_SOURCE_SIZE
        ParseFailedError: If the parser fails
        IncompleteParseError: If require_complete is set and input remains
    """
    runner = _default_runner if require_complete else _partial_runner
    return runner.run(parser, source)
