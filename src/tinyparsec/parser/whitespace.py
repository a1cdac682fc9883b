"""Whitespace handling utilities.

Only the space character U+0020 counts as padding. Tabs, newlines and
other Unicode whitespace are ordinary content.
"""

from typing import Literal

from tinyparsec.constants import SPACE
from tinyparsec.parser.combinators import many, optional
from tinyparsec.parser.derived import surrounded_by
from tinyparsec.parser.primitives import char
from tinyparsec.result import Parser

__all__ = ["spaced", "spaces"]

# Zero or more spaces. Never fails.
spaces: Parser[list[str] | Literal[""]] = optional(many(char(SPACE)))


def spaced[T](parser: Parser[T]) -> Parser[T]:
    """Parse parser with optional spaces trimmed on both sides.

    Examples:
        spaced(char("c"))("    c    ") → "c", remainder ""
        spaced(char("c"))("cb  ") → "c", remainder "b  "
        spaced(char("c"))("\\tc") → failure (tab is not padding)

    Args:
        parser: Parser for the padded content

    Returns:
        Parser yielding parser's value
    """
    return surrounded_by(spaces, parser)
