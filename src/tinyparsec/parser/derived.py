"""Derived combinators.

Delimiter and separator helpers composed from and_() and map_(). They
inherit the backtracking contract of and_(): on failure the remainder is
the original input.
"""

from tinyparsec.parser.combinators import and_, map_
from tinyparsec.result import Parser

__all__ = [
    "delimited_by",
    "enclosed_by",
    "joined_by",
    "preceded_by",
    "succeeded_by",
    "surrounded_by",
]


def preceded_by[T](lead: Parser[object], parser: Parser[T]) -> Parser[T]:
    """Parse a mandatory lead, discard it, return parser's value.

    Example:
        preceded_by(char("<"), literal("div"))("<div />") → "div", remainder " />"
    """
    return map_(and_(lead, parser), lambda pair: pair[1])


def succeeded_by[T](trail: Parser[object], parser: Parser[T]) -> Parser[T]:
    """Parse parser then a mandatory trail, discard the trail.

    Note the argument order: the trailing parser comes first.

    Example:
        succeeded_by(char(","), char("a"))("a,") → "a", remainder ""
    """
    return map_(and_(parser, trail), lambda pair: pair[0])


def enclosed_by[T](
    lead: Parser[object], trail: Parser[object], parser: Parser[T]
) -> Parser[T]:
    """Parse parser between a mandatory lead and a mandatory trail."""
    return preceded_by(lead, succeeded_by(trail, parser))


delimited_by = enclosed_by


def surrounded_by[T](delimiter: Parser[object], parser: Parser[T]) -> Parser[T]:
    """Parse parser with the same delimiter on both sides.

    Example:
        surrounded_by(char('"'), literal("quote"))('"quote"') → "quote"
    """
    return enclosed_by(delimiter, delimiter, parser)


def joined_by[T](separator: Parser[object], parser: Parser[T]) -> Parser[tuple[T, T]]:
    """Parse exactly two occurrences of parser separated by separator.

    Only pairs are supported; longer separated lists need many().
    """
    return and_(succeeded_by(separator, parser), parser)
