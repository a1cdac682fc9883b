"""Core combinators.

Higher-order functions that build new parsers out of existing ones:
mapping, ordered choice, sequencing and repetition.

Backtracking contract:
    A combinator that fails reports the input it was given as the
    remainder, never an intermediate position reached before the failing
    sub-parser. Alternation retries every branch against that same input.

Names that collide with Python keywords or builtins carry a suffix:
map_, or_, and_, any_of, all_of.
"""

import logging
from collections.abc import Callable
from functools import reduce
from typing import Any, Literal

from tinyparsec.diagnostics import ErrorTemplate
from tinyparsec.parser.primitives import empty
from tinyparsec.result import Failure, ParseResult, Parser, Success, fail, succeed

__all__ = [
    "all_of",
    "and_",
    "any_of",
    "exactly",
    "many",
    "map_",
    "optional",
    "or_",
    "sequence",
    "some",
]

logger = logging.getLogger(__name__)


def map_[T, R](parser: Parser[T], fn: Callable[[T], R]) -> Parser[R]:
    """Transform the value of a successful parse with fn.

    The remainder is left untouched and failures propagate unchanged.
    """

    def parse(source: str) -> ParseResult[R]:
        result = parser(source)
        match result.outcome:
            case Success(value=value):
                return succeed(fn(value), result.remainder)
            case Failure():
                return result  # type: ignore[return-value]

    return parse


def or_[T, R](first: Parser[T], second: Parser[R]) -> Parser[T | R]:
    """Ordered choice: try first, then second on the original input.

    The first success wins even if second would also match. When both
    fail, the failure of second is returned.
    """

    def parse(source: str) -> ParseResult[T | R]:
        result = first(source)
        if result.ok:
            return result
        return second(source)

    return parse


def any_of[T](first: Parser[T], *rest: Parser[T]) -> Parser[T]:
    """Ordered choice over one or more alternatives.

    Alternatives are tried left to right, each against the original input.
    When all fail, the failure of the last alternative is returned.

    Example:
        >>> sign = any_of(char("+"), char("-"))
        >>> sign("-1").value
        '-'
    """

    def parse(source: str) -> ParseResult[T]:
        result = first(source)
        for parser in rest:
            if result.ok:
                break
            result = parser(source)
        return result

    return parse


def and_[T, R](first: Parser[T], second: Parser[R]) -> Parser[tuple[T, R]]:
    """Sequence: first, then second on first's remainder.

    Yields the pair of both values. If either stage fails, the failure is
    reported with the original input as remainder.
    """

    def parse(source: str) -> ParseResult[tuple[T, R]]:
        first_result = first(source)
        if not first_result.ok:
            return fail(source, first_result.error)

        second_result = second(first_result.remainder)
        if not second_result.ok:
            return fail(source, second_result.error)

        return succeed(
            (first_result.value, second_result.value), second_result.remainder
        )

    return parse


def all_of(first: Parser[Any], *rest: Parser[Any]) -> Parser[list[Any]]:
    """Sequence of one or more parsers, flattened into a list.

    Left fold of and_() over rest, seeded by first. On success the list
    holds exactly one value per parser, in parser order. Any failure fails
    the whole sequence with the original input as remainder.
    """
    return reduce(
        lambda acc, parser: map_(and_(acc, parser), lambda pair: [*pair[0], pair[1]]),
        rest,
        map_(first, lambda value: [value]),
    )


sequence = all_of


def exactly[T](n: int, parser: Parser[T]) -> Parser[list[T]]:
    """Apply parser exactly n times, collecting the values.

    For n <= 0 the parser succeeds immediately with an empty list and
    consumes nothing. Fewer than n matches fail with the original input
    as remainder.
    """
    if n <= 0:
        logger.debug("exactly() called with n=%d; always succeeds with []", n)

    def parse(source: str) -> ParseResult[list[T]]:
        values: list[T] = []
        remainder = source
        for _ in range(n):
            result = parser(remainder)
            if not result.ok:
                return fail(source, ErrorTemplate.repetition_shortfall(n, len(values), source))
            values.append(result.value)
            remainder = result.remainder
        return succeed(values, remainder)

    return parse


def many[T](parser: Parser[T]) -> Parser[list[T]]:
    """Apply parser zero or more times, greedily.

    Never fails: if the first attempt fails the result is an empty list
    with the input untouched.

    Stall guard:
        The first successful value is always collected. Repetition then
        stops at the first failure, or at the first success that consumed
        nothing, whose value is not collected. This keeps many(empty) and
        many(optional(p)) from looping forever:

        >>> many(empty)("abc")
        ParseResult(outcome=Success(value=['']), remainder='abc')
    """

    def parse(source: str) -> ParseResult[list[T]]:
        result = parser(source)
        if not result.ok:
            return succeed([], source)

        values = [result.value]
        remainder = result.remainder
        if len(remainder) == len(source):
            logger.debug("many() stalled on first match; stopping after one value")
            return succeed(values, remainder)

        while True:
            result = parser(remainder)
            if not result.ok:
                break
            if len(result.remainder) == len(remainder):
                logger.debug("many() stalled after %d values; stopping", len(values))
                break
            values.append(result.value)
            remainder = result.remainder
        return succeed(values, remainder)

    return parse


some = many


def optional[T](parser: Parser[T]) -> Parser[T | Literal[""]]:
    """Parse parser if possible, otherwise succeed with "" consuming nothing."""
    return or_(parser, empty)
