"""Numeric literal parsers.

Decimal literals built on top of the combinator engine:

    digit    ::= "0" | [1-9]
    digits   ::= digit+
    natural  ::= digits
    integer  ::= "-"? digits
    number   ::= "-"? digits ("." digits)?

Only ASCII digits are accepted. Leading zeros are allowed. A digit run
must be non-empty: an input with no digit where one is required is a
failure, never a success with an undefined value. Integer values are
bounded by the interpreter's integer string conversion limit; longer
digit runs fail with NUMBER_TOO_LONG instead of raising.
"""

from typing import Literal

from tinyparsec.constants import ASCII_DIGITS, DECIMAL_POINT, MINUS_SIGN
from tinyparsec.diagnostics import ErrorTemplate
from tinyparsec.parser.combinators import and_, any_of, many, map_, optional
from tinyparsec.parser.primitives import char
from tinyparsec.result import ParseResult, Parser, fail, succeed

__all__ = [
    "digit",
    "digits",
    "integer",
    "natural",
    "number",
    "positive_digit",
    "zero",
]

zero: Parser[str] = char(ASCII_DIGITS[0])

positive_digit: Parser[str] = any_of(*(char(d) for d in ASCII_DIGITS[1:]))

digit: Parser[str] = any_of(zero, positive_digit)

_digit_run: Parser[str] = map_(many(digit), "".join)


def digits(source: str) -> ParseResult[str]:
    """Parse a non-empty run of digits, yielding the matched text.

    Examples:
        digits("0042x") → "0042", remainder "x"
        digits("x42") → failure (EXPECTED_DIGITS), remainder "x42"
    """
    result = _digit_run(source)
    if not result.value:
        return fail(source, ErrorTemplate.expected_digits(source))
    return result


def _join_pair(pair: tuple[str, str]) -> str:
    return pair[0] + pair[1]


# Sign and digits as text. number() needs the text, not the int:
# int("-0") is 0, so a reparse of the int would drop the sign of "-0.5".
_signed_digits: Parser[str] = map_(and_(optional(char(MINUS_SIGN)), digits), _join_pair)

_fraction: Parser[str] = map_(and_(char(DECIMAL_POINT), digits), _join_pair)

_number_parts: Parser[tuple[str, str | Literal[""]]] = and_(_signed_digits, optional(_fraction))


def _as_int(text: str, source: str, remainder: str) -> ParseResult[int]:
    # int() refuses digit strings longer than sys.get_int_max_str_digits().
    try:
        value = int(text)
    except ValueError:
        return fail(source, ErrorTemplate.number_too_long(text, source))
    return succeed(value, remainder)


def natural(source: str) -> ParseResult[int]:
    """Parse an unsigned decimal integer.

    Fails with NUMBER_TOO_LONG when the digit run is longer than the
    interpreter's integer string conversion limit.
    """
    result = digits(source)
    if not result.ok:
        return fail(source, result.error)
    return _as_int(result.value, source, result.remainder)


def integer(source: str) -> ParseResult[int]:
    """Parse an optionally negative decimal integer."""
    result = _signed_digits(source)
    if not result.ok:
        return fail(source, result.error)
    return _as_int(result.value, source, result.remainder)


def number(source: str) -> ParseResult[int | float]:
    """Parse an optionally negative decimal literal.

    Examples:
        number("-120.034") → -120.034, remainder ""
        number("42abc") → 42, remainder "abc"
        number("1.") → 1, remainder "."
    """
    result = _number_parts(source)
    if not result.ok:
        return fail(source, result.error)
    integer_text, fraction_text = result.value
    if fraction_text:
        return succeed(float(integer_text + fraction_text), result.remainder)
    return _as_int(integer_text, source, result.remainder)
