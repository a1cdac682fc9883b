"""Primitive parsers.

This module provides the leaf parsers every grammar is built from:
single characters, literals and the always-succeeding empty parser.

Every primitive is atomic. On failure it reports the input it was given
as the remainder; on success it consumes only what it matched.
"""

from collections.abc import Callable
from typing import Literal

from tinyparsec.diagnostics import ErrorTemplate
from tinyparsec.result import ParseResult, Parser, fail, succeed

__all__ = ["char", "empty", "letter", "literal", "satisfy"]


def _require_single_char(c: str) -> None:
    if len(c) != 1:
        msg = f"Expected a single character, got {c!r}"
        raise ValueError(msg)


def satisfy(predicate: Callable[[str], bool]) -> Parser[str]:
    """Parse one character accepted by predicate.

    Examples:
        satisfy(str.isupper)("Ab") → "A", remainder "b"
        satisfy(str.isupper)("ab") → failure, remainder "ab"

    Args:
        predicate: Test applied to the first character of the input

    Returns:
        Parser yielding the consumed character
    """

    def parse(source: str) -> ParseResult[str]:
        if not source:
            return fail(source, ErrorTemplate.unexpected_end_of_input())
        if not predicate(source[0]):
            return fail(source, ErrorTemplate.character_mismatch(source))
        return succeed(source[0], source[1:])

    return parse


def char[C: str](c: C) -> Parser[C]:
    """Parse exactly the character c.

    The parser is typed by the character it was built with, so
    ``char("a")`` is a ``Parser[Literal["a"]]`` to a type checker.

    Args:
        c: Single character to match

    Returns:
        Parser yielding c

    Raises:
        ValueError: If c is not a single character
    """
    _require_single_char(c)

    def parse(source: str) -> ParseResult[C]:
        if source[:1] == c:
            return succeed(c, source[1:])
        return fail(source, ErrorTemplate.char_mismatch(c, source))

    return parse


def letter(c: str) -> Parser[str]:
    """Parse the letter c in either case, yielding its lowercase form.

    Examples:
        letter("a")("Abc") → "a", remainder "bc"
        letter("Z")("zillow") → "z", remainder "illow"

    Args:
        c: Single letter to match, case-insensitively

    Returns:
        Parser yielding the lowercase letter

    Raises:
        ValueError: If c is not a single character
    """
    _require_single_char(c)
    lowered = c.lower()

    def parse(source: str) -> ParseResult[str]:
        if source[:1].lower() == lowered:
            return succeed(lowered, source[1:])
        return fail(source, ErrorTemplate.char_mismatch(c, source))

    return parse


def literal[S: str](text: S) -> Parser[S]:
    """Parse the whole of text as a prefix of the input.

    Atomic: either all of text is consumed or nothing is.

    Args:
        text: Literal string to match

    Returns:
        Parser yielding text
    """
    size = len(text)

    def parse(source: str) -> ParseResult[S]:
        if source.startswith(text):
            return succeed(text, source[size:])
        return fail(source, ErrorTemplate.literal_mismatch(text, source))

    return parse


def empty(source: str) -> ParseResult[Literal[""]]:
    """Succeed without consuming input, yielding the empty string."""
    return succeed("", source)
