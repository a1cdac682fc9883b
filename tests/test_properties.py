"""Algebraic properties of composed parsers.

Parsers are generated from the library's own primitives and combinators
(see tests.strategies.parsers), then checked against laws that must hold
for every composition:

- A failure reports the input it was given; a success reports a suffix.
- Ordered choice returns the first branch's success unchanged.
- many() is total and stops on zero-width matches.
- map_() with the identity function changes nothing.
- all_of() yields one value per parser.
- Parsers are pure: the same input always gives the same result.
"""

from __future__ import annotations

import pytest
from hypothesis import event, example, given
from hypothesis import strategies as st

from tests.strategies import parser_trees, source_text
from tinyparsec import (
    Parser,
    all_of,
    and_,
    char,
    empty,
    exactly,
    literal,
    many,
    map_,
    natural,
    number,
    or_,
    succeed,
)

type NamedParser = tuple[str, Parser[object]]


# ============================================================================
# REMAINDER CONTRACT
# ============================================================================


class TestRemainderContract:
    """Every composed parser honors the backtracking contract."""

    @given(named=parser_trees(), source=source_text)
    def test_failure_backtracks_success_consumes_suffix(
        self, named: NamedParser, source: str
    ) -> None:
        """PROPERTY: failure remainder == input; success remainder is a suffix."""
        _name, parser = named
        result = parser(source)
        event(f"outcome={'success' if result.ok else 'failure'}")

        if result.ok:
            assert source.endswith(result.remainder)
        else:
            assert result.remainder == source

    @given(named=parser_trees(), source=source_text)
    def test_parsers_are_pure(self, named: NamedParser, source: str) -> None:
        """PROPERTY: applying a parser twice gives equal results."""
        _name, parser = named

        assert parser(source) == parser(source)

    @given(first=parser_trees(), second=parser_trees(), source=source_text)
    def test_and_backtracks(
        self, first: NamedParser, second: NamedParser, source: str
    ) -> None:
        """PROPERTY: and_ failure reports the original input."""
        result = and_(first[1], second[1])(source)
        event(f"outcome={'success' if result.ok else 'failure'}")

        if not result.ok:
            assert result.remainder == source

    @given(
        named=parser_trees(), n=st.integers(min_value=1, max_value=4), source=source_text
    )
    def test_exactly_backtracks(self, named: NamedParser, n: int, source: str) -> None:
        """PROPERTY: exactly failure reports the original input."""
        result = exactly(n, named[1])(source)
        event(f"outcome={'success' if result.ok else 'failure'}")

        if result.ok:
            assert len(result.value) == n
        else:
            assert result.remainder == source


# ============================================================================
# CHOICE AND MAPPING
# ============================================================================


class TestChoiceAndMapping:
    """Laws of or_ and map_."""

    @given(first=parser_trees(), second=parser_trees(), source=source_text)
    def test_ordered_choice(
        self, first: NamedParser, second: NamedParser, source: str
    ) -> None:
        """PROPERTY: or_(p, q)(i) == p(i) when p(i) succeeds, else q(i)."""
        p, q = first[1], second[1]
        first_result = p(source)
        event(f"first_branch={'success' if first_result.ok else 'failure'}")

        expected = first_result if first_result.ok else q(source)
        assert or_(p, q)(source) == expected

    @given(named=parser_trees(), source=source_text)
    def test_map_identity(self, named: NamedParser, source: str) -> None:
        """PROPERTY: map_(p, identity)(i) == p(i)."""
        _name, parser = named

        assert map_(parser, lambda value: value)(source) == parser(source)

    @given(named=parser_trees(), source=source_text)
    def test_map_composition(self, named: NamedParser, source: str) -> None:
        """PROPERTY: mapping f then g equals mapping g after f."""
        _name, parser = named
        f = repr
        g = len

        composed = map_(map_(parser, f), g)(source)
        fused = map_(parser, lambda value: g(f(value)))(source)

        assert composed == fused


# ============================================================================
# REPETITION
# ============================================================================


class TestRepetition:
    """Laws of many and all_of."""

    @given(named=parser_trees(), source=source_text)
    def test_many_is_total(self, named: NamedParser, source: str) -> None:
        """PROPERTY: many(p) always succeeds with a list."""
        _name, parser = named
        result = many(parser)(source)
        event(f"many_count={min(len(result.value), 3)}")

        assert result.ok
        assert isinstance(result.value, list)
        assert source.endswith(result.remainder)

    @given(named=parser_trees(), source=source_text)
    def test_many_of_failing_parser(self, named: NamedParser, source: str) -> None:
        """PROPERTY: many(p)(i) == Success([], i) when p(i) fails."""
        _name, parser = named
        failed = not parser(source).ok
        event(f"inner_failed={failed}")

        if failed:
            assert many(parser)(source) == succeed([], source)

    @given(source=source_text)
    @example(source="")
    def test_many_empty_terminates(self, source: str) -> None:
        """PROPERTY: many(empty)(i) == Success([""], i)."""
        assert many(empty)(source) == succeed([""], source)

    @given(
        parsers=st.lists(parser_trees(), min_size=1, max_size=4), source=source_text
    )
    def test_all_of_arity(self, parsers: list[NamedParser], source: str) -> None:
        """PROPERTY: all_of(p0..pn) yields n+1 values, each from its parser."""
        parser_fns = [parser for _name, parser in parsers]
        result = all_of(*parser_fns)(source)
        event(f"outcome={'success' if result.ok else 'failure'}")

        if not result.ok:
            assert result.remainder == source
            return

        assert len(result.value) == len(parser_fns)
        remainder = source
        for parser, value in zip(parser_fns, result.value, strict=True):
            step = parser(remainder)
            assert step.value == value
            remainder = step.remainder
        assert remainder == result.remainder


# ============================================================================
# CONCRETE SCENARIOS
# ============================================================================


class TestScenarios:
    """End-to-end examples of the public API."""

    @pytest.mark.parametrize(
        ("parser", "source", "value", "remainder"),
        [
            (char("a"), "abc", "a", "bc"),
            (many(char("a")), "aaaAaaa", ["a", "a", "a"], "Aaaa"),
            (natural, "00000104", 104, ""),
            (number, "-120.034", -120.034, ""),
        ],
    )
    def test_success(
        self, parser: Parser[object], source: str, value: object, remainder: str
    ) -> None:
        """Successful parses produce the documented value and remainder."""
        assert parser(source) == succeed(value, remainder)

    @pytest.mark.parametrize(
        ("parser", "source"),
        [
            (and_(char("a"), char("b")), "ac"),
            (exactly(3, literal("la")), "lalal"),
        ],
    )
    def test_failure(self, parser: Parser[object], source: str) -> None:
        """Failed parses report the whole input."""
        result = parser(source)

        assert not result.ok
        assert result.remainder == source
