"""Hypothesis strategies for TinyParsec property-based testing.

Usage:
    from tests.strategies import parser_trees, source_text, digit_strings

Event-Emitting Strategies (HypoFuzz-Optimized):
    parser_trees emits hypothesis.event() calls naming the root combinator.
"""

from .parsers import (
    PARSER_ALPHABET,
    digit_strings,
    leaf_parsers,
    number_literals,
    parser_trees,
    source_text,
)

__all__ = [
    "PARSER_ALPHABET",
    "digit_strings",
    "leaf_parsers",
    "number_literals",
    "parser_trees",
    "source_text",
]
