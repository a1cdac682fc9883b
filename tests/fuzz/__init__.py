"""Fuzz testing infrastructure for TinyParsec.

This package contains:
- shadow_numbers: Regular-expression reference for the numeric parsers
- test_number_oracle: Differential testing of numeric parsers against the shadow
- test_combinator_state_machine: Stateful fuzzer composing parsers step by step

Python 3.13+.
"""
