"""Performance benchmarks for TinyParsec.

Benchmarks use pytest-benchmark to measure and track performance of critical operations.
Prevents performance regressions in primitives, repetition and numeric parsing.

Python 3.13+.
"""

from __future__ import annotations

__all__: list[str] = []
