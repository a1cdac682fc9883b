"""pytest-benchmark configuration for TinyParsec benchmarks.

Adds result metadata and shared benchmark inputs.

Python 3.13+.
"""

from __future__ import annotations

import pytest


def pytest_benchmark_update_json(config, benchmarks, output_json):  # noqa: ARG001
    """Add TinyParsec metadata to benchmark results.

    Args:
        config: pytest config (required by pytest-benchmark hook signature)
        benchmarks: benchmark results (required by pytest-benchmark hook signature)
        output_json: JSON output dict to modify
    """
    output_json["project"] = "TinyParsec"
    output_json["python_version"] = "3.13+"


@pytest.fixture(scope="session")
def long_digit_run() -> str:
    """Digit string long enough to make per-character costs visible."""
    return "1234567890" * 200
