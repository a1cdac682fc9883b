"""Pytest configuration for the TinyParsec test suite.

Hypothesis profiles:
- dev: 500 examples per property; the default for local runs
- ci: 50 derandomized examples; chosen automatically when CI=true
- verbose: 100 examples with Hypothesis progress output

HYPOTHESIS_PROFILE=<name> overrides the automatic choice.

Tests marked @pytest.mark.fuzz (tests/fuzz/) are skipped unless requested
with `pytest -m fuzz` or by naming a fuzz path on the command line.
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

# =============================================================================
# HYPOTHESIS PROFILES
# =============================================================================

_PHASES = [Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink]

settings.register_profile("dev", max_examples=500, phases=_PHASES)
settings.register_profile(
    "ci", max_examples=50, phases=_PHASES, derandomize=True, print_blob=True
)
settings.register_profile(
    "verbose", max_examples=100, phases=_PHASES, verbosity=Verbosity.verbose
)


def _select_profile() -> str:
    requested = os.environ.get("HYPOTHESIS_PROFILE")
    if requested in ("dev", "ci", "verbose"):
        return requested
    return "ci" if os.environ.get("CI") == "true" else "dev"


settings.load_profile(_select_profile())


# =============================================================================
# FUZZ MARKER
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register the fuzz marker."""
    config.addinivalue_line(
        "markers", "fuzz: long-running parser fuzzing, skipped unless requested"
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip fuzz tests in ordinary runs."""
    if "fuzz" in str(config.getoption("-m", default="")):
        return
    if any("fuzz" in str(arg) for arg in config.invocation_params.args):
        return

    skip_fuzz = pytest.mark.skip(reason="parser fuzzing - run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)
