"""Shared pytest configuration for the currencytext tests.

Hypothesis profiles:
- dev (default): 500 examples per property; separator and round-trip
  properties get enough inputs to hit every classifier rule
- ci: 50 derandomized examples, so CI failures reproduce exactly
- verbose: 100 examples with per-example output, for debugging a
  failing round-trip

The profile comes from HYPOTHESIS_PROFILE, else "ci" when CI=true, else
"dev".

The fuzz classes (whole option space formatting, parser totality over
arbitrary text) are skipped unless selected with `pytest -m fuzz`.
"""

import os
from collections.abc import Mapping

import pytest
from hypothesis import Phase, Verbosity, settings

# =============================================================================
# HYPOTHESIS PROFILES
# =============================================================================

_PHASES = (Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink)

settings.register_profile("dev", max_examples=500, phases=_PHASES)
settings.register_profile(
    "ci", max_examples=50, phases=_PHASES, derandomize=True, print_blob=True
)
settings.register_profile(
    "verbose", max_examples=100, phases=_PHASES, verbosity=Verbosity.verbose
)

_PROFILE_NAMES = frozenset({"dev", "ci", "verbose"})


def _select_profile(environ: Mapping[str, str]) -> str:
    """Pick the Hypothesis profile: explicit name, then CI, then dev."""
    requested = environ.get("HYPOTHESIS_PROFILE", "")
    if requested in _PROFILE_NAMES:
        return requested
    return "ci" if environ.get("CI") == "true" else "dev"


settings.load_profile(_select_profile(os.environ))


# =============================================================================
# FUZZ MARKER GATE
# =============================================================================


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip fuzz-marked tests unless the run selects them with -m fuzz."""
    if "fuzz" in str(config.getoption("-m", default="")):
        return

    skip_fuzz = pytest.mark.skip(reason="fuzz test: run with pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)
