"""Pytest configuration for the lazyshrink test suite.

Hypothesis profiles (select with HYPOTHESIS_PROFILE, or CI=true for "ci"):
    dev      500 examples, local default
    ci       50 derandomized examples
    verbose  100 examples with progress output

Tests marked ``fuzz`` (tests/fuzz/) are skipped unless the run selects
them with ``pytest -m fuzz``. The marker itself is declared in
pyproject.toml.
"""

import os

import pytest
from hypothesis import Verbosity, settings

_PROFILES = {
    "dev": {"max_examples": 500},
    "ci": {"max_examples": 50, "derandomize": True, "print_blob": True},
    "verbose": {"max_examples": 100, "verbosity": Verbosity.verbose},
}

for _name, _options in _PROFILES.items():
    settings.register_profile(_name, **_options)


def _detect_profile() -> str:
    explicit = os.environ.get("HYPOTHESIS_PROFILE", "")
    if explicit in _PROFILES:
        return explicit
    return "ci" if os.environ.get("CI") == "true" else "dev"


settings.load_profile(_detect_profile())


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip fuzz-marked tests unless the marker expression asks for them."""
    if "fuzz" in str(config.getoption("-m", default="")):
        return
    skip_fuzz = pytest.mark.skip(reason="fuzz test - run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)
