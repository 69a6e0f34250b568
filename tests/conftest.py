"""Pytest configuration and shared fixtures for the all2trac test suite."""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from all2trac.ast import Table, TableBuilder

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "slow: Slow tests that may take several seconds")
    config.addinivalue_line("markers", "fuzzing: Property-based tests driven by Hypothesis")


@pytest.fixture
def two_by_two_table() -> Table:
    """Provide the two-row table ``a | bb`` / ``ccc | d``."""
    return TableBuilder().add_row(["a", "bb"]).add_row(["ccc", "d"]).get_table()


@pytest.fixture
def header_table() -> Table:
    """Provide a table with a header row, a rule, and one body row."""
    return TableBuilder().add_row(["Name", "Qty"]).add_rule().add_row(["bolt", "12"]).get_table()
