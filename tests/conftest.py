"""
Pytest configuration and shared fixtures.
"""

import pytest
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from rent_vs_invest.calculations.assumptions import DEFAULT_ASSUMPTIONS
from rent_vs_invest.calculations.financials import evaluate_cached


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "integration: marks integration tests")


@pytest.fixture
def defaults():
    """The default assumptions."""
    return DEFAULT_ASSUMPTIONS


@pytest.fixture(autouse=True)
def clear_evaluation_cache():
    """Start every test with an empty memo cache."""
    evaluate_cached.cache_clear()
    yield
    evaluate_cached.cache_clear()
