"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def reference_text():
    """Worked example dataset as a user would type it."""
    return "13,9,14,11,8,11,10,8,4,11"


@pytest.fixture
def reference_values():
    """Worked example dataset, in input order."""
    return [13, 9, 14, 11, 8, 11, 10, 8, 4, 11]


@pytest.fixture
def random_integers(rng):
    """Larger discrete dataset with many ties."""
    return rng.integers(-20, 21, size=500)
