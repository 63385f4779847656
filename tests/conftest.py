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
def two_group_matrix():
    """Model matrix [1, g] and response for groups x=1..5 and y=2..6."""
    g = np.repeat([0.0, 1.0], 5)
    X = np.column_stack([np.ones(10), g])
    y = np.array([1, 2, 3, 4, 5, 2, 3, 4, 5, 6], dtype=float)
    return X, y
