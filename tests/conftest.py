"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pylinalg.dense import Vector


# Sample vector set run by the demo driver
SAMPLE_COORDS = (
    (1.0, 2.0, 3.0, 4.0),
    (-1.0, 2.0, 4.0, 1.0),
    (2.0, 0.0, 5.0, -7.0),
)


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def sample_vectors():
    """The three independent 4-D sample vectors."""
    return [Vector.from_array(c, 4) for c in SAMPLE_COORDS]


@pytest.fixture
def dependent_vectors(sample_vectors):
    """Sample vectors plus (0,4,7,5) = v0 + v1: rank 3."""
    extra = sample_vectors[0] + sample_vectors[1]
    return sample_vectors + [extra]
