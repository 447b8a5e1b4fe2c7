"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pylikely.random import RandomSource


@pytest.fixture
def rng():
    """Seeded numpy generator for reproducible test inputs."""
    return np.random.default_rng(42)


@pytest.fixture
def source():
    """Independent, seeded RandomSource."""
    return RandomSource(12345)


@pytest.fixture
def shared_source():
    """The process-wide RandomSource, seeded, and dropped after the test."""
    RandomSource.reset_instance()
    shared = RandomSource.instance()
    shared.set_seed(2024)
    yield shared
    RandomSource.reset_instance()


@pytest.fixture
def spd_matrix(rng):
    """Random 4x4 symmetric positive definite matrix."""
    b = rng.standard_normal((4, 4))
    return b @ b.T + 4.0 * np.eye(4)
