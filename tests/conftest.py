"""Shared sample data."""

import numpy as np
import pytest


REFERENCE_VALUES = [
    1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 2.0, 2.0, 2.0, 2.0, 2.0, 2.0, 3.0, 3.0, 3.0, 3.0, 3.0, 3.0,
    3.0, 3.0, 3.0, 2.0, 2.0, 2.0, 2.0, 1.0, 1.0, 12.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0, 9.0,
    10.0, 11.0, 5.0, 6.0, 7.0, 6.0, 5.0, 6.0, 7.0, 8.0, 8.0, 9.0, 8.0, 7.0, 6.0, 7.0, 8.0,
    9.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 2.0, 2.0, 2.0, 3.0, 3.0, 3.0, 4.0, 4.0, 4.0, 3.0,
    2.0, 2.0, 2.0, 1.0, 1.0, 1.0,
]


@pytest.fixture
def reference_values():
    """76 small integers with a long right tail (1..12)."""
    return list(REFERENCE_VALUES)


@pytest.fixture
def continuous_sample():
    """Two well separated clusters plus noise, no duplicate values."""
    rng = np.random.default_rng(7)
    return np.concatenate([
        rng.normal(0.0, 1.0, 40),
        rng.normal(10.0, 1.5, 30),
        rng.lognormal(3.0, 0.4, 10),
    ])
