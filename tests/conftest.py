"""Pytest configuration and shared fixtures."""

import numpy as np
import pytest

from simreturns.analysis.random_source import FixedSource, GeneratorSource


@pytest.fixture
def fixed_draws():
    """Twelve uniform draws covering both tails and the middle."""
    return [0.05, 0.25, 0.5, 0.75, 0.95, 0.33, 0.66, 0.1, 0.9, 0.42, 0.58, 0.2]


@pytest.fixture
def fixed_source(fixed_draws):
    return FixedSource(fixed_draws)


@pytest.fixture
def seeded_source():
    return GeneratorSource(np.random.default_rng(12345))
