"""Unit tests for simreturns.analysis.random_source."""

import numpy as np
import pytest

from simreturns.analysis.random_source import FixedSource, GeneratorSource
from simreturns.errors import InvalidParameter, RandomSourceExhausted


class TestGeneratorSource:
    def test_draws_in_open_closed_unit_interval(self):
        draws = GeneratorSource.from_seed(3).uniform(50000)
        assert draws.shape == (50000,)
        assert np.all(draws > 0.0)
        assert np.all(draws <= 1.0)

    def test_reproducible_from_seed(self):
        a = GeneratorSource.from_seed(42).uniform(10)
        b = GeneratorSource.from_seed(42).uniform(10)
        np.testing.assert_array_equal(a, b)

    def test_wraps_existing_generator(self):
        rng = np.random.default_rng(5)
        expected = 1.0 - np.random.default_rng(5).random(4)
        np.testing.assert_array_equal(GeneratorSource(rng).uniform(4), expected)


class TestFixedSource:
    def test_replays_in_order(self):
        source = FixedSource([0.1, 0.2, 0.3])
        np.testing.assert_array_equal(source.uniform(2), [0.1, 0.2])
        np.testing.assert_array_equal(source.uniform(1), [0.3])
        assert source.remaining == 0

    def test_exhaustion(self):
        source = FixedSource([0.5])
        with pytest.raises(RandomSourceExhausted):
            source.uniform(2)
        assert source.remaining == 1

    @pytest.mark.parametrize("bad", [0.0, -0.1, 1.5, float("nan")])
    def test_rejects_out_of_range(self, bad):
        with pytest.raises(InvalidParameter):
            FixedSource([0.5, bad])

    def test_accepts_one(self):
        assert FixedSource([1.0]).uniform(1)[0] == 1.0
