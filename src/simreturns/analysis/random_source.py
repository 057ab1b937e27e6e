"""Injectable sources of uniform draws for the return simulator."""

import logging
from typing import Iterable, Protocol

import numpy as np

from simreturns.errors import InvalidParameter, RandomSourceExhausted

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    def uniform(self, size: int) -> np.ndarray:
        """Return ``size`` independent uniform draws in (0, 1]."""
        ...


class GeneratorSource:
    """Uniform draws from a NumPy ``Generator``.

    ``Generator.random`` samples [0, 1); the draws are reflected to (0, 1]
    so that ``log(u)`` is always finite.
    """

    def __init__(self, rng: np.random.Generator):
        self._rng = rng

    @classmethod
    def from_seed(cls, seed: int | None = None) -> "GeneratorSource":
        return cls(np.random.default_rng(seed))

    def uniform(self, size: int) -> np.ndarray:
        return 1.0 - self._rng.random(size)


class FixedSource:
    """Replays a fixed sequence of draws, for reproducible runs."""

    def __init__(self, values: Iterable[float]):
        draws = np.asarray(list(values), dtype=float)
        if np.any(~((draws > 0.0) & (draws <= 1.0))):
            raise InvalidParameter("fixed draws must lie in (0, 1]")
        self._draws = draws
        self._pos = 0

    @property
    def remaining(self) -> int:
        return len(self._draws) - self._pos

    def uniform(self, size: int) -> np.ndarray:
        if size > self.remaining:
            raise RandomSourceExhausted(
                f"requested {size} draws, only {self.remaining} remaining"
            )
        out = self._draws[self._pos:self._pos + size].copy()
        self._pos += size
        logger.debug("FixedSource: served %d draws (%d left)", size, self.remaining)
        return out
