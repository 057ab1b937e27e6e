"""Return simulation and the helpers that shape its output for display."""

from simreturns.analysis.random_source import FixedSource, GeneratorSource, RandomSource
from simreturns.analysis.simulation import NormalMethod, compute_statistics, simulate

__all__ = [
    "FixedSource",
    "GeneratorSource",
    "NormalMethod",
    "RandomSource",
    "compute_statistics",
    "simulate",
]
