"""Monthly return simulation under geometric Brownian motion.

Draws one standard-normal shock per month, scales it to a monthly return
from annualised drift and volatility (both in percent), compounds the
returns from a starting value of 100, and summarises the run.
"""

import logging
from enum import Enum
from typing import Sequence

import numpy as np

from simreturns.analysis.random_source import RandomSource
from simreturns.errors import InvalidParameter
from simreturns.schemas import SimulationResult, StatisticsSummary

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

MONTHS_PER_YEAR = 12
START_VALUE = 100.0


class NormalMethod(str, Enum):
    # One uniform feeds both Box-Muller terms (reference tool behaviour, biased)
    SINGLE_DRAW = "single_draw"
    # Two independent uniforms per variate
    BOX_MULLER = "box_muller"


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------


def simulate(
    drift_pct: float,
    volatility_pct: float,
    months: int,
    source: RandomSource,
    method: NormalMethod | str = NormalMethod.SINGLE_DRAW,
) -> SimulationResult:
    """Simulate one path of monthly portfolio returns.

    Args:
        drift_pct: Annualised expected return in percent.
        volatility_pct: Annualised standard deviation in percent.
        months: Number of months to simulate (>= 1).
        source: Uniform draws in (0, 1]; the only source of randomness.
        method: How uniforms are turned into standard-normal variates.

    Returns:
        SimulationResult with the cumulative series (months + 1 values from
        100), monthly returns in percent (month 0 is None) and statistics.

    Raises:
        InvalidParameter: months is not an integer >= 1, or method is unknown.
    """
    if isinstance(months, bool) or not isinstance(months, (int, np.integer)):
        raise InvalidParameter(f"months must be an integer, got {months!r}")
    if months < 1:
        raise InvalidParameter(f"months must be at least 1, got {months}")
    try:
        method = NormalMethod(method)
    except ValueError as e:
        raise InvalidParameter(f"unknown normal method: {method!r}") from e

    months = int(months)
    logger.debug(
        "simulate: drift=%.4f%% vol=%.4f%% months=%d method=%s",
        drift_pct, volatility_pct, months, method.value,
    )

    z = _standard_normals(source, months, method)

    monthly_drift = (drift_pct / MONTHS_PER_YEAR) / 100
    monthly_returns = monthly_drift + (volatility_pct / 100) * z / np.sqrt(MONTHS_PER_YEAR)

    # Sequential product: cumulative[i] = cumulative[i-1] * (1 + r_i)
    cumulative = np.cumprod(np.concatenate(([START_VALUE], 1.0 + monthly_returns)))

    stats = compute_statistics(monthly_returns, cumulative)
    logger.debug(
        "simulate: final=%.4f holding_period=%.6f",
        cumulative[-1], stats.holding_period,
    )

    returns = tuple(float(r) for r in monthly_returns)
    return SimulationResult(
        drift_pct=drift_pct,
        volatility_pct=volatility_pct,
        months=months,
        cumulative=tuple(float(v) for v in cumulative),
        monthly_returns=returns,
        monthly_returns_pct=(None,) + tuple(r * 100 for r in returns),
        stats=stats,
    )


def compute_statistics(
    monthly_returns: Sequence[float] | np.ndarray,
    cumulative: Sequence[float] | np.ndarray,
) -> StatisticsSummary:
    """Derive the summary statistics from a run's two series.

    ``monthly_returns`` holds the fractional returns of months 1..n and
    ``cumulative`` the n + 1 compounded values starting at 100.
    """
    returns = np.asarray(monthly_returns, dtype=float)
    values = np.asarray(cumulative, dtype=float)
    n = len(returns)
    if n < 1:
        raise InvalidParameter("at least one monthly return is required")
    if len(values) != n + 1:
        raise InvalidParameter(
            f"cumulative series must have {n + 1} values, got {len(values)}"
        )

    final_ratio = float(values[-1]) / START_VALUE
    arith_mean = float(np.mean(returns))

    # A path that loses more than everything has no real geometric mean
    with np.errstate(invalid="ignore"):
        geom_mean = float(np.power(final_ratio, 1.0 / n)) - 1
    if np.isnan(geom_mean):
        logger.debug("compute_statistics: non-positive final value %.4f", values[-1])

    return StatisticsSummary(
        arith_mean=arith_mean,
        geom_mean=geom_mean,
        arith_mean_annual=arith_mean * MONTHS_PER_YEAR,
        geom_mean_annual=(1 + geom_mean) ** MONTHS_PER_YEAR - 1,
        volatility_annual=float(np.std(returns, ddof=0)) * float(np.sqrt(MONTHS_PER_YEAR)),
        holding_period=final_ratio - 1,
    )


def _standard_normals(source: RandomSource, n: int, method: NormalMethod) -> np.ndarray:
    if method == NormalMethod.SINGLE_DRAW:
        u = np.asarray(source.uniform(n), dtype=float)
        return np.sqrt(-2.0 * np.log(u)) * np.cos(2.0 * np.pi * u)

    pairs = np.asarray(source.uniform(2 * n), dtype=float).reshape(n, 2)
    return np.sqrt(-2.0 * np.log(pairs[:, 0])) * np.cos(2.0 * np.pi * pairs[:, 1])
