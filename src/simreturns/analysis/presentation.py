"""Shape simulation results for display: date labels, table, axis, bars."""

from datetime import date
from typing import NamedTuple, Sequence

import numpy as np

from simreturns.schemas import SimulationResult, StatisticsSummary

AXIS_PADDING = 0.10
DEFAULT_TICKS = 8

STAT_LABELS = {
    "arith_mean_annual": "Arith. Mean (Ann.)",
    "geom_mean_annual": "Geom. Mean (Ann.)",
    "volatility_annual": "Volatility (Ann.)",
    "holding_period": "Hold. Period Return",
}


class TableRow(NamedTuple):
    label: str
    return_pct: float | None
    cumulative: float


class ValueAxis(NamedTuple):
    lower: float
    upper: float
    ticks: tuple[float, ...]


def month_labels(count: int, start: date | None = None) -> list[str]:
    """Short month labels (e.g. "Oct '26") starting at ``start``'s month."""
    start = start or date.today()
    labels = []
    for i in range(count):
        year, month = divmod(start.month - 1 + i, 12)
        d = date(start.year + year, month + 1, 1)
        labels.append(d.strftime("%b '%y"))
    return labels


def value_axis(cumulative: Sequence[float], ticks: int = DEFAULT_TICKS) -> ValueAxis:
    """Padded range and evenly spaced ticks for charting the value series."""
    values = np.asarray(cumulative, dtype=float)
    lo, hi = float(values.min()), float(values.max())
    pad = (hi - lo) * AXIS_PADDING
    if pad == 0.0:
        # Flat series: pad around the level instead of collapsing the axis
        pad = abs(hi) * AXIS_PADDING or 1.0
    lower, upper = lo - pad, hi + pad
    tick_values = tuple(float(t) for t in np.linspace(lower, upper, ticks))
    return ValueAxis(lower=lower, upper=upper, ticks=tick_values)


def returns_table(result: SimulationResult, start: date | None = None) -> list[TableRow]:
    labels = month_labels(len(result.cumulative), start)
    return [
        TableRow(label=label, return_pct=ret, cumulative=value)
        for label, ret, value in zip(labels, result.monthly_returns_pct, result.cumulative)
    ]


def stats_bars(stats: StatisticsSummary) -> list[tuple[str, float]]:
    """The annualised statistics and holding-period return, in percent."""
    return [(label, getattr(stats, field) * 100) for field, label in STAT_LABELS.items()]
