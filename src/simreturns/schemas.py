"""Pydantic result schemas for simulated return runs."""

from pydantic import BaseModel, ConfigDict, Field


class StatisticsSummary(BaseModel):
    """Summary statistics of one simulated run (fractions, not percent)."""

    model_config = ConfigDict(frozen=True)

    arith_mean: float = Field(description="Mean monthly return")
    geom_mean: float = Field(description="Constant monthly return reproducing the holding-period return")
    arith_mean_annual: float = Field(description="arith_mean * 12")
    geom_mean_annual: float = Field(description="(1 + geom_mean) ** 12 - 1")
    volatility_annual: float = Field(description="Population std of monthly returns * sqrt(12)")
    holding_period: float = Field(description="Final value / 100 - 1")


class SimulationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    drift_pct: float
    volatility_pct: float
    months: int
    cumulative: tuple[float, ...] = Field(description="months + 1 values starting at 100")
    monthly_returns: tuple[float, ...] = Field(description="Fractional return per month")
    monthly_returns_pct: tuple[float | None, ...] = Field(
        description="months + 1 values; month 0 is None (no return yet)"
    )
    stats: StatisticsSummary

    @property
    def final_value(self) -> float:
        return self.cumulative[-1]
