import logging

import click

from simreturns.analysis.presentation import returns_table, stats_bars, value_axis
from simreturns.analysis.random_source import GeneratorSource
from simreturns.analysis.simulation import NormalMethod, simulate
from simreturns.config import Settings
from simreturns.errors import SimulationError
from simreturns.logging_config import setup_logging

logger = logging.getLogger(__name__)

# Input ranges offered to users; the simulator itself accepts any real drift/volatility
DRIFT_RANGE = click.FloatRange(0, 50)
VOLATILITY_RANGE = click.FloatRange(0, 100)
MONTHS_RANGE = click.IntRange(1, 120)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool):
    """Simulated Portfolio Returns"""
    settings = Settings()
    setup_logging(settings)
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        for handler in logging.getLogger().handlers:
            handler.setLevel(logging.DEBUG)
    ctx.obj = settings


@cli.command()
@click.option("--drift", "-d", type=DRIFT_RANGE, default=None,
              help="Annualized drift in percent (default: settings)")
@click.option("--volatility", "-s", type=VOLATILITY_RANGE, default=None,
              help="Annualized volatility in percent (default: settings)")
@click.option("--months", "-m", type=MONTHS_RANGE, default=None,
              help="Number of months (default: settings)")
@click.option("--seed", type=int, default=None,
              help="Seed for reproducible draws (default: settings, else random)")
@click.option("--method", type=click.Choice([m.value for m in NormalMethod]), default=None,
              help="Normal variate method (default: settings)")
@click.option("--table/--no-table", default=False, help="Show the returns table")
@click.pass_context
def run(ctx: click.Context, drift: float | None, volatility: float | None,
        months: int | None, seed: int | None, method: str | None, table: bool):
    """Simulate one path of monthly returns and print the results."""
    settings: Settings = ctx.obj
    drift = _setting_default(ctx, "drift", drift, settings.default_drift_pct)
    volatility = _setting_default(ctx, "volatility", volatility, settings.default_volatility_pct)
    months = _setting_default(ctx, "months", months, settings.default_months)
    seed = settings.random_seed if seed is None else seed
    method = method or settings.normal_method

    try:
        result = simulate(drift, volatility, months, GeneratorSource.from_seed(seed), method)
    except SimulationError as e:
        logger.error("Simulation failed: %s", e)
        raise click.ClickException(str(e)) from e

    click.echo(
        f"Simulated {result.months} months: drift {drift:.2f}%, volatility {volatility:.2f}%"
    )
    click.echo(f"Final value: {result.final_value:.2f}")

    axis = value_axis(result.cumulative)
    click.echo(f"Value axis: {axis.lower:.0f} to {axis.upper:.0f}")
    click.echo("  Ticks: " + " ".join(f"{t:.0f}" for t in axis.ticks))

    click.echo("\nReturn Statistics")
    for label, pct in stats_bars(result.stats):
        click.echo(f"  {label:<20} {pct:>8.2f}%")

    if table:
        click.echo("\nReturns Table")
        click.echo(f"  {'Month':<8} {'Return (%)':>12} {'Value':>10}")
        for row in returns_table(result):
            ret = "" if row.return_pct is None else f"{row.return_pct:.2f}"
            click.echo(f"  {row.label:<8} {ret:>12} {row.cumulative:>10.2f}")


def _setting_default(ctx: click.Context, name: str, value, default):
    """Fall back to a settings default, held to the option's range."""
    if value is not None:
        return value
    param = next(p for p in ctx.command.params if p.name == name)
    return param.type.convert(default, param, ctx)


if __name__ == "__main__":
    cli()
