"""
Command-line interface for the run-metrics package.

This module exposes the pace, VDOT, zone and training load formulas as
subcommands of the run-metrics command.
"""

import logging
from pathlib import Path

import click

from .analysis import TrainingLoadSummarizer
from .data import ActivityDataLoader
from .exceptions import RunMetricsError
from .metrics import (
    calculate_average_pace,
    calculate_percentage_vo2max,
    calculate_vdot,
    calculate_zones_from_ftp,
    parse_pace_string,
    reverse_average_pace,
)
from .models import Measurement
from .settings import Settings, load_settings

UNIT_CHOICES = click.Choice([m.name.lower() for m in Measurement], case_sensitive=False)


# Configure basic logging
def configure_logging(verbose: bool = False) -> None:
    """Configure logging with appropriate level."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )


def _measurement(settings: Settings, unit: str | None) -> Measurement:
    """Pick the unit from the command line, falling back to settings."""
    if unit is None:
        return settings.measurement
    return Measurement[unit.upper()]


def _format_bound(speed: float | None, measurement: Measurement) -> str:
    if speed is None:
        return "-"
    return calculate_average_pace(speed, measurement)


@click.group()
@click.option(
    "--config",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file",
)
@click.option(
    "--verbose/--quiet",
    default=False,
    help="Enable verbose output",
)
@click.pass_context
def main(ctx: click.Context, config: Path | None, verbose: bool):
    """
    Calculate running performance metrics.

    Converts between speed and pace, scores race performances with VDOT,
    derives training zones and summarizes training load from activities.
    """
    configure_logging(verbose)
    try:
        ctx.obj = load_settings(config)
    except (RunMetricsError, ValueError) as e:
        logging.getLogger(__name__).error(f"Invalid configuration: {str(e)}")
        raise click.Abort() from e


@main.command()
@click.argument("speed", type=float)
@click.option("--unit", type=UNIT_CHOICES, help="Distance unit of the pace")
@click.pass_obj
def pace(settings: Settings, speed: float, unit: str | None) -> None:
    """Convert SPEED in metres per second to an average pace."""
    logger = logging.getLogger(__name__)
    measurement = _measurement(settings, unit)
    try:
        click.echo(calculate_average_pace(speed, measurement))
    except RunMetricsError as e:
        logger.error(f"Pace calculation failed: {str(e)}")
        raise click.Abort() from e


@main.command()
@click.argument("pace_string", metavar="PACE")
@click.option("--unit", type=UNIT_CHOICES, help="Distance unit of the pace")
@click.pass_obj
def speed(settings: Settings, pace_string: str, unit: str | None) -> None:
    """Convert a PACE such as 6:18 to metres per second."""
    logger = logging.getLogger(__name__)
    measurement = _measurement(settings, unit)
    try:
        click.echo(f"{reverse_average_pace(pace_string, measurement):.3f}")
    except RunMetricsError as e:
        logger.error(f"Speed calculation failed: {str(e)}")
        raise click.Abort() from e


@main.command()
@click.argument("race_time", metavar="TIME")
@click.argument("distance", type=float)
def vdot(race_time: str, distance: float) -> None:
    """Score a race of TIME (H:MM:SS) over DISTANCE metres."""
    logger = logging.getLogger(__name__)
    try:
        seconds = parse_pace_string(race_time)
        click.echo(f"VO2Max: {calculate_percentage_vo2max(seconds)}%")
        click.echo(f"VDOT: {calculate_vdot(seconds, distance)}")
    except RunMetricsError as e:
        logger.error(f"VDOT calculation failed: {str(e)}")
        raise click.Abort() from e


@main.command()
@click.argument("ftp_pace", metavar="FTP_PACE")
@click.option("--unit", type=UNIT_CHOICES, help="Distance unit of the pace")
@click.pass_obj
def zones(settings: Settings, ftp_pace: str, unit: str | None) -> None:
    """Print training pace zones for a threshold pace FTP_PACE."""
    logger = logging.getLogger(__name__)
    measurement = _measurement(settings, unit)
    names = ["Z1", "Z2", "Z3", "SS", "Z4", "Z5", "Z6", "Z7"]
    try:
        ftp = reverse_average_pace(ftp_pace, measurement)
        for name, (upper, lower) in zip(
            names, calculate_zones_from_ftp(ftp), strict=True
        ):
            # Higher speed bound is the faster pace
            slow = _format_bound(lower, measurement)
            fast = _format_bound(upper, measurement)
            click.echo(f"{name}: {slow} - {fast}")
    except RunMetricsError as e:
        logger.error(f"Zone calculation failed: {str(e)}")
        raise click.Abort() from e


@main.command()
@click.argument(
    "activities",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    required=False,
)
@click.option("--ftp", "ftp_pace", help="Threshold pace, overrides config")
@click.option("--unit", type=UNIT_CHOICES, help="Distance unit of the pace")
@click.pass_obj
def load(
    settings: Settings, activities: Path | None, ftp_pace: str | None, unit: str | None
) -> None:
    """
    Summarize training load from an ACTIVITIES CSV file.

    Prints Chronic Training Load (fitness), Acute Training Load (fatigue) and
    Training Stress Balance (form) for the most recent activities.
    """
    logger = logging.getLogger(__name__)
    measurement = _measurement(settings, unit)
    try:
        ftp = reverse_average_pace(ftp_pace, measurement) if ftp_pace else None
        activities_df = ActivityDataLoader(settings).load_activities(activities)
        summary = TrainingLoadSummarizer(settings).summarize(activities_df, ftp=ftp)
    except RunMetricsError as e:
        logger.error(f"Training load summary failed: {str(e)}")
        raise click.Abort() from e

    click.echo("\nTraining Load Status")
    click.echo("-" * 20)
    click.echo(f"CTL: {summary.chronic_training_load:.2f}")
    click.echo(f"ATL: {summary.acute_training_load:.2f}")
    click.echo(f"TSB: {summary.training_stress_balance:.2f}")
    click.echo(f"Status: {summary.status}")


if __name__ == "__main__":
    main()
