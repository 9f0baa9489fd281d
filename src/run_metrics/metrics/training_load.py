"""
Training load metric calculations for running activities.

This module handles:
- Intensity Factor (IF) and Training Stress Score (TSS) from threshold pace
- Chronic and Acute Training Load (CTL/ATL)
- Training Stress Balance (TSB)
- Per-activity TSS series from an activities table
"""

import logging
from collections.abc import Iterable

import pandas as pd

from ..constants import ActivityColumns, TrainingLoadWindows, TSSConstants
from ..exceptions import InvalidDataError
from .base import round_metric

logger = logging.getLogger(__name__)


def _validate_ftp(ftp: float) -> None:
    if ftp <= 0:
        raise InvalidDataError(f"Functional threshold pace must be positive, got {ftp}")


def calculate_intensity_factor(ftp: float, ngp: float) -> float:
    """
    Calculate the intensity factor of a run.

    Both speeds must be in the same unit (typically metres per second).

    Args:
        ftp: Functional threshold pace as a speed
        ngp: Normalized graded pace as a speed

    Returns:
        NGP / FTP rounded to 2 dp
    """
    _validate_ftp(ftp)
    return round_metric(ngp / ftp)


def calculate_training_stress_score(ftp: float, ngp: float, seconds: float) -> float:
    """
    Calculate the Training Stress Score of a run.

    TSS = (duration × NGP × IF) / (FTP × 3600) × 100

    Args:
        ftp: Functional threshold pace as a speed
        ngp: Normalized graded pace as a speed (average speed can be used)
        seconds: Duration of the run in seconds

    Returns:
        TSS rounded to 2 dp
    """
    _validate_ftp(ftp)
    intensity_factor = ngp / ftp
    tss = (
        (seconds * ngp * intensity_factor)
        / (ftp * TSSConstants.TSS_HOUR_DIVISOR)
        * TSSConstants.TSS_NORMALIZATION_FACTOR
    )
    return round_metric(tss)


def _windowed_average(tss: Iterable[float], days: int) -> float:
    """
    Average the most recent `days` entries of a most-recent-first TSS series.

    Series shorter than the window are averaged over their full length.
    """
    if days < 1:
        raise InvalidDataError(f"Training load window must be at least 1, got {days}")

    recent = [float(value) for value in list(tss)[:days]]
    if not recent:
        raise InvalidDataError("Training stress score series is empty")

    return round_metric(sum(recent) / len(recent))


def calculate_chronic_training_load(
    tss: Iterable[float], days: int = TrainingLoadWindows.CTL_DAYS
) -> float:
    """
    Calculate Chronic Training Load (Fitness).

    CTL is the mean of the most recent training stress scores over a 42-entry
    window. The series must be ordered most recent first.

    Args:
        tss: Training stress scores, most recent first
        days: Window size

    Returns:
        CTL rounded to 2 dp
    """
    return _windowed_average(tss, days)


def calculate_acute_training_load(
    tss: Iterable[float], days: int = TrainingLoadWindows.ATL_DAYS
) -> float:
    """
    Calculate Acute Training Load (Fatigue) over a 7-entry window.

    Args:
        tss: Training stress scores, most recent first
        days: Window size

    Returns:
        ATL rounded to 2 dp
    """
    return _windowed_average(tss, days)


def calculate_training_stress_balance(ctl: float, atl: float) -> float:
    """
    Calculate Training Stress Balance (Form): fitness minus fatigue.

    Positive values indicate freshness, negative values fatigue.
    """
    return round_metric(ctl - atl)


def tss_series_from_activities(activities_df: pd.DataFrame, ftp: float) -> pd.Series:
    """
    Calculate a TSS for every activity in an activities table.

    Average speed stands in for normalized graded pace and elapsed time for
    duration. When a start_date column is present the result is ordered most
    recent first, ready for the training load averages.

    Args:
        activities_df: DataFrame with 'average_speed' (m/s) and 'elapsed_time' (s)
        ftp: Functional threshold pace in metres per second

    Returns:
        Series of TSS values named 'training_stress_score'

    Raises:
        InvalidDataError: If a required column is missing or ftp is not positive
    """
    _validate_ftp(ftp)

    required = [ActivityColumns.AVERAGE_SPEED, ActivityColumns.ELAPSED_TIME]
    missing = [col for col in required if col not in activities_df.columns]
    if missing:
        raise InvalidDataError(f"Activities are missing required columns: {missing}")

    df = activities_df.dropna(subset=required)
    dropped = len(activities_df) - len(df)
    if dropped:
        logger.warning(f"Skipping {dropped} activities without speed or duration")

    if ActivityColumns.START_DATE in df.columns:
        start_dates = pd.to_datetime(df[ActivityColumns.START_DATE])
        df = df.assign(**{ActivityColumns.START_DATE: start_dates}).sort_values(
            ActivityColumns.START_DATE, ascending=False, kind="stable"
        )

    scores = [
        calculate_training_stress_score(ftp, float(speed), float(seconds))
        for speed, seconds in zip(
            df[ActivityColumns.AVERAGE_SPEED],
            df[ActivityColumns.ELAPSED_TIME],
            strict=True,
        )
    ]
    logger.debug(f"Calculated TSS for {len(scores)} activities")

    return pd.Series(
        scores,
        index=df.index,
        name=ActivityColumns.TRAINING_STRESS_SCORE,
        dtype=float,
    )
