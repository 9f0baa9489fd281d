"""
Physiology metrics derived from race performances and heart rate.

This module handles:
- Percentage of VO2Max sustainable for a race duration (Daniels/Gilbert)
- VDOT fitness index
- Efficiency Factor (EF) from normalized graded pace and heart rate
"""

import logging
import math

from ..constants import ConversionFactors, DanielsCoefficients, TimeConstants
from ..exceptions import InvalidDataError, InvalidTimeError
from .base import pace_to_minutes, round_metric

logger = logging.getLogger(__name__)


def calculate_percentage_vo2max(race_time: float, as_percentage: bool = True) -> float:
    """
    Calculate the fraction of VO2Max a runner can sustain for a race duration.

    Uses the Daniels/Gilbert drop-dead formula, which expects the duration in
    minutes.

    Args:
        race_time: Race duration in seconds
        as_percentage: If True, return a percentage rounded to 2 dp. If False,
            return the raw fraction for use in further calculations.

    Returns:
        Percentage (e.g. 86.43) or fraction (e.g. 0.8643) of VO2Max
    """
    minutes = race_time / TimeConstants.SECONDS_PER_MINUTE
    fraction = (
        DanielsCoefficients.VO2MAX_BASE
        + DanielsCoefficients.VO2MAX_FAST_AMPLITUDE
        * math.exp(DanielsCoefficients.VO2MAX_FAST_DECAY * minutes)
        + DanielsCoefficients.VO2MAX_SLOW_AMPLITUDE
        * math.exp(DanielsCoefficients.VO2MAX_SLOW_DECAY * minutes)
    )

    if not as_percentage:
        return fraction

    return round_metric(fraction * 100)


def calculate_vdot(race_time: float, race_distance: float) -> float:
    """
    Calculate a VDOT score from a recent race performance.

    Args:
        race_time: Race duration in seconds
        race_distance: Race distance in metres

    Returns:
        VDOT rounded to 2 dp

    Raises:
        InvalidTimeError: If race_time is not positive
    """
    if race_time <= 0:
        raise InvalidTimeError("Race time must be greater than zero")

    vo2max_fraction = calculate_percentage_vo2max(race_time, as_percentage=False)
    velocity = race_distance / (race_time / TimeConstants.SECONDS_PER_MINUTE)
    oxygen_cost = (
        DanielsCoefficients.OXYGEN_COST_INTERCEPT
        + DanielsCoefficients.OXYGEN_COST_LINEAR * velocity
        + DanielsCoefficients.OXYGEN_COST_QUADRATIC * velocity**2
    )
    return round_metric(oxygen_cost / vo2max_fraction)


def calculate_efficiency_factor(
    ngp: float | str, heart_rate: float | None
) -> float | None:
    """
    Calculate the Efficiency Factor of a run.

    EF is speed in yards per minute divided by average heart rate.

    Args:
        ngp: Normalized graded pace in decimal minutes per mile (7.5) or as a
            pace string ("7:30")
        heart_rate: Average heart rate in bpm, or None/NaN if not recorded

    Returns:
        Efficiency factor rounded to 2 dp, or None when heart rate is missing

    Raises:
        InvalidTimeError: If ngp cannot be interpreted as a pace
        InvalidDataError: If heart rate or pace is not positive
    """
    if heart_rate is None or math.isnan(heart_rate):
        logger.debug("No heart rate recorded, efficiency factor unavailable")
        return None

    if heart_rate <= 0:
        raise InvalidDataError(f"Heart rate must be positive, got {heart_rate}")

    minutes = pace_to_minutes(ngp)
    if minutes <= 0:
        raise InvalidDataError(f"Pace must be positive, got {ngp!r}")

    speed = TimeConstants.MINUTES_PER_HOUR / minutes
    yards_per_minute = (
        ConversionFactors.YARDS_PER_MILE * speed
    ) / TimeConstants.MINUTES_PER_HOUR
    return round_metric(yards_per_minute / heart_rate)
