"""
Shared helpers for the metric formulas.

Covers the rounding policy used by every reported metric, resolution of
measurement units, and normalization of pace inputs.
"""

import math
import sys

from ..constants import RoundingConstants, TimeConstants
from ..exceptions import InvalidTimeError, UnsupportedMeasurementError
from ..models import Measurement


def round_metric(value: float) -> float:
    """
    Round a metric to two decimal places, half up.

    Machine epsilon is added before scaling so values such as 1.005, which are
    stored fractionally below their decimal representation, still round up.
    NaN and infinities are returned unchanged.

    Args:
        value: Value to round

    Returns:
        Value rounded to RoundingConstants.DECIMAL_PLACES places
    """
    if not math.isfinite(value):
        return value
    factor = 10**RoundingConstants.DECIMAL_PLACES
    return math.floor((value + sys.float_info.epsilon) * factor + 0.5) / factor


def resolve_measurement(measurement: Measurement | str) -> Measurement:
    """
    Resolve a measurement enum member from an enum or its name/value.

    Args:
        measurement: Measurement member, or a string such as "Miles" or "kilometers"

    Returns:
        The matching Measurement member

    Raises:
        UnsupportedMeasurementError: If the value names neither miles nor kilometers
    """
    if isinstance(measurement, Measurement):
        return measurement
    if isinstance(measurement, str):
        key = measurement.strip().lower()
        for member in Measurement:
            if key in (member.value.lower(), member.name.lower()):
                return member
    raise UnsupportedMeasurementError(measurement)


def parse_pace_string(pace: str) -> float:
    """
    Parse a "M:SS" or "H:MM:SS" string into total seconds.

    Missing leading components are treated as zero, so "6:18" is
    0 hours, 6 minutes and 18 seconds.

    Raises:
        InvalidTimeError: If the string has more than three components or a
            component is not numeric
    """
    if not isinstance(pace, str):
        raise InvalidTimeError(f"Pace must be a string, got {type(pace).__name__}")

    parts = pace.strip().split(":")
    if len(parts) > 3:
        raise InvalidTimeError(f"Invalid pace string: {pace!r}")

    try:
        values = [float(part) for part in parts]
    except ValueError as e:
        raise InvalidTimeError(f"Invalid pace string: {pace!r}") from e

    hours, minutes, seconds = [0.0] * (3 - len(values)) + values
    return (
        hours * TimeConstants.SECONDS_PER_HOUR
        + minutes * TimeConstants.SECONDS_PER_MINUTE
        + seconds
    )


def pace_to_minutes(pace: float | str) -> float:
    """
    Normalize a pace to decimal minutes per unit distance.

    Numbers and plain numeric strings are taken as decimal minutes already;
    colon-delimited strings are parsed with parse_pace_string, so "7:30"
    becomes 7.5.
    """
    if isinstance(pace, str) and ":" in pace:
        return parse_pace_string(pace) / TimeConstants.SECONDS_PER_MINUTE

    try:
        minutes = float(pace)
    except (TypeError, ValueError) as e:
        raise InvalidTimeError(f"Invalid pace: {pace!r}") from e
    if math.isnan(minutes):
        raise InvalidTimeError("Pace must be a number")
    return minutes
