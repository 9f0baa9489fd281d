"""
Unit conversion for distance, elevation, speed and pace.

This module handles:
- Elevation in metres or feet
- Distance in kilometres or miles
- Speed (m/s) to average pace strings and back
"""

import math

from ..constants import ConversionFactors, TimeConstants
from ..exceptions import InvalidTimeError
from ..models import Measurement
from .base import parse_pace_string, resolve_measurement, round_metric


def calculate_elevation(elevation: float, measurement: Measurement | str) -> float:
    """
    Convert an elevation in metres for display in the given measurement system.

    Kilometers leave metres unchanged, miles convert to feet. Not rounded.

    Raises:
        UnsupportedMeasurementError: If measurement is not miles or kilometers
    """
    unit = resolve_measurement(measurement)
    if unit is Measurement.KILOMETERS:
        return elevation
    return elevation * ConversionFactors.METRES_TO_FEET


def convert_distance(metres: float, measurement: Measurement | str) -> float:
    """
    Convert a distance in metres to kilometres or miles, rounded to 2 dp.

    Raises:
        UnsupportedMeasurementError: If measurement is not miles or kilometers
    """
    unit = resolve_measurement(measurement)
    if unit is Measurement.KILOMETERS:
        distance = metres / ConversionFactors.METRES_PER_KILOMETRE
    else:
        distance = metres * ConversionFactors.METRES_TO_MILES
    return round_metric(distance)


def convert_to_mph(metres_per_second: float) -> float:
    """Convert metres per second to miles per hour."""
    return metres_per_second * ConversionFactors.MS_TO_MPH


def convert_to_kph(metres_per_second: float) -> float:
    """Convert metres per second to kilometres per hour."""
    return metres_per_second * ConversionFactors.MS_TO_KPH


def calculate_average_pace(speed: float, measurement: Measurement | str) -> str:
    """
    Calculate average pace as "M:SS" per kilometre or mile.

    Args:
        speed: Average speed in metres per second
        measurement: Distance unit the pace is expressed in

    Returns:
        Pace string with zero-padded seconds, e.g. "6:18"

    Raises:
        InvalidTimeError: If speed is not a number or is not positive
        UnsupportedMeasurementError: If measurement is not miles or kilometers
    """
    try:
        speed = float(speed)
    except (TypeError, ValueError) as e:
        raise InvalidTimeError("Time must be a number") from e
    if math.isnan(speed):
        raise InvalidTimeError("Time must be a number")

    unit = resolve_measurement(measurement)
    if unit is Measurement.KILOMETERS:
        converted = convert_to_kph(speed)
    else:
        converted = convert_to_mph(speed)

    if converted <= 0:
        raise InvalidTimeError("Speed must be greater than zero")

    pace = TimeConstants.MINUTES_PER_HOUR / converted
    minutes = math.floor(pace)
    seconds = math.floor((pace - minutes) * TimeConstants.SECONDS_PER_MINUTE + 0.5)

    # 59.5s and above rounds into the next minute
    if seconds == TimeConstants.SECONDS_PER_MINUTE:
        minutes += 1
        seconds = 0

    return f"{minutes}:{seconds:02d}"


def reverse_average_pace(pace: str, measurement: Measurement | str) -> float:
    """
    Convert a running pace back into metres per second.

    Args:
        pace: Pace string, "M:SS" or "H:MM:SS" per unit distance
        measurement: Distance unit the pace is expressed in

    Returns:
        Speed in metres per second

    Raises:
        InvalidTimeError: If the pace cannot be parsed or is zero
        UnsupportedMeasurementError: If measurement is not miles or kilometers
    """
    seconds = parse_pace_string(pace)

    unit = resolve_measurement(measurement)
    if unit is Measurement.KILOMETERS:
        distance = ConversionFactors.METRES_PER_KILOMETRE
    else:
        distance = ConversionFactors.METRES_PER_MILE

    if seconds <= 0:
        raise InvalidTimeError(f"Pace must be longer than zero seconds: {pace!r}")

    return distance / seconds
