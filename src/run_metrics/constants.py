"""
Constants used throughout the run-metrics package.

This module centralizes all magic numbers and commonly used values to improve
maintainability and clarity.
"""

from typing import Final


# === Time Constants ===
class TimeConstants:
    """Time-related constants in seconds."""

    SECONDS_PER_MINUTE: Final[int] = 60
    SECONDS_PER_HOUR: Final[int] = 3600
    MINUTES_PER_HOUR: Final[int] = 60


# === Unit Conversion Factors ===
class ConversionFactors:
    """Factors for converting between metric and imperial units."""

    METRES_TO_FEET: Final[float] = 3.2808
    METRES_TO_MILES: Final[float] = 0.00062137
    METRES_PER_KILOMETRE: Final[float] = 1000.0
    METRES_PER_MILE: Final[float] = 1609.34
    MS_TO_KPH: Final[float] = 3.6
    MS_TO_MPH: Final[float] = 2.2369
    YARDS_PER_MILE: Final[int] = 1760


# === Geometry ===
class GeoConstants:
    """Constants for coordinate geometry."""

    EARTH_RADIUS_METRES: Final[float] = 6378100.0


# === Rounding ===
class RoundingConstants:
    """Rounding policy for reported metrics."""

    DECIMAL_PLACES: Final[int] = 2


# === Jack Daniels VO2Max / VDOT Coefficients ===
class DanielsCoefficients:
    """Coefficients from the Daniels/Gilbert oxygen-cost equations."""

    # %VO2Max sustainable for a race of duration t (minutes)
    VO2MAX_BASE: Final[float] = 0.8
    VO2MAX_FAST_AMPLITUDE: Final[float] = 0.1894393
    VO2MAX_FAST_DECAY: Final[float] = -0.012778
    VO2MAX_SLOW_AMPLITUDE: Final[float] = 0.2989558
    VO2MAX_SLOW_DECAY: Final[float] = -0.1932605

    # Oxygen cost of running at velocity v (metres/minute)
    OXYGEN_COST_INTERCEPT: Final[float] = -4.6
    OXYGEN_COST_LINEAR: Final[float] = 0.182258
    OXYGEN_COST_QUADRATIC: Final[float] = 0.000104


# === Training Load Windows ===
class TrainingLoadWindows:
    """Windows for training load calculations."""

    ATL_DAYS: Final[int] = 7  # Acute Training Load (Fatigue)
    CTL_DAYS: Final[int] = 42  # Chronic Training Load (Fitness)


# === TSS Calculation Constants ===
class TSSConstants:
    """Constants for Training Stress Score calculations."""

    TSS_NORMALIZATION_FACTOR: Final[int] = 100  # Multiply by 100 for TSS
    TSS_HOUR_DIVISOR: Final[int] = TimeConstants.SECONDS_PER_HOUR


# === Pace Zone Multipliers ===
class PaceZoneMultipliers:
    """
    Zone bounds as multiples of FTP speed, ordered (upper, lower).

    None marks an open end. Zone 3 overlaps Zone 2 and Zone 4 overlaps the
    sweetspot band.
    """

    ZONE_1: Final[tuple[float | None, float | None]] = (0.90, None)
    ZONE_2: Final[tuple[float | None, float | None]] = (0.96, 0.90)
    ZONE_3: Final[tuple[float | None, float | None]] = (1.00, 0.90)
    SWEETSPOT: Final[tuple[float | None, float | None]] = (1.05, 0.99)
    ZONE_4: Final[tuple[float | None, float | None]] = (1.06, 0.99)
    ZONE_5: Final[tuple[float | None, float | None]] = (1.13, 1.06)
    ZONE_6: Final[tuple[float | None, float | None]] = (1.29, 1.14)
    ZONE_7: Final[tuple[float | None, float | None]] = (None, 1.29)

    @classmethod
    def get_ordered_zones(cls) -> dict[str, tuple[float | None, float | None]]:
        """Get all zone multipliers in table order."""
        return {
            "zone_1": cls.ZONE_1,
            "zone_2": cls.ZONE_2,
            "zone_3": cls.ZONE_3,
            "sweetspot": cls.SWEETSPOT,
            "zone_4": cls.ZONE_4,
            "zone_5": cls.ZONE_5,
            "zone_6": cls.ZONE_6,
            "zone_7": cls.ZONE_7,
        }


# === Training Status Thresholds ===
class TrainingStatusThresholds:
    """Thresholds for determining training status."""

    TSB_FRESH: Final[float] = 15.0  # Above this = fresh/ready for performance
    TSB_HIGH_FATIGUE: Final[float] = -30.0  # Below this = high fatigue
    TSB_PRODUCTIVE_MIN: Final[float] = -30.0  # Productive training range
    TSB_PRODUCTIVE_MAX: Final[float] = -10.0


# === CSV Parsing ===
class CSVConstants:
    """Constants for CSV file parsing."""

    DEFAULT_SEPARATOR: Final[str] = ";"  # Semicolon-separated format
    DEFAULT_ENCODING: Final[str] = "utf-8"


# === Activity Columns ===
class ActivityColumns:
    """Column names used when deriving metrics from activity tables."""

    START_DATE: Final[str] = "start_date"
    ELAPSED_TIME: Final[str] = "elapsed_time"
    AVERAGE_SPEED: Final[str] = "average_speed"
    TRAINING_STRESS_SCORE: Final[str] = "training_stress_score"
