"""
Metric formula modules.

This package contains all metric formulas, organized by family:
- base: Rounding policy, measurement resolution, pace parsing
- conversion: Distance, elevation and pace unit conversion
- geometry: Great-circle distance between coordinates
- physiology: VO2Max, VDOT and Efficiency Factor
- training_load: IF, TSS, CTL, ATL and TSB
- zones: Training zones from functional threshold pace
"""

from .base import pace_to_minutes, parse_pace_string, resolve_measurement, round_metric
from .conversion import (
    calculate_average_pace,
    calculate_elevation,
    convert_distance,
    convert_to_kph,
    convert_to_mph,
    reverse_average_pace,
)
from .geometry import speed_from_coordinates
from .physiology import (
    calculate_efficiency_factor,
    calculate_percentage_vo2max,
    calculate_vdot,
)
from .training_load import (
    calculate_acute_training_load,
    calculate_chronic_training_load,
    calculate_intensity_factor,
    calculate_training_stress_balance,
    calculate_training_stress_score,
    tss_series_from_activities,
)
from .zones import calculate_zones_from_ftp, named_zones_from_ftp

__all__ = [
    "round_metric",
    "resolve_measurement",
    "parse_pace_string",
    "pace_to_minutes",
    "calculate_elevation",
    "convert_distance",
    "convert_to_mph",
    "convert_to_kph",
    "calculate_average_pace",
    "reverse_average_pace",
    "speed_from_coordinates",
    "calculate_percentage_vo2max",
    "calculate_vdot",
    "calculate_efficiency_factor",
    "calculate_intensity_factor",
    "calculate_training_stress_score",
    "calculate_chronic_training_load",
    "calculate_acute_training_load",
    "calculate_training_stress_balance",
    "tss_series_from_activities",
    "calculate_zones_from_ftp",
    "named_zones_from_ftp",
]
