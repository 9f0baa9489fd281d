"""run-metrics - formulas for running performance and training load metrics."""

__version__ = "1.0.0"

from . import analysis, constants, data, exceptions, metrics, models
from .analysis import TrainingLoadSummarizer
from .data import ActivityDataLoader
from .exceptions import (
    InvalidTimeError,
    RunMetricsError,
    UnsupportedMeasurementError,
)
from .metrics import (
    calculate_acute_training_load,
    calculate_average_pace,
    calculate_chronic_training_load,
    calculate_efficiency_factor,
    calculate_elevation,
    calculate_intensity_factor,
    calculate_percentage_vo2max,
    calculate_training_stress_balance,
    calculate_training_stress_score,
    calculate_vdot,
    calculate_zones_from_ftp,
    convert_distance,
    reverse_average_pace,
    speed_from_coordinates,
)
from .models import Coordinate, Measurement, PaceZone, TrainingLoadSummary


def get_version() -> str:
    """Get the current version of run_metrics."""
    return __version__


def get_package_info() -> dict[str, str]:
    """Get package information including name and version."""
    return {
        "name": "run-metrics",
        "version": __version__,
        "description": "Formulas for running performance and training load metrics",
    }


__all__ = [
    # Version & Info
    "get_version",
    "get_package_info",
    # Models
    "Coordinate",
    "Measurement",
    "PaceZone",
    "TrainingLoadSummary",
    # Errors
    "RunMetricsError",
    "UnsupportedMeasurementError",
    "InvalidTimeError",
    # Conversion
    "calculate_elevation",
    "convert_distance",
    "calculate_average_pace",
    "reverse_average_pace",
    # Geometry
    "speed_from_coordinates",
    # Physiology & Training Load
    "calculate_percentage_vo2max",
    "calculate_vdot",
    "calculate_efficiency_factor",
    "calculate_intensity_factor",
    "calculate_training_stress_score",
    "calculate_chronic_training_load",
    "calculate_acute_training_load",
    "calculate_training_stress_balance",
    "calculate_zones_from_ftp",
    # Data & Analysis Layers
    "ActivityDataLoader",
    "TrainingLoadSummarizer",
    # Modules
    "analysis",
    "constants",
    "data",
    "exceptions",
    "metrics",
    "models",
]
