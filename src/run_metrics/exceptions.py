"""
Custom exceptions for the run-metrics package.

This module defines all custom exceptions used throughout the package,
providing clear error hierarchies and specific error types for different scenarios.
"""


class RunMetricsError(Exception):
    """Base exception for all run-metrics errors."""


class ConfigurationError(RunMetricsError):
    """Raised when there is an issue with configuration settings."""


class ValidationError(RunMetricsError):
    """Raised when input validation fails."""


class UnsupportedMeasurementError(ValidationError, ValueError):
    """Raised when a measurement unit is neither miles nor kilometers."""

    def __init__(self, measurement: object = None):
        self.measurement = measurement
        super().__init__("Unsupported Measurement")


class InvalidTimeError(ValidationError, ValueError):
    """Raised when a time, speed or pace input cannot be interpreted as a number."""


class InvalidDataError(ValidationError):
    """Raised when input data is invalid or missing required fields."""


class CalculationError(RunMetricsError):
    """Raised when there is an error during metric calculation."""


class DataLoadError(RunMetricsError):
    """Raised when there is an error loading data files."""
