"""
Data models for the run-metrics package.

This module defines the value types passed into and returned from the metric
formulas, using Pydantic models where validation is useful.
"""

from enum import Enum

from pydantic import BaseModel, Field


class Measurement(str, Enum):
    """Supported measurement systems for speed and distance conversions."""

    MILES = "Miles"
    KILOMETERS = "Kilometers"


class Coordinate(BaseModel):
    """A geographic point in decimal degrees."""

    lat: float = Field(..., description="Latitude in degrees")
    lng: float = Field(..., description="Longitude in degrees")


class PaceZone(BaseModel):
    """A named training zone derived from functional threshold pace."""

    name: str = Field(..., description="Zone name, e.g. 'zone_1' or 'sweetspot'")
    upper: float | None = Field(None, description="Upper speed bound, None if open")
    lower: float | None = Field(None, description="Lower speed bound, None if open")

    def contains(self, speed: float) -> bool:
        """Return True if speed falls inside (lower, upper]."""
        if self.lower is not None and speed <= self.lower:
            return False
        if self.upper is not None and speed > self.upper:
            return False
        return True


class TrainingLoadSummary(BaseModel):
    """Training load metrics at a point in time."""

    chronic_training_load: float = Field(..., description="CTL (Fitness)")
    acute_training_load: float = Field(..., description="ATL (Fatigue)")
    training_stress_balance: float = Field(..., description="TSB (Form)")
    activity_count: int = Field(0, description="Activities contributing to CTL")
    status: str = Field("neutral", description="Form status label")
