"""
Training zone calculations from functional threshold pace.

Each zone is an (upper, lower) pair of speeds; an open end is None rather
than zero or infinity.
"""

from ..constants import PaceZoneMultipliers
from ..models import PaceZone

ZoneBounds = tuple[float | None, float | None]


def _scale(ftp: float, multiplier: float | None) -> float | None:
    return None if multiplier is None else ftp * multiplier


def calculate_zones_from_ftp(ftp: float) -> list[ZoneBounds]:
    """
    Calculate training zones from Functional or Lactate Threshold Pace.

    Args:
        ftp: Threshold pace as a speed, e.g. metres per second

    Returns:
        Eight (upper, lower) bounds in order: zone 1, zone 2, zone 3,
        sweetspot, zone 4, zone 5, zone 6, zone 7
    """
    return [
        (_scale(ftp, upper), _scale(ftp, lower))
        for upper, lower in PaceZoneMultipliers.get_ordered_zones().values()
    ]


def named_zones_from_ftp(ftp: float) -> list[PaceZone]:
    """Same table as calculate_zones_from_ftp, as named PaceZone models."""
    names = PaceZoneMultipliers.get_ordered_zones().keys()
    return [
        PaceZone(name=name, upper=upper, lower=lower)
        for name, (upper, lower) in zip(
            names, calculate_zones_from_ftp(ftp), strict=True
        )
    ]
