"""Great-circle distance between two GPS samples."""

import logging
import math
from collections.abc import Mapping

from ..constants import GeoConstants
from ..exceptions import CalculationError
from ..models import Coordinate

logger = logging.getLogger(__name__)


def _as_coordinate(point: Coordinate | Mapping[str, float]) -> Coordinate:
    if isinstance(point, Coordinate):
        return point
    return Coordinate.model_validate(point)


def _to_cartesian(point: Coordinate, radius: float) -> tuple[float, float, float]:
    """Project a lat/lng point onto an Earth-centred Cartesian frame."""
    lat = math.radians(point.lat)
    lng = math.radians(point.lng)

    rho = radius * math.cos(lat)
    return (rho * math.cos(lng), rho * math.sin(lng), radius * math.sin(lat))


def speed_from_coordinates(
    start: Coordinate | Mapping[str, float], end: Coordinate | Mapping[str, float]
) -> float:
    """
    Calculate the arc length in metres between two coordinates.

    Both points are projected onto a sphere of radius
    GeoConstants.EARTH_RADIUS_METRES and the central angle is taken from
    the dot product of the two position vectors. Dividing the result by the
    time between the samples gives speed in metres per second.

    Identical samples can return a small nonzero distance, or raise when
    rounding pushes the cosine above 1.

    Args:
        start: First sample, a Coordinate or mapping with 'lat' and 'lng'
        end: Second sample, a Coordinate or mapping with 'lat' and 'lng'

    Returns:
        Distance in metres

    Raises:
        CalculationError: If floating error pushes the angle cosine outside [-1, 1]
    """
    r = GeoConstants.EARTH_RADIUS_METRES
    x1, y1, z1 = _to_cartesian(_as_coordinate(start), r)
    x2, y2, z2 = _to_cartesian(_as_coordinate(end), r)

    dot = x1 * x2 + y1 * y2 + z1 * z2
    cos_theta = dot / (r * r)

    try:
        theta = math.acos(cos_theta)
    except ValueError as e:
        logger.debug(f"Central angle cosine out of range: {cos_theta!r}")
        raise CalculationError(
            f"Cannot compute central angle for cosine {cos_theta!r}"
        ) from e

    return r * theta
