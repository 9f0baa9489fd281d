"""Unit tests for coordinate geometry."""

import math

import pytest

from run_metrics.constants import GeoConstants
from run_metrics.exceptions import CalculationError
from run_metrics.metrics import geometry
from run_metrics.metrics.geometry import speed_from_coordinates
from run_metrics.models import Coordinate

R = GeoConstants.EARTH_RADIUS_METRES


class TestSpeedFromCoordinates:
    """Test great-circle distance between two samples."""

    def test_same_point_is_zero(self):
        """No movement covers no distance."""
        point = Coordinate(lat=0.0, lng=0.0)
        assert speed_from_coordinates(point, point) == 0.0

    def test_same_point_off_axis_is_near_zero(self):
        """Floating error can leave a stationary sample a few centimetres apart."""
        point = Coordinate(lat=10.0, lng=20.0)
        assert speed_from_coordinates(point, point) < 1.0

    def test_one_degree_along_equator(self):
        """One degree of longitude on the equator is r * pi / 180."""
        distance = speed_from_coordinates(
            Coordinate(lat=0.0, lng=0.0), Coordinate(lat=0.0, lng=1.0)
        )
        assert distance == pytest.approx(R * math.pi / 180, rel=1e-9)

    def test_antipodal_points(self):
        """Opposite sides of the equator are half a circumference apart."""
        distance = speed_from_coordinates(
            Coordinate(lat=0.0, lng=0.0), Coordinate(lat=0.0, lng=180.0)
        )
        assert distance == pytest.approx(R * math.pi)

    def test_london_to_paris(self):
        """London to Paris is roughly 344 km on this sphere."""
        distance = speed_from_coordinates(
            Coordinate(lat=51.5074, lng=-0.1278), Coordinate(lat=48.8566, lng=2.3522)
        )
        assert distance == pytest.approx(343_900, rel=5e-3)

    def test_accepts_mappings(self):
        """Plain dicts with lat/lng keys are accepted."""
        start = {"lat": 51.5074, "lng": -0.1278}
        end = {"lat": 51.5080, "lng": -0.1290}
        assert speed_from_coordinates(start, end) == speed_from_coordinates(
            Coordinate(**start), Coordinate(**end)
        )

    def test_symmetric(self):
        """Distance does not depend on direction of travel."""
        a = Coordinate(lat=10.0, lng=20.0)
        b = Coordinate(lat=-15.0, lng=45.0)
        assert speed_from_coordinates(a, b) == pytest.approx(
            speed_from_coordinates(b, a)
        )

    def test_cosine_out_of_domain_raises(self, monkeypatch):
        """A math domain error surfaces as CalculationError."""

        def out_of_domain(value):
            raise ValueError("math domain error")

        monkeypatch.setattr(geometry.math, "acos", out_of_domain)

        with pytest.raises(CalculationError):
            speed_from_coordinates(
                Coordinate(lat=0.0, lng=0.0), Coordinate(lat=0.0, lng=1.0)
            )
