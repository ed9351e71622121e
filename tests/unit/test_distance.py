"""Tests for Haversine distance calculation."""

import pytest

from geoutils.core.distance import calculate_distance
from geoutils.domain import DistanceUnit, Point
from geoutils.exceptions import MalformedInputError, OutOfRangeError, UnsupportedUnitError

ORIGIN = {"lat": 0, "lng": 0}
ONE_DEGREE_EAST = {"lat": 0, "lng": 1}

SAN_FRANCISCO = Point(37.7749, -122.4194)
NEW_YORK = Point(40.7128, -74.0060)


class TestCalculateDistance:
    """Tests for calculate_distance."""

    def test_one_degree_at_equator(self) -> None:
        """Test that one degree of longitude at the equator is about 111 km."""
        distance = calculate_distance(ORIGIN, ONE_DEGREE_EAST, "km")
        assert 110 < distance < 112

    def test_default_unit_is_km(self) -> None:
        """Test that km is used when no unit is given."""
        assert calculate_distance(ORIGIN, ONE_DEGREE_EAST) == calculate_distance(
            ORIGIN, ONE_DEGREE_EAST, DistanceUnit.KILOMETERS
        )

    def test_unit_conversion(self) -> None:
        """Test that miles < km < meters with meters about 1000x km."""
        km = calculate_distance(ORIGIN, ONE_DEGREE_EAST, "km")
        miles = calculate_distance(ORIGIN, ONE_DEGREE_EAST, "miles")
        meters = calculate_distance(ORIGIN, ONE_DEGREE_EAST, "meters")

        assert miles < km
        assert meters > km
        assert meters == pytest.approx(km * 1000)
        assert miles == pytest.approx(km * 3959 / 6371)

    def test_known_city_pair(self) -> None:
        """Test San Francisco to New York against the published figure."""
        assert calculate_distance(SAN_FRANCISCO, NEW_YORK) == pytest.approx(4129, abs=5)

    def test_symmetric(self) -> None:
        """Test that distance does not depend on argument order."""
        assert calculate_distance(SAN_FRANCISCO, NEW_YORK) == pytest.approx(
            calculate_distance(NEW_YORK, SAN_FRANCISCO)
        )

    def test_same_point(self) -> None:
        """Test that a point is zero distance from itself."""
        assert calculate_distance(SAN_FRANCISCO, SAN_FRANCISCO) == 0.0

    def test_antipodal_points(self) -> None:
        """Test half the circumference between antipodes."""
        distance = calculate_distance({"lat": 0, "lng": 0}, {"lat": 0, "lng": 180}, "km")
        assert distance == pytest.approx(6371 * 3.141592653589793)

    def test_idempotent(self) -> None:
        """Test that repeated calls give identical results."""
        results = {calculate_distance(SAN_FRANCISCO, NEW_YORK, "miles") for _ in range(5)}
        assert len(results) == 1

    def test_invalid_unit(self) -> None:
        """Test that unknown units are rejected with the offending value."""
        with pytest.raises(UnsupportedUnitError, match="Invalid unit: invalid. Use 'km', 'miles', or 'meters'"):
            calculate_distance(ORIGIN, {"lat": 1, "lng": 1}, "invalid")

    def test_invalid_point(self) -> None:
        """Test that points are validated."""
        with pytest.raises(MalformedInputError):
            calculate_distance({"lat": 0}, ONE_DEGREE_EAST)
        with pytest.raises(OutOfRangeError):
            calculate_distance(ORIGIN, {"lat": 0, "lng": 190})
