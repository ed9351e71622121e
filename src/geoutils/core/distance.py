"""Great-circle distance using the Haversine formula."""

import math

from geoutils.core.validation import validate_point
from geoutils.domain import DistanceUnit, PointLike


def calculate_distance(
    point1: PointLike,
    point2: PointLike,
    unit: DistanceUnit | str = DistanceUnit.KILOMETERS,
) -> float:
    """Calculate the great-circle distance between two points.

    Treats the Earth as a sphere whose radius depends on the unit
    (6371 km, 3959 miles, 6371000 meters).

    Args:
        point1: First point
        point2: Second point
        unit: Distance unit, a DistanceUnit or one of "km", "miles", "meters"

    Returns:
        Distance between the points in the requested unit

    Raises:
        UnsupportedUnitError: If the unit is not recognized
        MalformedInputError: If a point is missing its fields
        OutOfRangeError: If a coordinate is out of range

    Examples:
        >>> round(calculate_distance({"lat": 0, "lng": 0}, {"lat": 0, "lng": 1}), 2)
        111.19
    """
    p1 = validate_point(point1)
    p2 = validate_point(point2)
    earth_radius = DistanceUnit.parse(unit).radius

    lat1 = math.radians(p1.lat)
    lng1 = math.radians(p1.lng)
    lat2 = math.radians(p2.lat)
    lng2 = math.radians(p2.lng)

    dlat = lat2 - lat1
    dlng = lng2 - lng1

    a = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlng / 2) ** 2
    # Rounding can push a just above 1 for near-antipodal points
    a = min(a, 1.0)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return earth_radius * c
