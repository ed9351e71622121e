"""Bounding-box derivation and membership testing."""

from collections.abc import Mapping

from geoutils.core.validation import (
    DEFAULT_MIN_POLYGON_POINTS,
    validate_point,
    validate_polygon,
)
from geoutils.domain import BoundingBox, BoundingBoxLike, PointLike, PolygonLike
from geoutils.exceptions import MalformedInputError


def get_bounding_box(
    polygon: PolygonLike,
    min_points: int = DEFAULT_MIN_POLYGON_POINTS,
) -> BoundingBox:
    """Get the axis-aligned bounding box of a polygon.

    Args:
        polygon: Ordered sequence of points
        min_points: Minimum number of vertices required

    Returns:
        BoundingBox spanning the min/max latitude and longitude of all vertices

    Examples:
        >>> box = get_bounding_box([{"lat": 1, "lng": 1}, {"lat": 1, "lng": 5},
        ...                         {"lat": 4, "lng": 5}, {"lat": 4, "lng": 1}])
        >>> box.to_dict()
        {'min_lat': 1.0, 'max_lat': 4.0, 'min_lng': 1.0, 'max_lng': 5.0}
    """
    points = validate_polygon(polygon, min_points=min_points)

    first = points[0]
    min_lat = max_lat = first.lat
    min_lng = max_lng = first.lng

    for point in points[1:]:
        if point.lat < min_lat:
            min_lat = point.lat
        elif point.lat > max_lat:
            max_lat = point.lat
        if point.lng < min_lng:
            min_lng = point.lng
        elif point.lng > max_lng:
            max_lng = point.lng

    return BoundingBox(min_lat=min_lat, max_lat=max_lat, min_lng=min_lng, max_lng=max_lng)


def is_point_in_bounding_box(box: BoundingBoxLike, point: PointLike) -> bool:
    """Check if a point lies within a bounding box.

    Boundaries are inclusive: a point exactly on an edge of the box is inside.

    Args:
        box: BoundingBox or mapping with min_lat, max_lat, min_lng, max_lng keys
        point: Point to test

    Returns:
        True if the point is within the box

    Raises:
        MalformedInputError: If the point or box is missing required fields
    """
    p = validate_point(point)

    if isinstance(box, Mapping):
        box = BoundingBox.from_dict(box)
    elif not isinstance(box, BoundingBox):
        raise MalformedInputError("Bounding box must be a BoundingBox or a mapping")

    return box.min_lat <= p.lat <= box.max_lat and box.min_lng <= p.lng <= box.max_lng
