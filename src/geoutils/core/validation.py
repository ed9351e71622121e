"""Structural and range validation for points, polygons and coordinates.

Every public geometry function routes its input through this module first.
Validation is fail-fast: the first violation raises and nothing is returned.
The validators also normalize input, turning ``{"lat": .., "lng": ..}``
mappings into ``Point`` instances so the algorithms only see one shape.
"""

from collections.abc import Mapping

from geoutils.domain import Point, PointLike, PolygonLike
from geoutils.exceptions import (
    InsufficientVerticesError,
    MalformedInputError,
    OutOfRangeError,
)

DEFAULT_MIN_POLYGON_POINTS = 3

LAT_RANGE = (-90.0, 90.0)
LNG_RANGE = (-180.0, 180.0)


def validate_coordinates(lat: float, lng: float, index: int | None = None) -> None:
    """Check that a latitude/longitude pair is within range.

    Args:
        lat: Latitude in degrees
        lng: Longitude in degrees
        index: Vertex index reported in the error, if validating a polygon

    Raises:
        OutOfRangeError: If lat is outside [-90, 90] or lng outside [-180, 180]
    """
    # Written as a negated chained comparison so NaN is rejected too
    if not LAT_RANGE[0] <= lat <= LAT_RANGE[1]:
        raise OutOfRangeError("latitude", lat, *LAT_RANGE, index=index)

    if not LNG_RANGE[0] <= lng <= LNG_RANGE[1]:
        raise OutOfRangeError("longitude", lng, *LNG_RANGE, index=index)


def _to_point(point: PointLike) -> Point:
    if isinstance(point, Point):
        return point
    if isinstance(point, Mapping):
        return Point.from_dict(point)
    raise MalformedInputError("Point must have 'lat' and 'lng' keys")


def validate_point(point: PointLike) -> Point:
    """Validate a single point.

    Args:
        point: Point instance or mapping with ``lat`` and ``lng`` keys

    Returns:
        The point as a ``Point`` instance

    Raises:
        MalformedInputError: If the latitude/longitude fields are absent
        OutOfRangeError: If a coordinate is out of range
    """
    result = _to_point(point)
    validate_coordinates(result.lat, result.lng)
    return result


def validate_polygon(
    polygon: PolygonLike,
    min_points: int = DEFAULT_MIN_POLYGON_POINTS,
) -> list[Point]:
    """Validate a polygon's vertex count and every vertex.

    Args:
        polygon: Ordered sequence of points; need not be explicitly closed
        min_points: Minimum number of vertices required; values below 1 are
            treated as 1

    Returns:
        The vertices as a list of ``Point`` instances, in input order

    Raises:
        InsufficientVerticesError: If there are fewer than ``min_points`` vertices
        MalformedInputError: If a vertex lacks required fields (index reported)
        OutOfRangeError: If a vertex is out of range (index reported)
    """
    if isinstance(polygon, (str, bytes, Mapping)):
        raise MalformedInputError("Polygon must be a sequence of points")

    try:
        vertices = list(polygon)
    except TypeError:
        raise MalformedInputError("Polygon must be a sequence of points") from None

    min_points = max(min_points, 1)
    if len(vertices) < min_points:
        raise InsufficientVerticesError(len(vertices), min_points)

    points: list[Point] = []
    for index, vertex in enumerate(vertices):
        try:
            point = _to_point(vertex)
        except MalformedInputError:
            raise MalformedInputError(
                f"Invalid point at index {index}. Point must have 'lat' and 'lng' keys",
                index=index,
            ) from None

        validate_coordinates(point.lat, point.lng, index=index)
        points.append(point)

    return points
