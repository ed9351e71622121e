"""Well-Known-Text serialization of points and polygons.

WKT lists coordinates longitude first. Polygon rings are always written
closed: if the input's first and last vertices differ, the first vertex is
repeated at the end.
"""

from geoutils.core.validation import (
    DEFAULT_MIN_POLYGON_POINTS,
    validate_point,
    validate_polygon,
)
from geoutils.domain import Point, PointLike, PolygonLike

DEFAULT_PRECISION = 6


def _format_coordinate(point: Point, precision: int) -> str:
    return f"{point.lng:.{precision}f} {point.lat:.{precision}f}"


def point_to_wkt(point: PointLike, precision: int = DEFAULT_PRECISION) -> str:
    """Convert a point to WKT.

    Args:
        point: Point to convert
        precision: Number of decimal places per coordinate

    Returns:
        String of the form ``POINT(lng lat)``

    Examples:
        >>> point_to_wkt({"lat": 5.5, "lng": -0.25})
        'POINT(-0.250000 5.500000)'
    """
    p = validate_point(point)
    return f"POINT({_format_coordinate(p, precision)})"


def array_to_wkt_polygon(
    polygon: PolygonLike,
    precision: int = DEFAULT_PRECISION,
    min_points: int = DEFAULT_MIN_POLYGON_POINTS,
) -> str:
    """Convert a sequence of points to a WKT polygon.

    Args:
        polygon: Ordered sequence of points
        precision: Number of decimal places per coordinate
        min_points: Minimum number of vertices required

    Returns:
        String of the form ``POLYGON((lng1 lat1, ..., lng1 lat1))``

    Examples:
        >>> array_to_wkt_polygon([{"lat": 0, "lng": 0}, {"lat": 0, "lng": 1},
        ...                       {"lat": 1, "lng": 1}], precision=1)
        'POLYGON((0.0 0.0, 1.0 0.0, 1.0 1.0, 0.0 0.0))'
    """
    points = validate_polygon(polygon, min_points=min_points)

    if points[0] != points[-1]:
        points.append(points[0])

    coordinates = ", ".join(_format_coordinate(p, precision) for p in points)
    return f"POLYGON(({coordinates}))"
