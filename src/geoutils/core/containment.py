"""Point-in-polygon containment.

Three evaluation paths share the same boolean result contract:
- is_point_in_polygon: exact even-odd ray casting
- is_point_in_polygon_optimized: bounding-box rejection, then ray casting
- is_point_in_polygon_delegated: hands WKT text to a ContainmentOracle,
  typically a spatial database

Points lying exactly on an edge or vertex get a deterministic but otherwise
unspecified answer from the ray-casting paths.
"""

from typing import Protocol, runtime_checkable

from geoutils.core.bbox import get_bounding_box, is_point_in_bounding_box
from geoutils.core.validation import (
    DEFAULT_MIN_POLYGON_POINTS,
    validate_point,
    validate_polygon,
)
from geoutils.core.wkt import point_to_wkt
from geoutils.domain import PointLike, PolygonLike
from geoutils.exceptions import MalformedInputError

# Edges whose latitude span is below this are treated as non-crossing
HORIZONTAL_EDGE_EPSILON = 1e-10


@runtime_checkable
class ContainmentOracle(Protocol):
    """External evaluator of polygon containment.

    Implementations receive a ``POLYGON((...))`` and a ``POINT(...)`` WKT
    string and answer with a boolean, or ``1``/``0``.
    """

    def contains(self, polygon_wkt: str, point_wkt: str) -> bool | int: ...


def is_point_in_polygon(
    polygon: PolygonLike,
    point: PointLike,
    min_points: int = DEFAULT_MIN_POLYGON_POINTS,
) -> bool:
    """Determine if a point is inside a polygon using ray casting.

    Casts a ray from the point towards increasing longitude and counts
    crossings with polygon edges. The polygon is treated as closed: the edge
    from the last vertex back to the first is always included.

    Args:
        polygon: Ordered sequence of points
        point: Point to test
        min_points: Minimum number of vertices required

    Returns:
        True if the point is inside the polygon, False otherwise

    Examples:
        >>> square = [{"lat": 0, "lng": 0}, {"lat": 0, "lng": 10},
        ...           {"lat": 10, "lng": 10}, {"lat": 10, "lng": 0}]
        >>> is_point_in_polygon(square, {"lat": 5, "lng": 5})
        True
        >>> is_point_in_polygon(square, {"lat": 15, "lng": 15})
        False
    """
    vertices = validate_polygon(polygon, min_points=min_points)
    p = validate_point(point)

    inside = False
    x, y = p.lng, p.lat
    n = len(vertices)
    j = n - 1

    for i in range(n):
        xi, yi = vertices[i].lng, vertices[i].lat
        xj, yj = vertices[j].lng, vertices[j].lat
        j = i

        denominator = yj - yi
        if abs(denominator) < HORIZONTAL_EDGE_EPSILON:
            continue

        # Check if ray from point intersects edge (j, i)
        if ((yi > y) != (yj > y)) and (x < (xj - xi) * (y - yi) / denominator + xi):
            inside = not inside

    return inside


def is_point_in_polygon_optimized(
    polygon: PolygonLike,
    point: PointLike,
    min_points: int = DEFAULT_MIN_POLYGON_POINTS,
) -> bool:
    """Point-in-polygon check with bounding-box pre-filtering.

    A point outside the polygon's bounding box is rejected without running
    the ray cast. A True result always comes from the exact test.

    Args:
        polygon: Ordered sequence of points
        point: Point to test
        min_points: Minimum number of vertices required

    Returns:
        True if the point is inside the polygon
    """
    vertices = validate_polygon(polygon, min_points=min_points)
    box = get_bounding_box(vertices, min_points=min_points)

    if not is_point_in_bounding_box(box, point):
        return False

    return is_point_in_polygon(vertices, point, min_points=min_points)


def is_point_in_polygon_delegated(
    oracle: ContainmentOracle,
    polygon_wkt: str,
    point: PointLike,
) -> bool:
    """Check containment through an external oracle such as a spatial database.

    Args:
        oracle: Evaluator accepting polygon and point WKT
        polygon_wkt: Polygon in WKT, e.g. from ``array_to_wkt_polygon``
        point: Point to test

    Returns:
        True if the oracle reports containment

    Raises:
        MalformedInputError: If the polygon WKT is empty
        OutOfRangeError: If the point is out of range

    Errors raised by the oracle propagate unchanged.
    """
    if not polygon_wkt or not polygon_wkt.strip():
        raise MalformedInputError("Polygon WKT cannot be empty")

    p = validate_point(point)
    result = oracle.contains(polygon_wkt, point_to_wkt(p))

    return result == 1
