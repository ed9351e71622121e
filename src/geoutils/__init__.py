"""GeoUtils - Geographic geometry primitives.

GeoUtils is a small library for working with latitude/longitude polygons:
point-in-polygon testing (ray casting with an optional bounding-box fast path),
bounding boxes, Haversine distances and WKT serialization.

Example:
    >>> from geoutils import is_point_in_polygon
    >>> square = [{"lat": 0, "lng": 0}, {"lat": 0, "lng": 10},
    ...           {"lat": 10, "lng": 10}, {"lat": 10, "lng": 0}]
    >>> is_point_in_polygon(square, {"lat": 5, "lng": 5})
    True
"""

__version__ = "0.1.0"

from geoutils.core import (
    ContainmentOracle,
    GeoHelper,
    array_to_wkt_polygon,
    calculate_distance,
    get_bounding_box,
    is_point_in_bounding_box,
    is_point_in_polygon,
    is_point_in_polygon_delegated,
    is_point_in_polygon_optimized,
    point_to_wkt,
)
from geoutils.domain import BoundingBox, DistanceUnit, Point

__all__ = [
    "BoundingBox",
    "ContainmentOracle",
    "DistanceUnit",
    "GeoHelper",
    "Point",
    "__version__",
    "array_to_wkt_polygon",
    "calculate_distance",
    "get_bounding_box",
    "is_point_in_bounding_box",
    "is_point_in_polygon",
    "is_point_in_polygon_delegated",
    "is_point_in_polygon_optimized",
    "point_to_wkt",
]
