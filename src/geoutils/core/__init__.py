"""Core geometry algorithms for geoutils.

This module contains the algorithms for:

- Validation (coordinate ranges, point and polygon structure)
- Bounding boxes (derivation, inclusive membership)
- Containment (ray casting, bounding-box fast path, delegated oracle)
- Distance (Haversine great-circle distance)
- WKT serialization (points, closed polygon rings)

All functions are:
- Stateless (safe to call concurrently)
- Pure (no side effects, no logging)
- Fail-fast on invalid input

Key functions:
- validate_coordinates / validate_point / validate_polygon
- get_bounding_box: Axis-aligned envelope of a polygon
- is_point_in_bounding_box: Inclusive box membership
- is_point_in_polygon: Even-odd ray casting
- is_point_in_polygon_optimized: Bounding-box rejection then ray casting
- is_point_in_polygon_delegated: Containment via a ContainmentOracle
- calculate_distance: Great-circle distance in km, miles or meters
- array_to_wkt_polygon / point_to_wkt: WKT serialization

Key classes:
- ContainmentOracle: Protocol for external containment evaluators
- GeoHelper: Settings-bound facade over the functions above
"""

from geoutils.core.bbox import get_bounding_box, is_point_in_bounding_box
from geoutils.core.containment import (
    ContainmentOracle,
    is_point_in_polygon,
    is_point_in_polygon_delegated,
    is_point_in_polygon_optimized,
)
from geoutils.core.distance import calculate_distance
from geoutils.core.helper import GeoHelper
from geoutils.core.validation import (
    validate_coordinates,
    validate_point,
    validate_polygon,
)
from geoutils.core.wkt import array_to_wkt_polygon, point_to_wkt

__all__ = [
    # Classes
    "ContainmentOracle",
    "GeoHelper",
    # Functions
    "array_to_wkt_polygon",
    "calculate_distance",
    "get_bounding_box",
    "is_point_in_bounding_box",
    "is_point_in_polygon",
    "is_point_in_polygon_delegated",
    "is_point_in_polygon_optimized",
    "point_to_wkt",
    "validate_coordinates",
    "validate_point",
    "validate_polygon",
]
