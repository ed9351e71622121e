"""Domain models for geoutils.

All models are immutable value types with no identity beyond their values.

Key classes:
- Point: A latitude/longitude pair
- BoundingBox: Axis-aligned envelope of a polygon
- DistanceUnit: Enum of supported distance units

Type aliases:
- PointLike: A Point or a mapping with ``lat``/``lng`` keys
- PolygonLike: An ordered sequence of PointLike vertices
"""

from collections.abc import Mapping, Sequence
from typing import Any, TypeAlias

from geoutils.domain.point import BBOX_KEYS, BoundingBox, Point
from geoutils.domain.units import DistanceUnit

PointLike: TypeAlias = Point | Mapping[str, Any]
PolygonLike: TypeAlias = Sequence[PointLike]
BoundingBoxLike: TypeAlias = BoundingBox | Mapping[str, Any]

__all__: list[str] = [
    "BBOX_KEYS",
    # Enums
    "DistanceUnit",
    # Core types
    "BoundingBox",
    "Point",
    # Aliases
    "BoundingBoxLike",
    "PointLike",
    "PolygonLike",
]
