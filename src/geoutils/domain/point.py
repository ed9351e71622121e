"""Core geographic types for polygon work.

This module defines the value types passed between the geometry functions:
- Point: A latitude/longitude pair
- BoundingBox: An axis-aligned envelope around a polygon
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from geoutils.exceptions import MalformedInputError

BBOX_KEYS: tuple[str, ...] = ("min_lat", "max_lat", "min_lng", "max_lng")


@dataclass(frozen=True, slots=True)
class Point:
    """A geographic point in decimal degrees.

    Immutable and hashable. Range checks are left to the validator so that
    out-of-range input is reported with the offending value.

    Attributes:
        lat: Latitude in degrees
        lng: Longitude in degrees
    """

    lat: float
    lng: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (lat, lng) tuple.

        Returns:
            Tuple of (lat, lng) coordinates
        """
        return (self.lat, self.lng)

    def to_dict(self) -> dict[str, float]:
        """Serialize to dictionary.

        Returns:
            Dictionary with lat and lng fields
        """
        return {"lat": self.lat, "lng": self.lng}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Mapping with lat and lng fields

        Returns:
            Point instance

        Raises:
            MalformedInputError: If either field is absent or not numeric
        """
        if not isinstance(data, Mapping) or data.get("lat") is None or data.get("lng") is None:
            raise MalformedInputError("Point must have 'lat' and 'lng' keys")
        try:
            return cls(lat=float(data["lat"]), lng=float(data["lng"]))
        except (TypeError, ValueError) as e:
            raise MalformedInputError(f"Point coordinates must be numeric: {e}") from e


@dataclass(frozen=True, slots=True)
class BoundingBox:
    """Axis-aligned envelope of a polygon.

    Always derived from a validated polygon by ``get_bounding_box``, so
    ``min_lat <= max_lat`` and ``min_lng <= max_lng`` hold.
    """

    min_lat: float
    max_lat: float
    min_lng: float
    max_lng: float

    @property
    def center(self) -> Point:
        """Midpoint of the box."""
        return Point(
            lat=(self.min_lat + self.max_lat) / 2,
            lng=(self.min_lng + self.max_lng) / 2,
        )

    def to_dict(self) -> dict[str, float]:
        """Serialize to dictionary keyed by ``BBOX_KEYS``."""
        return {
            "min_lat": self.min_lat,
            "max_lat": self.max_lat,
            "min_lng": self.min_lng,
            "max_lng": self.max_lng,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "BoundingBox":
        """Deserialize from dictionary, requiring all four bounds.

        Raises:
            MalformedInputError: Naming the first missing key
        """
        for key in BBOX_KEYS:
            if key not in data:
                raise MalformedInputError(f"Bounding box must contain '{key}' key")
        try:
            return cls(**{key: float(data[key]) for key in BBOX_KEYS})
        except (TypeError, ValueError) as e:
            raise MalformedInputError(f"Bounding box values must be numeric: {e}") from e
