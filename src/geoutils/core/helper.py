"""Settings-bound entry point to the geometry functions.

The module-level functions take their tunables as keyword arguments.
GeoHelper binds those tunables once from GeoUtilsSettings so host
applications can configure minimum polygon size, default distance unit,
WKT precision, bounding-box pre-filtering and the spatial database path in
one place.
"""

import structlog

from geoutils.config import GeoUtilsSettings
from geoutils.core.bbox import get_bounding_box, is_point_in_bounding_box
from geoutils.core.containment import (
    ContainmentOracle,
    is_point_in_polygon,
    is_point_in_polygon_delegated,
    is_point_in_polygon_optimized,
)
from geoutils.core.distance import calculate_distance
from geoutils.core.validation import validate_polygon
from geoutils.core.wkt import array_to_wkt_polygon, point_to_wkt
from geoutils.domain import BoundingBox, BoundingBoxLike, DistanceUnit, PointLike, PolygonLike
from geoutils.exceptions import GeoUtilsError

logger = structlog.get_logger(__name__)


class GeoHelper:
    """Geometry operations configured from GeoUtilsSettings.

    Holds no mutable state; one instance can be shared across threads.

    Example:
        helper = GeoHelper(load_settings_from_env())
        if helper.contains(zone, {"lat": 5.59, "lng": -0.17}):
            ...
    """

    def __init__(
        self,
        settings: GeoUtilsSettings | None = None,
        oracle: ContainmentOracle | None = None,
    ) -> None:
        """Initialize the helper.

        Args:
            settings: Library settings (defaults if None)
            oracle: Containment oracle for ``contains_in_database``. If None and
                ``settings.spatial_db`` is enabled with a URL, a
                SqlContainmentOracle is created for that URL.
        """
        self.settings = settings or GeoUtilsSettings()

        if oracle is None and self.settings.spatial_db.enabled and self.settings.spatial_db.url:
            from geoutils.io import SqlContainmentOracle

            oracle = SqlContainmentOracle.from_url(self.settings.spatial_db.url)

        self.oracle = oracle

    @property
    def min_points(self) -> int:
        """Minimum polygon vertex count from settings."""
        return self.settings.validation.min_polygon_points

    def contains(self, polygon: PolygonLike, point: PointLike) -> bool:
        """Check containment with the in-process ray cast.

        Uses bounding-box pre-filtering when
        ``performance.use_bounding_box_optimization`` is set.
        """
        vertices = validate_polygon(polygon, min_points=self.min_points)

        if self.settings.performance.use_bounding_box_optimization:
            inside = is_point_in_polygon_optimized(vertices, point, min_points=self.min_points)
        else:
            inside = is_point_in_polygon(vertices, point, min_points=self.min_points)

        logger.debug("Containment evaluated", vertices=len(vertices), inside=inside)
        return inside

    def contains_in_database(self, polygon: PolygonLike, point: PointLike) -> bool:
        """Check containment through the configured oracle.

        Raises:
            GeoUtilsError: If no oracle is configured
        """
        if self.oracle is None:
            raise GeoUtilsError("No spatial database configured for containment checks")

        polygon_wkt = self.to_wkt(polygon)
        inside = is_point_in_polygon_delegated(self.oracle, polygon_wkt, point)

        logger.debug("Delegated containment evaluated", polygon=polygon_wkt, inside=inside)
        return inside

    def bounding_box(self, polygon: PolygonLike) -> BoundingBox:
        """Get the polygon's bounding box."""
        return get_bounding_box(polygon, min_points=self.min_points)

    def in_bounding_box(self, box: BoundingBoxLike, point: PointLike) -> bool:
        """Check if a point lies within a bounding box (inclusive)."""
        return is_point_in_bounding_box(box, point)

    def distance(
        self,
        point1: PointLike,
        point2: PointLike,
        unit: DistanceUnit | str | None = None,
    ) -> float:
        """Great-circle distance, in ``distance.default_unit`` unless ``unit`` is given."""
        if unit is None:
            unit = self.settings.distance.default_unit
        return calculate_distance(point1, point2, unit)

    def to_wkt(self, polygon: PolygonLike) -> str:
        """Polygon WKT with ``wkt.coordinate_precision`` decimals."""
        return array_to_wkt_polygon(
            polygon,
            precision=self.settings.wkt.coordinate_precision,
            min_points=self.min_points,
        )

    def point_to_wkt(self, point: PointLike) -> str:
        """Point WKT with ``wkt.coordinate_precision`` decimals."""
        return point_to_wkt(point, precision=self.settings.wkt.coordinate_precision)
