"""Spatial database containment oracle backed by SQLAlchemy.

Evaluates containment with the database's own ``ST_Contains`` so results can
be compared against, or used instead of, the in-process ray cast. Works with
any backend exposing ``ST_Contains`` and ``ST_GeomFromText`` (MySQL,
MariaDB, PostGIS, SpatiaLite).
"""

import structlog
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine

logger = structlog.get_logger(__name__)

CONTAINS_QUERY = text(
    "SELECT ST_Contains(ST_GeomFromText(:polygon), ST_GeomFromText(:point)) AS inside"
)


class SqlContainmentOracle:
    """ContainmentOracle that runs ST_Contains on a database.

    Connection management and query failures belong to SQLAlchemy:
    ``SQLAlchemyError`` propagates to the caller untouched.

    Example:
        oracle = SqlContainmentOracle.from_url("mysql+pymysql://user:pw@localhost/gis")
        inside = is_point_in_polygon_delegated(oracle, polygon_wkt, point)
    """

    def __init__(self, engine: Engine) -> None:
        """Initialize the oracle.

        Args:
            engine: SQLAlchemy engine connected to a spatially enabled database
        """
        self._engine = engine

    @classmethod
    def from_url(cls, url: str, **engine_kwargs: object) -> "SqlContainmentOracle":
        """Create an oracle with a new engine for ``url``."""
        return cls(create_engine(url, **engine_kwargs))

    @property
    def engine(self) -> Engine:
        """Underlying SQLAlchemy engine."""
        return self._engine

    def contains(self, polygon_wkt: str, point_wkt: str) -> bool:
        """Ask the database whether the polygon contains the point.

        Args:
            polygon_wkt: Polygon in WKT
            point_wkt: Point in WKT

        Returns:
            True if ST_Contains returned 1
        """
        with self._engine.connect() as connection:
            row = connection.execute(
                CONTAINS_QUERY, {"polygon": polygon_wkt, "point": point_wkt}
            ).first()

        inside = row is not None and row.inside == 1
        logger.debug("Spatial containment query", point=point_wkt, inside=inside)
        return inside
