"""Delegated containment against a real SQLAlchemy engine.

SQLite has no spatial functions, so ST_GeomFromText and ST_Contains are
registered on each connection. ST_Contains parses the WKT and answers with
the ray cast, which lets the SQL round trip be compared with the in-process
result.
"""

import pytest
from sqlalchemy import create_engine, event

from geoutils.core import (
    GeoHelper,
    array_to_wkt_polygon,
    is_point_in_polygon,
    is_point_in_polygon_delegated,
)
from geoutils.io import SqlContainmentOracle


def _parse_pairs(body: str) -> list[dict[str, float]]:
    points = []
    for pair in body.split(","):
        lng, lat = pair.split()
        points.append({"lat": float(lat), "lng": float(lng)})
    return points


def st_contains(polygon_wkt: str, point_wkt: str) -> int:
    """Minimal ST_Contains over WKT text."""
    ring = _parse_pairs(polygon_wkt.removeprefix("POLYGON((").removesuffix("))"))
    point = _parse_pairs(point_wkt.removeprefix("POINT(").removesuffix(")"))[0]
    return int(is_point_in_polygon(ring, point))


@pytest.fixture
def engine():
    """In-memory SQLite engine with stand-in spatial functions."""
    engine = create_engine("sqlite://")

    @event.listens_for(engine, "connect")
    def _register_functions(dbapi_connection, _connection_record) -> None:
        dbapi_connection.create_function("ST_GeomFromText", 1, lambda wkt: wkt)
        dbapi_connection.create_function("ST_Contains", 2, st_contains)

    yield engine
    engine.dispose()


class TestSpatialDatabaseContainment:
    """End-to-end delegated containment through SQL."""

    @pytest.mark.parametrize(
        ("point", "expected"),
        [
            ({"lat": 5, "lng": 5}, True),
            ({"lat": 15, "lng": 15}, False),
            ({"lat": 5, "lng": -1}, False),
        ],
    )
    def test_square(self, engine, square, point, expected: bool) -> None:
        """Test the SQL path on the square."""
        oracle = SqlContainmentOracle(engine)
        polygon_wkt = array_to_wkt_polygon(square)
        assert is_point_in_polygon_delegated(oracle, polygon_wkt, point) is expected

    def test_matches_ray_casting(self, engine, pentagon) -> None:
        """Test that SQL and in-process answers agree across a grid."""
        oracle = SqlContainmentOracle(engine)
        polygon_wkt = array_to_wkt_polygon(pentagon)
        for i in range(12):
            for j in range(12):
                point = {"lat": -2.75 + 0.5 * i, "lng": -2.75 + 0.5 * j}
                assert is_point_in_polygon_delegated(oracle, polygon_wkt, point) == is_point_in_polygon(
                    pentagon, point
                )

    def test_helper_with_database(self, engine, accra) -> None:
        """Test GeoHelper wired to the SQL oracle."""
        helper = GeoHelper(oracle=SqlContainmentOracle(engine))
        inside = {"lat": 5.5919, "lng": -0.1785}
        outside = {"lat": 5.7, "lng": -0.1785}

        assert helper.contains_in_database(accra, inside) is True
        assert helper.contains(accra, inside) is True
        assert helper.contains_in_database(accra, outside) is False
        assert helper.contains(accra, outside) is False
