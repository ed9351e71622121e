"""Tests for pydantic settings and environment loading."""

import pytest
from pydantic import ValidationError

from geoutils.config import GeoUtilsSettings, get_default_settings, load_settings_from_env
from geoutils.config.settings import ValidationConfig, WktConfig
from geoutils.domain import DistanceUnit


class TestSettings:
    """Tests for settings models."""

    def test_defaults(self) -> None:
        """Test defaults mirror the library's documented behaviour."""
        settings = get_default_settings()
        assert settings.validation.min_polygon_points == 3
        assert settings.distance.default_unit is DistanceUnit.KILOMETERS
        assert settings.wkt.coordinate_precision == 6
        assert settings.performance.use_bounding_box_optimization is True
        assert settings.spatial_db.enabled is False
        assert settings.spatial_db.url is None

    def test_min_polygon_points_lower_bound(self) -> None:
        """Test that fewer than three vertices cannot be configured."""
        with pytest.raises(ValidationError):
            ValidationConfig(min_polygon_points=2)

    def test_precision_bounds(self) -> None:
        """Test WKT precision limits."""
        with pytest.raises(ValidationError):
            WktConfig(coordinate_precision=-1)
        with pytest.raises(ValidationError):
            WktConfig(coordinate_precision=16)

    def test_unit_from_string(self) -> None:
        """Test that the default unit is coerced from its value."""
        settings = GeoUtilsSettings.model_validate({"distance": {"default_unit": "meters"}})
        assert settings.distance.default_unit is DistanceUnit.METERS


class TestLoadSettingsFromEnv:
    """Tests for load_settings_from_env."""

    def test_empty_environment(self) -> None:
        """Test that no variables gives defaults."""
        assert load_settings_from_env({}) == get_default_settings()

    def test_all_variables(self) -> None:
        """Test every supported variable."""
        settings = load_settings_from_env(
            {
                "GEO_UTILS_DEFAULT_DISTANCE_UNIT": "miles",
                "GEO_UTILS_MIN_POLYGON_POINTS": "4",
                "GEO_UTILS_COORDINATE_PRECISION": "3",
                "GEO_UTILS_USE_BOUNDING_BOX_OPTIMIZATION": "false",
                "GEO_UTILS_SPATIAL_DB_ENABLED": "true",
                "GEO_UTILS_SPATIAL_DB_URL": "sqlite://",
            }
        )
        assert settings.distance.default_unit is DistanceUnit.MILES
        assert settings.validation.min_polygon_points == 4
        assert settings.wkt.coordinate_precision == 3
        assert settings.performance.use_bounding_box_optimization is False
        assert settings.spatial_db.enabled is True
        assert settings.spatial_db.url == "sqlite://"

    def test_unrelated_variables_ignored(self) -> None:
        """Test that other variables do not leak into settings."""
        settings = load_settings_from_env({"GEO_UTILS_UNKNOWN": "1", "PATH": "/usr/bin"})
        assert settings == get_default_settings()

    def test_invalid_value(self) -> None:
        """Test that pydantic rejects invalid values."""
        with pytest.raises(ValidationError):
            load_settings_from_env({"GEO_UTILS_DEFAULT_DISTANCE_UNIT": "furlongs"})

    def test_reads_os_environ(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test the default environment source."""
        monkeypatch.setenv("GEO_UTILS_COORDINATE_PRECISION", "2")
        assert load_settings_from_env().wkt.coordinate_precision == 2
