"""Configuration settings for GeoUtils."""

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from geoutils.domain import DistanceUnit

ENV_PREFIX = "GEO_UTILS_"


class ValidationConfig(BaseModel):
    """Configuration for input validation."""

    min_polygon_points: int = Field(
        default=3,
        ge=3,
        description="Minimum number of vertices a polygon must have",
    )


class DistanceConfig(BaseModel):
    """Configuration for distance calculations."""

    default_unit: DistanceUnit = Field(
        default=DistanceUnit.KILOMETERS,
        description="Unit used when a distance call does not name one",
    )


class WktConfig(BaseModel):
    """Configuration for WKT output."""

    coordinate_precision: int = Field(
        default=6,
        ge=0,
        le=15,
        description="Decimal places per coordinate in WKT output",
    )


class PerformanceConfig(BaseModel):
    """Configuration for containment performance options."""

    use_bounding_box_optimization: bool = Field(
        default=True,
        description="Reject points outside the polygon's bounding box before ray casting",
    )


class SpatialDatabaseConfig(BaseModel):
    """Configuration for the optional spatial database containment path."""

    enabled: bool = Field(
        default=False,
        description="Evaluate containment with the database's ST_Contains",
    )
    url: str | None = Field(
        default=None,
        description="SQLAlchemy database URL (e.g. mysql+pymysql://user@host/db)",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class GeoUtilsSettings(BaseModel):
    """Main library settings."""

    validation: ValidationConfig = Field(default_factory=ValidationConfig)
    distance: DistanceConfig = Field(default_factory=DistanceConfig)
    wkt: WktConfig = Field(default_factory=WktConfig)
    performance: PerformanceConfig = Field(default_factory=PerformanceConfig)
    spatial_db: SpatialDatabaseConfig = Field(default_factory=SpatialDatabaseConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


# Environment variable suffix -> (section, field)
_ENV_FIELDS: dict[str, tuple[str, str]] = {
    "DEFAULT_DISTANCE_UNIT": ("distance", "default_unit"),
    "MIN_POLYGON_POINTS": ("validation", "min_polygon_points"),
    "COORDINATE_PRECISION": ("wkt", "coordinate_precision"),
    "USE_BOUNDING_BOX_OPTIMIZATION": ("performance", "use_bounding_box_optimization"),
    "SPATIAL_DB_ENABLED": ("spatial_db", "enabled"),
    "SPATIAL_DB_URL": ("spatial_db", "url"),
}


def get_default_settings() -> GeoUtilsSettings:
    """Get default library settings."""
    return GeoUtilsSettings()


def load_settings_from_env(environ: Mapping[str, str] | None = None) -> GeoUtilsSettings:
    """Build settings from ``GEO_UTILS_*`` environment variables.

    Unset variables keep their defaults. Values are coerced and validated by
    pydantic, so ``GEO_UTILS_MIN_POLYGON_POINTS=2`` raises a ValidationError.

    Args:
        environ: Environment mapping (defaults to ``os.environ``)

    Returns:
        Populated settings
    """
    if environ is None:
        environ = os.environ

    sections: dict[str, dict[str, Any]] = {}
    for suffix, (section, field) in _ENV_FIELDS.items():
        value = environ.get(ENV_PREFIX + suffix)
        if value is not None:
            sections.setdefault(section, {})[field] = value

    return GeoUtilsSettings.model_validate(sections)
