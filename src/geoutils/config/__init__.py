"""Configuration management for geoutils.

This module provides configuration management using Pydantic models.
Configuration can be provided via ``GEO_UTILS_*`` environment variables,
CLI arguments or defaults.

Key classes:
- ValidationConfig: Polygon size and coordinate range checks
- DistanceConfig: Default distance unit
- WktConfig: WKT coordinate precision
- PerformanceConfig: Bounding-box pre-filtering
- SpatialDatabaseConfig: Optional spatial database path
- LoggingConfig: Logging settings
- GeoUtilsSettings: Main library settings
"""

from geoutils.config.settings import (
    DistanceConfig,
    GeoUtilsSettings,
    LoggingConfig,
    PerformanceConfig,
    SpatialDatabaseConfig,
    ValidationConfig,
    WktConfig,
    get_default_settings,
    load_settings_from_env,
)

__all__ = [
    "DistanceConfig",
    "GeoUtilsSettings",
    "LoggingConfig",
    "PerformanceConfig",
    "SpatialDatabaseConfig",
    "ValidationConfig",
    "WktConfig",
    "get_default_settings",
    "load_settings_from_env",
]
