"""Utility functions for geoutils.

This module provides utility functions including:

- Logging setup and configuration
"""

from geoutils.utils.logging import configure_logging

__all__ = [
    "configure_logging",
]
