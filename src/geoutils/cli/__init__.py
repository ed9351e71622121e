"""Command-line interface for geoutils.

This module provides the CLI using Typer with rich output for
quick manual checks of the geometry functions.

Key features:
- Point-in-polygon with standard, optimized and database results
- Bounding box and distance tables
- WKT conversion
"""

from geoutils.cli.app import cli, main

__all__ = ["cli", "main"]
