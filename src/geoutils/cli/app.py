"""CLI application entry point for geoutils.

This module provides a small command-line tester for the geometry
functions using Typer. Polygons and points are given as JSON, e.g.
``--point '{"lat": 5.59, "lng": -0.17}'``.
"""

import json
from pathlib import Path
from typing import Annotated, Any

import typer

from geoutils import __version__
from geoutils.cli.output import (
    console,
    format_inside,
    format_point,
    print_bounding_box,
    print_error,
    print_header,
    print_step,
    print_table,
    print_wkt,
)
from geoutils.config import GeoUtilsSettings, load_settings_from_env
from geoutils.core import GeoHelper, is_point_in_polygon, is_point_in_polygon_optimized
from geoutils.core.validation import validate_point, validate_polygon
from geoutils.domain import DistanceUnit
from geoutils.exceptions import GeoUtilsError
from geoutils.utils import configure_logging

# Square around central Accra, explicitly closed
DEFAULT_POLYGON = json.dumps(
    [
        {"lat": 5.6037, "lng": -0.1870},
        {"lat": 5.6037, "lng": -0.1700},
        {"lat": 5.5800, "lng": -0.1700},
        {"lat": 5.5800, "lng": -0.1870},
        {"lat": 5.6037, "lng": -0.1870},
    ]
)
DEFAULT_POINT = json.dumps({"lat": 5.5919, "lng": -0.1785})

# San Francisco and New York
DEFAULT_FROM = json.dumps({"lat": 37.7749, "lng": -122.4194})
DEFAULT_TO = json.dumps({"lat": 40.7128, "lng": -74.0060})

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

# Create the Typer app
app = typer.Typer(
    name="geoutils",
    help="Test point-in-polygon, bounding box, distance and WKT functions from the command line.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]GeoUtils[/bold blue] v{__version__}")
        raise typer.Exit()


def _parse_json(value: str, label: str) -> Any:
    """Decode a JSON option, exiting with an error message on failure."""
    try:
        return json.loads(value)
    except json.JSONDecodeError as e:
        print_error(f"Invalid JSON for {label}", details=str(e))
        raise typer.Exit(code=1) from None


def _build_helper(ctx: typer.Context) -> GeoHelper:
    settings: GeoUtilsSettings = ctx.obj or load_settings_from_env()
    return GeoHelper(settings)


@app.callback()
def main_callback(
    ctx: typer.Context,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """GeoUtils command line tester."""
    if log_level.upper() not in LOG_LEVELS:
        print_error(f"Invalid log level: {log_level}", details=f"Use one of {', '.join(LOG_LEVELS)}")
        raise typer.Exit(code=1)

    settings = load_settings_from_env()
    settings.logging.log_file = log_file
    settings.logging.log_level = log_level.upper()

    configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
    )

    ctx.obj = settings


@app.command()
def contains(
    ctx: typer.Context,
    polygon: Annotated[
        str,
        typer.Option("--polygon", help="JSON array of polygon coordinates"),
    ] = DEFAULT_POLYGON,
    point: Annotated[
        str,
        typer.Option("--point", help="JSON object with lat/lng point"),
    ] = DEFAULT_POINT,
    database_url: Annotated[
        str | None,
        typer.Option(
            "--database-url",
            help="Also evaluate with ST_Contains on this SQLAlchemy database URL",
        ),
    ] = None,
) -> None:
    """Test point-in-polygon with the standard and optimized algorithms."""
    polygon_data = _parse_json(polygon, "--polygon")
    point_data = _parse_json(point, "--point")

    helper = _build_helper(ctx)

    try:
        if database_url is not None:
            from geoutils.io import SqlContainmentOracle

            helper = GeoHelper(helper.settings, oracle=SqlContainmentOracle.from_url(database_url))

        vertices = validate_polygon(polygon_data, min_points=helper.min_points)
        test_point = validate_point(point_data)

        print_header(__version__)
        print_step("Testing Point-in-Polygon")
        print_table(
            "Input",
            ("Property", "Value"),
            [
                ("Polygon Points", str(len(vertices))),
                ("Test Point", format_point(test_point)),
            ],
        )

        standard = is_point_in_polygon(vertices, test_point, min_points=helper.min_points)
        optimized = is_point_in_polygon_optimized(vertices, test_point, min_points=helper.min_points)
        rows = [
            ("Standard Algorithm", format_inside(standard)),
            ("Optimized Algorithm", format_inside(optimized)),
        ]

        if helper.oracle is not None:
            rows.append(("Spatial Database", format_inside(helper.contains_in_database(vertices, test_point))))

        print_table("Results", ("Method", "Result"), rows)
        print_wkt(helper.to_wkt(vertices))

    except GeoUtilsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1) from None


@app.command()
def bbox(
    ctx: typer.Context,
    polygon: Annotated[
        str,
        typer.Option("--polygon", help="JSON array of polygon coordinates"),
    ] = DEFAULT_POLYGON,
) -> None:
    """Test bounding box calculation."""
    polygon_data = _parse_json(polygon, "--polygon")
    helper = _build_helper(ctx)

    try:
        box = helper.bounding_box(polygon_data)

        print_header(__version__)
        print_step("Testing Bounding Box Calculation")
        console.print(f"  Polygon has {len(polygon_data)} points")
        print_bounding_box(box)

        center = box.center
        console.print(
            f"  Center point in bounding box: "
            f"{format_inside(helper.in_bounding_box(box, center), yes='Yes', no='No')}"
        )

    except GeoUtilsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None


@app.command()
def distance(
    ctx: typer.Context,
    from_point: Annotated[
        str,
        typer.Option("--from", help="JSON object with lat/lng start point"),
    ] = DEFAULT_FROM,
    to_point: Annotated[
        str,
        typer.Option("--to", help="JSON object with lat/lng end point"),
    ] = DEFAULT_TO,
    unit: Annotated[
        str | None,
        typer.Option("--unit", "-u", help="Distance unit (km|miles|meters); all units if omitted"),
    ] = None,
) -> None:
    """Test great-circle distance calculation."""
    start = _parse_json(from_point, "--from")
    end = _parse_json(to_point, "--to")
    helper = _build_helper(ctx)

    try:
        units = [DistanceUnit.parse(unit)] if unit is not None else list(DistanceUnit)
        p1 = validate_point(start)
        p2 = validate_point(end)

        print_header(__version__)
        print_step("Testing Distance Calculation")
        print_table(
            "Points",
            ("Point", "Coordinates"),
            [("From", format_point(p1)), ("To", format_point(p2))],
        )

        rows = []
        for u in units:
            value = helper.distance(p1, p2, u)
            decimals = 0 if u is DistanceUnit.METERS else 2
            rows.append((u.name.title(), f"{value:,.{decimals}f} {u.value}"))
        print_table("Distances", ("Unit", "Distance"), rows)

    except GeoUtilsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None


@app.command()
def wkt(
    ctx: typer.Context,
    polygon: Annotated[
        str,
        typer.Option("--polygon", help="JSON array of polygon coordinates"),
    ] = DEFAULT_POLYGON,
    precision: Annotated[
        int | None,
        typer.Option("--precision", help="Decimal places per coordinate", min=0, max=15),
    ] = None,
) -> None:
    """Convert a polygon to WKT and print it."""
    polygon_data = _parse_json(polygon, "--polygon")
    helper = _build_helper(ctx)
    if precision is not None:
        helper.settings.wkt.coordinate_precision = precision

    try:
        console.print(helper.to_wkt(polygon_data), markup=False, highlight=False, soft_wrap=True)
    except GeoUtilsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
