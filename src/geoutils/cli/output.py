"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from geoutils.domain import BoundingBox, Point

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success / inside
SYM_ERR = "✗"  # Error / outside
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]GeoUtils[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def format_inside(inside: bool, yes: str = "Inside", no: str = "Outside") -> str:
    """Format a containment result with a coloured symbol."""
    if inside:
        return f"[green]{SYM_OK} {yes}[/green]"
    return f"[red]{SYM_ERR} {no}[/red]"


def format_point(point: Point) -> str:
    """Format a point as ``(lat, lng)``."""
    return f"({point.lat}, {point.lng})"


def print_table(title: str, headers: tuple[str, str], rows: list[tuple[str, str]]) -> None:
    """Print a two-column table.

    Args:
        title: Table title
        headers: Column headers
        rows: Table rows
    """
    table = Table(title=title, title_justify="left", show_edge=False)
    table.add_column(headers[0], style="bold")
    table.add_column(headers[1])
    for left, right in rows:
        table.add_row(left, right)
    console.print(table)


def print_bounding_box(box: BoundingBox) -> None:
    """Print the four bounds of a bounding box."""
    print_table(
        "Bounding Box",
        ("Boundary", "Value"),
        [
            ("Min Latitude", str(box.min_lat)),
            ("Max Latitude", str(box.max_lat)),
            ("Min Longitude", str(box.min_lng)),
            ("Max Longitude", str(box.max_lng)),
        ],
    )


def print_wkt(wkt: str) -> None:
    """Print WKT text without rich markup processing."""
    console.print(f"  WKT {SYM_DOT} ", end="")
    console.print(wkt, markup=False, highlight=False, soft_wrap=True)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {escape(message)}")
    if details:
        console.print(f"  {escape(details)}")
