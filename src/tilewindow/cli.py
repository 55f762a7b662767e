"""Typer-based CLI entry point."""

from __future__ import annotations

import json
from functools import wraps
from pathlib import Path
from typing import Any, List, Optional

import typer
from rich import print
from rich.table import Table

from .errors import InvalidGeometryError, SettingsError, TileWindowError
from .settings import load_settings, merge_with_defaults, viewport_from_settings
from .utils.logging import configure_logging, get_logger
from .viewport import AxisViewport

logger = get_logger(__name__)

app = typer.Typer(help="Find the tiles of a 1D grid that overlap a scrolled viewport")

_DISPLAY_OPTION = typer.Option(None, "--display", "-d", help="Viewport length in pixels")
_TILE_OPTION = typer.Option(None, "--tile", "-t", help="Tile length in pixels")
_SCROLL_OPTION = typer.Option(None, "--scroll", "-s", help="Signed scroll offset in pixels")
_SETTINGS_OPTION = typer.Option(None, "--settings", help="JSON settings file with axis defaults")
_JSON_OPTION = typer.Option(False, "--json", help="Print JSON instead of a table")


def _handle_errors(func):
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except (InvalidGeometryError, SettingsError) as exc:
            typer.echo(f"Error: {exc}", err=True)
            raise typer.Exit(1) from exc
        except TileWindowError as exc:
            typer.echo(f"Unexpected error: {exc}", err=True)
            raise typer.Exit(1) from exc

    return wrapper


def _resolve_viewport(
    display: Optional[float],
    tile: Optional[float],
    scroll: Optional[float],
    settings_path: Optional[Path],
) -> AxisViewport:
    """Combine command line values with the settings file and defaults."""

    data = load_settings(settings_path) if settings_path is not None else merge_with_defaults(None)
    overrides = {"display_size": display, "tile_size": tile, "scroll": scroll}
    data.update({key: value for key, value in overrides.items() if value is not None})
    return viewport_from_settings(data)


def _format_position(position: float) -> str:
    return f"{position:g}"


def _emit(rows: list[dict[str, Any]], columns: list[str], title: str, as_json: bool) -> None:
    if as_json:
        typer.echo(json.dumps(rows))
        return
    # rich wraps table titles to the table width
    print(title)
    table = Table()
    for column in columns:
        table.add_column(column, justify="right" if column != "tile" else "left")
    for row in rows:
        table.add_row(
            *(
                _format_position(row[column]) if isinstance(row[column], float) else str(row[column])
                for column in columns
            )
        )
    print(table)


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging")) -> None:
    configure_logging(verbose)


@app.command()
@_handle_errors
def positions(
    display: Optional[float] = _DISPLAY_OPTION,
    tile: Optional[float] = _TILE_OPTION,
    scroll: Optional[float] = _SCROLL_OPTION,
    settings: Optional[Path] = _SETTINGS_OPTION,
    as_json: bool = _JSON_OPTION,
) -> None:
    """List the positions of every tile slot overlapping the viewport."""

    viewport = _resolve_viewport(display, tile, scroll, settings)
    first_index = viewport.first_index
    rows = [
        {"index": first_index + tile_num, "position": position}
        for tile_num, position in enumerate(viewport.positions())
    ]
    logger.debug("positions: %s slots for %s", len(rows), viewport)
    _emit(rows, ["index", "position"], f"{len(rows)} visible tile slots", as_json)


@app.command()
@_handle_errors
def window(
    labels: List[str] = typer.Argument(..., help="Tile labels in grid order"),
    display: Optional[float] = _DISPLAY_OPTION,
    tile: Optional[float] = _TILE_OPTION,
    scroll: Optional[float] = _SCROLL_OPTION,
    settings: Optional[Path] = _SETTINGS_OPTION,
    as_json: bool = _JSON_OPTION,
) -> None:
    """Show which of LABELS are visible and where."""

    viewport = _resolve_viewport(display, tile, scroll, settings)
    rows = [{"tile": label, "position": position} for label, position in viewport.window(labels)]
    logger.debug("window: %s of %s labels visible for %s", len(rows), len(labels), viewport)
    _emit(rows, ["tile", "position"], f"{len(rows)} of {len(labels)} tiles visible", as_json)


@app.command()
@_handle_errors
def repeat(
    labels: List[str] = typer.Argument(..., help="Pattern repeated along the whole axis"),
    display: Optional[float] = _DISPLAY_OPTION,
    tile: Optional[float] = _TILE_OPTION,
    scroll: Optional[float] = _SCROLL_OPTION,
    settings: Optional[Path] = _SETTINGS_OPTION,
    as_json: bool = _JSON_OPTION,
) -> None:
    """Window an endlessly repeated LABELS pattern."""

    viewport = _resolve_viewport(display, tile, scroll, settings)
    rows = [{"tile": label, "position": position} for label, position in viewport.repeating(labels)]
    logger.debug("repeat: %s visible tiles from a %s-label pattern for %s", len(rows), len(labels), viewport)
    _emit(rows, ["tile", "position"], f"{len(rows)} visible tiles", as_json)


if __name__ == "__main__":  # pragma: no cover
    app()
