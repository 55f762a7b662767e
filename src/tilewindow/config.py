"""Default configuration values for tilewindow."""

from __future__ import annotations

from typing import Final

# Square raster tiles are conventionally 256px wide, which also keeps the
# default viewport at exactly four tiles.
DEFAULT_TILE_SIZE: Final[float] = 256.0
DEFAULT_DISPLAY_SIZE: Final[float] = 1024.0
DEFAULT_SCROLL: Final[float] = 0.0

SETTINGS_SCHEMA_ID: Final[str] = "tilewindow/axis@1"

LOGGER_NAMESPACE: Final[str] = "tilewindow"
