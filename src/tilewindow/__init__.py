"""Visible-tile windowing for scrollable 1D tile grids.

``iter_tiles`` windows a caller-supplied sequence of tiles, while
``iter_infinite_tiles`` produces positions for an unbounded grid.
"""

from .errors import InvalidGeometryError, TileWindowError
from .viewport import AxisViewport, compute_axis_viewport
from .windowing import (
    check_geometry,
    first_visible_index,
    iter_infinite_tiles,
    iter_repeating_tiles,
    iter_tiles,
)

__all__ = [
    "AxisViewport",
    "InvalidGeometryError",
    "TileWindowError",
    "check_geometry",
    "compute_axis_viewport",
    "first_visible_index",
    "iter_infinite_tiles",
    "iter_repeating_tiles",
    "iter_tiles",
]
