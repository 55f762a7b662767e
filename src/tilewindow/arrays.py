"""Vectorised tile positions for renderers that upload geometry in batches."""

from __future__ import annotations

import numpy as np

from .windowing import first_tile_offset, visible_tile_count


def tile_positions_array(display_size: float, tile_size: float, scroll: float) -> np.ndarray:
    """Return the infinite-window positions as a ``float64`` vector.

    Element ``i`` equals the ``i``-th value of
    :func:`~tilewindow.windowing.iter_infinite_tiles` for the same arguments.
    """

    offset = first_tile_offset(tile_size, scroll, normalize=True)
    num_tiles = visible_tile_count(display_size, tile_size, offset)
    return np.arange(num_tiles, dtype=np.float64) * tile_size - offset


__all__ = ["tile_positions_array"]
