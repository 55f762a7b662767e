"""Compute which tiles of a uniform 1D grid overlap a scrolled viewport.

Both windowers are lazy generators that only touch the tiles overlapping the
display, so their cost grows with the viewport and not with the grid.

Positions are measured from the viewport's leading edge. The first tile may
start before it (negative position) and the last one may end past
``display_size``.

The generators do not validate their input: ``tile_size`` must be positive
and finite, ``display_size`` non-negative and every value finite. Breaking
those rules gives unspecified results; in practice ``ZeroDivisionError`` for a
zero tile size and ``ValueError`` from :mod:`math` for NaN or infinities.
Callers that cannot guarantee the preconditions should run
:func:`check_geometry` first.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, Sequence
from itertools import islice
from typing import TypeVar

from .errors import InvalidGeometryError
from .utils.logging import get_logger

T = TypeVar("T")

logger = get_logger(__name__)


def split_scroll(tiles_scrolled: float) -> tuple[int, int]:
    """Split a signed tile count into ``(first_tile, underflow)``.

    Positive input becomes the number of whole tiles to skip. Zero or negative
    input cannot be skipped, so it is reported as *underflow*: how many whole
    tiles the viewport starts before index 0. Both parts truncate toward zero.
    """

    if tiles_scrolled <= 0.0:
        return 0, int(-tiles_scrolled)
    return int(tiles_scrolled), 0


def first_tile_offset(tile_size: float, scroll: float, *, normalize: bool) -> float:
    """Return how many pixels of the first visible tile are scrolled away.

    The modulo truncates like C's ``fmod``, so a negative *scroll* gives a
    negative offset. The finite windower relies on that sign together with
    the underflow count from :func:`split_scroll`. With *normalize* the result
    is folded into ``[0, tile_size)`` instead.
    """

    offset = math.fmod(scroll, tile_size)
    if not normalize:
        return offset
    if scroll < 0.0:
        offset += tile_size
        # fmod of an exact negative multiple is -0.0, which would land on tile_size
        if offset >= tile_size:
            offset = 0.0
    return offset


def visible_tile_count(display_size: float, tile_size: float, offset: float) -> int:
    """Return the number of tile slots overlapping the display.

    The first tile's visible part is taken off before dividing, hence the
    ``+ 1``. ``ceil`` keeps a partially visible trailing tile. The count is
    never below one.
    """

    first_tile_display_size = tile_size - offset
    remaining = math.ceil((display_size - first_tile_display_size) / tile_size)
    return max(0, remaining) + 1


def iter_tiles(
    tiles: Iterable[T],
    display_size: float,
    tile_size: float,
    scroll: float,
) -> Iterator[tuple[T, float]]:
    """Yield ``(tile, position)`` for every element of *tiles* in the window.

    *tiles* may be any iterable, including an unbounded generator; elements
    before the window are skipped and nothing past it is pulled. A source that
    runs out early just ends the window early.
    """

    offset = first_tile_offset(tile_size, scroll, normalize=False)
    first_tile, underflow = split_scroll(scroll / tile_size)
    num_tiles = visible_tile_count(display_size, tile_size, offset)

    # position == (first_tile + tile_num) * tile_size - scroll. For scroll >= 0
    # that reduces to tile_num * tile_size - offset; for scroll < 0 nothing is
    # skipped and the whole tiles before index 0 come back through underflow.
    window = islice(tiles, first_tile, first_tile + num_tiles)
    for tile_num, tile in enumerate(window):
        yield tile, tile_size * (tile_num + underflow) - offset


def iter_infinite_tiles(
    display_size: float,
    tile_size: float,
    scroll: float,
) -> Iterator[float]:
    """Yield the position of every tile slot overlapping the display.

    Exactly ``visible_tile_count`` positions are produced. No tile identity is
    attached; see :func:`first_visible_index` to recover it.
    """

    offset = first_tile_offset(tile_size, scroll, normalize=True)
    num_tiles = visible_tile_count(display_size, tile_size, offset)
    for tile_num in range(num_tiles):
        yield tile_size * tile_num - offset


def first_visible_index(tile_size: float, scroll: float) -> int:
    """Return the grid index of the first position from :func:`iter_infinite_tiles`.

    The index may be negative. It is derived from the same normalized offset
    the positions use, so ``index * tile_size - scroll`` matches the first
    position even where ``floor(scroll / tile_size)`` would round the other way.
    """

    offset = first_tile_offset(tile_size, scroll, normalize=True)
    return int(round((scroll - offset) / tile_size))


def iter_repeating_tiles(
    pattern: Sequence[T],
    display_size: float,
    tile_size: float,
    scroll: float,
) -> Iterator[tuple[T, float]]:
    """Yield ``(pattern item, position)`` for a pattern repeated without end.

    Tile ``i`` of the grid shows ``pattern[i % len(pattern)]``, in both
    directions from index 0.
    """

    if not pattern:
        return
    index = first_visible_index(tile_size, scroll)
    for tile_num, position in enumerate(iter_infinite_tiles(display_size, tile_size, scroll)):
        yield pattern[(index + tile_num) % len(pattern)], position


def check_geometry(display_size: float, tile_size: float, scroll: float) -> None:
    """Raise :class:`InvalidGeometryError` unless the inputs can be windowed."""

    problem: str | None = None
    if not math.isfinite(tile_size) or tile_size <= 0:
        problem = f"tile_size must be a positive finite number, got {tile_size!r}"
    elif not math.isfinite(display_size) or display_size < 0:
        problem = f"display_size must be a non-negative finite number, got {display_size!r}"
    elif not math.isfinite(scroll):
        problem = f"scroll must be finite, got {scroll!r}"
    if problem is not None:
        logger.warning("Rejected window geometry: %s", problem)
        raise InvalidGeometryError(problem)


__all__ = [
    "check_geometry",
    "first_tile_offset",
    "first_visible_index",
    "iter_infinite_tiles",
    "iter_repeating_tiles",
    "iter_tiles",
    "split_scroll",
    "visible_tile_count",
]
