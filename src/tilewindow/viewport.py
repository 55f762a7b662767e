"""Immutable description of one scrolled axis."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, replace
from typing import TypeVar

from .utils.logging import get_logger
from .windowing import (
    check_geometry,
    first_tile_offset,
    first_visible_index,
    iter_infinite_tiles,
    iter_repeating_tiles,
    iter_tiles,
    visible_tile_count,
)

T = TypeVar("T")

logger = get_logger(__name__)


@dataclass(frozen=True)
class AxisViewport:
    """Describe the display, tile size and scroll offset along one axis.

    Instances are validated on construction. A 2D view is two of these, one
    per axis.
    """

    display_size: float
    tile_size: float
    scroll: float = 0.0

    def __post_init__(self) -> None:
        check_geometry(self.display_size, self.tile_size, self.scroll)

    @property
    def first_tile_offset(self) -> float:
        """Pixels of the first visible tile hidden before the leading edge."""
        return first_tile_offset(self.tile_size, self.scroll, normalize=True)

    @property
    def tile_count(self) -> int:
        return visible_tile_count(self.display_size, self.tile_size, self.first_tile_offset)

    @property
    def first_index(self) -> int:
        return first_visible_index(self.tile_size, self.scroll)

    def window(self, tiles: Iterable[T]) -> Iterator[tuple[T, float]]:
        return iter_tiles(tiles, self.display_size, self.tile_size, self.scroll)

    def positions(self) -> Iterator[float]:
        return iter_infinite_tiles(self.display_size, self.tile_size, self.scroll)

    def repeating(self, pattern: Sequence[T]) -> Iterator[tuple[T, float]]:
        return iter_repeating_tiles(pattern, self.display_size, self.tile_size, self.scroll)

    def scrolled_by(self, delta: float) -> AxisViewport:
        """Return a copy moved by *delta* pixels."""
        return replace(self, scroll=self.scroll + delta)

    def resized(self, display_size: float) -> AxisViewport:
        return replace(self, display_size=display_size)


def compute_axis_viewport(center: float, display_size: float, tile_size: float) -> AxisViewport:
    """Build a viewport whose display is centred on *center* grid pixels."""

    scroll = center - display_size / 2.0
    logger.debug(
        "Viewport centred on %s: display=%s tile=%s scroll=%s",
        center,
        display_size,
        tile_size,
        scroll,
    )
    return AxisViewport(display_size=display_size, tile_size=tile_size, scroll=scroll)


__all__ = ["AxisViewport", "compute_axis_viewport"]
