from __future__ import annotations

import dataclasses

import numpy as np
import pytest

from tilewindow import AxisViewport, InvalidGeometryError, compute_axis_viewport
from tilewindow.arrays import tile_positions_array
from tilewindow.windowing import iter_infinite_tiles


class TestAxisViewport:
    def test_derived_values(self):
        viewport = AxisViewport(display_size=25.0, tile_size=10.0, scroll=5.0)
        assert viewport.first_tile_offset == 5.0
        assert viewport.tile_count == 3
        assert viewport.first_index == 0

    def test_negative_scroll_index(self):
        viewport = AxisViewport(display_size=25.0, tile_size=10.0, scroll=-5.0)
        assert viewport.first_index == -1
        assert list(viewport.positions()) == [-5.0, 5.0, 15.0]

    def test_window(self):
        viewport = AxisViewport(display_size=25.0, tile_size=10.0, scroll=15.0)
        assert list(viewport.window("ABCDE")) == [("B", -5.0), ("C", 5.0), ("D", 15.0)]

    def test_repeating(self):
        viewport = AxisViewport(display_size=15.0, tile_size=10.0, scroll=-10.0)
        assert list(viewport.repeating("XY")) == [("Y", 0.0), ("X", 10.0)]

    def test_scrolled_by_returns_new_instance(self):
        viewport = AxisViewport(display_size=25.0, tile_size=10.0)
        moved = viewport.scrolled_by(15.0)
        assert viewport.scroll == 0.0
        assert moved.scroll == 15.0
        assert list(moved.positions()) == [-5.0, 5.0, 15.0]

    def test_resized(self):
        viewport = AxisViewport(display_size=25.0, tile_size=10.0).resized(45.0)
        assert viewport.tile_count == 5

    def test_is_frozen(self):
        viewport = AxisViewport(display_size=25.0, tile_size=10.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            viewport.scroll = 3.0  # type: ignore[misc]

    def test_invalid_geometry_rejected(self):
        with pytest.raises(InvalidGeometryError):
            AxisViewport(display_size=25.0, tile_size=0.0)

    def test_resize_validates(self):
        viewport = AxisViewport(display_size=25.0, tile_size=10.0)
        with pytest.raises(InvalidGeometryError):
            viewport.resized(-1.0)


def test_compute_axis_viewport_centres_display():
    viewport = compute_axis_viewport(center=100.0, display_size=50.0, tile_size=10.0)
    assert viewport.scroll == 75.0
    assert list(viewport.positions()) == [-5.0, 5.0, 15.0, 25.0, 35.0, 45.0]


@pytest.mark.parametrize(
    ("display_size", "tile_size", "scroll"),
    [(25.0, 10.0, 0.0), (25.0, 10.0, -5.0), (0.0, 10.0, 3.0), (333.3, 7.5, -123.4), (1920.0, 256.0, 1e6)],
)
def test_positions_array_matches_generator(display_size, tile_size, scroll):
    array = tile_positions_array(display_size, tile_size, scroll)
    assert array.dtype == np.float64
    np.testing.assert_array_equal(array, list(iter_infinite_tiles(display_size, tile_size, scroll)))
