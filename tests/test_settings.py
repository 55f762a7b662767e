from __future__ import annotations

import json
from pathlib import Path

import pytest

from tilewindow.config import DEFAULT_TILE_SIZE, SETTINGS_SCHEMA_ID
from tilewindow.errors import InvalidGeometryError, SettingsLoadError, SettingsValidationError
from tilewindow.settings import (
    DEFAULT_SETTINGS,
    load_settings,
    merge_with_defaults,
    validate_settings,
    viewport_from_settings,
)


def _write(path: Path, payload: object) -> Path:
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_missing_file_yields_defaults(tmp_path: Path) -> None:
    settings = load_settings(tmp_path / "absent.json")
    assert settings == DEFAULT_SETTINGS


def test_partial_file_is_merged(tmp_path: Path) -> None:
    path = _write(tmp_path / "axis.json", {"scroll": -5, "display_size": 25})
    settings = load_settings(path)
    assert settings["schema"] == SETTINGS_SCHEMA_ID
    assert settings["tile_size"] == DEFAULT_TILE_SIZE
    assert settings["scroll"] == -5


def test_merge_does_not_mutate_defaults() -> None:
    merge_with_defaults({"scroll": 12.0})
    assert DEFAULT_SETTINGS["scroll"] == 0.0


def test_malformed_json(tmp_path: Path) -> None:
    path = tmp_path / "axis.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(SettingsLoadError):
        load_settings(path)


def test_non_object_document(tmp_path: Path) -> None:
    path = _write(tmp_path / "axis.json", [1, 2, 3])
    with pytest.raises(SettingsLoadError):
        load_settings(path)


@pytest.mark.parametrize(
    "payload",
    [
        {"tile_size": 0},
        {"tile_size": -4},
        {"display_size": -1},
        {"scroll": "far"},
        {"schema": "tilewindow/axis@0"},
    ],
)
def test_invalid_values_rejected(tmp_path: Path, payload: dict) -> None:
    path = _write(tmp_path / "axis.json", payload)
    with pytest.raises(SettingsValidationError):
        load_settings(path)


def test_validate_settings_accepts_defaults() -> None:
    validate_settings(DEFAULT_SETTINGS)


def test_viewport_from_settings() -> None:
    viewport = viewport_from_settings(
        merge_with_defaults({"display_size": 25, "tile_size": 10, "scroll": 15})
    )
    assert list(viewport.window("ABCDE")) == [("B", -5.0), ("C", 5.0), ("D", 15.0)]


def test_viewport_from_settings_rejects_nan_scroll() -> None:
    with pytest.raises(InvalidGeometryError):
        viewport_from_settings(merge_with_defaults({"scroll": float("nan")}))
