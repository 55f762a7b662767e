"""Schema and loader for axis settings files."""

from __future__ import annotations

import json
from copy import deepcopy
from pathlib import Path
from typing import Any

from jsonschema import Draft202012Validator
from jsonschema.exceptions import ValidationError

from .config import (
    DEFAULT_DISPLAY_SIZE,
    DEFAULT_SCROLL,
    DEFAULT_TILE_SIZE,
    SETTINGS_SCHEMA_ID,
)
from .errors import SettingsLoadError, SettingsValidationError
from .utils.logging import get_logger
from .viewport import AxisViewport

logger = get_logger(__name__)

SETTINGS_SCHEMA: dict[str, Any] = {
    "$id": "tilewindow/settings.schema.json",
    "type": "object",
    "required": ["schema", "display_size", "tile_size", "scroll"],
    "properties": {
        "schema": {"const": SETTINGS_SCHEMA_ID},
        "display_size": {"type": "number", "minimum": 0},
        "tile_size": {"type": "number", "exclusiveMinimum": 0},
        "scroll": {"type": "number"},
    },
    "additionalProperties": True,
}

DEFAULT_SETTINGS: dict[str, Any] = {
    "schema": SETTINGS_SCHEMA_ID,
    "display_size": DEFAULT_DISPLAY_SIZE,
    "tile_size": DEFAULT_TILE_SIZE,
    "scroll": DEFAULT_SCROLL,
}

_validator = Draft202012Validator(SETTINGS_SCHEMA)


def validate_settings(data: dict[str, Any]) -> None:
    """Validate *data* against the settings schema."""

    try:
        _validator.validate(data)
    except ValidationError as exc:
        raise SettingsValidationError(exc.message) from exc


def merge_with_defaults(data: dict[str, Any] | None) -> dict[str, Any]:
    """Merge *data* over :data:`DEFAULT_SETTINGS` and validate the result."""

    merged = deepcopy(DEFAULT_SETTINGS)
    if data:
        merged.update(data)
    validate_settings(merged)
    return merged


def load_settings(path: Path) -> dict[str, Any]:
    """Read *path* and return validated settings; a missing file yields defaults."""

    if not path.exists():
        logger.debug("Settings file %s not found, using defaults", path)
        return merge_with_defaults(None)
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise SettingsLoadError(f"{path}: {exc}") from exc
    if not isinstance(payload, dict):
        raise SettingsLoadError(f"{path}: expected a JSON object, got {type(payload).__name__}")
    logger.debug("Loaded settings from %s", path)
    return merge_with_defaults(payload)


def viewport_from_settings(data: dict[str, Any]) -> AxisViewport:
    return AxisViewport(
        display_size=float(data["display_size"]),
        tile_size=float(data["tile_size"]),
        scroll=float(data["scroll"]),
    )


__all__ = [
    "DEFAULT_SETTINGS",
    "SETTINGS_SCHEMA",
    "load_settings",
    "merge_with_defaults",
    "validate_settings",
    "viewport_from_settings",
]
