"""Custom exception hierarchy for tilewindow."""

from __future__ import annotations


class TileWindowError(Exception):
    """Base class for all custom errors raised by tilewindow."""


class InvalidGeometryError(TileWindowError, ValueError):
    """Raised when a display size, tile size or scroll offset cannot be windowed."""


class SettingsError(TileWindowError):
    """Base class for settings file problems."""


class SettingsLoadError(SettingsError):
    """Raised when the settings file cannot be read or parsed."""


class SettingsValidationError(SettingsError):
    """Raised when settings fail validation against the schema."""


__all__ = [
    "InvalidGeometryError",
    "SettingsError",
    "SettingsLoadError",
    "SettingsValidationError",
    "TileWindowError",
]
