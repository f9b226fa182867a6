"""JSON file backed key -> string-list settings."""

from __future__ import annotations

__version__ = "1.0.0"

from .settings import (
    InvalidLocationError,
    JsonCodecConfig,
    JsonSettings,
    KeyNotFoundError,
    Settings,
    SettingsData,
    SettingsError,
    SettingsIOError,
    SettingsResult,
    open_settings,
)

__all__ = [
    "__version__",
    "InvalidLocationError",
    "JsonCodecConfig",
    "JsonSettings",
    "KeyNotFoundError",
    "Settings",
    "SettingsData",
    "SettingsError",
    "SettingsIOError",
    "SettingsResult",
    "open_settings",
]
