"""File-backed settings.

Settings are kept as a mapping of key -> list of strings and stored in a
single JSON object on local disk:

    {"color": ["red"], "tags": ["a", "b", "c"]}

Nothing is written until ``persist()`` is called.
"""

from ._types import (
    ErrorKind,
    InvalidLocationError,
    KeyNotFoundError,
    SettingsError,
    SettingsIOError,
    SettingsResult,
)
from .base import Settings
from .codec import DEFAULT_CODEC, JsonCodecConfig
from .data import SettingsData
from .location import resolve_location
from .store import JsonSettings, open_settings, try_get_values

__all__ = [
    "DEFAULT_CODEC",
    "ErrorKind",
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
    "resolve_location",
    "try_get_values",
]
