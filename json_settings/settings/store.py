from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Optional, Sequence

from ._types import KeyNotFoundError, SettingsError, SettingsIOError, SettingsResult
from .codec import DEFAULT_CODEC, JsonCodecConfig, decode, encode
from .data import SettingsData
from .location import resolve_location


logger = logging.getLogger(__name__)


@dataclass
class JsonSettings:
    """Key -> string-list settings backed by one JSON file.

    Construction validates the location, creates missing parent directories
    and loads the file if it exists. After that all reads and writes go to the
    in-memory :class:`SettingsData`; ``persist()`` writes the complete mapping
    back, ``reload()`` throws unsaved changes away.

    Directory creation is best-effort: a failure is logged and construction
    continues, unless ``strict_directories`` is set.
    """

    location: Any
    codec: Optional[JsonCodecConfig] = DEFAULT_CODEC
    strict_directories: bool = False
    data: SettingsData = field(default_factory=SettingsData, init=False, repr=False)
    _path: Path = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.codec is None:
            self.codec = DEFAULT_CODEC
        self._path = resolve_location(self.location)
        self._create_required_directories()
        self.load()

    @classmethod
    def for_uri(
        cls,
        location: Any,
        *,
        codec: Optional[JsonCodecConfig] = None,
        strict_directories: bool = False,
    ) -> "JsonSettings":
        return cls(location, codec=codec, strict_directories=strict_directories)

    @property
    def path(self) -> Path:
        return self._path

    def _create_required_directories(self) -> None:
        parent = self._path.parent
        if parent.is_dir():
            return
        try:
            parent.mkdir(parents=True, exist_ok=True)
            logger.debug("Created settings directory %s", parent)
        except OSError as exc:
            if self.strict_directories:
                raise SettingsIOError(f"cannot create settings directory {parent}: {exc}") from exc
            logger.warning("Failed to create settings directory %s", parent, exc_info=True)

    # Load / persist ------------------------------------------------------
    def load(self) -> None:
        path = self._path
        try:
            if not path.exists():
                logger.debug("No settings file at %s", path)
                return
            if path.stat().st_size == 0:
                logger.debug("Settings file %s is empty", path)
                return
            items = decode(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise SettingsIOError(f"failed to load settings from {path}: {exc}") from exc

        self.data.set_items(items)
        logger.debug("Loaded %d settings keys from %s", len(items), path)

    def persist(self) -> None:
        path = self._path
        txt = encode(self.data.get_items(), self.codec)
        try:
            path.write_text(txt, encoding="utf-8")
        except OSError as exc:
            raise SettingsIOError(f"failed to write settings to {path}: {exc}") from exc
        logger.debug("Persisted %d settings keys to %s", len(self.data), path)

    def reload(self) -> None:
        self.load()

    # Accessors -----------------------------------------------------------
    def set_value(self, key: str, value: str) -> None:
        self.data.add(key, [value])

    def set_values(self, key: str, values: Sequence[str]) -> None:
        self.data.add(key, values)

    def get_values(self, key: str) -> List[str]:
        return self.data.get(key)

    def get_value(self, key: str) -> str:
        values = self.data.get(key)
        if not values:
            raise KeyNotFoundError(key, f"key {key!r} has no values")
        return values[0]

    def find_value(self, key: str) -> Optional[str]:
        values = self.data.items.get(key)
        if not values:
            return None
        return values[0]


def open_settings(location: Any, **kwargs: Any) -> SettingsResult[JsonSettings]:
    """Like :meth:`JsonSettings.for_uri`, but returns a result instead of raising."""
    try:
        return SettingsResult.success(JsonSettings.for_uri(location, **kwargs))
    except SettingsError as exc:
        return SettingsResult.failure(exc)


def try_get_values(settings: JsonSettings, key: str) -> SettingsResult[List[str]]:
    try:
        return SettingsResult.success(settings.get_values(key))
    except SettingsError as exc:
        return SettingsResult.failure(exc)
