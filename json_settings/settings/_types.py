from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Literal, Optional, TypeVar


ErrorKind = Literal["invalid_location", "io", "not_found"]

T = TypeVar("T")


class SettingsError(Exception):
    """Base class for all settings failures.

    ``kind`` lets callers branch on the failure category without caring about
    the concrete subclass.
    """

    kind: ErrorKind = "io"


class InvalidLocationError(SettingsError, ValueError):
    """Location is missing, unparsable, or not a local ``file`` URI."""

    kind: ErrorKind = "invalid_location"


class SettingsIOError(SettingsError, OSError):
    """Reading, parsing or writing the backing file failed."""

    kind: ErrorKind = "io"


class KeyNotFoundError(SettingsError, KeyError):
    """No values are stored for the requested key."""

    kind: ErrorKind = "not_found"

    def __init__(self, key: str, message: Optional[str] = None):
        self.key = key
        super().__init__(message or f"no values stored for key: {key!r}")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message.
        return str(self.args[0])


@dataclass(frozen=True)
class SettingsResult(Generic[T]):
    """Success-or-error outcome of a settings operation."""

    value: Optional[T] = None
    error: Optional[SettingsError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> Optional[ErrorKind]:
        return None if self.error is None else self.error.kind

    @classmethod
    def success(cls, value: Any) -> "SettingsResult[Any]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: SettingsError) -> "SettingsResult[Any]":
        return cls(error=error)

    def unwrap(self) -> T:
        """Return the value, re-raising the stored error on failure."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]
