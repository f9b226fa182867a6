from __future__ import annotations

from pathlib import Path
from typing import Any
from urllib.parse import urlsplit
from urllib.request import url2pathname

from ._types import InvalidLocationError


ALLOWED_SCHEME = "file"

_LOCAL_HOSTS = ("", "localhost")


def resolve_location(location: Any) -> Path:
    """Turn a ``file`` URI into a local path.

    ``location`` may be a URI string or an already parsed value exposing
    ``scheme``/``netloc``/``path`` (``urllib.parse`` results and most URL
    types). Raises :class:`InvalidLocationError` for anything else; no I/O is
    performed here.
    """

    if location is None:
        raise InvalidLocationError("location is None")

    if isinstance(location, (str, bytes)):
        try:
            # UnicodeDecodeError is a ValueError too.
            raw = location.decode("utf-8") if isinstance(location, bytes) else location
            if raw != raw.strip():
                raise ValueError("surrounding whitespace")
            parts = urlsplit(raw)
        except ValueError as exc:
            raise InvalidLocationError(f"invalid location: {location!r}") from exc
        scheme, netloc, path = parts.scheme, parts.netloc, parts.path
        query, fragment = parts.query, parts.fragment
    else:
        scheme = getattr(location, "scheme", None)
        path = getattr(location, "path", None)
        netloc = getattr(location, "netloc", None)
        if netloc is None:
            netloc = getattr(location, "host", None) or ""
        query = getattr(location, "query", None) or ""
        fragment = getattr(location, "fragment", None) or ""
        if scheme is None or path is None:
            raise InvalidLocationError(f"invalid location: {location!r}")

    scheme = str(scheme).lower()
    if scheme != ALLOWED_SCHEME:
        raise InvalidLocationError(f"invalid uri scheme: {scheme or None}")
    if str(netloc).lower() not in _LOCAL_HOSTS:
        raise InvalidLocationError(f"not a local file uri (host {netloc!r}): {location!r}")
    if query or fragment:
        raise InvalidLocationError(f"file uri must not carry a query or fragment: {location!r}")
    if not path:
        raise InvalidLocationError(f"file uri has no path: {location!r}")

    resolved = Path(url2pathname(str(path)))
    if not resolved.is_absolute():
        raise InvalidLocationError(f"file uri path is not absolute: {location!r}")
    return resolved
