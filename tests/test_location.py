from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace
from urllib.parse import urlparse, urlsplit

import pytest

from json_settings.settings import InvalidLocationError, resolve_location


def test_resolve_file_uri_string(tmp_path: Path) -> None:
    p = tmp_path / "settings.json"
    assert resolve_location(p.as_uri()) == p


def test_resolve_parsed_uri(tmp_path: Path) -> None:
    p = tmp_path / "settings.json"
    assert resolve_location(urlsplit(p.as_uri())) == p
    assert resolve_location(urlparse(p.as_uri())) == p


def test_resolve_decodes_percent_escapes(tmp_path: Path) -> None:
    p = tmp_path / "with space" / "settings.json"
    uri = p.as_uri()
    assert "%20" in uri
    assert resolve_location(uri) == p


def test_resolve_localhost_is_allowed(tmp_path: Path) -> None:
    p = tmp_path / "settings.json"
    assert resolve_location("file://localhost" + p.as_posix()) == p


@pytest.mark.parametrize(
    "location",
    [
        None,
        "",
        "settings.json",
        "http://example.com/settings.json",
        "https://example.com/settings.json",
        "file://remote-host/settings.json",
        "file:relative/settings.json",
        "file://",
        "http://[::1",
        b"file:///tmp/\xff.json",
        " file:///tmp/settings.json",
        "file:///tmp/settings.json\n",
        "file:///tmp/settings.json?mode=rw",
        "file:///tmp/settings.json#section",
    ],
)
def test_resolve_rejects_invalid_locations(location) -> None:
    with pytest.raises(InvalidLocationError):
        resolve_location(location)


def test_resolve_rejects_objects_without_scheme(tmp_path: Path) -> None:
    with pytest.raises(InvalidLocationError):
        resolve_location(tmp_path / "settings.json")


def test_invalid_scheme_message_names_scheme() -> None:
    with pytest.raises(InvalidLocationError, match="invalid uri scheme: ftp"):
        resolve_location("ftp://example.com/settings.json")


def test_resolve_bytes_uri(tmp_path: Path) -> None:
    p = tmp_path / "settings.json"
    assert resolve_location(p.as_uri().encode("utf-8")) == p


def test_resolve_plain_object_with_scheme_and_path(tmp_path: Path) -> None:
    p = tmp_path / "settings.json"
    assert resolve_location(SimpleNamespace(scheme="file", path=p.as_posix())) == p
    # Objects without `netloc` may name the host `host`.
    assert resolve_location(SimpleNamespace(scheme="FILE", path=p.as_posix(), host="localhost")) == p

    with pytest.raises(InvalidLocationError):
        resolve_location(SimpleNamespace(scheme="file", path=p.as_posix(), host="remote-host"))
    with pytest.raises(InvalidLocationError):
        resolve_location(SimpleNamespace(scheme="file", path=p.as_posix(), query="x=1"))
    with pytest.raises(InvalidLocationError):
        resolve_location(SimpleNamespace(scheme="file"))
