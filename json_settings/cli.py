"""Command line interface for json_settings."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .log_utils import setup_cli_logging
from .settings import JsonSettings, SettingsError
from .settings.codec import encode


logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID_LOCATION = 2
EXIT_IO = 3
EXIT_NOT_FOUND = 4

_EXIT_CODES = {
    "invalid_location": EXIT_INVALID_LOCATION,
    "io": EXIT_IO,
    "not_found": EXIT_NOT_FOUND,
}


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="json-settings", description="Inspect and edit JSON settings files.")
    ap.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = ap.add_subparsers(dest="command", required=True)

    p_show = sub.add_parser("show", help="Print all settings as JSON")
    p_show.add_argument("location", help="file:// URI of the settings file")

    p_get = sub.add_parser("get", help="Print the values of one key, one per line")
    p_get.add_argument("location", help="file:// URI of the settings file")
    p_get.add_argument("key")
    p_get.add_argument("--first", action="store_true", help="Only print the first value")

    p_set = sub.add_parser("set", help="Store values for a key and persist")
    p_set.add_argument("location", help="file:// URI of the settings file")
    p_set.add_argument("key")
    p_set.add_argument("values", nargs="+")

    return ap


def _run(args: argparse.Namespace) -> int:
    settings = JsonSettings.for_uri(args.location)

    if args.command == "show":
        print(encode(settings.data.get_items(), settings.codec), end="")
    elif args.command == "get":
        if args.first:
            print(settings.get_value(args.key))
        else:
            for value in settings.get_values(args.key):
                print(value)
    elif args.command == "set":
        settings.set_values(args.key, args.values)
        settings.persist()
        logger.info("Stored %d value(s) for %r in %s", len(args.values), args.key, settings.path)
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    setup_cli_logging(verbose=args.verbose)
    try:
        return _run(args)
    except SettingsError as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return _EXIT_CODES[exc.kind]


if __name__ == "__main__":
    raise SystemExit(main())
