"""Logging-related utilities.

The library itself only creates module loggers; handlers are configured here,
for the command line entry point.
"""

from __future__ import annotations

import logging
import sys


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def setup_cli_logging(verbose: bool = False) -> None:
    """Send log records to stderr.

    Don't clobber an existing logging configuration (e.g. when embedded); in
    that case only the package logger level is adjusted.
    """

    level = logging.DEBUG if verbose else logging.WARNING
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)
    logging.getLogger("json_settings").setLevel(level)
