"""
Logging configuration.

Diagnostics go to stderr so they never mix with the mismatch table on
stdout. Levels map to the CLI flags:

- ``-v``: DEBUG (every comparison step)
- default: INFO
- ``-q``: ERROR (only observations missing a usable accession number)
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(levelname)s: %(message)s"
VERBOSE_FORMAT = "%(levelname)s [%(name)s]: %(message)s"


def resolve_level(verbose: bool = False, quiet: bool = False, default: str = "INFO") -> int:
    """Pick the log level; verbose wins over quiet."""
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.ERROR
    level = logging.getLevelName(default.upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logging(verbose: bool = False, quiet: bool = False, default: str = "INFO") -> None:
    """Configure the package logger with a single stderr handler."""
    level = resolve_level(verbose, quiet, default)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(VERBOSE_FORMAT if verbose else LOG_FORMAT))

    package_logger = logging.getLogger("inat_genbank_names")
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
