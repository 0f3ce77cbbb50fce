"""
Logging configuration for the bridgegen CLI.

main.py calls ``setup_from_environment`` once per invocation. Modules log
through ``logging.getLogger(__name__)`` and never add handlers themselves.

Console level, highest precedence first:
    --debug / --verbose / --quiet  >  $BRIDGEGEN_LOG_LEVEL  >  WARNING

A second, independent log file can be switched on with
$BRIDGEGEN_LOG_FILE (and its level with $BRIDGEGEN_LOG_FILE_LEVEL).
"""

from __future__ import annotations

import logging
import os
import sys

LEVEL_ENV = "BRIDGEGEN_LOG_LEVEL"
FILE_ENV = "BRIDGEGEN_LOG_FILE"
FILE_LEVEL_ENV = "BRIDGEGEN_LOG_FILE_LEVEL"

# (upper bound, format, datefmt): first entry whose bound >= level wins
_CONSOLE_FORMATS: list[tuple[int, str, str | None]] = [
    (logging.DEBUG, "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s", "%H:%M:%S"),
    (logging.INFO, "%(asctime)s [%(name)s] %(message)s", "%H:%M:%S"),
]
_CONSOLE_DEFAULT = ("%(message)s", None)

_FILE_FORMAT = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s"
_FILE_DATEFMT = "%Y-%m-%d %H:%M:%S"


def _console_format(level: int) -> tuple[str, str | None]:
    """Format and date format for a console handler at *level*."""
    for bound, fmt, datefmt in _CONSOLE_FORMATS:
        if level <= bound:
            return fmt, datefmt
    return _CONSOLE_DEFAULT


def _console_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    fmt, datefmt = _console_format(level)
    handler.setFormatter(logging.Formatter(fmt, datefmt=datefmt))
    return handler


def _file_handler(path: str, level: int) -> logging.Handler:
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_FILE_FORMAT, datefmt=_FILE_DATEFMT))
    return handler


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
) -> None:
    """Replace the root logger's handlers with a stderr handler and an optional file.

    Args:
        level: Console level name. Unknown names fall back to WARNING.
        log_file: Path of an extra log file, if any.
        log_file_level: Level for *log_file*; defaults to *level*.
    """
    console_level = _parse_level(level)
    handlers = [_console_handler(console_level)]
    if log_file:
        file_level = _parse_level(log_file_level) if log_file_level else console_level
        handlers.append(_file_handler(log_file, file_level))

    root = logging.getLogger()
    for old in root.handlers[:]:
        root.removeHandler(old)
    for handler in handlers:
        root.addHandler(handler)
    # Root must pass anything either handler wants
    root.setLevel(min(h.level for h in handlers))

    logging.raiseExceptions = False


def resolve_level(debug: bool = False, verbose: bool = False, quiet: bool = False) -> str:
    """Console level name for the given CLI flags, else $BRIDGEGEN_LOG_LEVEL."""
    for enabled, name in ((debug, "DEBUG"), (verbose, "INFO"), (quiet, "ERROR")):
        if enabled:
            return name
    return os.environ.get(LEVEL_ENV, "WARNING")


def setup_from_environment(level: str) -> None:
    """setup_logging() with file output taken from $BRIDGEGEN_LOG_FILE[_LEVEL]."""
    setup_logging(
        level=level,
        log_file=os.environ.get(FILE_ENV),
        log_file_level=os.environ.get(FILE_LEVEL_ENV),
    )


def _parse_level(level: str | None) -> int:
    """Numeric level for *level*, WARNING for anything unrecognised."""
    numeric = logging.getLevelName(level.upper()) if level else None
    return numeric if isinstance(numeric, int) else logging.WARNING
