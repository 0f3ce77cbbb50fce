"""
Header scanning — find the .h files a bridging header should import.

Only basenames are returned: generated imports reference headers by
filename and the consuming build resolves them through its own header
search paths.
"""

from __future__ import annotations

import logging
import os
import re
import stat
from collections.abc import Iterator
from pathlib import Path

from bridgegen.core.errors import (
    EnumerationError,
    InvalidPatternError,
    NotADirectoryPathError,
)

logger = logging.getLogger(__name__)

HEADER_EXTENSION = ".h"


def compile_ignore_pattern(pattern: str | None) -> re.Pattern[str] | None:
    """Compile an ignore pattern. ``None`` or an empty string excludes nothing.

    Raises:
        InvalidPatternError: If the pattern is not a valid regular expression.
    """
    if not pattern:
        return None
    try:
        return re.compile(pattern)
    except re.error as e:
        raise InvalidPatternError(f"Invalid ignore pattern {pattern!r}: {e}") from e


def is_header_name(name: str) -> bool:
    """True for names with a ``.h`` extension, compared case-insensitively."""
    return os.path.splitext(name)[1].lower() == HEADER_EXTENSION


def scan_headers(
    root: str | Path,
    recursive: bool = False,
    ignore_pattern: str | None = None,
) -> set[str]:
    """Collect header basenames under *root*.

    Args:
        root: Directory to scan.
        recursive: Walk the whole subtree instead of only direct children.
        ignore_pattern: Regex; basenames it matches anywhere are skipped.

    Returns:
        Set of header filenames (no directory component).

    Raises:
        NotADirectoryPathError: *root* is missing or not a directory.
        InvalidPatternError: *ignore_pattern* does not compile.
        EnumerationError: The directory cannot be listed.
    """
    root = Path(root)
    ignore = compile_ignore_pattern(ignore_pattern)

    if not root.is_dir():
        raise NotADirectoryPathError(f"Not a directory: {root}")

    entries = _walk_tree(root) if recursive else _list_directory(root)

    found: set[str] = set()
    for entry in entries:
        name = entry.name
        if not is_header_name(name):
            continue
        if ignore is not None and ignore.search(name):
            logger.debug("Ignoring %s (matches %r)", name, ignore.pattern)
            continue
        found.add(name)

    logger.debug(
        "Scanned %s (%s): %d header(s)",
        root, "recursive" if recursive else "shallow", len(found),
    )
    return found


def _list_directory(root: Path) -> Iterator[Path]:
    """Regular files directly inside *root*."""
    try:
        with os.scandir(root) as it:
            children = list(it)
    except OSError as e:
        raise EnumerationError(f"Cannot list {root}: {e}") from e

    for child in children:
        if child.is_file(follow_symlinks=False):
            yield Path(child.path)


def _walk_tree(root: Path) -> Iterator[Path]:
    """Regular files anywhere under *root*. Directory symlinks are not followed."""
    errors: list[OSError] = []
    for dirpath, _dirnames, filenames in os.walk(root, onerror=errors.append):
        if errors:
            break
        for filename in filenames:
            path = Path(dirpath) / filename
            if _is_regular_file(path):
                yield path

    if errors:
        err = errors[0]
        raise EnumerationError(f"Cannot walk {err.filename or root}: {err}") from err


def _is_regular_file(path: Path) -> bool:
    try:
        mode = path.lstat().st_mode
    except OSError:
        return False
    return stat.S_ISREG(mode)
