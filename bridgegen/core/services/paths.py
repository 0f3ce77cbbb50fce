"""
Path resolution — turn configured paths into canonical absolute paths.

Canonicalization requires the path to exist (realpath semantics), so a
missing path is reported here rather than later during scanning or writing.
"""

from __future__ import annotations

import logging
from pathlib import Path

from bridgegen.core.errors import NotADirectoryPathError, PathResolutionError

logger = logging.getLogger(__name__)


def resolve_path(path: str | Path, base_path: str | Path) -> Path:
    """Resolve *path* against *base_path* into an existing canonical path.

    Absolute paths ignore *base_path*. Symlinks are resolved.

    Raises:
        PathResolutionError: If the resulting path does not exist.
    """
    candidate = Path(path).expanduser()
    if not candidate.is_absolute():
        candidate = Path(base_path).expanduser() / candidate

    try:
        resolved = candidate.resolve(strict=True)
    except (OSError, RuntimeError) as e:
        raise PathResolutionError(f"Cannot resolve path {candidate}: {e}") from e

    logger.debug("Resolved %s → %s", path, resolved)
    return resolved


def resolve_directory(path: str | Path, base_path: str | Path) -> Path:
    """Like :func:`resolve_path`, but the result must be a directory.

    Raises:
        PathResolutionError: If the path does not exist.
        NotADirectoryPathError: If it exists but is not a directory.
    """
    resolved = resolve_path(path, base_path)
    if not resolved.is_dir():
        raise NotADirectoryPathError(f"Not a directory: {resolved}")
    return resolved
