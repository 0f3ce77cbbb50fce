"""
Tests for path resolution — relative/absolute paths and canonicalization.
"""

import os
from pathlib import Path

import pytest

from bridgegen.core.errors import NotADirectoryPathError, PathResolutionError
from bridgegen.core.services.paths import resolve_directory, resolve_path


class TestResolvePath:
    def test_relative_joined_with_base(self, tmp_path: Path):
        (tmp_path / "include").mkdir()
        assert resolve_path("include", tmp_path) == (tmp_path / "include").resolve()

    def test_absolute_ignores_base(self, tmp_path: Path):
        target = tmp_path / "abs"
        target.mkdir()
        assert resolve_path(str(target), "/nonexistent/base") == target.resolve()

    def test_dot_segments_collapsed(self, tmp_path: Path):
        (tmp_path / "a").mkdir()
        (tmp_path / "b").mkdir()
        assert resolve_path("a/../b", tmp_path) == (tmp_path / "b").resolve()

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
    def test_symlink_resolved(self, tmp_path: Path):
        real = tmp_path / "real"
        real.mkdir()
        link = tmp_path / "link"
        link.symlink_to(real, target_is_directory=True)
        assert resolve_path("link", tmp_path) == real.resolve()

    def test_missing_relative_raises(self, tmp_path: Path):
        with pytest.raises(PathResolutionError, match="Cannot resolve"):
            resolve_path("missing", tmp_path)

    def test_missing_absolute_raises(self, tmp_path: Path):
        with pytest.raises(PathResolutionError):
            resolve_path(str(tmp_path / "missing"), tmp_path)


class TestResolveDirectory:
    def test_directory_ok(self, tmp_path: Path):
        assert resolve_directory(".", tmp_path) == tmp_path.resolve()

    def test_file_raises(self, tmp_path: Path):
        (tmp_path / "file.h").write_text("")
        with pytest.raises(NotADirectoryPathError):
            resolve_directory("file.h", tmp_path)
