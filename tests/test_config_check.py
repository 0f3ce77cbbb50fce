"""
Tests for the config check use case.
"""

import textwrap
from pathlib import Path

import pytest

from bridgegen.core.use_cases.config_check import check_config


def _write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "bridgegen.yml"
    path.write_text(textwrap.dedent(content))
    return path


class TestCheckConfig:
    def test_valid(self, tmp_path: Path):
        (tmp_path / "out").mkdir()
        (tmp_path / "include").mkdir()
        path = _write(tmp_path, """\
            outputDirectory: out
            targets:
              Bridge.h:
                path: include
        """)
        result = check_config(path)
        assert result.valid
        assert result.errors == []
        assert result.warnings == []

    def test_no_targets_is_error(self, tmp_path: Path):
        (tmp_path / "out").mkdir()
        path = _write(tmp_path, "outputDirectory: out\n")
        result = check_config(path)
        assert not result.valid
        assert any("No targets" in e for e in result.errors)

    def test_invalid_pattern_is_error(self, tmp_path: Path):
        (tmp_path / "include").mkdir()
        path = _write(tmp_path, """\
            outputDirectory: .
            targets:
              Bridge.h:
                path: include
                ignoreNames: "[unclosed"
        """)
        result = check_config(path)
        assert not result.valid
        assert any("Bridge.h" in e and "ignore pattern" in e for e in result.errors)

    def test_invalid_target_name_is_error(self, tmp_path: Path):
        path = _write(tmp_path, """\
            outputDirectory: .
            targets:
              sub/Bridge.h:
                path: .
        """)
        result = check_config(path)
        assert not result.valid

    def test_missing_paths_are_warnings(self, tmp_path: Path):
        path = _write(tmp_path, """\
            outputDirectory: out
            basePath: .
            targets:
              Bridge.h:
                path: include
        """)
        result = check_config(path)
        assert result.valid
        assert any("Output directory" in w for w in result.warnings)
        assert any("Bridge.h" in w for w in result.warnings)

    def test_load_error(self, tmp_path: Path):
        path = _write(tmp_path, "- not\n- a\n- mapping\n")
        result = check_config(path)
        assert not result.valid
        assert result.config is None

    def test_no_config_found(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setattr(
            "bridgegen.core.use_cases.config_check.find_config_file",
            lambda start_dir=None: None,
        )
        result = check_config(None)
        assert not result.valid
        assert result.errors == ["No bridgegen.yml found."]

    def test_to_dict(self, tmp_path: Path):
        path = _write(tmp_path, """\
            outputDirectory: .
            targets:
              B.h: {path: .}
              A.h: {path: .}
        """)
        data = check_config(path).to_dict()
        assert data["valid"] is True
        assert data["target_count"] == 2
        assert data["targets"] == ["A.h", "B.h"]
