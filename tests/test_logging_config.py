"""
Tests for logging setup — level resolution, formats and file output.
"""

import logging
from pathlib import Path

import pytest

from bridgegen.core.observability.logging_config import (
    _console_format,
    _parse_level,
    resolve_level,
    setup_from_environment,
    setup_logging,
)


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestParseLevel:
    def test_known_levels(self):
        assert _parse_level("debug") == logging.DEBUG
        assert _parse_level("INFO") == logging.INFO

    def test_unknown_defaults_to_warning(self):
        assert _parse_level("chatty") == logging.WARNING
        assert _parse_level(None) == logging.WARNING


class TestConsoleFormat:
    def test_layout_per_level(self):
        assert "%(lineno)d" in _console_format(logging.DEBUG)[0]
        assert _console_format(logging.INFO) == ("%(asctime)s [%(name)s] %(message)s", "%H:%M:%S")
        assert _console_format(logging.WARNING) == ("%(message)s", None)
        assert _console_format(logging.CRITICAL) == ("%(message)s", None)


class TestSetupLogging:
    def test_single_console_handler(self):
        setup_logging("INFO")
        setup_logging("INFO")
        assert len(logging.getLogger().handlers) == 1
        assert logging.getLogger().level == logging.INFO

    def test_minimal_format_at_warning(self):
        setup_logging("WARNING")
        handler = logging.getLogger().handlers[0]
        assert handler.formatter._fmt == "%(message)s"

    def test_file_handler(self, tmp_path: Path):
        log_file = tmp_path / "bridgegen.log"
        setup_logging("WARNING", log_file=str(log_file), log_file_level="DEBUG")
        assert logging.getLogger().level == logging.DEBUG

        logging.getLogger("bridgegen.test").debug("hello file")
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "hello file" in log_file.read_text(encoding="utf-8")


class TestResolveLevel:
    def test_flag_precedence(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("BRIDGEGEN_LOG_LEVEL", "ERROR")
        assert resolve_level(debug=True, verbose=True) == "DEBUG"
        assert resolve_level(verbose=True, quiet=True) == "INFO"
        assert resolve_level(quiet=True) == "ERROR"

    def test_environment_fallback(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("BRIDGEGEN_LOG_LEVEL", "INFO")
        assert resolve_level() == "INFO"

    def test_default_warning(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.delenv("BRIDGEGEN_LOG_LEVEL", raising=False)
        assert resolve_level() == "WARNING"


class TestSetupFromEnvironment:
    def test_log_file_from_environment(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        log_file = tmp_path / "env.log"
        monkeypatch.setenv("BRIDGEGEN_LOG_FILE", str(log_file))
        monkeypatch.setenv("BRIDGEGEN_LOG_FILE_LEVEL", "INFO")
        setup_from_environment("WARNING")

        logging.getLogger("bridgegen.test").info("from env")
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "from env" in log_file.read_text(encoding="utf-8")
