"""
Tests for settings and logging configuration.
"""

import logging
from pathlib import Path

import pytest

from nullsafe.config import (
    DEBUG_LOG_FILE,
    NullSafeSettings,
    get_settings,
    reset_settings,
    set_settings,
)
from nullsafe.logging_config import (
    ROOT_LOGGER_NAME,
    configure_debug_logging,
    get_logger,
    log_failure,
    restore_stderr_logging,
    suppress_stderr_logging,
)


# =============================================================================
# Settings
# =============================================================================

class TestSettings:

    def test_defaults(self, monkeypatch):
        for name in ("NULLSAFE_FAIL_ON_ABSENT", "NULLSAFE_LOG_FAILURES", "NULLSAFE_DEBUG_LOG", "NULLSAFE_LOG_DIR"):
            monkeypatch.delenv(name, raising=False)

        settings = NullSafeSettings.from_env()
        assert settings.fail_on_absent is False
        assert settings.log_failures is True
        assert settings.debug_log is False
        assert settings.log_dir == Path.cwd() / ".nullsafe"

    @pytest.mark.parametrize("raw, expected", [
        ("1", True), ("true", True), ("YES", True), (" on ", True),
        ("0", False), ("false", False), ("", False),
    ])
    def test_env_flags(self, monkeypatch, raw, expected):
        monkeypatch.setenv("NULLSAFE_FAIL_ON_ABSENT", raw)
        assert NullSafeSettings.from_env().fail_on_absent is expected

    def test_log_dir_from_env(self, monkeypatch, tmp_path):
        monkeypatch.setenv("NULLSAFE_LOG_DIR", str(tmp_path))
        settings = NullSafeSettings.from_env()
        assert settings.log_dir == tmp_path
        assert settings.debug_log_path == tmp_path / DEBUG_LOG_FILE

    def test_get_settings_reads_env_after_reset(self, monkeypatch):
        monkeypatch.setenv("NULLSAFE_FAIL_ON_ABSENT", "true")
        reset_settings()
        assert get_settings().fail_on_absent is True
        assert get_settings() is get_settings()

    def test_set_settings(self):
        custom = NullSafeSettings.for_testing(fail_on_absent=True)
        set_settings(custom)
        assert get_settings() is custom

    def test_validate_clean(self, tmp_path):
        settings = NullSafeSettings.for_testing()
        settings.log_dir = tmp_path
        assert settings.validate() == []

    def test_validate_warnings(self, tmp_path):
        not_a_dir = tmp_path / "file.log"
        not_a_dir.write_text("x")
        settings = NullSafeSettings(fail_on_absent=False, log_failures=False, debug_log=True, log_dir=not_a_dir)

        warnings = settings.validate()
        assert len(warnings) == 2
        assert "NULLSAFE_LOG_FAILURES" in warnings[0]
        assert "not a directory" in warnings[1]


# =============================================================================
# Logging
# =============================================================================

class TestLogging:

    def test_get_logger_namespacing(self):
        assert get_logger("nullsafe.transform").name == "nullsafe.transform"
        assert get_logger("nullsafe").name == "nullsafe"
        assert get_logger("myapp").name == "nullsafe.myapp"

    def test_log_failure_respects_settings(self, caplog):
        log = get_logger("test")
        with caplog.at_level(logging.DEBUG, logger=ROOT_LOGGER_NAME):
            log_failure(log, "first %s", "failure")
            get_settings().log_failures = False
            log_failure(log, "second %s", "failure")

        assert "first failure" in caplog.text
        assert "second failure" not in caplog.text

    def test_configure_debug_logging_writes_file(self, tmp_path):
        root = configure_debug_logging(tmp_path)
        suppress_stderr_logging()
        try:
            get_logger("test").debug("written to file")
        finally:
            restore_stderr_logging()
        for handler in root.handlers:
            handler.flush()

        assert root.level == logging.DEBUG
        assert root.propagate is False
        assert "written to file" in (tmp_path / DEBUG_LOG_FILE).read_text(encoding="utf-8")

    def test_configure_debug_logging_only_once(self, tmp_path):
        root = configure_debug_logging(tmp_path)
        count = len(root.handlers)
        configure_debug_logging(tmp_path / "other")
        assert len(root.handlers) == count
        assert not (tmp_path / "other").exists()
