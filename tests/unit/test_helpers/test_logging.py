"""
Tests for the logging helpers.
"""

import logging

import pytest

from tomlstash.helpers.logging import get_logger, log_manager


class TestGetLogger:
    """Tests for get_logger function."""

    def test_package_modules_keep_their_name(self):
        assert get_logger("tomlstash.cores.settings_manager").name == "tomlstash.cores.settings_manager"

    def test_foreign_names_are_nested(self):
        assert get_logger("myapp").name == "tomlstash.myapp"

    def test_root_name(self):
        assert get_logger("tomlstash").name == "tomlstash"


class TestLogManager:
    """Tests for log_manager.configure / reset."""

    def test_configure_sets_level_and_handler(self):
        log_manager.configure(level="debug")
        root = logging.getLogger("tomlstash")
        assert root.level == logging.DEBUG
        assert len(log_manager._handlers) == 1

    def test_configure_twice_replaces_handlers(self):
        log_manager.configure(level="INFO")
        log_manager.configure(level="WARNING")
        assert len(log_manager._handlers) == 1
        assert logging.getLogger("tomlstash").level == logging.WARNING

    def test_file_handler(self, tmp_path):
        log_file = tmp_path / "logs" / "tomlstash.log"
        log_manager.configure(level="INFO", log_file=log_file)

        get_logger("tests").info("hello file")
        for handler in log_manager._handlers:
            handler.flush()

        assert "hello file" in log_file.read_text(encoding="utf-8")

    def test_unknown_level(self):
        with pytest.raises(ValueError):
            log_manager.configure(level="LOUD")

    def test_reset_removes_handlers(self):
        log_manager.configure(level="INFO")
        log_manager.reset()
        assert log_manager._handlers == []
