"""
Shared pytest fixtures for TomlStash tests.

Provides temporary settings directories, sample payloads and a CLI runner.
"""

import pytest
from typer.testing import CliRunner


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without side effects outside tmp_path")
    config.addinivalue_line("markers", "integration: tests exercising full save/load cycles")


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep tests away from the real ~/.config and environment overrides."""
    monkeypatch.delenv("TOMLSTASH_PATH", raising=False)
    monkeypatch.delenv("TOMLSTASH_STRICT_HASH", raising=False)
    monkeypatch.delenv("TOMLSTASH_LOG_LEVEL", raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    yield
    from tomlstash.helpers.logging import log_manager
    log_manager.reset()


@pytest.fixture
def cli_runner():
    """Typer CLI runner for testing commands."""
    return CliRunner()


@pytest.fixture
def store_path(tmp_path):
    """Empty settings directory."""
    path = tmp_path / "store"
    path.mkdir()
    return path


@pytest.fixture
def manager(store_path):
    """SettingsManager on an empty directory."""
    from tomlstash.cores.settings_manager import SettingsManager

    return SettingsManager(store_path)


@pytest.fixture
def person_payload():
    """Nested sample payload."""
    return {
        "name": "John Doe",
        "age": 43,
        "address": {
            "street": "10 Downing Street",
            "city": "London",
        },
        "phones": [
            "+44 1234567",
            "+44 2345678",
        ],
    }


@pytest.fixture
def entry_factory():
    """Factory fixture to create Content instances.

    Usage:
        def test_something(entry_factory):
            entry = entry_factory("network", {"port": 8080})
    """
    from tomlstash.types import Content

    def _make_entry(name: str = "test", payload=None) -> Content:
        return Content.new(name, payload)

    return _make_entry
