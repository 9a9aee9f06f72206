"""Core components of TomlStash."""

from .settings_manager import SettingsManager

__all__ = ["SettingsManager"]
