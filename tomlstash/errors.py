"""
Exceptions raised by TomlStash.

Every failure a caller can act on derives from ``SettingsError``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class SettingsError(Exception):
    """Base class for settings store errors"""
    pass


class DuplicateNameError(SettingsError):
    """An entry with the same name is already held by the manager"""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Entry already exists: {name}")


class EntryNotFoundError(SettingsError, KeyError):
    """No entry with the requested name"""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Entry not found: {name}")

    def __str__(self) -> str:
        # KeyError would repr() the message
        return self.args[0]


class SettingsIOError(SettingsError):
    """Reading, writing or deleting a file failed"""

    def __init__(self, path: Optional[Path], message: str):
        self.path = path
        self.message = message
        super().__init__(f"{path}: {message}" if path else message)


class SettingsParseError(SettingsError):
    """File content is not valid TOML or not a valid entry"""

    def __init__(self, path: Optional[Path], message: str):
        self.path = path
        self.message = message
        super().__init__(f"{path}: {message}" if path else message)


class SettingsSerializeError(SettingsError):
    """Entry cannot be written as TOML"""

    def __init__(self, name: str, message: str):
        self.name = name
        self.message = message
        super().__init__(f"Cannot serialize entry '{name}': {message}")


class HashMismatchError(SettingsError):
    """Stored hash does not match the entry content"""

    def __init__(self, path: Optional[Path], expected: str, actual: str):
        self.path = path
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"{path}: hash mismatch (stored {expected}, computed {actual})"
        )
