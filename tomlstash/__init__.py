################################################################################
# TOMLSTASH
#
# @file:        __init__.py
# @module:      tomlstash
# @description: Exposes version, models, errors and the settings manager.
# @repository:  https://github.com/tomlstash/tomlstash
# @version:     1.0.0
#
# ------------------------------------------------------------------------------
# MIT-Lizenz: siehe LICENSE oder https://opensource.org/licenses/MIT
################################################################################

"""
TomlStash: a local settings store.

Named settings entries are kept as one TOML file each in a base directory,
with a small header (name, modified flag, content hash, timestamp).
"""

from .helpers.constants import VERSION

__version__ = VERSION

from .types import Header, Content, LoadResult, SaveResult, FileFailure
from .errors import (
    SettingsError,
    DuplicateNameError,
    EntryNotFoundError,
    SettingsIOError,
    SettingsParseError,
    SettingsSerializeError,
    HashMismatchError,
)
from .helpers.config import StoreConfig
from .helpers.logging import get_logger, log_manager
from .cores.settings_manager import SettingsManager

__all__ = [
    "VERSION",
    "Header",
    "Content",
    "LoadResult",
    "SaveResult",
    "FileFailure",
    "SettingsError",
    "DuplicateNameError",
    "EntryNotFoundError",
    "SettingsIOError",
    "SettingsParseError",
    "SettingsSerializeError",
    "HashMismatchError",
    "StoreConfig",
    "SettingsManager",
    "get_logger",
    "log_manager",
]
