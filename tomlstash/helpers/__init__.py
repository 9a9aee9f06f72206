"""Helper modules and utilities for TomlStash."""

from .codec import compute_hash, deserialize, serialize
from .config import StoreConfig, get_config_dir
from .constants import VERSION, APP_NAME, FILE_EXTENSION
from .logging import get_logger, log_manager

__all__ = [
    'compute_hash',
    'deserialize',
    'serialize',
    'StoreConfig',
    'get_config_dir',
    'VERSION',
    'APP_NAME',
    'FILE_EXTENSION',
    'get_logger',
    'log_manager',
]
