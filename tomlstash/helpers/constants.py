"""
Constants used throughout TomlStash.

This module defines all constant values used across different modules
to ensure consistency and ease of maintenance.
"""

# Version information
VERSION = "1.0.0"

# Application name, used for the default base path (~/.config/<APP_NAME>)
APP_NAME = "tomlstash"

# Persistence format
FILE_EXTENSION = "toml"
DEFAULT_FOLDER_NAME = "default"

# File permissions for written entry files
DEFAULT_FILE_MODE = 0o600

# Environment overrides
ENV_PATH = "TOMLSTASH_PATH"
ENV_STRICT_HASH = "TOMLSTASH_STRICT_HASH"
ENV_LOG_LEVEL = "TOMLSTASH_LOG_LEVEL"

# Number of hash characters shown in listings
HASH_DISPLAY_LENGTH = 12

# Logging
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
