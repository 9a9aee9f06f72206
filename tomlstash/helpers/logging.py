################################################################################
# TOMLSTASH
#
# @file:        logging.py
# @module:      tomlstash.helpers.logging
# @description: Logger factory and handler setup for library and CLI use.
# @repository:  https://github.com/tomlstash/tomlstash
# @version:     1.0.0
#
# ------------------------------------------------------------------------------
# MIT-Lizenz: siehe LICENSE oder https://opensource.org/licenses/MIT
################################################################################

"""
Logging helpers for TomlStash.

The library only creates loggers under the ``tomlstash`` namespace and never
installs handlers on import. Applications (and the CLI) call
``log_manager.configure()`` once at startup.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from .constants import APP_NAME, LOG_DATE_FORMAT, LOG_FORMAT

ROOT_LOGGER_NAME = APP_NAME


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger below the package namespace.

    Args:
        name: Usually ``__name__`` of the calling module

    Returns:
        Logger instance
    """
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


class LogManager:
    """Installs and replaces the handlers of the package root logger."""

    def __init__(self):
        self._handlers: list[logging.Handler] = []

    @property
    def logger(self) -> logging.Logger:
        return logging.getLogger(ROOT_LOGGER_NAME)

    def configure(
        self,
        level: Union[str, int] = "INFO",
        log_file: Optional[Path] = None,
    ) -> None:
        """
        Configure console (and optional file) logging.

        Calling this again replaces the handlers installed by the previous call.

        Args:
            level: Log level name or number
            log_file: Optional file that receives the same records

        Raises:
            ValueError: If the level name is unknown
        """
        if isinstance(level, str):
            numeric = logging.getLevelName(level.upper())
            if not isinstance(numeric, int):
                raise ValueError(f"Unknown log level: {level}")
            level = numeric

        root = self.logger
        self.reset()

        formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        self._add(console_handler)

        if log_file:
            log_file = Path(log_file).expanduser()
            log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
            file_handler.setFormatter(formatter)
            self._add(file_handler)

        root.setLevel(level)

    def reset(self) -> None:
        """Remove handlers installed by this manager."""
        root = self.logger
        for handler in self._handlers:
            root.removeHandler(handler)
            handler.close()
        self._handlers.clear()

    def _add(self, handler: logging.Handler) -> None:
        self.logger.addHandler(handler)
        self._handlers.append(handler)


log_manager = LogManager()
