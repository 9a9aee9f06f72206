################################################################################
# TOMLSTASH
#
# @file:        settings_manager.py
# @module:      tomlstash.cores.settings_manager
# @description: Directory-backed store of named TOML settings entries.
# @repository:  https://github.com/tomlstash/tomlstash
# @version:     1.0.0
#
# ------------------------------------------------------------------------------
# MIT-Lizenz: siehe LICENSE oder https://opensource.org/licenses/MIT
# ==============================================================================
# Hinweise:
# - One file per entry: <base_path>/<name>.toml
# - add/update/remove only change memory (remove also deletes the file)
# - load/save work file by file and report failures in their result
################################################################################

"""
Settings manager.

Owns a base directory, loads every ``*.toml`` entry found directly in it,
lets callers add, update and remove named entries and writes them back as
one file per entry.
"""

from __future__ import annotations

import copy
import os
import tempfile
from datetime import datetime
from pathlib import Path
from typing import Any, Iterator, List, Optional

from ..errors import (
    DuplicateNameError,
    EntryNotFoundError,
    HashMismatchError,
    SettingsError,
    SettingsIOError,
)
from ..helpers.codec import compute_hash, deserialize, serialize
from ..helpers.config import StoreConfig
from ..helpers.constants import DEFAULT_FOLDER_NAME, FILE_EXTENSION
from ..helpers.logging import get_logger
from ..types import Content, FileFailure, LoadResult, SaveResult

logger = get_logger(__name__)


def _now() -> str:
    return datetime.now().astimezone().isoformat()


class SettingsManager:
    """
    Manages named settings entries stored as TOML files.

    Entries live in memory in insertion/load order. Nothing is written until
    ``save()`` is called.
    """

    def __init__(
        self,
        path: Optional[Path] = None,
        *,
        config: Optional[StoreConfig] = None,
        autoload: bool = True,
    ):
        """
        Initialize the manager and load existing entries.

        Args:
            path: Base directory (overrides config.base_path)
            config: Store options, resolved from the environment if omitted
            autoload: Run load() right away

        Raises:
            SettingsIOError: If autoload is set and the base directory
                cannot be listed
        """
        if config is None:
            config = StoreConfig.from_env()
        if path is not None:
            config = config.model_copy(update={"base_path": Path(path).expanduser()})

        self.config = config
        self._path = config.base_path
        self._entries: List[Content] = []
        self.last_load: Optional[LoadResult] = None

        self._init_folders()

        if autoload:
            self.last_load = self.load()

    # --------------- Properties ---------------

    @property
    def path(self) -> Path:
        """Base directory."""
        return self._path

    @property
    def default_folder(self) -> Path:
        """Folder reserved for default configuration files."""
        return self._path / DEFAULT_FOLDER_NAME

    @property
    def entries(self) -> List[Content]:
        return list(self._entries)

    def names(self) -> List[str]:
        return [entry.name for entry in self._entries]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Content]:
        return iter(list(self._entries))

    def __contains__(self, name: object) -> bool:
        return self._find(name) is not None

    def file_for(self, name: str) -> Path:
        """Path of the file an entry is saved to."""
        return self._path / f"{name}.{FILE_EXTENSION}"

    # --------------- Entry Operations ---------------

    def get(self, name: str) -> Content:
        """
        Get an entry by name.

        Raises:
            EntryNotFoundError: If no entry has this name
        """
        entry = self._find(name)
        if entry is None:
            raise EntryNotFoundError(name)
        return entry

    def add(self, entry: Content) -> Content:
        """
        Add a new entry.

        Stamps the date, clears the modified flag and stores the content hash.
        The payload is copied. Memory only, call save() to persist.

        Args:
            entry: Entry with at least a name

        Returns:
            The added entry

        Raises:
            DuplicateNameError: If an entry with the same name exists
            SettingsSerializeError: If the payload cannot be written as TOML
        """
        if self._find(entry.name) is not None:
            logger.warning(f"Entry already exists: {entry.name}")
            raise DuplicateNameError(entry.name)

        header = entry.header.model_copy(update={"date": _now(), "modified": False, "hash": ""})
        candidate = entry.model_copy(
            update={"header": header, "payload": copy.deepcopy(entry.payload)}
        )
        header.hash = compute_hash(candidate)

        self._entries.append(candidate)
        logger.debug(f"Added entry '{candidate.name}' ({header.hash})")
        return candidate

    def update(self, name: str, payload: Any) -> Content:
        """
        Replace the payload of an existing entry.

        Restamps the date, recomputes the hash and marks the entry modified
        until the next save. The payload is copied.

        Raises:
            EntryNotFoundError: If no entry has this name
            SettingsSerializeError: If the payload cannot be written as TOML
        """
        index = self._index(name)
        current = self._entries[index]

        header = current.header.model_copy(update={"date": _now(), "hash": ""})
        candidate = current.model_copy(
            update={"header": header, "payload": copy.deepcopy(payload)}
        )
        header.hash = compute_hash(candidate)
        header.modified = True

        self._entries[index] = candidate
        logger.debug(f"Updated entry '{name}' ({header.hash})")
        return candidate

    def remove(self, name: str) -> Content:
        """
        Remove an entry from memory and delete its file.

        Returns:
            The removed entry

        Raises:
            EntryNotFoundError: If no entry has this name
            SettingsIOError: If the file exists but cannot be deleted
        """
        index = self._index(name)
        entry = self._entries.pop(index)

        file_path = self.file_for(entry.name)
        try:
            file_path.unlink(missing_ok=True)
        except OSError as e:
            raise SettingsIOError(file_path, f"Cannot delete file: {e}") from e

        logger.info(f"Removed entry '{name}'")
        return entry

    def verify(self) -> List[str]:
        """
        Check stored hashes of all in-memory entries.

        Returns:
            Names whose stored hash does not match their content
        """
        mismatches = []
        for entry in self._entries:
            if not entry.header.hash:
                continue
            if compute_hash(entry) != entry.header.hash:
                mismatches.append(entry.name)
        return mismatches

    def rehash(self, name: Optional[str] = None) -> List[str]:
        """
        Store freshly computed hashes, e.g. after a file was edited by hand.

        Args:
            name: Single entry to rehash, all entries if omitted

        Returns:
            Names whose hash changed (these are marked modified)

        Raises:
            EntryNotFoundError: If name is given and unknown
        """
        targets = [self.get(name)] if name is not None else self._entries
        changed = []
        for entry in targets:
            digest = compute_hash(entry)
            if digest != entry.header.hash:
                entry.header.hash = digest
                entry.header.modified = True
                changed.append(entry.name)
        return changed

    # --------------- Persistence ---------------

    def load(self) -> LoadResult:
        """
        Load all entries found in the base directory.

        Files are handled independently: a broken file is reported in the
        result and the remaining files are still loaded. In-memory entries
        are kept, so calling load() twice duplicates them (see reload()).

        Returns:
            LoadResult with loaded entries and per-file failures

        Raises:
            SettingsIOError: If the base directory cannot be listed
        """
        try:
            files = sorted(
                p for p in self._path.iterdir()
                if p.suffix == f".{FILE_EXTENSION}" and p.is_file()
            )
        except OSError as e:
            raise SettingsIOError(self._path, f"Cannot list directory: {e}") from e

        result = LoadResult()
        for file_path in files:
            try:
                entry = self._load_file(file_path)
            except SettingsError as e:
                logger.error(f"Failed to load {file_path}: {e}")
                result.failed.append(FileFailure(file_path, e))
                continue

            if self._find(entry.name) is not None:
                logger.warning(f"Duplicate entry name '{entry.name}' loaded from {file_path}")

            self._entries.append(entry)
            result.loaded.append(entry)

        logger.info(
            f"Loaded {len(result.loaded)} entries from {self._path}"
            + (f" ({len(result.failed)} failed)" if result.failed else "")
        )
        return result

    def reload(self) -> LoadResult:
        """Drop all in-memory entries and load again."""
        self._entries.clear()
        self.last_load = self.load()
        return self.last_load

    def save(self) -> SaveResult:
        """
        Write every in-memory entry to <base_path>/<name>.toml.

        Each file is replaced atomically. A failing entry is reported in the
        result and the others are still written.

        Returns:
            SaveResult with written paths and per-entry failures
        """
        result = SaveResult()
        for entry in self._entries:
            file_path = self.file_for(entry.name)
            saved = entry.model_copy(
                update={"header": entry.header.model_copy(update={"modified": False})}
            )
            try:
                self._write_file(file_path, serialize(saved))
            except SettingsError as e:
                logger.error(f"Failed to save '{entry.name}': {e}")
                result.failed.append(FileFailure(file_path, e))
                continue

            entry.header.modified = False
            result.written.append(file_path)

        logger.info(
            f"Saved {len(result.written)} entries to {self._path}"
            + (f" ({len(result.failed)} failed)" if result.failed else "")
        )
        return result

    # --------------- Internals ---------------

    def _init_folders(self) -> None:
        try:
            self.default_folder.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.warning(f"Could not create {self.default_folder}: {e}")

    def _find(self, name: object) -> Optional[Content]:
        for entry in self._entries:
            if entry.name == name:
                return entry
        return None

    def _index(self, name: str) -> int:
        for index, entry in enumerate(self._entries):
            if entry.name == name:
                return index
        raise EntryNotFoundError(name)

    def _load_file(self, file_path: Path) -> Content:
        try:
            text = file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise SettingsIOError(file_path, f"Cannot read file: {e}") from e

        entry = deserialize(text, file_path)

        if entry.header.hash:
            actual = compute_hash(entry)
            if actual != entry.header.hash:
                if self.config.strict_hash:
                    raise HashMismatchError(file_path, entry.header.hash, actual)
                logger.warning(f"Hash mismatch for '{entry.name}' in {file_path}, marking modified")
                entry.header.modified = True

        if file_path.stem != entry.name:
            logger.debug(f"{file_path.name} holds entry '{entry.name}'")
        return entry

    def _write_file(self, file_path: Path, text: str) -> None:
        """Write text atomically with the configured permissions."""
        try:
            temp_fd, temp_path = tempfile.mkstemp(
                dir=self._path,
                prefix=f".{file_path.stem}-",
                suffix='.tmp'
            )
        except OSError as e:
            raise SettingsIOError(file_path, f"Cannot create temp file: {e}") from e

        try:
            with os.fdopen(temp_fd, 'w', encoding='utf-8') as f:
                f.write(text)
            os.chmod(temp_path, self.config.file_mode)
            os.replace(temp_path, file_path)
        except (OSError, UnicodeError) as e:
            try:
                os.unlink(temp_path)
            except OSError:
                pass
            raise SettingsIOError(file_path, f"Cannot write file: {e}") from e
