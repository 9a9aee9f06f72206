################################################################################
# TOMLSTASH
#
# @file:        types.py
# @module:      tomlstash.types
# @description: Entry models and results of bulk load/save operations.
# @repository:  https://github.com/tomlstash/tomlstash
# @version:     1.0.0
#
# ------------------------------------------------------------------------------
# MIT-Lizenz: siehe LICENSE oder https://opensource.org/licenses/MIT
# ==============================================================================
# Hinweise:
# - Header and Content mirror the on-disk [header] / [settings] tables
# - LoadResult and SaveResult collect per-file failures instead of aborting
################################################################################

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .errors import SettingsError


# ---- Entry models ----

class Header(BaseModel):
    """Metadata block of an entry"""

    name: str = Field(..., description="Unique entry name, also the file stem")
    modified: bool = Field(default=False, description="In-memory changes not yet saved")
    hash: str = Field(default="", description="SHA-1 of the canonical TOML text")
    date: str = Field(default="", description="ISO 8601 timestamp of the last add/update")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate entry name (must be usable as a file name)"""
        v = v.strip()
        if not v:
            raise ValueError("Entry name cannot be empty")
        if any(ch in v for ch in ("/", "\\", "\x00")):
            raise ValueError(f"Entry name must not contain path separators: {v!r}")
        if v.startswith("."):
            raise ValueError(f"Entry name must not start with '.': {v!r}")
        return v


class Content(BaseModel):
    """A named settings entry: header plus optional free-form payload"""

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    header: Header
    payload: Optional[Any] = Field(
        default=None,
        alias="settings",
        description="Arbitrary TOML-representable data",
    )

    @property
    def name(self) -> str:
        return self.header.name

    @classmethod
    def new(cls, name: str, payload: Any = None) -> Content:
        """Build an entry ready to be passed to SettingsManager.add()"""
        return cls(header=Header(name=name), payload=payload)

    def to_document(self) -> Dict[str, Any]:
        """Plain dict in file layout ({"header": ..., "settings": ...})"""
        document: Dict[str, Any] = {"header": self.header.model_dump()}
        if self.payload is not None:
            document["settings"] = self.payload
        return document

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> Content:
        return cls.model_validate(document)


# ---- Bulk operation results ----

@dataclass
class FileFailure:
    path: Path
    error: SettingsError

    def __str__(self) -> str:
        return str(self.error)


@dataclass
class LoadResult:
    loaded: List[Content] = field(default_factory=list)
    failed: List[FileFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed

    def raise_for_failures(self) -> None:
        """Raise the first recorded error, if any."""
        if self.failed:
            raise self.failed[0].error


@dataclass
class SaveResult:
    written: List[Path] = field(default_factory=list)
    failed: List[FileFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed

    def raise_for_failures(self) -> None:
        """Raise the first recorded error, if any."""
        if self.failed:
            raise self.failed[0].error
