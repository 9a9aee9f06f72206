"""
TOML encoding of settings entries.

Entries are written with tomli-w and read back with tomllib (tomli before
Python 3.11). The digest stored in the header is taken over the text of the
entry in canonical form: empty hash, modified flag cleared.
"""

from __future__ import annotations

import hashlib
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import tomli_w
from pydantic import ValidationError

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from ..errors import SettingsParseError, SettingsSerializeError
from ..types import Content


def serialize(content: Content) -> str:
    """
    Render an entry as pretty TOML text.

    Raises:
        SettingsSerializeError: If the payload holds values TOML cannot express
    """
    try:
        text = tomli_w.dumps(content.to_document())
        # Files are UTF-8, lone surrogates must fail here and not on write
        text.encode("utf-8")
    except (TypeError, ValueError) as e:
        raise SettingsSerializeError(content.name, str(e)) from e
    return text


def parse_toml(text: str) -> Dict[str, Any]:
    """Plain TOML document as a dict (raises tomllib.TOMLDecodeError)."""
    return tomllib.loads(text)


def deserialize(text: str, path: Optional[Path] = None) -> Content:
    """
    Parse TOML text into an entry.

    Args:
        text: File content
        path: Source file, only used for error messages

    Raises:
        SettingsParseError: Invalid TOML or missing/invalid header
    """
    try:
        document = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise SettingsParseError(path, f"Invalid TOML: {e}") from e

    try:
        return Content.from_document(document)
    except ValidationError as e:
        raise SettingsParseError(path, f"Invalid entry: {e}") from e


def canonical_text(content: Content) -> str:
    """Serialized form the hash is computed over."""
    canonical = content.model_copy(
        update={"header": content.header.model_copy(update={"hash": "", "modified": False})}
    )
    return serialize(canonical)


def compute_hash(content: Content) -> str:
    """SHA-1 hex digest of the canonical text."""
    return hashlib.sha1(canonical_text(content).encode("utf-8")).hexdigest()
