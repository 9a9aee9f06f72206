"""
Unit tests for entry models and bulk results.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from tomlstash.errors import SettingsIOError, SettingsParseError
from tomlstash.types import Content, FileFailure, Header, LoadResult, SaveResult


@pytest.mark.unit
class TestHeader:
    """Tests for Header validation."""

    def test_defaults(self):
        header = Header(name="app")
        assert header.modified is False
        assert header.hash == ""
        assert header.date == ""

    def test_name_is_stripped(self):
        assert Header(name="  app  ").name == "app"

    @pytest.mark.parametrize("name", ["", "   ", "a/b", "a\\b", ".hidden", "nul\x00"])
    def test_invalid_names_rejected(self, name):
        with pytest.raises(ValidationError):
            Header(name=name)

    def test_name_required(self):
        with pytest.raises(ValidationError):
            Header()


@pytest.mark.unit
class TestContent:
    """Tests for Content construction and document layout."""

    def test_new_sets_name_and_payload(self):
        entry = Content.new("app", {"debug": True})
        assert entry.name == "app"
        assert entry.payload == {"debug": True}

    def test_payload_accepts_alias(self):
        entry = Content(header=Header(name="app"), settings={"a": 1})
        assert entry.payload == {"a": 1}

    def test_document_uses_settings_key(self):
        document = Content.new("app", {"a": 1}).to_document()
        assert list(document) == ["header", "settings"]
        assert document["settings"] == {"a": 1}
        assert document["header"]["name"] == "app"

    def test_document_omits_empty_payload(self):
        document = Content.new("app").to_document()
        assert "settings" not in document

    def test_from_document(self):
        entry = Content.from_document({
            "header": {"name": "app", "modified": False, "hash": "abc", "date": "d"},
            "settings": {"x": [1, 2]},
        })
        assert entry.header.hash == "abc"
        assert entry.payload == {"x": [1, 2]}

    def test_from_document_without_header(self):
        with pytest.raises(ValidationError):
            Content.from_document({"settings": {}})


@pytest.mark.unit
class TestResults:
    """Tests for LoadResult / SaveResult."""

    def test_empty_results_are_ok(self):
        assert LoadResult().ok
        assert SaveResult().ok
        LoadResult().raise_for_failures()

    def test_raise_for_failures_raises_first_error(self):
        first = SettingsParseError(Path("a.toml"), "broken")
        second = SettingsIOError(Path("b.toml"), "denied")
        result = LoadResult(failed=[
            FileFailure(Path("a.toml"), first),
            FileFailure(Path("b.toml"), second),
        ])

        assert not result.ok
        with pytest.raises(SettingsParseError) as exc_info:
            result.raise_for_failures()
        assert exc_info.value is first

    def test_failure_str(self):
        failure = FileFailure(Path("a.toml"), SettingsIOError(Path("a.toml"), "denied"))
        assert "denied" in str(failure)
        assert "a.toml" in str(failure)
