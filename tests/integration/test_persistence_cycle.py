"""
Integration tests for full add -> save -> load cycles.

Every test works on a real temporary directory and uses fresh manager
instances to read back what an earlier instance wrote.
"""

from datetime import date, datetime, timedelta, timezone

import pytest

from tomlstash import Content, SettingsManager
from tomlstash.helpers.codec import deserialize, serialize

pytestmark = pytest.mark.integration


def test_person_scenario(store_path, person_payload):
    manager = SettingsManager(store_path)
    manager.add(Content.new("test", person_payload))
    result = manager.save()

    assert result.ok
    assert (store_path / "test.toml").exists()

    reloaded = SettingsManager(store_path)
    settings = reloaded.get("test").payload

    assert settings["name"] == "John Doe"
    assert settings["age"] == 43
    assert settings["address"]["city"] == "London"
    assert settings["phones"][1] == "+44 2345678"


@pytest.mark.parametrize("name,payload", [
    ("plain", {"key": "value"}),
    ("with-dash", {"nested": {"deeper": {"deepest": [1, 2, 3]}}}),
    ("with space", {"flag": True, "ratio": 0.25}),
    ("unicodé", {"greeting": "grüß dich", "emoji": "⚙"}),
    ("tables-in-array", {"servers": [{"host": "a", "port": 1}, {"host": "b", "port": 2}]}),
    ("dates", {"released": date(2026, 10, 19), "at": datetime(2026, 10, 19, 8, 30, tzinfo=timezone.utc)}),
    ("scalar", 7),
    ("array", ["a", "b"]),
    ("no-payload", None),
])
def test_payload_survives_round_trip(store_path, name, payload):
    manager = SettingsManager(store_path)
    manager.add(Content.new(name, payload))
    manager.save().raise_for_failures()

    reloaded = SettingsManager(store_path)

    assert reloaded.last_load.ok
    assert reloaded.names() == [name]
    assert reloaded.get(name).payload == payload


def test_written_files_are_stable(store_path, person_payload):
    manager = SettingsManager(store_path)
    manager.add(Content.new("person", person_payload))
    manager.add(Content.new("misc", {"z": 1, "a": {"b": [1.5, 2.5]}, "m": "x"}))
    manager.save()

    for file_path in sorted(store_path.glob("*.toml")):
        text = file_path.read_text(encoding="utf-8")
        assert serialize(deserialize(text)) == text


def test_saving_loaded_entries_rewrites_identical_files(store_path, person_payload):
    first = SettingsManager(store_path)
    first.add(Content.new("person", person_payload))
    first.save()
    before = (store_path / "person.toml").read_text(encoding="utf-8")

    second = SettingsManager(store_path)
    second.save()

    assert (store_path / "person.toml").read_text(encoding="utf-8") == before


def test_date_is_current_and_stable(store_path):
    manager = SettingsManager(store_path)
    entry = manager.add(Content.new("app", {"a": 1}))
    stamped = datetime.fromisoformat(entry.header.date)

    assert abs(datetime.now().astimezone() - stamped) < timedelta(seconds=5)

    manager.save()
    for _ in range(3):
        reloaded = SettingsManager(store_path)
        assert reloaded.get("app").header.date == entry.header.date
        reloaded.save()


def test_hash_is_preserved(store_path):
    manager = SettingsManager(store_path)
    entry = manager.add(Content.new("app", {"a": 1}))
    manager.save()

    reloaded = SettingsManager(store_path)

    assert reloaded.get("app").header.hash == entry.header.hash
    assert reloaded.get("app").header.modified is False


def test_broken_file_next_to_valid_ones(store_path, person_payload):
    manager = SettingsManager(store_path)
    manager.add(Content.new("alpha", {"a": 1}))
    manager.add(Content.new("omega", person_payload))
    manager.save()
    (store_path / "middle.toml").write_text("[header]\nname = \n", encoding="utf-8")

    reloaded = SettingsManager(store_path)

    assert reloaded.names() == ["alpha", "omega"]
    assert [f.path.name for f in reloaded.last_load.failed] == ["middle.toml"]


def test_update_and_remove_cycle(store_path):
    manager = SettingsManager(store_path)
    manager.add(Content.new("keep", {"v": 1}))
    manager.add(Content.new("drop", {"v": 1}))
    manager.save()

    manager.update("keep", {"v": 2})
    manager.remove("drop")
    manager.save()

    reloaded = SettingsManager(store_path)
    assert reloaded.names() == ["keep"]
    assert reloaded.get("keep").payload == {"v": 2}
    assert reloaded.verify() == []
