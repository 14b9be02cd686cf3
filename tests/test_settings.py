"""Tests for the peewee-backed plugin data store."""

from __future__ import annotations

import sqlite3
from pathlib import Path

import pytest
from notecraft.settings import (
    DB_FILENAME,
    DEFAULT_SETTINGS,
    PluginDataStore,
    SettingsError,
    load_settings,
    save_settings,
)


def _store(tmp_path: Path) -> PluginDataStore:
    store = PluginDataStore(tmp_path / ".notecraft" / DB_FILENAME)
    store.initialize()
    return store


def test_load_settings_defaults_when_empty(tmp_path: Path) -> None:
    store = _store(tmp_path)

    assert store.load_data("sample") is None
    assert load_settings(store, "sample") == {"mySetting": "default"}


def test_saved_settings_merge_over_defaults(tmp_path: Path) -> None:
    store = _store(tmp_path)
    save_settings(store, "sample", {"mySetting": "secret", "extra": 3})

    settings = load_settings(store, "sample")

    assert settings == {"mySetting": "secret", "extra": 3}
    assert DEFAULT_SETTINGS["mySetting"] == "default"


def test_save_replaces_previous_payload(tmp_path: Path) -> None:
    store = _store(tmp_path)
    store.save_data("sample", {"a": 1})
    store.save_data("sample", {"b": 2})

    assert store.load_data("sample") == {"b": 2}


def test_corrupt_payload_raises(tmp_path: Path) -> None:
    store = _store(tmp_path)

    conn = sqlite3.connect(store.path)
    conn.execute(
        "INSERT INTO plugin_data (plugin_id, payload) VALUES (?, ?)",
        ("broken", "{not json"),
    )
    conn.commit()
    conn.close()

    with pytest.raises(SettingsError):
        store.load_data("broken")


def test_unserializable_data_raises(tmp_path: Path) -> None:
    store = _store(tmp_path)

    with pytest.raises(SettingsError):
        store.save_data("sample", {"value": object()})
