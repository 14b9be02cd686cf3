"""Peewee-backed persistence for per-plugin data and settings."""

from __future__ import annotations

import json
import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator, Mapping

from peewee import Model, SqliteDatabase, TextField

DATA_DIRNAME = ".notecraft"
DB_FILENAME = "plugins.sqlite3"
TABLE_PLUGIN_DATA = "plugin_data"

DEFAULT_SETTINGS: Mapping[str, Any] = {"mySetting": "default"}

logger = logging.getLogger(__name__)


class SettingsError(RuntimeError):
    """Raised when plugin data cannot be loaded or saved."""


class PluginDataDatabase(SqliteDatabase):
    """SqliteDatabase configured for per-call connection lifetimes."""

    def __init__(self, path: Path) -> None:
        super().__init__(str(path), check_same_thread=False)


class PluginDataModel(Model):
    """Base model bound to the plugin data database."""

    class Meta:
        database = SqliteDatabase(None)


class PluginData(PluginDataModel):
    """One JSON payload per plugin id."""

    plugin_id = TextField(primary_key=True)
    payload = TextField(null=False)

    class Meta:
        table_name = TABLE_PLUGIN_DATA


class PluginDataStore:
    """Key-value store mapping plugin ids to opaque JSON mappings."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        self._database = PluginDataDatabase(self.path)

    def initialize(self) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:  # pragma: no cover - filesystem failures are rare
            raise SettingsError(f"Failed to create data directory: {exc}") from exc

        with self._binding() as model:
            try:
                model.create_table(safe=True)
            except Exception as exc:  # pragma: no cover - defensive
                raise SettingsError(f"Failed to initialize database: {exc}") from exc

    def load_data(self, plugin_id: str) -> dict[str, Any] | None:
        """Return the stored mapping for ``plugin_id`` or ``None`` if absent."""

        with self._binding() as model:
            row = model.get_or_none(model.plugin_id == plugin_id)
        if row is None:
            return None
        try:
            data = json.loads(row.payload)
        except json.JSONDecodeError as exc:
            raise SettingsError(
                f"Stored data for plugin '{plugin_id}' is corrupt: {exc}"
            ) from exc
        if not isinstance(data, dict):
            raise SettingsError(f"Stored data for plugin '{plugin_id}' is not a mapping.")
        return data

    def save_data(self, plugin_id: str, data: Mapping[str, Any]) -> None:
        try:
            payload = json.dumps(dict(data), sort_keys=True)
        except (TypeError, ValueError) as exc:
            raise SettingsError(f"Plugin data is not serializable: {exc}") from exc

        with self._binding() as model:
            model.insert(plugin_id=plugin_id, payload=payload).on_conflict_replace().execute()
        logger.debug("Saved data for plugin %s", plugin_id)

    @contextmanager
    def _binding(self) -> Iterator[type[PluginData]]:
        with self._database.connection_context():
            with PluginData.bind_ctx(self._database):
                yield PluginData


def load_settings(
    store: PluginDataStore,
    plugin_id: str,
    defaults: Mapping[str, Any] = DEFAULT_SETTINGS,
) -> dict[str, Any]:
    """Return stored settings for ``plugin_id`` merged over ``defaults``."""

    merged = dict(defaults)
    merged.update(store.load_data(plugin_id) or {})
    return merged


def save_settings(
    store: PluginDataStore, plugin_id: str, settings: Mapping[str, Any]
) -> None:
    store.save_data(plugin_id, settings)
