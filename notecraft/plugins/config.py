"""Configuration helpers for notecraft plugins."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping

from ..config import NotecraftConfig
from .types import PluginSettingsGetter

_EMPTY_MAPPING: Mapping[str, Any] = MappingProxyType({})


def build_settings_getter(config: NotecraftConfig) -> PluginSettingsGetter:
    """Return a callable that fetches plugin-specific configuration blocks."""

    tables = {
        key: MappingProxyType(dict(value)) for key, value in config.plugins.items()
    }

    def get_settings(
        plugin_id: str,
        *,
        default: Mapping[str, Any] | None = None,
    ) -> Mapping[str, Any]:
        data = tables.get(plugin_id)
        if data is not None:
            return data
        if default is not None:
            return MappingProxyType(dict(default))
        return _EMPTY_MAPPING

    return get_settings


__all__ = ["build_settings_getter"]
