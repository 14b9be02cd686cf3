"""Application bootstrap and context container for notecraft."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .config import ConfigError, NotecraftConfig, load_config
from .plugins import BootstrapContext, build_settings_getter, run_bootstrap
from .plugins.types import PluginSettingsGetter
from .session import PluginSession
from .settings import (
    DATA_DIRNAME,
    DB_FILENAME,
    PluginDataStore,
    load_settings,
    save_settings,
)
from .vault import Vault

SETTINGS_KEY = "notecraft"


@dataclass(slots=True)
class AppContext:
    """Aggregates core services for one plugin session."""

    config: NotecraftConfig
    vault: Vault
    data_store: PluginDataStore
    session: PluginSession
    get_settings: PluginSettingsGetter

    def save_settings(self) -> None:
        save_settings(self.data_store, SETTINGS_KEY, self.session.settings)


def bootstrap(
    config_path: Path | None,
    *,
    embedding_enabled: bool = True,
) -> AppContext:
    """Load configuration, open the vault and start a plugin session."""

    # Defer error mapping to the CLI, which knows how to present messages.
    config = load_config(config_path)

    vault = Vault(config.vault_dir)
    vault.initialize()

    data_store = PluginDataStore(config.vault_dir / DATA_DIRNAME / DB_FILENAME)
    data_store.initialize()

    get_settings = build_settings_getter(config)
    bootstrap_errors = run_bootstrap(
        BootstrapContext(config=config, get_settings=get_settings)
    )
    if bootstrap_errors:
        first_error = bootstrap_errors[0]
        raise ConfigError(f"Plugin bootstrap failed: {first_error}") from first_error

    session = PluginSession(
        embedding_enabled=embedding_enabled,
        settings=load_settings(data_store, SETTINGS_KEY),
    )

    return AppContext(
        config=config,
        vault=vault,
        data_store=data_store,
        session=session,
        get_settings=get_settings,
    )
