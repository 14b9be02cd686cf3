"""Configuration management for notecraft."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

DEFAULT_CONFIG_DIR = Path("~/.config/notecraft").expanduser()
DEFAULT_CONFIG_PATH = DEFAULT_CONFIG_DIR / "config.toml"
DEFAULT_VAULT_DIRNAME = "vault"


class ConfigError(RuntimeError):
    """Base error for configuration related issues."""


class MissingConfigError(ConfigError):
    """Raised when the configuration file cannot be found."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Configuration file not found at {path}")
        self.path = path


class InvalidConfigError(ConfigError):
    """Raised when the configuration file misses required keys or values."""


@dataclass(slots=True)
class NotecraftConfig:
    """In-memory representation of the notecraft configuration file."""

    vault_dir: Path
    plugins: dict[str, dict[str, Any]] = field(default_factory=dict)
    source_path: Path | None = None


def load_config(path: Path | None = None) -> NotecraftConfig:
    """Load configuration from ``path`` or the default location.

    Parameters
    ----------
    path:
        Optional location of the configuration file. When ``None`` the default
        path (``~/.config/notecraft/config.toml``) is used.

    Raises
    ------
    MissingConfigError
        If the file cannot be found.
    InvalidConfigError
        If settings are malformed.
    """

    config_path = (path or DEFAULT_CONFIG_PATH).expanduser()
    if not config_path.exists():
        raise MissingConfigError(config_path)

    try:
        with config_path.open("rb") as fh:
            raw = tomllib.load(fh)
    except tomllib.TOMLDecodeError as exc:
        raise InvalidConfigError(f"Configuration is not valid TOML: {exc}") from exc

    notecraft_section = raw.get("notecraft", {})
    if not isinstance(notecraft_section, dict):
        raise InvalidConfigError("'notecraft' section must be a table")

    base_dir = config_path.parent if path is not None else DEFAULT_CONFIG_DIR
    config_dir = base_dir.expanduser()

    # The vault path may be absolute or relative; relative paths are resolved
    # against the configuration directory.
    vault_raw = notecraft_section.get("vault_dir")
    if vault_raw is None:
        vault_dir = (config_dir / DEFAULT_VAULT_DIRNAME).resolve()
    elif isinstance(vault_raw, str):
        vault_str = vault_raw.strip()
        if vault_str:
            vp = Path(vault_str).expanduser()
            vault_dir = (vp if vp.is_absolute() else (config_dir / vp)).resolve()
        else:
            vault_dir = (config_dir / DEFAULT_VAULT_DIRNAME).resolve()
    else:
        raise InvalidConfigError("'vault_dir' must be a string when provided")

    plugins_section = raw.get("plugins")
    plugins: dict[str, dict[str, Any]] = {}
    if plugins_section is not None and not isinstance(plugins_section, dict):
        raise InvalidConfigError("'plugins' section must be a table")
    for key, value in (plugins_section or {}).items():
        if isinstance(value, dict):
            plugins[key] = dict(value)
        else:
            plugins[key] = {}

    return NotecraftConfig(
        vault_dir=vault_dir,
        plugins=plugins,
        source_path=config_path,
    )


def bootstrap_config_file(path: Path) -> bool:
    """Create a default config file if missing.

    Returns True when the file was created, False if it already existed.
    """

    if path.exists():
        return False

    config_dir = path.parent
    config_dir.mkdir(parents=True, exist_ok=True)
    default_content = (
        "[notecraft]\n"
        'vault_dir = "vault"\n'
        "\n"
        "[plugins.notecraft-builtin-create-file]\n"
        'folder = "Research"\n'
    )
    path.write_text(default_content, encoding="utf-8")
    return True
