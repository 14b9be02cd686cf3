from __future__ import annotations

import textwrap
from pathlib import Path

import pytest
from notecraft.config import (
    ConfigError,
    InvalidConfigError,
    MissingConfigError,
    NotecraftConfig,
    bootstrap_config_file,
    load_config,
)


def write_config(tmp_path: Path, content: str) -> Path:
    config_file = tmp_path / "config.toml"
    config_file.parent.mkdir(parents=True, exist_ok=True)
    config_file.write_text(textwrap.dedent(content), encoding="utf-8")
    return config_file


def test_vault_dir_defaults_to_config_dir(tmp_path: Path) -> None:
    config_path = write_config(tmp_path / "nested", "")

    config = load_config(config_path)
    assert config.vault_dir == (config_path.parent / "vault").resolve()
    assert config.source_path == config_path
    assert config.plugins == {}


def test_load_config_success(tmp_path: Path) -> None:
    config_path = write_config(
        tmp_path,
        """
        [notecraft]
        vault_dir = "notes"

        [plugins.notecraft-builtin-create-file]
        folder = "Inbox"
        """,
    )

    config = load_config(config_path)
    assert isinstance(config, NotecraftConfig)
    assert config.vault_dir == (tmp_path / "notes").resolve()
    assert config.plugins == {"notecraft-builtin-create-file": {"folder": "Inbox"}}


def test_absolute_vault_dir_is_kept(tmp_path: Path) -> None:
    vault = tmp_path / "elsewhere"
    config_path = write_config(
        tmp_path / "cfg",
        f"""
        [notecraft]
        vault_dir = "{vault.as_posix()}"
        """,
    )

    assert load_config(config_path).vault_dir == vault.resolve()


def test_load_config_missing_file(tmp_path: Path) -> None:
    missing = tmp_path / "missing.toml"
    with pytest.raises(MissingConfigError):
        load_config(missing)


@pytest.mark.parametrize(
    "content",
    [
        "notecraft = 3\n",
        "[notecraft]\nvault_dir = 3\n",
        "plugins = 'nope'\n",
        "[notecraft\n",
    ],
)
def test_invalid_config_is_rejected(tmp_path: Path, content: str) -> None:
    config_path = write_config(tmp_path, content)

    with pytest.raises(InvalidConfigError):
        load_config(config_path)


def test_bootstrap_config_file_creates_loadable_default(tmp_path: Path) -> None:
    path = tmp_path / "conf" / "config.toml"

    assert bootstrap_config_file(path) is True
    assert bootstrap_config_file(path) is False

    config = load_config(path)
    assert config.plugins["notecraft-builtin-create-file"] == {"folder": "Research"}
    assert issubclass(InvalidConfigError, ConfigError)
