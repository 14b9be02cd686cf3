"""Config command for the notecraft CLI."""

from __future__ import annotations

from pathlib import Path

import click

from .. import config as config_module
from ..config import bootstrap_config_file
from ._common import NotecraftCliError


@click.command(name="config")
@click.option(
    "--no-edit",
    "no_edit",
    is_flag=True,
    help="Only create the file when missing; do not open an editor.",
)
@click.pass_context
def config(ctx: click.Context, no_edit: bool) -> None:
    """Create the notecraft configuration file and open it in the editor."""

    selected_path: Path | None = ctx.obj.get("config_path")
    config_path = selected_path or config_module.DEFAULT_CONFIG_PATH

    created = bootstrap_config_file(config_path)
    if created:
        click.echo(f"Created configuration at {config_path}")

    if no_edit:
        return

    try:
        result = click.edit(filename=str(config_path))
    except click.ClickException as exc:  # pragma: no cover - editor launch failure rare
        raise NotecraftCliError(f"Failed to launch editor: {exc}") from exc

    if result is None:
        click.echo(f"Opened configuration at {config_path}")


def register(cli: click.Group) -> None:
    """Register the command with the root CLI group."""

    cli.add_command(config)
