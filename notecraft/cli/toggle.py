"""Toggle command for the notecraft CLI."""

from __future__ import annotations

from pathlib import Path

import click

from ..commands import CommandError
from ..plugins.builtin.embedding import COMMAND_ID
from ..services.commands import execute_command
from ._common import (
    NotecraftCliError,
    build_command_context,
    get_app,
    load_document,
    save_document,
)


@click.command(name="toggle")
@click.argument("path", type=click.Path(path_type=Path, dir_okay=False, exists=True))
@click.option(
    "--embed/--unembed",
    "embed",
    default=True,
    show_default=True,
    help="Add or remove the embed marker on checklist links.",
)
@click.pass_context
def toggle(ctx: click.Context, path: Path, embed: bool) -> None:
    """Toggle '![[link]]' embeds on the checklist lines of a markdown file."""

    app = get_app(ctx)
    app.session.embedding_enabled = embed

    document = load_document(path)
    try:
        execute_command(COMMAND_ID, build_command_context(app, document))
    except CommandError as exc:
        raise NotecraftCliError(str(exc)) from exc

    save_document(document)
    action = "Embedded" if embed else "Unembedded"
    click.echo(f"{action} checklist links in {path}")


def register(cli: click.Group) -> None:
    """Register the command with the root CLI group."""

    cli.add_command(toggle)
