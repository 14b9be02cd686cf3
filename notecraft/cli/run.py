"""Run command for the notecraft CLI."""

from __future__ import annotations

from pathlib import Path

import click

from ..commands import CommandError
from ..services.commands import execute_command
from ._common import (
    NotecraftCliError,
    build_command_context,
    get_app,
    load_document,
    save_document,
)


@click.command(name="run")
@click.argument("path", type=click.Path(path_type=Path, dir_okay=False, exists=True))
@click.argument("command_ids", nargs=-1, required=True)
@click.option(
    "-l",
    "--lines",
    "lines",
    type=str,
    default=None,
    metavar="START:END",
    help="Select these lines (1-based, inclusive) before running.",
)
@click.option(
    "--title",
    type=str,
    default=None,
    help="Answer the create-file prompt with this file name.",
)
@click.pass_context
def run(
    ctx: click.Context,
    path: Path,
    command_ids: tuple[str, ...],
    lines: str | None,
    title: str | None,
) -> None:
    """Run one or more commands against a document in a single session."""

    app = get_app(ctx)
    document = load_document(path, lines)
    original = document.get_value()
    command_ctx = build_command_context(app, document, title=title)

    for command_id in command_ids:
        try:
            execute_command(command_id, command_ctx)
        except CommandError as exc:
            raise NotecraftCliError(str(exc)) from exc

    if document.get_value() != original:
        save_document(document)
        click.echo(f"Updated {path}")


def register(cli: click.Group) -> None:
    """Register the command with the root CLI group."""

    cli.add_command(run)
