"""Commands listing for the notecraft CLI."""

from __future__ import annotations

from pathlib import Path

import click

from ..commands import CommandError
from ..services.commands import list_commands
from ._common import NotecraftCliError, build_command_context, get_app, load_document


@click.command(name="commands")
@click.argument(
    "path",
    type=click.Path(path_type=Path, dir_okay=False, exists=True),
    required=False,
)
@click.option(
    "-l",
    "--lines",
    "lines",
    type=str,
    default=None,
    metavar="START:END",
    help="Select these lines before checking availability.",
)
@click.pass_context
def commands(ctx: click.Context, path: Path | None, lines: str | None) -> None:
    """List registered commands and whether they apply to PATH."""

    app = get_app(ctx)
    document = load_document(path, lines) if path is not None else None

    try:
        entries = list_commands(build_command_context(app, document))
    except CommandError as exc:
        raise NotecraftCliError(str(exc)) from exc

    if not entries:
        click.echo("No commands are available.")
        return

    for contribution, available in entries:
        marker = "*" if available else " "
        click.echo(f"{marker} {contribution.command_id}: {contribution.name}")


def register(cli: click.Group) -> None:
    """Register the command with the root CLI group."""

    cli.add_command(commands)
