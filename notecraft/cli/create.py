"""Create command for the notecraft CLI."""

from __future__ import annotations

from pathlib import Path

import click

from ..commands import CommandError
from ..document import Document
from ..plugins.builtin.create_file import COMMAND_ID
from ..services.commands import execute_command
from ._common import NotecraftCliError, build_command_context, get_app, load_document


@click.command(name="create")
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
    help="Lines of PATH to use as the selection (1-based, inclusive).",
)
@click.option(
    "-t",
    "--text",
    "text",
    type=str,
    default=None,
    help="Use this text as the selection instead of a file.",
)
@click.option(
    "--title",
    type=str,
    default=None,
    help="File name to use without prompting.",
)
@click.pass_context
def create(
    ctx: click.Context,
    path: Path | None,
    lines: str | None,
    text: str | None,
    title: str | None,
) -> None:
    """Create a note in the vault from selected text."""

    if (path is None) == (text is None):
        raise NotecraftCliError("Provide either PATH or --text.")
    if text is not None and lines is not None:
        raise NotecraftCliError("--lines applies to PATH only.")

    app = get_app(ctx)

    if text is not None:
        document = Document(text=text, selection=(0, len(text)))
    else:
        document = load_document(path, lines)

    try:
        execute_command(COMMAND_ID, build_command_context(app, document, title=title))
    except CommandError as exc:
        raise NotecraftCliError(str(exc)) from exc


def register(cli: click.Group) -> None:
    """Register the command with the root CLI group."""

    cli.add_command(create)
