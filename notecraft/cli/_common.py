"""Shared helpers for notecraft CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import click

from ..app import AppContext, bootstrap
from ..commands import CommandError
from ..config import ConfigError, MissingConfigError
from ..create_flow import CreateNoteFlow, FlowSnapshot, FlowState
from ..document import Document, DocumentError
from ..plugins import CommandContext
from ..plugins.types import FlowRunner
from ..settings import SettingsError
from ..vault import VaultError

CONTEXT_SETTINGS: dict[str, Any] = {"help_option_names": ["-h", "--help"]}


class NotecraftCliError(click.ClickException):
    """Shared Click exception wrapper for CLI failures."""


def get_app(ctx: click.Context) -> AppContext:
    """Return a cached AppContext for the current CLI invocation."""

    app: AppContext | None = ctx.obj.get("app")
    if app is not None:
        return app

    config_path_opt: Path | None = ctx.obj.get("config_path")

    try:
        app = bootstrap(config_path_opt)
    except MissingConfigError as exc:
        raise NotecraftCliError(
            "Configuration not found. Run 'notecraft config' once to set up notecraft."
        ) from exc
    except (ConfigError, VaultError, SettingsError) as exc:
        raise NotecraftCliError(str(exc)) from exc

    ctx.obj["app"] = app
    return app


def parse_line_range(value: str) -> tuple[int, int]:
    """Parse ``START:END`` or a single ``LINE`` into an inclusive range."""

    first_raw, sep, last_raw = value.partition(":")
    try:
        first = int(first_raw)
        last = int(last_raw) if sep else first
    except ValueError:
        raise NotecraftCliError(
            f"Invalid line range '{value}'. Use START:END or LINE."
        ) from None
    return first, last


def load_document(path: Path, lines: str | None = None) -> Document:
    try:
        document = Document.load(path)
        if lines is not None:
            document.select_lines(*parse_line_range(lines))
    except DocumentError as exc:
        raise NotecraftCliError(str(exc)) from exc
    return document


def save_document(document: Document) -> None:
    try:
        document.save()
    except DocumentError as exc:
        raise NotecraftCliError(str(exc)) from exc


def render_flow(snapshot: FlowSnapshot) -> None:
    """Draw the flow banner: red for problems, the target path otherwise."""

    if snapshot.message is not None:
        click.secho(snapshot.message, fg="red", err=True)
    elif snapshot.state is FlowState.CREATED:
        click.echo(f"Created {snapshot.path}")
    elif snapshot.state is FlowState.ABANDONED:
        click.echo("Cancelled.")


def prompt_flow_runner(title: str | None = None) -> FlowRunner:
    """Return a runner driving the creation flow from the terminal.

    With ``title`` the flow is answered once without prompting; otherwise the
    user is asked for a file name until a note is created or input ends.
    """

    def run(flow: CreateNoteFlow) -> None:
        click.echo(flow.snapshot.selection)
        click.echo("")
        render_flow(flow.snapshot)

        if title is not None:
            flow.input(title)
            render_flow(flow.submit())
            if not flow.done:
                raise CommandError(flow.snapshot.message or "Note not created.")
            return

        while not flow.done:
            try:
                value = click.prompt("File name", default=flow.snapshot.value)
            except click.Abort:
                render_flow(flow.cancel())
                return
            flow.input(value)
            render_flow(flow.submit())

    return run


def build_command_context(
    app: AppContext,
    document: Document | None,
    *,
    title: str | None = None,
) -> CommandContext:
    return CommandContext(
        app=app,
        notify=lambda msg: click.echo(msg),
        document=document,
        run_flow=prompt_flow_runner(title),
    )
