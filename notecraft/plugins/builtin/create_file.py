"""Built-in command creating a note from the selected text."""

from __future__ import annotations

from pathlib import PurePosixPath

from ...commands import CommandError
from ...config import InvalidConfigError
from ...create_flow import CreateNoteFlow
from ...filenames import DEFAULT_NOTE_FOLDER, is_valid_file_name
from .. import BootstrapContext, CommandContext, CommandContribution, hookimpl
from ..types import PluginSettingsGetter

PLUGIN_ID = "notecraft-builtin-create-file"
COMMAND_ID = "create-file"
NO_SELECTION_NOTICE = "No text selected."


def resolve_folder(get_settings: PluginSettingsGetter) -> str:
    """Return the vault folder new notes are written to.

    Reads ``folder`` from ``[plugins.notecraft-builtin-create-file]``; each
    path segment must itself be a valid file name.
    """

    raw = get_settings(PLUGIN_ID).get("folder", DEFAULT_NOTE_FOLDER)
    if not isinstance(raw, str):
        raise InvalidConfigError(f"'{PLUGIN_ID}.folder' must be a string")

    folder = raw.strip().strip("/")
    if not folder:
        raise InvalidConfigError(f"'{PLUGIN_ID}.folder' must be a non-empty string")

    parts = PurePosixPath(folder).parts
    if any(part in (".", "..") or not is_valid_file_name(part) for part in parts):
        raise InvalidConfigError(
            f"'{PLUGIN_ID}.folder' is not a valid vault folder: {raw!r}"
        )
    return "/".join(parts)


def _has_selection(ctx: CommandContext) -> bool:
    return ctx.document is not None and len(ctx.document.get_selection()) > 0


def _create_file(ctx: CommandContext) -> None:
    if ctx.document is None:
        raise CommandError("create-file needs an open document.")
    if ctx.run_flow is None:
        raise CommandError("No dialog host is available for the create-file flow.")

    flow = CreateNoteFlow(
        ctx.app.vault,
        ctx.document.get_selection(),
        folder=resolve_folder(ctx.app.get_settings),
    )
    ctx.run_flow(flow)


@hookimpl
def bootstrap(context: BootstrapContext) -> None:
    resolve_folder(context.get_settings)


@hookimpl
def editor_commands() -> tuple[CommandContribution, ...]:
    """Expose note creation for documents with a non-empty selection."""

    contribution = CommandContribution(
        command_id=COMMAND_ID,
        name="Create File",
        callback=_create_file,
        check=_has_selection,
        unavailable_notice=NO_SELECTION_NOTICE,
    )
    return (contribution,)


__all__ = [
    "COMMAND_ID",
    "NO_SELECTION_NOTICE",
    "PLUGIN_ID",
    "bootstrap",
    "editor_commands",
    "resolve_folder",
]
