"""Sample commands shipped as a starting point for plugin authors."""

from __future__ import annotations

import logging

from ...commands import CommandError
from ...document import MARKDOWN_VIEW
from .. import CommandContext, CommandContribution, hookimpl

SAMPLE_DIALOG_TEXT = "Woah!"
SAMPLE_REPLACEMENT = "Sample Editor Command"

logger = logging.getLogger(__name__)


def _open_sample_dialog(ctx: CommandContext) -> None:
    ctx.notify(SAMPLE_DIALOG_TEXT)


def _is_markdown_view(ctx: CommandContext) -> bool:
    return ctx.document is not None and ctx.document.view_type == MARKDOWN_VIEW


def _has_document(ctx: CommandContext) -> bool:
    return ctx.document is not None


def _sample_editor_command(ctx: CommandContext) -> None:
    if ctx.document is None:
        raise CommandError("sample-editor-command needs an open document.")
    logger.info("Selection: %r", ctx.document.get_selection())
    ctx.document.replace_selection(SAMPLE_REPLACEMENT)


@hookimpl
def editor_commands() -> tuple[CommandContribution, ...]:
    return (
        CommandContribution(
            command_id="open-sample-modal-simple",
            name="Open sample modal (simple)",
            callback=_open_sample_dialog,
        ),
        CommandContribution(
            command_id="sample-editor-command",
            name="Sample editor command",
            callback=_sample_editor_command,
            check=_has_document,
        ),
        # Only offered while a markdown document is open.
        CommandContribution(
            command_id="open-sample-modal-complex",
            name="Open sample modal (complex)",
            callback=_open_sample_dialog,
            check=_is_markdown_view,
        ),
    )
