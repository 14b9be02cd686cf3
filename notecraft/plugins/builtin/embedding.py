"""Built-in command toggling the embed marker on checklist links."""

from __future__ import annotations

import logging

from ...commands import CommandError
from ...document import MARKDOWN_VIEW
from .. import CommandContext, CommandContribution, hookimpl

COMMAND_ID = "toggle-embedding-notes"

logger = logging.getLogger(__name__)


def _is_markdown_view(ctx: CommandContext) -> bool:
    return ctx.document is not None and ctx.document.view_type == MARKDOWN_VIEW


def _toggle_embedding(ctx: CommandContext) -> None:
    document = ctx.document
    if document is None:
        raise CommandError(f"{COMMAND_ID} needs an open document.")

    embedding = ctx.app.session.embedding_enabled
    document.set_value(ctx.app.session.toggle_embeds(document.get_value()))
    logger.debug("Embedding %s", "added" if embedding else "removed")


@hookimpl
def editor_commands() -> tuple[CommandContribution, ...]:
    """Expose the embed toggle as a markdown-only command."""

    contribution = CommandContribution(
        command_id=COMMAND_ID,
        name="Toggle Embedding Notes",
        callback=_toggle_embedding,
        check=_is_markdown_view,
    )
    return (contribution,)


__all__ = ["COMMAND_ID", "editor_commands"]
