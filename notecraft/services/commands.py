"""Command dispatch services for notecraft."""

from __future__ import annotations

import logging

from ..commands import CommandError, CommandUnavailableError
from ..plugins import (
    CommandContext,
    CommandContribution,
    PluginRegistrationError,
    load_command_contributions,
    reset_plugin_manager_cache,
)

logger = logging.getLogger(__name__)


def clear_command_registry_cache() -> None:
    """Reset cached command discovery (primarily for testing)."""

    reset_plugin_manager_cache()


def _load_command_registry() -> dict[str, CommandContribution]:
    try:
        return load_command_contributions()
    except PluginRegistrationError as exc:
        raise CommandError(str(exc)) from exc


def list_commands(ctx: CommandContext) -> list[tuple[CommandContribution, bool]]:
    """Return ``(contribution, available)`` pairs sorted by command id."""

    registry = _load_command_registry()
    return [
        (registry[command_id], registry[command_id].is_available(ctx))
        for command_id in sorted(registry)
    ]


def execute_command(command_id: str, ctx: CommandContext) -> bool:
    """Run ``command_id`` in ``ctx``.

    Returns True when the command ran and False when it was declined with a
    notice (for example ``create-file`` without a selection).

    Raises
    ------
    CommandUnavailableError
        If the command does not apply and has no notice to show instead.
    CommandError
        If the command is unknown or its callback fails.
    """

    registry = _load_command_registry()
    contribution = registry.get(command_id)
    if contribution is None:
        available = ", ".join(sorted(registry))
        if available:
            raise CommandError(f"Unknown command: {command_id}. Available: {available}.")
        raise CommandError("No command plugins are available.")

    if not contribution.is_available(ctx):
        if contribution.unavailable_notice is not None:
            ctx.notify(contribution.unavailable_notice)
            return False
        raise CommandUnavailableError(
            f"Command '{command_id}' is not available for the current document."
        )

    logger.debug("Running command %s", command_id)
    try:
        contribution.callback(ctx)
    except CommandError:
        raise
    except Exception as exc:
        raise CommandError(f"Command '{command_id}' failed: {exc}") from exc
    return True
