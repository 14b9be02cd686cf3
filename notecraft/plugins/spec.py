"""Hook specifications for notecraft plugins."""

from __future__ import annotations

from collections.abc import Iterable

from ._markers import hookspec
from .types import BootstrapContext, CommandContribution


class NotecraftHookSpec:
    """Collection of pluggy hook specifications."""

    @hookspec
    def editor_commands(self) -> Iterable[CommandContribution]:
        """Return the commands provided by the plugin."""

    @hookspec
    def bootstrap(self, context: BootstrapContext) -> None:
        """Validate configuration or prepare state when a session starts."""
