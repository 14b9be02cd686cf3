"""Type definitions for notecraft plugin contracts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Mapping, Protocol

if TYPE_CHECKING:  # pragma: no cover - type check only
    from ..app import AppContext
    from ..config import NotecraftConfig
    from ..create_flow import CreateNoteFlow
    from ..document import Document

NotifyFunc = Callable[[str], None]
FlowRunner = Callable[["CreateNoteFlow"], None]


class PluginSettingsGetter(Protocol):
    def __call__(
        self,
        plugin_id: str,
        *,
        default: Mapping[str, Any] | None = None,
    ) -> Mapping[str, Any]:  # pragma: no cover - Protocol
        """Return the ``[plugins.<plugin_id>]`` configuration table."""


@dataclass(slots=True, frozen=True)
class BootstrapContext:
    """Data handed to ``bootstrap`` hooks when a session starts."""

    config: "NotecraftConfig"
    get_settings: PluginSettingsGetter


@dataclass(slots=True)
class CommandContext:
    """Everything a command callback may touch while it runs."""

    app: "AppContext"
    notify: NotifyFunc
    document: "Document | None" = None
    run_flow: FlowRunner | None = None


class CommandCallback(Protocol):
    def __call__(self, ctx: CommandContext) -> None:  # pragma: no cover - Protocol
        """Execute the command."""


class CommandCheck(Protocol):
    def __call__(self, ctx: CommandContext) -> bool:  # pragma: no cover - Protocol
        """Return True when the command applies to the current context."""


@dataclass(slots=True, frozen=True)
class CommandContribution:
    """Descriptor for a command provided by a plugin.

    ``check`` gates availability. When it fails at invocation time the host
    shows ``unavailable_notice`` if one is set, or reports an error otherwise.
    """

    command_id: str
    name: str
    callback: CommandCallback
    check: CommandCheck | None = None
    unavailable_notice: str | None = None

    def is_available(self, ctx: CommandContext) -> bool:
        return self.check is None or bool(self.check(ctx))
