"""Per-session plugin state."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .embeds import toggle_embeds
from .settings import DEFAULT_SETTINGS


@dataclass(slots=True)
class PluginSession:
    """State held for the lifetime of one plugin session.

    ``embedding_enabled`` decides whether the next toggle adds the embed
    marker. It starts out True and is never persisted.
    """

    embedding_enabled: bool = True
    settings: dict[str, Any] = field(default_factory=lambda: dict(DEFAULT_SETTINGS))

    def toggle_embeds(self, text: str) -> str:
        result = toggle_embeds(text, self.embedding_enabled)
        self.embedding_enabled = result.embed_enabled
        return result.text
