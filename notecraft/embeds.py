"""Embed marker toggling for checklist lines that reference wiki links."""

from __future__ import annotations

from dataclasses import dataclass

CHECKLIST_PREFIX = "- ["
CHECKLIST_STATES = frozenset({"x", " "})
EMBED_MARKER = "!"
LINK_OPEN = "[["
LINK_CLOSE = "]]"


@dataclass(slots=True, frozen=True)
class ChecklistLink:
    """A recognised ``- [state] [[target]]`` line, split into its parts.

    ``tail`` is whatever follows the first closing ``]]``. It is carried
    verbatim, so a second link on the same line is never rewritten.
    """

    state: str
    embedded: bool
    target: str
    tail: str = ""

    def render(self, *, embedded: bool) -> str:
        marker = EMBED_MARKER if embedded else ""
        return (
            f"{CHECKLIST_PREFIX}{self.state}] {marker}"
            f"{LINK_OPEN}{self.target}{LINK_CLOSE}{self.tail}"
        )


@dataclass(slots=True, frozen=True)
class EmbedToggleResult:
    """Outcome of a toggle pass: the rewritten text and the next flag value."""

    text: str
    embed_enabled: bool


def parse_checklist_link(line: str) -> ChecklistLink | None:
    """Return the checklist link at the start of ``line`` or ``None``.

    Grammar: ``"- [" STATE "] " ["!"] "[[" TARGET "]]" TAIL`` where STATE is
    ``x`` or a space and TARGET runs up to the first ``]]``.
    """

    if not line.startswith(CHECKLIST_PREFIX):
        return None

    pos = len(CHECKLIST_PREFIX)
    state = line[pos : pos + 1]
    if state not in CHECKLIST_STATES:
        return None
    pos += 1

    if line[pos : pos + 2] != "] ":
        return None
    pos += 2

    embedded = line.startswith(EMBED_MARKER, pos)
    if embedded:
        pos += len(EMBED_MARKER)

    if not line.startswith(LINK_OPEN, pos):
        return None
    pos += len(LINK_OPEN)

    close = line.find(LINK_CLOSE, pos)
    if close == -1:
        return None

    return ChecklistLink(
        state=state,
        embedded=embedded,
        target=line[pos:close],
        tail=line[close + len(LINK_CLOSE) :],
    )


def toggle_embeds(text: str, embed_enabled: bool) -> EmbedToggleResult:
    """Add or remove the embed marker on every checklist link line.

    With ``embed_enabled`` set, each matching line gains ``!`` before its
    link; otherwise the marker is dropped. Other lines are left untouched.
    The returned flag is the negation of ``embed_enabled``.
    """

    lines = text.split("\n")
    for index, line in enumerate(lines):
        link = parse_checklist_link(line)
        if link is not None:
            lines[index] = link.render(embedded=embed_enabled)

    return EmbedToggleResult(text="\n".join(lines), embed_enabled=not embed_enabled)


__all__ = [
    "ChecklistLink",
    "EmbedToggleResult",
    "parse_checklist_link",
    "toggle_embeds",
]
