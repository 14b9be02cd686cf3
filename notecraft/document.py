"""In-memory editor buffer that commands read from and write back to."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

MARKDOWN_VIEW = "markdown"
MARKDOWN_SUFFIXES = frozenset({".md", ".markdown"})


class DocumentError(RuntimeError):
    """Raised when a document cannot be loaded, saved or selected."""


@dataclass(slots=True)
class Document:
    """Text buffer with an optional selection given as ``(start, end)`` offsets."""

    text: str
    path: Path | None = None
    selection: tuple[int, int] = (0, 0)

    @classmethod
    def load(cls, path: Path) -> "Document":
        # newline="" keeps "\r\n" endings intact in each line.
        try:
            with path.open(encoding="utf-8", newline="") as handle:
                text = handle.read()
        except UnicodeDecodeError as exc:
            raise DocumentError(f"'{path}' is not valid UTF-8: {exc}") from exc
        except OSError as exc:
            raise DocumentError(f"Failed to read '{path}': {exc}") from exc
        return cls(text=text, path=path)

    def save(self) -> None:
        if self.path is None:
            raise DocumentError("Document has no backing file.")
        try:
            with self.path.open("w", encoding="utf-8", newline="") as handle:
                handle.write(self.text)
        except OSError as exc:
            raise DocumentError(f"Failed to write '{self.path}': {exc}") from exc

    @property
    def view_type(self) -> str:
        if self.path is not None and self.path.suffix.lower() in MARKDOWN_SUFFIXES:
            return MARKDOWN_VIEW
        return "text"

    def get_value(self) -> str:
        return self.text

    def set_value(self, text: str) -> None:
        self.text = text
        self.selection = (0, 0)

    def get_selection(self) -> str:
        start, end = self.selection
        return self.text[start:end]

    def replace_selection(self, replacement: str) -> None:
        start, end = self.selection
        self.text = self.text[:start] + replacement + self.text[end:]
        cursor = start + len(replacement)
        self.selection = (cursor, cursor)

    def select_lines(self, first: int, last: int) -> None:
        """Select lines ``first`` to ``last`` inclusive (1-based).

        The trailing newline of the last selected line is not included.
        """

        lines = self.text.split("\n")
        if first < 1 or last < first or last > len(lines):
            raise DocumentError(
                f"Line range {first}:{last} is outside the document "
                f"(1-{len(lines)})."
            )
        start = sum(len(line) + 1 for line in lines[: first - 1])
        end = start + len("\n".join(lines[first - 1 : last]))
        self.selection = (start, end)
