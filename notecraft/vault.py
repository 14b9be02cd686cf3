"""Filesystem-backed vault holding the user's markdown notes."""

from __future__ import annotations

import logging
from pathlib import Path, PurePosixPath

logger = logging.getLogger(__name__)


class VaultError(RuntimeError):
    """Raised when reading or writing vault files fails."""


class Vault:
    """Resolve vault-relative paths and create or read note files.

    Paths are POSIX-style and relative to the vault root, e.g.
    ``Research/My Note.md``.
    """

    def __init__(self, root: Path | str) -> None:
        self.root = Path(root).expanduser()

    def initialize(self) -> None:
        try:
            self.root.mkdir(parents=True, exist_ok=True)
        except OSError as exc:  # pragma: no cover - filesystem failures are rare
            raise VaultError(f"Failed to create vault directory: {exc}") from exc

    def resolve(self, path: str) -> Path:
        """Map a vault path onto the filesystem, refusing paths outside the root."""

        relative = PurePosixPath(path)
        if relative.is_absolute() or ".." in relative.parts:
            raise VaultError(f"Path '{path}' is outside the vault.")
        return self.root.joinpath(*relative.parts)

    def exists(self, path: str) -> bool:
        """Return True when a file or folder lives at ``path``."""

        return self.resolve(path).exists()

    def create(self, path: str, content: str) -> Path:
        """Create a new file at ``path``; an existing file is never overwritten."""

        target = self.resolve(path)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            with target.open("x", encoding="utf-8", newline="") as handle:
                handle.write(content)
        except FileExistsError:
            raise VaultError(f"File already exists: {path}") from None
        except OSError as exc:
            raise VaultError(f"Failed to create '{path}': {exc}") from exc

        logger.info("Created vault file %s", path)
        return target

    def read(self, path: str) -> str:
        target = self.resolve(path)
        try:
            return target.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise VaultError(f"File not found: {path}") from None
        except OSError as exc:  # pragma: no cover - pass-through
            raise VaultError(f"Failed to read '{path}': {exc}") from exc
