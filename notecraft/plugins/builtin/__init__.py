"""Built-in notecraft plugins."""

from __future__ import annotations

from . import create_file, embedding, samples

BUILTIN_PLUGINS = (embedding, create_file, samples)

__all__ = ["BUILTIN_PLUGINS"]
