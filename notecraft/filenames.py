"""File name validation and candidate path helpers for new notes."""

from __future__ import annotations

INVALID_FILENAME_CHARS = frozenset('/\\?%*:|"<>')
DEFAULT_NOTE_FOLDER = "Research"
NOTE_EXTENSION = ".md"


def is_valid_file_name(name: str) -> bool:
    """Return False when ``name`` contains a character unsafe for file names.

    The empty string is accepted: it holds none of the forbidden characters.
    """

    return not any(char in INVALID_FILENAME_CHARS for char in name)


def title_from_selection(selection: str) -> str:
    """Return the first line of ``selection``, untrimmed."""

    return selection.split("\n", 1)[0]


def candidate_path(value: str, folder: str = DEFAULT_NOTE_FOLDER) -> str:
    return f"{folder}/{value.strip()}{NOTE_EXTENSION}"
