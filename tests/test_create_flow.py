"""Tests for the create-note flow state machine."""

from __future__ import annotations

from pathlib import Path

import pytest
from notecraft.create_flow import (
    FILE_EXISTS_MESSAGE,
    INVALID_NAME_MESSAGE,
    Cancel,
    CreateFile,
    CreateNoteFlow,
    FlowState,
    InputChanged,
    KeyPressed,
    Submit,
    open_flow,
    transition,
)
from notecraft.vault import Vault, VaultError


def _never(path: str) -> bool:
    return False


def test_open_flow_uses_untrimmed_first_line() -> None:
    snapshot = open_flow("  My Note \nBody text")

    assert snapshot.state is FlowState.EDITING
    assert snapshot.value == "  My Note "
    assert snapshot.path == "Research/My Note.md"
    assert snapshot.message is None


def test_open_flow_flags_invalid_title() -> None:
    snapshot = open_flow("Bad/Name\nBody")

    assert snapshot.state is FlowState.INVALID
    assert snapshot.message == INVALID_NAME_MESSAGE


def test_open_flow_requires_selection() -> None:
    with pytest.raises(ValueError):
        open_flow("")


def test_input_change_reaches_ready() -> None:
    snapshot = open_flow("Bad/Name\nBody")

    result = transition(snapshot, InputChanged("Good Name"), _never)

    assert result.snapshot.state is FlowState.READY
    assert result.snapshot.message is None
    assert result.effect is None


def test_collision_detected_on_key_press() -> None:
    existing = {"Research/Taken.md"}
    snapshot = open_flow("Taken\nBody")

    result = transition(snapshot, KeyPressed("a"), existing.__contains__)

    assert result.snapshot.state is FlowState.COLLISION
    assert result.snapshot.message == FILE_EXISTS_MESSAGE
    assert result.effect is None


def test_submit_from_ready_requests_full_selection() -> None:
    snapshot = open_flow("My Note\nBody text")

    result = transition(snapshot, KeyPressed("Enter"), _never)

    assert result.snapshot.state is FlowState.CREATED
    assert result.effect == CreateFile(
        path="Research/My Note.md", content="My Note\nBody text"
    )


@pytest.mark.parametrize(
    ("selection", "existing", "expected"),
    [
        ("Bad/Name\nBody", set(), FlowState.INVALID),
        ("Taken\nBody", {"Research/Taken.md"}, FlowState.COLLISION),
    ],
)
def test_submit_without_ready_creates_nothing(
    selection: str, existing: set[str], expected: FlowState
) -> None:
    snapshot = open_flow(selection)

    result = transition(snapshot, Submit(), existing.__contains__)

    assert result.snapshot.state is expected
    assert result.effect is None


def test_terminal_states_ignore_events() -> None:
    created = transition(open_flow("Note"), Submit(), _never).snapshot
    abandoned = transition(open_flow("Note"), Cancel(), _never).snapshot

    for snapshot in (created, abandoned):
        result = transition(snapshot, Submit(), _never)
        assert result.snapshot is snapshot
        assert result.effect is None


def test_flow_creates_file_once(tmp_path: Path) -> None:
    vault = Vault(tmp_path)
    flow = CreateNoteFlow(vault, "My Note\nBody text")

    flow.input("My Note")
    assert flow.state is FlowState.READY

    flow.submit()
    flow.submit()

    assert flow.done
    assert flow.created_path == "Research/My Note.md"
    assert (tmp_path / "Research" / "My Note.md").read_text(encoding="utf-8") == (
        "My Note\nBody text"
    )


def test_flow_refuses_existing_file(tmp_path: Path) -> None:
    vault = Vault(tmp_path)
    vault.create("Research/Taken.md", "original")
    flow = CreateNoteFlow(vault, "Taken\nnew body")

    flow.submit()

    assert flow.state is FlowState.COLLISION
    assert vault.read("Research/Taken.md") == "original"

    flow.input("Fresh")
    flow.submit()

    assert flow.state is FlowState.CREATED
    assert vault.read("Research/Fresh.md") == "Taken\nnew body"


def test_flow_keeps_state_when_vault_races(tmp_path: Path, monkeypatch) -> None:
    vault = Vault(tmp_path)
    flow = CreateNoteFlow(vault, "Race\nbody")
    flow.input("Race")

    def fail_create(path: str, content: str) -> Path:
        raise VaultError(f"File already exists: {path}")

    monkeypatch.setattr(vault, "create", fail_create)

    with pytest.raises(VaultError):
        flow.submit()

    assert flow.state is FlowState.READY
    assert flow.created_path is None


def test_cancel_abandons_without_creating(tmp_path: Path) -> None:
    vault = Vault(tmp_path)
    flow = CreateNoteFlow(vault, "Note")

    flow.cancel()
    flow.submit()

    assert flow.state is FlowState.ABANDONED
    assert not (tmp_path / "Research").exists()
