"""State machine behind the "create note from selection" dialog.

The flow is split in two layers:

- :func:`transition` is pure. It takes the current :class:`FlowSnapshot`, an
  event and an ``exists`` predicate, and returns the next snapshot together
  with the single side effect to perform, if any.
- :class:`CreateNoteFlow` owns a snapshot, feeds events through
  :func:`transition`, performs the file creation against a :class:`Vault` and
  leaves rendering to whichever host drives it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, Union

from .filenames import (
    DEFAULT_NOTE_FOLDER,
    candidate_path,
    is_valid_file_name,
    title_from_selection,
)
from .vault import Vault

logger = logging.getLogger(__name__)

INVALID_NAME_MESSAGE = "Invalid file name."
FILE_EXISTS_MESSAGE = "File already exists."
SUBMIT_KEY = "Enter"

ExistsFunc = Callable[[str], bool]


class FlowState(str, Enum):
    EDITING = "editing"
    INVALID = "invalid"
    COLLISION = "collision"
    READY = "ready"
    CREATED = "created"
    ABANDONED = "abandoned"

    @property
    def is_terminal(self) -> bool:
        return self in (FlowState.CREATED, FlowState.ABANDONED)


@dataclass(slots=True, frozen=True)
class InputChanged:
    value: str


@dataclass(slots=True, frozen=True)
class KeyPressed:
    key: str


@dataclass(slots=True, frozen=True)
class Submit:
    pass


@dataclass(slots=True, frozen=True)
class Cancel:
    pass


FlowEvent = Union[InputChanged, KeyPressed, Submit, Cancel]


@dataclass(slots=True, frozen=True)
class CreateFile:
    """Side effect requesting a new vault file."""

    path: str
    content: str


@dataclass(slots=True, frozen=True)
class FlowSnapshot:
    """Everything a renderer needs to draw the dialog."""

    state: FlowState
    value: str
    selection: str
    folder: str = DEFAULT_NOTE_FOLDER

    @property
    def path(self) -> str:
        return candidate_path(self.value, self.folder)

    @property
    def message(self) -> str | None:
        if self.state is FlowState.INVALID:
            return INVALID_NAME_MESSAGE
        if self.state is FlowState.COLLISION:
            return FILE_EXISTS_MESSAGE
        return None


@dataclass(slots=True, frozen=True)
class Transition:
    snapshot: FlowSnapshot
    effect: CreateFile | None = None


def open_flow(selection: str, folder: str = DEFAULT_NOTE_FOLDER) -> FlowSnapshot:
    """Return the initial snapshot for ``selection``.

    Only the file name is checked on open; collisions are reported from the
    first edit or submission onward.
    """

    if not selection:
        raise ValueError("Cannot open the create-file flow without selected text.")

    title = title_from_selection(selection)
    state = FlowState.EDITING if is_valid_file_name(title) else FlowState.INVALID
    return FlowSnapshot(state=state, value=title, selection=selection, folder=folder)


def evaluate(value: str, folder: str, exists: ExistsFunc) -> FlowState:
    """Classify ``value`` as INVALID, COLLISION or READY."""

    if not is_valid_file_name(value):
        return FlowState.INVALID
    if exists(candidate_path(value, folder)):
        return FlowState.COLLISION
    return FlowState.READY


def transition(
    snapshot: FlowSnapshot, event: FlowEvent, exists: ExistsFunc
) -> Transition:
    if snapshot.state.is_terminal:
        return Transition(snapshot)

    if isinstance(event, Cancel):
        return Transition(replace(snapshot, state=FlowState.ABANDONED))

    if isinstance(event, InputChanged):
        snapshot = replace(snapshot, value=event.value)

    state = evaluate(snapshot.value, snapshot.folder, exists)
    submitted = isinstance(event, Submit) or (
        isinstance(event, KeyPressed) and event.key == SUBMIT_KEY
    )

    if submitted and state is FlowState.READY:
        effect = CreateFile(path=snapshot.path, content=snapshot.selection)
        return Transition(replace(snapshot, state=FlowState.CREATED), effect)

    return Transition(replace(snapshot, state=state))


class CreateNoteFlow:
    """Drive the creation dialog for one selection against a vault."""

    def __init__(
        self,
        vault: Vault,
        selection: str,
        *,
        folder: str = DEFAULT_NOTE_FOLDER,
    ) -> None:
        self.vault = vault
        self.snapshot = open_flow(selection, folder)
        self.created_path: str | None = None

    @property
    def state(self) -> FlowState:
        return self.snapshot.state

    @property
    def done(self) -> bool:
        return self.snapshot.state.is_terminal

    def dispatch(self, event: FlowEvent) -> FlowSnapshot:
        """Apply ``event`` and perform any resulting file creation.

        If the vault refuses the file (for example because it appeared since
        the last check) the :class:`VaultError` propagates and the flow keeps
        its previous snapshot.
        """

        result = transition(self.snapshot, event, self.vault.exists)
        if result.effect is not None:
            self.vault.create(result.effect.path, result.effect.content)
            self.created_path = result.effect.path
            logger.info("Created note %s from selection", result.effect.path)

        self.snapshot = result.snapshot
        return self.snapshot

    def input(self, value: str) -> FlowSnapshot:
        return self.dispatch(InputChanged(value))

    def submit(self) -> FlowSnapshot:
        return self.dispatch(Submit())

    def cancel(self) -> FlowSnapshot:
        return self.dispatch(Cancel())
