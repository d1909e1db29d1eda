"""Editor state and the commands that change it.

Every command is a plain function taking the current EditorState and
returning ``(new_state, effects)``. File access is requested through
effects and carried out by run_effects(), which feeds each outcome back
through the matching command. Whatever run_effects() leaves over
(ShowMessage) is for the window to display.
"""

import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Optional, Tuple

from . import storage
from .codec import serialize
from .entry import DesktopEntry, ValidationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EditorState:
    entry: DesktopEntry = field(default_factory=DesktopEntry)
    text: str = ""
    path: Optional[Path] = None
    files: Tuple[Path, ...] = ()
    status: str = ""
    modified: bool = False

    @property
    def is_user_override(self):
        return self.path is not None and storage.is_user_override(self.path)


# --- EFFECTS ---
@dataclass(frozen=True)
class ReadEntry:
    path: Path


@dataclass(frozen=True)
class WriteEntry:
    entry: DesktopEntry
    target: object
    overwrite: bool = False


@dataclass(frozen=True)
class RemoveFile:
    path: Path


@dataclass(frozen=True)
class RefreshList:
    pass


@dataclass(frozen=True)
class ShowMessage:
    title: str
    text: str
    level: str = "info"


def initial_state():
    entry = DesktopEntry()
    return EditorState(entry=entry, text=serialize(entry))


# --- COMMANDS ---
def new_entry(state):
    entry = DesktopEntry()
    return replace(state, entry=entry, text=serialize(entry), path=None,
                   status="New entry", modified=False), []


def open_entry(state, path):
    return state, [ReadEntry(Path(path))]


def entry_loaded(state, path, entry):
    return replace(state, entry=entry, text=serialize(entry), path=Path(path),
                   status=str(path), modified=False), []


def default_target(state):
    """Where Save goes: an opened file keeps its name in the user dir."""
    if state.path is None:
        return state.entry.name, False
    if state.is_user_override:
        return state.path, True
    return state.path.name, True


def save_entry(state, target=None, overwrite=None):
    try:
        state.entry.validate()
    except ValidationError as e:
        return replace(state, status=f"Invalid: {e}"), [
            ShowMessage("Invalid entry", str(e), "error")]

    default, default_overwrite = default_target(state)
    if target is None:
        target = default
    if overwrite is None:
        overwrite = default_overwrite
    return state, [WriteEntry(state.entry.copy(), target, overwrite)]


def entry_saved(state, path):
    return replace(state, path=Path(path), status=f"Saved: {path}", modified=False), [
        RefreshList(),
        ShowMessage("Saved", f"Configuration saved to:\n{path}\n\nMenu updated!"),
    ]


def delete_entry(state):
    if not state.is_user_override:
        return replace(state, status="Nothing to delete: not a user override"), []
    return state, [RemoveFile(state.path)]


def entry_deleted(state, path):
    return replace(state, path=None, status=f"Deleted: {path}"), [
        RefreshList(),
        ShowMessage("Restored", "User override deleted. System default restored."),
    ]


def refresh(state):
    return state, [RefreshList()]


def list_refreshed(state, files):
    return replace(state, files=tuple(files), status="List refreshed"), []


def fields_changed(state, entry, text):
    return replace(state, entry=entry, text=text, modified=True), []


def text_changed(state, text, entry):
    return replace(state, entry=entry, text=text, modified=True), []


def io_failed(state, error):
    logger.error("%s", error)
    return replace(state, status=f"Failed: {error}"), [
        ShowMessage("Error", str(error), "error")]


# --- EFFECT RUNNER ---
def _perform(state, effect):
    if isinstance(effect, ReadEntry):
        return entry_loaded(state, effect.path, storage.read_entry(effect.path))
    if isinstance(effect, WriteEntry):
        path = storage.write_entry(effect.entry, effect.target, effect.overwrite)
        storage.update_desktop_database(path.parent)
        return entry_saved(state, path)
    if isinstance(effect, RemoveFile):
        storage.delete_entry(effect.path)
        storage.update_desktop_database(effect.path.parent)
        return entry_deleted(state, effect.path)
    if isinstance(effect, RefreshList):
        return list_refreshed(state, storage.list_desktop_files())
    raise TypeError(f"Unknown effect: {effect!r}")


def run_effects(state, effects):
    """Carry out file effects; return the final state and UI messages."""
    pending = list(effects)
    messages = []
    while pending:
        effect = pending.pop(0)
        if isinstance(effect, ShowMessage):
            messages.append(effect)
            continue
        try:
            state, more = _perform(state, effect)
        except (storage.StorageError, ValidationError) as e:
            state, more = io_failed(state, e)
        pending.extend(more)
    return state, messages
