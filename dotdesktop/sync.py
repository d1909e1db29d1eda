import enum
import logging

from .codec import parse, serialize

logger = logging.getLogger(__name__)


class SyncState(enum.Enum):
    IDLE = "idle"
    PROPAGATING = "propagating"


FIELDS = "fields"
TEXT = "text"


class SyncController:
    """Keeps the form fields and the source text in step.

    Writing into one side makes its widgets emit change signals; those
    arrive while the controller is PROPAGATING and are dropped, so a
    single edit converts exactly once.

    read_fields() -> DesktopEntry, write_fields(entry), read_text() -> str
    and write_text(text) are supplied by the owner. on_synced(origin, entry,
    text) is called after fields_changed() and text_changed(), with origin
    FIELDS or TEXT naming the side that was edited. The initial preview made
    by the constructor and load() do not call it.
    """

    def __init__(self, read_fields, write_fields, read_text, write_text, on_synced=None):
        self._read_fields = read_fields
        self._write_fields = write_fields
        self._read_text = read_text
        self._write_text = write_text
        self._on_synced = on_synced
        self.state = SyncState.IDLE
        # Initial preview of the form; not an edit, so no on_synced
        self._fields_to_text(notify=False)

    @property
    def propagating(self):
        return self.state is SyncState.PROPAGATING

    def fields_changed(self):
        return self._fields_to_text(notify=True)

    def _fields_to_text(self, notify):
        if self.propagating:
            return False
        self.state = SyncState.PROPAGATING
        try:
            # The preview reflects the form even when it would not validate
            entry = self._read_fields()
            text = serialize(entry)
            self._write_text(text)
        finally:
            self.state = SyncState.IDLE
        logger.debug("fields -> text (%d chars)", len(text))
        if notify:
            self._notify(FIELDS, entry, text)
        return True

    def text_changed(self):
        if self.propagating:
            return False
        self.state = SyncState.PROPAGATING
        try:
            text = self._read_text()
            entry = parse(text)
            self._write_fields(entry)
        finally:
            self.state = SyncState.IDLE
        logger.debug("text -> fields (Type=%s)", entry.entry_type)
        self._notify(TEXT, entry, text)
        return True

    def load(self, entry):
        """Show an entry on both sides at once, e.g. after New or Open."""
        if self.propagating:
            return False
        self.state = SyncState.PROPAGATING
        try:
            self._write_fields(entry)
            self._write_text(serialize(entry))
        finally:
            self.state = SyncState.IDLE
        return True

    def _notify(self, origin, entry, text):
        if self._on_synced is not None:
            self._on_synced(origin, entry, text)
