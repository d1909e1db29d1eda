import copy
import enum
from dataclasses import dataclass, field
from typing import List, Optional, Tuple


class EntryType(str, enum.Enum):
    APPLICATION = "Application"
    LINK = "Link"
    DIRECTORY = "Directory"

    @classmethod
    def names(cls):
        return [t.value for t in cls]


# --- VALIDATION ERRORS ---
class ValidationError(ValueError):
    message = "Invalid desktop entry"

    def __init__(self, message=None):
        super().__init__(message or self.message)


class MissingType(ValidationError):
    message = "Type must be one of Application, Link, Directory"


class MissingName(ValidationError):
    message = "Name is required"


class MissingExec(ValidationError):
    message = "Exec is required for Type=Application"


class MissingUrl(ValidationError):
    message = "URL is required for Type=Link"


def _blank(value):
    return value is None or not value.strip()


@dataclass
class DesktopEntry:
    """One [Desktop Entry] group held in memory."""

    entry_type: str = EntryType.APPLICATION.value
    name: str = ""
    generic_name: Optional[str] = None
    comment: Optional[str] = None
    exec: str = ""
    icon: Optional[str] = None
    try_exec: Optional[str] = None
    working_directory: Optional[str] = None  # Path=
    url: Optional[str] = None
    terminal: bool = False
    no_display: bool = False
    startup_notify: bool = False
    categories: List[str] = field(default_factory=list)
    mime_types: List[str] = field(default_factory=list)
    keywords: List[str] = field(default_factory=list)
    only_show_in: List[str] = field(default_factory=list)
    not_show_in: List[str] = field(default_factory=list)
    actions: List[str] = field(default_factory=list)
    localized_name: List[Tuple[str, str]] = field(default_factory=list)
    localized_generic_name: List[Tuple[str, str]] = field(default_factory=list)
    localized_comment: List[Tuple[str, str]] = field(default_factory=list)
    extra: List[Tuple[str, str]] = field(default_factory=list)

    def __post_init__(self):
        if isinstance(self.entry_type, EntryType):
            self.entry_type = self.entry_type.value

    def validate(self):
        """Raise a ValidationError subclass if the entry cannot be written."""
        if self.entry_type not in EntryType.names():
            raise MissingType()
        if _blank(self.name):
            raise MissingName()
        if self.entry_type == EntryType.APPLICATION and _blank(self.exec):
            raise MissingExec()
        if self.entry_type == EntryType.LINK and _blank(self.url):
            raise MissingUrl()

    def is_valid(self):
        try:
            self.validate()
        except ValidationError:
            return False
        return True

    def copy(self):
        return copy.deepcopy(self)
