from .codec import parse, serialize, validate
from .entry import (DesktopEntry, EntryType, MissingExec, MissingName,
                    MissingType, MissingUrl, ValidationError)

__version__ = "0.2.0"

__all__ = [
    "DesktopEntry", "EntryType", "ValidationError", "MissingType",
    "MissingName", "MissingExec", "MissingUrl", "parse", "serialize",
    "validate",
]
