"""Text form of a desktop entry.

serialize() and parse() are deliberately lenient: serialize writes whatever
the entry holds (the source tab previews incomplete entries) and parse never
raises, so hand-edited text always produces some entry.
"""

from .config import SECTION_HEADER
from .entry import DesktopEntry, EntryType

LIST_KEYS = (
    ("Categories", "categories"),
    ("MimeType", "mime_types"),
    ("Keywords", "keywords"),
    ("OnlyShowIn", "only_show_in"),
    ("NotShowIn", "not_show_in"),
    ("Actions", "actions"),
)

BOOL_KEYS = (
    ("Terminal", "terminal"),
    ("NoDisplay", "no_display"),
    ("StartupNotify", "startup_notify"),
)

LOCALIZED_KEYS = (
    ("Name", "localized_name"),
    ("GenericName", "localized_generic_name"),
    ("Comment", "localized_comment"),
)

# Emitted trimmed, in this order, only when present
PLAIN_KEYS = (
    ("TryExec", "try_exec"),
    ("Icon", "icon"),
    ("Path", "working_directory"),
    ("URL", "url"),
)

SCALAR_KEYS = {
    "Name": "name",
    "GenericName": "generic_name",
    "Comment": "comment",
    "Exec": "exec",
    "TryExec": "try_exec",
    "Icon": "icon",
    "Path": "working_directory",
    "URL": "url",
}

# Fields that stay plain strings; every other scalar is None when absent
REQUIRED_SCALARS = ("name", "exec")


def escape(value):
    return (value or "").replace("\n", "\\n")


def _present(value):
    return value is not None and value.strip() != ""


def _bool(value):
    return "true" if value else "false"


def serialize(entry):
    lines = [SECTION_HEADER]
    entry_type = getattr(entry.entry_type, "value", entry.entry_type)
    lines.append(f"Type={entry_type or ''}")

    lines.append(f"Name={escape(entry.name)}")
    for lang, value in entry.localized_name:
        lines.append(f"Name[{lang}]={escape(value)}")

    if _present(entry.generic_name):
        lines.append(f"GenericName={escape(entry.generic_name)}")
    for lang, value in entry.localized_generic_name:
        lines.append(f"GenericName[{lang}]={escape(value)}")

    if _present(entry.comment):
        lines.append(f"Comment={escape(entry.comment)}")
    for lang, value in entry.localized_comment:
        lines.append(f"Comment[{lang}]={escape(value)}")

    if entry.exec and entry.exec.strip():
        lines.append(f"Exec={entry.exec.strip()}")
    for key, attr in PLAIN_KEYS:
        value = getattr(entry, attr)
        if _present(value):
            lines.append(f"{key}={value.strip()}")

    for key, attr in BOOL_KEYS:
        lines.append(f"{key}={_bool(getattr(entry, attr))}")

    for key, attr in LIST_KEYS:
        items = getattr(entry, attr)
        if items:
            lines.append(f"{key}={';'.join(items)};")

    for key, value in entry.extra:
        key = (key or "").strip()
        if key:
            lines.append(f"{key}={(value or '').strip()}")

    return "\n".join(lines) + "\n"


def split_list(value):
    return [piece.strip() for piece in value.split(";") if piece.strip()]


def _localized_key(key):
    # "Name[fr]" -> ("localized_name", "fr")
    if not key.endswith("]"):
        return None, None
    for base, attr in LOCALIZED_KEYS:
        prefix = base + "["
        if key.startswith(prefix):
            return attr, key[len(prefix):-1]
    return None, None


def parse(text):
    entry = DesktopEntry(entry_type="")
    seen_type = False
    in_section = False
    list_attrs = dict(LIST_KEYS)
    bool_attrs = dict(BOOL_KEYS)

    if text.startswith("\ufeff"):
        text = text[1:]

    for raw in text.splitlines():
        line = raw.strip()
        if not line or line.startswith("#") or line.startswith(";"):
            continue
        if line.startswith("[") and line.endswith("]"):
            in_section = line == SECTION_HEADER
            continue
        if not in_section or "=" not in line:
            continue

        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip()

        if key == "Type":
            entry.entry_type = value
            seen_type = True
        elif key in SCALAR_KEYS:
            attr = SCALAR_KEYS[key]
            if attr in REQUIRED_SCALARS:
                setattr(entry, attr, value)
            else:
                setattr(entry, attr, value or None)
        elif key in bool_attrs:
            setattr(entry, bool_attrs[key], value.lower() == "true")
        elif key in list_attrs:
            setattr(entry, list_attrs[key], split_list(value))
        else:
            attr, lang = _localized_key(key)
            if attr:
                getattr(entry, attr).append((lang, value))
            else:
                entry.extra.append((key, value))

    if not seen_type:
        entry.entry_type = EntryType.APPLICATION.value
    return entry


def validate(entry):
    entry.validate()
