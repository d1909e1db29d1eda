import logging
import os
import subprocess
from pathlib import Path

from . import config
from .codec import parse, serialize

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """A file operation failed; the entry in memory is untouched."""

    def __init__(self, message, path=None, kind="write"):
        super().__init__(message)
        self.path = path
        self.kind = kind


def sanitize_file_name(title):
    title = (title or "").strip()
    if not title:
        title = config.DEFAULT_FILE_NAME
    return "".join(c if (c.isascii() and c.isalnum()) or c in "-_." else "-" for c in title)


def target_path(name_or_path, directory=None):
    """Resolve a free-form title or an explicit path to the file to write.

    Only Path objects are taken as paths; a string is always a title, so
    "AC/DC Player" becomes AC-DC-Player.desktop in the user dir.
    """
    if isinstance(name_or_path, Path):
        return name_or_path.expanduser()
    value = (name_or_path or "").strip()
    directory = Path(directory or config.user_applications_dir())
    if value.endswith(config.DESKTOP_SUFFIX):
        value = value[:-len(config.DESKTOP_SUFFIX)]
    return directory / (sanitize_file_name(value) + config.DESKTOP_SUFFIX)


def write_entry(entry, target, overwrite=False, directory=None):
    entry.validate()
    path = target_path(target, directory)

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise StorageError(f"Creating directory {path.parent} failed: {e}", path.parent, "create-dir") from e

    if path.exists() and not overwrite:
        raise StorageError(f"File already exists: {path}", path, "exists")

    try:
        path.write_text(serialize(entry), encoding="utf-8")
    except OSError as e:
        raise StorageError(f"Writing {path} failed: {e}", path, "write") from e

    try:
        os.chmod(path, config.FILE_MODE)
    except OSError as e:
        raise StorageError(f"Setting permissions on {path} failed: {e}", path, "permission") from e

    logger.info("Saved %s", path)
    return path


def read_entry(path):
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise StorageError(f"Reading {path} failed: {e}", path, "read") from e
    return parse(text)


def delete_entry(path):
    path = Path(path)
    try:
        path.unlink()
    except OSError as e:
        raise StorageError(f"Deleting {path} failed: {e}", path, "delete") from e
    logger.info("Deleted %s", path)


def is_user_override(path, user_dir=None):
    user_dir = Path(user_dir or config.user_applications_dir())
    return Path(path).parent.resolve() == user_dir.resolve()


def _scan(directory):
    found = {}
    if not os.path.isdir(directory):
        logger.debug("[SKIP] Directory not found: %s", directory)
        return found
    try:
        names = os.listdir(directory)
    except PermissionError:
        logger.warning("[ERROR] Permission denied: %s", directory)
        return found
    except OSError as e:
        logger.warning("[ERROR] %s: %s", directory, e)
        return found
    for name in names:
        if name.endswith(config.DESKTOP_SUFFIX):
            found[name] = Path(directory) / name
    logger.debug("[SCAN] %s -> %d .desktop files", directory, len(found))
    return found


def list_desktop_files(search_dirs=None, user_dir=None):
    """All known .desktop files, user overrides replacing system files."""
    if search_dirs is None:
        search_dirs = config.SEARCH_DIRS
    user_dir = user_dir or config.user_applications_dir()

    files = {}
    for directory in search_dirs:
        files.update(_scan(directory))
    overrides = _scan(user_dir)
    files.update(overrides)

    logger.info("Found %d entries (%d user overrides)", len(files), len(overrides))
    return [files[name] for name in sorted(files)]


def describe_file(path):
    """(name, icon) for a list row; unreadable files show their stem."""
    path = Path(path)
    try:
        entry = read_entry(path)
    except StorageError as e:
        logger.warning("%s", e)
        return path.stem, None
    return entry.name or path.stem, entry.icon


def update_desktop_database(directory=None):
    directory = str(directory or config.user_applications_dir())
    try:
        subprocess.run(["update-desktop-database", directory], check=False)
    except FileNotFoundError:
        logger.info("update-desktop-database command not found")
    except OSError as e:
        # Runs after the file is written, so failures are only logged
        logger.warning("update-desktop-database failed: %s", e)
