import logging
import os

APP_TITLE = "DotDesktop - GUI Desktop Entry Editor"
SECTION_HEADER = "[Desktop Entry]"
DESKTOP_SUFFIX = ".desktop"
DEFAULT_FILE_NAME = "desktop-entry"
FILE_MODE = 0o644

# Extended paths to find Snap, Flatpak, and System apps
SEARCH_DIRS = [
    "/usr/share/applications",
    "/usr/local/share/applications",
    "/var/lib/snapd/desktop/applications",  # Snap Apps
    "/var/lib/flatpak/exports/share/applications",  # Flatpak System
    os.path.expanduser("~/.local/share/flatpak/exports/share/applications"),  # Flatpak User
]

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def user_applications_dir():
    # Changes always save here to override the system
    data_home = os.environ.get("XDG_DATA_HOME") or os.path.expanduser("~/.local/share")
    return os.path.join(data_home, "applications")


def debug_enabled():
    return os.environ.get("DOTDESKTOP_DEBUG", "").lower() in ("1", "true", "yes")


def configure_logging(debug=False):
    level = logging.DEBUG if debug or debug_enabled() else logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("dotdesktop").setLevel(level)
