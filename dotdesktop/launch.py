import logging
import subprocess

logger = logging.getLogger(__name__)

PRESETS = [
    "Select a preset to apply...",
    "Force Wayland (Electron Apps) -> --ozone-platform=wayland",
    "Force Wayland (GTK Apps) -> env GDK_BACKEND=wayland",
    "Force Wayland (Qt Apps) -> env QT_QPA_PLATFORM=wayland",
    "Force Wayland (Firefox) -> env MOZ_ENABLE_WAYLAND=1",
    "Force X11/Xorg (Generic) -> env GDK_BACKEND=x11 QT_QPA_PLATFORM=xcb",
]

ELECTRON_KEYWORDS = [
    "electron", "code", "discord", "slack", "obsidian",
    "vscodium", "vscode", "spotify", "typora", "mattermost",
    "signal", "whatsapp", "teams", "chromium", "brave", "google-chrome",
]
FIREFOX_KEYWORDS = ["firefox", "librewolf", "waterfox", "thunderbird", "seamonkey", "floorp"]
QT_KEYWORDS = ["dolphin", "kate", "kcalc", "okular", "kdenlive"]
GTK_KEYWORDS = ["gnome-", "gedit", "nautilus", "totem", "evince"]

FIELD_CODES = ("%u", "%U", "%f", "%F", "%i", "%c", "%k")

# (marker already present, env prefix) for the env-based presets
_ENV_PRESETS = {
    2: ("GDK_BACKEND", "env GDK_BACKEND=wayland"),
    3: ("QT_QPA_PLATFORM", "env QT_QPA_PLATFORM=wayland"),
    4: ("MOZ_ENABLE_WAYLAND", "env MOZ_ENABLE_WAYLAND=1"),
    5: ("xcb", "env GDK_BACKEND=x11 QT_QPA_PLATFORM=xcb"),
}
ELECTRON_FLAG = "--ozone-platform=wayland"


def guess_toolkit(entry):
    """Best guess at the GUI toolkit, as (preset index, label)."""
    exec_cmd = entry.exec.lower()
    categories = entry.categories

    if any(k in exec_cmd for k in ELECTRON_KEYWORDS):
        return 1, "Electron/Chromium"

    if any(k in exec_cmd for k in FIREFOX_KEYWORDS):
        return 4, "Firefox (Gecko)"

    if "Qt" in categories or "KDE" in categories or any(k in exec_cmd for k in QT_KEYWORDS):
        return 3, "Qt/KDE"

    if "GTK" in categories or "GNOME" in categories or any(k in exec_cmd for k in GTK_KEYWORDS):
        return 2, "GTK/GNOME"

    return 0, "Unknown / Generic"


def apply_preset(exec_line, index):
    new_exec = exec_line.strip()

    if index == 1:
        if ELECTRON_FLAG not in new_exec:
            if "%" in new_exec:
                parts = new_exec.split("%", 1)
                new_exec = f"{parts[0].strip()} {ELECTRON_FLAG} %{parts[1]}"
            else:
                new_exec = f"{new_exec} {ELECTRON_FLAG}"
    elif index in _ENV_PRESETS:
        marker, env = _ENV_PRESETS[index]
        if marker not in new_exec:
            new_exec = f"{env} {new_exec}"

    return new_exec.strip()


def strip_field_codes(exec_line):
    for code in FIELD_CODES:
        exec_line = exec_line.replace(code, "")
    return " ".join(exec_line.split())


def try_launch(exec_line):
    cmd = strip_field_codes(exec_line)
    if not cmd:
        return None
    logger.info("[TEST] Launching: %s", cmd)
    return subprocess.Popen(cmd, shell=True)
