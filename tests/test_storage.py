import stat
import subprocess

import pytest

from dotdesktop import storage
from dotdesktop.codec import serialize
from dotdesktop.entry import DesktopEntry, MissingExec


def valid_entry(name="Editor"):
    return DesktopEntry(name=name, exec="edit %F", categories=["Office"])


@pytest.mark.parametrize("title, expected", [
    ("My App", "My-App"),
    ("  spaced  ", "spaced"),
    ("", "desktop-entry"),
    ("   ", "desktop-entry"),
    (None, "desktop-entry"),
    ("a/b\\c:d", "a-b-c-d"),
    ("keep-_.chars", "keep-_.chars"),
    ("Café", "Caf-"),
])
def test_sanitize_file_name(title, expected):
    assert storage.sanitize_file_name(title) == expected


def test_target_path_for_title_lands_in_user_dir(user_dir):
    assert storage.target_path("My App") == user_dir / "My-App.desktop"
    assert storage.target_path("org.example.App.desktop") == user_dir / "org.example.App.desktop"


def test_target_path_keeps_explicit_paths(tmp_path):
    explicit = tmp_path / "x" / "y.desktop"
    assert storage.target_path(explicit) == explicit


def test_write_creates_directories_and_file(user_dir):
    path = storage.write_entry(valid_entry(), "My Editor")
    assert path == user_dir / "My-Editor.desktop"
    assert path.read_text(encoding="utf-8") == serialize(valid_entry())
    assert stat.S_IMODE(path.stat().st_mode) == 0o644


def test_write_refuses_to_overwrite(user_dir):
    storage.write_entry(valid_entry(), "Editor")
    with pytest.raises(storage.StorageError) as excinfo:
        storage.write_entry(valid_entry("Other"), "Editor")
    assert excinfo.value.kind == "exists"
    assert "Name=Editor" in (user_dir / "Editor.desktop").read_text(encoding="utf-8")


def test_write_overwrites_when_asked(user_dir):
    storage.write_entry(valid_entry(), "Editor")
    path = storage.write_entry(valid_entry("Other"), "Editor", overwrite=True)
    assert "Name=Other" in path.read_text(encoding="utf-8").splitlines()


def test_write_validates_first(user_dir):
    with pytest.raises(MissingExec):
        storage.write_entry(DesktopEntry(name="No Exec"), "No Exec")
    assert not user_dir.exists()


def test_write_reports_directory_failure(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("not a dir")
    with pytest.raises(storage.StorageError) as excinfo:
        storage.write_entry(valid_entry(), blocker / "sub" / "x.desktop")
    assert excinfo.value.kind == "create-dir"
    assert isinstance(excinfo.value.__cause__, OSError)


def test_read_entry_parses_file(tmp_path):
    path = tmp_path / "a.desktop"
    path.write_text("[Desktop Entry]\nName=A\nName[fr]=Bonjour\nName[fr]=Salut\n", encoding="utf-8")
    entry = storage.read_entry(path)
    assert entry.name == "A"
    assert entry.localized_name == [("fr", "Bonjour"), ("fr", "Salut")]


def test_read_entry_tolerates_bad_bytes(tmp_path):
    path = tmp_path / "bad.desktop"
    path.write_bytes(b"[Desktop Entry]\nName=Caf\xe9\nExec=x\n")
    entry = storage.read_entry(path)
    assert entry.name.startswith("Caf")
    assert entry.exec == "x"


def test_read_missing_file_is_a_storage_error(tmp_path):
    with pytest.raises(storage.StorageError) as excinfo:
        storage.read_entry(tmp_path / "missing.desktop")
    assert excinfo.value.kind == "read"


def test_list_prefers_user_overrides(user_dir, system_dir):
    (system_dir / "b.desktop").write_text("[Desktop Entry]\nName=System B\n")
    (system_dir / "a.desktop").write_text("[Desktop Entry]\nName=System A\n")
    (system_dir / "notes.txt").write_text("ignored")
    user_dir.mkdir(parents=True)
    (user_dir / "b.desktop").write_text("[Desktop Entry]\nName=User B\n")

    files = storage.list_desktop_files()

    assert files == [system_dir / "a.desktop", user_dir / "b.desktop"]
    assert storage.is_user_override(files[1])
    assert not storage.is_user_override(files[0])


def test_list_skips_missing_directories(user_dir, tmp_path):
    assert storage.list_desktop_files(search_dirs=[str(tmp_path / "nope")]) == []


def test_describe_file_falls_back_to_stem(tmp_path):
    path = tmp_path / "org.example.Thing.desktop"
    assert storage.describe_file(path) == ("org.example.Thing", None)
    path.write_text("[Desktop Entry]\nName=Thing\nIcon=thing\n")
    assert storage.describe_file(path) == ("Thing", "thing")


def test_delete_entry(tmp_path):
    path = tmp_path / "x.desktop"
    path.write_text("[Desktop Entry]\n")
    storage.delete_entry(path)
    assert not path.exists()
    with pytest.raises(storage.StorageError):
        storage.delete_entry(path)


def test_update_desktop_database_without_tool(monkeypatch, tmp_path):
    def missing(*args, **kwargs):
        raise FileNotFoundError("update-desktop-database")

    monkeypatch.setattr(subprocess, "run", missing)
    storage.update_desktop_database(tmp_path)


def test_update_desktop_database_logs_other_os_errors(monkeypatch, tmp_path):
    def denied(*args, **kwargs):
        raise PermissionError("update-desktop-database")

    monkeypatch.setattr(subprocess, "run", denied)
    storage.update_desktop_database(tmp_path)


def test_title_with_slashes_is_a_file_name(user_dir):
    assert storage.target_path("AC/DC Player") == user_dir / "AC-DC-Player.desktop"
    assert storage.target_path("../../etc/evil") == user_dir / "..-..-etc-evil.desktop"
