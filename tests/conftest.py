import pytest

from dotdesktop import config, storage


@pytest.fixture
def user_dir(tmp_path, monkeypatch):
    data_home = tmp_path / "data"
    monkeypatch.setenv("XDG_DATA_HOME", str(data_home))
    return data_home / "applications"


@pytest.fixture
def system_dir(tmp_path, monkeypatch):
    directory = tmp_path / "system" / "applications"
    directory.mkdir(parents=True)
    monkeypatch.setattr(config, "SEARCH_DIRS", [str(directory)])
    return directory


@pytest.fixture
def no_desktop_db(monkeypatch):
    calls = []
    monkeypatch.setattr(storage, "update_desktop_database", lambda directory=None: calls.append(directory))
    return calls
