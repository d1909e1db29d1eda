import pytest

from dotdesktop.entry import (DesktopEntry, EntryType, MissingExec, MissingName,
                              MissingType, MissingUrl, ValidationError)


def test_new_entry_defaults():
    entry = DesktopEntry()
    assert entry.entry_type == "Application"
    assert entry.name == ""
    assert entry.generic_name is None
    assert entry.terminal is False
    assert entry.categories == []
    assert entry.extra == []


def test_enum_member_is_stored_as_text():
    entry = DesktopEntry(entry_type=EntryType.LINK)
    assert entry.entry_type == "Link"
    assert type(entry.entry_type) is str


def test_application_requires_exec():
    entry = DesktopEntry(entry_type="Application", name="Editor", exec="")
    with pytest.raises(MissingExec):
        entry.validate()


def test_link_requires_url():
    entry = DesktopEntry(entry_type="Link", name="Docs", url="  ")
    with pytest.raises(MissingUrl):
        entry.validate()


def test_directory_needs_neither_exec_nor_url():
    DesktopEntry(entry_type="Directory", name="Games").validate()


@pytest.mark.parametrize("entry_type", ["Application", "Link", "Directory"])
def test_blank_name_fails_for_every_type(entry_type):
    entry = DesktopEntry(entry_type=entry_type, name="   ", exec="x", url="https://x")
    with pytest.raises(MissingName):
        entry.validate()


@pytest.mark.parametrize("entry_type", ["", "Service", "application"])
def test_unknown_type_is_a_validation_error(entry_type):
    entry = DesktopEntry(entry_type=entry_type, name="X", exec="x")
    with pytest.raises(MissingType):
        entry.validate()


def test_type_is_checked_before_name():
    with pytest.raises(MissingType):
        DesktopEntry(entry_type="Bogus", name="").validate()


def test_validation_errors_share_a_base_and_message():
    with pytest.raises(ValidationError) as excinfo:
        DesktopEntry(name="Editor").validate()
    assert "Exec is required" in str(excinfo.value)


def test_validate_does_not_mutate_and_is_repeatable():
    entry = DesktopEntry(name="Editor", exec="edit %F", categories=["Office"])
    before = entry.copy()
    entry.validate()
    entry.validate()
    assert entry == before
    assert entry.is_valid()


def test_copy_is_independent():
    entry = DesktopEntry(name="A", categories=["Office"], localized_name=[("fr", "Bonjour")])
    clone = entry.copy()
    clone.categories.append("Utility")
    clone.localized_name.append(("de", "Hallo"))
    assert entry.categories == ["Office"]
    assert entry.localized_name == [("fr", "Bonjour")]
