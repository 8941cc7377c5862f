import logging

import pytest

from namecomplete.names import NameList, normalize_name, resolve_path, split_names
from namecomplete.trie import InvalidCharacter


def write_names(tmp_path, text, name="names.txt"):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_normalize_name():
    assert normalize_name("  Anna \n") == "anna"
    assert normalize_name("BOB") == "bob"


def test_split_names_drops_blanks():
    assert split_names("Ann, Anna ,Andy,\n") == ["ann", "anna", "andy"]
    assert split_names("\n") == []
    assert split_names(" , ,") == []


def test_resolve_path_adds_extension(tmp_path):
    assert resolve_path("names") == "names.txt"
    assert resolve_path(" names ") == "names.txt"
    assert resolve_path("names.csv") == "names.csv"

    existing = tmp_path / "roster"
    existing.write_text("amy\n", encoding="utf-8")
    assert resolve_path(str(existing)) == str(existing)


def test_load_is_case_insensitive(tmp_path):
    path = write_names(tmp_path, "Ann, ANNA\nandy,Amy\namy\n")
    names = NameList(str(path))

    assert names.loaded == 5
    assert len(names) == 4
    assert names.suggest("AN") == ["andy", "ann", "anna"]
    assert names.suggest("a") == ["amy", "andy", "ann", "anna"]
    assert "ANN" in names
    assert names.contains("amy") is True
    assert names.contains("am") is False


def test_load_skips_invalid_names(tmp_path, caplog):
    path = write_names(tmp_path, "Ann, O'Brien, mary ann\nr2d2,Bob\n")
    names = NameList()

    with caplog.at_level(logging.WARNING, logger="namecomplete"):
        count = names.load(str(path))

    assert count == 2
    assert names.skipped == 3
    assert names.suggest("") == ["ann", "bob"]
    assert "o'brien" in caplog.text
    assert "line 2" in caplog.text


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        NameList(str(tmp_path / "nope.txt"))


def test_add_and_suggest_unknown_prefix():
    names = NameList()
    names.add("  Zoe ")
    assert names.suggest("z") == ["zoe"]
    assert names.suggest("x") == []


def test_suggest_rejects_invalid_query():
    names = NameList()
    names.add("ann")
    with pytest.raises(InvalidCharacter):
        names.suggest("an1")


def test_load_skips_names_that_are_not_utf8(tmp_path):
    path = tmp_path / "latin.txt"
    path.write_bytes("Ann, Jos\xe9\nZo\xeb,Bob\n".encode("latin-1"))
    names = NameList()

    assert names.load(str(path)) == 2
    assert names.skipped == 2
    assert names.suggest("") == ["ann", "bob"]
