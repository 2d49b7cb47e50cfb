"""Tests for name normalisation, duplicate detection and validation."""

import logging

import pytest

from foldertree import (
    DuplicateNameError,
    EmptyNameError,
    NamingConfig,
    Node,
    ValidationError,
    has_duplicate_name,
    normalize_name,
)
from foldertree.core.naming import validate_name, validate_new_child_name, validate_rename


@pytest.fixture
def folder():
    return Node.folder(1, "root", [
        Node.folder(2, "Docs"),
        Node.file(3, "readme.txt"),
    ])


class TestHasDuplicateName:

    @pytest.mark.parametrize("candidate", ["docs", "DOCS", "  Docs  ", "\tdocs\n"])
    def test_matches_after_trim_and_casefold(self, folder, candidate):
        assert has_duplicate_name(folder.items, candidate)

    def test_no_match(self, folder):
        assert not has_duplicate_name(folder.items, "src")

    def test_empty_siblings(self):
        assert not has_duplicate_name([], "anything")

    def test_exclude_id_allows_own_name(self, folder):
        assert not has_duplicate_name(folder.items, "docs", exclude_id=2)
        assert has_duplicate_name(folder.items, "docs", exclude_id=3)

    def test_case_sensitive_config(self, folder):
        config = NamingConfig(case_sensitive=True)
        assert not has_duplicate_name(folder.items, "docs", config=config)
        assert has_duplicate_name(folder.items, "Docs", config=config)

    def test_does_not_touch_siblings(self, folder):
        before = folder.items
        has_duplicate_name(folder.items, "docs")
        assert folder.items is before


class TestNormalizeName:

    def test_default(self):
        assert normalize_name("  ReadMe.TXT ") == "readme.txt"

    def test_no_strip(self):
        assert normalize_name(" a ", NamingConfig(strip_whitespace=False)) == " a "


class TestValidateName:

    def test_returns_trimmed(self):
        assert validate_name("  notes.md ") == "notes.md"

    @pytest.mark.parametrize("name", ["", "   ", "\n\t"])
    def test_empty(self, name):
        with pytest.raises(EmptyNameError):
            validate_name(name)

    def test_non_string(self):
        with pytest.raises(ValidationError):
            validate_name(None)

    def test_max_length(self):
        config = NamingConfig(max_length=5)
        assert validate_name("abcde", config) == "abcde"
        with pytest.raises(ValidationError):
            validate_name("abcdef", config)

    def test_forbidden_chars(self):
        config = NamingConfig(forbidden_chars=frozenset({"/"}))
        with pytest.raises(ValidationError) as exc_info:
            validate_name("a/b", config)
        assert exc_info.value.name == "a/b"

    @pytest.mark.parametrize("name", ["a\x00b", "tab\there", "line\nbreak", "bell\x07"])
    def test_control_chars(self, name):
        with pytest.raises(ValidationError) as exc_info:
            validate_name(name)
        assert "control characters" in str(exc_info.value)

    def test_outer_control_whitespace_is_trimmed(self):
        assert validate_name("\tnotes.md\n") == "notes.md"

    @pytest.mark.parametrize("name, config", [
        ("   ", None),
        ("abcdef", NamingConfig(max_length=5)),
        ("a/b", NamingConfig(forbidden_chars=frozenset({"/"}))),
        ("a\x00b", None),
    ])
    def test_rejections_logged(self, caplog, name, config):
        with caplog.at_level(logging.INFO, logger="foldertree"):
            with pytest.raises(ValidationError):
                validate_name(name, config)
        assert any(record.levelno == logging.INFO and "Rejected" in record.getMessage()
                   for record in caplog.records)


class TestValidateNewChildName:

    def test_accepts_new_name(self, folder):
        assert validate_new_child_name(folder, " src ") == "src"

    def test_rejects_duplicate(self, folder):
        with pytest.raises(DuplicateNameError) as exc_info:
            validate_new_child_name(folder, "README.txt")
        assert exc_info.value.parent_id == 1

    def test_duplicate_is_validation_error(self, folder):
        with pytest.raises(ValidationError):
            validate_new_child_name(folder, "docs")


class TestValidateRename:

    def test_rename_to_own_name(self, folder):
        assert validate_rename(folder, 2, "docs") == "docs"

    def test_rename_to_sibling_name(self, folder):
        with pytest.raises(DuplicateNameError):
            validate_rename(folder, 2, "readme.txt")

    def test_root_has_no_siblings(self):
        assert validate_rename(None, 1, "anything") == "anything"

    def test_root_still_needs_a_name(self):
        with pytest.raises(EmptyNameError):
            validate_rename(None, 1, "  ")
