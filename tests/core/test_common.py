import os
import pytest
from pathlib import Path

from filecombiner.core.common.encodings import is_known_encoding, resolve_encoding
from filecombiner.core.common.paths import (
    file_extension,
    normalize_extension,
    normalize_folder,
    path_key,
    relative_display_path,
    to_absolute,
)


# --- PATHS ---

def test_to_absolute_collapses_dot_segments(tmp_path):
    messy = tmp_path / "a" / ".." / "b" / "." / "c.txt"
    assert to_absolute(messy) == tmp_path / "b" / "c.txt"


def test_path_key_is_case_insensitive(tmp_path):
    assert path_key(tmp_path / "Src" / "App.py") == path_key(tmp_path / "src" / "app.PY")


def test_relative_display_path_inside_and_outside(tmp_path):
    base = tmp_path / "root"

    assert relative_display_path(base, base / "pkg" / "mod.py") == os.path.join("pkg", "mod.py")
    # Sibling with a common prefix is not "inside"
    outside = tmp_path / "root2" / "x.py"
    assert relative_display_path(base, outside) == str(outside)


@pytest.mark.parametrize("name, expected", [
    (".gitignore", ".gitignore"),
    ("archive.tar.gz", ".gz"),
    ("Makefile", ""),
    ("notes.", ""),
    (os.path.join(".config", "settings"), ""),
])
def test_file_extension_treats_dotfiles_as_their_own_extension(name, expected):
    assert file_extension(name) == expected


@pytest.mark.parametrize("raw, expected", [
    ("txt", ".txt"),
    (".TXT", ".txt"),
    ("  .Py ", ".py"),
    ("", ""),
])
def test_normalize_extension(raw, expected):
    assert normalize_extension(raw) == expected


@pytest.mark.parametrize("raw, expected", [
    ("/build/", "build"),
    ("src\\gen", os.path.join("src", "gen")),
    ("docs/api/", os.path.join("docs", "api")),
])
def test_normalize_folder(raw, expected):
    assert normalize_folder(raw) == expected


# --- ENCODINGS ---

@pytest.mark.parametrize("alias, codec", [
    ("utf8", "utf-8"),
    ("UTF-8", "utf-8"),
    ("unicode", "utf-16"),
    ("utf32", "utf-32"),
    ("latin1", "iso8859-1"),
    ("ascii", "ascii"),
    ("cp1252", "cp1252"),
])
def test_resolve_encoding_aliases(alias, codec):
    assert resolve_encoding(alias) == codec


def test_blank_encoding_defaults_to_utf8():
    assert resolve_encoding("") == "utf-8"


def test_unknown_encoding():
    assert not is_known_encoding("klingon-8")
    with pytest.raises(LookupError):
        resolve_encoding("klingon-8")
