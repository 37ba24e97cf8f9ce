"""Tests for wuw.discovery."""

from __future__ import annotations

import pytest

from wuw.discovery import list_source_files
from wuw.errors import DirectoryUnreadable, NoSourceFiles


def test_lists_visible_go_files_sorted(go_tree) -> None:
    go_tree.write(
        {
            "pkg/b.go": "package pkg\n",
            "pkg/a.go": "package pkg\n",
            "pkg/.hidden.go": "package hidden\n",
            "pkg/notes.txt": "not go\n",
            "pkg/nested/c.go": "package nested\n",
        }
    )
    (go_tree.root / "pkg" / "dir.go").mkdir()

    directory = list_source_files(go_tree.dir("pkg"))

    assert [source.path.name for source in directory.files] == ["a.go", "b.go"]


def test_custom_suffix(go_tree) -> None:
    go_tree.write({"pkg/a.go": "package pkg\n", "pkg/b.gox": "package pkg\n"})

    directory = list_source_files(go_tree.dir("pkg"), suffix=".gox")

    assert [source.path.name for source in directory.files] == ["b.gox"]


def test_missing_directory_is_unreadable(go_tree) -> None:
    missing = str(go_tree.root / "missing")
    with pytest.raises(DirectoryUnreadable) as excinfo:
        list_source_files(missing)
    assert excinfo.value.path == missing


def test_file_path_is_unreadable(go_tree) -> None:
    go_tree.write({"main.go": "package main\n"})
    with pytest.raises(DirectoryUnreadable):
        list_source_files(str(go_tree.root / "main.go"))


def test_directory_without_sources(go_tree) -> None:
    go_tree.write({"docs/README.md": "# docs\n"})
    with pytest.raises(NoSourceFiles) as excinfo:
        list_source_files(go_tree.dir("docs"))
    assert "no .go files" in str(excinfo.value)
