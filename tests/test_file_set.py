"""Tests for file set entry builders and the marker-key mapping converter."""

import json
from pathlib import Path

import pytest

from devs_scaffold.core.document import DocMap, to_plain
from devs_scaffold.core.file_set import (
    PATCH_MARKER,
    DocumentEntry,
    EntryMode,
    TextEntry,
    document,
    file_set_from_mapping,
    patch,
    text,
)
from devs_scaffold.core.materializer import materialize


class TestBuilders:
    """text() / document() / patch() helpers."""

    def test_text_entry(self) -> None:
        assert text("hi") == TextEntry("hi")

    def test_document_entry_defaults_to_create(self) -> None:
        entry = document({"a": 1})

        assert entry.mode is EntryMode.CREATE
        assert not entry.is_patch

    def test_patch_entry(self) -> None:
        entry = patch({"a": 1})

        assert entry.is_patch
        assert isinstance(entry.document, DocMap)

    def test_patch_requires_object(self) -> None:
        with pytest.raises(TypeError):
            patch(["a"])

    def test_patch_builder_drops_marker_before_writing(self, tmp_path: Path) -> None:
        materialize(tmp_path, {"a.json": patch({PATCH_MARKER: True, "k": 1})})

        content = (tmp_path / "a.json").read_text()
        assert PATCH_MARKER not in content
        assert json.loads(content) == {"k": 1}

    def test_document_builder_drops_nested_marker(self) -> None:
        entry = document({"a": {PATCH_MARKER: True, "b": [{PATCH_MARKER: 1, "c": 2}]}})

        assert to_plain(entry.document) == {"a": {"b": [{"c": 2}]}}


class TestFileSetFromMapping:
    """Legacy mapping shape with the __isPatch__ marker."""

    def test_strings_become_text_entries(self) -> None:
        files = file_set_from_mapping({"README.md": "# hi"})

        assert files["README.md"] == TextEntry("# hi")

    def test_marker_selects_patch_mode_and_is_stripped(self) -> None:
        files = file_set_from_mapping({
            "package.json": {PATCH_MARKER: True, "scripts": {"build": "x"}},
        })

        entry = files["package.json"]
        assert isinstance(entry, DocumentEntry)
        assert entry.is_patch
        assert to_plain(entry.document) == {"scripts": {"build": "x"}}

    def test_false_marker_is_create_mode_without_marker(self) -> None:
        files = file_set_from_mapping({"a.json": {PATCH_MARKER: False, "k": 1}})

        entry = files["a.json"]
        assert isinstance(entry, DocumentEntry)
        assert entry.mode is EntryMode.CREATE
        assert to_plain(entry.document) == {"k": 1}

    def test_entries_pass_through(self) -> None:
        entry = patch({"k": 1})

        assert file_set_from_mapping({"a.json": entry})["a.json"] is entry

    def test_order_is_preserved(self) -> None:
        files = file_set_from_mapping({"b": "1", "a": "2", "c": {}})

        assert list(files) == ["b", "a", "c"]

    def test_marker_never_written(self, tmp_path: Path) -> None:
        files = file_set_from_mapping({
            ".vscode/launch.json": {
                PATCH_MARKER: True,
                "configurations": [{"name": "Sim"}],
            },
        })

        materialize(tmp_path, files)

        content = (tmp_path / ".vscode" / "launch.json").read_text()
        assert PATCH_MARKER not in content
        assert json.loads(content) == {"configurations": [{"name": "Sim"}]}

    def test_nested_marker_never_written(self, tmp_path: Path) -> None:
        files = file_set_from_mapping({
            "package.json": {
                PATCH_MARKER: True,
                "scripts": {PATCH_MARKER: True, "build": "x"},
            },
        })

        materialize(tmp_path, files)

        content = (tmp_path / "package.json").read_text()
        assert PATCH_MARKER not in content
        assert json.loads(content) == {"scripts": {"build": "x"}}
