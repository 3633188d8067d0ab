"""Declarative file sets.

A file set maps relative POSIX paths to entries. Text entries are written
verbatim; document entries are serialized as JSON or YAML and carry a mode:

- ``EntryMode.CREATE``: write only if the file does not exist (or when forced)
- ``EntryMode.PATCH``: merge into whatever document already exists

Example:
    files: FileSet = {
        "README.md": text("# demo\\n"),
        ".prettierrc": document({"semi": False}),
        "package.json": patch({"scripts": {"build": "devicescript build"}}),
    }
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Union

from devs_scaffold.core.document import (
    PATCH_MARKER,
    DocMap,
    Document,
    from_plain,
    strip_key,
)


class EntryMode(Enum):
    """How a document entry is applied to an existing file."""

    CREATE = "create"
    PATCH = "patch"


@dataclass(frozen=True)
class TextEntry:
    """Raw text written verbatim (UTF-8)."""

    content: str


@dataclass(frozen=True)
class DocumentEntry:
    """Structured document plus its write mode."""

    document: Document
    mode: EntryMode = EntryMode.CREATE

    @property
    def is_patch(self) -> bool:
        return self.mode is EntryMode.PATCH


FileSetEntry = Union[TextEntry, DocumentEntry]
FileSet = dict[str, FileSetEntry]


def text(content: str) -> TextEntry:
    """Build a text entry."""
    return TextEntry(content)


def document(value: object) -> DocumentEntry:
    """Build a create-if-absent document entry from plain data.

    ``__isPatch__`` keys are dropped at every level.
    """
    return DocumentEntry(strip_key(from_plain(value)), EntryMode.CREATE)


def patch(value: object) -> DocumentEntry:
    """Build a patch document entry from plain data.

    Patch documents must be maps, since they are merged key by key.
    ``__isPatch__`` keys are dropped at every level.
    """
    doc = strip_key(from_plain(value))
    if not isinstance(doc, DocMap):
        raise TypeError("Patch documents must be objects")
    return DocumentEntry(doc, EntryMode.PATCH)


def file_set_from_mapping(files: Mapping[str, object]) -> FileSet:
    """Convert a mapping of path -> str | dict into a file set.

    Strings become text entries. A dict whose top-level ``__isPatch__`` key
    is truthy becomes a patch entry; any other dict or list becomes a
    create-if-absent document entry. The marker is removed at every level.
    """
    result: FileSet = {}
    for path, value in files.items():
        if isinstance(value, (TextEntry, DocumentEntry)):
            result[path] = value
        elif isinstance(value, str):
            result[path] = text(value)
        elif isinstance(value, Mapping) and value.get(PATCH_MARKER):
            result[path] = patch(value)
        else:
            result[path] = document(value)
    return result
