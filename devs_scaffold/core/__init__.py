"""Materialization and merge engine."""

from devs_scaffold.core.document import DocList, DocMap, Document, Scalar, from_plain, to_plain
from devs_scaffold.core.errors import ParseError, ScaffoldError, ValidationError
from devs_scaffold.core.file_set import (
    PATCH_MARKER,
    DocumentEntry,
    EntryMode,
    FileSet,
    TextEntry,
    document,
    file_set_from_mapping,
    patch,
    text,
)
from devs_scaffold.core.ignore_list import merge_ignore_list
from devs_scaffold.core.materializer import MaterializeOptions, WriteAction, materialize
from devs_scaffold.core.patch_merger import merge

__all__ = [
    "PATCH_MARKER",
    "DocList",
    "DocMap",
    "Document",
    "DocumentEntry",
    "EntryMode",
    "FileSet",
    "MaterializeOptions",
    "ParseError",
    "Scalar",
    "ScaffoldError",
    "TextEntry",
    "ValidationError",
    "WriteAction",
    "document",
    "file_set_from_mapping",
    "from_plain",
    "materialize",
    "merge",
    "merge_ignore_list",
    "patch",
    "text",
    "to_plain",
]
