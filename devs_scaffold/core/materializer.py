"""Write a file set to disk without destroying user edits.

Per entry (relative path ``p``):

| exists | patch | force | action                                   |
|--------|-------|-------|------------------------------------------|
| no     | no    | any   | create parent dirs, write                |
| yes    | no    | False | skip                                     |
| yes    | no    | True  | overwrite (prior content is not read)    |
| any    | yes   | any   | read existing doc, merge, write back     |

Entries are processed once, in mapping order. The first error stops the
call; files written before it stay in place.

Example:
    >>> root = materialize("my-project", {"README.md": text("# hi\\n")})
"""

from __future__ import annotations

import errno
import os
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path, PurePosixPath

from devs_scaffold.core.document import DocMap, strip_key
from devs_scaffold.core.document_io import (
    format_for_path,
    parse_document,
    serialize_document,
)
from devs_scaffold.core.errors import ValidationError
from devs_scaffold.core.file_set import DocumentEntry, FileSet, FileSetEntry, TextEntry
from devs_scaffold.core.patch_merger import merge

ENCODING = "utf-8"
DEFAULT_SPACES = 4
# PyYAML silently ignores indents outside this range
MIN_SPACES = 2
MAX_SPACES = 9


class WriteAction(Enum):
    """What happened to a single file set entry."""

    CREATED = "created"
    SKIPPED = "skipped"
    OVERWRITTEN = "overwritten"
    MERGED = "merged"


@dataclass(frozen=True)
class MaterializeOptions:
    """Options for a materialization call.

    Attributes:
        force: Overwrite existing non-patch files.
        spaces: Indent width for serialized documents (2 to 9).

    Raises:
        ValueError: If ``spaces`` is outside the supported range.
    """

    force: bool = False
    spaces: int = DEFAULT_SPACES

    def __post_init__(self) -> None:
        if not MIN_SPACES <= self.spaces <= MAX_SPACES:
            raise ValueError(
                f"spaces must be between {MIN_SPACES} and {MAX_SPACES}, got {self.spaces}"
            )


Reporter = Callable[[WriteAction, str], None]


def _resolve_entry_path(root: Path, relative: str) -> Path:
    """Resolve a relative POSIX path under ``root``.

    Raises:
        ValidationError: If the path is absolute or climbs out of ``root``.
    """
    posix = PurePosixPath(relative)
    if not relative or posix.is_absolute() or ".." in posix.parts:
        raise ValidationError(
            "file set paths must be relative to the project root",
            origin=relative,
        )
    return root.joinpath(*posix.parts)


def _exists(path: Path) -> bool:
    """Return True if a regular file exists at ``path``.

    Raises:
        IsADirectoryError: If a directory occupies the path.
    """
    if path.is_dir():
        raise IsADirectoryError(errno.EISDIR, os.strerror(errno.EISDIR), str(path))
    return path.exists()


def _render(relative: str, entry: FileSetEntry, spaces: int) -> str:
    if isinstance(entry, TextEntry):
        return entry.content
    return serialize_document(strip_key(entry.document), format_for_path(relative), spaces)


def _write(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    # newline="" keeps template line endings untouched on every platform
    with path.open("w", encoding=ENCODING, newline="") as f:
        f.write(content)


def _patch_file(path: Path, relative: str, entry: DocumentEntry, spaces: int) -> None:
    """Merge a patch entry into the document at ``path``."""
    fmt = format_for_path(relative)
    if _exists(path):
        existing = parse_document(path.read_text(encoding=ENCODING), fmt, origin=relative)
    else:
        existing = DocMap()

    source = entry.document
    if not isinstance(source, DocMap):
        raise ValidationError("patch documents must be objects", origin=relative)

    merged = merge(existing, source, origin=relative)
    _write(path, serialize_document(merged, fmt, spaces))


def materialize(
    root_dir: str | os.PathLike[str] | None,
    file_set: FileSet,
    options: MaterializeOptions | None = None,
    reporter: Reporter | None = None,
) -> Path:
    """Write every entry of ``file_set`` under ``root_dir``.

    Args:
        root_dir: Target root. ``None`` or ``""`` means the current directory.
        file_set: Relative path -> entry, applied in order.
        options: Force/indent options (defaults: no force, 4 spaces).
        reporter: Optional callback receiving ``(action, relative_path)``
            after each entry.

    Returns:
        The absolute root path.

    Raises:
        ValidationError: Unsafe path, or a patch list element without ``name``.
        ParseError: Existing content at a patch path is not a valid document.
        OSError: Any filesystem failure.
    """
    opts = options or MaterializeOptions()
    root = Path(root_dir or ".").resolve()
    root.mkdir(parents=True, exist_ok=True)

    for relative, entry in file_set.items():
        path = _resolve_entry_path(root, relative)

        if isinstance(entry, DocumentEntry) and entry.is_patch:
            _patch_file(path, relative, entry, opts.spaces)
            action = WriteAction.MERGED
        elif not _exists(path):
            _write(path, _render(relative, entry, opts.spaces))
            action = WriteAction.CREATED
        elif opts.force:
            _write(path, _render(relative, entry, opts.spaces))
            action = WriteAction.OVERWRITTEN
        else:
            action = WriteAction.SKIPPED

        if reporter is not None:
            reporter(action, relative)

    return root
