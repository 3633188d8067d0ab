"""Additive merge for line-based ignore files (``.gitignore``)."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

ENCODING = "utf-8"


def merge_ignore_list(path: Path, tokens: Iterable[str]) -> bool:
    """Make sure every token appears in the ignore file at ``path``.

    A missing file is created with the tokens joined by newlines. For an
    existing file, each token that is not already a substring of the content
    is appended on its own line. Running twice changes nothing the second
    time.

    Args:
        path: Ignore file to create or update.
        tokens: Required entries (e.g. ``node_modules``).

    Returns:
        True if the file was written, False if it was already up to date.
    """
    required = list(tokens)

    if not path.exists():
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("\n".join(required), encoding=ENCODING)
        return True

    content = path.read_text(encoding=ENCODING)
    updated = content
    for token in required:
        if token not in updated:
            updated += f"\n{token}"

    if updated == content:
        return False

    path.write_text(updated, encoding=ENCODING)
    return True
