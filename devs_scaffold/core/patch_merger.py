"""Conservative merge of a patch document into an existing document.

Rules, applied per key of the source map:

- key missing from the target, or source value is a scalar: take the source
  value
- both values are lists: append every source element whose ``name`` is not
  already present in the target list (existing elements are never touched)
- both values are maps: recurse

Keys that exist only in the target are kept, in their original order.
The ``__isPatch__`` marker key is skipped at every level of the source.
Nothing is removed. Inputs are not mutated; a new ``DocMap`` is returned.

Example:
    >>> target = from_plain({"configurations": [{"name": "A", "x": 2}]})
    >>> source = from_plain({"configurations": [{"name": "A", "x": 1}, {"name": "C"}]})
    >>> to_plain(merge(target, source))
    {'configurations': [{'name': 'A', 'x': 2}, {'name': 'C'}]}
"""

from __future__ import annotations

from typing import cast

from devs_scaffold.core.document import (
    DocList,
    DocMap,
    Document,
    Scalar,
    identity_of,
    strip_key,
)
from devs_scaffold.core.errors import ValidationError

IDENTITY_FIELD = "name"


def _join_key(parent: str, key: str) -> str:
    return f"{parent}.{key}" if parent else key


def _kind(doc: Document) -> str:
    if isinstance(doc, DocMap):
        return "map"
    if isinstance(doc, DocList):
        return "list"
    return "scalar"


def _merge_list(
    target: DocList,
    source: DocList,
    key_path: str,
    origin: str,
) -> DocList:
    """Append source elements whose identity is not in the target list."""
    merged = list(target.items)
    seen = {identity_of(item, IDENTITY_FIELD) for item in merged}
    seen.discard(None)

    for index, element in enumerate(source.items):
        element_path = f"{key_path}[{index}]"
        if not isinstance(element, DocMap):
            raise ValidationError(
                f"list element must be an object with a '{IDENTITY_FIELD}' field, "
                + f"got {_kind(element)}",
                origin=origin,
                key_path=element_path,
            )
        identity = identity_of(element, IDENTITY_FIELD)
        if identity is None:
            raise ValidationError(
                f"list element is missing a non-empty '{IDENTITY_FIELD}' field",
                origin=origin,
                key_path=element_path,
            )
        if identity not in seen:
            merged.append(element)
            seen.add(identity)

    return DocList(tuple(merged))


def _merge_map(target: DocMap, source: DocMap, key_path: str, origin: str) -> DocMap:
    entries: dict[str, Document] = dict(target.entries)

    for key, src_value in source.items():
        child_path = _join_key(key_path, key)
        trg_value = entries.get(key)

        if trg_value is None or isinstance(src_value, Scalar):
            entries[key] = src_value
        elif isinstance(src_value, DocList) and isinstance(trg_value, DocList):
            entries[key] = _merge_list(trg_value, src_value, child_path, origin)
        elif isinstance(src_value, DocMap) and isinstance(trg_value, DocMap):
            entries[key] = _merge_map(trg_value, src_value, child_path, origin)
        elif isinstance(src_value, (DocList, DocMap)):
            raise ValidationError(
                f"cannot merge {_kind(src_value)} into existing {_kind(trg_value)}",
                origin=origin,
                key_path=child_path,
            )
        else:
            raise TypeError(f"Unknown document node: {type(src_value).__name__}")

    return DocMap(entries)


def merge(target: DocMap, source: DocMap, *, origin: str = "") -> DocMap:
    """Merge ``source`` into ``target`` and return the merged map.

    Args:
        target: Existing document (empty ``DocMap`` if nothing exists yet).
        source: Patch template.
        origin: File path used in error messages.

    Returns:
        New map with the target's keys first, then keys added by the source.

    Raises:
        ValidationError: If a merged list element has no ``name`` or a
            list/map is merged into a value of a different kind.
    """
    return _merge_map(target, cast(DocMap, strip_key(source)), "", origin)
