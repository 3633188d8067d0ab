"""Structured document model.

A document is a tagged recursive value: ``Scalar``, ``DocList`` or
``DocMap``. Templates and parsed on-disk JSON/YAML are both converted into
this model so the merger can dispatch on the node kind instead of guessing
from plain dicts and lists.

Example:
    >>> doc = from_plain({"name": "Sim", "args": ["-r"]})
    >>> isinstance(doc, DocMap)
    True
    >>> to_plain(doc)
    {'name': 'Sim', 'args': ['-r']}
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Union

ScalarValue = Union[str, int, float, bool, None]

# Recursive type for plain nested values (json.loads / yaml.safe_load output)
PlainValue = Union[ScalarValue, list["PlainValue"], dict[str, "PlainValue"]]

# Reserved key flagging patch documents; never written to disk
PATCH_MARKER = "__isPatch__"


@dataclass(frozen=True)
class Scalar:
    """Leaf value: string, number, boolean or null."""

    value: ScalarValue


@dataclass(frozen=True)
class DocList:
    """Ordered list of documents."""

    items: tuple[Document, ...] = ()

    def __iter__(self) -> Iterator[Document]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


@dataclass(frozen=True)
class DocMap:
    """Keyed map of documents.

    Insertion order is kept for serialization. Treat ``entries`` as
    read-only; use ``with_entry`` to derive a new map.
    """

    entries: dict[str, Document] = field(default_factory=dict)

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __getitem__(self, key: str) -> Document:
        return self.entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def get(self, key: str) -> Document | None:
        return self.entries.get(key)

    def items(self) -> Iterator[tuple[str, Document]]:
        return iter(self.entries.items())

    def with_entry(self, key: str, value: Document) -> DocMap:
        """Return a copy of this map with ``key`` set to ``value``."""
        return DocMap({**self.entries, key: value})

    def without(self, key: str) -> DocMap:
        """Return a copy of this map without ``key``."""
        return DocMap({k: v for k, v in self.entries.items() if k != key})


Document = Union[Scalar, DocList, DocMap]


def from_plain(value: object) -> Document:
    """Convert plain Python data into a document.

    Raises:
        TypeError: If the value (or a nested value) is not JSON-like,
            or a mapping key is not a string.
    """
    if isinstance(value, (DocMap, DocList, Scalar)):
        return value
    if value is None or isinstance(value, (str, bool, int, float)):
        return Scalar(value)
    if isinstance(value, Mapping):
        entries: dict[str, Document] = {}
        for key, item in value.items():
            if not isinstance(key, str):
                raise TypeError(f"Document keys must be strings, got {key!r}")
            entries[key] = from_plain(item)
        return DocMap(entries)
    if isinstance(value, (list, tuple)):
        return DocList(tuple(from_plain(item) for item in value))
    raise TypeError(f"Unsupported document value: {type(value).__name__}")


def to_plain(doc: Document) -> PlainValue:
    """Convert a document back into plain dicts, lists and scalars."""
    if isinstance(doc, Scalar):
        return doc.value
    if isinstance(doc, DocList):
        return [to_plain(item) for item in doc.items]
    if isinstance(doc, DocMap):
        return {key: to_plain(item) for key, item in doc.entries.items()}
    raise TypeError(f"Unknown document node: {type(doc).__name__}")


def identity_of(doc: Document, field_name: str = "name") -> ScalarValue:
    """Return the identity field of a map element, or None.

    Only truthy scalar values count as an identity.
    """
    if not isinstance(doc, DocMap):
        return None
    node = doc.get(field_name)
    if isinstance(node, Scalar) and node.value:
        return node.value
    return None


def strip_key(doc: Document, key: str = PATCH_MARKER) -> Document:
    """Return ``doc`` with ``key`` removed from every map, at any depth."""
    if isinstance(doc, DocMap):
        return DocMap({
            k: strip_key(item, key) for k, item in doc.entries.items() if k != key
        })
    if isinstance(doc, DocList):
        return DocList(tuple(strip_key(item, key) for item in doc.items))
    return doc
