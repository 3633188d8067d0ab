"""Read and write structured documents as JSON or YAML.

The format is picked from the file suffix: ``.yaml``/``.yml`` files use
YAML, everything else (``.json``, ``.prettierrc``, ...) uses JSON.
"""

from __future__ import annotations

import json
from enum import Enum
from pathlib import PurePath
from typing import cast

import yaml

from devs_scaffold.core.document import DocMap, Document, from_plain, to_plain
from devs_scaffold.core.errors import ParseError

YAML_SUFFIXES = (".yaml", ".yml")


class DocumentLoader(yaml.SafeLoader):
    """Safe YAML loader that keeps timestamps as plain strings."""


DocumentLoader.add_constructor(
    "tag:yaml.org,2002:timestamp",
    DocumentLoader.construct_yaml_str,
)


class DocumentFormat(Enum):
    """Serialization format of a structured document."""

    JSON = "json"
    YAML = "yaml"


def format_for_path(path: str | PurePath) -> DocumentFormat:
    """Return the document format implied by a file path."""
    suffix = PurePath(path).suffix.lower()
    if suffix in YAML_SUFFIXES:
        return DocumentFormat.YAML
    return DocumentFormat.JSON


def serialize_document(doc: Document, fmt: DocumentFormat, spaces: int = 4) -> str:
    """Serialize a document to text.

    JSON output ends with a newline, like ``json.dump`` based writers in
    editors do. YAML output keeps key order.
    """
    plain = to_plain(doc)
    if fmt is DocumentFormat.YAML:
        return yaml.safe_dump(
            plain,
            indent=spaces,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )
    return json.dumps(plain, indent=spaces, ensure_ascii=False) + "\n"


def parse_document(text: str, fmt: DocumentFormat, origin: str = "") -> DocMap:
    """Parse existing file content into a map document.

    An empty YAML file counts as an empty map. YAML dates and timestamps
    are read as strings.

    Raises:
        ParseError: If the content is not valid for the format or its
            top level is not an object.
    """
    try:
        if fmt is DocumentFormat.YAML:
            raw: object = yaml.load(text, Loader=DocumentLoader)
            if raw is None:
                raw = {}
        else:
            raw = json.loads(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ParseError(f"invalid {fmt.value}: {e}", origin=origin) from e

    if not isinstance(raw, dict):
        raise ParseError(
            f"expected an object at top level, got {type(raw).__name__}",
            origin=origin,
        )

    try:
        return cast(DocMap, from_plain(raw))
    except TypeError as e:
        raise ParseError(str(e), origin=origin) from e
