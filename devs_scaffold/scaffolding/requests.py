"""Side-channel request handlers for editor integrations.

Editors send ``{"type": "addSim", "data": {...}}`` style requests; each type
maps to a scaffolding entry point. Responses carry the project root.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from devs_scaffold.core.errors import ScaffoldError
from devs_scaffold.core.materializer import DEFAULT_SPACES, MaterializeOptions
from devs_scaffold.scaffolding.project import add_service, add_sim

RequestData = Mapping[str, Any]
Response = dict[str, Any]


def _options_from(data: RequestData) -> MaterializeOptions:
    try:
        return MaterializeOptions(
            force=bool(data.get("force", False)),
            spaces=int(data.get("spaces", DEFAULT_SPACES)),
        )
    except (TypeError, ValueError) as e:
        raise ScaffoldError(f"Invalid request options: {e}") from e


def _handle_add_sim(data: RequestData) -> Response:
    root = add_sim(_options_from(data), directory=data.get("dir", "."))
    return {"dir": str(root)}


def _handle_add_service(data: RequestData) -> Response:
    root = add_service(
        str(data.get("name") or ""),
        _options_from(data),
        directory=data.get("dir", "."),
    )
    return {"dir": str(root)}


@dataclass(frozen=True)
class RequestHandler:
    """A registered request handler.

    Attributes:
        description: Short help text.
        handler: Function called with the request payload.
    """

    description: str
    handler: Callable[[RequestData], Response]


REQUEST_HANDLERS: dict[str, RequestHandler] = {
    "addSim": RequestHandler(
        description="Add node.js simulator support",
        handler=_handle_add_sim,
    ),
    "addService": RequestHandler(
        description="Add a custom service specification",
        handler=_handle_add_service,
    ),
}


def dispatch_request(req_type: str, data: RequestData | None = None) -> Response:
    """Run the handler registered for ``req_type``.

    Raises:
        ScaffoldError: If no handler is registered for the request type.
    """
    entry = REQUEST_HANDLERS.get(req_type)
    if entry is None:
        known = ", ".join(sorted(REQUEST_HANDLERS))
        raise ScaffoldError(f"Unknown request type '{req_type}' (known: {known})")
    return entry.handler(data or {})
