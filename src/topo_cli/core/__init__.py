"""Core layer — domain models, table formatting, and the object fetcher.

Rules
-----
* No ``print()`` calls.
* No network I/O; remote access only through :mod:`topo_cli.core.protocols`.
* No imports from ``cli`` or ``infra``.
"""

from topo_cli.core.models import (
    ConnectionConfig,
    Entity,
    Kind,
    ObjectType,
    Relation,
    TopoObject,
)
from topo_cli.core.object_fetcher import GET_TIMEOUT_SECONDS, ObjectFetcher
from topo_cli.core.protocols import TopoConnector, TopoSession
from topo_cli.core.table import format_header, format_row

__all__: list[str] = [
    "GET_TIMEOUT_SECONDS",
    "ConnectionConfig",
    "Entity",
    "Kind",
    "ObjectFetcher",
    "ObjectType",
    "Relation",
    "TopoConnector",
    "TopoObject",
    "TopoSession",
    "format_header",
    "format_row",
]
