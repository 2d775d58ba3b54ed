"""``topo get entity|relation|kind`` — the get dispatcher.

Drives the header formatter, the object fetcher, and the row formatter
in sequence, writing table text to a single output stream.

Two lookup paths exist:

* **No ID** — one ``List`` call, then a client-side filter on the
  requested object type.  Objects are printed in the order received.
  A failed ``List`` is treated as an empty result and the command still
  succeeds.
* **ID given** — one ``Get`` call.  Failures propagate to the caller.
  An object of a different type than requested prints nothing.

The asymmetry between the two failure modes mirrors the established
behaviour of this command and is kept deliberately.
"""

from __future__ import annotations

import sys
from typing import TextIO

from topo_cli.cli import exit_codes
from topo_cli.core.models import ObjectType, TopoObject
from topo_cli.core.object_fetcher import ObjectFetcher
from topo_cli.core.table import format_header, format_row
from topo_cli.exceptions import ListObjectsError

SUBCOMMANDS: dict[ObjectType, tuple[str, str, str]] = {
    ObjectType.ENTITY: ("entity", "entities", "Get Entity"),
    ObjectType.RELATION: ("relation", "relations", "Get Relation"),
    ObjectType.KIND: ("kind", "kinds", "Get Kind"),
}
"""Object type → (command name, alias, short help)."""


def _fetch_matching(
    fetcher: ObjectFetcher,
    object_type: ObjectType,
    object_id: str | None,
) -> list[TopoObject]:
    if object_id is None:
        try:
            objects = fetcher.list_all()
        except ListObjectsError:
            return []
        return [obj for obj in objects if obj.type is object_type]

    obj = fetcher.get_by_id(object_id)
    if obj is not None and obj.type is object_type:
        return [obj]
    return []


def run_get(
    object_type: ObjectType,
    object_id: str | None,
    *,
    no_headers: bool,
    verbose: bool,
    fetcher: ObjectFetcher,
    out: TextIO | None = None,
) -> int:
    """Print the objects of *object_type*, optionally a single one by ID.

    Parameters
    ----------
    object_type:
        Type filter selected by the subcommand.
    object_id:
        Identifier to look up, or ``None`` to list every object.
    no_headers:
        Suppress the header block.
    verbose:
        Print aspects as ``type=value`` lines instead of a name list.
    fetcher:
        Object fetcher bound to the topology service.
    out:
        Output stream; defaults to ``sys.stdout``.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS`.

    Raises
    ------
    GetObjectError
        If the single-object lookup fails.
    ConnectionFailedError
        If the service cannot be reached.
    """
    stream = out if out is not None else sys.stdout

    if not no_headers:
        stream.write(format_header(object_type, verbose))

    for obj in _fetch_matching(fetcher, object_type, object_id):
        stream.write(format_row(obj, verbose))

    stream.flush()
    return exit_codes.SUCCESS
