"""Aspect rendering for the trailing table column.

Aspects are opaque payloads keyed by aspect type name.  Their iteration
order is whatever the mapping yields and is **not** part of the output
contract: callers must not rely on it being sorted or stable.
"""

from __future__ import annotations

from topo_cli.core.models import TopoObject


def aspect_text(payload: bytes) -> str:
    """Decode an aspect payload for display (UTF-8, invalid bytes replaced)."""
    return bytes(payload).decode("utf-8", errors="replace")


def aspect_list(obj: TopoObject) -> str:
    """Return the comma-joined aspect type names of *obj* (``""`` if none)."""
    return ",".join(obj.aspects)


def render_aspects(obj: TopoObject, verbose: bool) -> str:
    """Render the aspect section that follows an object's fixed columns.

    Verbose mode yields one ``\\t<type>=<value>`` line per aspect; the
    compact mode yields a single ``\\t<type>,<type>...`` line.
    """
    if verbose:
        return "".join(
            f"\t{aspect_type}={aspect_text(payload)}\n"
            for aspect_type, payload in obj.aspects.items()
        )
    return f"\t{aspect_list(obj)}\n"
