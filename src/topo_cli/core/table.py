"""Header and row formatters for ``topo get`` output.

Every function in this module is a **pure** transformation — no I/O,
no side effects.  Layouts are expressed as column lists and rendered
through :mod:`topo_cli.core.columns`, so the header and the rows for a
given object type always agree on column order and width.

Header layout (two physical lines, by design):

* ENTITY   — ``Object Type | Entity ID`` / ``Kind ID``
* RELATION — ``Object Type | Relation ID`` / ``Kind ID | Source ID | Target ID``
* KIND     — ``Object Type | Kind ID`` / ``Name``
"""

from __future__ import annotations

from topo_cli.core.aspects import render_aspects
from topo_cli.core.columns import join_fields
from topo_cli.core.models import ObjectType, TopoObject

ASPECTS_HEADER: str = "Aspects"

HEADER_COLUMNS: dict[ObjectType, tuple[tuple[str, ...], tuple[str, ...]]] = {
    ObjectType.ENTITY: (
        ("Object Type", "Entity ID"),
        ("Kind ID",),
    ),
    ObjectType.RELATION: (
        ("Object Type", "Relation ID"),
        ("Kind ID", "Source ID", "Target ID"),
    ),
    ObjectType.KIND: (
        ("Object Type", "Kind ID"),
        ("Name",),
    ),
}


# ---------------------------------------------------------------------------
# Header
# ---------------------------------------------------------------------------

def format_header(object_type: ObjectType, verbose: bool) -> str:
    """Render the header block for *object_type*.

    In compact mode the block ends with a tab-separated ``Aspects``
    column; in verbose mode aspects are listed under each row instead,
    so the block simply ends the line.
    """
    text = ""
    layout = HEADER_COLUMNS.get(object_type)
    if layout is not None:
        first, second = layout
        text = join_fields(first) + "\n" + join_fields(second)

    if verbose:
        return text + "\n"
    return text + f"\t{ASPECTS_HEADER}\n"


# ---------------------------------------------------------------------------
# Rows
# ---------------------------------------------------------------------------

def row_fields(obj: TopoObject) -> list[str]:
    """Return the fixed column values of *obj*, in header order."""
    if obj.type is ObjectType.ENTITY:
        return [str(obj.type), obj.id, obj.kind_id]
    if obj.type is ObjectType.RELATION:
        return [
            str(obj.type),
            obj.id,
            obj.kind_id,
            obj.src_entity_id,
            obj.tgt_entity_id,
        ]
    if obj.type is ObjectType.KIND:
        return [str(obj.type), obj.id, obj.name]
    return []


def format_row(obj: TopoObject, verbose: bool) -> str:
    """Render one object as a fixed-width row followed by its aspects.

    Objects with an unrecognised type tag degrade to a bare newline.
    """
    fields = row_fields(obj)
    if not fields:
        return "\n"

    row = join_fields(fields)
    if verbose:
        row += "\n"
    return row + render_aspects(obj, verbose)
