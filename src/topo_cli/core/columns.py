"""Fixed-width column writer shared by header and row layouts.

Every field is left-justified to :data:`FIELD_WIDTH` characters and
truncated to :data:`FIELD_PRECISION` characters, so a field never runs
into its neighbour.  Content that does not fit is cut, never wrapped.
"""

from __future__ import annotations

from collections.abc import Iterable

FIELD_WIDTH: int = 16
FIELD_PRECISION: int = 15


def pad_truncate(
    value: object,
    width: int = FIELD_WIDTH,
    precision: int = FIELD_PRECISION,
) -> str:
    """Render *value* as one field: at most *precision* characters, padded to *width*."""
    return str(value)[:precision].ljust(width)


def join_fields(
    values: Iterable[object],
    width: int = FIELD_WIDTH,
    precision: int = FIELD_PRECISION,
) -> str:
    """Concatenate *values* as consecutive fixed-width fields."""
    return "".join(pad_truncate(value, width, precision) for value in values)
