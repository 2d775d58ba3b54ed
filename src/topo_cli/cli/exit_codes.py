"""Process exit codes returned by ``topo``.

A failed ``List`` is not an error (the table is simply empty), so it
exits with :data:`SUCCESS`; a failed ``Get`` exits with
:data:`GENERAL_ERROR`.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Command completed, possibly with an empty table."""

GENERAL_ERROR: int = 1
"""A :class:`~topo_cli.exceptions.TopoCliError` was rendered to stderr."""

UNEXPECTED_ERROR: int = 2
"""An exception outside the topo-cli hierarchy reached the boundary."""

KEYBOARD_INTERRUPT: int = 130
"""Interrupted with Ctrl+C (128 + SIGINT)."""
