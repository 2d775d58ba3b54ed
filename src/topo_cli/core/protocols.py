"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — preserving the dependency inversion principle.
"""

from __future__ import annotations

from collections.abc import Sequence
from contextlib import AbstractContextManager
from typing import Protocol

from topo_cli.core.models import TopoObject


class TopoSession(Protocol):
    """An open connection to the topology service.

    Implementations must map all transport-specific exceptions to
    :class:`~topo_cli.exceptions.TopoCliError` subclasses.
    """

    def list_objects(self) -> Sequence[TopoObject]:
        """Issue one unfiltered ``List`` call.

        Returns the objects in the order the service sent them.

        Raises
        ------
        ListObjectsError
            When the remote call fails.
        """
        ...  # pragma: no cover

    def get_object(self, object_id: str, *, timeout: float) -> TopoObject | None:
        """Issue one ``Get`` call for *object_id*, bounded by *timeout* seconds.

        Raises
        ------
        GetTimeoutError
            When the deadline elapses.
        GetObjectError
            For any other remote failure, including unknown identifiers.
        """
        ...  # pragma: no cover


class TopoConnector(Protocol):
    """Factory for short-lived :class:`TopoSession` connections."""

    def connect(self) -> AbstractContextManager[TopoSession]:
        """Open a fresh connection; closing the context releases it.

        Raises
        ------
        ConnectionFailedError
            When the transport cannot be set up.
        """
        ...  # pragma: no cover
