"""Core object fetcher — uniform access to the two remote operations.

This service depends on a :class:`~topo_cli.core.protocols.TopoConnector`
injected at construction time (dependency inversion), keeping the core
free of any gRPC imports.

Guarantees
----------
* Every operation opens its own connection and closes it on every exit
  path, errors included.
* Exactly one remote call per operation — no retries, no caching, no
  pagination.
* Only :class:`~topo_cli.exceptions.TopoCliError` subclasses escape.
"""

from __future__ import annotations

from topo_cli.core.models import TopoObject
from topo_cli.core.protocols import TopoConnector
from topo_cli.exceptions import (
    ConnectionFailedError,
    EnvironmentError,
    GetObjectError,
    ListObjectsError,
    TopoCliError,
)

GET_TIMEOUT_SECONDS: float = 15.0
"""Deadline applied to single-object lookups."""


class ObjectFetcher:
    """Stateless wrapper around the ``List`` and ``Get`` remote calls.

    Parameters
    ----------
    connector:
        Any object satisfying the :class:`TopoConnector` protocol.
    """

    def __init__(self, connector: TopoConnector) -> None:
        self._connector: TopoConnector = connector

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def list_all(self) -> list[TopoObject]:
        """Fetch every object the service knows about, in service order.

        Raises
        ------
        ConnectionFailedError
            If the connection cannot be established.
        ListObjectsError
            If the ``List`` call fails.
        """
        try:
            with self._connector.connect() as session:
                return list(session.list_objects())
        except (ConnectionFailedError, EnvironmentError, ListObjectsError):
            raise
        except TopoCliError as exc:
            raise ListObjectsError(str(exc), hint=exc.hint, detail=exc.detail) from exc
        except Exception as exc:
            raise ListObjectsError(
                "Failed to list objects.",
                detail=f"Unexpected transport error: {exc}",
            ) from exc

    def get_by_id(self, object_id: str) -> TopoObject | None:
        """Fetch a single object by identifier.

        Raises
        ------
        ConnectionFailedError
            If the connection cannot be established.
        GetObjectError
            If the ``Get`` call fails or exceeds :data:`GET_TIMEOUT_SECONDS`.
        """
        try:
            with self._connector.connect() as session:
                return session.get_object(object_id, timeout=GET_TIMEOUT_SECONDS)
        except (ConnectionFailedError, EnvironmentError, GetObjectError):
            raise
        except TopoCliError as exc:
            raise GetObjectError(str(exc), hint=exc.hint, detail=exc.detail) from exc
        except Exception as exc:
            raise GetObjectError(
                f"Failed to get object '{object_id}'.",
                detail=f"Unexpected transport error: {exc}",
            ) from exc
