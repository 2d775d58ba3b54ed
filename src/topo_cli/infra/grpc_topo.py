"""gRPC backed implementation of :class:`~topo_cli.core.protocols.TopoConnector`.

This module is the **only** place in the codebase that imports ``grpc``.
All ``grpc.RpcError`` exceptions are caught here and re-raised as typed
:class:`~topo_cli.exceptions.TopoCliError` subclasses — nothing raw
escapes the infrastructure boundary.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from topo_cli.core.models import ConnectionConfig, TopoObject
from topo_cli.exceptions import (
    ConnectionFailedError,
    EnvironmentError,
    GetObjectError,
    GetTimeoutError,
    ListObjectsError,
    service_address_hint,
)
from topo_cli.infra.topo_proto import TopoMessages, load_topo_messages, object_from_proto

LIST_METHOD: str = "/onos.topo.Topo/List"
GET_METHOD: str = "/onos.topo.Topo/Get"


def _import_grpc() -> Any:
    """Import grpc lazily; raise ``EnvironmentError`` if missing."""
    try:
        import grpc
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "grpcio is not installed. Install with: pip install grpcio",
        ) from exc
    return grpc


def _rpc_code(exc: Exception) -> Any:
    code = getattr(exc, "code", None)
    return code() if callable(code) else None


def _rpc_detail(exc: Exception) -> str:
    details = getattr(exc, "details", None)
    text = details() if callable(details) else None
    return str(text) if text else str(exc)


# ---------------------------------------------------------------------------
# Session
# ---------------------------------------------------------------------------

class GrpcTopoSession:
    """One open channel to the topology service.

    Usage::

        with GrpcTopoConnector(config).connect() as session:
            objects = session.list_objects()

    Leaving the ``with`` block closes the channel, whether or not the
    call succeeded.
    """

    def __init__(self, channel: Any, messages: TopoMessages, address: str) -> None:
        self._channel: Any = channel
        self._messages: TopoMessages = messages
        self._address: str = address

    # ------------------------------------------------------------------
    # Context manager
    # ------------------------------------------------------------------

    def __enter__(self) -> GrpcTopoSession:
        return self

    def __exit__(self, *_args: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying channel."""
        self._channel.close()

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    def list_objects(self) -> list[TopoObject]:
        """Issue an unfiltered ``List`` call.

        Raises
        ------
        ListObjectsError
            For any gRPC failure.
        """
        grpc = _import_grpc()
        call = self._channel.unary_unary(
            LIST_METHOD,
            request_serializer=self._messages.ListRequest.SerializeToString,
            response_deserializer=self._messages.ListResponse.FromString,
        )
        try:
            response = call(self._messages.ListRequest())
        except grpc.RpcError as exc:
            raise ListObjectsError(
                "Failed to list objects.",
                hint=service_address_hint(self._address),
                detail=_rpc_detail(exc),
            ) from exc
        return [object_from_proto(message) for message in response.objects]

    def get_object(self, object_id: str, *, timeout: float) -> TopoObject | None:
        """Issue a ``Get`` call for *object_id* with a *timeout* second deadline.

        Raises
        ------
        GetTimeoutError
            When the deadline elapses.
        GetObjectError
            For any other gRPC failure.
        """
        grpc = _import_grpc()
        call = self._channel.unary_unary(
            GET_METHOD,
            request_serializer=self._messages.GetRequest.SerializeToString,
            response_deserializer=self._messages.GetResponse.FromString,
        )
        try:
            response = call(self._messages.GetRequest(id=object_id), timeout=timeout)
        except grpc.RpcError as exc:
            self._raise_mapped(grpc, exc, object_id, timeout)

        if not response.HasField("object"):
            return None
        return object_from_proto(response.object)

    # ------------------------------------------------------------------
    # Exception mapping
    # ------------------------------------------------------------------

    def _raise_mapped(
        self,
        grpc: Any,
        exc: Exception,
        object_id: str,
        timeout: float,
    ) -> None:
        """Translate a ``grpc.RpcError`` from ``Get`` into a domain exception.

        Always raises.
        """
        code = _rpc_code(exc)
        detail = _rpc_detail(exc)
        if code == grpc.StatusCode.DEADLINE_EXCEEDED:
            raise GetTimeoutError(
                f"Timed out after {timeout:g}s getting object '{object_id}'.",
                hint=service_address_hint(self._address),
                detail=detail,
            ) from exc
        if code == grpc.StatusCode.NOT_FOUND:
            raise GetObjectError(
                f"Object '{object_id}' not found.",
                hint="Run the command without an ID to list known objects.",
                detail=detail,
            ) from exc
        raise GetObjectError(
            f"Failed to get object '{object_id}'.",
            hint=service_address_hint(self._address),
            detail=detail,
        ) from exc


# ---------------------------------------------------------------------------
# Connector
# ---------------------------------------------------------------------------

class GrpcTopoConnector:
    """Concrete :class:`TopoConnector` that opens one gRPC channel per call.

    This class satisfies the :class:`~topo_cli.core.protocols.TopoConnector`
    protocol structurally — no explicit inheritance required.
    """

    def __init__(self, config: ConnectionConfig) -> None:
        self._config: ConnectionConfig = config

    def connect(self) -> GrpcTopoSession:
        """Open a channel to the configured service address.

        Raises
        ------
        ConnectionFailedError
            When the address is empty, TLS material cannot be read, or
            the channel cannot be created.
        """
        grpc = _import_grpc()
        messages = load_topo_messages()
        channel = self._open_channel(grpc)
        return GrpcTopoSession(channel, messages, self._config.address)

    def _open_channel(self, grpc: Any) -> Any:
        address = self._config.address.strip()
        if not address:
            raise ConnectionFailedError(
                "Service address must not be empty.",
                hint="Pass --service-address host:port.",
            )

        try:
            if self._config.no_tls:
                return grpc.insecure_channel(address)
            credentials = grpc.ssl_channel_credentials(
                private_key=self._read_pem(self._config.tls_key_path),
                certificate_chain=self._read_pem(self._config.tls_cert_path),
            )
            return grpc.secure_channel(address, credentials)
        except ConnectionFailedError:
            raise
        except Exception as exc:
            raise ConnectionFailedError(
                f"Could not open a channel to {address}.",
                hint=service_address_hint(address),
                detail=str(exc),
            ) from exc

    @staticmethod
    def _read_pem(path: str | None) -> bytes | None:
        """Read a PEM file, or return ``None`` when no path is configured."""
        if not path:
            return None
        try:
            return Path(path).expanduser().read_bytes()
        except OSError as exc:
            raise ConnectionFailedError(
                f"Cannot read TLS file {path}.",
                hint="Check --tls-cert-path / --tls-key-path, or pass --no-tls.",
                detail=str(exc),
            ) from exc
