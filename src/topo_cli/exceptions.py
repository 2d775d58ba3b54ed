"""Custom exception hierarchy for topo-cli.

All exceptions that cross layer boundaries must inherit from
:class:`TopoCliError`.  Raw third-party exceptions (e.g. ``grpc.RpcError``)
must NEVER propagate beyond the infrastructure layer — they must be
caught and re-raised as a typed subclass defined here.

Hierarchy
---------
TopoCliError
├── ConnectionFailedError
├── ListObjectsError
├── GetObjectError
│   └── GetTimeoutError
└── EnvironmentError
"""

from __future__ import annotations


class TopoCliError(Exception):
    """Base exception for all topo-cli errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        detail: str | None = None,
    ) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""

        self.detail: str | None = detail
        """Underlying error text reported by the transport, if any."""


# --- Transport -------------------------------------------------------------

class ConnectionFailedError(TopoCliError):
    """Raised when a connection to the topology service cannot be set up."""


# --- Remote calls ----------------------------------------------------------

class ListObjectsError(TopoCliError):
    """Raised when the remote ``List`` call fails."""


class GetObjectError(TopoCliError):
    """Raised when the remote ``Get`` call fails for an identifier."""


class GetTimeoutError(GetObjectError):
    """Raised when the remote ``Get`` call exceeds its deadline."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(TopoCliError):
    """Raised when a required runtime dependency is not available."""


def service_address_hint(address: str) -> str:
    """Return guidance for reaching the topology service at *address*."""
    return "\n".join(
        (
            f"Check that the topology service is reachable at {address}.",
            "Use --service-address to point at a different endpoint.",
        )
    )
