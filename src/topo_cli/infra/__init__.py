"""Infrastructure layer — gRPC transport to the topology service.

Every raw ``grpc`` / ``protobuf`` exception must be caught here and
re-raised as a :class:`~topo_cli.exceptions.TopoCliError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output.
* ``grpc`` and ``google.protobuf`` are imported lazily, inside functions.
"""

from topo_cli.infra.grpc_topo import GrpcTopoConnector, GrpcTopoSession
from topo_cli.infra.topo_proto import load_topo_messages, object_from_proto

__all__: list[str] = [
    "GrpcTopoConnector",
    "GrpcTopoSession",
    "load_topo_messages",
    "object_from_proto",
]
