"""Wire messages for the ``onos.topo`` gRPC API.

The message classes are assembled at runtime from a hand-declared
``FileDescriptorProto`` so the client needs no generated code.  Only the
messages and fields this client reads or sends are declared; unknown
fields sent by the service are skipped by the protobuf runtime.

This module and :mod:`topo_cli.infra.grpc_topo` are the only places in
the codebase that import ``google.protobuf``.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import Any

from topo_cli.core.models import Entity, Kind, ObjectType, Relation, TopoObject, Variant
from topo_cli.exceptions import EnvironmentError

PROTO_PACKAGE: str = "onos.topo"
PROTO_FILE: str = "onos/topo/topo.proto"
ANY_PROTO_FILE: str = "google/protobuf/any.proto"


def _import_protobuf() -> tuple[Any, Any, Any, Any]:
    """Import protobuf lazily; raise ``EnvironmentError`` if missing."""
    try:
        from google.protobuf import any_pb2, descriptor_pb2, descriptor_pool, message_factory
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "protobuf is not installed. Install with: pip install protobuf",
        ) from exc
    return any_pb2, descriptor_pb2, descriptor_pool, message_factory


# ---------------------------------------------------------------------------
# Descriptor declaration
# ---------------------------------------------------------------------------

def build_file_proto(descriptor_pb2: Any) -> Any:
    """Declare the subset of ``onos/topo/topo.proto`` used by this client."""
    field_proto = descriptor_pb2.FieldDescriptorProto
    string = field_proto.TYPE_STRING
    message = field_proto.TYPE_MESSAGE

    file_proto = descriptor_pb2.FileDescriptorProto(
        name=PROTO_FILE,
        package=PROTO_PACKAGE,
        syntax="proto3",
        dependency=[ANY_PROTO_FILE],
    )

    def add_field(
        owner: Any,
        name: str,
        number: int,
        field_type: int,
        *,
        type_name: str | None = None,
        repeated: bool = False,
        oneof_index: int | None = None,
    ) -> None:
        label = field_proto.LABEL_REPEATED if repeated else field_proto.LABEL_OPTIONAL
        fld = owner.field.add(name=name, number=number, type=field_type, label=label)
        if type_name is not None:
            fld.type_name = type_name
        if oneof_index is not None:
            fld.oneof_index = oneof_index

    entity = file_proto.message_type.add(name="Entity")
    add_field(entity, "kind_id", 1, string)

    relation = file_proto.message_type.add(name="Relation")
    add_field(relation, "kind_id", 1, string)
    add_field(relation, "src_entity_id", 2, string)
    add_field(relation, "tgt_entity_id", 3, string)

    kind = file_proto.message_type.add(name="Kind")
    add_field(kind, "name", 1, string)

    obj = file_proto.message_type.add(name="Object")
    type_enum = obj.enum_type.add(name="Type")
    for member in ObjectType:
        type_enum.value.add(name=member.name, number=member.value)
    obj.oneof_decl.add(name="obj")
    aspects_entry = obj.nested_type.add(name="AspectsEntry")
    aspects_entry.options.map_entry = True
    add_field(aspects_entry, "key", 1, string)
    add_field(aspects_entry, "value", 2, message, type_name=".google.protobuf.Any")

    add_field(obj, "id", 1, string)
    add_field(obj, "revision", 2, field_proto.TYPE_UINT64)
    add_field(obj, "type", 3, field_proto.TYPE_ENUM, type_name=".onos.topo.Object.Type")
    add_field(obj, "entity", 4, message, type_name=".onos.topo.Entity", oneof_index=0)
    add_field(obj, "relation", 5, message, type_name=".onos.topo.Relation", oneof_index=0)
    add_field(obj, "kind", 6, message, type_name=".onos.topo.Kind", oneof_index=0)
    add_field(
        obj, "aspects", 7, message,
        type_name=".onos.topo.Object.AspectsEntry",
        repeated=True,
    )

    get_request = file_proto.message_type.add(name="GetRequest")
    add_field(get_request, "id", 1, string)

    get_response = file_proto.message_type.add(name="GetResponse")
    add_field(get_response, "object", 1, message, type_name=".onos.topo.Object")

    file_proto.message_type.add(name="ListRequest")

    list_response = file_proto.message_type.add(name="ListResponse")
    add_field(
        list_response, "objects", 1, message,
        type_name=".onos.topo.Object",
        repeated=True,
    )

    return file_proto


# ---------------------------------------------------------------------------
# Message classes
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class TopoMessages:
    """Concrete protobuf message classes for the topology API."""

    Object: Any
    GetRequest: Any
    GetResponse: Any
    ListRequest: Any
    ListResponse: Any


@functools.lru_cache(maxsize=1)
def load_topo_messages() -> TopoMessages:
    """Build (once) and return the topology message classes."""
    any_pb2, descriptor_pb2, descriptor_pool, message_factory = _import_protobuf()

    pool = descriptor_pool.DescriptorPool()
    pool.AddSerializedFile(any_pb2.DESCRIPTOR.serialized_pb)
    pool.AddSerializedFile(build_file_proto(descriptor_pb2).SerializeToString())

    def message_class(name: str) -> Any:
        descriptor = pool.FindMessageTypeByName(f"{PROTO_PACKAGE}.{name}")
        return message_factory.GetMessageClass(descriptor)

    return TopoMessages(
        Object=message_class("Object"),
        GetRequest=message_class("GetRequest"),
        GetResponse=message_class("GetResponse"),
        ListRequest=message_class("ListRequest"),
        ListResponse=message_class("ListResponse"),
    )


# ---------------------------------------------------------------------------
# Wire → domain conversion (pure)
# ---------------------------------------------------------------------------

def object_from_proto(message: Any) -> TopoObject:
    """Convert an ``onos.topo.Object`` message into a :class:`TopoObject`."""
    variant: Variant | None = None
    which = message.WhichOneof("obj")
    if which == "entity":
        variant = Entity(kind_id=message.entity.kind_id)
    elif which == "relation":
        variant = Relation(
            kind_id=message.relation.kind_id,
            src_entity_id=message.relation.src_entity_id,
            tgt_entity_id=message.relation.tgt_entity_id,
        )
    elif which == "kind":
        variant = Kind(name=message.kind.name)

    aspects = {
        aspect_type: bytes(aspect.value)
        for aspect_type, aspect in message.aspects.items()
    }
    return TopoObject(
        id=message.id,
        type=ObjectType.from_wire(message.type),
        variant=variant,
        aspects=aspects,
    )
