"""Domain models for topo-cli.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  They carry zero I/O, zero dependencies on
external packages, and are discarded at the end of each invocation.

A :class:`TopoObject` is a tagged union: its :class:`ObjectType` alone
decides which variant payload is active.  Field accessors for inactive
variants return an empty string rather than raising.
"""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


# ---------------------------------------------------------------------------
# Object type tag
# ---------------------------------------------------------------------------

class ObjectType(enum.IntEnum):
    """Discriminator for topology objects, matching the wire enum values."""

    UNSPECIFIED = 0
    ENTITY = 1
    RELATION = 2
    KIND = 3

    @classmethod
    def from_wire(cls, value: int) -> ObjectType:
        """Map a raw wire value to a member, ``UNSPECIFIED`` if unknown."""
        try:
            return cls(value)
        except ValueError:
            return cls.UNSPECIFIED

    def __str__(self) -> str:
        return self.name


# ---------------------------------------------------------------------------
# Variant payloads
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Entity:
    """Node-like resource."""

    kind_id: str = ""
    """Identifier of the :class:`Kind` this entity belongs to (not validated)."""


@dataclass(frozen=True, slots=True)
class Relation:
    """Directed edge between two entities."""

    kind_id: str = ""
    src_entity_id: str = ""
    tgt_entity_id: str = ""


@dataclass(frozen=True, slots=True)
class Kind:
    """Type definition referenced by entities and relations."""

    name: str = ""


Variant = Entity | Relation | Kind


def _frozen_aspects(aspects: Mapping[str, bytes] | None) -> Mapping[str, bytes]:
    return MappingProxyType(dict(aspects or {}))


# ---------------------------------------------------------------------------
# Topology object
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class TopoObject:
    """Snapshot of one topology object as returned by the service."""

    id: str
    """Unique object identifier."""

    type: ObjectType
    """Type tag selecting the active variant."""

    variant: Variant | None = None
    """Variant payload; only honoured when it agrees with :attr:`type`."""

    aspects: Mapping[str, bytes] = field(default_factory=dict)
    """Aspect type name → opaque payload.  Iteration order is unspecified."""

    def __post_init__(self) -> None:
        object.__setattr__(self, "type", ObjectType.from_wire(int(self.type)))
        object.__setattr__(self, "aspects", _frozen_aspects(self.aspects))

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def new_entity(
        cls,
        object_id: str,
        kind_id: str = "",
        aspects: Mapping[str, bytes] | None = None,
    ) -> TopoObject:
        return cls(object_id, ObjectType.ENTITY, Entity(kind_id), _frozen_aspects(aspects))

    @classmethod
    def new_relation(
        cls,
        object_id: str,
        kind_id: str = "",
        src_entity_id: str = "",
        tgt_entity_id: str = "",
        aspects: Mapping[str, bytes] | None = None,
    ) -> TopoObject:
        return cls(
            object_id,
            ObjectType.RELATION,
            Relation(kind_id, src_entity_id, tgt_entity_id),
            _frozen_aspects(aspects),
        )

    @classmethod
    def new_kind(
        cls,
        object_id: str,
        name: str = "",
        aspects: Mapping[str, bytes] | None = None,
    ) -> TopoObject:
        return cls(object_id, ObjectType.KIND, Kind(name), _frozen_aspects(aspects))

    # ------------------------------------------------------------------
    # Variant accessors
    # ------------------------------------------------------------------

    @property
    def entity(self) -> Entity | None:
        if self.type is ObjectType.ENTITY and isinstance(self.variant, Entity):
            return self.variant
        return None

    @property
    def relation(self) -> Relation | None:
        if self.type is ObjectType.RELATION and isinstance(self.variant, Relation):
            return self.variant
        return None

    @property
    def kind(self) -> Kind | None:
        if self.type is ObjectType.KIND and isinstance(self.variant, Kind):
            return self.variant
        return None

    # ------------------------------------------------------------------
    # Field accessors (empty string outside the active variant)
    # ------------------------------------------------------------------

    @property
    def kind_id(self) -> str:
        payload = self.entity or self.relation
        return payload.kind_id if payload is not None else ""

    @property
    def src_entity_id(self) -> str:
        relation = self.relation
        return relation.src_entity_id if relation is not None else ""

    @property
    def tgt_entity_id(self) -> str:
        relation = self.relation
        return relation.tgt_entity_id if relation is not None else ""

    @property
    def name(self) -> str:
        kind = self.kind
        return kind.name if kind is not None else ""


# ---------------------------------------------------------------------------
# Connection settings
# ---------------------------------------------------------------------------

DEFAULT_SERVICE_ADDRESS: str = "onos-topo:5150"


@dataclass(frozen=True, slots=True)
class ConnectionConfig:
    """Where and how to reach the topology service."""

    address: str = DEFAULT_SERVICE_ADDRESS
    """``host:port`` of the topology gRPC endpoint."""

    tls_cert_path: str | None = None
    """Client certificate chain (PEM) for mutual TLS, or ``None``."""

    tls_key_path: str | None = None
    """Client private key (PEM) for mutual TLS, or ``None``."""

    no_tls: bool = False
    """Use a plaintext channel instead of TLS."""
