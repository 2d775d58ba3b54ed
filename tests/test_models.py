"""Tests for domain models (core/models.py).

Covers the tagged-union accessors: a field that does not belong to the
active variant must read as an empty string, never raise.
"""

from __future__ import annotations

import typing

import pytest

from topo_cli.core.models import (
    DEFAULT_SERVICE_ADDRESS,
    ConnectionConfig,
    Entity,
    Kind,
    ObjectType,
    Relation,
    TopoObject,
    Variant,
)


# ---------------------------------------------------------------------------
# ObjectType
# ---------------------------------------------------------------------------

class TestObjectType:
    def test_wire_values(self) -> None:
        assert ObjectType.UNSPECIFIED == 0
        assert ObjectType.ENTITY == 1
        assert ObjectType.RELATION == 2
        assert ObjectType.KIND == 3

    def test_str_is_name(self) -> None:
        assert str(ObjectType.RELATION) == "RELATION"

    def test_from_wire_known(self) -> None:
        assert ObjectType.from_wire(3) is ObjectType.KIND

    def test_from_wire_unknown_is_unspecified(self) -> None:
        assert ObjectType.from_wire(42) is ObjectType.UNSPECIFIED


# ---------------------------------------------------------------------------
# Variant accessors
# ---------------------------------------------------------------------------

class TestEntityAccessors:
    def test_fields(self, entity: TopoObject) -> None:
        assert entity.type is ObjectType.ENTITY
        assert entity.entity == Entity(kind_id="k1")
        assert entity.kind_id == "k1"

    def test_foreign_fields_are_empty(self, entity: TopoObject) -> None:
        assert entity.relation is None
        assert entity.kind is None
        assert entity.src_entity_id == ""
        assert entity.tgt_entity_id == ""
        assert entity.name == ""


class TestRelationAccessors:
    def test_fields(self, relation: TopoObject) -> None:
        assert relation.relation == Relation("k2", "e1", "e2")
        assert relation.kind_id == "k2"
        assert relation.src_entity_id == "e1"
        assert relation.tgt_entity_id == "e2"

    def test_foreign_fields_are_empty(self, relation: TopoObject) -> None:
        assert relation.entity is None
        assert relation.name == ""


class TestKindAccessors:
    def test_fields(self, kind: TopoObject) -> None:
        assert kind.kind == Kind(name="switch")
        assert kind.name == "switch"

    def test_foreign_fields_are_empty(self, kind: TopoObject) -> None:
        assert kind.kind_id == ""
        assert kind.src_entity_id == ""


class TestTypeTagDecidesVariant:
    def test_mismatched_payload_is_ignored(self) -> None:
        obj = TopoObject("x", ObjectType.ENTITY, Relation("k", "a", "b"))
        assert obj.entity is None
        assert obj.relation is None
        assert obj.kind_id == ""
        assert obj.src_entity_id == ""

    def test_missing_payload(self) -> None:
        obj = TopoObject("x", ObjectType.KIND)
        assert obj.kind is None
        assert obj.name == ""

    def test_unspecified_type_has_no_variant(self) -> None:
        obj = TopoObject("x", ObjectType.UNSPECIFIED, Entity("k"))
        assert obj.entity is None
        assert obj.kind_id == ""

    def test_variant_alias_covers_all_payloads(self) -> None:
        assert set(typing.get_args(Variant)) == {Entity, Relation, Kind}


# ---------------------------------------------------------------------------
# Aspects and immutability
# ---------------------------------------------------------------------------

class TestAspects:
    def test_absent_aspects_are_empty(self) -> None:
        assert dict(TopoObject.new_entity("e1").aspects) == {}
        assert dict(TopoObject.new_kind("k1", aspects=None).aspects) == {}

    def test_aspects_are_read_only(self, relation: TopoObject) -> None:
        with pytest.raises(TypeError):
            relation.aspects["new"] = b"x"  # type: ignore[index]

    def test_source_mapping_is_copied(self) -> None:
        source = {"a": b"1"}
        obj = TopoObject.new_entity("e1", aspects=source)
        source["b"] = b"2"
        assert set(obj.aspects) == {"a"}


class TestImmutability:
    def test_frozen(self, entity: TopoObject) -> None:
        with pytest.raises(AttributeError):
            entity.id = "changed"  # type: ignore[misc]

    def test_equality(self) -> None:
        a = TopoObject.new_entity("e1", "k1", {"x": b"1"})
        b = TopoObject.new_entity("e1", "k1", {"x": b"1"})
        assert a == b


# ---------------------------------------------------------------------------
# ConnectionConfig
# ---------------------------------------------------------------------------

class TestConnectionConfig:
    def test_defaults(self) -> None:
        config = ConnectionConfig()
        assert config.address == DEFAULT_SERVICE_ADDRESS == "onos-topo:5150"
        assert config.tls_cert_path is None
        assert config.tls_key_path is None
        assert config.no_tls is False
