"""Shared pytest fixtures and configuration for the topo-cli test suite.

Guidelines
----------
* No network access in any test.
* The topology service is faked at the connector/session boundary.
* Aspect maps are unordered: compare aspect output as sets, never by
  position.
"""

from __future__ import annotations

import pytest

from topo_cli.core.models import TopoObject


@pytest.fixture()
def entity() -> TopoObject:
    return TopoObject.new_entity("e1", kind_id="k1")


@pytest.fixture()
def relation() -> TopoObject:
    return TopoObject.new_relation(
        "r1",
        kind_id="k2",
        src_entity_id="e1",
        tgt_entity_id="e2",
        aspects={"onos.topo.A": b"v"},
    )


@pytest.fixture()
def kind() -> TopoObject:
    return TopoObject.new_kind("k1", name="switch")
