import pytest

from vertexgraph.config.settings import PersistentGraphConfig
from vertexgraph.errors import MissingId, VertexNotFound
from vertexgraph.persistent import PersistentGraph


def _underscore_id(vertex):
    if vertex.get("_id") is None:
        raise MissingId("no id can be determined for object")
    return vertex["_id"]


@pytest.fixture()
def g0() -> PersistentGraph:
    return PersistentGraph(PersistentGraphConfig(id_fn=_underscore_id))


def test_store_fetch_replace_and_remove(g0):
    with pytest.raises(MissingId, match="no id can be determined for object"):
        g0.put({})

    a0 = {"_id": 0, "value": 5}
    g1 = g0.put(a0)
    assert g0.get(0) is None
    assert g1.get(0) == a0

    with pytest.raises(VertexNotFound, match="vertex not in graph"):
        g0.replace({"_id": 5})

    a1 = {"_id": 0, "value": 10}
    g2 = g1.replace(a1)
    assert g0.get(0) is None
    assert g1.get(0) == a0
    assert g2.get(0) == a1

    with pytest.raises(VertexNotFound, match="vertex not in graph"):
        g2.remove({"_id": 5})

    g3 = g2.remove(a1)
    assert g0.get(0) is None
    assert g1.get(0) == a0
    assert g2.get(0) == a1
    assert g3.get(0) is None


def test_put_overwrites_existing_ids():
    g1 = PersistentGraph().put({"id": "a", "v": 1})
    g2 = g1.put({"id": "a", "v": 2})

    assert g1.get("a") == {"id": "a", "v": 1}
    assert g2.get("a") == {"id": "a", "v": 2}
    assert len(g2) == 1


def test_default_identity_reads_id_property():
    with pytest.raises(MissingId, match="no id can be determined for object"):
        PersistentGraph().put({"name": "nameless"})
    with pytest.raises(MissingId, match="no id can be determined for object"):
        PersistentGraph().put({"id": None})

    assert PersistentGraph().put({"id": "x"}).get("x") == {"id": "x"}


def test_vertex_operations_share_untouched_structure():
    g1 = PersistentGraph().put({"id": "a"}).put({"id": "b"})
    g1 = g1.create_edge({"id": "a"}, {"id": "b"})

    g2 = g1.put({"id": "c"})

    assert g2.outgoing_map is g1.outgoing_map
    assert g2.incoming_map is g1.incoming_map
    assert g2.vertex_map is not g1.vertex_map
    assert "c" not in g1
    assert "c" in g2


def test_edges_are_persistent():
    a, b, c = {"id": "a"}, {"id": "b"}, {"id": "c"}
    g1 = PersistentGraph().put(a).put(b).put(c)

    g2 = g1.create_edge(a, b).create_edge(c, b)
    g3 = g2.remove_edge(c, b)

    assert g1.get_outgoing(a) == []
    assert g2.get_outgoing(a) == [b]
    assert g2.get_incoming(b) == [a, c]
    assert g3.get_incoming(b) == [a]
    assert g3.get_outgoing(c) == []
    assert g2.has_edge(c, b)
    assert not g3.has_edge(c, b)


def test_edge_operations_validate_endpoints():
    a = {"id": "a"}
    g1 = PersistentGraph().put(a)

    with pytest.raises(VertexNotFound, match="no object 'b' in graph"):
        g1.create_edge(a, {"id": "b"})
    with pytest.raises(VertexNotFound, match="no object 'None' in graph"):
        g1.create_edge({}, a)

    assert g1.remove_edge(a, {"id": "b"}) is g1


def test_create_edge_is_idempotent():
    a, b = {"id": "a"}, {"id": "b"}
    g1 = PersistentGraph().put(a).put(b).create_edge(a, b)

    assert g1.create_edge(a, b) is g1
    assert g1.get_outgoing(a) == [b]


def test_remove_drops_incident_edges_in_new_value_only():
    a, b, c = {"id": "a"}, {"id": "b"}, {"id": "c"}
    g1 = (
        PersistentGraph()
        .put(a)
        .put(b)
        .put(c)
        .create_edge(a, b)
        .create_edge(b, c)
        .create_edge(b, b)
    )

    g2 = g1.remove(b)

    assert g2.get_outgoing(a) == []
    assert g2.get_incoming(c) == []
    assert "b" not in g2.outgoing_map
    assert "b" not in g2.incoming_map
    assert "a" not in g2.outgoing_map
    assert "c" not in g2.incoming_map
    assert g1.get_outgoing(b) == [c, b]
    assert g1.get_incoming(b) == [a, b]
