from vertexgraph.graph.graph_schema import Edge
from vertexgraph.graph.graph_store import VertexStore


def _store_with(*ids):
    store = VertexStore()
    for vertex_id in ids:
        store.add_vertex(vertex_id, {"id": vertex_id})
    return store


def test_adjacency_is_ordered_and_symmetric():
    store = _store_with("a", "b", "c")

    store.add_edge("c", "b")
    store.add_edge("a", "b")
    store.add_edge("a", "c")

    assert store.outgoing("a") == ["b", "c"]
    assert store.incoming("b") == ["c", "a"]
    assert store.incoming("c") == ["a"]
    assert store.outgoing("missing") == []


def test_duplicate_edges_are_not_added_twice():
    store = _store_with("a", "b")

    assert store.add_edge("a", "b") is True
    assert store.add_edge("a", "b") is False
    assert store.outgoing("a") == ["b"]
    assert store.edge_count() == 1


def test_removing_a_vertex_prunes_incident_edges():
    store = _store_with("a", "b", "c")
    store.add_edge("a", "b")
    store.add_edge("b", "c")

    store.remove_vertex("b")

    assert store.outgoing("a") == []
    assert store.incoming("c") == []
    assert store.edge_count() == 0
    assert store.get_vertex("b") is None


def test_edges_are_listed_in_insertion_order():
    store = _store_with("a", "b", "c")
    store.add_edge("b", "c")
    store.add_edge("a", "b")

    assert store.edges() == [Edge("b", "c"), Edge("a", "b")]


def test_clone_preserves_incoming_order_and_is_independent():
    store = _store_with("a", "b", "c")
    store.add_edge("c", "b")
    store.add_edge("a", "b")

    twin = store.clone()
    store.add_vertex("d", {"id": "d"})
    store.add_edge("d", "b")
    store.set_vertex("a", {"id": "a", "v": 2})

    assert twin.incoming("b") == ["c", "a"]
    assert twin.ids() == ["a", "b", "c"]
    assert twin.get_vertex("a") == {"id": "a"}
    assert store.incoming("b") == ["c", "a", "d"]
