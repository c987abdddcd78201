from vertexgraph.graph.graph import Graph


def _leaf_first(graph):
    sequence = []
    graph.leaf_first_search(lambda vertex: sequence.append(vertex["id"]))
    return sequence


def test_leaf_first_search(graph):
    a, b, c = {"id": "a"}, {"id": "b"}, {"id": "c"}
    x, y, z = {"id": "x"}, {"id": "y"}, {"id": "z"}
    for v in (a, b, c, x, y, z):
        graph.put(v)
    graph.create_edge(a, b)
    graph.create_edge(b, c)
    graph.create_edge(x, y)

    assert _leaf_first(graph) == ["c", "b", "a", "y", "x", "z"]

    graph.create_edge(c, x)
    assert _leaf_first(graph) == ["y", "x", "c", "b", "a", "z"]

    graph.remove_edge(b, c)
    assert _leaf_first(graph) == ["b", "a", "y", "x", "c", "z"]


def test_leaf_first_search_survives_cycles(graph):
    a, b, c = {"id": "a"}, {"id": "b"}, {"id": "c"}
    for v in (a, b, c):
        graph.put(v)
    graph.create_edge(a, b)
    graph.create_edge(b, c)
    graph.create_edge(c, a)
    graph.create_edge(b, b)

    assert _leaf_first(graph) == ["c", "b", "a"]


def test_neighbors_are_visited_in_edge_insertion_order(graph):
    root, n1, n2, n3 = {"id": "root"}, {"id": "n1"}, {"id": "n2"}, {"id": "n3"}
    for v in (root, n1, n2, n3):
        graph.put(v)
    graph.create_edge(root, n3)
    graph.create_edge(root, n1)
    graph.create_edge(root, n2)

    assert _leaf_first(graph) == ["n3", "n1", "n2", "root"]
    assert graph.leaf_first_order() == [n3, n1, n2, root]


def test_empty_graph_visits_nothing():
    assert _leaf_first(Graph()) == []


def test_deep_chains_do_not_hit_the_recursion_limit(graph):
    chain = [{"id": i} for i in range(5000)]
    for v in chain:
        graph.put(v)
    for parent, child in zip(chain, chain[1:]):
        graph.create_edge(parent, child)

    order = graph.leaf_first_order()

    assert order[0] == chain[-1]
    assert order[-1] == chain[0]
    assert len(order) == len(chain)
