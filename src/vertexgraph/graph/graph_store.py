from __future__ import annotations

from itertools import count
from typing import Any, Hashable, Iterator, List, Tuple

import networkx as nx

from vertexgraph.graph.graph_schema import Edge


class VertexStore:
    """
    Identity-keyed vertex map with ordered adjacency in both directions.

    Vertices live on the node attribute "data"; every edge carries a
    monotonically increasing "seq" so that insertion order can be
    replayed when the store is cloned.
    """

    def __init__(self) -> None:
        self._graph = nx.DiGraph()
        self._seq = count()

    # -------------------- Vertices --------------------

    def __contains__(self, vertex_id: Hashable) -> bool:
        return vertex_id in self._graph

    def __len__(self) -> int:
        return self._graph.number_of_nodes()

    def add_vertex(self, vertex_id: Hashable, vertex: Any) -> None:
        self._graph.add_node(vertex_id, data=vertex)

    def set_vertex(self, vertex_id: Hashable, vertex: Any) -> None:
        self._graph.nodes[vertex_id]["data"] = vertex

    def get_vertex(self, vertex_id: Hashable) -> Any:
        if vertex_id not in self._graph:
            return None
        return self._graph.nodes[vertex_id]["data"]

    def remove_vertex(self, vertex_id: Hashable) -> None:
        # networkx drops incident edges in both directions
        self._graph.remove_node(vertex_id)

    def ids(self) -> List[Hashable]:
        return list(self._graph.nodes)

    def items(self) -> Iterator[Tuple[Hashable, Any]]:
        for vertex_id, data in self._graph.nodes(data="data"):
            yield vertex_id, data

    def vertices(self) -> List[Any]:
        return [data for _, data in self.items()]

    # -------------------- Edges --------------------

    def add_edge(self, source: Hashable, target: Hashable) -> bool:
        if self._graph.has_edge(source, target):
            return False
        self._graph.add_edge(source, target, seq=next(self._seq))
        return True

    def remove_edge(self, source: Hashable, target: Hashable) -> bool:
        if not self._graph.has_edge(source, target):
            return False
        self._graph.remove_edge(source, target)
        return True

    def has_edge(self, source: Hashable, target: Hashable) -> bool:
        return self._graph.has_edge(source, target)

    def edges(self) -> List[Edge]:
        ordered = sorted(
            self._graph.edges(data="seq"),
            key=lambda edge: edge[2],
        )
        return [Edge(source=u, target=v) for u, v, _ in ordered]

    def edge_count(self) -> int:
        return self._graph.number_of_edges()

    # -------------------- Adjacency --------------------

    def outgoing(self, vertex_id: Hashable) -> List[Hashable]:
        if vertex_id not in self._graph:
            return []
        return list(self._graph.successors(vertex_id))

    def incoming(self, vertex_id: Hashable) -> List[Hashable]:
        if vertex_id not in self._graph:
            return []
        return list(self._graph.predecessors(vertex_id))

    @property
    def digraph(self) -> nx.DiGraph:
        return self._graph

    # -------------------- Cloning --------------------

    def clone(self) -> "VertexStore":
        """
        Copy with fresh adjacency; vertex values are shared.

        Edges are re-added in the order they were created, which
        reproduces both the outgoing and the incoming ordering.
        """
        store = VertexStore()
        store._graph.add_nodes_from(self._graph.nodes(data=True))
        for edge in self.edges():
            store.add_edge(edge.source, edge.target)
        return store
