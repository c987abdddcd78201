from __future__ import annotations

from typing import Any, Callable, Hashable, List

import networkx as nx

from vertexgraph.graph.graph_store import VertexStore
from vertexgraph.utils.records import read_property

_MISSING = object()


class GraphQueryEngine:
    """
    Read-only lookups and traversals over a vertex store.
    """

    def __init__(self, store: VertexStore) -> None:
        self.store = store

    def find_by_property(self, key: str, value: Any) -> Any:
        """
        First vertex, in insertion order, whose property equals value.
        """
        for _, vertex in self.store.items():
            if read_property(vertex, key, _MISSING) == value:
                return vertex
        return None

    def leaf_first_ids(self) -> List[Hashable]:
        """
        Post-order over the outgoing relation.

        Roots are taken in vertex insertion order and neighbors in edge
        insertion order. A vertex is marked visited when it is discovered,
        so an edge back to a vertex still on the stack is skipped.
        """
        return list(nx.dfs_postorder_nodes(self.store.digraph))

    def leaf_first_search(self, visit_fn: Callable[[Any], None]) -> None:
        for vertex_id in self.leaf_first_ids():
            visit_fn(self.store.get_vertex(vertex_id))
