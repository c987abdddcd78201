from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, Iterable, Mapping, Tuple

from vertexgraph.errors import VertexNotFound
from vertexgraph.graph.graph_schema import EDGES, METADATA, VERTICES

if TYPE_CHECKING:
    from vertexgraph.graph.graph import Graph


class GraphBuilder:
    """
    Populates a graph from structured inputs and snapshots.

    Every insertion goes through the graph's own put/create_edge, so
    identity and endpoint checks apply to restored data as well.
    """

    def __init__(self, graph: "Graph") -> None:
        self.graph = graph

    def add_vertices(self, vertices: Iterable[Any]) -> None:
        for vertex in vertices:
            self.graph.put(vertex)

    def add_edges(self, edges: Iterable[Tuple[Any, Any]]) -> None:
        for source, target in edges:
            self.graph.create_edge(source, target)

    # ------------------------------------------------------------------
    # Snapshots
    # ------------------------------------------------------------------

    def load_serialization(self, serialized: Mapping[str, Any]) -> "Graph":
        """
        Inverse of Graph.serialize().
        """
        vertices: Dict[Any, Any] = dict(serialized.get(VERTICES, {}))
        self.add_vertices(vertices.values())

        for source_id, target_ids in serialized.get(EDGES, {}).items():
            self.add_edges(
                (self._resolve(vertices, source_id), self._resolve(vertices, t))
                for t in target_ids
            )

        if METADATA in serialized:
            self.graph.set_metadata(serialized[METADATA])

        logging.getLogger("vertexgraph.builder").info(
            "graph restored from serialization: vertices=%s edges=%s",
            self.graph.vertex_count(),
            self.graph.edge_count(),
        )
        return self.graph

    def load_hash_serialization(
        self,
        hashed: Mapping[str, Any],
        hashes_to_vertices: Mapping[str, Any],
    ) -> "Graph":
        """
        Inverse of Graph.hash_serialize(), given a hash -> vertex table.
        """
        self.add_vertices(
            self._resolve(hashes_to_vertices, digest)
            for digest in hashed.get(VERTICES, [])
        )

        for source_hash, target_hashes in hashed.get(EDGES, {}).items():
            source = self._resolve(hashes_to_vertices, source_hash)
            self.add_edges(
                (source, self._resolve(hashes_to_vertices, t))
                for t in target_hashes
            )

        if METADATA in hashed:
            self.graph.set_metadata(hashed[METADATA])

        logging.getLogger("vertexgraph.builder").info(
            "graph restored from hash serialization: vertices=%s edges=%s",
            self.graph.vertex_count(),
            self.graph.edge_count(),
        )
        return self.graph

    @staticmethod
    def _resolve(table: Mapping[Any, Any], key: Any) -> Any:
        if key not in table:
            raise VertexNotFound(key, f"no vertex for '{key}' in snapshot")
        return table[key]
