from __future__ import annotations

import copy
import logging
from typing import (
    Any,
    Callable,
    Dict,
    Hashable,
    Iterator,
    List,
    Mapping,
    Optional,
    Tuple,
)

from vertexgraph.config.settings import GraphConfig
from vertexgraph.errors import DuplicateId, MissingId, VertexNotFound
from vertexgraph.graph.graph_builder import GraphBuilder
from vertexgraph.graph.graph_diff import GraphDiffer
from vertexgraph.graph.graph_events import (
    VERTEX_HASHED,
    DiffEvent,
    DiffListener,
    EventEmitter,
)
from vertexgraph.graph.graph_query import GraphQueryEngine
from vertexgraph.graph.graph_schema import EDGES, METADATA, VERTICES, Edge
from vertexgraph.graph.graph_store import VertexStore
from vertexgraph.hashing.sha1_hasher import sha1_hash
from vertexgraph.utils.records import read_id


class Graph:
    """
    Mutable directed graph of application-defined vertices.

    Vertices are keyed by the id the configured identity function
    derives from them. Every operation either completes or raises
    before touching any state.

    Vertex hashes are computed lazily and cached per vertex. While at
    least one "vertexHashed" listener is registered, put and replace
    hash eagerly so listeners observe every new vertex value.
    """

    def __init__(self, config: Optional[GraphConfig] = None) -> None:
        self.config = config or GraphConfig()
        self._store = VertexStore()
        self._query = GraphQueryEngine(self._store)
        self._events = EventEmitter((VERTEX_HASHED,))
        self._hashes: Dict[Hashable, str] = {}
        self._graph_hash: Optional[str] = None
        self._metadata: Any = None

    # ------------------------------------------------------------------
    # Vertices
    # ------------------------------------------------------------------

    def put(self, vertex: Any) -> None:
        vertex_id = self._vertex_id(vertex)
        if vertex_id in self._store:
            raise DuplicateId(vertex_id)

        digest = self._eager_digest(vertex)
        self._store.add_vertex(vertex_id, vertex)
        self._invalidate(vertex_id)
        if digest is not None:
            self._record_hash(vertex_id, vertex, digest)

        logging.getLogger("vertexgraph.graph").debug("put vertex id=%s", vertex_id)

    def get(self, vertex_id: Hashable) -> Any:
        return self._store.get_vertex(vertex_id)

    def replace(self, vertex: Any) -> None:
        vertex_id = self._vertex_id(vertex)
        if vertex_id not in self._store:
            raise VertexNotFound(vertex_id)

        digest = self._eager_digest(vertex)
        self._store.set_vertex(vertex_id, vertex)
        self._invalidate(vertex_id)
        if digest is not None:
            self._record_hash(vertex_id, vertex, digest)

        logging.getLogger("vertexgraph.graph").debug(
            "replaced vertex id=%s", vertex_id
        )

    def remove(self, vertex: Any) -> None:
        vertex_id = self._vertex_id(vertex)
        if vertex_id not in self._store:
            raise VertexNotFound(vertex_id)

        self._store.remove_vertex(vertex_id)
        self._invalidate(vertex_id)

        logging.getLogger("vertexgraph.graph").debug(
            "removed vertex id=%s", vertex_id
        )

    def get_by_property(self, key: str, value: Any) -> Any:
        return self._query.find_by_property(key, value)

    def vertices(self) -> List[Any]:
        return self._store.vertices()

    def items(self) -> Iterator[Tuple[Hashable, Any]]:
        """
        (id, vertex) pairs in insertion order.
        """
        return self._store.items()

    def vertex_count(self) -> int:
        return len(self._store)

    def __len__(self) -> int:
        return len(self._store)

    def __contains__(self, vertex_id: Hashable) -> bool:
        return vertex_id in self._store

    # ------------------------------------------------------------------
    # Edges
    # ------------------------------------------------------------------

    def create_edge(self, source: Any, target: Any) -> None:
        source_id = self._endpoint_id(source)
        target_id = self._endpoint_id(target)

        if self._store.add_edge(source_id, target_id):
            self._invalidate()
            logging.getLogger("vertexgraph.graph").debug(
                "created edge %s -> %s", source_id, target_id
            )

    def remove_edge(self, source: Any, target: Any) -> None:
        source_id = self._lenient_id(source)
        target_id = self._lenient_id(target)

        if self._store.remove_edge(source_id, target_id):
            self._invalidate()
            logging.getLogger("vertexgraph.graph").debug(
                "removed edge %s -> %s", source_id, target_id
            )

    def has_edge(self, source: Any, target: Any) -> bool:
        return self._store.has_edge(
            self._lenient_id(source),
            self._lenient_id(target),
        )

    def get_outgoing(self, vertex: Any) -> List[Any]:
        ids = self._store.outgoing(self._lenient_id(vertex))
        return [self._store.get_vertex(i) for i in ids]

    def get_incoming(self, vertex: Any) -> List[Any]:
        ids = self._store.incoming(self._lenient_id(vertex))
        return [self._store.get_vertex(i) for i in ids]

    def edges(self) -> List[Edge]:
        return self._store.edges()

    def edge_count(self) -> int:
        return self._store.edge_count()

    # ------------------------------------------------------------------
    # Metadata
    # ------------------------------------------------------------------

    @property
    def metadata(self) -> Any:
        return self._metadata

    @metadata.setter
    def metadata(self, value: Any) -> None:
        self.set_metadata(value)

    def set_metadata(self, value: Any) -> None:
        self._metadata = value
        self._invalidate()

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def on(self, event: str, listener: Callable[..., None]) -> None:
        self._events.on(event, listener)

    def off(self, event: str, listener: Callable[..., None]) -> None:
        self._events.off(event, listener)

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def serialize(self) -> Dict[str, Any]:
        """
        Id-keyed snapshot of the serializable part of the graph.

        Shape: {"vertices": {id: vertex}, "edges": {id: [target_id]},
        "metadata": ...}; metadata is omitted while unset.
        """
        included = self._serializable_ids()
        allowed = set(included)

        vertices = {
            vertex_id: self._strip(self._store.get_vertex(vertex_id))
            for vertex_id in included
        }
        edges: Dict[Hashable, List[Hashable]] = {}
        for vertex_id in included:
            targets = [t for t in self._store.outgoing(vertex_id) if t in allowed]
            if targets:
                edges[vertex_id] = targets

        return self._snapshot(vertices, edges)

    def hash_serialize(self) -> Dict[str, Any]:
        """
        Hash-keyed snapshot: vertices become their content hashes.

        Shape: {"vertices": [hash], "edges": {hash: [hash]},
        "metadata": ...}.
        """
        included = self._serializable_ids()
        hashes = {vertex_id: self._vertex_hash(vertex_id) for vertex_id in included}

        edges: Dict[str, List[str]] = {}
        for vertex_id in included:
            targets = [
                hashes[t] for t in self._store.outgoing(vertex_id) if t in hashes
            ]
            if targets:
                edges[hashes[vertex_id]] = targets

        return self._snapshot([hashes[i] for i in included], edges)

    @classmethod
    def from_serialization(
        cls,
        serialized: Mapping[str, Any],
        config: Optional[GraphConfig] = None,
    ) -> "Graph":
        return GraphBuilder(cls(config)).load_serialization(serialized)

    @classmethod
    def from_hash_serialization(
        cls,
        hashed: Mapping[str, Any],
        hashes_to_vertices: Mapping[str, Any],
        config: Optional[GraphConfig] = None,
    ) -> "Graph":
        return GraphBuilder(cls(config)).load_hash_serialization(
            hashed,
            hashes_to_vertices,
        )

    def get_hash(self) -> str:
        """
        Hash of the serialized graph, memoized until the next mutation.
        """
        if self._graph_hash is None:
            self._graph_hash = self._hash_fn(self.serialize())
        return self._graph_hash

    # ------------------------------------------------------------------
    # Copies, diffs, traversal
    # ------------------------------------------------------------------

    def clone(self) -> "Graph":
        twin = type(self)(self.config)
        twin._store = self._store.clone()
        twin._query = GraphQueryEngine(twin._store)
        twin._hashes = dict(self._hashes)
        twin._graph_hash = self._graph_hash
        twin._metadata = copy.copy(self._metadata)
        return twin

    def diff_from(
        self,
        other: "Graph",
        listener: Optional[DiffListener] = None,
    ) -> List[DiffEvent]:
        """
        Events that turn `other` into this graph, passed to listener
        one at a time and returned as a list.
        """
        return GraphDiffer(current=self, base=other).diff(listener)

    def leaf_first_search(self, visit_fn: Callable[[Any], None]) -> None:
        self._query.leaf_first_search(visit_fn)

    def leaf_first_order(self) -> List[Any]:
        return [self._store.get_vertex(i) for i in self._query.leaf_first_ids()]

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _vertex_id(self, vertex: Any) -> Hashable:
        if self.config.id_fn is not None:
            return self.config.id_fn(vertex)
        return read_id(vertex, self.config.id_key)

    def _lenient_id(self, vertex: Any) -> Optional[Hashable]:
        try:
            return self._vertex_id(vertex)
        except MissingId:
            return None

    def _endpoint_id(self, vertex: Any) -> Hashable:
        vertex_id = self._lenient_id(vertex)
        if vertex_id is None or vertex_id not in self._store:
            raise VertexNotFound(vertex_id)
        return vertex_id

    @property
    def _hash_fn(self) -> Callable[[Any], str]:
        return self.config.hash_fn or sha1_hash

    def _strip(self, vertex: Any) -> Any:
        if self.config.strip_fn is None:
            return vertex
        return self.config.strip_fn(vertex)

    def _digest(self, vertex: Any) -> str:
        return self._hash_fn(self._strip(vertex))

    def _eager_digest(self, vertex: Any) -> Optional[str]:
        if not self._events.has_listeners(VERTEX_HASHED):
            return None
        return self._digest(vertex)

    def _vertex_hash(self, vertex_id: Hashable) -> str:
        cached = self._hashes.get(vertex_id)
        if cached is not None:
            return cached
        vertex = self._store.get_vertex(vertex_id)
        digest = self._digest(vertex)
        self._record_hash(vertex_id, vertex, digest)
        return digest

    def _record_hash(self, vertex_id: Hashable, vertex: Any, digest: str) -> None:
        self._hashes[vertex_id] = digest
        self._events.emit(VERTEX_HASHED, digest, vertex)

    def _invalidate(self, vertex_id: Optional[Hashable] = None) -> None:
        if vertex_id is not None:
            self._hashes.pop(vertex_id, None)
        self._graph_hash = None

    def _serializable_ids(self) -> List[Hashable]:
        keep = self.config.serializable_fn
        return [
            vertex_id
            for vertex_id, vertex in self._store.items()
            if keep is None or keep(vertex)
        ]

    def _snapshot(self, vertices: Any, edges: Dict[Any, List[Any]]) -> Dict[str, Any]:
        snapshot: Dict[str, Any] = {VERTICES: vertices, EDGES: edges}
        if self._metadata is not None:
            snapshot[METADATA] = self._metadata
        return snapshot
