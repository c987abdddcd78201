from __future__ import annotations

import logging
from typing import Any, Hashable, List, Optional

from pyrsistent import PMap, PVector, pmap, pvector

from vertexgraph.config.settings import PersistentGraphConfig
from vertexgraph.errors import MissingId, VertexNotFound
from vertexgraph.utils.records import read_property


def _attach(adjacency: PMap, key: Hashable, member: Hashable) -> PMap:
    return adjacency.set(key, adjacency.get(key, pvector()).append(member))


def _detach(adjacency: PMap, key: Hashable, member: Hashable) -> PMap:
    members: Optional[PVector] = adjacency.get(key)
    if members is None or member not in members:
        return adjacency
    remaining = members.remove(member)
    if not remaining:
        return adjacency.discard(key)
    return adjacency.set(key, remaining)


class PersistentGraph:
    """
    Immutable directed graph built on structurally shared maps.

    Every mutating operation returns a new graph value; the receiver and
    every previously returned value stay valid, unchanged snapshots.
    Maps a mutation does not touch are shared by reference between the
    old and the new value.
    """

    def __init__(
        self,
        config: Optional[PersistentGraphConfig] = None,
        *,
        vertices: Optional[PMap] = None,
        outgoing: Optional[PMap] = None,
        incoming: Optional[PMap] = None,
    ) -> None:
        self.config = config or PersistentGraphConfig()
        self._vertices: PMap = vertices if vertices is not None else pmap()
        self._outgoing: PMap = outgoing if outgoing is not None else pmap()
        self._incoming: PMap = incoming if incoming is not None else pmap()

    # ------------------------------------------------------------------
    # Vertices
    # ------------------------------------------------------------------

    def put(self, vertex: Any) -> "PersistentGraph":
        vertex_id = self._vertex_id(vertex)
        logging.getLogger("vertexgraph.persistent").debug(
            "put vertex id=%s", vertex_id
        )
        return self._derive(vertices=self._vertices.set(vertex_id, vertex))

    def get(self, vertex_id: Hashable) -> Any:
        return self._vertices.get(vertex_id)

    def replace(self, vertex: Any) -> "PersistentGraph":
        vertex_id = self._vertex_id(vertex)
        if vertex_id not in self._vertices:
            raise VertexNotFound(vertex_id, "vertex not in graph")

        return self._derive(vertices=self._vertices.set(vertex_id, vertex))

    def remove(self, vertex: Any) -> "PersistentGraph":
        vertex_id = self._vertex_id(vertex)
        if vertex_id not in self._vertices:
            raise VertexNotFound(vertex_id, "vertex not in graph")

        outgoing = self._outgoing
        incoming = self._incoming
        for target in self._outgoing.get(vertex_id, pvector()):
            incoming = _detach(incoming, target, vertex_id)
        for source in self._incoming.get(vertex_id, pvector()):
            outgoing = _detach(outgoing, source, vertex_id)

        logging.getLogger("vertexgraph.persistent").debug(
            "removed vertex id=%s", vertex_id
        )
        return self._derive(
            vertices=self._vertices.discard(vertex_id),
            outgoing=outgoing.discard(vertex_id),
            incoming=incoming.discard(vertex_id),
        )

    def vertices(self) -> List[Any]:
        return list(self._vertices.values())

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, vertex_id: Hashable) -> bool:
        return vertex_id in self._vertices

    # ------------------------------------------------------------------
    # Edges
    # ------------------------------------------------------------------

    def create_edge(self, source: Any, target: Any) -> "PersistentGraph":
        source_id = self._endpoint_id(source)
        target_id = self._endpoint_id(target)
        if self._has_edge(source_id, target_id):
            return self

        return self._derive(
            outgoing=_attach(self._outgoing, source_id, target_id),
            incoming=_attach(self._incoming, target_id, source_id),
        )

    def remove_edge(self, source: Any, target: Any) -> "PersistentGraph":
        source_id = self._lenient_id(source)
        target_id = self._lenient_id(target)
        if not self._has_edge(source_id, target_id):
            return self

        return self._derive(
            outgoing=_detach(self._outgoing, source_id, target_id),
            incoming=_detach(self._incoming, target_id, source_id),
        )

    def has_edge(self, source: Any, target: Any) -> bool:
        return self._has_edge(self._lenient_id(source), self._lenient_id(target))

    def get_outgoing(self, vertex: Any) -> List[Any]:
        ids = self._outgoing.get(self._lenient_id(vertex), pvector())
        return [self._vertices[i] for i in ids]

    def get_incoming(self, vertex: Any) -> List[Any]:
        ids = self._incoming.get(self._lenient_id(vertex), pvector())
        return [self._vertices[i] for i in ids]

    # ------------------------------------------------------------------
    # Shared structure
    # ------------------------------------------------------------------

    @property
    def vertex_map(self) -> PMap:
        return self._vertices

    @property
    def outgoing_map(self) -> PMap:
        return self._outgoing

    @property
    def incoming_map(self) -> PMap:
        return self._incoming

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _derive(
        self,
        *,
        vertices: Optional[PMap] = None,
        outgoing: Optional[PMap] = None,
        incoming: Optional[PMap] = None,
    ) -> "PersistentGraph":
        return PersistentGraph(
            self.config,
            vertices=self._vertices if vertices is None else vertices,
            outgoing=self._outgoing if outgoing is None else outgoing,
            incoming=self._incoming if incoming is None else incoming,
        )

    def _vertex_id(self, vertex: Any) -> Hashable:
        if self.config.id_fn is not None:
            return self.config.id_fn(vertex)
        vertex_id = read_property(vertex, self.config.id_key)
        if vertex_id is None:
            raise MissingId()
        return vertex_id

    def _lenient_id(self, vertex: Any) -> Optional[Hashable]:
        try:
            return self._vertex_id(vertex)
        except MissingId:
            return None

    def _endpoint_id(self, vertex: Any) -> Hashable:
        vertex_id = self._lenient_id(vertex)
        if vertex_id is None or vertex_id not in self._vertices:
            raise VertexNotFound(vertex_id)
        return vertex_id

    def _has_edge(self, source_id: Any, target_id: Any) -> bool:
        return target_id in self._outgoing.get(source_id, pvector())
