from __future__ import annotations

from typing import Any, Hashable


class GraphError(Exception):
    """
    Base class for every error raised by vertexgraph.
    """


class MissingId(GraphError):
    """
    The identity function could not determine an id for a vertex.
    """

    def __init__(self, message: str = "no id can be determined for object") -> None:
        super().__init__(message)
        self.vertex_id = None


class DuplicateId(GraphError):
    """
    A vertex with the same id is already stored in the graph.
    """

    def __init__(self, vertex_id: Hashable) -> None:
        super().__init__(f"object with id '{vertex_id}' already in graph")
        self.vertex_id = vertex_id


class VertexNotFound(GraphError):
    """
    An operation referenced an id that is not currently in the graph.
    """

    def __init__(self, vertex_id: Any, message: str | None = None) -> None:
        super().__init__(message or f"no object '{vertex_id}' in graph")
        self.vertex_id = vertex_id
