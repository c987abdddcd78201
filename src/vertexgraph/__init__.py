"""
vertexgraph
===========

A directed-graph engine for application-defined vertices.

Core idea:
- Identify vertices by id for CRUD, and by content hash across processes.

Public API:
- Graph
- PersistentGraph
- GraphConfig
- PersistentGraphConfig
- sha1_hash
"""

from vertexgraph.config.settings import GraphConfig, PersistentGraphConfig
from vertexgraph.errors import GraphError, MissingId, DuplicateId, VertexNotFound
from vertexgraph.graph.graph import Graph
from vertexgraph.persistent.persistent_graph import PersistentGraph
from vertexgraph.hashing.sha1_hasher import sha1_hash

__all__ = [
    "Graph",
    "PersistentGraph",
    "GraphConfig",
    "PersistentGraphConfig",
    "GraphError",
    "MissingId",
    "DuplicateId",
    "VertexNotFound",
    "sha1_hash",
]

__version__ = "0.1.0"
