"""
Graph subsystem for vertexgraph.

Defines the mutable graph and the pieces it is built from:
- identity-keyed vertex storage with ordered adjacency
- snapshot serialization and restoration
- structural diffing between graph snapshots
- leaf-first (dependency order) traversal
"""

from vertexgraph.graph.graph_schema import Edge
from vertexgraph.graph.graph_store import VertexStore
from vertexgraph.graph.graph_builder import GraphBuilder
from vertexgraph.graph.graph_query import GraphQueryEngine
from vertexgraph.graph.graph_diff import GraphDiffer
from vertexgraph.graph.graph_events import EventEmitter
from vertexgraph.graph.graph import Graph

__all__ = [
    "Edge",
    "VertexStore",
    "GraphBuilder",
    "GraphQueryEngine",
    "GraphDiffer",
    "EventEmitter",
    "Graph",
]
