"""
Persistent (immutable) graphs for vertexgraph.

Each mutation yields a new graph value sharing unchanged structure with
its predecessor, so past states can be kept and handed to readers
without copying or locking.
"""

from vertexgraph.persistent.persistent_graph import PersistentGraph

__all__ = [
    "PersistentGraph",
]
