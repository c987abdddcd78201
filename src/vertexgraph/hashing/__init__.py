"""
Content hashing for vertexgraph.

Vertices are canonicalized (mapping keys sorted recursively) before
being digested, so a vertex hash is a stable identity that survives
process boundaries and key reordering.
"""

from vertexgraph.hashing.canonical import normalize, canonical_json
from vertexgraph.hashing.sha1_hasher import sha1_hash

__all__ = [
    "normalize",
    "canonical_json",
    "sha1_hash",
]
