from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable

# Keys of the serialized and hash-serialized snapshot shapes
VERTICES = "vertices"
EDGES = "edges"
METADATA = "metadata"


@dataclass(frozen=True)
class Edge:
    """
    Directed relation between two vertex ids. Edges carry no payload.
    """

    source: Hashable
    target: Hashable
